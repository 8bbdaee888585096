import pytest

from containerkit.errors import ValueNotFoundError
from containerkit.linkedlist import LinkedList
from containerkit.listzip import ListZipIterator


@pytest.fixture
def lists():
    return LinkedList(["a", "b", "c", "d"]), LinkedList(["e", "f", "g"])


def test_next_stops_at_shorter_list(lists):
    l1, l2 = lists
    pairs = list(ListZipIterator(l1, l2))
    assert pairs == [("a", "e"), ("b", "f"), ("c", "g")]


def test_index_tracks_last_pair(lists):
    l1, l2 = lists
    zip_iter = ListZipIterator(l1, l2)
    next(zip_iter)
    next(zip_iter)
    assert zip_iter.index() == 1


def test_add_inserts_after_current_pair(lists):
    l1, l2 = lists
    zip_iter = ListZipIterator(l1, l2)
    for e1, _ in zip_iter:
        if e1 == "b":
            zip_iter.add("h", "i")
    assert list(l1) == ["a", "b", "h", "c", "d"]
    assert list(l2) == ["e", "f", "i", "g"]
    assert l1.index_of("h") == 2
    assert l2.index_of("i") == 2
    assert l1.index_of("c") == 3
    assert len(l1) == 5
    assert len(l2) == 4


def test_added_pair_is_not_visited(lists):
    l1, l2 = lists
    zip_iter = ListZipIterator(l1, l2)
    seen = []
    for e1, e2 in zip_iter:
        seen.append((e1, e2))
        if e1 == "b":
            zip_iter.add("h", "i")
    assert seen == [("a", "e"), ("b", "f"), ("c", "g")]


def test_add_at_end_updates_tail(lists):
    l1, l2 = lists
    zip_iter = ListZipIterator(l1, l2)
    for _, e2 in zip_iter:
        if e2 == "g":
            zip_iter.add("x", "y")
    assert l2.last() == "y"
    assert l1.last() == "d"
    assert list(reversed(l2)) == ["y", "g", "f", "e"]
    assert list(l1) == ["a", "b", "c", "x", "d"]


def test_remove_returns_removed_pair(lists):
    l1, l2 = lists
    zip_iter = ListZipIterator(l1, l2)
    removed = None
    for e1, _ in zip_iter:
        if e1 == "b":
            removed = zip_iter.remove()
    assert removed == ("b", "f")
    assert l1.contains_value("b") == 0
    assert l2.contains_value("f") == 0
    assert len(l1) == 3
    assert len(l2) == 2


def test_remove_can_empty_second_list(lists):
    l1, l2 = lists
    zip_iter = ListZipIterator(l1, l2)
    for e1, _ in zip_iter:
        if e1 == "b":
            zip_iter.remove()
    zip_iter = ListZipIterator(l1, l2)
    for _, e2 in zip_iter:
        if e2 in ("e", "g"):
            zip_iter.remove()
    with pytest.raises(ValueNotFoundError):
        l2.first()
    with pytest.raises(ValueNotFoundError):
        l2.last()
    assert l1.first() == "d"
    assert l1.last() == "d"


def test_consecutive_removes():
    l1 = LinkedList(["a", "b", "c", "d"])
    l2 = LinkedList(["a", "b", "c", "d"])
    zip_iter = ListZipIterator(l1, l2)
    for e1, _ in zip_iter:
        if e1 in ("b", "c"):
            zip_iter.remove()
    assert list(l1) == ["a", "d"]
    assert list(l2) == ["a", "d"]


def test_remove_twice_raises(lists):
    l1, l2 = lists
    zip_iter = ListZipIterator(l1, l2)
    next(zip_iter)
    zip_iter.remove()
    with pytest.raises(ValueNotFoundError):
        zip_iter.remove()


def test_operations_before_next_raise(lists):
    l1, l2 = lists
    zip_iter = ListZipIterator(l1, l2)
    with pytest.raises(ValueNotFoundError):
        zip_iter.remove()
    with pytest.raises(ValueNotFoundError):
        zip_iter.replace("h", "i")
    with pytest.raises(ValueNotFoundError):
        zip_iter.add("h", "i")
    assert list(l1) == ["a", "b", "c", "d"]


def test_replace_swaps_pair(lists):
    l1, l2 = lists
    zip_iter = ListZipIterator(l1, l2)
    old = None
    for e1, _ in zip_iter:
        if e1 == "b":
            old = zip_iter.replace("h", "i")
    assert old == ("b", "f")
    assert l1.index_of("h") == 1
    assert l2.index_of("i") == 1
    assert l1.contains_value("h") == 1
    assert l2.contains_value("i") == 1


def test_empty_list_yields_nothing():
    zip_iter = ListZipIterator(LinkedList(), LinkedList(["e"]))
    assert next(zip_iter, "exhausted") == "exhausted"
    assert list(ListZipIterator(LinkedList(["a"]), LinkedList())) == []