import pytest

from containerkit.errors import OutOfRangeError
from containerkit.queue import Queue, QueueIterator, QueueZipIterator


def test_poll_returns_elements_in_enqueue_order():
    q = Queue()
    for item in ["a", "b", "c"]:
        q.enqueue(item)
    assert [q.poll(), q.poll(), q.poll()] == ["a", "b", "c"]
    assert len(q) == 0


def test_constructor_enqueues_iterable():
    q = Queue([1, 2, 3])
    assert len(q) == 3
    assert q.peek() == 1


def test_peek_does_not_remove():
    q = Queue(["x", "y"])
    assert q.peek() == "x"
    assert q.peek() == "x"
    assert len(q) == 2


def test_peek_empty_raises():
    with pytest.raises(OutOfRangeError):
        Queue().peek()


def test_poll_empty_raises():
    q = Queue(["only"])
    assert q.poll() == "only"
    with pytest.raises(OutOfRangeError):
        q.poll()


def test_iteration_is_newest_first():
    items = [1, 2, 3, 4]
    q = Queue(items)
    assert list(q) == list(reversed(items))


def test_foreach_visits_every_element():
    items = ["p", "q", "r"]
    q = Queue(items)
    seen = []
    q.foreach(seen.append)
    assert seen == list(q)
    assert sorted(seen) == sorted(items)


def test_iterator_yields_same_as_iter():
    q = Queue([5, 6, 7])
    assert list(QueueIterator(q)) == list(q)


def test_iterator_replace_changes_queue():
    q = Queue(["a", "b", "c"])
    it = QueueIterator(q)
    for element in it:
        if element == "b":
            assert it.replace("z") == "b"
    assert len(q) == 3
    assert [q.poll(), q.poll(), q.poll()] == ["a", "z", "c"]


def test_iterator_replace_before_next_raises():
    it = QueueIterator(Queue([1]))
    with pytest.raises(OutOfRangeError):
        it.replace(2)


def test_zip_iterator_stops_at_shorter_queue():
    q1 = Queue(["a", "b", "c", "d"])
    q2 = Queue(["e", "f", "g"])
    pairs = list(QueueZipIterator(q1, q2))
    assert len(pairs) == 3
    assert pairs == list(zip(q1, q2))


def test_zip_iterator_replace():
    q1 = Queue(["a", "b"])
    q2 = Queue(["c", "d"])
    it = QueueZipIterator(q1, q2)
    for e1, e2 in it:
        if e1 == "a":
            assert it.replace("h", "i") == ("a", "c")
    assert q1.poll() == "h"
    assert q2.poll() == "i"
    assert q1.poll() == "b"
    assert q2.poll() == "d"


def test_zip_iterator_replace_before_next_raises():
    it = QueueZipIterator(Queue([1]), Queue([2]))
    with pytest.raises(OutOfRangeError):
        it.replace(3, 4)


def test_zip_iterator_empty_queue_yields_nothing():
    assert list(QueueZipIterator(Queue(), Queue([1, 2]))) == []