"""Exceptions raised by the containers in this package."""


class CollectionError(Exception):
    """Base class for every container error."""


class InvalidCapacityError(CollectionError, ValueError):
    """A requested capacity or expansion factor cannot be used."""


class InvalidRangeError(CollectionError, ValueError):
    """A pair of bounds does not describe a valid range."""


class MaxCapacityError(CollectionError, OverflowError):
    """A container is already at its largest possible capacity."""


class ValueNotFoundError(CollectionError, LookupError):
    """The requested value is not present in the container."""


class OutOfRangeError(CollectionError, IndexError):
    """An index lies outside the container, or the container is empty."""