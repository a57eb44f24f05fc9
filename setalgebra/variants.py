import numbers
import operator

from .checks import element_checks_enabled
from .interface import Interface, ElementTypeMismatch

__all__ = ["MapSet", "StringSet", "IntSet", "SequenceSet", "StringListSet"]


def _check_element(s, x):
    if element_checks_enabled() and not s._sa_accepts(x):
        raise ElementTypeMismatch("{} elements must be of type {}, got {}".format(
            type(s).__name__, s.element_type.__name__, type(x).__name__))


def _unsupported(s, method):
    raise TypeError("'{}' object does not support {}(), use add()".format(
        s.__name__ if isinstance(s, type) else type(s).__name__, method))


class MapSet(Interface, dict):
    """A set storing its elements as the keys of a dict.

    Subclasses set `element_type` to the type of their elements. The dict
    methods that would store arbitrary keys or values are not available:
    elements are inserted with :meth:`add` or :meth:`update`.

    Args:
        iterable: An iterable with which to initialise the set elements.

    """
    element_type = object

    def __init__(self, iterable=()):
        dict.__init__(self)
        for x in iterable:
            self.add(x)

    @classmethod
    def _sa_accepts(cls, x):
        return isinstance(x, cls.element_type)

    def __contains__(self, x):
        _check_element(self, x)
        return dict.__contains__(self, x)

    def add(self, x):
        _check_element(self, x)
        dict.__setitem__(self, x, True)

    def discard(self, x):
        _check_element(self, x)
        self.pop(x, None)

    def update(self, *others):
        """Insert the elements of each of `others` into this set.

        Iterating a mapping yields its keys, so `others` may be dicts. Nothing
        is inserted unless every element is of the element type of the set.

        """
        items = [x for other in others for x in other]
        for x in items:
            _check_element(self, x)
        for x in items:
            self.add(x)

    def __setitem__(self, key, value):
        _unsupported(self, "__setitem__")

    def setdefault(self, key, default=None):
        _unsupported(self, "setdefault")

    @classmethod
    def fromkeys(cls, iterable, value=None):
        _unsupported(cls, "fromkeys")

    def __reduce__(self):
        return type(self), (list(self),)


class StringSet(MapSet):
    """A set of strings."""
    element_type = str


class IntSet(MapSet):
    """A set of integers.

    Accepts any integral value except bool, and stores it as a plain int.

    """
    element_type = numbers.Integral

    @classmethod
    def _sa_accepts(cls, x):
        return isinstance(x, numbers.Integral) and not isinstance(x, bool)

    def add(self, x):
        _check_element(self, x)
        dict.__setitem__(self, operator.index(x), True)


class SequenceSet(Interface, list):
    """A set storing its elements in a list, in insertion order.

    Membership tests are linear in the size of the set. `append`, `extend`
    and ``+=`` insert through :meth:`add`; the list methods placing items at
    a given position are not available.

    Args:
        iterable: An iterable with which to initialise the set elements.

    """
    element_type = object

    def __init__(self, iterable=()):
        list.__init__(self)
        for x in iterable:
            self.add(x)

    @classmethod
    def _sa_accepts(cls, x):
        return isinstance(x, cls.element_type)

    def __contains__(self, x):
        _check_element(self, x)
        return list.__contains__(self, x)

    def add(self, x):
        _check_element(self, x)
        if not list.__contains__(self, x):
            list.append(self, x)

    def discard(self, x):
        _check_element(self, x)
        if list.__contains__(self, x):
            list.remove(self, x)

    def append(self, x):
        self.add(x)

    def extend(self, iterable):
        items = list(iterable)
        for x in items:
            _check_element(self, x)
        for x in items:
            self.add(x)

    def __iadd__(self, iterable):
        self.extend(iterable)
        return self

    def insert(self, index, x):
        _unsupported(self, "insert")

    def __setitem__(self, index, x):
        _unsupported(self, "__setitem__")

    def __imul__(self, n):
        _unsupported(self, "__imul__")


class StringListSet(SequenceSet):
    """A set of strings backed by a list."""
    element_type = str
