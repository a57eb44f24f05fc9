from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterator


class ElementTypeMismatch(TypeError):
    pass


class Interface(ABC):
    """Base class for set types usable with the set algebra routines.

    A set type is a concrete variant: a storage strategy (a key-presence
    mapping, an append-only sequence or a fixed-shape aggregate) bound to a
    single element type. Besides :meth:`add` and :meth:`discard`, every
    variant must support ``len(s)``, ``x in s`` and ``iter(s)``. These are
    usually inherited from the backing storage and are not defined here, so
    that `Interface` can come first among the bases without shadowing
    ``dict.__len__`` and friends.

    The algebra routines require both operands to be of the same concrete
    type, and return a new set of that type.

    """

    @abstractmethod
    def add(self, x: Hashable) -> None:
        """Insert `x` into the set.

        Inserting an element that is already present leaves the set unchanged.

        Args:
            x: The element to insert.

        Raises:
            ElementTypeMismatch: If `x` is not of the element type of the set.

        """
        raise NotImplementedError

    @abstractmethod
    def discard(self, x: Hashable) -> None:
        """Remove `x` from the set if it is present.

        Removing an absent element is a no-op.

        Args:
            x: The element to remove.

        Raises:
            ElementTypeMismatch: If `x` is not of the element type of the set.

        """
        raise NotImplementedError

    def elements(self) -> Iterator:
        """Return a generator producing all of the elements in the set.

        The order is unspecified. Each call returns a fresh, single-pass
        generator reflecting the state of the set at the time of the call.
        Modifying the set with :meth:`add` or :meth:`discard` is forbidden
        until the generator is exhausted, otherwise the result is undefined.

        """
        yield from iter(self)

    def values(self) -> Iterator:
        """Same as :meth:`elements`. Map-backed sets yield their keys, not the presence markers."""
        return self.elements()

    def copy(self):
        """Return a shallow copy of this set, of the same type."""
        from .checks import stop_element_checks
        from .construct import new_set

        ret = new_set(self, capacity=len(self))
        with stop_element_checks():
            for x in self.elements():
                ret.add(x)
        return ret

    def __or__(self, other):
        from .algebra import union
        if not isinstance(other, Interface):
            return NotImplemented
        return union(self, other)

    def __and__(self, other):
        from .algebra import intersection
        if not isinstance(other, Interface):
            return NotImplemented
        return intersection(self, other)

    def __sub__(self, other):
        from .algebra import difference
        if not isinstance(other, Interface):
            return NotImplemented
        return difference(self, other)

    def __xor__(self, other):
        from .algebra import symmetric_difference
        if not isinstance(other, Interface):
            return NotImplemented
        return symmetric_difference(self, other)

    def __ior__(self, other):
        from .construct import check_variants
        if not isinstance(other, Interface):
            return NotImplemented
        check_variants(self, other)
        for x in list(other.elements()):
            self.add(x)
        return self

    def __eq__(self, other):
        from .construct import same_variant
        if type(other) is not type(self):
            return NotImplemented
        if not same_variant(self, other):
            return False
        if len(self) != len(other):
            return False
        return all(x in other for x in self.elements())

    def __ne__(self, other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    __hash__ = None

    def __repr__(self):
        return "{}({{{}}})".format(type(self).__name__,
                                   ", ".join(repr(x) for x in self.elements()))
