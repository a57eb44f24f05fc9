import numbers
import operator
from dataclasses import dataclass, field

import numpy

from setalgebra.checks import element_checks_enabled
from setalgebra.interface import Interface, ElementTypeMismatch

__all__ = ["BitSet"]


@dataclass(eq=False, repr=False)
class BitSet(Interface):
    """A set of the integers in ``range(size)``, stored as a numpy boolean array.

    The universe `size` is part of the variant: the algebra routines reject
    two BitSets of different size.

    Args:
        size (int): The number of integers in the universe.

    """
    size: int
    bits: numpy.ndarray = field(init=False)

    def __post_init__(self):
        self.size = operator.index(self.size)
        if self.size < 0:
            raise ValueError("BitSet size must be non-negative, got {}".format(self.size))
        self.bits = numpy.zeros(self.size, dtype=bool)

    @classmethod
    def from_elements(cls, size, iterable):
        """Return a BitSet of the given size holding the elements of `iterable`."""
        s = cls(size)
        for x in iterable:
            s.add(x)
        return s

    def _index(self, x):
        if not isinstance(x, numbers.Integral) or isinstance(x, bool):
            if element_checks_enabled():
                raise ElementTypeMismatch("BitSet elements must be integers, got {}".format(type(x).__name__))
            return None
        i = operator.index(x)
        if 0 <= i < self.size:
            return i
        return None

    def __len__(self):
        return int(numpy.count_nonzero(self.bits))

    def __contains__(self, x):
        i = self._index(x)
        return i is not None and bool(self.bits[i])

    def __iter__(self):
        for i in numpy.flatnonzero(self.bits):
            yield int(i)

    def add(self, x):
        i = self._index(x)
        if i is None:
            raise ValueError("{!r} is outside the universe range({}) of this BitSet".format(x, self.size))
        self.bits[i] = True

    def discard(self, x):
        i = self._index(x)
        if i is not None:
            self.bits[i] = False
