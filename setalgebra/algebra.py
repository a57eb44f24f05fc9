"""Set algebra over any :class:`~setalgebra.interface.Interface` variant.

All functions require that the types of their arguments match, and raise
:class:`~setalgebra.construct.VariantMismatch` otherwise. The concrete type of
the return value is the same as that of the inputs. The inputs are never
modified.
"""
from .checks import stop_element_checks
from .construct import check_variants, new_set

__all__ = ["union", "intersection", "difference", "symmetric_difference"]


def union(s, t):
    """Return a new set containing all the elements of `s` and `t`."""
    check_variants(s, t)
    r = new_set(s, t, len(s) + len(t))
    with stop_element_checks():
        for x in s.elements():
            r.add(x)
        for x in t.elements():
            r.add(x)
    return r


def intersection(s, t):
    """Return a new set containing the elements that are in both `s` and `t`."""
    r = new_set(s, t)
    # Iterate over the smaller set, probe the larger one.
    if len(s) < len(t):
        s, t = t, s
    with stop_element_checks():
        for x in t.elements():
            if x in s:
                r.add(x)
    return r


def difference(s, t):
    """Return a new set containing the elements that are in `s` but not in `t`."""
    r = new_set(s, t)
    with stop_element_checks():
        for x in s.elements():
            if x not in t:
                r.add(x)
    return r


def symmetric_difference(s, t):
    """Return a new set containing the elements in `s` that are not in `t`
    and the elements in `t` that are not in `s`.
    """
    r = new_set(s, t)
    with stop_element_checks():
        for x in s.elements():
            if x not in t:
                r.add(x)
        for x in t.elements():
            if x not in s:
                r.add(x)
    return r
