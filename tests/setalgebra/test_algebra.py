import pytest
import numpy as np
from setalgebra import *
from numpy_setalgebra import BitSet


def elements(s):
    return set(s.elements())


VARIANTS = [
    pytest.param(lambda values: StringSet(str(v) for v in values), id="StringSet"),
    pytest.param(lambda values: IntSet(values), id="IntSet"),
    pytest.param(lambda values: StringListSet(str(v) for v in values), id="StringListSet"),
    pytest.param(lambda values: BitSet.from_elements(32, values), id="BitSet"),
]

OPERATIONS = [union, intersection, difference, symmetric_difference]


def random_values():
    n = np.random.randint(0, 20)
    return np.random.randint(0, 32, size=n).tolist()


class CountingSet(StringSet):
    def __init__(self, iterable=()):
        self.probes = 0
        super().__init__(iterable)

    def __contains__(self, x):
        self.probes += 1
        return super().__contains__(x)


def test_string_sets():
    s = StringSet(["a", "b", "c"])
    t = StringSet(["b", "c", "d"])

    u = union(s, t)
    assert len(u) == 4
    assert elements(u) == {"a", "b", "c", "d"}

    i = intersection(s, t)
    assert len(i) == 2
    assert elements(i) == {"b", "c"}

    d = difference(s, t)
    assert len(d) == 1
    assert elements(d) == {"a"}

    sd = symmetric_difference(s, t)
    assert len(sd) == 2
    assert elements(sd) == {"a", "d"}


def test_empty_operand():
    s = StringSet()
    t = StringSet(["x", "y"])

    assert elements(union(s, t)) == {"x", "y"}
    assert len(intersection(s, t)) == 0
    assert len(difference(s, t)) == 0
    assert elements(difference(t, s)) == {"x", "y"}
    assert elements(symmetric_difference(s, t)) == {"x", "y"}


def test_equal_singletons():
    s = StringSet(["a"])
    t = StringSet(["a"])

    assert elements(intersection(s, t)) == {"a"}
    assert len(symmetric_difference(s, t)) == 0


@pytest.mark.parametrize("op", OPERATIONS)
def test_variant_mismatch(op):
    s = StringSet(["1"])
    t = IntSet([1])

    with pytest.raises(VariantMismatch, match="StringSet and IntSet"):
        op(s, t)


@pytest.mark.parametrize("op", OPERATIONS)
def test_subclass_is_a_different_variant(op):
    with pytest.raises(VariantMismatch):
        op(StringSet(["a"]), CountingSet(["a"]))


@pytest.mark.parametrize("op", OPERATIONS)
def test_result_type(op):
    s = CountingSet(["a", "b"])
    t = CountingSet(["b", "c"])
    r = op(s, t)
    assert type(r) is CountingSet
    assert r is not s and r is not t


@pytest.mark.parametrize("make", VARIANTS)
def test_self_operations(make):
    s = make([1, 2, 3])

    u = union(s, s)
    assert u is not s
    assert u == s

    i = intersection(s, s)
    assert i is not s
    assert i == s

    assert len(difference(s, s)) == 0
    assert len(symmetric_difference(s, s)) == 0


def test_results_share_no_storage():
    s = StringSet(["a", "b"])
    t = StringSet()

    u = union(s, t)
    u.add("c")
    u.discard("a")
    assert elements(s) == {"a", "b"}
    assert len(t) == 0


def test_intersection_iterates_smaller_operand():
    small = CountingSet(["a", "b"])
    large = CountingSet(["a", "c", "d", "e", "f"])

    assert elements(intersection(small, large)) == {"a"}
    assert large.probes == 2
    assert small.probes == 0

    large.probes = 0
    assert elements(intersection(large, small)) == {"a"}
    assert large.probes == 2
    assert small.probes == 0


@pytest.mark.parametrize("make", VARIANTS)
def test_union_commutes(make):
    for _ in range(20):
        s = make(random_values())
        t = make(random_values())
        assert union(s, t) == union(t, s)
        assert elements(union(s, t)) == elements(s) | elements(t)


@pytest.mark.parametrize("make", VARIANTS)
def test_intersection_absorption(make):
    for _ in range(20):
        s = make(random_values())
        assert elements(intersection(s, s)) == elements(s)


@pytest.mark.parametrize("make", VARIANTS)
def test_symmetric_difference_identity(make):
    for _ in range(20):
        s = make(random_values())
        t = make(random_values())
        expected = union(difference(s, t), difference(t, s))
        assert symmetric_difference(s, t) == expected
        assert elements(expected) == elements(s) ^ elements(t)


@pytest.mark.parametrize("make", VARIANTS)
def test_matches_builtin_sets(make):
    for _ in range(20):
        s = make(random_values())
        t = make(random_values())
        assert elements(intersection(s, t)) == elements(s) & elements(t)
        assert elements(difference(s, t)) == elements(s) - elements(t)


@pytest.mark.parametrize("make", VARIANTS)
@pytest.mark.parametrize("op", OPERATIONS)
def test_inputs_not_modified(make, op):
    for _ in range(10):
        s = make(random_values())
        t = make(random_values())
        s_before, t_before = elements(s), elements(t)
        len_s, len_t = len(s), len(t)

        op(s, t)

        assert elements(s) == s_before and len(s) == len_s
        assert elements(t) == t_before and len(t) == len_t


def test_element_checks_restored_after_operation():
    s = StringSet(["a"])
    union(s, s)
    assert element_checks_enabled()

    with pytest.raises(VariantMismatch):
        union(s, IntSet())
    assert element_checks_enabled()


@pytest.mark.parametrize("op", OPERATIONS)
def test_non_set_operand(op):
    with pytest.raises(VariantMismatch, match="StringSet and int"):
        op(StringSet(), 5)
    with pytest.raises(UnsupportedVariant):
        op(5, 6)
