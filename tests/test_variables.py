"""
Tests for Variable and VariableSet (the collection contract).

Covers canonical ordering, domain-size views, containment and the set
algebra consumers use to split a collection.
"""

import numpy as np

from factorindex.core.variables import Variable, VariableSet


def test_canonical_order_and_dims():
    """Variables are sorted by label; dims follow the canonical order."""
    print("\n" + "=" * 70)
    print("TEST: canonical order and dims")
    print("=" * 70)

    vs = VariableSet([Variable(5, 4), Variable(1, 2), Variable(3, 3)])

    assert vs.labels() == [1, 3, 5], f"Unexpected order: {vs.labels()}"
    assert vs.dims().tolist() == [2, 3, 4], f"Unexpected dims: {vs.dims()}"
    assert vs.nvar() == 3 and len(vs) == 3
    assert vs.num_states() == 24
    assert vs[0] == Variable(1, 2)

    print("  ✓ test_canonical_order_and_dims: PASSED")


def test_dims_view_is_read_only():
    """dims() is a borrowed view that callers cannot mutate."""
    vs = VariableSet.from_dims([2, 3])
    dims = vs.dims()

    assert dims is vs.dims(), "dims() should hand out the same view"
    try:
        dims[0] = 7
        raise AssertionError("Expected ValueError writing to read-only dims")
    except ValueError:
        pass
    assert vs.dims().tolist() == [2, 3]

    print("  ✓ test_dims_view_is_read_only: PASSED")


def test_duplicates_collapse_and_conflicts_raise():
    """Repeated labels collapse; conflicting domain sizes are rejected."""
    vs = VariableSet([Variable(0, 2), Variable(0, 2), Variable(1, 3)])
    assert vs.labels() == [0, 1]

    try:
        VariableSet([Variable(0, 2), Variable(0, 3)])
        raise AssertionError("Expected ValueError for conflicting domain sizes")
    except ValueError as e:
        assert "conflicting" in str(e)

    try:
        Variable(0, 0)
        raise AssertionError("Expected ValueError for empty domain")
    except ValueError:
        pass

    print("  ✓ test_duplicates_collapse_and_conflicts_raise: PASSED")


def test_variable_identity_is_label():
    """Equality, hashing and ordering use the label only."""
    assert Variable(2, 3) == Variable(2, 9)
    assert hash(Variable(2, 3)) == hash(Variable(2, 9))
    assert Variable(1, 9) < Variable(2, 1)

    print("  ✓ test_variable_identity_is_label: PASSED")


def test_containment():
    """`>>` is subsequence containment over canonical order."""
    a, b, c, d = (Variable(i, i + 2) for i in range(4))
    full = VariableSet([a, b, c])

    assert full >> VariableSet([a, c])
    assert full >> VariableSet([b])
    assert full >> VariableSet()
    assert full >> full
    assert not full >> VariableSet([a, d])
    assert not VariableSet([a]) >> full
    assert VariableSet() >> VariableSet()

    print("  ✓ test_containment: PASSED")


def test_containment_requires_matching_domain_sizes():
    """A same-label variable with another domain size is not contained."""
    full = VariableSet([Variable(0, 2), Variable(1, 3)])

    assert full >> VariableSet([Variable(1, 3)])
    assert not full >> VariableSet([Variable(0, 5)])
    assert not VariableSet([Variable(0, 2)]) >> VariableSet([Variable(0, 5)])

    print("  ✓ test_containment_requires_matching_domain_sizes: PASSED")


def test_set_algebra():
    """Union, intersection and difference keep canonical order."""
    a, b, c = Variable(0, 2), Variable(1, 3), Variable(2, 4)
    left = VariableSet([a, b])
    right = VariableSet([b, c])

    assert (left | right).labels() == [0, 1, 2]
    assert (left & right).labels() == [1]
    assert (left - right).labels() == [0]
    assert (left | right) == VariableSet([c, b, a])
    assert np.array_equal((left | right).dims(), np.array([2, 3, 4]))

    print("  ✓ test_set_algebra: PASSED")


def test_empty_collection():
    """An empty collection has one (empty) configuration."""
    vs = VariableSet()
    assert vs.nvar() == 0
    assert vs.num_states() == 1
    assert vs.dims().shape == (0,)

    print("  ✓ test_empty_collection: PASSED")


if __name__ == "__main__":
    test_canonical_order_and_dims()
    test_dims_view_is_read_only()
    test_duplicates_collapse_and_conflicts_raise()
    test_variable_identity_is_label()
    test_containment()
    test_containment_requires_matching_domain_sizes()
    test_set_algebra()
    test_empty_collection()
    print("\n✓ All variable tests passed.")
