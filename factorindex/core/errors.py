"""
Exception types for index construction.

All three index cursors validate their preconditions once, at construction,
and raise one of the errors below. Nothing is checked per increment:
advancing a cursor past end() is the caller's responsibility.
"""


class IndexPreconditionError(ValueError):
    """Raised when an index cursor is built from inconsistent variables."""
    pass


class ContainmentError(IndexPreconditionError):
    """Raised when the full collection does not contain the sub collection."""
    pass


class DuplicateVariableError(IndexPreconditionError):
    """Raised when a permutation order lists the same variable twice."""
    pass


def require_contains(full, sub) -> None:
    """
    Check that `full` contains `sub` as an ordered subsequence.

    Args:
        full: VariableSet spanning the larger space
        sub: VariableSet spanning the smaller space

    Raises:
        ContainmentError: If some variable of `sub` is missing from `full` or
            has a different domain size there
    """
    if not full >> sub:
        missing = [v.label for v in sub if v not in full]
        states = {v.label: v.states for v in full}
        resized = [v.label for v in sub if v.label in states and states[v.label] != v.states]
        raise ContainmentError(
            f"{full!r} does not contain {sub!r} "
            f"(missing labels: {missing}, resized labels: {resized})"
        )
