"""
Discrete variables and canonical variable collections.

This module provides the collection contract the index cursors are built on:
  - Variable: an integer label plus a finite domain size (number of states)
  - VariableSet: an ordered, duplicate-free collection sorted by label

Conventions:
  - Canonical order is ascending label order
  - The first variable of a collection is the least significant digit of
    the collection's linear index (stride 1)
  - Variables compare, hash and sort by label only

VariableSet.dims() hands out a read-only numpy view of the domain sizes.
Index cursors keep that view instead of copying it, so the VariableSet must
stay alive for as long as any cursor built from it is in use.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

import numpy as np


@dataclass(frozen=True, order=True)
class Variable:
    """
    A discrete variable with a finite domain.

    Attributes:
        label: Identifier; defines equality and canonical order
        states: Domain size (number of states), at least 1

    Example:
        >>> a = Variable(0, 2)
        >>> a == Variable(0, 5)   # identity is the label
        True
        >>> a.states
        2
    """
    label: int
    states: int = field(compare=False)

    def __post_init__(self):
        if self.states < 1:
            raise ValueError(
                f"Variable {self.label} must have at least one state, got {self.states}"
            )


class VariableSet:
    """
    Ordered, duplicate-free collection of variables in canonical order.

    Variables are sorted by label on construction; repeated labels collapse
    to one entry. Two entries with the same label but different domain sizes
    are rejected.

    Example:
        >>> vs = VariableSet([Variable(3, 2), Variable(1, 3)])
        >>> vs.labels()
        [1, 3]
        >>> vs.dims().tolist()
        [3, 2]
        >>> vs.num_states()
        6
    """

    def __init__(self, variables: Iterable[Variable] = ()):
        unique = {}
        for v in variables:
            seen = unique.get(v.label)
            if seen is not None and seen.states != v.states:
                raise ValueError(
                    f"Variable {v.label} given with conflicting domain sizes "
                    f"{seen.states} and {v.states}"
                )
            unique[v.label] = v

        self._vars: Tuple[Variable, ...] = tuple(sorted(unique.values()))
        self._dims = np.array([v.states for v in self._vars], dtype=np.int64)
        self._dims.flags.writeable = False

    @classmethod
    def from_dims(cls, dims: Iterable[int], first_label: int = 0) -> "VariableSet":
        """
        Build a collection with consecutive labels from a list of domain sizes.

        Args:
            dims: Domain sizes, in canonical order
            first_label: Label of the first variable

        Returns:
            VariableSet whose i-th variable has label first_label + i
        """
        return cls(Variable(first_label + i, int(d)) for i, d in enumerate(dims))

    def nvar(self) -> int:
        """Number of variables."""
        return len(self._vars)

    def dims(self) -> np.ndarray:
        """
        Domain sizes in canonical order.

        The returned array is a read-only view owned by this collection;
        it is valid for as long as the collection is.
        """
        return self._dims

    def num_states(self) -> int:
        """Total number of configurations (product of all domain sizes)."""
        return int(np.prod(self._dims, dtype=np.int64))

    def labels(self) -> List[int]:
        """Variable labels in canonical order."""
        return [v.label for v in self._vars]

    def __getitem__(self, pos: int) -> Variable:
        return self._vars[pos]

    def __len__(self) -> int:
        return len(self._vars)

    def __iter__(self) -> Iterator[Variable]:
        return iter(self._vars)

    def __contains__(self, v: Variable) -> bool:
        return v in self._vars

    def __eq__(self, other) -> bool:
        if not isinstance(other, VariableSet):
            return NotImplemented
        return self._vars == other._vars

    def __hash__(self) -> int:
        return hash(self._vars)

    def __rshift__(self, other: "VariableSet") -> bool:
        """
        Containment test: True iff every variable of `other` appears in self,
        with the same domain size and its relative canonical order preserved.

        Both collections are canonically sorted, so a single merge walk
        decides it.
        """
        j = 0
        for v in self._vars:
            if j == len(other._vars):
                break
            if v == other._vars[j]:
                if v.states != other._vars[j].states:
                    return False
                j += 1
        return j == len(other._vars)

    def __or__(self, other: "VariableSet") -> "VariableSet":
        return VariableSet(self._vars + other._vars)

    def __and__(self, other: "VariableSet") -> "VariableSet":
        return VariableSet(v for v in self._vars if v in other._vars)

    def __sub__(self, other: "VariableSet") -> "VariableSet":
        return VariableSet(v for v in self._vars if v not in other._vars)

    def __repr__(self) -> str:
        inner = ", ".join(f"x{v.label}:{v.states}" for v in self._vars)
        return f"VariableSet([{inner}])"


if __name__ == "__main__":
    # Self-test: canonical ordering and containment
    a, b, c = Variable(0, 2), Variable(1, 3), Variable(2, 4)
    full = VariableSet([c, a, b])
    assert full.labels() == [0, 1, 2]
    assert full.dims().tolist() == [2, 3, 4]
    assert full.num_states() == 24

    assert full >> VariableSet([a, c])
    assert not VariableSet([a]) >> VariableSet([b])
    assert (full - VariableSet([b])).labels() == [0, 2]

    print("VariableSet self-test passed.")
