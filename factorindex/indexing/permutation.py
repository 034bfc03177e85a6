"""
Permutation index: re-express a linear index under another variable order.

A table over a VariableSet is stored with the canonical (label-sorted) order,
first variable fastest. A PermutationIndex maps an index in that canonical
(source) layout to the index of the same configuration in a target layout
given by an explicit variable order, i.e. it transposes the table:

    perm = PermutationIndex([b, a])
    for i in range(len(table)):
        transposed[perm.convert(i)] = table[i]

With big_endian=True the first variable of `order` gets the largest stride
instead of the smallest.

Unlike the projecting/embedding cursors, each conversion fully decomposes
and recomposes the index (O(d) per call): a permutation destroys the digit
locality the amortized increments rely on.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Sequence

from factorindex.core.errors import DuplicateVariableError
from factorindex.core.variables import Variable, VariableSet


logger = logging.getLogger(__name__)


class PermutationIndex:
    """
    Index transform from canonical variable order to an explicit order.

    Also works as a flat bidirectional counter over source indices: the
    cursor moves by one per increment()/decrement() and `index` converts it
    on read.

    Args:
        order: Target variable order
        big_endian: If True, the first variable of `order` is most significant

    Raises:
        DuplicateVariableError: If `order` lists a variable more than once

    Example:
        >>> a, b = Variable(0, 2), Variable(1, 3)
        >>> perm = PermutationIndex([a, b], big_endian=True)
        >>> [perm.convert(i) for i in range(6)]
        [0, 3, 1, 4, 2, 5]
    """

    def __init__(self, order: Sequence[Variable], big_endian: bool = False):
        labels = [v.label for v in order]
        if len(set(labels)) != len(labels):
            dupes = sorted({x for x in labels if labels.count(x) > 1})
            raise DuplicateVariableError(
                f"Permutation order repeats variables with labels {dupes}"
            )

        n = len(order)
        source = VariableSet(order)
        self._i = 0
        self._dim: List[int] = [source[k].states for k in range(n)]
        self._pi: List[int] = [0] * n
        for j in range(n):
            jj = n - 1 - j if big_endian else j
            for k in range(n):
                if source[k] == order[j]:
                    self._pi[jj] = k
                    break

        logger.debug("PermutationIndex over %d variables, big_endian=%s", n, big_endian)

    @property
    def index(self) -> int:
        """Target index of the current source cursor."""
        return self.convert(self._i)

    @property
    def position(self) -> int:
        """Current source cursor."""
        return self._i

    @property
    def mapping(self) -> List[int]:
        """Source position read at each target position."""
        return list(self._pi)

    @property
    def dims(self) -> List[int]:
        """Domain sizes in this mapping's source order."""
        return list(self._dim)

    def num_states(self) -> int:
        total = 1
        for d in self._dim:
            total *= d
        return total

    def set(self, i: int) -> "PermutationIndex":
        """Move the source cursor to `i`."""
        self._i = i
        return self

    def reset(self) -> "PermutationIndex":
        return self.set(0)

    def end(self) -> int:
        """One past the last source index."""
        return self.num_states()

    def convert(self, i: int) -> int:
        """
        Convert a source index into the corresponding target index.

        Args:
            i: Index in source (canonical) layout, 0 <= i < num_states()

        Returns:
            Index of the same configuration in target layout
        """
        digits = [0] * len(self._dim)
        for v, d in enumerate(self._dim):
            digits[v] = i % d
            i //= d

        r = 0
        m = 1
        for src in self._pi:
            r += m * digits[src]
            m *= self._dim[src]
        return r

    def inverse(self) -> "PermutationIndex":
        """
        Mapping from target layout back to source layout.

        The returned cursor sits at this cursor's converted value, so its
        `position` equals this cursor's `index`.
        """
        inv = self.copy()
        for i, src in enumerate(self._pi):
            inv._pi[src] = i
            inv._dim[i] = self._dim[src]
        inv._i = self.index
        return inv

    def positions(self) -> Iterator[int]:
        """
        Yield the target index of every source index from the cursor up to
        end(). The cursor advances as it goes.
        """
        for _ in range(self.end() - self._i):
            yield self.index
            self._i += 1

    def increment(self) -> "PermutationIndex":
        self._i += 1
        return self

    def decrement(self) -> "PermutationIndex":
        self._i -= 1
        return self

    def post_increment(self) -> "PermutationIndex":
        before = self.copy()
        self._i += 1
        return before

    def post_decrement(self) -> "PermutationIndex":
        before = self.copy()
        self._i -= 1
        return before

    def copy(self) -> "PermutationIndex":
        other = PermutationIndex.__new__(PermutationIndex)
        other._i = self._i
        other._pi = list(self._pi)
        other._dim = list(self._dim)
        return other

    __copy__ = copy

    def dump(self) -> str:
        """Human-readable internal state."""
        return "\n".join([
            "PermutationIndex:",
            f"{self._i} -> {self.index}",
            " ".join(str(d) for d in self._dim),
            " ".join(str(p) for p in self._pi),
        ])

    def __repr__(self) -> str:
        return f"PermutationIndex(position={self._i}, pi={self._pi}, dims={self._dim})"
