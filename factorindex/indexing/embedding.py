"""
Embedding index: walk a subspace, report positions in the enclosing space.

Given collections full ⊇ sub and a base offset into full's linear index
space, the cursor enumerates the configurations of `sub` only and reports,
at every step, the index into `full` of the configuration where the `sub`
variables take the current digits and every other variable of `full` is
held at the state encoded by `offset`.

Used to scatter a small factor over `sub` into a table over `full`:

    rest = full - sub
    rest_strides = <stride in full of each variable of rest>
    for each configuration of rest:
        offset = sum((digit - 1) * stride over rest)
        ei = EmbeddingIndex(full, sub, offset)
        for k in range(sub.num_states()):
            table[ei.index] *= factor[k]
            ei.increment()

The top digit never wraps: after Π dims(sub) increments the index lands
exactly on end(), and further increments keep moving it forward.
"""

from __future__ import annotations

import logging
from typing import Iterator, Tuple

import numpy as np

from factorindex.core.errors import require_contains
from factorindex.core.variables import VariableSet


logger = logging.getLogger(__name__)


class EmbeddingIndex:
    """
    Mixed-radix cursor over `sub` that reports the linear index into `full`.

    Args:
        full: Collection spanning the enclosing space
        sub: Collection whose configurations are enumerated; must be
             contained in `full`
        offset: Index into `full` fixing the variables outside `sub`
                (their contribution only; sub digits start at 1)

    Raises:
        ContainmentError: If `full` does not contain `sub`

    Example:
        >>> full = VariableSet([Variable(0, 2), Variable(1, 3)])
        >>> sub = VariableSet([Variable(0, 2)])
        >>> list(EmbeddingIndex(full, sub, 4).positions())
        [4, 5]
    """

    def __init__(self, full: VariableSet, sub: VariableSet, offset: int = 0):
        require_contains(full, sub)

        self._offset = offset
        self._idx = offset

        if sub.nvar() == 0:
            # A scope-less factor occupies one position at the offset.
            self._ns = 1
            self._dims = np.ones(1, dtype=np.int64)
            self._add = np.ones(1, dtype=np.int64)
        else:
            self._ns = sub.nvar()
            # Borrowed view; `sub` must outlive this cursor.
            self._dims = sub.dims()
            self._add = np.zeros(self._ns, dtype=np.int64)
            dimf = full.dims()
            d = 1
            i = 0
            j = 0
            while j < self._ns:
                if full[i] == sub[j]:
                    self._add[j] = d
                    j += 1
                d *= int(dimf[i])
                i += 1

        self._state = np.ones(self._ns, dtype=np.int64)
        self._end = offset + int(self._add[-1]) * int(self._dims[-1])

        logger.debug(
            "EmbeddingIndex of %d variables into %d, offset=%d, end=%d",
            sub.nvar(), full.nvar(), offset, self._end,
        )

    @property
    def index(self) -> int:
        """Linear index into `full` for the current sub configuration."""
        return self._idx

    @property
    def state(self) -> Tuple[int, ...]:
        """Current sub configuration as 1-based digits, canonical order."""
        return tuple(int(s) for s in self._state)

    @property
    def offset(self) -> int:
        return self._offset

    def strides(self) -> Tuple[int, ...]:
        """Stride in full's index space of each sub variable."""
        return tuple(int(a) for a in self._add)

    def end(self) -> int:
        """One past the last index of the sub sweep at this offset."""
        return self._end

    def num_positions(self) -> int:
        """Number of sub configurations visited by one sweep."""
        return int(np.prod(self._dims, dtype=np.int64))

    def reset(self) -> "EmbeddingIndex":
        """Return to the first sub configuration at the construction offset."""
        self._state[:] = 1
        self._idx = self._offset
        return self

    def increment(self) -> "EmbeddingIndex":
        """
        Advance to the next sub configuration.

        Non-final digits at their maximum wrap to 1 and carry; the final digit
        always increments, even past its maximum, so the sweep is bounded by
        end() rather than by a carry out of the top digit.

        Returns:
            self, so calls can be chained
        """
        last = self._ns - 1
        for i in range(self._ns):
            if self._state[i] == self._dims[i] and i < last:
                self._state[i] = 1
                self._idx -= int(self._add[i]) * (int(self._dims[i]) - 1)
            else:
                self._state[i] += 1
                self._idx += int(self._add[i])
                break
        return self

    def post_increment(self) -> "EmbeddingIndex":
        """Advance the cursor and return a copy taken before advancing."""
        before = self.copy()
        self.increment()
        return before

    def positions(self) -> Iterator[int]:
        """Yield full-space indices until the cursor reaches end()."""
        while self._idx < self._end:
            yield self._idx
            self.increment()

    def copy(self) -> "EmbeddingIndex":
        """Independent cursor with its own digit buffers."""
        other = EmbeddingIndex.__new__(EmbeddingIndex)
        other._offset = self._offset
        other._idx = self._idx
        other._end = self._end
        other._ns = self._ns
        other._dims = self._dims
        other._state = self._state.copy()
        other._add = self._add.copy()
        return other

    __copy__ = copy

    def dump(self) -> str:
        """Human-readable internal state, one array per line."""
        lines = [
            "EmbeddingIndex:",
            f"{self._idx}, {self._end}",
            f"{self._ns}",
            " ".join(str(int(s)) for s in self._state),
            " ".join(str(int(d)) for d in self._dims),
            " ".join(str(int(a)) for a in self._add),
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"EmbeddingIndex(index={self._idx}, state={self.state}, end={self._end})"


def rest_offsets(full: VariableSet, sub: VariableSet) -> Iterator[int]:
    """
    Yield every base offset for an EmbeddingIndex of `sub` into `full`.

    Enumerates the configurations of the variables of `full` not in `sub`
    (first variable fastest) and yields the index contribution of each.
    Together with one EmbeddingIndex sweep per offset this visits every
    position of `full` exactly once.

    Raises:
        ContainmentError: If `full` does not contain `sub`
    """
    require_contains(full, sub)
    rest = full - sub
    # The offsets are themselves an embedding of `rest` into `full`.
    ei = EmbeddingIndex(full, rest, 0)
    for _ in range(rest.num_states()):
        yield ei.index
        ei.increment()


if __name__ == "__main__":
    from factorindex.core.variables import Variable

    a, b = Variable(0, 2), Variable(1, 3)
    full = VariableSet([a, b])
    sub = VariableSet([a])

    assert list(EmbeddingIndex(full, sub, 0).positions()) == [0, 1]
    assert list(EmbeddingIndex(full, sub, 4).positions()) == [4, 5]

    seen = sorted(
        idx
        for off in rest_offsets(full, sub)
        for idx in EmbeddingIndex(full, sub, off).positions()
    )
    assert seen == list(range(full.num_states()))

    print("EmbeddingIndex self-test passed.")
