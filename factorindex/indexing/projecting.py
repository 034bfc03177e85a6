"""
Projecting index: walk a full space, track the index of a projected subspace.

Given collections full ⊇ sub, the cursor enumerates every configuration of
`full` in canonical order (first variable fastest) and keeps, at every step,
the linear index that the implied configuration of `sub` would have if `sub`
were enumerated on its own.

Typical use is marginalization of a joint table over `full` onto `sub`:

    pi = ProjectingIndex(full, sub)
    for k in range(pi.end()):
        marginal[pi.index] += joint[k]
        pi.increment()

Per-position precomputation (i ranges over full's canonical positions):
    skipped[i]  = variable i is not in sub
    add[0]      = 1
    add[i]      = add[i-1] * (1 if skipped[i-1] else dims[i-1])
    subtract[i] = add[i] * ((1 if skipped[i] else dims[i]) - 1)

Skipped digits still run through their whole range so the enumeration order
over `full` is unchanged; they just never touch the tracked index.
"""

from __future__ import annotations

import logging
from typing import Iterator, Tuple

import numpy as np

from factorindex.core.errors import require_contains
from factorindex.core.variables import VariableSet


logger = logging.getLogger(__name__)


class ProjectingIndex:
    """
    Mixed-radix cursor over `full` that reports the linear index into `sub`.

    Attributes are private; read the cursor through `index`, `state` and
    `end()`. Digits are 1-based, as in a configuration.

    Args:
        full: Collection spanning the enumerated space
        sub: Collection whose index is tracked; must be contained in `full`

    Raises:
        ContainmentError: If `full` does not contain `sub`

    Example:
        >>> full = VariableSet([Variable(0, 2), Variable(1, 3)])
        >>> sub = VariableSet([Variable(0, 2)])
        >>> pi = ProjectingIndex(full, sub)
        >>> list(pi.positions())
        [0, 1, 0, 1, 0, 1]
    """

    def __init__(self, full: VariableSet, sub: VariableSet):
        require_contains(full, sub)

        self._nd = full.nvar()
        # Borrowed view; `full` must outlive this cursor.
        self._dims = full.dims()
        self._idx = 0
        self._end = 1

        self._state = np.ones(self._nd, dtype=np.int64)
        self._skipped = np.zeros(self._nd, dtype=bool)
        self._add = np.zeros(self._nd, dtype=np.int64)
        self._subtract = np.zeros(self._nd, dtype=np.int64)

        j = 0
        for i in range(self._nd):
            self._skipped[i] = j >= sub.nvar() or sub[j] != full[i]
            if i == 0:
                self._add[i] = 1
            else:
                self._add[i] = self._add[i - 1] * (1 if self._skipped[i - 1] else self._dims[i - 1])
            self._subtract[i] = self._add[i] * ((1 if self._skipped[i] else self._dims[i]) - 1)
            if not self._skipped[i]:
                j += 1
            self._end *= int(self._dims[i])

        logger.debug(
            "ProjectingIndex over %d variables (%d kept), end=%d",
            self._nd, sub.nvar(), self._end,
        )

    @property
    def index(self) -> int:
        """Linear index into `sub` implied by the current full configuration."""
        return self._idx

    @property
    def state(self) -> Tuple[int, ...]:
        """Current full configuration as 1-based digits, canonical order."""
        return tuple(int(s) for s in self._state)

    def end(self) -> int:
        """Number of increments needed to exhaust the full space."""
        return self._end

    def reset(self) -> "ProjectingIndex":
        """Return to the first configuration (all digits 1, index 0)."""
        self._state[:] = 1
        self._idx = 0
        return self

    def increment(self) -> "ProjectingIndex":
        """
        Advance to the next full configuration.

        Ripple-carry over the digits, least significant first. A digit at its
        maximum wraps to 1 and gives back its accumulated contribution; the
        first digit that can grow adds its stride and stops the ripple.
        Advancing from the last configuration wraps back to the first.

        Returns:
            self, so calls can be chained
        """
        for i in range(self._nd):
            if self._state[i] == self._dims[i]:
                self._state[i] = 1
                if not self._skipped[i]:
                    self._idx -= int(self._subtract[i])
            else:
                self._state[i] += 1
                if not self._skipped[i]:
                    self._idx += int(self._add[i])
                break
        return self

    def post_increment(self) -> "ProjectingIndex":
        """Advance the cursor and return a copy taken before advancing."""
        before = self.copy()
        self.increment()
        return before

    def positions(self) -> Iterator[int]:
        """
        Yield the tracked index for each of the end() configurations,
        starting from the current one. The cursor advances as it goes.
        """
        for _ in range(self._end):
            yield self._idx
            self.increment()

    def copy(self) -> "ProjectingIndex":
        """Independent cursor with its own digit buffers."""
        other = ProjectingIndex.__new__(ProjectingIndex)
        other._nd = self._nd
        other._dims = self._dims
        other._idx = self._idx
        other._end = self._end
        other._state = self._state.copy()
        other._skipped = self._skipped.copy()
        other._add = self._add.copy()
        other._subtract = self._subtract.copy()
        return other

    __copy__ = copy

    def dump(self) -> str:
        """Human-readable internal state, one array per line."""
        lines = [
            "ProjectingIndex:",
            f"{self._idx}, {self._end}",
            f"{self._nd}",
            " ".join(str(int(s)) for s in self._state),
            " ".join(str(int(d)) for d in self._dims),
            " ".join(str(int(s)) for s in self._skipped),
            " ".join(str(int(a)) for a in self._add),
            " ".join(str(int(s)) for s in self._subtract),
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"ProjectingIndex(index={self._idx}, state={self.state}, end={self._end})"
