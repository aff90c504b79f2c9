"""Per-vertex neighbour ordering.

Consider the hexagon around vertex ``i``::

      a---b
     /     \\
    f   i   c
     \\     /
      e---d

Every triangle touching ``i`` contributes one fact of the form "``c``
follows ``b``".  The facts arrive in triangle-list order, which has
nothing to do with the cyclic order around ``i``, so :class:`NeighbourFan`
stitches them together as they come in.  It keeps at most three disjoint
*arcs* (runs of neighbours whose order is already known), stored back to
back in one list, and joins them as soon as a fact connects the tail of
one arc to the head of another.  The finished ring for ``i`` is some
rotation of ``[a, b, c, d, e, f]``.

States
------
- ``EMPTY`` — nothing seen yet.
- ``CLEAR`` — one arc, e.g. ``[a, b, c]``.
- ``TWO_TWO`` — two pairs, e.g. ``[a, b] [d, e]``.
- ``THREE_TWO`` — ``[a, b, c] [e, f]``; with only two arcs the cyclic
  order is already fixed, but the gaps are not.
- ``TWO_TWO_TWO`` — ``[b, c] [f, a] [d, e]``: all six neighbours are
  known, but not which arc follows which.
- ``COMPLETE`` — the loop is formed.
"""

from __future__ import annotations

import enum
from typing import Dict, List, Optional, Tuple

from .errors import OverlongFanError


CAPACITY = 6


class FanState(enum.Enum):
    EMPTY = "empty"
    CLEAR = "clear"
    TWO_TWO = "two_two"
    THREE_TWO = "three_two"
    TWO_TWO_TWO = "two_two_two"
    COMPLETE = "complete"


# Arc lengths, in storage order, for the states that hold several arcs.
_ARC_LENGTHS: Dict[FanState, Tuple[int, ...]] = {
    FanState.TWO_TWO: (2, 2),
    FanState.THREE_TWO: (3, 2),
    FanState.TWO_TWO_TWO: (2, 2, 2),
}

_TWO_ARC_STATES: Dict[int, FanState] = {
    4: FanState.TWO_TWO,
    5: FanState.THREE_TWO,
    6: FanState.COMPLETE,
}


class NeighbourFan:
    """Accumulates the neighbour cycle of one vertex.

    Facts are fed through :meth:`insert`.  Facts that contradict what is
    already known are never applied; they are kept in :attr:`conflicts`
    so the caller can report the vertex afterwards.  A fact that would
    push the fan past six neighbours raises :class:`OverlongFanError`.
    """

    def __init__(self, vertex: int) -> None:
        self.vertex = vertex
        self.state = FanState.EMPTY
        self.conflicts: List[Tuple[int, int]] = []
        self._ring: List[int] = []

    def __len__(self) -> int:
        return len(self._ring)

    def __repr__(self) -> str:
        return f"NeighbourFan(vertex={self.vertex}, state={self.state.name}, ring={self._ring})"

    # ── accessors ───────────────────────────────────────────────────

    @property
    def ring(self) -> Tuple[int, ...]:
        """All known neighbours, arcs concatenated in storage order."""
        return tuple(self._ring)

    @property
    def is_complete(self) -> bool:
        return self.state is FanState.COMPLETE

    @property
    def arcs(self) -> List[List[int]]:
        """The ring split at the arc boundaries implied by :attr:`state`."""
        if self.state is FanState.EMPTY:
            return []
        if self.state in (FanState.CLEAR, FanState.COMPLETE):
            return [list(self._ring)]
        arcs: List[List[int]] = []
        start = 0
        for length in _ARC_LENGTHS[self.state]:
            arcs.append(self._ring[start : start + length])
            start += length
        return arcs

    # ── transitions ─────────────────────────────────────────────────

    def insert(self, b: int, c: int) -> None:
        """Record that *c* immediately follows *b* around this vertex."""
        if self.state is FanState.COMPLETE:
            self._absorb(b, c)
            return
        if b == c:
            self.conflicts.append((b, c))
            return
        if self.state is FanState.EMPTY:
            self._ring = [b, c]
            self.state = FanState.CLEAR
            return

        arcs = self.arcs
        if any(_follows(arc, b, c) for arc in arcs):
            return

        tail = _find_end(arcs, b, -1)
        head = _find_end(arcs, c, 0)
        known = set(self._ring)
        if (tail is None and b in known) or (head is None and c in known):
            # b already has a successor, or c a predecessor
            self.conflicts.append((b, c))
            return

        if tail is not None and head is not None:
            if tail == head:
                if len(arcs) > 1:
                    self.conflicts.append((b, c))
                    return
                # Tail meets head: the cycle is closed.
                self.state = FanState.COMPLETE
                return
            joined = arcs[tail] + arcs[head]
            arcs = [joined] + [arc for i, arc in enumerate(arcs) if i not in (tail, head)]
        elif tail is not None:
            arcs[tail].append(c)
        elif head is not None:
            arcs[head].insert(0, b)
        else:
            arcs.append([b, c])

        self._settle(arcs, (b, c))

    def _settle(self, arcs: List[List[int]], fact: Tuple[int, int]) -> None:
        """Store *arcs* back into the ring and pick the matching state."""
        total = sum(len(arc) for arc in arcs)
        if total > CAPACITY:
            raise OverlongFanError(self.vertex, self.state, self._ring, fact)

        if len(arcs) == 1:
            state = FanState.COMPLETE if total == CAPACITY else FanState.CLEAR
        elif len(arcs) == 2:
            # Two arcs can only sit one way round the cycle, so either may
            # be stored first; keep the longer one in front.
            arcs.sort(key=len, reverse=True)
            state = _TWO_ARC_STATES[total]
        else:
            state = FanState.TWO_TWO_TWO

        self._ring = [v for arc in arcs for v in arc]
        self.state = state

    def _absorb(self, b: int, c: int) -> None:
        ring = self._ring
        if b in ring and ring[(ring.index(b) + 1) % len(ring)] == c:
            return
        if {b, c} - set(ring) - {self.vertex}:
            raise OverlongFanError(self.vertex, self.state, ring, (b, c))
        self.conflicts.append((b, c))


def _follows(arc: List[int], b: int, c: int) -> bool:
    return any(arc[i] == b and arc[i + 1] == c for i in range(len(arc) - 1))


def _find_end(arcs: List[List[int]], value: int, end: int) -> Optional[int]:
    for i, arc in enumerate(arcs):
        if arc[end] == value:
            return i
    return None
