"""Exceptions raised while turning a triangle list into tile adjacency.

Every error aborts the whole batch: adjacency is only useful as a
complete set, so there is no partial result to hand back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from .fan import FanState


class RehexError(ValueError):
    """Base class for malformed-mesh errors.

    *vertex* is the offending centre vertex (``None`` when the problem is
    not tied to one vertex) and *state* the fragmentation state the
    vertex was in when the problem was found.
    """

    def __init__(
        self,
        message: str,
        vertex: Optional[int] = None,
        state: Optional["FanState"] = None,
        ring: Sequence[int] = (),
    ) -> None:
        super().__init__(message)
        self.vertex = vertex
        self.state = state
        self.ring = tuple(ring)


class MalformedIndicesError(RehexError):
    """The flat index list itself is unusable (length or range)."""


class SelfAdjacencyError(RehexError):
    """A vertex ended up listed among its own neighbours."""

    def __init__(self, vertex: int, ring: Sequence[int], state: Optional["FanState"] = None) -> None:
        super().__init__(
            f"Vertex {vertex} is adjacent to itself: {list(ring)}",
            vertex=vertex,
            state=state,
            ring=ring,
        )


class IncompleteVertexError(RehexError):
    """A vertex never closed into a single neighbour cycle."""

    def __init__(
        self,
        vertex: int,
        state: "FanState",
        ring: Sequence[int],
        reason: str = "did not close into a cycle",
    ) -> None:
        super().__init__(
            f"Vertex {vertex} {reason} (state {state.name}, ring {list(ring)})",
            vertex=vertex,
            state=state,
            ring=ring,
        )


class OverlongFanError(RehexError):
    """More than six distinct neighbours were implied around one vertex."""

    def __init__(self, vertex: int, state: "FanState", ring: Sequence[int], fact: tuple[int, int]) -> None:
        super().__init__(
            f"Vertex {vertex} has more than 6 neighbours: fact {fact} "
            f"does not fit ring {list(ring)} (state {state.name})",
            vertex=vertex,
            state=state,
            ring=ring,
        )
        self.fact = fact
