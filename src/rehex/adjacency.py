"""Batch conversion of a triangle index list into per-vertex tile adjacency.

The input is the flat index buffer of a consistently wound triangle mesh
(typically an icosphere).  The output is one fixed six-slot row per
vertex holding its neighbours in winding order, so each vertex can be
treated as a hexagonal tile (or a pentagonal one at the twelve original
icosahedron corners).

    >>> adjacency = build_adjacency(icosahedron_indices, 12)
    >>> neighbours(adjacency[0])
    [11, 5, 1, 7, 10]

Rows are left-packed; unused trailing slots hold :data:`ABSENT`.  The
starting rotation of each row is deterministic but not normalised, see
:func:`~rehex.algorithms.canonical_rotation`.
"""

from __future__ import annotations

import logging
import operator
from typing import Iterable, List, Sequence, Union

import numpy as np

from .errors import IncompleteVertexError, MalformedIndicesError, SelfAdjacencyError
from .fan import CAPACITY, NeighbourFan

_LOGGER = logging.getLogger(__name__)

ADJACENCY_DTYPE = np.uint64

#: Marks an empty slot in an adjacency row (the largest ``uint64``).
ABSENT = int(np.iinfo(ADJACENCY_DTYPE).max)

IndexInput = Union[Sequence[int], np.ndarray]


# ═══════════════════════════════════════════════════════════════════
# Input handling
# ═══════════════════════════════════════════════════════════════════

def triangle_array(indices: IndexInput, *, strict: bool = True) -> np.ndarray:
    """Return *indices* as an ``(n_triangles, 3)`` int64 array.

    A length that is not a multiple of 3 raises
    :class:`MalformedIndicesError` unless *strict* is false, in which case
    the trailing partial triangle is dropped with a warning.
    """
    flat = np.asarray(indices)
    if flat.size == 0:
        return np.zeros((0, 3), dtype=np.int64)
    if not np.issubdtype(flat.dtype, np.integer):
        raise MalformedIndicesError(f"Triangle indices must be integers, got dtype {flat.dtype}")
    flat = flat.astype(np.int64, copy=False).ravel()

    remainder = flat.size % 3
    if remainder:
        if strict:
            raise MalformedIndicesError(
                f"Index list length {flat.size} is not a multiple of 3"
            )
        _LOGGER.warning(
            "Ignoring %d trailing index(es) after the last full triangle", remainder
        )
        flat = flat[: flat.size - remainder]
    return flat.reshape(-1, 3)


def _check_range(triangles: np.ndarray, vertex_count: int) -> None:
    if triangles.size == 0:
        return
    low = int(triangles.min())
    high = int(triangles.max())
    if low < 0:
        raise MalformedIndicesError(
            f"Vertex index {low} is negative", vertex=low
        )
    if high >= vertex_count:
        raise MalformedIndicesError(
            f"Vertex index {high} is outside [0, {vertex_count})", vertex=high
        )


# ═══════════════════════════════════════════════════════════════════
# Accumulate → finalise
# ═══════════════════════════════════════════════════════════════════

def accumulate_fans(
    indices: IndexInput,
    vertex_count: int,
    *,
    strict: bool = True,
) -> List[NeighbourFan]:
    """Feed every triangle corner into the fan of its vertex.

    Triangle ``(a, b, c)`` tells ``a`` that ``c`` follows ``b``, ``c``
    that ``b`` follows ``a`` and ``b`` that ``a`` follows ``c``, which
    keeps every fan wound the same way as the mesh.
    """
    vertex_count = operator.index(vertex_count)
    if vertex_count < 0:
        raise MalformedIndicesError("vertex_count must be >= 0")

    triangles = triangle_array(indices, strict=strict)
    _check_range(triangles, vertex_count)

    fans = [NeighbourFan(v) for v in range(vertex_count)]
    for a, b, c in triangles.tolist():
        fans[a].insert(b, c)
        fans[c].insert(a, b)
        fans[b].insert(c, a)

    _LOGGER.debug(
        "Accumulated %d triangles into %d vertex fans", len(triangles), vertex_count
    )
    return fans


def finalize_fans(fans: Sequence[NeighbourFan], *, min_neighbours: int = 5) -> np.ndarray:
    """Validate *fans* and pack them into a ``(len(fans), 6)`` array.

    Self-adjacency is checked over every fan before anything else, so a
    degenerate triangle is reported as such even when it also leaves
    other fans open.
    """
    if not 3 <= min_neighbours <= CAPACITY:
        raise ValueError(f"min_neighbours must be between 3 and {CAPACITY}")

    for fan in fans:
        if fan.vertex in fan.ring or any(fan.vertex in fact for fact in fan.conflicts):
            raise SelfAdjacencyError(fan.vertex, fan.ring, fan.state)

    for fan in fans:
        if not fan.is_complete:
            raise IncompleteVertexError(fan.vertex, fan.state, fan.ring)
        if fan.conflicts:
            raise IncompleteVertexError(
                fan.vertex, fan.state, fan.ring,
                reason=f"has conflicting neighbour facts {fan.conflicts}",
            )
        if len(fan) < min_neighbours:
            raise IncompleteVertexError(
                fan.vertex, fan.state, fan.ring,
                reason=f"closed with only {len(fan)} neighbours",
            )

    adjacency = np.full((len(fans), CAPACITY), ABSENT, dtype=ADJACENCY_DTYPE)
    for row, fan in zip(adjacency, fans):
        row[: len(fan)] = fan.ring
    return adjacency


def build_adjacency(
    indices: IndexInput,
    vertex_count: int,
    *,
    min_neighbours: int = 5,
    strict: bool = True,
) -> np.ndarray:
    """Turn a flat triangle index list into per-vertex neighbour rows.

    Parameters
    ----------
    indices : sequence of int or ndarray
        Triangle corners, three per triangle, consistently wound.
    vertex_count : int
        Number of vertices; every index must lie in ``[0, vertex_count)``.
    min_neighbours : int
        Smallest acceptable closed fan (5 for icosphere input).
    strict : bool
        Reject an index list whose length is not a multiple of 3 instead
        of dropping the trailing partial triangle.

    Returns
    -------
    ndarray
        ``uint64`` array of shape ``(vertex_count, 6)``; unused slots
        hold :data:`ABSENT`.

    Raises
    ------
    MalformedIndicesError, OverlongFanError, SelfAdjacencyError,
    IncompleteVertexError
    """
    fans = accumulate_fans(indices, vertex_count, strict=strict)
    adjacency = finalize_fans(fans, min_neighbours=min_neighbours)
    _LOGGER.debug(
        "Built adjacency for %d vertices (%d short fans)",
        len(fans), sum(1 for fan in fans if len(fan) < CAPACITY),
    )
    return adjacency


def neighbours(row: Iterable[int]) -> List[int]:
    """Neighbour indices of one adjacency row, sentinel slots removed."""
    return [int(v) for v in row if int(v) != ABSENT]
