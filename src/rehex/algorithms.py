from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

import numpy as np

from .adjacency import neighbours


def adjacency_map(adjacency: np.ndarray) -> Dict[int, List[int]]:
    """Return ``{vertex: neighbours}`` in winding order, sentinels dropped."""
    return {vertex: neighbours(row) for vertex, row in enumerate(adjacency)}


def canonical_rotation(row: Iterable[int]) -> Tuple[int, ...]:
    """Rotate a neighbour cycle so it starts at its smallest index."""
    ring = neighbours(row)
    if not ring:
        return ()
    start = ring.index(min(ring))
    return tuple(ring[start:] + ring[:start])


def same_cycle(a: Iterable[int], b: Iterable[int]) -> bool:
    """True when *a* and *b* are the same cycle up to rotation."""
    return canonical_rotation(a) == canonical_rotation(b)


def shared_edge(adjacency: np.ndarray, u: int, v: int) -> Optional[Tuple[int, int]]:
    """Return the two vertices flanking edge ``u–v``.

    The first is the apex of triangle ``(u, w, v)``, the second the apex of
    ``(u, v, w)``.  ``None`` when *u* and *v* are not neighbours.
    """
    ring = neighbours(adjacency[u])
    if v not in ring:
        return None
    i = ring.index(v)
    return ring[i - 1], ring[(i + 1) % len(ring)]


def ring_tiles(
    adjacency: Union[np.ndarray, Mapping[int, Iterable[int]]],
    start_tile: int,
    max_depth: int,
) -> Dict[int, List[int]]:
    """Group tiles by hop distance from *start_tile*, up to *max_depth*.

    *adjacency* is either a finalised ``(N, 6)`` array or a mapping such
    as :meth:`TileGrid.tile_adjacency`.  Each ring is sorted; rings stop
    early once the whole component has been reached.
    """
    if max_depth < 0:
        raise ValueError("max_depth must be >= 0")
    if isinstance(adjacency, np.ndarray):
        adjacency = adjacency_map(adjacency)

    distance = {start_tile: 0}
    rings: Dict[int, List[int]] = {0: [start_tile]}
    while len(rings) <= max_depth:
        depth = len(rings)
        reached = {
            n
            for tile_id in rings[depth - 1]
            for n in adjacency.get(tile_id, ())
            if n not in distance
        }
        if not reached:
            break
        distance.update(dict.fromkeys(reached, depth))
        rings[depth] = sorted(reached)
    return rings
