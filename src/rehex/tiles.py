"""Hex/pent tile topology derived from a finished adjacency array.

Each mesh vertex becomes a tile and each mesh triangle becomes a tile
corner shared by the three tiles around it: the dual of the triangle
mesh, taken purely combinatorially.  Positions are left to the caller.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Optional

import numpy as np

from .adjacency import neighbours
from .models import Corner, Tile


_KIND_BY_SIDES = {5: "pent", 6: "hex"}


def corner_key(a: int, b: int, c: int) -> Corner:
    """Triangle key shared by all three of its corners.

    Rotates ``(a, b, c)`` so the smallest index comes first, which keeps
    the winding and gives the same key from every corner.
    """
    tri = (a, b, c)
    i = tri.index(min(tri))
    return tri[i:] + tri[:i]


class TileGrid:
    """Container for the tiles of one sphere."""

    def __init__(self, tiles: Iterable[Tile], metadata: Optional[dict] = None) -> None:
        self.tiles: Dict[int, Tile] = {t.id: t for t in tiles}
        self.metadata = metadata or {}

    def __len__(self) -> int:
        return len(self.tiles)

    def pentagons(self) -> List[Tile]:
        return [t for t in self.tiles.values() if t.kind == "pent"]

    def hexagons(self) -> List[Tile]:
        return [t for t in self.tiles.values() if t.kind == "hex"]

    def corner_count(self) -> int:
        return len({corner for t in self.tiles.values() for corner in t.corner_ids})

    def tile_adjacency(self) -> Dict[int, List[int]]:
        """Sorted neighbour lists, the shape :func:`ring_tiles` expects."""
        return {tid: sorted(t.neighbor_ids) for tid, t in self.tiles.items()}

    def validate(self) -> list[str]:
        errors: list[str] = []
        corner_use: Dict[Corner, int] = defaultdict(int)

        for tile in sorted(self.tiles.values(), key=lambda t: t.id):
            errors.extend(tile.validate())
            for nid in tile.neighbor_ids:
                other = self.tiles.get(nid)
                if other is None:
                    errors.append(f"Tile {tile.id} references missing tile {nid}")
                elif tile.id not in other.neighbor_ids:
                    errors.append(f"Tile {tile.id} neighbours {nid} but not the reverse")
            for corner in tile.corner_ids:
                corner_use[corner] += 1

        for corner, count in sorted(corner_use.items()):
            if count != 3:
                errors.append(f"Corner {corner} is shared by {count} tiles, expected 3")

        return errors


def build_tile_grid(adjacency: np.ndarray) -> TileGrid:
    """Build a :class:`TileGrid` from :func:`~rehex.adjacency.build_adjacency` output."""
    tiles: List[Tile] = []
    for vertex, row in enumerate(adjacency):
        ring = neighbours(row)
        n = len(ring)
        corners = tuple(corner_key(vertex, ring[i], ring[(i + 1) % n]) for i in range(n))
        tiles.append(Tile(
            id=vertex,
            kind=_KIND_BY_SIDES.get(n, "other"),
            neighbor_ids=tuple(ring),
            corner_ids=corners,
        ))
    return TileGrid(tiles, metadata={"generator": "rehex", "tiles": len(tiles)})
