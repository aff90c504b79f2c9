from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


Corner = Tuple[int, int, int]


@dataclass(frozen=True)
class Tile:
    """One hexagonal or pentagonal tile centred on a mesh vertex.

    *id* is the mesh vertex index.
    *neighbor_ids* lists the neighbouring tiles in winding order.
    *corner_ids* holds one triangle key per corner; corner ``i`` sits
    between ``neighbor_ids[i]`` and ``neighbor_ids[i + 1]``.
    """

    id: int
    kind: str
    neighbor_ids: tuple[int, ...]
    corner_ids: tuple[Corner, ...] = field(default_factory=tuple)

    def side_count(self) -> int:
        return len(self.neighbor_ids)

    def validate(self) -> list[str]:
        errors: list[str] = []
        if len(set(self.neighbor_ids)) != self.side_count():
            errors.append(f"Tile {self.id} has repeated neighbour ids")
        if self.id in self.neighbor_ids:
            errors.append(f"Tile {self.id} lists itself as a neighbour")
        if self.corner_ids and len(self.corner_ids) != self.side_count():
            errors.append(
                f"Tile {self.id} has {len(self.corner_ids)} corners but {self.side_count()} sides"
            )
        if self.kind == "pent" and self.side_count() != 5:
            errors.append(f"Tile {self.id} is pent but has {self.side_count()} sides")
        if self.kind == "hex" and self.side_count() != 6:
            errors.append(f"Tile {self.id} is hex but has {self.side_count()} sides")
        return errors
