"""rehex — per-vertex hex/pent tile adjacency from icosphere triangles.

Public API is organised into layers:

- **Core** — neighbour fans, batch adjacency builder, errors
- **Tiles** — tile models and the tile grid container
- **Queries** — board-style adjacency helpers
- **Diagnostics** — topology checks and reports
"""

# ── Core ────────────────────────────────────────────────────────────
from .fan import CAPACITY, FanState, NeighbourFan
from .adjacency import (
    ABSENT,
    accumulate_fans,
    build_adjacency,
    finalize_fans,
    neighbours,
    triangle_array,
)
from .errors import (
    IncompleteVertexError,
    MalformedIndicesError,
    OverlongFanError,
    RehexError,
    SelfAdjacencyError,
)
from .io import load_indices

# ── Tiles ───────────────────────────────────────────────────────────
from .models import Tile
from .tiles import TileGrid, build_tile_grid, corner_key

# ── Queries ─────────────────────────────────────────────────────────
from .algorithms import (
    adjacency_map,
    canonical_rotation,
    ring_tiles,
    same_cycle,
    shared_edge,
)

# ── Diagnostics ─────────────────────────────────────────────────────
from .diagnostics import (
    asymmetric_pairs,
    connected_component_count,
    degree_histogram,
    diagnostics_report,
    euler_characteristic,
)

__all__ = [
    # Core
    "CAPACITY",
    "FanState",
    "NeighbourFan",
    "ABSENT",
    "accumulate_fans",
    "build_adjacency",
    "finalize_fans",
    "neighbours",
    "triangle_array",
    "IncompleteVertexError",
    "MalformedIndicesError",
    "OverlongFanError",
    "RehexError",
    "SelfAdjacencyError",
    "load_indices",
    # Tiles
    "Tile",
    "TileGrid",
    "build_tile_grid",
    "corner_key",
    # Queries
    "adjacency_map",
    "canonical_rotation",
    "ring_tiles",
    "same_cycle",
    "shared_edge",
    # Diagnostics
    "asymmetric_pairs",
    "connected_component_count",
    "degree_histogram",
    "diagnostics_report",
    "euler_characteristic",
]
