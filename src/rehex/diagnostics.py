from __future__ import annotations

from collections import Counter
from typing import Dict, List, Tuple

import numpy as np

from .adjacency import ABSENT, ADJACENCY_DTYPE, neighbours


def degree_histogram(adjacency: np.ndarray) -> Dict[int, int]:
    """Number of vertices per neighbour count, e.g. ``{5: 12, 6: 150}``."""
    counts = Counter(len(neighbours(row)) for row in adjacency)
    return dict(sorted(counts.items()))


def asymmetric_pairs(adjacency: np.ndarray) -> List[Tuple[int, int]]:
    """Pairs ``(u, v)`` where *v* neighbours *u* but not the reverse."""
    rings = [set(neighbours(row)) for row in adjacency]
    pairs: List[Tuple[int, int]] = []
    for u, ring in enumerate(rings):
        for v in sorted(ring):
            if v >= len(rings) or u not in rings[v]:
                pairs.append((u, v))
    return pairs


def connected_component_count(adjacency: np.ndarray) -> int:
    """Number of connected tile groups (1 for a whole sphere)."""
    import scipy.sparse as sp
    from scipy.sparse.csgraph import connected_components

    adjacency = np.asarray(adjacency, dtype=ADJACENCY_DTYPE)
    n = adjacency.shape[0]
    if n == 0:
        return 0

    rows = np.repeat(np.arange(n), adjacency.shape[1])
    cols = adjacency.ravel()
    present = cols != np.uint64(ABSENT)
    graph = sp.coo_matrix(
        (np.ones(int(present.sum()), dtype=np.int8), (rows[present], cols[present].astype(np.int64))),
        shape=(n, n),
    ).tocsr()
    count, _ = connected_components(graph, directed=False)
    return int(count)


def euler_characteristic(adjacency: np.ndarray) -> int:
    """V − E + F of the triangle mesh implied by the fans.

    Every edge is counted from both ends and every triangle from all
    three corners, so a closed sphere gives 2.
    """
    degree_sum = sum(len(neighbours(row)) for row in adjacency)
    return len(adjacency) - degree_sum // 2 + degree_sum // 3


def diagnostics_report(adjacency: np.ndarray) -> Dict[str, object]:
    """Build a structured diagnostics report suitable for JSON export."""
    histogram = degree_histogram(adjacency)
    return {
        "vertices": len(adjacency),
        "pentagons": histogram.get(5, 0),
        "hexagons": histogram.get(6, 0),
        "degree_histogram": {str(k): v for k, v in histogram.items()},
        "asymmetric_pairs": len(asymmetric_pairs(adjacency)),
        "components": connected_component_count(adjacency),
        "euler_characteristic": euler_characteristic(adjacency),
    }
