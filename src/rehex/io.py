from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Tuple, Union

import numpy as np

from .errors import MalformedIndicesError


PathLike = Union[str, Path]


def load_indices(path: PathLike) -> Tuple[np.ndarray, Optional[int]]:
    """Read a triangle index list from disk.

    Accepts a ``.npy`` array, a JSON list of indices, or a JSON object
    ``{"indices": [...], "vertex_count": N}``.  Returns the flat indices
    and the vertex count when the file records one.
    """
    path = Path(path)
    if path.suffix == ".npy":
        return np.load(path).ravel(), None

    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, list):
        return np.asarray(data, dtype=np.int64).ravel(), None

    if not isinstance(data, dict) or "indices" not in data:
        raise MalformedIndicesError(f"{path} has no 'indices' list")

    vertex_count = data.get("vertex_count")
    indices = np.asarray(data["indices"], dtype=np.int64).ravel()
    return indices, int(vertex_count) if vertex_count is not None else None
