import json

import numpy as np
import pytest

from rehex.errors import MalformedIndicesError
from rehex.io import load_indices


def test_load_object(tmp_path, icosahedron):
    indices, count = icosahedron
    path = tmp_path / "mesh.json"
    path.write_text(json.dumps({"indices": indices, "vertex_count": count}), encoding="utf-8")

    loaded, vertex_count = load_indices(path)
    assert vertex_count == 12
    assert loaded.tolist() == indices


def test_load_bare_list(tmp_path, icosahedron):
    indices, _ = icosahedron
    path = tmp_path / "mesh.json"
    path.write_text(json.dumps(indices), encoding="utf-8")

    loaded, vertex_count = load_indices(str(path))
    assert vertex_count is None
    assert loaded.dtype == np.int64
    assert loaded.tolist() == indices


def test_load_npy(tmp_path, icosahedron):
    indices, _ = icosahedron
    path = tmp_path / "mesh.npy"
    np.save(path, np.array(indices, dtype=np.uint32).reshape(-1, 3))

    loaded, vertex_count = load_indices(path)
    assert vertex_count is None
    assert loaded.tolist() == indices


@pytest.mark.parametrize("payload", [{"vertex_count": 12}, "mesh"])
def test_load_without_indices(tmp_path, payload):
    path = tmp_path / "mesh.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(MalformedIndicesError, match="'indices'"):
        load_indices(path)
