import json

import pytest

from meshes import flatten
from rehex.cli import build_parser, main


@pytest.fixture
def mesh_file(tmp_path, icosphere_mesh):
    indices, count = icosphere_mesh
    path = tmp_path / "mesh.json"
    path.write_text(json.dumps({"indices": indices, "vertex_count": count}), encoding="utf-8")
    return path


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_check_ok(mesh_file, capsys):
    main(["check", "--in", str(mesh_file)])
    out = capsys.readouterr().out
    assert "vertices: 162" in out
    assert "pentagons: 12" in out
    assert "euler_characteristic: 2" in out
    assert out.strip().endswith("OK")


def test_check_infers_vertex_count(tmp_path, icosahedron, capsys):
    indices, _ = icosahedron
    path = tmp_path / "mesh.json"
    path.write_text(json.dumps(indices), encoding="utf-8")
    main(["--verbose", "check", "--in", str(path)])
    assert "vertices: 12" in capsys.readouterr().out


def test_check_self_adjacent_fails(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(flatten([(0, 1, 2), (0, 2, 3), (0, 3, 4), (0, 4, 0)])), encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["check", "--in", str(path)])
    assert exc.value.code == 1
    assert "Vertex 0 is adjacent to itself" in capsys.readouterr().out


def test_check_partial_triangle(tmp_path, icosahedron, capsys):
    indices, count = icosahedron
    path = tmp_path / "mesh.json"
    path.write_text(json.dumps({"indices": indices + [0], "vertex_count": count}), encoding="utf-8")

    with pytest.raises(SystemExit):
        main(["check", "--in", str(path)])
    assert "multiple of 3" in capsys.readouterr().out

    main(["check", "--in", str(path), "--lenient"])
    assert "OK" in capsys.readouterr().out


def test_ring(tmp_path, icosahedron, capsys):
    indices, count = icosahedron
    path = tmp_path / "mesh.json"
    path.write_text(json.dumps({"indices": indices, "vertex_count": count}), encoding="utf-8")

    main(["ring", "--in", str(path), "--tile", "0", "--depth", "1"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["ring 0: 0", "ring 1: 1 5 7 10 11"]


def test_ring_unknown_tile(mesh_file, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["ring", "--in", str(mesh_file), "--tile", "999"])
    assert exc.value.code == 1
    assert "outside" in capsys.readouterr().out


@pytest.mark.parametrize("value", ["2", "7"])
def test_check_bad_min_neighbours(mesh_file, capsys, value):
    with pytest.raises(SystemExit) as exc:
        main(["check", "--in", str(mesh_file), "--min-neighbours", value])
    assert exc.value.code == 1
    assert "min_neighbours must be between 3 and 6" in capsys.readouterr().out


def test_check_missing_indices_key(tmp_path, capsys):
    path = tmp_path / "mesh.json"
    path.write_text(json.dumps({"vertex_count": 12}), encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["check", "--in", str(path)])
    assert exc.value.code == 1
    assert "'indices'" in capsys.readouterr().out
