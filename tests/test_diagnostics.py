"""Tests for diagnostics module."""

import numpy as np

from meshes import ICOSAHEDRON_FACES, flatten
from rehex.adjacency import build_adjacency
from rehex.diagnostics import (
    asymmetric_pairs,
    connected_component_count,
    degree_histogram,
    diagnostics_report,
    euler_characteristic,
)


def _two_icosahedra():
    second = [(a + 12, b + 12, c + 12) for a, b, c in ICOSAHEDRON_FACES]
    return build_adjacency(flatten(ICOSAHEDRON_FACES + second), 24)


def test_degree_histogram(icosphere_mesh):
    indices, count = icosphere_mesh
    adjacency = build_adjacency(indices, count)
    assert degree_histogram(adjacency) == {5: 12, 6: 150}


def test_sphere_is_symmetric(icosphere_mesh):
    indices, count = icosphere_mesh
    assert asymmetric_pairs(build_adjacency(indices, count)) == []


def test_asymmetric_pairs_found(icosahedron):
    indices, count = icosahedron
    adjacency = build_adjacency(indices, count).copy()
    adjacency[0, 0] = 3
    pairs = asymmetric_pairs(adjacency)
    assert (0, 3) in pairs


def test_connected_components(icosphere_mesh):
    indices, count = icosphere_mesh
    assert connected_component_count(build_adjacency(indices, count)) == 1
    assert connected_component_count(_two_icosahedra()) == 2
    assert connected_component_count(np.zeros((0, 6), dtype=np.uint64)) == 0


def test_euler_characteristic(icosphere_mesh):
    indices, count = icosphere_mesh
    assert euler_characteristic(build_adjacency(indices, count)) == 2
    assert euler_characteristic(_two_icosahedra()) == 4


def test_diagnostics_report_smoke(icosahedron):
    indices, count = icosahedron
    report = diagnostics_report(build_adjacency(indices, count))
    assert report["vertices"] == 12
    assert report["pentagons"] == 12
    assert report["hexagons"] == 0
    assert report["degree_histogram"] == {"5": 12}
    assert report["asymmetric_pairs"] == 0
    assert report["components"] == 1
    assert report["euler_characteristic"] == 2
