import pytest

from meshes import ICOSAHEDRON_FACES, flatten, icosphere


@pytest.fixture
def icosahedron():
    return flatten(ICOSAHEDRON_FACES), 12


@pytest.fixture
def icosphere_faces():
    return icosphere(2)


@pytest.fixture
def icosphere_mesh(icosphere_faces):
    faces, count = icosphere_faces
    return flatten(faces), count
