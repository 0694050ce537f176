import numpy as np
import pytest

from molsym.point_groups.distances import (distance_profile,
                                           rounded_distance_counts)
from molsym.point_groups.shapes import is_octahedral, is_tetrahedral


def test_distance_profile(tetrahedron):
    d = distance_profile(tetrahedron)
    assert len(d) == 6
    assert d == pytest.approx(np.sqrt(8))
    assert len(distance_profile(np.zeros((7, 3)))) == 21
    assert len(distance_profile(np.zeros((1, 3)))) == 0


def test_octahedron_distance_counts(octahedron):
    counts = rounded_distance_counts(octahedron)
    assert sorted(counts) == pytest.approx([np.sqrt(2), 2.0], abs=1e-6)
    assert [counts[d] for d in sorted(counts)] == [12, 3]


def test_tetrahedron(tetrahedron):
    assert is_tetrahedral(tetrahedron)
    assert is_tetrahedral(tetrahedron * 2.5 + [1, 2, 3])
    assert not is_octahedral(tetrahedron)


def test_distorted_tetrahedron(tetrahedron):
    tetrahedron[0, 0] += 1e-3
    assert not is_tetrahedral(tetrahedron)


def test_tetrahedron_absolute_tolerance(tetrahedron):
    tetrahedron[0, 0] += 1e-9
    assert is_tetrahedral(tetrahedron)


def test_octahedron(octahedron):
    assert is_octahedral(octahedron)
    assert is_octahedral(octahedron * 1.7 - [0.5, 0.0, 3.0])
    assert not is_tetrahedral(octahedron)


def test_rotated_octahedron(octahedron):
    c = np.cos(0.3)
    s = np.sin(0.3)
    R = np.array([[c, -s, 0], [s, c, 0], [0, 0, 1]])
    assert is_octahedral(octahedron.dot(R.T))


def test_wrong_number_of_points(tetrahedron, octahedron):
    assert not is_tetrahedral(tetrahedron[:3])
    assert not is_tetrahedral(octahedron)
    assert not is_octahedral(octahedron[:5])
    assert not is_octahedral(np.zeros((0, 3)))


def test_trigonal_prism_is_not_octahedral():
    angles = np.arange(3) * 2 * np.pi / 3
    ring = np.array([np.cos(angles), np.sin(angles), np.zeros(3)]).T
    prism = np.concatenate([ring + [0, 0, 1], ring - [0, 0, 1]])
    assert not is_octahedral(prism)
