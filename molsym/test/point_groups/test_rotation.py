import numpy as np
import pytest

from molsym.point_groups.rotation import (RotationSearch, candidate_axes,
                                          find_rotation_order,
                                          search_rotations)
from molsym.point_groups.tools import rotate_about_z, rotation_matrix


@pytest.mark.parametrize('n', [2, 3, 4, 5, 7])
def test_identity_is_always_found(n):
    coords = np.random.default_rng(n).normal(size=(n, 3))
    search = search_rotations(coords)
    assert search.found
    assert 1 in search.folds
    assert find_rotation_order(coords) >= 1


@pytest.mark.parametrize('n', [0, 1])
def test_too_few_atoms(n):
    search = search_rotations(np.ones((n, 3)))
    assert search == RotationSearch(frozenset())
    assert search.order is None
    assert not search.found
    assert not search.trivial
    assert search_rotations(np.ones((n, 3)), axes='general').order is None


def test_trivial(square):
    # 2-, 3- and 4-fold axes through a corner do not exist:
    search = search_rotations(square)
    assert search.folds == {1}
    assert search.trivial


def test_twofold_axis_through_atom():
    coords = [[4, 1, 1], [5, 2, 1], [6, 3, 1]]
    search = search_rotations(coords)
    assert search.folds == {1, 2}
    assert search.order == 2
    assert not search.trivial


def test_threefold_axis_through_atom():
    angles = np.arange(3) * 2 * np.pi / 3 + 0.1
    coords = [[0.5, -0.5, 2.0]]
    coords += [[0.5 + np.cos(a), -0.5 + np.sin(a), 2.0] for a in angles]
    assert find_rotation_order(coords) == 3


def test_z_search_keeps_z():
    # A 2-fold axis along x is not found by the z-search:
    coords = [[0, 1, 1], [0, -1, -1], [0, 0, 0]]
    assert find_rotation_order(coords) == 1


def test_general_search(square):
    assert find_rotation_order(square, axes='general') == 4
    assert find_rotation_order(square + [3, 4, 5], axes='general') == 4


def test_general_search_tilted_axis():
    # Twisted pairs with a 2-fold axis along z before the rotation:
    coords = np.array([[1.0, 0.0, 0.5],
                       [-1.0, 0.0, 0.5],
                       [0.3, 1.0, -0.5],
                       [-0.3, -1.0, -0.5]])
    R = rotation_matrix([1, 1, 0], 0.7)
    coords = coords.dot(R.T) + [0.1, 0.2, 0.3]
    assert search_rotations(coords, axes='general').folds == {1, 2}
    assert search_rotations(coords).trivial


def test_general_search_trivial():
    coords = [[0, 0, 0], [1, 0, 0], [0, 2, 0], [0, 0, 3]]
    search = search_rotations(coords, axes='general')
    assert search.trivial


def test_candidate_axes_are_unique(square):
    axes = candidate_axes(square, 1e-6)
    for i, a in enumerate(axes):
        assert np.linalg.norm(a) == pytest.approx(1)
        for b in axes[:i]:
            assert abs(a.dot(b)) < 1 - 1e-6


def test_unknown_axes():
    with pytest.raises(ValueError):
        search_rotations(np.zeros((2, 3)), axes='x')


def test_rotate_about_z():
    coords = np.array([[2.0, 1.0, 7.0]])
    rotated = rotate_about_z(coords, [1.0, 1.0, -3.0], np.pi / 2)
    assert rotated == pytest.approx(np.array([[1.0, 2.0, 7.0]]))


def test_rotation_matrix_is_counterclockwise():
    R = rotation_matrix([0, 0, 1], np.pi / 2)
    assert R.dot([1, 0, 0]) == pytest.approx([0, 1, 0])
    assert R.dot(R.T) == pytest.approx(np.eye(3))
