import math

import numpy as np

from molsym.typing import Array1D, Array2D, ArrayLike


def centroid(coords: Array2D) -> Array1D:
    """Arithmetic mean of the positions."""
    return np.asarray(coords, dtype=float).mean(axis=0)


def coincides(points: Array2D, coords: Array2D, tol: float) -> bool:
    """Check that every point matches some position in `coords`.

    Two positions match if all three cartesian components differ by
    less than `tol`.
    """
    points = np.asarray(points, dtype=float)
    coords = np.asarray(coords, dtype=float)
    if len(points) == 0:
        return True
    if len(coords) == 0:
        return False
    close_pc = (abs(points[:, None] - coords[None]) < tol).all(axis=2)
    return bool(close_pc.any(axis=1).all())


def rotate_about_z(coords: Array2D, pivot: ArrayLike, theta: float) -> Array2D:
    """Rotate (x, y) by theta radians about pivot's (x, y).  Keep z."""
    coords = np.asarray(coords, dtype=float)
    c = math.cos(theta)
    s = math.sin(theta)
    R = np.array([[c, -s],
                  [s, c]])
    xy0 = np.asarray(pivot, dtype=float)[:2]
    rotated = coords.copy()
    rotated[:, :2] = (coords[:, :2] - xy0).dot(R.T) + xy0
    return rotated


def normalize(vector):
    if isinstance(vector, str):
        vector = {'x': [1, 0, 0], 'y': [0, 1, 0], 'z': [0, 0, 1]}[vector]
    vector = np.asarray(vector, dtype=float)
    return vector / np.linalg.norm(vector)


def rotation_matrix(axis, theta):
    """
    Return the rotation matrix associated with
    counterclockwise rotation about the given axis by theta radians.
    """
    axis = np.asarray(axis, dtype=float)
    axis = axis / math.sqrt(np.dot(axis, axis))
    a = math.cos(theta / 2.0)
    b, c, d = -axis * math.sin(theta / 2.0)
    aa, bb, cc, dd = a * a, b * b, c * c, d * d
    bc, ad, ac, ab, bd, cd = b * c, a * d, a * c, a * b, b * d, c * d
    return np.array([[aa + bb - cc - dd, 2 * (bc + ad), 2 * (bd - ac)],
                     [2 * (bc - ad), aa + cc - bb - dd, 2 * (cd + ab)],
                     [2 * (bd + ac), 2 * (cd - ab), aa + dd - bb - cc]])
