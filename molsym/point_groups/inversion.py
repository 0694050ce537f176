"""Inversion-center tests.

Two tests are implemented:

literal:
    For every atom c, ``c - 2k`` must lie within the tolerance of c itself
    (k is the centroid).  This only happens when the centroid is at the
    origin, so it is really a test of the centering of the group.
    Classifications produced with this test are kept as the default.

textbook:
    For every atom c, the inverted position ``2k - c`` must coincide with
    an atom of the group.
"""
import numpy as np

from molsym.point_groups.tools import centroid, coincides
from molsym.typing import Array2D

INVERSION_METHODS = ['literal', 'textbook']


def has_inversion_center(coords: Array2D,
                         tol: float = 1e-6,
                         method: str = 'literal') -> bool:
    coords = np.asarray(coords, dtype=float).reshape((-1, 3))
    if len(coords) == 0:
        return False
    k = centroid(coords)
    if method == 'literal':
        return bool((abs((coords - 2 * k) - coords) < tol).all())
    if method == 'textbook':
        return coincides(2 * k - coords, coords, tol)
    raise ValueError(f'Unknown inversion method: {method!r}.  '
                     f'Must be one of {INVERSION_METHODS}')
