"""Search for proper rotation axes.

Two searches are available:

* ``'z'``: rotations about axes parallel to z through the (x, y) position
  of each atom.  Folds 1 to size - 1 are tested.  Fold 1 is the identity,
  so it is found for every set of two or more atoms.

* ``'general'``: rotations about axes through the centroid.  Candidate
  directions are the coordinate axes, centroid-atom vectors,
  centroid-midpoint vectors and normals of the planes spanned by two atoms
  and the centroid.  Folds 2 to size are tested (fold 1 is always
  included for two or more atoms).
"""
from __future__ import annotations

import operator
from functools import reduce
from itertools import combinations
from math import pi
from typing import FrozenSet, Iterator, List, NamedTuple, Optional

import numpy as np

from molsym.point_groups.tools import (centroid, coincides, normalize,
                                       rotate_about_z, rotation_matrix)
from molsym.typing import Array1D, Array2D


class RotationSearch(NamedTuple):
    """Folds found by a rotation search.

    ``order`` is None if no axis could be tested (fewer than two atoms).
    ``trivial`` means that only the identity (fold 1) was found.
    """
    folds: FrozenSet[int]

    @property
    def order(self) -> Optional[int]:
        return max(self.folds) if self.folds else None

    @property
    def found(self) -> bool:
        return bool(self.folds)

    @property
    def trivial(self) -> bool:
        return self.order == 1


def z_pivot_folds(coords: Array2D, pivot: int, tol: float) -> FrozenSet[int]:
    """Folds n for which a 360/n degree rotation about a z-parallel axis
    through atom `pivot` maps the set onto itself."""
    return frozenset(
        n for n in range(1, len(coords))
        if coincides(rotate_about_z(coords, coords[pivot], 2 * pi / n),
                     coords, tol))


def candidate_axes(coords: Array2D, tol: float) -> List[Array1D]:
    """Unique directions through the centroid (see module docstring)."""
    shifted = coords - centroid(coords)
    vectors = [np.eye(3)[c] for c in range(3)]
    vectors.extend(shifted)
    for r1, r2 in combinations(shifted, 2):
        vectors.append(r1 + r2)
        vectors.append(np.cross(r1, r2))

    axes: List[Array1D] = []
    for vector in vectors:
        if np.linalg.norm(vector) < tol:
            continue
        axis = normalize(vector)
        if any(abs(abs(axis.dot(other)) - 1) < tol for other in axes):
            continue
        axes.append(axis)
    return axes


def axis_folds(coords: Array2D, axis: Array1D, tol: float) -> FrozenSet[int]:
    """Folds n for which a 360/n degree rotation about `axis` through the
    centroid maps the set onto itself."""
    center = centroid(coords)
    shifted = coords - center
    folds = []
    for n in range(2, len(coords) + 1):
        R = rotation_matrix(axis, 2 * pi / n)
        if coincides(shifted.dot(R.T) + center, coords, tol):
            folds.append(n)
    return frozenset(folds)


def search_rotations(coords: Array2D,
                     tol: float = 1e-6,
                     axes: str = 'z') -> RotationSearch:
    coords = np.asarray(coords, dtype=float).reshape((-1, 3))
    if len(coords) < 2:
        return RotationSearch(frozenset())

    if axes == 'z':
        # The search is over ordered pairs (i, j) of atoms, but only the
        # pivot i enters the rotation:
        folds: Iterator[FrozenSet[int]] = (
            z_pivot_folds(coords, i, tol) for i in range(len(coords)))
    elif axes == 'general':
        folds = (axis_folds(coords, axis, tol) | {1}
                 for axis in candidate_axes(coords, tol))
    else:
        raise ValueError(f'Unknown axes: {axes!r}')

    return RotationSearch(reduce(operator.or_, folds, frozenset()))


def find_rotation_order(coords: Array2D,
                        tol: float = 1e-6,
                        axes: str = 'z') -> Optional[int]:
    """Highest rotation fold found.  None for fewer than two atoms."""
    return search_rotations(coords, tol, axes).order
