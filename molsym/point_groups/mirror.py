"""Mirror planes containing two coordinate axes."""
from typing import List

import numpy as np

from molsym.point_groups.tools import coincides
from molsym.typing import Array2D

# Plane name and the sign change of the reflection:
REFLECTIONS = [('xy', np.array([1.0, 1.0, -1.0])),
               ('xz', np.array([1.0, -1.0, 1.0])),
               ('yz', np.array([-1.0, 1.0, 1.0]))]


def mirror_planes(coords: Array2D, tol: float = 1e-6) -> List[str]:
    """Names of the coordinate planes that are mirror planes."""
    coords = np.asarray(coords, dtype=float).reshape((-1, 3))
    return [name for name, signs in REFLECTIONS
            if coincides(coords * signs, coords, tol)]


def has_mirror_plane(coords: Array2D, tol: float = 1e-6) -> bool:
    coords = np.asarray(coords, dtype=float).reshape((-1, 3))
    return any(coincides(coords * signs, coords, tol)
               for name, signs in REFLECTIONS)
