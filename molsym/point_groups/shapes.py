"""Detection of regular tetrahedra and octahedra."""
import numpy as np

from molsym.point_groups.distances import (distance_profile,
                                           rounded_distance_counts)
from molsym.typing import Array2D


def is_tetrahedral(coords: Array2D, tol: float = 1e-6) -> bool:
    """Four points with six equal distances."""
    coords = np.asarray(coords, dtype=float)
    if len(coords) != 4:
        return False
    d = distance_profile(coords)
    return bool((abs(d - d[0]) < tol).all())


def is_octahedral(coords: Array2D, decimals: int = 6) -> bool:
    """Six points with twelve equal edges and three equal diagonals.

    Distances are rounded to `decimals` before they are compared.
    """
    coords = np.asarray(coords, dtype=float)
    if len(coords) != 6:
        return False
    counts = rounded_distance_counts(coords, decimals)
    return sorted(counts.values()) == [3, 12]
