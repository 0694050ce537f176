"""Pairwise distance signatures."""
from typing import Dict

import numpy as np
from scipy.spatial.distance import pdist

from molsym.typing import Array1D, Array2D


def distance_profile(coords: Array2D) -> Array1D:
    """All k(k-1)/2 pairwise Euclidean distances."""
    coords = np.asarray(coords, dtype=float).reshape((-1, 3))
    if len(coords) < 2:
        return np.zeros(0)
    return pdist(coords)


def rounded_distance_counts(coords: Array2D,
                            decimals: int = 6) -> Dict[float, int]:
    """Multiplicity of each pairwise distance rounded to `decimals`."""
    distances = distance_profile(coords).round(decimals)
    values, counts = np.unique(distances, return_counts=True)
    return {float(value): int(count) for value, count in zip(values, counts)}
