from typing import Any, Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

RealNDArray = NDArray[np.float64]

Array1D = RealNDArray
Array2D = RealNDArray

Position = Tuple[float, float, float]

__all__ = ['Any', 'ArrayLike', 'Array1D', 'Array2D', 'Position']
