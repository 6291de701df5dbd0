from __future__ import annotations

import numpy as np
from numpy.typing import NDArray, ArrayLike

Vec2 = NDArray[np.floating]  # intended shape (2,)
Mat3 = NDArray[np.floating]  # intended shape (9,), row-major 3x3

__all__ = [
    "ArrayLike",
    "Vec2", "Mat3",
]
