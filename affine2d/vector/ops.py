from __future__ import annotations

import numpy as np

from affine2d.utils.types import Vec2

# Vectors shorter than this are treated as zero by `normalize`.
NORMALIZE_EPS: float = 1e-5

############################
# 2D VECTOR UTILITIES
############################

def dot(x1: float, y1: float, x2: float, y2: float) -> float:
    """Dot product of (x1, y1) and (x2, y2)."""
    return float(x1 * x2 + y1 * y2)

def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between the points (x1, y1) and (x2, y2)."""
    dx = np.float64(x1) - np.float64(x2)
    dy = np.float64(y1) - np.float64(y2)
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.sqrt(dx * dx + dy * dy))

def normalize(x: float, y: float) -> Vec2:
    """
    Scale (x, y) to unit length.

    Parameters
    ----------
    x, y : float
        Vector components.

    Returns
    -------
    (2,) ndarray
        The unit vector along (x, y), or exactly (0, 0) when the length is
        not greater than ``NORMALIZE_EPS`` (this includes a nan length).
    """
    length = distance(0.0, 0.0, x, y)
    if length > NORMALIZE_EPS:
        with np.errstate(invalid="ignore"):
            return np.array([np.float64(x) / length, np.float64(y) / length], dtype=float)
    return np.zeros(2)

def reflect(ix: float, iy: float, nx: float, ny: float) -> Vec2:
    """
    Reflect the incident vector (ix, iy) off a surface with normal (nx, ny).

    Computes I - 2 * dot(N, I) * N. The normal is used as given: pass a
    unit vector to get a mirror reflection.
    """
    d = dot(nx, ny, ix, iy)
    return np.array([
        ix - 2 * d * nx,
        iy - 2 * d * ny,
    ], dtype=float)
