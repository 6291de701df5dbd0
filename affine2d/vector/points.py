from __future__ import annotations

import numpy as np

from affine2d.utils.linalg import mat3, vec2
from affine2d.utils.types import ArrayLike, Vec2


def transform_point(m: ArrayLike, v: ArrayLike) -> Vec2:
    """
    Apply a 3x3 matrix to a 2D point.

    The point is extended to the homogeneous row vector (x, y, 1) and
    multiplied by `m`; the result is divided by its third component

        w = x * m[2] + y * m[5] + m[8]

    For affine matrices (last column (0, 0, 1)) w is 1. Otherwise the
    division acts as a perspective divide.

    Parameters
    ----------
    m : (9,) or (3, 3) array_like
        Row-major transform matrix.
    v : (2,) array_like
        Point (x, y).

    Returns
    -------
    (2,) ndarray
        The transformed point. A zero w gives +/-inf or nan components.
    """
    m = mat3(m)
    v0, v1 = vec2(v)
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        d = v0 * m[2] + v1 * m[5] + m[8]
        return np.array([
            (v0 * m[0] + v1 * m[3] + m[6]) / d,
            (v0 * m[1] + v1 * m[4] + m[7]) / d,
        ], dtype=float)
