from __future__ import annotations

import numpy as np

from affine2d.utils.linalg import mat3
from affine2d.utils.types import ArrayLike, Mat3


def _cofactors(m: Mat3):
    """First-column cofactor terms shared by `determinant` and `inverse`."""
    t00 = m[4] * m[8] - m[5] * m[7]
    t10 = m[1] * m[8] - m[2] * m[7]
    t20 = m[1] * m[5] - m[2] * m[4]
    return t00, t10, t20

def determinant(m: ArrayLike) -> float:
    """
    Determinant of a row-major 3x3 matrix, expanded along the first column.
    """
    m = mat3(m)
    with np.errstate(over="ignore", invalid="ignore"):
        t00, t10, t20 = _cofactors(m)
        return float(m[0] * t00 - m[3] * t10 + m[6] * t20)

def inverse(m: ArrayLike) -> Mat3:
    """
    Invert a 3x3 matrix with the adjugate divided by the determinant.

    Parameters
    ----------
    m : (9,) or (3, 3) array_like
        Row-major matrix. It is not modified.

    Returns
    -------
    (9,) ndarray
        The inverse of `m`.

    Notes
    -----
    A singular matrix is not reported. The reciprocal of a zero determinant
    is inf, so every entry of the result ends up +/-inf or nan. No warning
    is emitted either.
    """
    m = mat3(m)
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        t00, t10, t20 = _cofactors(m)
        d = 1.0 / (m[0] * t00 - m[3] * t10 + m[6] * t20)
        return np.array([
            d * t00, -d * t10, d * t20,
            -d * (m[3] * m[8] - m[5] * m[6]),
            d * (m[0] * m[8] - m[2] * m[6]),
            -d * (m[0] * m[5] - m[2] * m[3]),
            d * (m[3] * m[7] - m[4] * m[6]),
            -d * (m[0] * m[7] - m[1] * m[6]),
            d * (m[0] * m[4] - m[1] * m[3]),
        ], dtype=float)
