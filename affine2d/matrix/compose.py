from __future__ import annotations

import numpy as np

from affine2d.matrix.builders import projection, rotation, scaling, translation
from affine2d.utils.linalg import mat3
from affine2d.utils.types import ArrayLike, Mat3


def multiply(a: ArrayLike, b: ArrayLike) -> Mat3:
    """
    Compose two matrices.

    The product is taken as ``B @ A`` on the 3x3 forms, summed left to
    right for each entry:

        out[r*3 + c] = b[r*3]*a[c] + b[r*3 + 1]*a[3 + c] + b[r*3 + 2]*a[6 + c]

    With row-vector points this means the returned matrix maps a point
    through `b` first and then through `a`:

        transform_point(multiply(a, b), p) == transform_point(a, transform_point(b, p))

    The combinators below rely on this order: ``translate(m, tx, ty)``
    applies the translation before `m`. Building a transform as
    ``project -> translate -> rotate -> scale`` therefore scales first and
    projects last. Swapping the operands changes the result for
    non-commuting transforms.

    Parameters
    ----------
    a, b : (9,) or (3, 3) array_like
        Row-major 3x3 matrices. Neither is modified.

    Returns
    -------
    (9,) ndarray
        The composed matrix.
    """
    a = mat3(a)
    b = mat3(b)
    with np.errstate(over="ignore", invalid="ignore"):
        return np.array([
            b[r * 3] * a[c] + b[r * 3 + 1] * a[3 + c] + b[r * 3 + 2] * a[6 + c]
            for r in range(3) for c in range(3)
        ], dtype=float)

def translate(m: ArrayLike, tx: float, ty: float) -> Mat3:
    """Compose `m` with a translation by (tx, ty)."""
    return multiply(m, translation(tx, ty))

def rotate(m: ArrayLike, angle: float) -> Mat3:
    """Compose `m` with a rotation by `angle` radians."""
    return multiply(m, rotation(angle))

def scale(m: ArrayLike, sx: float, sy: float) -> Mat3:
    """Compose `m` with a scaling by (sx, sy)."""
    return multiply(m, scaling(sx, sy))

def project(m: ArrayLike, width: float, height: float) -> Mat3:
    """Compose `m` with the pixel-to-clip-space projection of a width x height canvas."""
    return multiply(m, projection(width, height))
