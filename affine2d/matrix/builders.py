from __future__ import annotations

import numpy as np

from affine2d.utils.types import Mat3

############################
# MATRIX BUILDERS
############################
#
# Every builder returns a fresh float64 array of shape (9,) in row-major
# order. Points are row vectors, so a point (x, y) is mapped by
# [x, y, 1] @ M and the translation lives in the last row.

def identity() -> Mat3:
    """Return the 3x3 identity matrix."""
    return np.array([
        1.0, 0.0, 0.0,
        0.0, 1.0, 0.0,
        0.0, 0.0, 1.0,
    ])

def translation(tx: float, ty: float) -> Mat3:
    """
    Build a translation matrix.

    Parameters
    ----------
    tx, ty : float
        Offsets along x and y.

    Returns
    -------
    (9,) ndarray
        Matrix mapping (x, y) to (x + tx, y + ty).
    """
    return np.array([
        1.0, 0.0, 0.0,
        0.0, 1.0, 0.0,
        tx,  ty,  1.0,
    ], dtype=float)

def rotation(angle: float) -> Mat3:
    """
    Build a rotation matrix for `angle` radians.

    The upper-left block is [[cos, -sin], [sin, cos]]. Applied with
    `transform_point`, the point (1, 0) goes to (cos, -sin): on a pixel
    canvas with y pointing down this turns counterclockwise on screen.
    """
    c = np.cos(angle)
    s = np.sin(angle)
    return np.array([
        c,   -s,   0.0,
        s,    c,   0.0,
        0.0,  0.0, 1.0,
    ], dtype=float)

def scaling(sx: float, sy: float) -> Mat3:
    """Build a scaling matrix with factors `sx` and `sy`."""
    return np.array([
        sx,  0.0, 0.0,
        0.0, sy,  0.0,
        0.0, 0.0, 1.0,
    ], dtype=float)

def projection(width: float, height: float) -> Mat3:
    """
    Build the matrix converting pixel coordinates to clip space.

    Pixel space has its origin at the top-left corner with y growing
    downward; clip space spans [-1, 1] on both axes with y growing upward.
    So (0, 0) maps to (-1, 1) and (width, height) maps to (1, -1).

    Parameters
    ----------
    width, height : float
        Canvas size in pixels.

    Returns
    -------
    (9,) ndarray
        The projection matrix.

    Notes
    -----
    A zero `width` or `height` is not rejected: the matching scale factor
    becomes +/-inf (or nan) following IEEE-754 division.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        sx = 2.0 / np.float64(width)
        sy = -2.0 / np.float64(height)
    # y is flipped so that 0 is at the top
    return np.array([
        sx,   0.0, 0.0,
        0.0,  sy,  0.0,
        -1.0, 1.0, 1.0,
    ], dtype=float)
