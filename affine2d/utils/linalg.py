import numpy as np

from affine2d.utils.types import ArrayLike, Mat3, Vec2

############################
# COERCION UTILITIES
############################

def vec2(v: ArrayLike) -> Vec2:
    v = np.asarray(v, dtype=float)
    if v.shape != (2,):
        raise ValueError(f"Expected a 2-vector with shape (2,), got {v.shape}")
    return v

def mat3(m: ArrayLike) -> Mat3:
    """
    Coerce a 3x3 matrix to the flat row-major layout used across affine2d.

    Accepts any 9-element sequence, or a (3, 3) array which is flattened
    row by row so that ``out[r * 3 + c] == m[r][c]``.

    Raises ValueError for any other shape.
    """
    m = np.asarray(m, dtype=float)
    if m.shape == (3, 3):
        return m.reshape(9)
    if m.shape != (9,):
        raise ValueError(f"Expected a 3x3 matrix with shape (9,) or (3, 3), got {m.shape}")
    return m
