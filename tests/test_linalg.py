import numpy as np
import pytest

from affine2d.utils.linalg import vec2, mat3


def test_vec2_accepts_shape_2():
    v = vec2([1, 2])
    assert isinstance(v, np.ndarray)
    assert v.shape == (2,)
    assert v.dtype == float


def test_vec2_rejects_wrong_shape():
    with pytest.raises(ValueError):
        vec2([1, 2, 3])
    with pytest.raises(ValueError):
        vec2([[1, 2]])
    with pytest.raises(ValueError):
        vec2(np.zeros((2, 1)))


def test_mat3_accepts_flat_sequence():
    m = mat3((1, 2, 3, 4, 5, 6, 7, 8, 9))
    assert isinstance(m, np.ndarray)
    assert m.shape == (9,)
    assert m.dtype == float


def test_mat3_flattens_square_row_major():
    M = np.arange(9, dtype=float).reshape(3, 3)
    m = mat3(M)
    assert m.shape == (9,)
    # m[r*3 + c] == M[r][c]
    assert m[1 * 3 + 2] == M[1, 2]
    assert m[2 * 3 + 0] == M[2, 0]


def test_mat3_rejects_wrong_shape():
    with pytest.raises(ValueError):
        mat3(np.zeros(8))
    with pytest.raises(ValueError):
        mat3(np.zeros((2, 2)))
    with pytest.raises(ValueError):
        mat3(np.zeros((4, 4)))
