# skelmat/ops/matrix.py
from __future__ import annotations
import numpy as np

from skelmat.schema.convert import from_ndarray, to_ndarray
from skelmat.schema.errors import PreconditionViolation, ShapeMismatchError
from skelmat.schema.mat import Mat

FIXED_ROWS, FIXED_COLS = 240, 320

def _check_conformable(left: Mat, right: Mat):
    for name, m in (("left", left), ("right", right)):
        if m.channels != 1:
            raise PreconditionViolation(
                f"matrix multiplication needs single-channel operands; {name} is {m.type}")
    if left.cols != right.rows:
        raise ShapeMismatchError(left.shape, right.shape)

def dot2(left: Mat, right: Mat) -> Mat:
    """Matrix product of two Mats. Raises ShapeMismatchError before computing anything."""
    _check_conformable(left, right)
    # (rows, cols, 1) is still a plain matrix
    a = left.data.reshape(left.shape)
    b = right.data.reshape(right.shape)
    return Mat(np.matmul(a, b))

def dot(left, right) -> np.ndarray:
    """
    Matrix product of two array-likes, returned as a new ndarray.

    1-D operands are treated as column vectors.
    """
    lmat = from_ndarray(left, copy=False)
    rmat = from_ndarray(right, copy=False)
    return to_ndarray(dot2(lmat, rmat))

def make_fixed_matrix() -> np.ndarray:
    """240x320 three-channel 16-bit zero matrix (CV_16UC3)."""
    return to_ndarray(Mat.zeros(FIXED_ROWS, FIXED_COLS, depth="16U", channels=3))

def increment_elements_by_one(matrix) -> np.ndarray:
    """
    New array with every element (every channel) increased by 1.0.
    Integer dtypes saturate at their maximum; the input is left untouched.
    """
    shape = np.shape(matrix)
    a = from_ndarray(matrix, copy=True).data
    if np.issubdtype(a.dtype, np.integer):
        top = np.iinfo(a.dtype).max
        np.add(a, 1, out=a, where=a < top)
    else:
        a += a.dtype.type(1.0)
    return to_ndarray(Mat(a)).reshape(shape)
