# ndarray <-> Mat marshalling
# skelmat/schema/convert.py
from __future__ import annotations
import numpy as np

from skelmat.schema.mat import Mat

def from_ndarray(arr, copy: bool = True) -> Mat:
    """
    Convert a numpy array (or array-like) into a Mat.

    copy=True gives the Mat its own buffer. copy=False borrows the caller's
    buffer; the Mat must not outlive the call that created it. 1-D input
    becomes an n x 1 column, as a column vector would in OpenCV.
    """
    a = np.array(arr, copy=True) if copy else np.asarray(arr)
    if a.ndim == 0:
        raise TypeError("Cannot convert a scalar to a matrix")
    if a.ndim == 1:
        a = a.reshape(-1, 1)
    if a.ndim > 3:
        raise TypeError(f"Too many dimensions ({a.ndim}) for a matrix")
    return Mat(a)

def to_ndarray(mat: Mat) -> np.ndarray:
    """Hand the Mat's buffer over to the caller. The Mat should not be reused."""
    return mat.data
