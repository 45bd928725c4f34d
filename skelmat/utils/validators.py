# input validators
# skelmat/utils/validators.py
from __future__ import annotations
from typing import List
import numpy as np

from skelmat.schema.errors import PreconditionViolation

MIN_THIN_SIDE = 4

def _channels(img: np.ndarray) -> int:
    return 1 if img.ndim == 2 else int(img.shape[-1])

def validate_binary_image(img) -> List[str]:
    """Single-channel 8-bit image, at least 4x4."""
    err = []
    if not isinstance(img, np.ndarray):
        return [f"expected a numpy array, got {type(img).__name__}"]
    if img.ndim != 2:
        err.append(f"thinning needs a single-channel 2-D image, got shape {img.shape}")
    if img.dtype != np.uint8:
        err.append(f"thinning needs an 8-bit unsigned image, got {img.dtype}")
    if img.ndim >= 2 and (img.shape[0] < MIN_THIN_SIDE or img.shape[1] < MIN_THIN_SIDE):
        err.append(f"thinning needs at least {MIN_THIN_SIDE}x{MIN_THIN_SIDE} pixels, "
                   f"got {img.shape[0]}x{img.shape[1]}")
    return err

def validate_color_image(img) -> List[str]:
    err = []
    if not isinstance(img, np.ndarray):
        return [f"expected a numpy array, got {type(img).__name__}"]
    if img.ndim != 3 or _channels(img) != 3:
        err.append(f"expected a 3-channel BGR image, got shape {img.shape}")
    if img.dtype != np.uint8:
        err.append(f"expected an 8-bit unsigned image, got {img.dtype}")
    return err

def require(errors: List[str]) -> None:
    if errors:
        raise PreconditionViolation("; ".join(errors))
