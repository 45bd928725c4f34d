# skelmat/cv/preprocess.py
from __future__ import annotations
import cv2
import numpy as np

THRESH_MODES = {
    "binary": cv2.THRESH_BINARY,
    "binary_inv": cv2.THRESH_BINARY_INV,
}

def threshold(src: np.ndarray, thresh: float, maxval: float, mode: str = "binary") -> np.ndarray:
    """Per-channel fixed-level threshold; output has the input's shape and dtype."""
    _, dst = cv2.threshold(src, thresh, maxval, THRESH_MODES[mode])
    return dst

def all_ones_kernel(size: int) -> np.ndarray:
    return np.ones((size, size), np.uint8)

def morphology_open(src: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    """Erode then dilate with `kernel`, anchor at the kernel centre, one iteration."""
    return cv2.morphologyEx(src, cv2.MORPH_OPEN, kernel, anchor=(-1, -1), iterations=1)

def to_grayscale(src: np.ndarray) -> np.ndarray:
    """3-channel BGR → single-channel gray."""
    return cv2.cvtColor(src, cv2.COLOR_BGR2GRAY)
