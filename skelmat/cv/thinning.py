"""
Zhang–Suen thinning of binary images.

Each pass runs two sub-iterations. A sub-iteration classifies every interior
pixel from its 8 neighbours, clockwise from north:

    nw no ne
    we me ea
    sw so se

    A  = number of 0→1 transitions in (no, ne, ea, se, so, sw, we, nw, no)
    B  = no + ne + ea + se + so + sw + we + nw
    iter 0: m1 = no·ea·so, m2 = ea·so·we
    iter 1: m1 = no·ea·we, m2 = no·so·we

and removes it when A == 1, 2 <= B <= 6, m1 == 0 and m2 == 0. The one-pixel
image border is never classified and never changes.

Reference:
Zhang, T. Y., & Suen, C. Y. (1984). "A fast parallel algorithm for thinning
digital patterns." Communications of the ACM, 27(3), 236-239.
"""
from __future__ import annotations
from typing import Tuple
import cv2
import numpy as np
from loguru import logger

from skelmat.schema.errors import PreconditionViolation
from skelmat.utils.validators import require, validate_binary_image


def _neighbours(img: np.ndarray) -> Tuple[np.ndarray, ...]:
    """Shifted views of the interior's 8 neighbours, clockwise from north."""
    return (
        img[:-2, 1:-1],  # no
        img[:-2, 2:],    # ne
        img[1:-1, 2:],   # ea
        img[2:, 2:],     # se
        img[2:, 1:-1],   # so
        img[2:, :-2],    # sw
        img[1:-1, :-2],  # we
        img[:-2, :-2],   # nw
    )


def deletion_marker(img: np.ndarray, iter: int) -> np.ndarray:
    """
    Marker of pixels one sub-iteration would remove.

    Reads `img` only; the returned uint8 array has img's shape, 1 where a
    pixel is marked and 0 elsewhere (always 0 on the border).
    """
    require(validate_binary_image(img))
    if iter not in (0, 1):
        raise PreconditionViolation(f"sub-iteration must be 0 or 1, got {iter}")

    snap = img.astype(np.int32)
    no, ne, ea, se, so, sw, we, nw = ring = _neighbours(snap)

    A = np.zeros_like(no)
    for a, b in zip(ring, ring[1:] + ring[:1]):
        A += (a == 0) & (b == 1)
    B = no + ne + ea + se + so + sw + we + nw
    if iter == 0:
        m1 = no * ea * so
        m2 = ea * so * we
    else:
        m1 = no * ea * we
        m2 = no * so * we

    marker = np.zeros(img.shape, np.uint8)
    marker[1:-1, 1:-1] = (A == 1) & (B >= 2) & (B <= 6) & (m1 == 0) & (m2 == 0)
    return marker


def thinning_iteration(img: np.ndarray, iter: int) -> np.ndarray:
    """One sub-iteration over a {0,1} image, erasing marked pixels in place."""
    marker = deletion_marker(img, iter)
    np.bitwise_and(img, ~marker, out=img)
    return img


def thinning_passes(src: np.ndarray) -> Tuple[np.ndarray, int]:
    """
    Thin a {0,255} binary image until a full pass changes nothing.

    Returns the {0,255} skeleton (a new array) and the number of passes run,
    counting the final pass that confirmed convergence.
    """
    require(validate_binary_image(src))
    dst = src // 255
    prev = np.zeros(dst.shape, np.uint8)
    passes = 0

    while True:
        thinning_iteration(dst, 0)
        thinning_iteration(dst, 1)
        diff = cv2.absdiff(dst, prev)
        np.copyto(prev, dst)
        passes += 1
        if cv2.countNonZero(diff) == 0:
            break

    logger.debug(f"[thinning] converged after {passes} pass(es), "
                 f"{cv2.countNonZero(dst)} foreground px left")
    dst *= 255
    return dst, passes


def thinning(src: np.ndarray) -> np.ndarray:
    skeleton, _ = thinning_passes(src)
    return skeleton
