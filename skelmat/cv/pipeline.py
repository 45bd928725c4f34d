# skelmat/cv/pipeline.py
from __future__ import annotations
import numpy as np
from loguru import logger

from skelmat.config.loader import default_cfg
from skelmat.cv.preprocess import all_ones_kernel, morphology_open, threshold, to_grayscale
from skelmat.cv.thinning import thinning_passes
from skelmat.utils.timers import timer
from skelmat.utils.validators import require, validate_color_image

def binarize(src: np.ndarray, cfg) -> np.ndarray:
    """Dark strokes on a light BGR page → single-channel {0,255} mask."""
    p = cfg.pipeline
    inv = threshold(src, p.threshold_inv.thresh, p.threshold_inv.maxval, "binary_inv")
    inv = morphology_open(inv, all_ones_kernel(int(p.open_kernel)))
    bw = to_grayscale(inv)
    return threshold(bw, p.threshold_bin.thresh, p.threshold_bin.maxval, "binary")

def run(src: np.ndarray, cfg=None) -> np.ndarray:
    """Skeleton of the dark strokes in a BGR image."""
    cfg = cfg if cfg is not None else default_cfg()
    require(validate_color_image(src))

    with timer("pipeline") as t:
        bw = binarize(src, cfg)
        skeleton, passes = thinning_passes(bw)

    logger.info(f"[pipeline] {src.shape[1]}x{src.shape[0]}: {passes} thinning pass(es) "
                f"in {t['elapsed']:.3f}s")
    return skeleton
