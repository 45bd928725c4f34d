# opt-in process setup for applications embedding skelmat
import cv2
from loguru import logger

from skelmat.config.loader import default_cfg
from skelmat.utils.logging import setup_logging

_initialized = False

def init_runtime(cfg=None, force: bool = False) -> bool:
    """
    Apply runtime.* to OpenCV and install the stdout log sink at logging.level.

    Both are process-wide: cv2.setNumThreads affects every OpenCV caller and
    setup_logging replaces all loguru sinks. Call once at application start;
    importing skelmat does not call it. Returns True if anything was applied.
    """
    global _initialized
    if _initialized and not force:
        return False
    cfg = cfg if cfg is not None else default_cfg()
    setup_logging(cfg.logging.level)
    cv2.setNumThreads(int(cfg.runtime.num_threads))
    cv2.setUseOptimized(bool(cfg.runtime.use_optimized))
    _initialized = True
    logger.debug(f"[runtime] OpenCV {cv2.__version__}: threads={cv2.getNumThreads()}, "
                 f"optimized={cv2.useOptimized()}")
    return True
