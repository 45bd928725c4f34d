# skelmat/utils/timers.py
import time
from contextlib import contextmanager
from loguru import logger

@contextmanager
def timer(name: str):
    """Log wall time of the block; the yielded dict gets `elapsed` (seconds) on exit."""
    stats = {"elapsed": None}
    t0 = time.perf_counter()
    try:
        yield stats
    finally:
        stats["elapsed"] = time.perf_counter() - t0
        logger.debug(f"[timer] {name}: {stats['elapsed']:.3f}s")
