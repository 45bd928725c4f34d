# skelmat/schema/mat.py
from __future__ import annotations
from typing import Dict, Tuple, Union
import numpy as np

from skelmat.schema.types import Depth, MatInfo

MAX_CHANNELS = 512

DTYPE_TO_DEPTH: Dict[np.dtype, str] = {
    np.dtype(np.uint8):   "8U",
    np.dtype(np.int8):    "8S",
    np.dtype(np.uint16):  "16U",
    np.dtype(np.int16):   "16S",
    np.dtype(np.int32):   "32S",
    np.dtype(np.int64):   "64S",
    np.dtype(np.float32): "32F",
    np.dtype(np.float64): "64F",
}
DEPTH_TO_DTYPE: Dict[str, np.dtype] = {v: k for k, v in DTYPE_TO_DEPTH.items()}

Scalar = Union[int, float]


class Mat:
    """
    2-D grid of scalars, optionally with several interleaved channels.

    Backed by a numpy array of shape (rows, cols) or (rows, cols, channels).
    The Mat owns whatever array it is given; use `clone()` for an
    independent copy. Element access through `at`/`put` is bounds-checked.
    """

    __slots__ = ("data",)

    def __init__(self, data: np.ndarray):
        if not isinstance(data, np.ndarray):
            raise TypeError(f"Mat expects a numpy array, got {type(data).__name__}")
        if data.ndim not in (2, 3):
            raise TypeError(f"Mat expects 2 or 3 dimensions, got {data.ndim}")
        if data.dtype not in DTYPE_TO_DEPTH:
            raise TypeError(f"Data type = {data.dtype} is not supported")
        if data.ndim == 3 and not (1 <= data.shape[2] <= MAX_CHANNELS):
            raise TypeError(f"Channel count {data.shape[2]} outside [1, {MAX_CHANNELS}]")
        self.data = data

    @classmethod
    def zeros(cls, rows: int, cols: int, depth: Depth = "8U", channels: int = 1) -> "Mat":
        dtype = DEPTH_TO_DTYPE[depth]
        shape = (rows, cols) if channels == 1 else (rows, cols, channels)
        return cls(np.zeros(shape, dtype=dtype))

    @property
    def rows(self) -> int:
        return int(self.data.shape[0])

    @property
    def cols(self) -> int:
        return int(self.data.shape[1])

    @property
    def channels(self) -> int:
        return 1 if self.data.ndim == 2 else int(self.data.shape[2])

    @property
    def depth(self) -> str:
        return DTYPE_TO_DEPTH[self.data.dtype]

    @property
    def type(self) -> str:
        return f"CV_{self.depth}C{self.channels}"

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def info(self) -> MatInfo:
        return MatInfo(rows=self.rows, cols=self.cols, channels=self.channels, depth=self.depth)

    def _check(self, y: int, x: int):
        if not (0 <= y < self.rows and 0 <= x < self.cols):
            raise IndexError(f"({y}, {x}) outside {self.rows}x{self.cols} matrix")

    def at(self, y: int, x: int) -> Union[Scalar, Tuple[Scalar, ...]]:
        self._check(y, x)
        v = self.data[y, x]
        if self.data.ndim == 3:
            return tuple(c.item() for c in v)
        return v.item()

    def put(self, y: int, x: int, value) -> None:
        self._check(y, x)
        self.data[y, x] = value

    def clone(self) -> "Mat":
        return Mat(self.data.copy())

    def __repr__(self) -> str:
        return f"Mat({self.rows}x{self.cols}, {self.type})"
