# skelmat/schema/errors.py
from __future__ import annotations
from typing import Tuple

class SkelmatError(Exception):
    """Base class for errors raised by skelmat itself."""

class ShapeMismatchError(SkelmatError, TypeError):
    """Operands of a matrix product are not conformable."""

    def __init__(self, left_shape: Tuple[int, ...], right_shape: Tuple[int, ...]):
        self.left_shape = tuple(left_shape)
        self.right_shape = tuple(right_shape)
        super().__init__(
            f"Incompatible sizes for matrix multiplication: "
            f"{self.left_shape} x {self.right_shape}"
        )

IncompatibleShapeError = ShapeMismatchError

class PreconditionViolation(SkelmatError, ValueError):
    """Input does not satisfy the documented contract of an operation."""
