# exposed surface: matrix helpers and the thinning pipeline
from skelmat.runtime import init_runtime
from skelmat.schema.errors import (
    IncompatibleShapeError,
    PreconditionViolation,
    ShapeMismatchError,
    SkelmatError,
)
from skelmat.schema.mat import Mat
from skelmat.schema.convert import from_ndarray, to_ndarray
from skelmat.ops.matrix import dot, dot2, increment_elements_by_one, make_fixed_matrix
from skelmat.cv.pipeline import run

thinning = run

# camelCase names for callers of the pbcvt extension API
makeFixedMatrix = make_fixed_matrix
makeCV_16UC3Matrix = make_fixed_matrix
incrementElementsByOne = increment_elements_by_one

__all__ = [
    "Mat", "from_ndarray", "to_ndarray",
    "dot", "dot2", "make_fixed_matrix", "increment_elements_by_one", "thinning", "run",
    "makeFixedMatrix", "makeCV_16UC3Matrix", "incrementElementsByOne",
    "SkelmatError", "ShapeMismatchError", "IncompatibleShapeError", "PreconditionViolation",
    "init_runtime",
]
