"""
Linear algebra kernels for pyols.

All functions follow these conventions:
    - Inputs are read, never mutated; outputs are fresh float64 arrays
    - Dimension problems raise DimensionMismatchError
    - Singularity raises SingularMatrixError, never NaN/Inf results

Submodules:
    dense: transpose, multiply, dot, invert, diagonal
    qr: QR decomposition and least squares solve
"""

from pyols.core.compute.linalg.dense import (
    transpose,
    multiply,
    dot,
    invert,
    diagonal,
)
from pyols.core.compute.linalg.qr import (
    QRResult,
    qr_decompose,
    qr_solve,
)

__all__ = [
    # Dense kernel
    "transpose",
    "multiply",
    "dot",
    "invert",
    "diagonal",
    # QR decomposition
    "QRResult",
    "qr_decompose",
    "qr_solve",
]
