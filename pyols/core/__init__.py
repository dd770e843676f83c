"""
Core infrastructure for pyols.

This module provides the shared abstractions used by the regression
package.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, linear algebra kernels
"""

from pyols.core.exceptions import (
    PyOLSError,
    ValidationError,
    DimensionMismatchError,
    ShapeMismatchError,
    InsufficientObservationsError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "PyOLSError",
    "ValidationError",
    "DimensionMismatchError",
    "ShapeMismatchError",
    "InsufficientObservationsError",
    "NumericalError",
    "SingularMatrixError",
]
