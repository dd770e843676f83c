"""
pyols: ordinary least squares regression on a small dense kernel.

Fits y ≈ Xβ with an intercept by the normal equations and reports
coefficients, the residual sum of squares, and coefficient standard
errors. Ill-posed inputs raise named errors instead of returning NaN.

Submodules:
    core: Exceptions, validation, linear algebra kernel
    regression: fit() and helpers built on it
"""

__version__ = "0.1.0"

from pyols._config import get_singular_rtol, set_singular_rtol
from pyols.core.exceptions import (
    PyOLSError,
    ValidationError,
    DimensionMismatchError,
    ShapeMismatchError,
    InsufficientObservationsError,
    NumericalError,
    SingularMatrixError,
)
from pyols.regression import (
    fit,
    fit_arrays,
    RegressionDesign,
    RegressionResult,
)

__all__ = [
    "__version__",
    # Fitting
    "fit",
    "fit_arrays",
    "RegressionDesign",
    "RegressionResult",
    # Configuration
    "get_singular_rtol",
    "set_singular_rtol",
    # Exceptions
    "PyOLSError",
    "ValidationError",
    "DimensionMismatchError",
    "ShapeMismatchError",
    "InsufficientObservationsError",
    "NumericalError",
    "SingularMatrixError",
]
