"""
Exception hierarchy for pyols.

All exceptions inherit from PyOLSError so a caller can catch any
library-specific failure in one place. Every failure is raised before a
result is produced; there are no partial results.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
"""


class PyOLSError(Exception):
    """Base exception for all pyols errors."""
    pass


class ValidationError(PyOLSError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionMismatchError(ValidationError):
    """
    Matrix or vector dimensions do not agree.

    Raised by the linear algebra kernel, e.g. when the inner dimensions of
    a product disagree or an inverse is requested for a non-square matrix.
    """
    pass


class ShapeMismatchError(DimensionMismatchError):
    """
    Input array length is inconsistent with the declared dimensions.

    Attributes:
        name: Parameter whose length is wrong ('x_flat' or 'y')
        expected: Length implied by n_observations / n_predictors
        actual: Length actually supplied
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.name = name
        self.expected = expected
        self.actual = actual


class InsufficientObservationsError(ValidationError):
    """
    Not enough observations for the requested number of parameters.

    Residual degrees of freedom (n_observations - n_params) must be
    positive for the residual variance and standard errors to exist.

    Attributes:
        n_observations: Observations supplied
        n_params: Parameters to estimate (predictors + intercept)
    """

    def __init__(
        self,
        message: str,
        n_observations: int | None = None,
        n_params: int | None = None,
    ):
        super().__init__(message)
        self.n_observations = n_observations
        self.n_params = n_params

    @property
    def df_residual(self) -> int | None:
        if self.n_observations is None or self.n_params is None:
            return None
        return self.n_observations - self.n_params


class NumericalError(PyOLSError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or numerically indistinguishable from singular.

    Raised when elimination finds no pivot above the singularity threshold,
    typically because predictors are collinear or a feature is constant.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        column: Column index at which elimination failed, if known
        pivot: Magnitude of the best available pivot, if known
        threshold: Pivot threshold that was not met, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        column: int | None = None,
        pivot: float | None = None,
        threshold: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.column = column
        self.pivot = pivot
        self.threshold = threshold
