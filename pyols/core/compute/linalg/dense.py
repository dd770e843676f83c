"""
Dense matrix and vector primitives.

The small kernel the normal-equations solver is built from: transpose,
products, Gauss-Jordan inversion with partial pivoting, and diagonal
extraction. Every function returns a freshly allocated float64 array and
never mutates its inputs.
"""

import logging
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyols._config import get_singular_rtol, validate_rtol
from pyols.core.exceptions import (
    DimensionMismatchError,
    SingularMatrixError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def _as_matrix(M: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    A = np.asarray(M, dtype=np.float64)
    if A.ndim != 2:
        raise DimensionMismatchError(
            f"{name}: expected 2D matrix, got {A.ndim}D with shape {A.shape}"
        )
    return A


def _as_vector(v: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    a = np.asarray(v, dtype=np.float64)
    if a.ndim != 1:
        raise DimensionMismatchError(
            f"{name}: expected 1D vector, got {a.ndim}D with shape {a.shape}"
        )
    return a


def transpose(M: ArrayLike) -> NDArray[np.floating[Any]]:
    """Return Mᵀ as a new (c x r) array."""
    A = _as_matrix(M, 'M')
    return np.ascontiguousarray(A.T)


def multiply(A: ArrayLike, B: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Matrix product A @ B.

    Args:
        A: Left operand (m x k)
        B: Right operand (k x n), or a length-k vector

    Returns:
        (m x n) matrix, or a length-m vector when B is a vector

    Raises:
        DimensionMismatchError: If the inner dimensions disagree
    """
    left = _as_matrix(A, 'A')
    right = np.asarray(B, dtype=np.float64)
    if right.ndim not in (1, 2):
        raise DimensionMismatchError(
            f"B: expected matrix or vector, got {right.ndim}D with shape {right.shape}"
        )
    if left.shape[1] != right.shape[0]:
        raise DimensionMismatchError(
            f"Inner dimensions disagree: A is {left.shape[0]}x{left.shape[1]}, "
            f"B has {right.shape[0]} rows"
        )
    return left @ right


def dot(a: ArrayLike, b: ArrayLike) -> float:
    """
    Inner product of two equal-length vectors.

    Raises:
        DimensionMismatchError: If the lengths differ
    """
    u = _as_vector(a, 'a')
    v = _as_vector(b, 'b')
    if u.shape[0] != v.shape[0]:
        raise DimensionMismatchError(
            f"Vector lengths disagree: a has {u.shape[0]}, b has {v.shape[0]}"
        )
    return float(u @ v)


def diagonal(M: ArrayLike) -> NDArray[np.floating[Any]]:
    """Return the n diagonal entries of a square matrix."""
    A = _as_matrix(M, 'M')
    if A.shape[0] != A.shape[1]:
        raise DimensionMismatchError(
            f"M: diagonal requires a square matrix, got {A.shape[0]}x{A.shape[1]}"
        )
    return np.diag(A).copy()


def invert(
    M: ArrayLike,
    *,
    rtol: float | None = None,
    name: str = 'M',
) -> NDArray[np.floating[Any]]:
    """
    Invert a square matrix by Gauss-Jordan elimination.

    Eliminates on the augmented matrix [M | I]. For each column the row
    with the largest remaining magnitude is swapped into pivot position
    (partial pivoting). Elimination stops as soon as that best pivot
    satisfies |pivot| <= rtol * max|M|.

    Args:
        M: Square matrix (n x n), finite
        rtol: Relative pivot tolerance. Defaults to the configured
              value (see pyols.get_singular_rtol).
        name: Matrix name used in error messages

    Returns:
        M⁻¹ (n x n)

    Raises:
        DimensionMismatchError: If M is not square
        ValidationError: If M contains NaN or Inf
        SingularMatrixError: If no valid pivot exists for some column
    """
    A = _as_matrix(M, name)
    n, m = A.shape
    if n != m:
        raise DimensionMismatchError(
            f"{name}: inverse requires a square matrix, got {n}x{m}"
        )
    if not np.all(np.isfinite(A)):
        raise ValidationError(f"{name}: contains non-finite values")
    if n == 0:
        raise SingularMatrixError(f"{name}: cannot invert an empty matrix", matrix_name=name)

    rtol = get_singular_rtol() if rtol is None else validate_rtol(rtol)
    scale = float(np.max(np.abs(A)))
    threshold = rtol * scale

    aug = np.hstack([A, np.eye(n)])

    for col in range(n):
        pivot_row = col + int(np.argmax(np.abs(aug[col:, col])))
        pivot = aug[pivot_row, col]

        if scale == 0.0 or abs(pivot) <= threshold:
            logger.debug(
                "%s singular at column %d: |pivot|=%.3e, threshold=%.3e",
                name, col, abs(pivot), threshold,
            )
            raise SingularMatrixError(
                f"{name} is singular or nearly singular: no pivot above "
                f"{threshold:.3e} in column {col} (best |pivot| = {abs(pivot):.3e}). "
                f"This usually indicates collinear or constant predictors.",
                matrix_name=name,
                column=col,
                pivot=float(abs(pivot)),
                threshold=threshold,
            )

        if pivot_row != col:
            aug[[col, pivot_row]] = aug[[pivot_row, col]]

        aug[col] /= pivot

        factors = aug[:, col].copy()
        factors[col] = 0.0
        aug -= np.outer(factors, aug[col])

    return aug[:, n:].copy()
