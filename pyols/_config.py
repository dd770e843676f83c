"""Numerical configuration for the pyols package.

Controls the relative pivot tolerance below which the inversion kernel
declares a matrix singular.

Resolution order (first match wins):
    1. Programmatic override via :func:`set_singular_rtol`.
    2. The ``PYOLS_SINGULAR_RTOL`` environment variable.
    3. :data:`~pyols.core.compute.tolerances.DEFAULT_SINGULAR_RTOL`.

Examples:
    Loosen the threshold from the shell::

        export PYOLS_SINGULAR_RTOL=1e-8

    Tighten it programmatically::

        import pyols
        pyols.set_singular_rtol(1e-12)

    Restore the default resolution order::

        pyols.set_singular_rtol(None)
"""

from __future__ import annotations

import math
import os
import warnings

from pyols.core.compute.tolerances import DEFAULT_SINGULAR_RTOL
from pyols.core.exceptions import ValidationError

ENV_SINGULAR_RTOL = "PYOLS_SINGULAR_RTOL"

# Sentinel indicating "no programmatic override has been set".
_rtol_override: float | None = None


def validate_rtol(value: float, name: str = "rtol") -> float:
    """Return ``value`` as a float, raising if it is outside ``(0, 1)``."""
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: expected a number, got {value!r}") from e
    if not math.isfinite(value) or not 0.0 < value < 1.0:
        raise ValidationError(f"{name}: must be in (0, 1), got {value!r}")
    return value


def get_singular_rtol() -> float:
    """Return the active singular-pivot relative tolerance.

    Resolution order:
        1. Value set by :func:`set_singular_rtol`.
        2. ``PYOLS_SINGULAR_RTOL`` environment variable, if valid.
        3. ``DEFAULT_SINGULAR_RTOL``.
    """
    if _rtol_override is not None:
        return _rtol_override

    env = os.environ.get(ENV_SINGULAR_RTOL, "").strip()
    if env:
        try:
            return validate_rtol(env, ENV_SINGULAR_RTOL)
        except ValidationError as e:
            warnings.warn(
                f"Ignoring {ENV_SINGULAR_RTOL}: {e}",
                RuntimeWarning,
                stacklevel=2,
            )

    return DEFAULT_SINGULAR_RTOL


def set_singular_rtol(value: float | None) -> None:
    """Override the singular-pivot relative tolerance.

    Args:
        value: A float in ``(0, 1)``, or ``None`` to restore the default
            resolution order.

    Raises:
        ValidationError: If ``value`` is outside ``(0, 1)``.
    """
    global _rtol_override
    if value is None:
        _rtol_override = None
        return
    _rtol_override = validate_rtol(value, "singular_rtol")
