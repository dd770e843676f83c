"""
Core protocols for pyols.

Structural interfaces (Protocol, not ABC) that regression backends
satisfy. A backend needs no base class; having `name` and `solve` is
enough.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pyols.regression.design import RegressionDesign
    from pyols.regression.solution import RegressionResult


@runtime_checkable
class Backend(Protocol):
    """
    Protocol for regression backends.

    Backends are stateless: everything a solve needs arrives in the
    design, and every working matrix is local to the call. This makes
    them safe to share between threads and easy to swap.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier, e.g. 'normal_equations' or 'qr'.
        """
        ...

    def solve(self, design: 'RegressionDesign') -> 'RegressionResult':
        """
        Fit the design.

        Raises:
            NumericalError: If numerical issues prevent a solution
        """
        ...
