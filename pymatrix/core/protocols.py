"""
Core protocols for PyMatrix.

Structural interfaces that solver backends must satisfy. We use Protocol
(structural typing) rather than ABC (nominal typing) so backends need not
share a base class.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pymatrix.core.result import Result

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a domain-specific design and produces a parameter
    payload wrapped in a Result. Backends are stateless: all configuration
    is passed via the design or at construction time.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_svd', 'cpu_lu', 'cpu_qr'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Raises:
            NumericalError: If numerical issues prevent solution (singularity, etc.)
            ValidationError: If design is invalid for this backend
        """
        ...
