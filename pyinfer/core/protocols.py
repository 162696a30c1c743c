"""
Core protocols for pyinfer.

These define structural interfaces that stage-specific implementations
must satisfy. We use Protocol (structural typing) rather than ABC
(nominal typing) so backends need no common base class.
"""

from typing import Protocol, TypeVar, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a stage-specific Design and produce
    a stage-specific parameter payload.

    Backends are stateless: all configuration is passed via the Design.
    This makes them easy to test and swap.

    Type Parameters:
        D: The Design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{stage}'
        Examples: 'cpu_generate', 'cpu_calculate'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated, immutable stage-specific design

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            InputError: If the data does not fit the requested mode
            UnsupportedOperationError: If the mode has no implementation
        """
        ...
