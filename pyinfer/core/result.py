"""
Generic result container for all pyinfer computations.

The Result class provides a standardized envelope that generation and
calculation backends share. This enables shared tooling for timing and
diagnostics while allowing each stage to define its own payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (type, reps, row counts)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for pyinfer computations.

    Type Parameters:
        P: The stage-specific payload type

    Attributes:
        params: Stage-specific payload (replicates, statistic table)
        info: Structured metadata (generation type, reps, n)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=ReplicateParams(data=df, reps=100, type='bootstrap',
        ...                            n=32, response='mpg', explanatory=None,
        ...                            hypothesis=None),
        ...     info={'type': 'bootstrap', 'reps': 100, 'n': 32},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_generate'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
