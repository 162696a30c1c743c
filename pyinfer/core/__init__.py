"""
Core infrastructure for pyinfer.

This module provides shared abstractions and utilities used by the
generate and calculate stages.

Key components:
    dataset: InferDataset, the table + roles + hypothesis wrapper
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and random generator construction
"""

from pyinfer.core.dataset import InferDataset
from pyinfer.core.protocols import Backend
from pyinfer.core.result import Result
from pyinfer.core.exceptions import (
    PyInferError,
    ValidationError,
    InputError,
    MissingMetadataError,
    UnsupportedOperationError,
)

__all__ = [
    # Data
    "InferDataset",
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyInferError",
    "ValidationError",
    "InputError",
    "MissingMetadataError",
    "UnsupportedOperationError",
]
