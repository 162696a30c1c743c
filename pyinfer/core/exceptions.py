"""
Exception hierarchy for pyinfer.

All exceptions inherit from PyInferError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyInferError(Exception):
    """Base exception for all pyinfer errors."""
    pass


class ValidationError(PyInferError):
    """
    Input validation failed.

    Raised when user-provided options fail validation checks
    (unknown backend, malformed hypothesis declaration, ...).
    """
    pass


class InputError(ValidationError):
    """
    Dataset has the wrong shape for the requested operation.

    Raised when the column count or column types do not match what a
    generation mode or statistic requires, e.g. ``simulate`` on a
    two-column dataset or ``diff in means`` without a group column.

    Attributes:
        columns: Names of the offending columns, if known
    """

    def __init__(self, message: str, columns: tuple[str, ...] | None = None):
        super().__init__(message)
        self.columns = columns


class MissingMetadataError(ValidationError):
    """
    A null hypothesis is required but none is attached.

    Raised by permutation and simulation, which both need to know
    the declared null to decide what to shuffle or draw.

    Attributes:
        operation: The operation that required the hypothesis
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation


class UnsupportedOperationError(PyInferError):
    """
    Operation is recognized (or unrecognized) but not implemented.

    Raised for statistics without an implementation (``Chisq``, ``F``),
    unknown statistic names, and null hypotheses that have no
    permutation rule.

    Attributes:
        operation: Which dispatch failed ('calculate', 'permute', ...)
        value: The value that had no implementation
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        value: str | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.value = value
