"""
error taxonomy for sequence operators.

every error raised by the library derives from `SequenceError` and also from
the builtin a caller would reach for first (ValueError / TypeError), so plain
`except ValueError` keeps working. errors raised inside user callbacks are
never wrapped.
"""
from typing import Any


class SequenceError(Exception):
    """base class for all lazyq errors."""
    pass


class InvalidArgumentError(SequenceError, ValueError):
    """a required argument is missing or has the wrong shape."""

    def __init__(self, param_name: str, message: str = "value cannot be None"):
        self.param_name = param_name
        super().__init__(f"{param_name}: {message}")


class InvalidOperationError(SequenceError, ValueError):
    """the operation cannot produce a result for this sequence."""
    pass


class EmptySequenceError(InvalidOperationError):
    """first/last found nothing to return."""
    pass


class CardinalityError(InvalidOperationError):
    """exactly one matching element was required."""

    def __init__(self, message: str, found: int):
        # found is 0 or 2; scanning stops at the second match
        self.found = found
        super().__init__(message)


class PreconditionError(SequenceError, TypeError):
    """the source lacks a capability the operator needs."""

    def __init__(self, operation: str, source: Any, requirement: str):
        self.operation = operation
        self.source_type = type(source).__name__
        super().__init__(f"{operation} requires {requirement}; got {self.source_type}")
