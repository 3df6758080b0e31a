"""
Core module - Foundation layer with no external dependencies.

Contains:
- Exceptions
- Value Objects
"""

from .exceptions import (
    AtmError,
    IllegalOperationError,
    InvalidAmountError,
    CommandError,
)
from .value_objects import (
    Outcome,
    OperationResult,
)


__all__ = [
    # Exceptions
    "AtmError",
    "IllegalOperationError",
    "InvalidAmountError",
    "CommandError",
    # Value Objects
    "Outcome",
    "OperationResult",
]
