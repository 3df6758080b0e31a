"""
Custom exceptions for the ATM terminal.

Illegal operations are defects in the caller's sequencing and are raised.
Wrong PINs and insufficient funds are business outcomes, not exceptions.
"""

from typing import Any, Optional


class AtmError(Exception):
    """Base exception for all ATM terminal errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            code: Optional error code for programmatic handling.
            details: Optional additional error details.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for command responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# State Machine Errors
# =============================================================================


class IllegalOperationError(AtmError):
    """Operation is not accepted in the machine's current state."""

    def __init__(
        self,
        message: str,
        state: Optional[str] = None,
        operation: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.state = state
        self.operation = operation
        if state:
            self.details["state"] = state
        if operation:
            self.details["operation"] = operation


class InvalidAmountError(AtmError):
    """Cash amount is out of range."""

    def __init__(self, message: str, amount: Optional[int] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.details.setdefault("amount", amount)


# =============================================================================
# Command Errors
# =============================================================================


class CommandError(AtmError):
    """Command could not be routed or is missing arguments."""

    pass
