"""
Value Objects for the ATM terminal.

Immutable objects describing what a terminal operation produced.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


# =============================================================================
# Enums
# =============================================================================


class Outcome(str, Enum):
    """Business outcome of a legal terminal operation."""

    CARD_INSERTED = "card inserted"
    CARD_EJECTED = "card ejected"
    CORRECT_PIN = "correct pin"
    INCORRECT_PIN = "incorrect pin"
    CASH_DISPENSED = "cash dispensed"
    INSUFFICIENT_FUNDS = "insufficient funds"


# Outcomes that are legal but leave the customer without what they asked for
UNSUCCESSFUL_OUTCOMES = frozenset({Outcome.INCORRECT_PIN, Outcome.INSUFFICIENT_FUNDS})


# =============================================================================
# Operation Result Value Object
# =============================================================================


@dataclass(frozen=True)
class OperationResult:
    """
    Result of a single terminal operation.

    Attributes:
        operation: Operation name (e.g. "request_cash").
        outcome: Business outcome of the operation.
        state: Name of the machine state after the operation.
        cash_available: Cash left in the machine after the operation.
        dispensed: Cash paid out by this operation.
        message: Human-readable message.
    """

    operation: str
    outcome: Outcome
    state: str
    cash_available: int
    dispensed: int = 0
    message: str = ""

    @property
    def success(self) -> bool:
        """Whether the customer got what the operation asked for."""
        return self.outcome not in UNSUCCESSFUL_OUTCOMES

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for command responses."""
        result = {
            "operation": self.operation,
            "outcome": self.outcome.value,
            "state": self.state,
            "cash_available": self.cash_available,
        }
        if self.dispensed:
            result["dispensed"] = self.dispensed
        return result
