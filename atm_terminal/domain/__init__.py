"""
Domain layer - Business logic and domain models.

Contains:
- ATM state machine and its transition table
"""

from .atm_state_machine import (
    AtmMachine,
    AtmOperation,
    AtmState,
    Transition,
    LEGAL_OPERATIONS,
    is_legal,
    transition,
)


__all__ = [
    "AtmMachine",
    "AtmOperation",
    "AtmState",
    "Transition",
    "LEGAL_OPERATIONS",
    "is_legal",
    "transition",
]
