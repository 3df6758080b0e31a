"""
ATM State Machine - Governs the card/PIN/withdrawal sequence of a terminal.

States are enum tags and the transition table is a pure function of
(state, operation, cash available). The machine only stores the tag and
the cash counter and applies whatever the table returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional

from configs import EXPECTED_PIN
from core.exceptions import IllegalOperationError, InvalidAmountError
from core.value_objects import OperationResult, Outcome
from loggers import logger


# =============================================================================
# States and Operations
# =============================================================================


class AtmState(Enum):
    """Phases of a terminal transaction."""

    NO_CARD = auto()         # Waiting for a card
    HAS_CARD = auto()        # Card inserted, waiting for PIN
    HAS_PIN = auto()         # PIN accepted, waiting for withdrawal
    OUT_OF_SERVICE = auto()  # Cash exhausted, absorbing


class AtmOperation(Enum):
    """Operations a caller can request from the terminal."""

    INSERT_CARD = "insert_card"
    EJECT_CARD = "eject_card"
    ENTER_PIN = "enter_pin"
    REQUEST_CASH = "request_cash"


@dataclass(frozen=True)
class Transition:
    """
    Effect of a legal operation.

    Attributes:
        next_state: State the machine moves to.
        outcome: Business outcome of the operation.
        cash_available: Cash left after the operation.
        dispensed: Cash paid out by the operation.
        message: Human-readable message.
    """

    next_state: AtmState
    outcome: Outcome
    cash_available: int
    dispensed: int = 0
    message: str = ""


@dataclass(frozen=True)
class _Request:
    cash_available: int
    pin: Optional[int]
    amount: Optional[int]
    expected_pin: int


# =============================================================================
# Transition Handlers
# =============================================================================


def _insert_card(request: _Request) -> Transition:
    return Transition(
        next_state=AtmState.HAS_CARD,
        outcome=Outcome.CARD_INSERTED,
        cash_available=request.cash_available,
        message="Card inserted.",
    )


def _eject_card(request: _Request) -> Transition:
    return Transition(
        next_state=AtmState.NO_CARD,
        outcome=Outcome.CARD_EJECTED,
        cash_available=request.cash_available,
        message="Card ejected.",
    )


def _enter_pin(request: _Request) -> Transition:
    # No retry limit: a wrong PIN keeps the card in and waits for another try
    if request.pin == request.expected_pin:
        return Transition(
            next_state=AtmState.HAS_PIN,
            outcome=Outcome.CORRECT_PIN,
            cash_available=request.cash_available,
            message="Correct PIN.",
        )
    return Transition(
        next_state=AtmState.HAS_CARD,
        outcome=Outcome.INCORRECT_PIN,
        cash_available=request.cash_available,
        message="Incorrect PIN. Try again.",
    )


def _request_cash(request: _Request) -> Transition:
    amount = request.amount
    if amount is None or amount < 0:
        raise InvalidAmountError(
            f"Invalid withdrawal amount: {amount}",
            amount=amount,
        )

    if amount > request.cash_available:
        # The whole transaction is aborted and the card returned
        return Transition(
            next_state=AtmState.NO_CARD,
            outcome=Outcome.INSUFFICIENT_FUNDS,
            cash_available=request.cash_available,
            message="Not enough cash in machine.",
        )

    remaining = request.cash_available - amount
    return Transition(
        next_state=AtmState.OUT_OF_SERVICE if remaining == 0 else AtmState.NO_CARD,
        outcome=Outcome.CASH_DISPENSED,
        cash_available=remaining,
        dispensed=amount,
        message=f"Dispensing {amount} cash.",
    )


# =============================================================================
# Transition Table
# =============================================================================


TransitionHandler = Callable[[_Request], Transition]

TRANSITIONS: dict[tuple[AtmState, AtmOperation], TransitionHandler] = {
    (AtmState.NO_CARD, AtmOperation.INSERT_CARD): _insert_card,
    (AtmState.HAS_CARD, AtmOperation.EJECT_CARD): _eject_card,
    (AtmState.HAS_CARD, AtmOperation.ENTER_PIN): _enter_pin,
    (AtmState.HAS_PIN, AtmOperation.EJECT_CARD): _eject_card,
    (AtmState.HAS_PIN, AtmOperation.REQUEST_CASH): _request_cash,
}

LEGAL_OPERATIONS: dict[AtmState, frozenset[AtmOperation]] = {
    state: frozenset(op for (s, op) in TRANSITIONS if s is state)
    for state in AtmState
}


def is_legal(state: AtmState, operation: AtmOperation) -> bool:
    """Check whether the operation is accepted in the given state."""
    return (state, operation) in TRANSITIONS


def transition(
    state: AtmState,
    operation: AtmOperation,
    cash_available: int,
    *,
    pin: Optional[int] = None,
    amount: Optional[int] = None,
    expected_pin: int = EXPECTED_PIN,
) -> Transition:
    """
    Compute the effect of an operation without touching any machine.

    Args:
        state: Current machine state.
        operation: Requested operation.
        cash_available: Cash currently in the machine.
        pin: PIN entered (ENTER_PIN only).
        amount: Cash requested (REQUEST_CASH only).
        expected_pin: PIN that unlocks withdrawals.

    Returns:
        Transition describing the next state and its effect.

    Raises:
        IllegalOperationError: If the operation is not accepted in this state.
        InvalidAmountError: If a withdrawal amount is missing or negative.
    """
    handler = TRANSITIONS.get((state, operation))
    if handler is None:
        raise IllegalOperationError(
            f"Cannot {operation.value.replace('_', ' ')} in state {state.name}",
            state=state.name,
            operation=operation.value,
        )
    return handler(_Request(cash_available, pin, amount, expected_pin))


# =============================================================================
# ATM Machine
# =============================================================================


class AtmMachine:
    """
    Transaction controller for a single cash-dispensing terminal.

    Holds the current state tag and the cash counter; all legality and
    transition decisions come from the transition table.
    """

    def __init__(self, initial_cash: int, expected_pin: int = EXPECTED_PIN) -> None:
        """
        Initialize the machine.

        Args:
            initial_cash: Cash loaded into the machine.
            expected_pin: PIN that unlocks withdrawals.

        Raises:
            InvalidAmountError: If initial_cash is negative.
        """
        if initial_cash < 0:
            raise InvalidAmountError(
                f"Initial cash cannot be negative: {initial_cash}",
                amount=initial_cash,
            )

        self._cash_available = initial_cash
        self._expected_pin = expected_pin
        self._state = AtmState.OUT_OF_SERVICE if initial_cash == 0 else AtmState.NO_CARD

        logger.info(f"ATM started with {initial_cash} cash in state {self._state.name}")

    @property
    def state(self) -> AtmState:
        """Get the current state."""
        return self._state

    @property
    def cash_available(self) -> int:
        """Get the cash left in the machine."""
        return self._cash_available

    @property
    def is_out_of_service(self) -> bool:
        """Check if the machine has run out of cash."""
        return self._state is AtmState.OUT_OF_SERVICE

    @property
    def legal_operations(self) -> frozenset[AtmOperation]:
        """Get the operations accepted in the current state."""
        return LEGAL_OPERATIONS[self._state]

    def insert_card(self) -> OperationResult:
        """Insert a card."""
        return self._dispatch(AtmOperation.INSERT_CARD)

    def eject_card(self) -> OperationResult:
        """Eject the card and end the session."""
        return self._dispatch(AtmOperation.EJECT_CARD)

    def enter_pin(self, pin: int) -> OperationResult:
        """
        Enter a PIN for the inserted card.

        Args:
            pin: PIN entered by the customer.
        """
        return self._dispatch(AtmOperation.ENTER_PIN, pin=pin)

    def request_cash(self, amount: int) -> OperationResult:
        """
        Request a withdrawal.

        Args:
            amount: Cash requested by the customer.
        """
        return self._dispatch(AtmOperation.REQUEST_CASH, amount=amount)

    def _set_state(self, next_state: AtmState) -> None:
        """Overwrite the current state."""
        self._state = next_state

    def _dispatch(
        self,
        operation: AtmOperation,
        pin: Optional[int] = None,
        amount: Optional[int] = None,
    ) -> OperationResult:
        previous = self._state
        try:
            result = transition(
                previous,
                operation,
                self._cash_available,
                pin=pin,
                amount=amount,
                expected_pin=self._expected_pin,
            )
        except IllegalOperationError as e:
            logger.warning(f"Rejected {operation.value}: {e.message}")
            raise

        self._cash_available = result.cash_available
        self._set_state(result.next_state)

        logger.info(
            f"{operation.value}: {result.outcome.value}. "
            f"{previous.name} -> {result.next_state.name}, "
            f"cash available: {result.cash_available}"
        )
        if result.next_state is AtmState.OUT_OF_SERVICE:
            logger.warning("Cash exhausted, ATM is out of service")

        return OperationResult(
            operation=operation.value,
            outcome=result.outcome,
            state=result.next_state.name,
            cash_available=result.cash_available,
            dispensed=result.dispensed,
            message=result.message,
        )
