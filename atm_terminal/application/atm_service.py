"""
ATM Service - Application service for terminal operations.

Serializes access to one AtmMachine and turns domain results and errors
into response dictionaries for the command bus.
"""

import asyncio
from typing import Any, Callable

from core.exceptions import AtmError, CommandError, InvalidAmountError
from core.value_objects import OperationResult
from domain.atm_state_machine import AtmMachine
from loggers import logger


def _as_whole_number(value: Any, name: str, error: type[AtmError]) -> int:
    """
    Coerce a bus argument to an int without losing information.

    Accepts ints and floats with no fractional part. Bools, strings and
    fractional floats are rejected.

    Raises:
        AtmError: The given error type, with the offending value in details.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise error(
            f"{name} must be a whole number, got {type(value).__name__}",
            details={name: value},
        )
    if isinstance(value, float) and not value.is_integer():
        raise error(f"{name} must be a whole number, got {value}", details={name: value})
    return int(value)


class AtmService:
    """
    Application service for a single terminal.

    Every call holds one lock for the whole read-modify-write of the
    machine's state and cash counter.
    """

    def __init__(self, machine: AtmMachine) -> None:
        """
        Initialize the ATM service.

        Args:
            machine: The terminal to drive.
        """
        self._machine = machine
        self._lock = asyncio.Lock()

    @property
    def machine(self) -> AtmMachine:
        """Get the driven machine."""
        return self._machine

    async def insert_card(self) -> dict[str, Any]:
        """Insert a card."""
        return await self._run(self._machine.insert_card)

    async def eject_card(self) -> dict[str, Any]:
        """Eject the card."""
        return await self._run(self._machine.eject_card)

    async def enter_pin(self, pin: int) -> dict[str, Any]:
        """
        Enter a PIN.

        Args:
            pin: PIN entered by the customer.
        """
        try:
            pin = _as_whole_number(pin, "pin", CommandError)
        except AtmError as e:
            return self._failure(e)
        return await self._run(self._machine.enter_pin, pin)

    async def request_cash(self, amount: int) -> dict[str, Any]:
        """
        Request a withdrawal.

        Args:
            amount: Cash requested by the customer.
        """
        try:
            amount = _as_whole_number(amount, "amount", InvalidAmountError)
        except AtmError as e:
            return self._failure(e)
        return await self._run(self._machine.request_cash, amount)

    async def status(self) -> dict[str, Any]:
        """
        Get the terminal status.

        Returns:
            Dictionary with state, cash and accepted operations.
        """
        async with self._lock:
            machine = self._machine
            return {
                "success": True,
                "message": f"ATM is in state {machine.state.name}",
                "data": {
                    "state": machine.state.name,
                    "cash_available": machine.cash_available,
                    "out_of_service": machine.is_out_of_service,
                    "legal_operations": sorted(
                        op.value for op in machine.legal_operations
                    ),
                },
            }

    async def _run(
        self,
        operation: Callable[..., OperationResult],
        *args: Any,
    ) -> dict[str, Any]:
        async with self._lock:
            try:
                result = operation(*args)
            except AtmError as e:
                return self._failure(e)

        return {
            "success": result.success,
            "message": result.message,
            "data": result.to_dict(),
        }

    def _failure(self, error: AtmError) -> dict[str, Any]:
        logger.error(f"Operation failed: {error.message}")
        return {"success": False, "message": error.message, "data": error.to_dict()}
