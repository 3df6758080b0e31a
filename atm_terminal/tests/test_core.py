"""
Unit tests for core exceptions and value objects.
"""

from core.exceptions import (
    AtmError,
    CommandError,
    IllegalOperationError,
    InvalidAmountError,
)
from core.value_objects import OperationResult, Outcome


class TestExceptions:
    """Tests for custom exceptions."""

    def test_atm_error(self):
        """Test AtmError creation and to_dict."""
        error = AtmError("Test error", code="TEST_001")
        assert error.message == "Test error"
        assert error.code == "TEST_001"

        d = error.to_dict()
        assert d["error"] == "TEST_001"
        assert d["message"] == "Test error"

    def test_default_code_is_class_name(self):
        """Test code falls back to the exception class name."""
        assert CommandError("Unknown command").code == "CommandError"

    def test_illegal_operation_details(self):
        """Test IllegalOperationError records state and operation."""
        error = IllegalOperationError("Nope", state="NO_CARD", operation="eject_card")
        assert isinstance(error, AtmError)
        assert error.state == "NO_CARD"
        assert error.details == {"state": "NO_CARD", "operation": "eject_card"}

    def test_invalid_amount_details(self):
        """Test InvalidAmountError records the amount."""
        error = InvalidAmountError("Bad amount", amount=-5)
        assert error.details["amount"] == -5


class TestOperationResult:
    """Tests for OperationResult value object."""

    def test_dispensed_result(self):
        """Test a withdrawal result serializes the dispensed cash."""
        result = OperationResult(
            operation="request_cash",
            outcome=Outcome.CASH_DISPENSED,
            state="NO_CARD",
            cash_available=400,
            dispensed=100,
        )
        assert result.success is True
        assert result.to_dict() == {
            "operation": "request_cash",
            "outcome": "cash dispensed",
            "state": "NO_CARD",
            "cash_available": 400,
            "dispensed": 100,
        }

    def test_business_failures_are_unsuccessful(self):
        """Test wrong PIN and insufficient funds report success=False."""
        for outcome in (Outcome.INCORRECT_PIN, Outcome.INSUFFICIENT_FUNDS):
            result = OperationResult("op", outcome, "HAS_CARD", 100)
            assert result.success is False
            assert "dispensed" not in result.to_dict()
