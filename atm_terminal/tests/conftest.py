"""
Pytest configuration for ATM terminal tests.

This conftest.py adds the atm_terminal directory to sys.path
so that tests can import modules properly.
"""

import sys
from pathlib import Path

import pytest


# Add the atm_terminal directory to sys.path for proper imports
atm_terminal_path = Path(__file__).parent.parent
if str(atm_terminal_path) not in sys.path:
    sys.path.insert(0, str(atm_terminal_path))


from domain.atm_state_machine import AtmMachine  # noqa: E402


@pytest.fixture
def machine():
    """Fresh machine loaded with 500 cash."""
    return AtmMachine(500)


@pytest.fixture
def unlocked_machine(machine):
    """Machine with a card inserted and the correct PIN entered."""
    machine.insert_card()
    machine.enter_pin(1234)
    return machine
