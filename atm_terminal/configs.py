"""
Configuration module for the ATM terminal.

This module provides centralized constants for the terminal and the services
around it: Redis, Loki, log files and the cash/PIN defaults of a new machine.
"""

import os
from pathlib import Path
from typing import Final


# =============================================================================
# System Configuration
# =============================================================================

BASE_DIR: Final[Path] = Path(__file__).resolve().parent


# =============================================================================
# Redis Configuration
# =============================================================================

REDIS_HOST: Final[str] = "localhost"
REDIS_PORT: Final[int] = 6379


# =============================================================================
# External Services Configuration
# =============================================================================

# Empty string disables the Loki handler
LOKI_URL: Final[str] = os.environ.get("ATM_LOKI_URL", "")


# =============================================================================
# Logging Configuration
# =============================================================================

LOG_FILE: Final[str] = os.environ.get(
    "ATM_LOG_FILE",
    str(BASE_DIR / "logs" / "atm_terminal.log"),
)


# =============================================================================
# Terminal Configuration
# =============================================================================

DEFAULT_INITIAL_CASH: Final[int] = 2000
EXPECTED_PIN: Final[int] = 1234
COMMAND_CHANNEL: Final[str] = "atm_terminal_commands"
