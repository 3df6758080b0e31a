"""
Application layer - Application services and use cases.

Contains:
- ATM service
- Command handlers
"""

from .atm_service import AtmService
from .command_handler import CommandHandler, CommandResponse, atm_commands


__all__ = [
    "AtmService",
    "CommandHandler",
    "CommandResponse",
    "atm_commands",
]
