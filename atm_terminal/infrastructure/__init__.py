"""
Infrastructure layer - External dependencies and implementations.

Contains:
- Configuration
"""

from .settings import (
    AtmSettings,
    Settings,
    get_settings,
)


__all__ = [
    "AtmSettings",
    "Settings",
    "get_settings",
]
