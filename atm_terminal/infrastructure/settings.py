"""
Application settings.

Groups the terminal configuration into typed, immutable sections.
"""

from dataclasses import dataclass, field

from configs import (
    COMMAND_CHANNEL,
    DEFAULT_INITIAL_CASH,
    EXPECTED_PIN,
    REDIS_HOST,
    REDIS_PORT,
)


# =============================================================================
# Configuration Classes
# =============================================================================


@dataclass(frozen=True)
class RedisSettings:
    """Redis connection settings."""

    host: str = REDIS_HOST
    port: int = REDIS_PORT
    decode_responses: bool = True


@dataclass(frozen=True)
class AtmSettings:
    """Terminal settings."""

    initial_cash: int = DEFAULT_INITIAL_CASH
    expected_pin: int = EXPECTED_PIN
    command_channel: str = COMMAND_CHANNEL

    @property
    def response_channel(self) -> str:
        """Get response channel name."""
        return f"{self.command_channel}_response"


# =============================================================================
# Main Settings
# =============================================================================


@dataclass
class Settings:
    """
    Main application settings.

    Aggregates all configuration sections.
    """

    redis: RedisSettings = field(default_factory=RedisSettings)
    atm: AtmSettings = field(default_factory=AtmSettings)


# =============================================================================
# Settings Singleton
# =============================================================================


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
