"""
Command Handler - Routes Redis commands to ATM service methods.

Provides clean command routing with validation and error handling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Awaitable, Optional

from core.exceptions import CommandError
from loggers import logger


# Type alias for command handlers
CommandHandlerFunc = Callable[..., Awaitable[dict[str, Any]]]


@dataclass
class CommandResponse:
    """
    Standardized response for command execution.

    Attributes:
        command_id: The ID of the executed command.
        success: Whether the command succeeded.
        message: Human-readable message.
        data: Optional response data.
    """

    command_id: Optional[int] = None
    success: bool = False
    message: Optional[str] = None
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Convert the response to a dictionary."""
        return {
            "command_id": self.command_id,
            "success": self.success,
            "message": self.message,
            "data": self.data,
        }


@dataclass
class CommandDefinition:
    """
    Definition of a command.

    Attributes:
        name: Command name.
        handler: Handler function.
        required_args: List of required argument names.
        description: Human-readable description.
    """

    name: str
    handler: CommandHandlerFunc
    required_args: list[str]
    description: str = ""


class CommandHandler:
    """
    Routes commands to their handlers on the ATM service.
    """

    def __init__(self, service: Any) -> None:
        """
        Initialize the command handler.

        Args:
            service: The AtmService instance.
        """
        self._service = service
        self._commands: dict[str, CommandDefinition] = {}
        self._register_default_commands()

    def _register_default_commands(self) -> None:
        """Register all default command handlers."""
        self.register(
            "insert_card",
            self._service.insert_card,
            [],
            "Insert a card",
        )
        self.register(
            "eject_card",
            self._service.eject_card,
            [],
            "Eject the inserted card",
        )
        self.register(
            "enter_pin",
            self._service.enter_pin,
            ["pin"],
            "Enter the card PIN",
        )
        self.register(
            "request_cash",
            self._service.request_cash,
            ["amount"],
            "Withdraw the specified amount",
        )
        self.register(
            "status",
            self._service.status,
            [],
            "Get terminal state and cash available",
        )

    def register(
        self,
        command_name: str,
        handler: CommandHandlerFunc,
        required_args: list[str],
        description: str = "",
    ) -> None:
        """
        Register a command handler.

        Args:
            command_name: The name of the command.
            handler: The async handler function.
            required_args: List of required argument names.
            description: Human-readable description.
        """
        self._commands[command_name] = CommandDefinition(
            name=command_name,
            handler=handler,
            required_args=required_args,
            description=description,
        )

    def get_available_commands(self) -> list[dict[str, Any]]:
        """Get list of available commands with their descriptions."""
        return [
            {
                "name": cmd.name,
                "required_args": cmd.required_args,
                "description": cmd.description,
            }
            for cmd in self._commands.values()
        ]

    def _resolve(self, command: Any, data: Any) -> tuple[CommandDefinition, dict[str, Any]]:
        if not isinstance(command, str):
            raise CommandError(
                f"Command name must be a string, got: {command!r}",
                details={"command": command},
            )
        if not isinstance(data, dict):
            raise CommandError(
                f"Command data must be an object, got: {data!r}",
                details={"command": command},
            )
        if command not in self._commands:
            raise CommandError(f"Unknown command: {command}", details={"command": command})

        definition = self._commands[command]
        kwargs = {arg: data.get(arg) for arg in definition.required_args}

        missing = [arg for arg in definition.required_args if kwargs[arg] is None]
        if missing:
            raise CommandError(
                f"Missing required arguments: {missing}",
                details={"command": command, "missing": missing},
            )
        return definition, kwargs

    async def execute(self, command_data: dict[str, Any]) -> dict[str, Any]:
        """
        Execute a command based on command data.

        Args:
            command_data: Dictionary containing 'command', 'command_id', and 'data'.

        Returns:
            Response dictionary with execution result.
        """
        command = command_data.get("command")
        command_id = command_data.get("command_id")
        data = command_data.get("data", {}) or {}

        response = CommandResponse(command_id=command_id)

        try:
            definition, kwargs = self._resolve(command, data)
        except CommandError as e:
            logger.warning(e.message)
            response.message = e.message
            response.data = e.to_dict()
            return response.to_dict()

        try:
            result = await definition.handler(**kwargs)
        except (TypeError, ValueError) as e:
            logger.error(f"Bad arguments for command '{command}': {e}")
            response.message = f"Error: {e}"
            return response.to_dict()

        response.success = result.get("success", False)
        response.message = result.get("message")
        response.data = result.get("data")
        return response.to_dict()


async def atm_commands(
    command_data: dict[str, Any],
    service: Any,
) -> dict[str, Any]:
    """
    Execute a command on the ATM service.

    This is the entry point for command execution from Redis pub/sub.

    Args:
        command_data: Dictionary containing command name, ID, and data.
        service: The AtmService instance.

    Returns:
        Response dictionary with execution result.
    """
    handler = CommandHandler(service)
    return await handler.execute(command_data)
