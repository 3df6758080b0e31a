"""
ATM Terminal - Main entry point.

Drives one AtmMachine from commands received over Redis pub/sub and
publishes a JSON response for every command.
"""

import asyncio
import json

from redis.asyncio import Redis

from application.atm_service import AtmService
from application.command_handler import atm_commands
from domain.atm_state_machine import AtmMachine
from infrastructure.settings import Settings, get_settings
from loggers import logger


# =============================================================================
# Redis Command Listener
# =============================================================================


async def listen_to_redis(redis: Redis, service: AtmService, settings: Settings) -> None:
    """
    Listen for commands on Redis pub/sub and process them.

    Args:
        redis: Redis client instance.
        service: AtmService that executes commands.
        settings: Settings holding the command and response channels.
    """
    command_channel = settings.atm.command_channel
    response_channel = settings.atm.response_channel

    pubsub = redis.pubsub()
    await pubsub.subscribe(command_channel)
    logger.info(f"Listening for commands on channel: {command_channel}")

    async for message in pubsub.listen():
        if message.get("type") != "message":
            continue

        raw_data = message.get("data")

        # Handle ping messages
        if raw_data == "ping":
            continue

        try:
            command = json.loads(raw_data)
            if not isinstance(command, dict):
                logger.error(f"Command must be a JSON object, got: {raw_data}")
                continue

            logger.info(f"Received command: {command}")

            response = await atm_commands(command, service)

            await redis.publish(response_channel, json.dumps(response))
            logger.info(f"Response sent to {response_channel}: {response}")

        except json.JSONDecodeError as e:
            logger.error(f"Command parsing error: {e}")
        except Exception as e:
            logger.error(f"Unexpected error processing command: {e}")


# =============================================================================
# Main Entry Point
# =============================================================================


async def main() -> None:
    """
    Main entry point for the ATM terminal service.

    Builds the machine from settings, connects to Redis and starts the
    command listener.
    """
    settings = get_settings()

    redis = Redis(
        host=settings.redis.host,
        port=settings.redis.port,
        decode_responses=settings.redis.decode_responses,
    )

    machine = AtmMachine(settings.atm.initial_cash, settings.atm.expected_pin)
    service = AtmService(machine)

    try:
        await listen_to_redis(redis, service, settings)
    finally:
        await redis.aclose()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Application stopped by user")
