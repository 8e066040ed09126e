"""
Command registry.

Implements command registration, lookup and execution by id.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from ..exceptions import CommandNotFoundError
from .types import ShellCommand


logger = logging.getLogger(__name__)

CommandHandler = Callable[[Any], Any]


class CommandService(ABC):
    """Interface for executing a command by id."""

    @abstractmethod
    def execute(self, command_id: str, args: Any = None) -> Any:
        """
        Execute a command.

        Args:
            command_id: Command identifier
            args: Opaque argument handed to the command

        Returns:
            Whatever the command returns (may be None)
        """


class CommandRegistry(CommandService):
    """
    Registry of command handlers.

    Handlers registered from settings or code take precedence over the
    built-in commands.
    """

    def __init__(self):
        """Initialize empty command registry."""
        self._commands: Dict[str, CommandHandler] = {}
        self._builtin_commands = self._load_builtin_commands()

    def _load_builtin_commands(self) -> Dict[str, CommandHandler]:
        """
        Load built-in commands.

        Returns:
            Dictionary of built-in command handlers
        """
        def env_command(args: Any) -> Optional[str]:
            if not isinstance(args, str):
                return None
            return os.environ.get(args)

        def echo_command(args: Any) -> Optional[str]:
            return args if isinstance(args, str) else None

        return {
            "configresolver.env": env_command,
            "configresolver.echo": echo_command,
        }

    def register(self, command_id: str, handler: CommandHandler) -> None:
        """
        Register a command handler.

        Args:
            command_id: Command identifier
            handler: Callable receiving the command argument

        Raises:
            ValueError: If the handler is not callable or is an invalid shell command
        """
        if not callable(handler):
            raise ValueError(f"Handler for command '{command_id}' is not callable")
        if isinstance(handler, ShellCommand):
            errors = handler.validate()
            if errors:
                raise ValueError(f"Invalid command: {'; '.join(errors)}")

        self._commands[command_id] = handler
        logger.debug(f"Registered command: {command_id}")

    def register_from_settings(self, commands_config: Dict[str, Dict]) -> List[str]:
        """
        Register shell commands from the ``commands`` settings section.

        Args:
            commands_config: Command declarations keyed by id

        Returns:
            List of validation errors (empty if all valid)
        """
        errors = []

        for name, config in commands_config.items():
            if not isinstance(config, dict):
                errors.append(f"Command '{name}' must be a mapping")
                continue

            command = ShellCommand(
                name=name,
                argv=config.get("argv", []),
                env={str(k): str(v) for k, v in (config.get("env") or {}).items()},
                timeout_sec=config.get("timeout_sec"),
                strip=config.get("strip", True),
            )

            validation_errors = command.validate()
            if validation_errors:
                errors.extend(validation_errors)
            else:
                self.register(name, command)

        return errors

    def get(self, command_id: str) -> Optional[CommandHandler]:
        """Get a command handler by id, or None if not found."""
        return self._commands.get(command_id) or self._builtin_commands.get(command_id)

    def exists(self, command_id: str) -> bool:
        return command_id in self._commands or command_id in self._builtin_commands

    def list_commands(self) -> List[str]:
        """List all registered command ids."""
        return sorted(set(self._commands.keys()) | set(self._builtin_commands.keys()))

    def execute(self, command_id: str, args: Any = None) -> Any:
        handler = self.get(command_id)
        if handler is None:
            raise CommandNotFoundError(command_id)

        logger.debug(f"Executing command: {command_id}")
        return handler(args)
