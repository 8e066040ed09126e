"""Resolution of ${command:NAME} variables."""

import logging
from typing import Any, Dict, Optional

from ..exceptions import InvalidResultTypeError
from .registry import CommandService


logger = logging.getLogger(__name__)


class CommandResolver:
    """Runs the command behind a ${command:NAME} variable."""

    def __init__(self, command_service: CommandService):
        self.command_service = command_service

    def resolve(
        self,
        name: str,
        alias_map: Optional[Dict[str, str]],
        full_config: Any
    ) -> Optional[str]:
        """
        Resolve a command variable.

        The variable name is looked up in ``alias_map``; without a non-empty
        alias it is used as the command id itself. The whole configuration is
        passed as the command's argument.

        Args:
            name: Variable name (text after ``command:``)
            alias_map: Optional alias -> command id mapping
            full_config: Configuration being resolved

        Returns:
            The command's string result, or None if it returned nothing

        Raises:
            InvalidResultTypeError: If the command returned a non-string value
        """
        command_id = (alias_map.get(name) if alias_map else None) or name

        result = self.command_service.execute(command_id, full_config)
        if result is not None and not isinstance(result, str):
            raise InvalidResultTypeError(command_id)

        logger.debug(f"Command variable '{name}' resolved via '{command_id}'")
        return result
