"""
Sequential resolution of input and command variables.

Variables are resolved one at a time, in the order they were first
encountered in the configuration, so prompts appear in reading order and a
command can rely on the side effects of the ones before it. The first
variable without a string value aborts the whole pass.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..commands.resolver import CommandResolver
from ..inputs.resolver import InputResolver
from ..inputs.types import InputDefinition
from ..variables.scanner import VariableScanner


logger = logging.getLogger(__name__)


class InteractiveResolutionOrchestrator:
    """Drives input and command resolution over a scanned variable list."""

    def __init__(
        self,
        input_resolver: InputResolver,
        command_resolver: CommandResolver,
        scanner: Optional[VariableScanner] = None
    ):
        self.input_resolver = input_resolver
        self.command_resolver = command_resolver
        self.scanner = scanner or VariableScanner()

    def resolve_config(
        self,
        config: Any,
        definitions: Optional[Sequence[InputDefinition]] = None,
        alias_map: Optional[Dict[str, str]] = None
    ) -> Optional[Dict[str, str]]:
        """
        Scan ``config`` and resolve every input and command variable in it.

        Returns:
            Mapping of ``kind:name`` to value, or None if resolution was aborted
        """
        if config is None:
            return None
        return self.resolve_all(self.scanner.scan(config), definitions, alias_map, config)

    def resolve_all(
        self,
        variables: List[str],
        definitions: Optional[Sequence[InputDefinition]],
        alias_map: Optional[Dict[str, str]],
        full_config: Any
    ) -> Optional[Dict[str, str]]:
        """
        Resolve scanned variables in order.

        Args:
            variables: ``kind:name`` references, as returned by the scanner
            definitions: Declared inputs for ``input`` variables
            alias_map: Command aliases for ``command`` variables
            full_config: Configuration passed to direct commands

        Returns:
            Complete mapping, or None as soon as one variable has no string value

        Raises:
            ResolutionError: Configuration errors from the resolvers
        """
        if full_config is None:
            return None

        values: Dict[str, str] = {}

        for variable in variables:
            kind, _, name = variable.partition(':')

            result: Optional[str] = None
            if kind == 'input':
                result = self.input_resolver.resolve(name, definitions)
            elif kind == 'command':
                result = self.command_resolver.resolve(name, alias_map, full_config)

            if not isinstance(result, str):
                logger.info(f"Variable '{variable}' returned no value; aborting")
                return None

            values[variable] = result
            logger.debug(f"Resolved variable '{variable}'")

        return values
