"""
Resolution of ${input:NAME} variables.

Each declared input is resolved with one of three strategies:
- promptString: free-text prompt
- pickString: single choice from a list of options
- command: value returned by a command
"""

import logging
from typing import List, Optional, Sequence

from ..commands.registry import CommandService
from ..exceptions import (
    InvalidResultTypeError,
    MissingAttributeError,
    UndefinedVariableError,
    UnknownInputTypeError,
)
from ..interaction.quick_input import QuickInput
from ..security import SecretsMasker
from .types import InputDefinition, InputType, PickItem, PickOptions, PromptOptions


logger = logging.getLogger(__name__)

DEFAULT_PICK_DESCRIPTION = "Default"


def _is_string_list(value) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _prefill(default) -> str:
    # Numeric defaults (``default: 8080``) keep their text; booleans and
    # structured values are not offered
    if isinstance(default, str):
        return default
    if isinstance(default, (int, float)) and not isinstance(default, bool):
        return str(default)
    return ""


class InputResolver:
    """Asks the user (or a command) for the value of an input variable."""

    def __init__(
        self,
        quick_input: QuickInput,
        command_service: CommandService,
        masker: Optional[SecretsMasker] = None
    ):
        """
        Initialize the input resolver.

        Args:
            quick_input: Prompt and pick-list capability
            command_service: Executes command-type inputs
            masker: Receives answers to password prompts
        """
        self.quick_input = quick_input
        self.command_service = command_service
        self.masker = masker

    def resolve(
        self,
        name: str,
        definitions: Optional[Sequence[InputDefinition]]
    ) -> Optional[str]:
        """
        Resolve an input variable.

        Args:
            name: Variable name (text after ``input:``)
            definitions: Declared inputs for the active scope

        Returns:
            The value, or None if the user cancelled

        Raises:
            UndefinedVariableError: No declaration with a matching id
            MissingAttributeError: Declaration lacks a field its type requires
            UnknownInputTypeError: Declaration type is not recognized
            InvalidResultTypeError: Command-type input returned a non-string
        """
        info = self._find_definition(name, definitions)
        if info is None:
            raise UndefinedVariableError(name)

        if info.type == InputType.PROMPT_STRING:
            return self._prompt_string(name, info)
        elif info.type == InputType.PICK_STRING:
            return self._pick_string(name, info)
        elif info.type == InputType.COMMAND:
            return self._run_command(name, info)
        else:
            raise UnknownInputTypeError(name, info.type)

    def _find_definition(
        self,
        name: str,
        definitions: Optional[Sequence[InputDefinition]]
    ) -> Optional[InputDefinition]:
        # Later declarations win over earlier ones with the same id
        matches = [item for item in (definitions or []) if item.id == name]
        return matches[-1] if matches else None

    def _prompt_string(self, name: str, info: InputDefinition) -> Optional[str]:
        if not isinstance(info.description, str):
            raise MissingAttributeError(name, info.type, 'description')

        options = PromptOptions(
            prompt=info.description,
            value=_prefill(info.default),
            password=info.password,
        )
        answer = self.quick_input.input(options)

        # An empty answer counts as no answer
        if not answer:
            return None
        if info.password and self.masker is not None:
            self.masker.add(answer)
        return answer

    def _pick_string(self, name: str, info: InputDefinition) -> Optional[str]:
        if not isinstance(info.description, str):
            raise MissingAttributeError(name, info.type, 'description')
        if not _is_string_list(info.options):
            raise MissingAttributeError(name, info.type, 'options')

        picks: List[PickItem] = []
        for option in info.options:
            if option == info.default:
                picks.insert(0, PickItem(label=option, description=DEFAULT_PICK_DESCRIPTION))
            else:
                picks.append(PickItem(label=option))

        chosen = self.quick_input.pick(picks, PickOptions(placeholder=info.description))
        return chosen.label if chosen else None

    def _run_command(self, name: str, info: InputDefinition) -> Optional[str]:
        if not isinstance(info.command, str):
            raise MissingAttributeError(name, info.type, 'command')

        result = self.command_service.execute(info.command, info.args)
        if result is None or isinstance(result, str):
            return result
        raise InvalidResultTypeError(info.command, variable=name)
