"""
Input declaration and UI request types.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
from enum import Enum


class InputType(str, Enum):
    """Recognized input declaration types."""
    PROMPT_STRING = "promptString"
    PICK_STRING = "pickString"
    COMMAND = "command"


@dataclass
class InputDefinition:
    """
    Declared input, looked up by ``id`` for ``${input:id}`` variables.

    Fields are kept as declared (possibly missing or of the wrong type);
    the input resolver checks what each type requires.

    Attributes:
        id: Input identifier
        type: Declared type, normally one of InputType
        description: Prompt text or pick-list placeholder
        default: Pre-filled value or preferred pick option
        options: Pick-list options (pickString)
        command: Command id to run (command)
        args: Arguments passed to the command (command)
        password: Mask the typed value (promptString)
    """
    id: str
    type: Any = None
    description: Any = None
    default: Any = None
    options: Any = None
    command: Any = None
    args: Any = None
    password: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InputDefinition":
        return cls(
            id=data.get("id"),
            type=data.get("type"),
            description=data.get("description"),
            default=data.get("default"),
            options=data.get("options"),
            command=data.get("command"),
            args=data.get("args"),
            password=data.get("password") is True,
        )


@dataclass
class PromptOptions:
    """Free-text prompt request."""
    prompt: str
    value: str = ""
    password: bool = False


@dataclass
class PickItem:
    """Single pick-list entry; ``description`` marks the default choice."""
    label: str
    description: Optional[str] = None


@dataclass
class PickOptions:
    """Pick-list request options."""
    placeholder: str = ""

