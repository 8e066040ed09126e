"""Resolver exceptions."""

from typing import List, Optional
from dataclasses import dataclass


class ResolutionError(Exception):
    """Base class for configuration errors raised while resolving variables.

    Cancellation by the user is not an error: it surfaces as a ``None``
    result from the resolvers instead.
    """

    exit_code = 2


class UndefinedVariableError(ResolutionError):
    """Raised when ``${input:NAME}`` has no matching input declaration."""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(
            f"Undefined input variable '{variable}' encountered. "
            f"Remove or define '{variable}' to continue."
        )


class MissingAttributeError(ResolutionError):
    """Raised when an input declaration lacks a field required by its type."""

    def __init__(self, variable: str, input_type: str, attribute: str):
        self.variable = variable
        self.input_type = input_type
        self.attribute = attribute
        super().__init__(
            f"Input variable '{variable}' is of type '{input_type}' "
            f"and must include '{attribute}'."
        )


class UnknownInputTypeError(ResolutionError):
    """Raised when an input declaration has an unrecognized type."""

    def __init__(self, variable: str, input_type: Optional[str] = None):
        self.variable = variable
        self.input_type = input_type
        super().__init__(
            f"Input variable '{variable}' can only be of type "
            f"'promptString', 'pickString', or 'command'."
        )


class InvalidResultTypeError(ResolutionError):
    """Raised when a command returns something other than a string or None.

    ``variable`` is set when the command backs an input declaration, and
    unset for direct ``${command:...}`` variables.
    """

    def __init__(self, command_id: str, variable: Optional[str] = None):
        self.command_id = command_id
        self.variable = variable
        if variable is None:
            message = (
                f"Cannot substitute command variable '{command_id}' because "
                f"command did not return a result of type string."
            )
        else:
            message = (
                f"Cannot substitute input variable '{variable}' because command "
                f"'{command_id}' did not return a result of type string."
            )
        super().__init__(message)


class CommandNotFoundError(Exception):
    """Raised when a command id is not registered."""

    def __init__(self, command_id: str):
        self.command_id = command_id
        super().__init__(f"Command '{command_id}' not found")


class CommandExecutionError(Exception):
    """Raised when a shell-backed command fails or times out."""

    def __init__(self, command_id: str, message: str, exit_code: Optional[int] = None):
        self.command_id = command_id
        self.exit_code = exit_code
        super().__init__(f"Command '{command_id}' failed: {message}")


@dataclass
class ValidationError:
    """Single settings validation error."""
    message: str
    path: str = ""
    exit_code: int = 2


class SettingsValidationError(Exception):
    """Raised when settings validation fails.

    The loader collects every error before raising, so the CLI can report
    them all at once and map to the validation exit code.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors
        self.exit_code = 2

        messages = []
        for error in errors:
            if error.path:
                messages.append(f"Validation error at {error.path}: {error.message}")
            else:
                messages.append(f"Validation error: {error.message}")

        super().__init__("\n".join(messages))
