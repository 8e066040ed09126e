"""
Command execution for ${command:...} variables and command-type inputs.
"""

from .types import ShellCommand
from .registry import CommandRegistry, CommandService
from .resolver import CommandResolver


__all__ = [
    "ShellCommand",
    "CommandService",
    "CommandRegistry",
    "CommandResolver",
]
