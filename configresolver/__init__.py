"""
Interactive resolution of ${input:...} and ${command:...} variables in
configuration trees.
"""

from .exceptions import (
    InvalidResultTypeError,
    MissingAttributeError,
    ResolutionError,
    UndefinedVariableError,
    UnknownInputTypeError,
)
from .resolution import ConfigurationResolverService, InteractiveResolutionOrchestrator
from .settings import SettingsLoader, WorkspaceFolder, WorkspaceSettings

__version__ = "0.1.0"

__all__ = [
    'ConfigurationResolverService',
    'InteractiveResolutionOrchestrator',
    'InvalidResultTypeError',
    'MissingAttributeError',
    'ResolutionError',
    'SettingsLoader',
    'UndefinedVariableError',
    'UnknownInputTypeError',
    'WorkspaceFolder',
    'WorkspaceSettings',
]
