"""
Declared inputs and their interactive resolution.
"""

from .types import InputDefinition, InputType, PickItem, PickOptions, PromptOptions
from .resolver import InputResolver

__all__ = [
    'InputDefinition',
    'InputType',
    'InputResolver',
    'PickItem',
    'PickOptions',
    'PromptOptions',
]
