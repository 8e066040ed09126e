"""User interaction capabilities."""

from .quick_input import QuickInput, TerminalQuickInput

__all__ = ['QuickInput', 'TerminalQuickInput']
