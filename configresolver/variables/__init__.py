"""
Variable discovery and substitution.
"""

from .scanner import VariableScanner, find_variables
from .substitution import VariableSubstitutor

__all__ = ['VariableScanner', 'VariableSubstitutor', 'find_variables']
