"""
Discovery of interactive variables in a configuration tree.

Only ``${input:...}`` and ``${command:...}`` references are collected; all
other ``${...}`` references are left to the non-interactive substitutor.
"""

import re
from typing import Any, List, Optional


class VariableScanner:
    """
    Collects interactive variable references in first-encounter order.

    Strings are scanned left to right, lists element by element and dicts
    value by value in key order. Each ``kind:name`` reference is reported
    once, at the position of its first occurrence.
    """

    INPUT_OR_COMMAND_PATTERN = re.compile(r'\$\{((input|command):(.*?))\}')

    def scan(self, root: Any) -> List[str]:
        """
        Scan a configuration value for input and command variables.

        Args:
            root: String, list, dict or any other value

        Returns:
            Ordered, deduplicated list of ``kind:name`` references
        """
        variables: List[str] = []
        self._collect(root, variables)
        return variables

    def _collect(self, value: Any, variables: List[str]) -> None:
        if isinstance(value, str):
            for match in self.INPUT_OR_COMMAND_PATTERN.finditer(value):
                reference = match.group(1)
                if reference not in variables:
                    variables.append(reference)
        elif isinstance(value, list):
            for item in value:
                self._collect(item, variables)
        elif isinstance(value, dict):
            for key in value:
                self._collect(value[key], variables)


def find_variables(root: Any, variables: Optional[List[str]] = None) -> List[str]:
    """Scan ``root`` and append new references to ``variables`` (if given)."""
    found = variables if variables is not None else []
    VariableScanner()._collect(root, found)
    return found
