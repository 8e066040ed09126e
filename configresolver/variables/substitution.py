"""
Non-interactive variable resolution and substitution.

Handles the ${...} references that need no user interaction:
- environment: ${env:NAME}
- settings: ${config:section.key}
- workspace: ${workspaceFolder}, ${workspaceFolder:NAME}, ${workspaceRoot},
  ${workspaceFolderBasename}, ${cwd}
- platform: ${pathSeparator}, ${execPath}

Interactive references (${input:...}, ${command:...}) and anything unknown
are left in place for a later pass.
"""

import json
import logging
import os
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..settings import WorkspaceFolder, WorkspaceSettings


logger = logging.getLogger(__name__)


class VariableSubstitutor:
    """
    Resolves non-interactive variables and applies name -> value mappings.

    All operations return new trees; the input is never modified.
    """

    VAR_PATTERN = re.compile(r'\$\{([^}]+)\}')

    def __init__(
        self,
        settings: Optional[WorkspaceSettings] = None,
        env: Optional[Mapping[str, str]] = None,
        cwd: Optional[Path] = None
    ):
        """
        Initialize the substitutor.

        Args:
            settings: Workspace settings used for ${config:...} and folder lookups
            env: Environment used for ${env:...} (default: process environment)
            cwd: Directory reported by ${cwd} when no folder is active
        """
        self.settings = settings or WorkspaceSettings()
        self.env = env if env is not None else os.environ
        self.cwd = cwd

    def resolve_known(
        self,
        config: Any,
        folder: Optional[WorkspaceFolder] = None
    ) -> Tuple[Any, Dict[str, str]]:
        """
        Resolve all non-interactive variables in a configuration tree.

        Args:
            config: Configuration tree
            folder: Active workspace folder, if any

        Returns:
            Tuple of (new configuration, mapping of resolved references to values)
        """
        resolved: Dict[str, str] = {}

        def replace_var(match) -> str:
            var_text = match.group(1)
            value = self._resolve_variable(var_text, folder)
            if value is None:
                return match.group(0)
            resolved[var_text] = value
            return value

        new_config = self._transform(config, replace_var)
        logger.debug(f"Resolved {len(resolved)} non-interactive variable(s)")
        return new_config, resolved

    def apply_mapping(self, config: Any, mapping: Mapping[str, str]) -> Any:
        """
        Substitute ${key} for every key present in ``mapping``.

        Args:
            config: Configuration tree
            mapping: Variable reference (inner text) to value

        Returns:
            New configuration tree with known references replaced
        """
        if not mapping:
            return config

        def replace_var(match) -> str:
            var_text = match.group(1)
            if var_text in mapping:
                return mapping[var_text]
            return match.group(0)

        return self._transform(config, replace_var)

    def _transform(self, value: Any, replace_var) -> Any:
        if isinstance(value, str):
            return self.VAR_PATTERN.sub(replace_var, value)
        elif isinstance(value, list):
            return [self._transform(item, replace_var) for item in value]
        elif isinstance(value, dict):
            return {k: self._transform(v, replace_var) for k, v in value.items()}
        else:
            # Non-string/list/dict values pass through unchanged
            return value

    def _resolve_variable(
        self,
        var_text: str,
        folder: Optional[WorkspaceFolder]
    ) -> Optional[str]:
        """
        Resolve one variable reference like 'env:HOME' or 'workspaceFolder'.

        Args:
            var_text: Text between ``${`` and ``}``
            folder: Active workspace folder

        Returns:
            Resolved value or None if the variable is not handled here
        """
        name, _, argument = var_text.partition(':')

        if name == 'env':
            if not argument:
                return None
            return self.env.get(argument, '')
        elif name == 'config':
            if not argument:
                return None
            return self._resolve_config(argument, folder)
        elif name in ('workspaceFolder', 'workspaceRoot'):
            target = self._folder_for(argument, folder)
            return str(target.path) if target else None
        elif name == 'workspaceFolderBasename':
            target = self._folder_for(argument, folder)
            return Path(target.path).name if target else None
        elif name == 'cwd':
            if folder is not None:
                return str(folder.path)
            return str(self.cwd or Path.cwd())
        elif name == 'pathSeparator':
            return os.sep
        elif name == 'execPath':
            return sys.executable
        else:
            # input:, command: and unknown variables
            return None

    def _folder_for(
        self,
        folder_name: str,
        folder: Optional[WorkspaceFolder]
    ) -> Optional[WorkspaceFolder]:
        if folder_name:
            return self.settings.get_folder(folder_name)
        return folder

    def _resolve_config(
        self,
        key: str,
        folder: Optional[WorkspaceFolder]
    ) -> Optional[str]:
        parts = key.split('.')
        value = self.settings.get_value(parts[0], folder)
        value = self._resolve_path(value, parts[1:])

        if value is None:
            logger.debug(f"Configuration key not found: {key}")
            return None

        if isinstance(value, bool):
            return 'true' if value else 'false'
        elif isinstance(value, (int, float)):
            return str(value)
        elif isinstance(value, str):
            return value
        else:
            # Complex types get JSON representation
            return json.dumps(value)

    def _resolve_path(self, obj: Any, path: List[str]) -> Optional[Any]:
        """
        Resolve a path within an object.

        Args:
            obj: Object to traverse
            path: Path parts to follow

        Returns:
            Resolved value or None
        """
        current = obj
        for part in path:
            if isinstance(current, dict):
                current = current.get(part)
                if current is None:
                    return None
            else:
                return None
        return current
