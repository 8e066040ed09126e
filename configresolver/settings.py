"""Workspace settings loading and strict validation."""

import copy
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml

from configresolver.exceptions import SettingsValidationError, ValidationError
from configresolver.inputs.types import InputDefinition


logger = logging.getLogger(__name__)


class PreservingLoader(yaml.SafeLoader):
    """YAML loader that keeps 'on', 'off', 'yes', 'no' as strings."""
    pass


# Remove the implicit bool resolvers so pick options like 'yes'/'no' or
# 'on'/'off' stay strings
PreservingLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp) for tag, regexp in resolvers
        if tag != 'tag:yaml.org,2002:bool'
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
# Plain true/false still load as booleans
PreservingLoader.add_implicit_resolver(
    'tag:yaml.org,2002:bool',
    re.compile(r'^(?:true|True|TRUE|false|False|FALSE)$'),
    list('tTfF'),
)


def load_yaml(path: Path) -> Any:
    """Load a YAML (or JSON) document with the preserving loader."""
    with open(path, 'r', encoding='utf-8') as f:
        return yaml.load(f, Loader=PreservingLoader)


def deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep merge overlay dict into base dict.

    Args:
        base: Base dictionary
        overlay: Overlay dictionary (takes precedence)

    Returns:
        Merged dictionary
    """
    result = copy.deepcopy(base)

    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)

    return result


@dataclass
class WorkspaceFolder:
    """A named workspace folder."""
    name: str
    path: Path

    @classmethod
    def from_path(cls, path: Path) -> "WorkspaceFolder":
        resolved = Path(path).resolve()
        return cls(name=resolved.name, path=resolved)


@dataclass
class WorkspaceSettings:
    """
    Loaded settings.

    Attributes:
        values: Top-level sections (e.g. 'settings', 'launch', 'tasks')
        folder_values: Per-folder overrides keyed by folder name
        folders: Declared workspace folders keyed by name
    """
    values: Dict[str, Any] = field(default_factory=dict)
    folder_values: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    folders: Dict[str, WorkspaceFolder] = field(default_factory=dict)

    def get_value(self, section: str, folder: Optional[WorkspaceFolder] = None) -> Any:
        """
        Get a section, with the folder's overrides merged over it.

        Args:
            section: Top-level section name
            folder: Folder whose overrides apply

        Returns:
            Section value or None if neither level defines it
        """
        value = self.values.get(section)
        if folder is None:
            return value

        override = self.folder_values.get(folder.name, {}).get(section)
        if override is None:
            return value
        if isinstance(value, dict) and isinstance(override, dict):
            return deep_merge(value, override)
        return override

    def get_inputs(
        self,
        section: Optional[str],
        folder: Optional[WorkspaceFolder] = None
    ) -> Optional[List[InputDefinition]]:
        """
        Get the input declarations of a section.

        Returns:
            Input definitions, or None if the section does not exist
        """
        if not section:
            return None
        value = self.get_value(section, folder)
        if not isinstance(value, dict):
            return None
        inputs = value.get('inputs')
        if not isinstance(inputs, list):
            return None
        return [InputDefinition.from_dict(item) for item in inputs if isinstance(item, dict)]

    def get_commands(self) -> Dict[str, Dict[str, Any]]:
        commands = self.values.get('commands')
        return commands if isinstance(commands, dict) else {}

    def get_folder(self, name: str) -> Optional[WorkspaceFolder]:
        return self.folders.get(name)


class SettingsLoader:
    """Loads and validates settings YAML."""

    RESERVED_SECTIONS = {'settings', 'folders', 'commands'}

    def __init__(self, workspace: Optional[Path] = None):
        """Initialize loader with workspace root (for relative folder paths)."""
        self.workspace = (workspace or Path.cwd()).resolve()
        self.errors: List[ValidationError] = []

    def load(self, settings_path: Path) -> WorkspaceSettings:
        """Load and validate a settings file."""
        self.errors = []
        try:
            data = load_yaml(settings_path)
        except (OSError, yaml.YAMLError) as e:
            self._add_error(f"Failed to load settings: {e}")
            self._raise_validation_errors()

        if data is None:
            data = {}
        if not isinstance(data, dict):
            self._add_error("Settings must be a YAML object/dictionary")
            self._raise_validation_errors()

        settings = self.from_dict(data)
        logger.debug(f"Loaded settings from {settings_path}")
        return settings

    def from_dict(self, data: Dict[str, Any]) -> WorkspaceSettings:
        """Validate an already parsed settings document."""
        self.errors = []

        folders, folder_values = self._parse_folders(data.get('folders'))

        if 'settings' in data and not isinstance(data['settings'], dict):
            self._add_error("'settings' must be a mapping", "settings")

        if 'commands' in data:
            self._validate_commands(data['commands'])

        for section, value in data.items():
            if section in self.RESERVED_SECTIONS:
                continue
            self._validate_section(section, value)

        for name, overrides in folder_values.items():
            for section, value in overrides.items():
                if section not in self.RESERVED_SECTIONS:
                    self._validate_section(section, value, prefix=f"folders.{name}.")

        if self.errors:
            self._raise_validation_errors()

        values = {k: v for k, v in data.items() if k != 'folders'}
        return WorkspaceSettings(values=values, folder_values=folder_values, folders=folders)

    def _parse_folders(self, folders_config: Any):
        folders: Dict[str, WorkspaceFolder] = {}
        folder_values: Dict[str, Dict[str, Any]] = {}

        if folders_config is None:
            return folders, folder_values
        if not isinstance(folders_config, dict):
            self._add_error("'folders' must be a mapping of folder name to settings", "folders")
            return folders, folder_values

        for name, config in folders_config.items():
            if config is None:
                config = {}
            if not isinstance(config, dict):
                self._add_error(f"Folder '{name}' must be a mapping", f"folders.{name}")
                continue
            config = dict(config)
            path = config.pop('path', name)
            folder_path = Path(str(path))
            if not folder_path.is_absolute():
                folder_path = self.workspace / folder_path
            folders[str(name)] = WorkspaceFolder(name=str(name), path=folder_path)
            folder_values[str(name)] = config

        return folders, folder_values

    def _validate_section(self, section: str, value: Any, prefix: str = ""):
        """Validate the 'inputs' list of a section, if present."""
        if not isinstance(value, dict) or 'inputs' not in value:
            return

        inputs = value['inputs']
        path = f"{prefix}{section}.inputs"
        if not isinstance(inputs, list):
            self._add_error("'inputs' must be a list", path)
            return

        seen_ids = set()
        for i, item in enumerate(inputs):
            item_path = f"{path}[{i}]"
            if not isinstance(item, dict):
                self._add_error("Input must be a mapping", item_path)
                continue

            input_id = item.get('id')
            if not isinstance(input_id, str) or not input_id:
                self._add_error("Input 'id' is required and must be a string", item_path)
            elif input_id in seen_ids:
                self._add_error(f"Duplicate input id '{input_id}'", item_path)
            else:
                seen_ids.add(input_id)

            # Unknown types are reported when the input is resolved
            if not isinstance(item.get('type'), str):
                self._add_error("Input 'type' is required and must be a string", item_path)

            if 'password' in item and not isinstance(item['password'], bool):
                self._add_error("Input 'password' must be true or false", item_path)

    def _validate_commands(self, commands: Any):
        if not isinstance(commands, dict):
            self._add_error("'commands' must be a mapping of command id to declaration", "commands")
            return

        for name, config in commands.items():
            path = f"commands.{name}"
            if not isinstance(config, dict):
                self._add_error("Command must be a mapping", path)
                continue
            argv = config.get('argv')
            if not argv or not isinstance(argv, (str, list)):
                self._add_error("'argv' is required and must be a string or a non-empty list", path)
            if 'env' in config and not isinstance(config['env'], dict):
                self._add_error("'env' must be a mapping", path)

    def _add_error(self, message: str, path: str = ""):
        self.errors.append(ValidationError(message=message, path=path))

    def _raise_validation_errors(self):
        raise SettingsValidationError(self.errors)
