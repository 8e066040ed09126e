"""Resolve and scan command implementations."""

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from configresolver.commands.registry import CommandRegistry
from configresolver.exceptions import (
    CommandExecutionError,
    CommandNotFoundError,
    ResolutionError,
    SettingsValidationError,
)
from configresolver.interaction.quick_input import TerminalQuickInput
from configresolver.resolution.service import ConfigurationResolverService
from configresolver.security import SecretsMasker, SecretsMaskingFilter
from configresolver.settings import (
    SettingsLoader,
    WorkspaceFolder,
    WorkspaceSettings,
    load_yaml,
)
from configresolver.variables.scanner import VariableScanner


logger = logging.getLogger(__name__)


def setup_logging(args: Namespace, masker: Optional[SecretsMasker] = None) -> None:
    """Configure root logging from --log-level, --debug and --quiet."""
    log_level = getattr(logging, args.log_level.upper())
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if masker is not None:
        for handler in logging.getLogger().handlers:
            handler.addFilter(SecretsMaskingFilter(masker))


def parse_command_map(items: Optional[list]) -> Optional[Dict[str, str]]:
    """Parse ALIAS=COMMAND pairs from the command line."""
    if not items:
        return None

    command_map = {}
    for item in items:
        if '=' not in item:
            raise ValueError(f"Invalid command map format: {item}. Expected ALIAS=COMMAND")
        alias, command_id = item.split('=', 1)
        if not alias:
            raise ValueError(f"Invalid command map format: {item}. Alias cannot be empty")
        command_map[alias] = command_id
    return command_map


def select_folder(args: Namespace, settings: WorkspaceSettings) -> Optional[WorkspaceFolder]:
    """
    Determine the active workspace folder.

    A declared folder is matched by name first, then by path; any other
    path becomes an ad-hoc folder named after its directory.
    """
    if args.no_folder:
        return None

    if args.folder:
        declared = settings.get_folder(args.folder)
        if declared is not None:
            return declared
        folder_path = Path(args.folder).resolve()
    else:
        folder_path = Path.cwd().resolve()

    for folder in settings.folders.values():
        if Path(folder.path).resolve() == folder_path:
            return folder
    return WorkspaceFolder.from_path(folder_path)


def load_config(config_path: Path) -> Any:
    """Load the configuration tree to resolve."""
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    return load_yaml(config_path)


def render(value: Any, output_format: str) -> str:
    if output_format == 'yaml':
        return yaml.safe_dump(value, sort_keys=False, allow_unicode=True)
    return json.dumps(value, indent=2, ensure_ascii=False) + "\n"


def resolve_config(args: Namespace) -> int:
    """
    Resolve a configuration file interactively.

    Exit codes: 0 success, 1 cancelled or execution failure,
    2 configuration or validation error.
    """
    masker = SecretsMasker()
    setup_logging(args, masker)

    try:
        config_path = Path(args.config).resolve()
        logger.info(f"Loading configuration: {config_path}")
        config = load_config(config_path)

        settings = WorkspaceSettings()
        if args.settings:
            settings_path = Path(args.settings).resolve()
            settings = SettingsLoader(settings_path.parent).load(settings_path)

        registry = CommandRegistry()
        errors = registry.register_from_settings(settings.get_commands())
        if errors:
            for error in errors:
                logger.error(f"Validation error: {error}")
            return 2

        service = ConfigurationResolverService(
            settings=settings,
            quick_input=TerminalQuickInput(stdout=sys.stderr),
            command_service=registry,
            masker=masker,
        )
        folder = select_folder(args, settings)
        command_map = parse_command_map(args.command_map)

        if args.show_mapping:
            result = service.resolve_with_interaction(folder, config, args.section, command_map)
            if result is not None:
                result = masker.mask_dict(result)
        else:
            result = service.resolve_with_interaction_replace(folder, config, args.section, command_map)

        if result is None:
            logger.warning("Resolution cancelled")
            return 1

        text = render(result, args.format)
        if args.output:
            output_path = Path(args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(text, encoding='utf-8')
            logger.info(f"Wrote resolved configuration to {output_path}")
        else:
            sys.stdout.write(text)

        return 0

    except SettingsValidationError as e:
        for error in e.errors:
            logger.error(f"Validation error: {error.message}" + (f" ({error.path})" if error.path else ""))
        return e.exit_code
    except ResolutionError as e:
        logger.error(str(e))
        return e.exit_code
    except (CommandNotFoundError, CommandExecutionError) as e:
        logger.error(str(e))
        return 1
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except (ValueError, yaml.YAMLError) as e:
        logger.error(f"Validation error: {e}")
        return 2
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1


def scan_config(args: Namespace) -> int:
    """Print the input and command variables of a configuration, in order."""
    setup_logging(args)

    try:
        config = load_config(Path(args.config).resolve())
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except yaml.YAMLError as e:
        logger.error(f"Validation error: {e}")
        return 2

    for variable in VariableScanner().scan(config):
        sys.stdout.write(f"{variable}\n")
    return 0
