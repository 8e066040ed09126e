"""Main CLI entry point for configresolver."""

import argparse
import sys
from typing import Optional

from .commands import resolve_config, scan_config


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the configresolve CLI."""
    parser = argparse.ArgumentParser(
        prog='configresolve',
        description='Interactive configuration variable resolver'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Resolve command
    resolve_parser = subparsers.add_parser('resolve', help='Resolve all variables in a configuration')
    resolve_parser.add_argument(
        'config',
        type=str,
        help='Path to configuration file (YAML or JSON)'
    )
    resolve_parser.add_argument(
        '--settings',
        type=str,
        help='Path to settings file with input and command declarations'
    )
    resolve_parser.add_argument(
        '--section',
        type=str,
        default='launch',
        help="Settings section holding the 'inputs' list (default: launch)"
    )
    resolve_parser.add_argument(
        '--folder',
        type=str,
        help='Workspace folder path or declared folder name (default: current directory)'
    )
    resolve_parser.add_argument(
        '--no-folder',
        action='store_true',
        help='Resolve without an active workspace folder'
    )
    resolve_parser.add_argument(
        '--command-map',
        action='append',
        metavar='ALIAS=COMMAND',
        help='Command alias for ${command:ALIAS} (can be specified multiple times)'
    )
    resolve_parser.add_argument(
        '--format',
        choices=['json', 'yaml'],
        default='json',
        help='Output format'
    )
    resolve_parser.add_argument(
        '--output',
        type=str,
        help='Write the resolved configuration to a file instead of stdout'
    )
    resolve_parser.add_argument(
        '--show-mapping',
        action='store_true',
        help='Print the variable mapping instead of the resolved configuration'
    )
    _add_logging_arguments(resolve_parser)

    # Scan command
    scan_parser = subparsers.add_parser('scan', help='List input and command variables')
    scan_parser.add_argument(
        'config',
        type=str,
        help='Path to configuration file (YAML or JSON)'
    )
    _add_logging_arguments(scan_parser)

    return parser


def _add_logging_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='warn',
        help='Set log level'
    )


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'resolve':
        return resolve_config(parsed_args)
    elif parsed_args.command == 'scan':
        return scan_config(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
