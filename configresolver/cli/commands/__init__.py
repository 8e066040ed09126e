"""CLI command handlers."""

from .resolve import resolve_config, scan_config

__all__ = ['resolve_config', 'scan_config']
