"""Interactive resolution of configuration variables."""

from .aggregator import SessionMapping, update_mapping
from .orchestrator import InteractiveResolutionOrchestrator
from .service import ConfigurationResolverService

__all__ = [
    'ConfigurationResolverService',
    'InteractiveResolutionOrchestrator',
    'SessionMapping',
    'update_mapping',
]
