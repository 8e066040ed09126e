"""
Two-phase configuration resolution.

Phase 1 substitutes the non-interactive variables. Phase 2 scans the
partially resolved configuration for input and command variables and
resolves them interactively. Both mappings are merged into one cumulative
mapping, which is then applied to produce the final configuration.
"""

import logging
from typing import Any, Dict, Optional

from ..commands.registry import CommandService
from ..commands.resolver import CommandResolver
from ..inputs.resolver import InputResolver
from ..interaction.quick_input import QuickInput
from ..security import SecretsMasker
from ..settings import WorkspaceFolder, WorkspaceSettings
from ..variables.substitution import VariableSubstitutor
from .aggregator import update_mapping
from .orchestrator import InteractiveResolutionOrchestrator


logger = logging.getLogger(__name__)


class ConfigurationResolverService:
    """Resolves all variables of a configuration, asking the user where needed."""

    def __init__(
        self,
        settings: WorkspaceSettings,
        quick_input: QuickInput,
        command_service: CommandService,
        substitutor: Optional[VariableSubstitutor] = None,
        masker: Optional[SecretsMasker] = None
    ):
        """
        Initialize the service.

        Args:
            settings: Workspace settings holding input declarations
            quick_input: Prompt and pick-list capability
            command_service: Executes commands
            substitutor: Non-interactive resolver (default: built from settings)
            masker: Receives answers to password prompts
        """
        self.settings = settings
        self.substitutor = substitutor or VariableSubstitutor(settings)
        self.masker = masker or SecretsMasker()
        self.orchestrator = InteractiveResolutionOrchestrator(
            InputResolver(quick_input, command_service, self.masker),
            CommandResolver(command_service),
        )

    def resolve_with_interaction(
        self,
        folder: Optional[WorkspaceFolder],
        config: Any,
        section: Optional[str] = None,
        variables: Optional[Dict[str, str]] = None
    ) -> Optional[Dict[str, str]]:
        """
        Resolve every variable of ``config`` without substituting it.

        Args:
            folder: Active workspace folder; inputs are only looked up with one
            config: Configuration tree
            section: Settings section holding the ``inputs`` declarations
            variables: Command aliases for ${command:...} variables

        Returns:
            Cumulative mapping of variable reference to value, or None if
            the user cancelled
        """
        config, mapping = self.substitutor.resolve_known(config, folder)

        interactive = self._resolve_inputs_and_commands(folder, config, section, variables)
        if update_mapping(interactive, mapping):
            return mapping
        return None

    def resolve_with_interaction_replace(
        self,
        folder: Optional[WorkspaceFolder],
        config: Any,
        section: Optional[str] = None,
        variables: Optional[Dict[str, str]] = None
    ) -> Any:
        """
        Resolve every variable of ``config`` and return the substituted copy.

        Returns:
            New configuration, or None if the user cancelled
        """
        config, _ = self.substitutor.resolve_known(config, folder)

        mapping = self._resolve_inputs_and_commands(folder, config, section, variables)
        if mapping is None:
            return None
        elif mapping:
            return self.substitutor.apply_mapping(config, mapping)
        else:
            return config

    def _resolve_inputs_and_commands(
        self,
        folder: Optional[WorkspaceFolder],
        config: Any,
        section: Optional[str],
        variables: Optional[Dict[str, str]]
    ) -> Optional[Dict[str, str]]:
        if config is None:
            return None

        definitions = None
        if folder is not None:
            definitions = self.settings.get_inputs(section, folder)
            logger.debug(
                f"Found {len(definitions or [])} input declaration(s) "
                f"in section '{section}' for folder '{folder.name}'"
            )

        return self.orchestrator.resolve_config(config, definitions, variables)
