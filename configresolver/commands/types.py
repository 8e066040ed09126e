"""
Command type definitions.

Shell commands are declared in the ``commands`` settings section and run as
argv arrays; their standard output becomes the command's string result.
"""

import json
import logging
import os
import shlex
import subprocess
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from ..exceptions import CommandExecutionError


logger = logging.getLogger(__name__)


@dataclass
class ShellCommand:
    """
    Command backed by an external process.

    Attributes:
        name: Command id
        argv: Command array, or a string split with shlex
        env: Additional environment variables
        timeout_sec: Execution timeout (None waits forever)
        strip: Strip surrounding whitespace from stdout
    """
    name: str
    argv: Union[str, List[str]]
    env: Dict[str, str] = field(default_factory=dict)
    timeout_sec: Optional[int] = None
    strip: bool = True

    def validate(self) -> List[str]:
        """
        Validate the command declaration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.argv:
            errors.append(f"Command '{self.name}': argv cannot be empty")
        elif isinstance(self.argv, list) and not all(isinstance(a, str) for a in self.argv):
            errors.append(f"Command '{self.name}': argv must contain only strings")
        elif not isinstance(self.argv, (str, list)):
            errors.append(f"Command '{self.name}': argv must be a string or a list")

        if self.timeout_sec is not None and (
            not isinstance(self.timeout_sec, int) or self.timeout_sec <= 0
        ):
            errors.append(f"Command '{self.name}': timeout_sec must be a positive integer")

        return errors

    def __call__(self, args: Any = None) -> str:
        """
        Run the process and return its output.

        ``args`` is passed through the ``CONFIGRESOLVER_ARGS`` environment
        variable: strings as-is, anything else JSON-encoded. None sets nothing.

        Raises:
            CommandExecutionError: On non-zero exit, timeout or spawn failure
        """
        if isinstance(self.argv, str):
            command_argv = shlex.split(self.argv)
        else:
            command_argv = list(self.argv)

        process_env = os.environ.copy()
        process_env.update(self.env)
        if isinstance(args, str):
            process_env['CONFIGRESOLVER_ARGS'] = args
        elif args is not None:
            process_env['CONFIGRESOLVER_ARGS'] = json.dumps(args, default=str)

        logger.debug(f"Executing command '{self.name}': {command_argv}")

        try:
            # argv mode, no shell=True
            result = subprocess.run(
                command_argv,
                env=process_env,
                capture_output=True,
                text=True,
                timeout=self.timeout_sec,
            )
        except subprocess.TimeoutExpired:
            raise CommandExecutionError(
                self.name, f"timed out after {self.timeout_sec} seconds", exit_code=124
            )
        except OSError as e:
            raise CommandExecutionError(self.name, str(e), exit_code=1)

        if result.returncode != 0:
            raise CommandExecutionError(
                self.name,
                f"exit code {result.returncode}: {result.stderr.strip()}",
                exit_code=result.returncode
            )

        output = result.stdout
        return output.strip() if self.strip else output
