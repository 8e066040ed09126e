"""
Prompt and pick-list capabilities used by the input resolver.
"""

import getpass
import logging
import sys
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, TextIO

from ..inputs.types import PickItem, PickOptions, PromptOptions


logger = logging.getLogger(__name__)


class QuickInput(ABC):
    """
    Interface for asking the user for a value.

    Both methods block until the user answers and return ``None`` when the
    user cancels.
    """

    @abstractmethod
    def input(self, options: PromptOptions) -> Optional[str]:
        """Ask for free text, pre-filled with ``options.value``."""

    @abstractmethod
    def pick(self, items: List[PickItem], options: PickOptions) -> Optional[PickItem]:
        """Ask the user to choose exactly one of ``items``."""


class TerminalQuickInput(QuickInput):
    """
    QuickInput on a terminal.

    - Enter on an empty line accepts the pre-filled value (or the first
      pick item)
    - EOF and Ctrl-C cancel
    - Pick lists accept a 1-based number or an exact label
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        password_reader: Optional[Callable[[str], str]] = None
    ):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.password_reader = password_reader or getpass.getpass

    def input(self, options: PromptOptions) -> Optional[str]:
        prompt = options.prompt
        if options.value and not options.password:
            prompt = f"{prompt} [{options.value}]"

        try:
            if options.password:
                answer = self.password_reader(f"{prompt}: ")
            else:
                answer = self._read_line(f"{prompt}: ")
        except (EOFError, KeyboardInterrupt):
            logger.debug("Prompt cancelled")
            return None

        if answer == "":
            return options.value
        return answer

    def pick(self, items: List[PickItem], options: PickOptions) -> Optional[PickItem]:
        if not items:
            return None

        if options.placeholder:
            self.stdout.write(f"{options.placeholder}\n")
        for index, item in enumerate(items, start=1):
            suffix = f" ({item.description})" if item.description else ""
            self.stdout.write(f"  {index}) {item.label}{suffix}\n")

        while True:
            try:
                answer = self._read_line(f"Select [1-{len(items)}]: ").strip()
            except (EOFError, KeyboardInterrupt):
                logger.debug("Pick cancelled")
                return None

            if answer == "":
                return items[0]
            if answer.isdigit() and 1 <= int(answer) <= len(items):
                return items[int(answer) - 1]
            for item in items:
                if item.label == answer:
                    return item
            self.stdout.write(f"Invalid selection: {answer}\n")

    def _read_line(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\n")
