"""Shared fakes for the prompt and command capabilities."""

from typing import Any, Dict, List, Optional

import pytest

from configresolver.commands.registry import CommandService
from configresolver.inputs.types import PickItem, PickOptions, PromptOptions
from configresolver.interaction.quick_input import QuickInput


class FakeQuickInput(QuickInput):
    """
    Scripted QuickInput.

    ``answers`` is consumed in order by both prompts and picks. A pick answer
    is the label to choose; None cancels.
    """

    def __init__(self, answers: Optional[List[Optional[str]]] = None):
        self.answers = list(answers or [])
        self.calls: List[tuple] = []

    def input(self, options: PromptOptions) -> Optional[str]:
        self.calls.append(('input', options))
        return self.answers.pop(0)

    def pick(self, items: List[PickItem], options: PickOptions) -> Optional[PickItem]:
        self.calls.append(('pick', items, options))
        answer = self.answers.pop(0)
        if answer is None:
            return None
        for item in items:
            if item.label == answer:
                return item
        raise AssertionError(f"Answer '{answer}' is not one of the pick items")


class FakeCommandService(CommandService):
    """Returns canned results (or calls canned functions) and records invocations."""

    def __init__(self, results: Optional[Dict[str, Any]] = None):
        self.results = results or {}
        self.calls: List[tuple] = []

    def execute(self, command_id: str, args: Any = None) -> Any:
        self.calls.append((command_id, args))
        result = self.results.get(command_id)
        if callable(result):
            return result(args)
        return result


@pytest.fixture
def quick_input():
    return FakeQuickInput()


@pytest.fixture
def command_service():
    return FakeCommandService()
