"""Tests for ${command:...} resolution and command aliases."""

import pytest

from configresolver.commands.resolver import CommandResolver
from configresolver.exceptions import InvalidResultTypeError

from tests.conftest import FakeCommandService


def test_name_used_as_command_id_without_alias():
    commands = FakeCommandService({"build.task": "done"})
    config = {"task": "${command:build.task}"}

    result = CommandResolver(commands).resolve("build.task", None, config)

    assert result == "done"
    assert commands.calls == [("build.task", config)]


def test_alias_map_selects_command_id():
    commands = FakeCommandService({"extension.pickProcess": "4242"})

    result = CommandResolver(commands).resolve(
        "pickProcess", {"pickProcess": "extension.pickProcess"}, {}
    )

    assert result == "4242"
    assert commands.calls[0][0] == "extension.pickProcess"


def test_empty_alias_falls_back_to_name():
    commands = FakeCommandService({"pickProcess": "1"})

    CommandResolver(commands).resolve("pickProcess", {"pickProcess": ""}, {})

    assert commands.calls[0][0] == "pickProcess"


def test_alias_map_without_entry_falls_back_to_name():
    commands = FakeCommandService({"other": "1"})

    CommandResolver(commands).resolve("other", {"pickProcess": "x"}, {})

    assert commands.calls[0][0] == "other"


def test_full_config_passed_as_argument():
    config = {"name": "Launch", "args": ["${command:ctx}"]}
    commands = FakeCommandService({"ctx": lambda args: args["name"]})

    assert CommandResolver(commands).resolve("ctx", None, config) == "Launch"


def test_none_result_passes_through():
    commands = FakeCommandService()

    assert CommandResolver(commands).resolve("silent", None, {}) is None


@pytest.mark.parametrize("value", [1, ["a"], {"a": "b"}, True])
def test_non_string_result_raises(value):
    commands = FakeCommandService({"bad": value})

    with pytest.raises(InvalidResultTypeError) as exc_info:
        CommandResolver(commands).resolve("bad", None, {})

    assert exc_info.value.command_id == "bad"
    assert exc_info.value.variable is None
    assert "Cannot substitute command variable 'bad'" in str(exc_info.value)


def test_error_names_aliased_command():
    commands = FakeCommandService({"real.id": 5})

    with pytest.raises(InvalidResultTypeError, match="'real.id'"):
        CommandResolver(commands).resolve("alias", {"alias": "real.id"}, {})
