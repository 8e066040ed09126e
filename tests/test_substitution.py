"""
Tests for non-interactive variable resolution and mapping application.
"""

import os
import sys
from pathlib import Path

from configresolver.settings import WorkspaceFolder, WorkspaceSettings
from configresolver.variables.substitution import VariableSubstitutor


def make_settings():
    return WorkspaceSettings(
        values={
            "settings": {"python": {"path": "/usr/bin/python3", "debug": True, "port": 5678}},
            "launch": {"inputs": []},
        },
        folder_values={"api": {"settings": {"python": {"path": "/opt/venv/bin/python"}}}},
        folders={"api": WorkspaceFolder(name="api", path=Path("/work/api"))},
    )


class TestResolveKnown:
    """Phase-1 resolution."""

    def test_env_variables(self):
        substitutor = VariableSubstitutor(env={"HOME": "/home/dev"})

        config, mapping = substitutor.resolve_known({"home": "${env:HOME}/src"})

        assert config == {"home": "/home/dev/src"}
        assert mapping == {"env:HOME": "/home/dev"}

    def test_missing_env_variable_is_empty(self):
        substitutor = VariableSubstitutor(env={})

        config, mapping = substitutor.resolve_known("[${env:NOPE}]")

        assert config == "[]"
        assert mapping == {"env:NOPE": ""}

    def test_config_values_formatted(self):
        substitutor = VariableSubstitutor(make_settings(), env={})

        config, _ = substitutor.resolve_known([
            "${config:settings.python.path}",
            "${config:settings.python.debug}",
            "${config:settings.python.port}",
        ])

        assert config == ["/usr/bin/python3", "true", "5678"]

    def test_config_folder_override(self):
        settings = make_settings()
        substitutor = VariableSubstitutor(settings, env={})

        config, _ = substitutor.resolve_known(
            "${config:settings.python.path}", settings.get_folder("api")
        )

        assert config == "/opt/venv/bin/python"

    def test_missing_config_left_in_place(self):
        substitutor = VariableSubstitutor(make_settings(), env={})

        config, mapping = substitutor.resolve_known("${config:settings.nope}")

        assert config == "${config:settings.nope}"
        assert mapping == {}

    def test_workspace_folder_variables(self):
        folder = WorkspaceFolder(name="proj", path=Path("/work/proj"))
        substitutor = VariableSubstitutor(env={})

        config, _ = substitutor.resolve_known(
            {
                "cwd": "${workspaceFolder}",
                "root": "${workspaceRoot}",
                "base": "${workspaceFolderBasename}",
                "dir": "${cwd}",
            },
            folder,
        )

        assert config == {
            "cwd": str(Path("/work/proj")),
            "root": str(Path("/work/proj")),
            "base": "proj",
            "dir": str(Path("/work/proj")),
        }

    def test_named_workspace_folder(self):
        substitutor = VariableSubstitutor(make_settings(), env={})

        config, _ = substitutor.resolve_known("${workspaceFolder:api}/main.py")

        assert config == f"{Path('/work/api')}/main.py"

    def test_workspace_folder_without_folder_left_in_place(self):
        substitutor = VariableSubstitutor(env={})

        config, mapping = substitutor.resolve_known("${workspaceFolder}")

        assert config == "${workspaceFolder}"
        assert mapping == {}

    def test_cwd_without_folder(self, tmp_path):
        substitutor = VariableSubstitutor(env={}, cwd=tmp_path)

        config, _ = substitutor.resolve_known("${cwd}")

        assert config == str(tmp_path)

    def test_platform_variables(self):
        substitutor = VariableSubstitutor(env={})

        config, _ = substitutor.resolve_known(["${pathSeparator}", "${execPath}"])

        assert config == [os.sep, sys.executable]

    def test_interactive_and_unknown_variables_untouched(self):
        substitutor = VariableSubstitutor(env={"A": "a"})
        original = {"x": "${input:name}-${command:run}-${unknown}-${env:A}"}

        config, mapping = substitutor.resolve_known(original)

        assert config == {"x": "${input:name}-${command:run}-${unknown}-a"}
        assert mapping == {"env:A": "a"}
        assert original == {"x": "${input:name}-${command:run}-${unknown}-${env:A}"}

    def test_non_string_values_pass_through(self):
        substitutor = VariableSubstitutor(env={})

        config, _ = substitutor.resolve_known({"n": 1, "b": False, "z": None})

        assert config == {"n": 1, "b": False, "z": None}


class TestApplyMapping:
    """Final substitution pass."""

    def test_applies_mapping_everywhere(self):
        substitutor = VariableSubstitutor()
        config = {"cmd": "${input:name}-${command:echo}", "args": ["${input:name}"]}

        result = substitutor.apply_mapping(
            config, {"input:name": "x", "command:echo": "y"}
        )

        assert result == {"cmd": "x-y", "args": ["x"]}
        assert config["cmd"] == "${input:name}-${command:echo}"

    def test_unmapped_references_left(self):
        substitutor = VariableSubstitutor()

        result = substitutor.apply_mapping("${input:a} ${input:b}", {"input:a": "1"})

        assert result == "1 ${input:b}"

    def test_keys_not_substituted(self):
        substitutor = VariableSubstitutor()

        result = substitutor.apply_mapping({"${input:a}": "${input:a}"}, {"input:a": "1"})

        assert result == {"${input:a}": "1"}

    def test_empty_mapping_returns_config(self):
        substitutor = VariableSubstitutor()
        config = {"a": "${input:x}"}

        assert substitutor.apply_mapping(config, {}) is config
