"""
Tests for discovery of input and command variables.
Order of first occurrence is preserved and each reference is reported once.
"""

from configresolver.variables.scanner import VariableScanner, find_variables


def test_scan_collects_input_and_command_variables():
    scanner = VariableScanner()
    config = {"program": "${input:file}", "args": ["--port", "${command:pickPort}"]}

    assert scanner.scan(config) == ["input:file", "command:pickPort"]


def test_scan_without_interactive_variables_is_empty():
    scanner = VariableScanner()
    config = {
        "cwd": "${workspaceFolder}",
        "env": {"HOME": "${env:HOME}"},
        "plain": "no variables here",
        "count": 3,
    }

    assert scanner.scan(config) == []


def test_scan_deduplicates_keeping_first_position():
    scanner = VariableScanner()
    config = {
        "a": "${input:second}",
        "b": ["${input:first}", "${input:second}"],
        "c": "${input:first}-${command:run}-${input:second}",
    }

    assert scanner.scan(config) == ["input:second", "input:first", "command:run"]


def test_scan_string_left_to_right():
    scanner = VariableScanner()

    result = scanner.scan("${command:b} then ${input:a} then ${command:b}")

    assert result == ["command:b", "input:a"]


def test_scan_traversal_order_lists_then_dict_values():
    scanner = VariableScanner()
    config = [
        "${input:one}",
        {"x": "${input:two}", "y": ["${input:three}"]},
        "${input:four}",
    ]

    assert scanner.scan(config) == ["input:one", "input:two", "input:three", "input:four"]


def test_scan_ignores_keys_and_non_string_scalars():
    scanner = VariableScanner()
    config = {"${input:key}": 1, "flag": True, "nothing": None, "ratio": 1.5}

    assert scanner.scan(config) == []


def test_scan_capture_is_non_greedy():
    scanner = VariableScanner()

    result = scanner.scan("${input:a}}${input:b}")

    assert result == ["input:a", "input:b"]


def test_scan_does_not_mutate_config():
    scanner = VariableScanner()
    config = {"a": ["${input:x}"]}

    scanner.scan(config)

    assert config == {"a": ["${input:x}"]}


def test_find_variables_appends_to_existing_list():
    variables = ["input:existing"]

    result = find_variables({"a": "${input:existing} ${command:new}"}, variables)

    assert result is variables
    assert variables == ["input:existing", "command:new"]
