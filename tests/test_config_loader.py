# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for YAML configuration loading."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from pydantic import ValidationError

from quality_gate.config import ConfigError, ConfigNotFoundError, load_config, parse_config

SAMPLE = """
tools:
  - name: "Ruff"
    check_command: "ruff --version"
    install_command: "pip install ruff"

hooks:
  security:
    pre-commit:
      - name: "Secrets"
        command: "gitleaks detect --no-git"
  backend:
    pre-push:
      - name: "Tests"
        command: "pytest"
    pre-commit:
      - name: "Lint"
        command: "ruff check ."
        fix_command: "ruff check --fix ."
        output_rules:
          show_on: failure
          on_failure_message: "Lint failed"
"""


def test_load_config_reads_tools_and_groups(write_config: Callable[[str], Path]) -> None:
    path = write_config(SAMPLE)

    config = load_config(path)

    assert config.source == path
    assert [tool.name for tool in config.tools] == ["Ruff"]
    assert [group.name for group in config.hooks] == ["security", "backend"]
    assert config.hook_types() == ("pre-commit", "pre-push")


def test_hooks_for_preserves_group_then_entry_order(write_config: Callable[[str], Path]) -> None:
    config = load_config(write_config(SAMPLE))

    names = [hook.name for hook in config.hooks_for("pre-commit")]

    assert names == ["Secrets", "Lint"]
    assert [hook.name for hook in config.hooks_for("pre-push")] == ["Tests"]
    assert config.hooks_for("commit-msg") == ()


def test_output_rules_and_fix_command_are_loaded(write_config: Callable[[str], Path]) -> None:
    config = load_config(write_config(SAMPLE))
    lint = config.hooks_for("pre-commit")[1]

    assert lint.has_fix
    assert lint.output_rules.show_on == "failure"
    assert lint.output_rules.on_failure_message == "Lint failed"
    assert not config.hooks_for("pre-commit")[0].has_fix


def test_duplicate_group_names_are_retained() -> None:
    text = """
hooks:
  backend:
    pre-commit:
      - name: one
        command: "true"
  backend:
    pre-commit:
      - name: two
        command: "true"
"""
    config = parse_config(text)

    assert [group.name for group in config.hooks] == ["backend", "backend"]
    assert [hook.name for hook in config.hooks_for("pre-commit")] == ["one", "two"]


def test_unknown_show_on_value_is_kept_for_validation() -> None:
    text = """
hooks:
  g:
    pre-commit:
      - name: n
        command: c
        output_rules:
          show_on: sometimes
"""
    hook = parse_config(text).hooks_for("pre-commit")[0]

    assert hook.output_rules.show_on == "sometimes"


def test_missing_fields_load_as_empty_strings() -> None:
    config = parse_config("tools:\n  - name: Lonely\n")

    tool = config.tools[0]
    assert tool.check_command == ""
    assert tool.install_command == ""


def test_empty_document_yields_empty_config() -> None:
    config = parse_config("")

    assert config.tools == ()
    assert config.hooks == ()


def test_missing_file_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(ConfigNotFoundError):
        load_config(tmp_path / "quality.yml")


@pytest.mark.parametrize(
    "text",
    [
        "tools: {name: x}\n",
        "hooks:\n  - not-a-mapping\n",
        "tools:\n  - name: [a, b]\n",
        "tools: [\n",
    ],
)
def test_malformed_documents_raise_config_error(text: str) -> None:
    with pytest.raises(ConfigError):
        parse_config(text)


def test_config_is_immutable(write_config: Callable[[str], Path]) -> None:
    config = load_config(write_config(SAMPLE))

    with pytest.raises(ValidationError):
        config.tools = ()  # type: ignore[misc]
