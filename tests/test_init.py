# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the init flow."""

from __future__ import annotations

from pathlib import Path

import pytest

from quality_gate.errors import ConfigExistsError
from quality_gate.project import InitOptions, InitService, ProjectAnalyzer


def _python_project(root: Path) -> None:
    (root / "requirements.txt").write_text("pytest\n", encoding="utf-8")


def test_init_writes_generated_config(tmp_path: Path) -> None:
    _python_project(tmp_path)
    service = InitService(ProjectAnalyzer(tmp_path))
    target = tmp_path / "quality.yml"

    result = service.init(InitOptions(output_path=target))

    assert target.read_text(encoding="utf-8") == result.content
    assert "python-backend:" in result.content
    assert result.summary == []


def test_init_refuses_to_overwrite_without_force(tmp_path: Path) -> None:
    target = tmp_path / "quality.yml"
    target.write_text("keep me\n", encoding="utf-8")
    service = InitService(ProjectAnalyzer(tmp_path))

    with pytest.raises(ConfigExistsError):
        service.init(InitOptions(output_path=target))

    assert target.read_text(encoding="utf-8") == "keep me\n"


def test_init_force_overwrites_and_verbose_summarises(tmp_path: Path) -> None:
    _python_project(tmp_path)
    target = tmp_path / "quality.yml"
    target.write_text("old\n", encoding="utf-8")
    service = InitService(ProjectAnalyzer(tmp_path))

    result = service.init(InitOptions(output_path=target, force=True, verbose=True))

    assert target.read_text(encoding="utf-8").startswith("tools:")
    assert "   Languages: python" in result.summary


def test_preview_does_not_write(tmp_path: Path) -> None:
    _python_project(tmp_path)
    service = InitService(ProjectAnalyzer(tmp_path))

    text = service.preview()

    assert text.startswith("tools:")
    assert not (tmp_path / "quality.yml").exists()
