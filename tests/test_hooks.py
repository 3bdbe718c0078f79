# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for git hook installation."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from quality_gate.hooks import available_hooks, hook_script, install_hooks, normalise_hook_order


def _make_repo(root: Path) -> Path:
    git_dir = root / ".git"
    git_dir.mkdir()
    return git_dir


def test_install_hooks_writes_executable_scripts(tmp_path: Path) -> None:
    git_dir = _make_repo(tmp_path)

    result = install_hooks(tmp_path)

    assert result.git_dir == git_dir.resolve()
    assert [path.name for path in result.installed] == ["pre-commit", "pre-push"]
    for name in available_hooks():
        destination = git_dir / "hooks" / name
        assert destination.read_text(encoding="utf-8") == f"#!/bin/sh\nexec quality-gate {name}\n"
        assert os.access(destination, os.X_OK)


def test_install_searches_parent_directories(tmp_path: Path) -> None:
    _make_repo(tmp_path)
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)

    result = install_hooks(nested, hook_types=["pre-push"])

    assert [path.name for path in result.installed] == ["pre-push"]
    assert not (tmp_path / ".git" / "hooks" / "pre-commit").exists()


def test_existing_foreign_hook_is_backed_up(tmp_path: Path) -> None:
    hooks_dir = _make_repo(tmp_path) / "hooks"
    hooks_dir.mkdir()
    (hooks_dir / "pre-commit").write_text("#!/bin/sh\necho legacy\n", encoding="utf-8")

    result = install_hooks(tmp_path, hook_types=["pre-commit"])

    assert len(result.backups) == 1
    assert result.backups[0].read_text(encoding="utf-8") == "#!/bin/sh\necho legacy\n"
    assert (hooks_dir / "pre-commit").read_text(encoding="utf-8") == hook_script("pre-commit")


def test_reinstall_leaves_identical_hooks_unchanged(tmp_path: Path) -> None:
    _make_repo(tmp_path)
    install_hooks(tmp_path)

    result = install_hooks(tmp_path)

    assert result.installed == []
    assert len(result.unchanged) == 2
    assert result.backups == []


def test_missing_repository_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        install_hooks(tmp_path)


def test_normalise_hook_order_filters_unknown_and_duplicates() -> None:
    assert normalise_hook_order(["pre-push", "commit-msg", "pre-push"]) == ("pre-push",)
    assert normalise_hook_order(None) == ("pre-commit", "pre-push")
