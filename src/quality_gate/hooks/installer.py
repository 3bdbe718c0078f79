# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Write git hook scripts that delegate to the quality-gate executable."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path

from ..constants import EXECUTABLE_NAME
from .models import InstallResult
from .registry import normalise_hook_order

HOOK_FILE_MODE = 0o755


def hook_script(hook_type: str) -> str:
    """Return the script body installed for ``hook_type``."""

    return f"#!/bin/sh\nexec {EXECUTABLE_NAME} {hook_type}\n"


def find_git_dir(start: Path) -> Path:
    """Return the nearest ``.git`` directory at or above ``start``.

    Args:
        start: Directory where the upward search begins.

    Returns:
        Path: Located ``.git`` directory.

    Raises:
        FileNotFoundError: When no ancestor contains a ``.git`` directory.
    """

    current = start.resolve()
    for candidate in (current, *current.parents):
        git_dir = candidate / ".git"
        if git_dir.is_dir():
            return git_dir
    raise FileNotFoundError(".git directory not found")


def install_hooks(start: Path, *, hook_types: Iterable[str] | None = None) -> InstallResult:
    """Install hook scripts into the repository containing ``start``.

    An existing hook with different content is renamed to a timestamped
    backup before being replaced; an identical one is left untouched.

    Args:
        start: Directory inside the target repository.
        hook_types: Hook names to install; defaults to pre-commit and pre-push.

    Returns:
        InstallResult: Paths written, left unchanged, and backed up.

    Raises:
        FileNotFoundError: When ``start`` is not inside a git repository.
        OSError: When a hook file cannot be written.
    """

    git_dir = find_git_dir(start)
    target_dir = git_dir / "hooks"
    target_dir.mkdir(parents=True, exist_ok=True)

    result = InstallResult(git_dir=git_dir)
    for hook_type in normalise_hook_order(hook_types):
        destination = target_dir / hook_type
        content = hook_script(hook_type)

        if destination.is_file():
            if destination.read_text(encoding="utf-8", errors="replace") == content:
                destination.chmod(HOOK_FILE_MODE)
                result.unchanged.append(destination)
                continue
            timestamp = datetime.now(UTC).strftime("%Y%m%d_%H%M%S")
            backup_path = destination.with_name(f"{destination.name}.backup.{timestamp}")
            destination.rename(backup_path)
            result.backups.append(backup_path)

        destination.write_text(content, encoding="utf-8")
        destination.chmod(HOOK_FILE_MODE)
        result.installed.append(destination)
    return result


__all__ = ["find_git_dir", "hook_script", "install_hooks"]
