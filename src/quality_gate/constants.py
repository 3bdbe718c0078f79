# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across quality-gate modules."""

from __future__ import annotations

from typing import Final

DEFAULT_CONFIG_FILE: Final[str] = "quality.yml"
DEFAULT_HOOK_TYPE: Final[str] = "pre-commit"
EXECUTABLE_NAME: Final[str] = "quality-gate"

INSTALLABLE_HOOK_TYPES: Final[tuple[str, ...]] = ("pre-commit", "pre-push")

SKIP_DIRECTORIES: Final[frozenset[str]] = frozenset(
    {
        ".git",
        ".svn",
        ".hg",
        "node_modules",
        "vendor",
        "target",
        ".venv",
        "venv",
        "__pycache__",
        ".next",
        ".nuxt",
        "dist",
        "build",
        ".idea",
        ".vscode",
    }
)

TIMEOUT_EXIT_STATUS: Final[int] = 124

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_HOOK_TYPE",
    "EXECUTABLE_NAME",
    "INSTALLABLE_HOOK_TYPES",
    "SKIP_DIRECTORIES",
    "TIMEOUT_EXIT_STATUS",
]
