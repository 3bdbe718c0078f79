# SPDX-License-Identifier: MIT
"""Dataclasses describing hook installation outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True)
class InstallResult:
    """Aggregate outcome from installing quality-gate git hooks."""

    git_dir: Path
    installed: list[Path] = field(default_factory=list)
    unchanged: list[Path] = field(default_factory=list)
    backups: list[Path] = field(default_factory=list)


__all__ = ["InstallResult"]
