# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Git hook installation helpers."""

from __future__ import annotations

from .installer import find_git_dir, hook_script, install_hooks
from .models import InstallResult
from .registry import available_hooks, is_supported, normalise_hook_order

__all__ = [
    "InstallResult",
    "available_hooks",
    "find_git_dir",
    "hook_script",
    "install_hooks",
    "is_supported",
    "normalise_hook_order",
]
