# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry helpers describing the git hooks quality-gate can install."""

from __future__ import annotations

from collections.abc import Iterable

from ..constants import INSTALLABLE_HOOK_TYPES


def available_hooks() -> tuple[str, ...]:
    """Return the hook types installed by default.

    Returns:
        tuple[str, ...]: Supported git hook identifiers.
    """

    return INSTALLABLE_HOOK_TYPES


def is_supported(name: str) -> bool:
    """Return whether ``name`` identifies an installable hook."""

    return name in INSTALLABLE_HOOK_TYPES


def normalise_hook_order(hooks: Iterable[str] | None = None) -> tuple[str, ...]:
    """Return the requested supported hooks without duplicates, in request order.

    Args:
        hooks: Optional iterable of hook names provided by the caller.

    Returns:
        tuple[str, ...]: Supported hook names; every default when ``hooks`` is ``None``.
    """

    if hooks is None:
        return INSTALLABLE_HOOK_TYPES
    ordered: list[str] = []
    for hook in hooks:
        if hook in ordered or not is_supported(hook):
            continue
        ordered.append(hook)
    return tuple(ordered)


__all__ = ["available_hooks", "is_supported", "normalise_hook_order"]
