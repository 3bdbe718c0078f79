# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console management utilities."""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import Literal

from rich.console import Console


def detect_tty(*, stderr: bool = False) -> bool:
    """Return ``True`` when the selected output stream appears to be a terminal.

    Args:
        stderr: Inspect ``sys.stderr`` instead of ``sys.stdout``.

    Returns:
        bool: ``True`` when the stream reports TTY support, ``False`` otherwise.
    """

    stream = sys.stderr if stderr else sys.stdout
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


class RichConsoleManager:
    """Provision Rich :class:`Console` instances keyed by presentation flags."""

    def __init__(self) -> None:
        self._cache: dict[tuple[bool, bool, bool, bool], Console] = {}

    def get(self, *, color: bool, emoji: bool, stderr: bool = False) -> Console:
        """Return a Rich console configured for the requested preferences.

        Args:
            color: ``True`` when ANSI colour output should be enabled.
            emoji: ``True`` when Rich should render emoji glyphs.
            stderr: ``True`` to write to standard error, used when stdout is
                reserved for machine-readable output.

        Returns:
            Console: Cached or newly constructed console matching the preferences.
        """

        tty = detect_tty(stderr=stderr)
        key = (color, emoji, stderr, tty)
        if key not in self._cache:
            color_system: Literal["auto", "standard", "256", "truecolor", "windows"] | None = (
                "auto" if color and tty else None
            )
            self._cache[key] = Console(
                color_system=color_system,
                force_terminal=tty,
                no_color=not (color and tty),
                emoji=emoji,
                soft_wrap=True,
                stderr=stderr,
            )
        return self._cache[key]

    def clear(self) -> None:
        """Drop cached consoles so the next lookup rebinds to the current streams."""

        self._cache.clear()


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide :class:`RichConsoleManager` instance."""

    return RichConsoleManager()


__all__ = ["RichConsoleManager", "detect_tty", "get_console_manager"]
