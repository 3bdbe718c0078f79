# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

from rich.rule import Rule
from rich.text import Text

from .console import detect_tty, get_console_manager


def emoji(symbol: str, enable: bool) -> str:
    """Select an emoji symbol based on the caller's preference.

    Args:
        symbol: Emoji text to include in the output.
        enable: Flag indicating whether emoji output is desired.

    Returns:
        str: Emoji symbol when enabled, otherwise an empty string.
    """

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
    stderr: bool = False,
) -> None:
    """Render ``msg`` to the console using shared styling helpers.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
        stderr: Route the message to standard error.
    """

    color_enabled = detect_tty(stderr=stderr) if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji, stderr=stderr)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def section(title: str, *, use_color: bool, stderr: bool = False) -> None:
    """Render a section header to delineate console output blocks.

    Args:
        title: Section title displayed to the user.
        use_color: Flag indicating whether ANSI colour support is desired.
        stderr: Route the header to standard error.
    """

    console = get_console_manager().get(color=use_color, emoji=True, stderr=stderr)
    if use_color:
        console.print()
        console.print(Rule(title))
    else:
        console.print(f"\n--- {title} ---")


def plain(msg: str, *, stderr: bool = False) -> None:
    """Emit ``msg`` verbatim, without prefix or styling."""

    console = get_console_manager().get(color=False, emoji=False, stderr=stderr)
    console.print(Text(msg))


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None, stderr: bool = False) -> None:
    """Emit an informational message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
        stderr: Route the message to standard error.
    """

    prefix = emoji("ℹ️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color, stderr=stderr)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None, stderr: bool = False) -> None:
    """Emit a success message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
        stderr: Route the message to standard error.
    """

    prefix = emoji("✅ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="green", use_emoji=use_emoji, use_color=use_color, stderr=stderr)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None, stderr: bool = False) -> None:
    """Emit a warning message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
        stderr: Route the message to standard error.
    """

    prefix = emoji("⚠️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color, stderr=stderr)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None, stderr: bool = False) -> None:
    """Emit an error message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
        stderr: Route the message to standard error.
    """

    prefix = emoji("❌ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="red", use_emoji=use_emoji, use_color=use_color, stderr=stderr)


__all__ = ["emoji", "fail", "info", "ok", "plain", "section", "warn"]
