# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Progress reporting used by the tool manager and hook runner."""

from __future__ import annotations

from typing import Protocol

from rich.status import Status

from .. import logging as qg_logging
from ..console import detect_tty, get_console_manager


def format_duration(seconds: float) -> str:
    """Return ``seconds`` rounded to milliseconds in a compact form.

    Args:
        seconds: Elapsed wall-clock time.

    Returns:
        str: ``"245ms"`` below one second, otherwise ``"1.234s"``.
    """

    millis = round(seconds * 1000)
    if millis < 1000:
        return f"{millis}ms"
    return f"{millis / 1000:.3f}s"


class ProgressReporter(Protocol):
    """Sink for spinner transitions and status lines emitted during a run."""

    def start(self, message: str) -> None:
        """Begin an activity indicator labelled ``message``."""
        ...

    def stop(self) -> None:
        """Stop the current activity indicator, if any."""
        ...

    def info(self, message: str) -> None: ...

    def ok(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def fail(self, message: str) -> None: ...

    def output(self, text: str) -> None:
        """Emit captured command output verbatim."""
        ...


class ConsoleReporter:
    """Render progress with a rich status spinner and the logging helpers."""

    def __init__(self, *, use_emoji: bool = True, use_color: bool | None = None, stderr: bool = False) -> None:
        """Create a reporter.

        Args:
            use_emoji: Prefix status lines with emoji markers.
            use_color: Explicit colour flag; ``None`` follows TTY detection.
            stderr: Write everything to standard error, keeping stdout free
                for machine-readable output.
        """

        self.use_emoji = use_emoji
        self.use_color = use_color
        self.stderr = stderr
        self._status: Status | None = None

    def start(self, message: str) -> None:
        self.stop()
        tty = detect_tty(stderr=self.stderr)
        if not tty:
            return
        color = tty if self.use_color is None else self.use_color
        console = get_console_manager().get(color=color, emoji=self.use_emoji, stderr=self.stderr)
        self._status = console.status(message)
        self._status.start()

    def stop(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def info(self, message: str) -> None:
        qg_logging.info(message, use_emoji=self.use_emoji, use_color=self.use_color, stderr=self.stderr)

    def ok(self, message: str) -> None:
        qg_logging.ok(message, use_emoji=self.use_emoji, use_color=self.use_color, stderr=self.stderr)

    def warn(self, message: str) -> None:
        qg_logging.warn(message, use_emoji=self.use_emoji, use_color=self.use_color, stderr=self.stderr)

    def fail(self, message: str) -> None:
        qg_logging.fail(message, use_emoji=self.use_emoji, use_color=self.use_color, stderr=self.stderr)

    def output(self, text: str) -> None:
        if text:
            qg_logging.plain(text.rstrip("\n"), stderr=self.stderr)


class NullReporter:
    """Reporter that discards everything."""

    def start(self, message: str) -> None:
        return None

    def stop(self) -> None:
        return None

    def info(self, message: str) -> None:
        return None

    def ok(self, message: str) -> None:
        return None

    def warn(self, message: str) -> None:
        return None

    def fail(self, message: str) -> None:
        return None

    def output(self, text: str) -> None:
        return None


__all__ = ["ConsoleReporter", "NullReporter", "ProgressReporter", "format_duration"]
