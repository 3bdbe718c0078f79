# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for the CLI (logging adapter and errors)."""

from __future__ import annotations

from dataclasses import dataclass

import typer

from .. import logging as qg_logging
from ..console import detect_tty


class CLIError(RuntimeError):
    """Error raised when a CLI action fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around the logging helpers respecting emoji and stream settings.

    ``stderr`` is set in JSON mode so that human-readable messages never mix
    with the machine-readable document on stdout.
    """

    use_emoji: bool
    stderr: bool = False

    def info(self, message: str) -> None:
        qg_logging.info(message, use_emoji=self.use_emoji, stderr=self.stderr)

    def ok(self, message: str) -> None:
        qg_logging.ok(message, use_emoji=self.use_emoji, stderr=self.stderr)

    def warn(self, message: str) -> None:
        qg_logging.warn(message, use_emoji=self.use_emoji, stderr=self.stderr)

    def fail(self, message: str) -> None:
        qg_logging.fail(message, use_emoji=self.use_emoji, stderr=self.stderr)

    def plain(self, message: str) -> None:
        qg_logging.plain(message, stderr=self.stderr)

    def section(self, title: str) -> None:
        qg_logging.section(title, use_color=detect_tty(stderr=self.stderr), stderr=self.stderr)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout, bypassing rich markup handling.

        Args:
            message: Text written to standard output.
        """

        typer.echo(message)


def build_cli_logger(*, emoji: bool, stderr: bool = False) -> CLILogger:
    """Return a :class:`CLILogger` for the provided preferences."""

    return CLILogger(use_emoji=emoji, stderr=stderr)


__all__ = ["CLIError", "CLILogger", "build_cli_logger"]
