# SPDX-License-Identifier: MIT
"""Option declarations and the normalised options model for the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from ..constants import DEFAULT_CONFIG_FILE


class OutputMode(str, Enum):
    """Rendering mode for run results."""

    TEXT = "text"
    JSON = "json"


HOOK_TYPE_ARGUMENT = Annotated[
    str | None,
    typer.Argument(help="Hook type to run, e.g. pre-commit or pre-push.", show_default=False),
]
FIX_OPTION = Annotated[bool, typer.Option("--fix", help="Run the fix commands for the hook type.")]
INIT_OPTION = Annotated[bool, typer.Option("--init", help="Generate a configuration from project analysis.")]
FORCE_OPTION = Annotated[bool, typer.Option("--force", help="Overwrite an existing configuration on --init.")]
INSTALL_OPTION = Annotated[bool, typer.Option("--install", help="Install pre-commit and pre-push git hooks.")]
VALIDATE_OPTION = Annotated[bool, typer.Option("--validate", help="Validate the configuration and exit.")]
OUTPUT_OPTION = Annotated[
    OutputMode,
    typer.Option("--output", "-o", case_sensitive=False, help="Output format for results."),
]
CONFIG_OPTION = Annotated[
    Path,
    typer.Option("--config", "-c", help="Path to the configuration file.", dir_okay=False),
]
TIMEOUT_OPTION = Annotated[
    float | None,
    typer.Option(
        "--timeout",
        min=0.0,
        help="Per-command timeout in seconds; 0 disables it.",
        show_default=False,
    ),
]
EMOJI_OPTION = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji output.")]
VERSION_OPTION = Annotated[bool, typer.Option("--version", "-v", help="Show version information and exit.")]


@dataclass(frozen=True, slots=True)
class CLIOptions:
    """Runtime options collected from the command line."""

    hook_type: str | None
    config_path: Path = Path(DEFAULT_CONFIG_FILE)
    output: OutputMode = OutputMode.TEXT
    emoji: bool = True
    timeout: float | None = None
    force: bool = False

    @property
    def json_output(self) -> bool:
        return self.output is OutputMode.JSON


__all__ = [
    "CLIOptions",
    "CONFIG_OPTION",
    "EMOJI_OPTION",
    "FIX_OPTION",
    "FORCE_OPTION",
    "HOOK_TYPE_ARGUMENT",
    "INIT_OPTION",
    "INSTALL_OPTION",
    "OUTPUT_OPTION",
    "OutputMode",
    "TIMEOUT_OPTION",
    "VALIDATE_OPTION",
    "VERSION_OPTION",
]
