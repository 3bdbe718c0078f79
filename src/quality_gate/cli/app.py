# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

from pathlib import Path

import typer

from .. import __version__
from ..constants import DEFAULT_CONFIG_FILE, EXECUTABLE_NAME
from . import rendering
from .options import (
    CONFIG_OPTION,
    EMOJI_OPTION,
    FIX_OPTION,
    FORCE_OPTION,
    HOOK_TYPE_ARGUMENT,
    INIT_OPTION,
    INSTALL_OPTION,
    OUTPUT_OPTION,
    TIMEOUT_OPTION,
    VALIDATE_OPTION,
    VERSION_OPTION,
    CLIOptions,
    OutputMode,
)
from .services import perform_fix, perform_init, perform_install, perform_run, perform_validate
from .shared import CLIError, build_cli_logger
from .typer_ext import QualityGateCommand, create_typer

app = create_typer(
    name=EXECUTABLE_NAME,
    help="Run configured quality checks as git hooks.",
    add_completion=False,
)


@app.command(
    cls=QualityGateCommand,
    epilog=(
        "Examples: quality-gate --init | quality-gate --install | "
        "quality-gate pre-commit | quality-gate --fix pre-commit"
    ),
)
def main(
    ctx: typer.Context,
    hook_type: HOOK_TYPE_ARGUMENT = None,
    fix: FIX_OPTION = False,
    init: INIT_OPTION = False,
    force: FORCE_OPTION = False,
    install: INSTALL_OPTION = False,
    validate: VALIDATE_OPTION = False,
    output: OUTPUT_OPTION = OutputMode.TEXT,
    config: CONFIG_OPTION = Path(DEFAULT_CONFIG_FILE),
    timeout: TIMEOUT_OPTION = None,
    emoji: EMOJI_OPTION = True,
    version: VERSION_OPTION = False,
) -> None:
    """Run the quality checks configured for HOOK_TYPE."""

    options = CLIOptions(
        hook_type=hook_type,
        config_path=config,
        output=output,
        emoji=emoji,
        timeout=timeout or None,  # 0 means no deadline
        force=force,
    )
    logger = build_cli_logger(emoji=options.emoji, stderr=options.json_output)

    if version:
        if options.json_output:
            logger.echo(rendering.dumps(rendering.version_payload(__version__)))
        else:
            logger.echo(f"{EXECUTABLE_NAME} {__version__}")
        raise typer.Exit(code=0)

    root = Path.cwd()
    try:
        if install:
            perform_install(root, logger=logger)
        elif init:
            perform_init(root, options, logger=logger)
        elif validate:
            perform_validate(options, logger=logger)
        elif hook_type is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(code=1)
        elif fix:
            perform_fix(hook_type, options, logger=logger)
        else:
            perform_run(hook_type, options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=0)


__all__ = ["app", "main"]
