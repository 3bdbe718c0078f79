# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Actions behind each CLI mode, wired to the core components."""

from __future__ import annotations

from pathlib import Path

from ..config.loader import load_config
from ..config.models import Config
from ..constants import EXECUTABLE_NAME
from ..errors import ConfigError
from ..execution.hook_runner import HookRunner
from ..execution.models import FixReport, RunReport
from ..execution.reporting import ConsoleReporter
from ..execution.shell import SubprocessShellRunner
from ..execution.tool_manager import ToolInstallManager
from ..hooks import install_hooks
from ..orchestrator import QualityGate
from ..project.analyzer import ProjectAnalyzer
from ..project.init import InitOptions, InitService
from ..validation.models import ValidationResult
from ..validation.validator import validate_config
from . import rendering
from .options import CLIOptions
from .shared import CLIError, CLILogger


def perform_install(root: Path, *, logger: CLILogger) -> None:
    """Install the git hooks for the repository containing ``root``.

    Raises:
        CLIError: When no repository is found or a hook cannot be written.
    """

    logger.info("Installing git hooks...")
    try:
        result = install_hooks(root)
    except OSError as exc:
        logger.fail(f"Error installing git hooks: {exc}")
        raise CLIError(str(exc)) from exc

    if result.backups:
        logger.warn("Backed up existing hooks: " + ", ".join(str(path) for path in result.backups))
    logger.ok("Git hooks installed successfully.")


def perform_init(root: Path, options: CLIOptions, *, logger: CLILogger) -> None:
    """Analyse ``root`` and write a starter configuration.

    Raises:
        CLIError: When the file exists without ``--force`` or cannot be written.
    """

    logger.info(f"Initializing {options.config_path}...")
    service = InitService(ProjectAnalyzer(root))
    init_options = InitOptions(output_path=options.config_path, force=options.force, verbose=True)
    try:
        result = service.init(init_options)
    except (ConfigError, FileNotFoundError) as exc:
        logger.fail(f"Error initializing {options.config_path}: {exc}")
        raise CLIError(str(exc)) from exc

    if options.json_output:
        logger.echo(rendering.dumps(rendering.init_payload(result.path, result.structure.to_dict())))
    for line in result.summary:
        logger.plain(line)
    logger.ok(f"Successfully created {result.path}")
    logger.plain("Next steps:")
    logger.plain(f"  1. Review and customize {result.path}")
    logger.plain(f"  2. Run '{EXECUTABLE_NAME} --validate' to check the configuration")
    logger.plain(f"  3. Run '{EXECUTABLE_NAME} --install' to install git hooks")


def load_or_fail(path: Path, *, logger: CLILogger) -> Config:
    """Load the configuration at ``path``, converting errors into :class:`CLIError`."""

    try:
        return load_config(path)
    except ConfigError as exc:
        logger.fail(f"Error loading {path}: {exc}")
        raise CLIError(str(exc)) from exc


def perform_validate(options: CLIOptions, *, logger: CLILogger) -> ValidationResult:
    """Validate the configuration file and render the findings.

    Raises:
        CLIError: When the file cannot be loaded or blocking findings exist.
    """

    logger.section(f"Validating {options.config_path}")
    config = load_or_fail(options.config_path, logger=logger)
    result = validate_config(config, config_path=options.config_path)
    if options.json_output:
        logger.echo(rendering.dumps(rendering.validation_payload(result)))
    else:
        logger.plain(result.format())
    if not result.valid:
        raise CLIError("configuration is invalid")
    return result


def build_quality_gate(options: CLIOptions) -> QualityGate:
    """Construct the orchestrator with real shell execution and console progress."""

    shell = SubprocessShellRunner(timeout=options.timeout)
    reporter = ConsoleReporter(use_emoji=options.emoji, stderr=options.json_output)
    return QualityGate(ToolInstallManager(shell, reporter), HookRunner(shell, reporter))


def perform_fix(hook_type: str, options: CLIOptions, *, logger: CLILogger, gate: QualityGate | None = None) -> FixReport:
    """Run fix commands for ``hook_type``.

    Raises:
        CLIError: When loading fails or a fix command fails.
    """

    config = load_or_fail(options.config_path, logger=logger)
    gate = gate or build_quality_gate(options)
    logger.info("Fixing fixable issues...")
    report = gate.fix(config, hook_type)
    if report.error is not None:
        logger.fail(f"Error fixing issues: {report.error}")
        raise CLIError(str(report.error))
    logger.ok("Fixable issues fixed successfully.")
    return report


def perform_run(hook_type: str, options: CLIOptions, *, logger: CLILogger, gate: QualityGate | None = None) -> RunReport:
    """Run the checks for ``hook_type`` and render the outcome.

    Raises:
        CLIError: When loading fails or the run reports an error.
    """

    config = load_or_fail(options.config_path, logger=logger)
    gate = gate or build_quality_gate(options)
    report = gate.run(config, hook_type)
    if report.error is not None:
        logger.fail(f"Quality gate failed: {report.error}")
    if options.json_output:
        logger.echo(rendering.dumps(rendering.run_payload(report)))
    elif report.error is None:
        logger.ok("Quality gate passed successfully.")
    if report.error is not None:
        raise CLIError(str(report.error))
    return report


__all__ = [
    "build_quality_gate",
    "load_or_fail",
    "perform_fix",
    "perform_init",
    "perform_install",
    "perform_run",
    "perform_validate",
]
