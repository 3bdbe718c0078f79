# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Generate a starter configuration file for the current project."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..constants import DEFAULT_CONFIG_FILE
from ..errors import ConfigError, ConfigExistsError
from .analyzer import ProjectAnalyzer
from .models import ProjectStructure
from .templates import TemplateGenerator


@dataclass(frozen=True, slots=True)
class InitOptions:
    """Caller-supplied settings for one init invocation."""

    output_path: Path = Path(DEFAULT_CONFIG_FILE)
    force: bool = False
    verbose: bool = False


@dataclass(slots=True)
class InitResult:
    """Outcome of an init run."""

    path: Path
    structure: ProjectStructure
    content: str
    summary: list[str] = field(default_factory=list)


class InitService:
    """Analyse a project and write the generated configuration."""

    def __init__(self, analyzer: ProjectAnalyzer, generator: TemplateGenerator | None = None) -> None:
        self._analyzer = analyzer
        self._generator = generator or TemplateGenerator()

    def preview(self) -> str:
        """Return the configuration text that :meth:`init` would write."""

        return self._generator.generate(self._analyzer.scan())

    def init(self, options: InitOptions) -> InitResult:
        """Write a generated configuration according to ``options``.

        Args:
            options: Destination path, overwrite policy, and verbosity.

        Returns:
            InitResult: Detected structure, rendered text, and the path written.

        Raises:
            ConfigExistsError: If the destination exists and ``force`` is unset.
            ConfigError: If the destination cannot be written.
        """

        path = options.output_path
        if path.exists() and not options.force:
            raise ConfigExistsError(path)

        structure = self._analyzer.scan()
        content = self._generator.generate(structure)
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"failed to write {path}: {exc}") from exc

        summary = structure.summary_lines(self._analyzer.root) if options.verbose else []
        return InitResult(path=path, structure=structure, content=content, summary=summary)


__all__ = ["InitOptions", "InitResult", "InitService"]
