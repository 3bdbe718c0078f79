# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Starter configuration synthesis from a detected project structure.

Rendering walks explicit tuples only (tools, groups, commands, and output-rule
pairs), so equal inputs always produce byte-identical documents.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Final, TypeVar

from ..constants import DEFAULT_HOOK_TYPE, EXECUTABLE_NAME
from ..config.models import ShowOn
from .models import Language, ProjectStructure

OutputRulePairs = tuple[tuple[str, str], ...]
ItemT = TypeVar("ItemT")

FORMAT_FAILURE_MESSAGE: Final[str] = (
    f"Code formatting issues detected. Run '{EXECUTABLE_NAME} --fix {DEFAULT_HOOK_TYPE}' to format."
)


@dataclass(frozen=True, slots=True)
class ToolTemplate:
    """Tool entry emitted into the generated document."""

    name: str
    check_command: str
    install_command: str


@dataclass(frozen=True, slots=True)
class CommandTemplate:
    """Hook entry emitted into the generated document."""

    name: str
    command: str
    fix_command: str = ""
    output_rules: OutputRulePairs = ()


@dataclass(frozen=True, slots=True)
class HookTemplate:
    """Hook group emitted into the generated document."""

    name: str
    description: str
    commands: tuple[CommandTemplate, ...]
    hook_type: str = DEFAULT_HOOK_TYPE


def _on_failure() -> OutputRulePairs:
    return (("show_on", ShowOn.FAILURE.value),)


def _always() -> OutputRulePairs:
    return (("show_on", ShowOn.ALWAYS.value),)


def _format_rules() -> OutputRulePairs:
    return (("show_on", ShowOn.FAILURE.value), ("on_failure_message", FORMAT_FAILURE_MESSAGE))


GITLEAKS_TOOL: Final[ToolTemplate] = ToolTemplate(
    name="Gitleaks",
    check_command="gitleaks version",
    install_command="go install github.com/gitleaks/gitleaks/v8@latest",
)

SECURITY_HOOKS: Final[HookTemplate] = HookTemplate(
    name="security",
    description="Security checks for all projects",
    commands=(
        CommandTemplate(
            name="🔒 Secret Detection (Gitleaks)",
            command="gitleaks detect --no-git --source . --verbose",
            output_rules=(
                ("show_on", ShowOn.FAILURE.value),
                ("on_failure_message", "⚠️  Secret leak detected! Review your code before committing."),
            ),
        ),
    ),
)

LANGUAGE_TOOLS: Final[dict[Language, tuple[ToolTemplate, ...]]] = {
    Language.GO: (
        ToolTemplate("Gofmt", "go version", "# gofmt is included with Go installation"),
        ToolTemplate(
            "Golangci-lint",
            "golangci-lint --version",
            "go install github.com/golangci/golangci-lint/cmd/golangci-lint@latest",
        ),
        ToolTemplate("Go Test", "go help test", "# go test is included with Go installation"),
    ),
    Language.PYTHON: (
        ToolTemplate("Black (Python Formatter)", "black --version", "pip install black"),
        ToolTemplate("Ruff (Python Linter)", "ruff --version", "pip install ruff"),
        ToolTemplate("Pytest (Python Tests)", "pytest --version", "pip install pytest"),
    ),
    Language.NODE: (
        ToolTemplate("Prettier (Code Formatter)", "npx prettier --version", "npm install --save-dev prettier"),
        ToolTemplate("ESLint (Linter)", "npx eslint --version", "npm install --save-dev eslint"),
        ToolTemplate("NPM (Test Runner)", "npm --version", "# npm is included with Node.js installation"),
    ),
    Language.RUST: (
        ToolTemplate("Rustfmt", "rustfmt --version", "rustup component add rustfmt"),
        ToolTemplate("Clippy", "cargo clippy --version", "rustup component add clippy"),
        ToolTemplate("Cargo", "cargo --version", "# cargo is included with the Rust toolchain"),
    ),
    Language.PHP: (
        ToolTemplate(
            "PHP CS Fixer",
            "php-cs-fixer --version",
            "composer global require friendsofphp/php-cs-fixer",
        ),
        ToolTemplate("PHPStan", "phpstan --version", "composer require --dev phpstan/phpstan"),
        ToolTemplate("PHPUnit", "phpunit --version", "composer require --dev phpunit/phpunit"),
    ),
    Language.JAVA: (
        ToolTemplate(
            "Google Java Format",
            "google-java-format --version",
            "# Install google-java-format from its GitHub releases",
        ),
        ToolTemplate("Checkstyle", "checkstyle --version", "# Install via package manager or Maven/Gradle plugin"),
        ToolTemplate("Maven", "mvn --version", "# Install Maven via your package manager"),
    ),
}
LANGUAGE_TOOLS[Language.TYPESCRIPT] = LANGUAGE_TOOLS[Language.NODE]

FRAMEWORK_TOOLS: Final[dict[Language, tuple[ToolTemplate, ...]]] = {
    Language.REACT: (
        ToolTemplate(
            "ESLint React Plugin",
            "npm ls eslint-plugin-react",
            "npm install --save-dev eslint-plugin-react",
        ),
    ),
    Language.DJANGO: (
        ToolTemplate("Django Check", "python manage.py check --help", "# Django check is built-in"),
    ),
    Language.LARAVEL: (
        ToolTemplate("Laravel Pint", "pint --version", "composer require laravel/pint --dev"),
    ),
}


def _go_hooks(_structure: ProjectStructure) -> HookTemplate:
    return HookTemplate(
        name="go-backend",
        description="Quality checks for Go projects",
        commands=(
            CommandTemplate(
                name="🎨 Format Check (gofmt)",
                command='test -z "$(gofmt -l .)"',
                fix_command="gofmt -w .",
                output_rules=_format_rules(),
            ),
            CommandTemplate(name="🔍 Lint (golangci-lint)", command="golangci-lint run ./...", output_rules=_on_failure()),
            CommandTemplate(name="🧪 Tests (go test)", command="go test ./...", output_rules=_always()),
        ),
    )


def _python_hooks(_structure: ProjectStructure) -> HookTemplate:
    return HookTemplate(
        name="python-backend",
        description="Quality checks for Python projects",
        commands=(
            CommandTemplate(
                name="🎨 Format Check (Black)",
                command="black --check .",
                fix_command="black .",
                output_rules=_format_rules(),
            ),
            CommandTemplate(name="🔍 Lint (Ruff)", command="ruff check .", output_rules=_on_failure()),
            CommandTemplate(name="🧪 Tests (pytest)", command="pytest", output_rules=_always()),
        ),
    )


def _node_hooks(structure: ProjectStructure) -> HookTemplate:
    patterns = ["'**/*.js'"]
    if structure.has_language(Language.TYPESCRIPT):
        patterns.extend(["'**/*.ts'", "'**/*.tsx'"])
    if structure.has_framework(Language.REACT):
        patterns.append("'**/*.jsx'")
    joined = " ".join(patterns)
    typed = structure.has_language(Language.TYPESCRIPT)
    return HookTemplate(
        name="typescript-frontend" if typed else "node-frontend",
        description="Quality checks for Node.js/TypeScript projects",
        commands=(
            CommandTemplate(
                name="🎨 Format Check (Prettier)",
                command=f"npx prettier --check {joined}",
                fix_command=f"npx prettier --write {joined}",
                output_rules=_format_rules(),
            ),
            CommandTemplate(name="🔍 Lint (ESLint)", command=f"npx eslint {joined}", output_rules=_on_failure()),
            CommandTemplate(name="🧪 Tests", command="npm test", output_rules=_always()),
        ),
    )


def _rust_hooks(_structure: ProjectStructure) -> HookTemplate:
    return HookTemplate(
        name="rust-backend",
        description="Quality checks for Rust projects",
        commands=(
            CommandTemplate(
                name="🎨 Format Check (rustfmt)",
                command="cargo fmt -- --check",
                fix_command="cargo fmt",
                output_rules=_format_rules(),
            ),
            CommandTemplate(name="🔍 Lint (Clippy)", command="cargo clippy -- -D warnings", output_rules=_on_failure()),
            CommandTemplate(name="🧪 Tests", command="cargo test", output_rules=_always()),
        ),
    )


def _php_hooks(_structure: ProjectStructure) -> HookTemplate:
    return HookTemplate(
        name="php-backend",
        description="Quality checks for PHP projects",
        commands=(
            CommandTemplate(
                name="🎨 Format Check (PHP CS Fixer)",
                command="php-cs-fixer fix --dry-run --diff",
                fix_command="php-cs-fixer fix",
                output_rules=_format_rules(),
            ),
            CommandTemplate(name="🔍 Static Analysis (PHPStan)", command="phpstan analyse", output_rules=_on_failure()),
            CommandTemplate(name="🧪 Tests (PHPUnit)", command="phpunit", output_rules=_always()),
        ),
    )


def _java_hooks(_structure: ProjectStructure) -> HookTemplate:
    sources = "$(git ls-files '*.java')"
    return HookTemplate(
        name="java-backend",
        description="Quality checks for Java projects",
        commands=(
            CommandTemplate(
                name="🎨 Format Check (google-java-format)",
                command=f"google-java-format --dry-run --set-exit-if-changed {sources}",
                fix_command=f"google-java-format --replace {sources}",
                output_rules=_format_rules(),
            ),
            CommandTemplate(
                name="🔍 Lint (Checkstyle)",
                command="checkstyle -c /google_checks.xml src",
                output_rules=_on_failure(),
            ),
            CommandTemplate(name="🧪 Tests (Maven)", command="mvn -q test", output_rules=_always()),
        ),
    )


def _react_hooks(_structure: ProjectStructure) -> HookTemplate:
    return HookTemplate(
        name="react-frontend",
        description="Additional quality checks for React projects",
        commands=(
            CommandTemplate(name="⚛️ React Lint", command="npx eslint --ext .jsx,.tsx .", output_rules=_on_failure()),
        ),
    )


def _django_hooks(_structure: ProjectStructure) -> HookTemplate:
    return HookTemplate(
        name="django-backend",
        description="Additional quality checks for Django projects",
        commands=(
            CommandTemplate(name="🔍 Django Check", command="python manage.py check", output_rules=_always()),
            CommandTemplate(
                name="🗄️ Migration Check",
                command="python manage.py makemigrations --dry-run --check",
                output_rules=_on_failure(),
            ),
        ),
    )


def _laravel_hooks(_structure: ProjectStructure) -> HookTemplate:
    return HookTemplate(
        name="laravel-backend",
        description="Additional quality checks for Laravel projects",
        commands=(
            CommandTemplate(
                name="🎨 Format Check (Laravel Pint)",
                command="pint --test",
                fix_command="pint",
                output_rules=_format_rules(),
            ),
        ),
    )


HookBuilder = Callable[[ProjectStructure], HookTemplate]

LANGUAGE_HOOKS: Final[dict[Language, HookBuilder]] = {
    Language.GO: _go_hooks,
    Language.PYTHON: _python_hooks,
    Language.NODE: _node_hooks,
    Language.TYPESCRIPT: _node_hooks,
    Language.RUST: _rust_hooks,
    Language.PHP: _php_hooks,
    Language.JAVA: _java_hooks,
}

FRAMEWORK_HOOKS: Final[dict[Language, HookBuilder]] = {
    Language.REACT: _react_hooks,
    Language.DJANGO: _django_hooks,
    Language.LARAVEL: _laravel_hooks,
}


class TemplateGenerator:
    """Render a starter configuration document for a project structure."""

    def generate(self, structure: ProjectStructure) -> str:
        """Return the YAML configuration text for ``structure``.

        Args:
            structure: Detected project structure.

        Returns:
            str: Configuration document; identical inputs give identical text.
        """

        sections = [
            _format_tools_section(self.tools_for(structure)),
            _format_hooks_section(self.hooks_for(structure)),
        ]
        return "\n\n".join(sections) + "\n"

    def tools_for(self, structure: ProjectStructure) -> list[ToolTemplate]:
        """Return tool entries: baseline first, then languages, then frameworks."""

        candidates: list[ToolTemplate] = [GITLEAKS_TOOL]
        for language in structure.languages:
            candidates.extend(LANGUAGE_TOOLS.get(language, ()))
        for framework in structure.frameworks:
            candidates.extend(FRAMEWORK_TOOLS.get(framework, ()))
        return _unique(candidates, key=lambda tool: tool.name.lower())

    def hooks_for(self, structure: ProjectStructure) -> list[HookTemplate]:
        """Return hook groups: security first, then languages, then frameworks."""

        candidates: list[HookTemplate] = [SECURITY_HOOKS]
        for language in structure.languages:
            builder = LANGUAGE_HOOKS.get(language)
            if builder is not None:
                candidates.append(builder(structure))
        for framework in structure.frameworks:
            builder = FRAMEWORK_HOOKS.get(framework)
            if builder is not None:
                candidates.append(builder(structure))
        return _unique((hook for hook in candidates if hook.commands), key=lambda hook: hook.name)


def generate_template(structure: ProjectStructure) -> str:
    """Return the starter configuration text for ``structure``."""

    return TemplateGenerator().generate(structure)


def _unique(items: Iterable[ItemT], *, key: Callable[[ItemT], str]) -> list[ItemT]:
    seen: set[str] = set()
    unique: list[ItemT] = []
    for item in items:
        marker = key(item)
        if marker in seen:
            continue
        seen.add(marker)
        unique.append(item)
    return unique


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _format_tools_section(tools: Iterable[ToolTemplate]) -> str:
    lines = ["tools:"]
    for tool in tools:
        lines.append(f"  - name: {_quote(tool.name)}")
        lines.append(f"    check_command: {_quote(tool.check_command)}")
        lines.append(f"    install_command: {_quote(tool.install_command)}")
        lines.append("")
    return "\n".join(lines).rstrip("\n")


def _format_hooks_section(hooks: Iterable[HookTemplate]) -> str:
    lines = ["hooks:"]
    for hook in hooks:
        lines.append(f"  {hook.name}:")
        if hook.description:
            lines.append(f"    # {hook.description}")
        lines.append(f"    {hook.hook_type}:")
        for command in hook.commands:
            lines.append(f"      - name: {_quote(command.name)}")
            lines.append(f"        command: {_quote(command.command)}")
            if command.fix_command:
                lines.append(f"        fix_command: {_quote(command.fix_command)}")
            if command.output_rules:
                lines.append("        output_rules:")
                lines.extend(f"          {key}: {_quote(value)}" for key, value in command.output_rules)
            lines.append("")
    return "\n".join(lines).rstrip("\n")


__all__ = [
    "CommandTemplate",
    "HookTemplate",
    "TemplateGenerator",
    "ToolTemplate",
    "generate_template",
]
