# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer helpers that lay out the quality-gate help screen."""

from __future__ import annotations

from typing import Any, ClassVar, Final

import typer
from click.core import Context, Parameter
from click.formatting import HelpFormatter
from typer.core import TyperCommand

ARGUMENT_PARAM_TYPE: Final[str] = "argument"

HelpRecord = tuple[str, str]


class QualityGateCommand(TyperCommand):
    """Command whose help lists mode flags apart from the tuning options.

    ``quality-gate`` is a single command; ``--install``, ``--init``,
    ``--validate`` and ``--fix`` pick what it does while the remaining flags
    adjust how. Help renders the hook-type argument first, then the mode
    flags in dispatch order, then every other option sorted by name.
    """

    mode_options: ClassVar[tuple[str, ...]] = ("install", "init", "validate", "fix")

    def format_options(self, ctx: Context, formatter: HelpFormatter) -> None:
        """Render the Arguments, Modes and Options sections.

        Args:
            ctx: Click context describing the invocation.
            formatter: Click help formatter used to emit definition lists.
        """

        arguments: list[HelpRecord] = []
        modes: list[tuple[int, HelpRecord]] = []
        options: list[tuple[str, HelpRecord]] = []

        for param in self.get_params(ctx):
            record = param.get_help_record(ctx)
            if record is None:
                continue
            if getattr(param, "param_type_name", "") == ARGUMENT_PARAM_TYPE:
                arguments.append(record)
                continue
            name = _primary_option_name(param)
            if name in self.mode_options:
                modes.append((self.mode_options.index(name), record))
            else:
                options.append((name, record))

        if arguments:
            with formatter.section("Arguments"):
                formatter.write_dl(arguments)
        if modes:
            with formatter.section("Modes"):
                formatter.write_dl([record for _, record in sorted(modes)])
        if options:
            with formatter.section("Options"):
                formatter.write_dl([record for _, record in sorted(options)])


def create_typer(**kwargs: Any) -> typer.Typer:
    """Return a Typer app that renders help with click's plain formatter."""

    kwargs.setdefault("rich_markup_mode", None)
    return typer.Typer(**kwargs)


def _primary_option_name(param: Parameter) -> str:
    names = [*getattr(param, "opts", ()), *getattr(param, "secondary_opts", ())]
    long_names = [name for name in names if name.startswith("--")]
    candidate = long_names[0] if long_names else (names[0] if names else param.name or "")
    return candidate.lstrip("-").lower()


__all__ = ["QualityGateCommand", "create_typer"]
