# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer helpers that render the suppress command's help in stable sections."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Final, TypeVar

import typer
from click.core import Context, Parameter
from click.formatting import HelpFormatter
from typer.core import TyperCommand

ARGUMENT_PARAM_TYPE: Final[str] = "argument"
DEFAULT_SECTION: Final[str] = "Options"

# Option name (without dashes) to help section; unlisted options fall back to DEFAULT_SECTION.
OPTION_SECTIONS: Final[Mapping[str, str]] = {
    "base-config": "ESLint",
    "extensions": "Files",
    "inline": "Comments",
    "jobs": "Execution",
    "message": "Comments",
    "no-ignore-config": "Files",
    "rules": "Comments",
    "dry": "Execution",
}

CommandCallback = TypeVar("CommandCallback", bound=Callable[..., Any])


class SectionedTyperCommand(TyperCommand):
    """Typer command listing options alphabetically inside named sections."""

    def format_options(self, ctx: Context, formatter: HelpFormatter) -> None:
        """Render positional arguments followed by each option section.

        Args:
            ctx: Click context describing the invocation.
            formatter: Click help formatter used to emit definition lists.
        """

        arguments: list[tuple[str, str]] = []
        sections: dict[str, list[tuple[str, tuple[str, str]]]] = {}
        for param in self.get_params(ctx):
            record = param.get_help_record(ctx)
            if record is None:
                continue
            if getattr(param, "param_type_name", "") == ARGUMENT_PARAM_TYPE:
                arguments.append(record)
                continue
            name = _option_sort_key(param)
            sections.setdefault(OPTION_SECTIONS.get(name, DEFAULT_SECTION), []).append((name, record))

        if arguments:
            with formatter.section("Arguments"):
                formatter.write_dl(arguments)
        for title in sorted(sections, key=lambda value: (value == DEFAULT_SECTION, value)):
            with formatter.section(title):
                formatter.write_dl([record for _, record in sorted(sections[title])])


class SectionedTyper(typer.Typer):
    """Typer application whose commands default to :class:`SectionedTyperCommand`."""

    def command(
        self,
        name: str | None = None,
        *,
        cls: type[TyperCommand] | None = None,
        **kwargs: Any,
    ) -> Callable[[CommandCallback], CommandCallback]:
        return super().command(name, cls=cls or SectionedTyperCommand, **kwargs)


def create_typer(**kwargs: Any) -> SectionedTyper:
    """Return a :class:`SectionedTyper` built from Typer keyword arguments.

    Rich help rendering is disabled unless requested so the sectioned plain
    formatter is the one that runs.
    """

    kwargs.setdefault("rich_markup_mode", None)
    return SectionedTyper(**kwargs)


def _option_sort_key(param: Parameter) -> str:
    names = tuple(getattr(param, "opts", ())) + tuple(getattr(param, "secondary_opts", ()))
    long_names = [name for name in names if name.startswith("--")]
    candidate = long_names[0] if long_names else (next(iter(names), "") or param.name or "")
    return candidate.lstrip("-").lower()


__all__ = ["OPTION_SECTIONS", "SectionedTyper", "SectionedTyperCommand", "create_typer"]
