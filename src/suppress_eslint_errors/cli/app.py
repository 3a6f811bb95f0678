# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line entry point for suppress-eslint-errors."""

from __future__ import annotations

from pathlib import Path

import typer

from ..config import load_config
from ..core.logging import configure_verbose_logging, fail, info, ok, section, warn
from ..discovery import discover_sources
from ..errors import ConfigError, EslintNotFoundError
from ..linting import EslintRunner
from ..runner import run_suppression
from ..transform import FileResult, FileStatus
from .typer_ext import create_typer

EXIT_FILE_ERRORS = 1
EXIT_ESLINT_MISSING = 2

app = create_typer(
    name="suppress-eslint-errors",
    help="Add eslint-disable comments for every ESLint error in JavaScript and JSX files.",
    add_completion=False,
)


@app.command()
def suppress(
    paths: list[Path] | None = typer.Argument(
        None,
        metavar="[PATHS]...",
        help="Files or directories to process (default: current directory).",
    ),
    message: str | None = typer.Option(None, "--message", help="Explanation appended after '--'."),
    rules: str | None = typer.Option(None, "--rules", help="Comma separated rule ids to suppress (default: all)."),
    inline: bool | None = typer.Option(
        None,
        "--inline/--no-inline",
        help="Use eslint-disable-line comments at the end of the offending line.",
    ),
    base_config: str | None = typer.Option(None, "--base-config", help="JSON object passed to ESLint as baseConfig."),
    extensions: str | None = typer.Option(None, "--extensions", help="Comma separated file extensions to process."),
    jobs: int | None = typer.Option(None, "--jobs", "-j", min=1, help="Number of files processed in parallel."),
    dry: bool = typer.Option(False, "--dry", help="Do not write changes back to disk."),
    print_output: bool = typer.Option(False, "--print", help="Print transformed sources to stdout."),
    no_ignore_config: bool = typer.Option(
        False,
        "--no-ignore-config",
        help="Do not read .eslintignore/.gitignore patterns.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Emit debug logging to stderr."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI colour output."),
    no_emoji: bool = typer.Option(False, "--no-emoji", help="Disable emoji output."),
) -> None:
    """Suppress every ESLint error found in PATHS."""

    if verbose:
        configure_verbose_logging()
    use_color = not no_color
    use_emoji = not no_emoji
    root = Path.cwd()

    try:
        config = load_config(
            root,
            overrides={
                "message": message,
                "rules": rules,
                "inline": inline,
                "base_config": base_config,
                "extensions": extensions,
                "jobs": jobs,
                "dry_run": True if dry else None,
                "print_output": True if print_output else None,
                "ignore_config": False if no_ignore_config else None,
            },
        )
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc

    files = discover_sources(
        paths or [root],
        root=root,
        extensions=config.extensions,
        use_ignore_files=config.ignore_config,
    )
    if not files:
        warn("No matching source files found.", use_emoji=use_emoji, use_color=use_color)
        raise typer.Exit(code=0)

    def report(result: FileResult) -> None:
        label = _display_path(result.path, root)
        for notice in result.notices:
            warn(notice, use_emoji=use_emoji, use_color=use_color)
        if result.status is FileStatus.ERROR:
            fail(f"{label}: {result.error}", use_emoji=use_emoji, use_color=use_color)
        elif result.status is FileStatus.OK:
            ok(f"{label}: {len(result.outcomes)} error(s) suppressed", use_emoji=use_emoji, use_color=use_color)
        elif result.status is FileStatus.SKIPPED:
            info(f"{label}: skipped", use_emoji=use_emoji, use_color=use_color)
        if config.print_output and result.output is not None:
            typer.echo(result.output, nl=not result.output.endswith("\n"))

    runner = EslintRunner(cwd=root, base_config=config.base_config)
    try:
        summary = run_suppression(files, config, runner, on_result=report)
    except EslintNotFoundError:
        fail("eslint was not found.", use_emoji=use_emoji, use_color=use_color)
        fail(
            "suppress-eslint-errors requires eslint to be installed in the working directory.",
            use_emoji=use_emoji,
            use_color=use_color,
        )
        raise typer.Exit(code=EXIT_ESLINT_MISSING) from None

    section("Results", use_color=use_color)
    info(summary.describe(), use_emoji=use_emoji, use_color=use_color)
    if config.dry_run:
        info("Dry run: no files were written.", use_emoji=use_emoji, use_color=use_color)
    if summary.has_errors:
        raise typer.Exit(code=EXIT_FILE_ERRORS)


def _display_path(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root.resolve()).as_posix()
    except ValueError:
        return str(path)


def main() -> None:
    """Run the Typer application."""

    app()


__all__ = ["app", "main"]
