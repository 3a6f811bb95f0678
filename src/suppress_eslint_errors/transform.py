# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Suppress the ESLint errors of a single source file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .config import SuppressionConfig
from .core.models import Diagnostic
from .errors import EslintNotFoundError, SourceParseError, SuppressError
from .linting import Linter
from .process_utils import SubprocessExecutionError
from .suppression import (
    AnnotationOptions,
    AnnotationResult,
    DiagnosticOutcome,
    annotate_source,
    select_diagnostics,
)
from .suppression.annotator import Reporter
from .treesitter import parse_source

LOGGER = logging.getLogger(__name__)


class FileStatus(str, Enum):
    """Per-file result, named after the summary counters."""

    OK = "ok"
    UNMODIFIED = "unmodified"
    SKIPPED = "skipped"
    ERROR = "error"


@dataclass(slots=True)
class FileResult:
    """Outcome of transforming one file.

    Attributes:
        path: File that was processed.
        status: Summary status.
        outcomes: Per-diagnostic outcomes for the suppressed errors.
        output: New file contents when the file changed.
        notices: Diagnostics that could not be suppressed, as messages.
        error: Failure description for ``ERROR`` results.
    """

    path: Path
    status: FileStatus
    outcomes: list[tuple[Diagnostic, DiagnosticOutcome]] = field(default_factory=list)
    output: str | None = None
    notices: list[str] = field(default_factory=list)
    error: str | None = None


def transform_source(
    source: str,
    path: str,
    linter: Linter,
    options: AnnotationOptions,
    reporter: Reporter | None = None,
) -> AnnotationResult | None:
    """Lint ``source`` and suppress its errors.

    Args:
        source: File contents.
        path: File path handed to ESLint and used in messages.
        linter: Diagnostic provider.
        options: Directive settings.
        reporter: Sink for skip notices.

    Returns:
        AnnotationResult | None: ``None`` when there was nothing to suppress or
        the source could not be parsed; otherwise the annotation result.
    """

    selected = select_diagnostics(linter.lint(source, path), options.rules)
    if not selected:
        return None
    try:
        tree = parse_source(source, path)
    except SourceParseError as exc:
        LOGGER.info("%s", exc)
        return None
    return annotate_source(tree, selected, options, reporter)


def transform_file(path: Path, linter: Linter, config: SuppressionConfig) -> FileResult:
    """Suppress the errors of ``path`` and write the result unless dry running.

    Failures are captured in the returned result, except a missing ESLint
    which aborts the whole run.

    Raises:
        EslintNotFoundError: If ESLint cannot be resolved.
    """

    notices: list[str] = []
    try:
        source = path.read_text(encoding="utf-8")
        result = transform_source(source, str(path), linter, config.annotation_options(), notices.append)
        if result is not None and result.text is not None and not config.dry_run:
            path.write_text(result.text, encoding="utf-8")
    except EslintNotFoundError:
        raise
    except (OSError, UnicodeError, SuppressError, SubprocessExecutionError) as exc:
        LOGGER.debug("transform of %s failed", path, exc_info=True)
        return FileResult(path=path, status=FileStatus.ERROR, notices=notices, error=str(exc))
    if result is None:
        return FileResult(path=path, status=FileStatus.SKIPPED, notices=notices)
    if result.text is None:
        return FileResult(path=path, status=FileStatus.UNMODIFIED, outcomes=result.outcomes, notices=notices)
    return FileResult(
        path=path,
        status=FileStatus.OK,
        outcomes=result.outcomes,
        output=result.text,
        notices=notices,
    )


__all__ = ["FileResult", "FileStatus", "transform_file", "transform_source"]
