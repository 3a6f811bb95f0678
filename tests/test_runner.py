# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for per-file transforms and the parallel runner."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

pytest.importorskip("tree_sitter_javascript")

from suppress_eslint_errors.config import SuppressionConfig
from suppress_eslint_errors.core.models import Diagnostic
from suppress_eslint_errors.errors import EslintExecutionError, EslintNotFoundError
from suppress_eslint_errors.runner import RunSummary, run_suppression
from suppress_eslint_errors.transform import FileResult, FileStatus, transform_file

SOURCE = "export function foo(a, b) {\n  return a == b;\n}\n"


class RaisingLinter:
    def __init__(self, error: Exception) -> None:
        self.error = error

    def lint(self, source: str, path: str) -> list[Diagnostic]:
        raise self.error


def _source_file(root: Path, name: str = "index.js", text: str = SOURCE) -> Path:
    path = root / name
    path.write_text(text, encoding="utf-8")
    return path


def test_transform_file_writes_changes(
    tmp_path: Path,
    fake_linter: Callable[..., object],
    diagnostic: Callable[..., Diagnostic],
) -> None:
    path = _source_file(tmp_path)
    linter = fake_linter([diagnostic(2)])

    result = transform_file(path, linter, SuppressionConfig(jobs=1))  # type: ignore[arg-type]

    assert result.status is FileStatus.OK
    assert result.output == path.read_text(encoding="utf-8")
    assert "// eslint-disable-next-line eqeqeq" in result.output
    assert linter.calls == [(SOURCE, str(path))]  # type: ignore[attr-defined]


def test_transform_file_dry_run_leaves_file_alone(
    tmp_path: Path,
    fake_linter: Callable[..., object],
    diagnostic: Callable[..., Diagnostic],
) -> None:
    path = _source_file(tmp_path)
    config = SuppressionConfig(jobs=1, dry_run=True)

    result = transform_file(path, fake_linter([diagnostic(2)]), config)  # type: ignore[arg-type]

    assert result.status is FileStatus.OK
    assert result.output is not None
    assert path.read_text(encoding="utf-8") == SOURCE


def test_transform_file_without_errors_is_skipped(tmp_path: Path, fake_linter: Callable[..., object]) -> None:
    path = _source_file(tmp_path)

    result = transform_file(path, fake_linter([]), SuppressionConfig(jobs=1))  # type: ignore[arg-type]

    assert result.status is FileStatus.SKIPPED
    assert result.output is None


def test_transform_file_already_suppressed_is_unmodified(
    tmp_path: Path,
    fake_linter: Callable[..., object],
    diagnostic: Callable[..., Diagnostic],
) -> None:
    text = "export function foo(a, b) {\n  return a == b; // eslint-disable-line eqeqeq\n}\n"
    path = _source_file(tmp_path, text=text)

    result = transform_file(path, fake_linter([diagnostic(2)]), SuppressionConfig(jobs=1))  # type: ignore[arg-type]

    assert result.status is FileStatus.UNMODIFIED
    assert path.read_text(encoding="utf-8") == text


def test_transform_file_collects_skip_notices(
    tmp_path: Path,
    fake_linter: Callable[..., object],
    diagnostic: Callable[..., Diagnostic],
) -> None:
    path = _source_file(tmp_path, text="const a = 1;\n\n")
    linter = fake_linter([diagnostic(2, "no-multiple-empty-lines")])

    result = transform_file(path, linter, SuppressionConfig(jobs=1))  # type: ignore[arg-type]

    assert result.status is FileStatus.UNMODIFIED
    assert len(result.notices) == 1
    assert "Unable to find any nodes on line 2" in result.notices[0]


def test_transform_file_reports_eslint_failures(tmp_path: Path) -> None:
    path = _source_file(tmp_path)

    result = transform_file(path, RaisingLinter(EslintExecutionError("boom")), SuppressionConfig(jobs=1))

    assert result.status is FileStatus.ERROR
    assert result.error == "boom"


def test_run_suppression_preserves_input_order(
    tmp_path: Path,
    fake_linter: Callable[..., object],
    diagnostic: Callable[..., Diagnostic],
) -> None:
    paths = [_source_file(tmp_path, f"file{index}.js") for index in range(5)]
    seen: list[FileResult] = []

    linter = fake_linter([diagnostic(2)])

    summary = run_suppression(paths, SuppressionConfig(jobs=3), linter, on_result=seen.append)  # type: ignore[arg-type]

    assert [result.path for result in summary.results] == paths
    assert seen == summary.results
    assert summary.describe() == "0 errors, 0 unmodified, 0 skipped, 5 ok"
    assert not summary.has_errors


def test_run_suppression_aborts_when_eslint_is_missing(tmp_path: Path) -> None:
    paths = [_source_file(tmp_path, "a.js"), _source_file(tmp_path, "b.js")]

    with pytest.raises(EslintNotFoundError):
        run_suppression(paths, SuppressionConfig(jobs=2), RaisingLinter(EslintNotFoundError("eslint was not found")))


def test_summary_counts_errors() -> None:
    summary = RunSummary(
        results=[
            FileResult(path=Path("a.js"), status=FileStatus.ERROR, error="boom"),
            FileResult(path=Path("b.js"), status=FileStatus.SKIPPED),
            FileResult(path=Path("c.js"), status=FileStatus.UNMODIFIED),
        ]
    )

    assert summary.has_errors
    assert summary.describe() == "1 errors, 1 unmodified, 1 skipped, 0 ok"


def test_run_suppression_with_no_paths_returns_empty_summary() -> None:
    summary = run_suppression([], SuppressionConfig(jobs=1), RaisingLinter(AssertionError("unused")))

    assert summary.results == []
