# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the suppress-eslint-errors command line."""

from __future__ import annotations

import importlib
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

pytest.importorskip("tree_sitter_javascript")

from suppress_eslint_errors.cli import app
from suppress_eslint_errors.core.models import Diagnostic
from suppress_eslint_errors.errors import EslintNotFoundError

SOURCE = "export function foo(a, b) {\n  return a == b;\n}\n"
FLAGS = ["--no-color", "--no-emoji"]
# The package re-exports the Typer object as ``app``, shadowing the submodule attribute.
APP_MODULE = importlib.import_module("suppress_eslint_errors.cli.app")


class _StubRunner:
    """Stand-in for :class:`EslintRunner` recording its construction."""

    instances: list[_StubRunner] = []

    def __init__(self, diagnostics: Sequence[Diagnostic], error: Exception | None, **kwargs: Any) -> None:
        self.diagnostics = list(diagnostics)
        self.error = error
        self.kwargs = kwargs
        _StubRunner.instances.append(self)

    def lint(self, source: str, path: str) -> list[Diagnostic]:
        if self.error is not None:
            raise self.error
        return list(self.diagnostics)


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    (tmp_path / "pyproject.toml").write_text("[tool.suppress-eslint-errors]\njobs = 1\n", encoding="utf-8")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "index.js").write_text(SOURCE, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def stub_eslint(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    _StubRunner.instances.clear()

    def install(diagnostics: Sequence[Diagnostic] = (), error: Exception | None = None) -> None:
        def factory(**kwargs: Any) -> _StubRunner:
            return _StubRunner(diagnostics, error, **kwargs)

        monkeypatch.setattr(APP_MODULE, "EslintRunner", factory)

    return install


def test_suppresses_errors_in_place(
    project: Path,
    stub_eslint: Callable[..., None],
    diagnostic: Callable[..., Diagnostic],
) -> None:
    stub_eslint([diagnostic(2)])

    result = CliRunner().invoke(app, [*FLAGS, "src"])

    assert result.exit_code == 0, result.output
    assert "src/index.js: 1 error(s) suppressed" in result.output
    assert "0 errors, 0 unmodified, 0 skipped, 1 ok" in result.output
    rewritten = (project / "src" / "index.js").read_text(encoding="utf-8")
    assert "  // eslint-disable-next-line eqeqeq -- TODO: Fix this the next time the file is edited.\n" in rewritten


def test_dry_run_prints_without_writing(
    project: Path,
    stub_eslint: Callable[..., None],
    diagnostic: Callable[..., Diagnostic],
) -> None:
    stub_eslint([diagnostic(2)])

    result = CliRunner().invoke(
        app,
        [*FLAGS, "--dry", "--print", "--inline", "--message", "legacy", "src/index.js"],
    )

    assert result.exit_code == 0, result.output
    assert "return a == b;// eslint-disable-line eqeqeq -- legacy" in result.output
    assert "Dry run" in result.output
    assert (project / "src" / "index.js").read_text(encoding="utf-8") == SOURCE


def test_base_config_is_forwarded(
    project: Path,
    stub_eslint: Callable[..., None],
) -> None:
    stub_eslint([])

    result = CliRunner().invoke(app, [*FLAGS, "--base-config", '{"rules": {"eqeqeq": "error"}}'])

    assert result.exit_code == 0, result.output
    assert "0 errors, 0 unmodified, 1 skipped, 0 ok" in result.output
    assert _StubRunner.instances[0].kwargs["base_config"] == {"rules": {"eqeqeq": "error"}}
    assert Path(_StubRunner.instances[0].kwargs["cwd"]).resolve() == project.resolve()


def test_missing_eslint_exits_with_status_two(project: Path, stub_eslint: Callable[..., None]) -> None:
    stub_eslint(error=EslintNotFoundError("eslint was not found"))

    result = CliRunner().invoke(app, [*FLAGS, "src"])

    assert result.exit_code == 2
    assert "eslint was not found." in result.output


def test_file_errors_exit_with_status_one(project: Path, stub_eslint: Callable[..., None]) -> None:
    (project / "src" / "broken.js").write_bytes(b"\xff\xfe not utf-8")
    stub_eslint([])

    result = CliRunner().invoke(app, [*FLAGS, "src"])

    assert result.exit_code == 1
    assert "1 errors, 0 unmodified, 1 skipped, 0 ok" in result.output


def test_no_matching_files(project: Path, stub_eslint: Callable[..., None]) -> None:
    (project / "empty").mkdir()
    stub_eslint([])

    result = CliRunner().invoke(app, [*FLAGS, "empty"])

    assert result.exit_code == 0
    assert "No matching source files found." in result.output
    assert _StubRunner.instances == []


def test_invalid_base_config_is_a_usage_error(project: Path, stub_eslint: Callable[..., None]) -> None:
    stub_eslint([])

    result = CliRunner().invoke(app, [*FLAGS, "--base-config", "[1, 2]"])

    assert result.exit_code == 2
    assert _StubRunner.instances == []


def test_help_groups_options_into_sections() -> None:
    result = CliRunner().invoke(app, ["--help"])

    assert result.exit_code == 0
    output = result.output
    for title in ("Arguments:", "Comments:", "ESLint:", "Execution:", "Files:", "Options:"):
        assert title in output
    assert output.index("Comments:") < output.index("--inline") < output.index("--message") < output.index("--rules")
    assert output.index("Files:") < output.index("--extensions") < output.index("--no-ignore-config")
