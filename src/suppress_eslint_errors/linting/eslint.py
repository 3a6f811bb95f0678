# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run ESLint through Node and normalise its JSON results."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Final, Protocol

from ..core.models import Diagnostic
from ..core.serialization import JsonValue, coerce_optional_int, coerce_optional_str
from ..core.severity import ESLINT_WARNING_LEVEL
from ..errors import EslintExecutionError, EslintNotFoundError
from ..process_utils import CommandOptions, SubprocessExecutionError, run_command

LOGGER = logging.getLogger(__name__)

_NODE_EXECUTABLE: Final[str] = "node"
_ESLINT_MISSING_EXIT: Final[int] = 3
_ESLINT_MISSING_MESSAGE: Final[str] = "eslint was not found"

# Resolves ``eslint`` from the working directory so the project's own version
# and configuration are used. ``CLIEngine`` covers ESLint < 8.
_BRIDGE_SCRIPT: Final[str] = f"""
const {{ createRequire }} = require('module');
const path = require('path');
const [filePath, baseConfigJson] = process.argv.slice(1);
let eslint;
try {{
  eslint = createRequire(path.resolve(process.cwd(), 'index.js'))('eslint');
}} catch (error) {{
  process.stderr.write('{_ESLINT_MISSING_MESSAGE}\\n');
  process.exit({_ESLINT_MISSING_EXIT});
}}
const {{ CLIEngine, ESLint }} = eslint;
const baseConfig = baseConfigJson ? JSON.parse(baseConfigJson) : null;
const chunks = [];
process.stdin.on('data', (chunk) => chunks.push(chunk));
process.stdin.on('end', async () => {{
  const source = Buffer.concat(chunks).toString('utf8');
  try {{
    const results = CLIEngine
      ? new CLIEngine({{ baseConfig }}).executeOnText(source, filePath).results
      : await new ESLint({{ baseConfig }}).lintText(source, {{ filePath }});
    process.stdout.write(JSON.stringify(results || []));
  }} catch (error) {{
    process.stderr.write(String((error && error.stack) || error));
    process.exit(1);
  }}
}});
"""


class Linter(Protocol):
    """Anything able to produce diagnostics for a source file."""

    def lint(self, source: str, path: str) -> list[Diagnostic]:
        """Return the diagnostics for ``source`` as if it lived at ``path``."""
        ...


def parse_eslint_results(payload: JsonValue) -> list[Diagnostic]:
    """Parse ESLint JSON results into diagnostics.

    Only the first result entry is considered, matching a single
    ``lintText`` call. Messages without a line are dropped.

    Args:
        payload: JSON array produced by ``ESLint#lintText``.

    Returns:
        list[Diagnostic]: Diagnostics in reporting order.
    """

    if not isinstance(payload, list) or not payload or not isinstance(payload[0], dict):
        return []
    entry = payload[0]
    path = coerce_optional_str(entry.get("filePath"))
    messages = entry.get("messages")
    if not isinstance(messages, list):
        return []
    diagnostics: list[Diagnostic] = []
    for message in messages:
        if not isinstance(message, dict):
            continue
        line = coerce_optional_int(message.get("line"))
        if line is None or line < 1:
            continue
        severity = coerce_optional_int(message.get("severity"))
        text = coerce_optional_str(message.get("message")) or ""
        diagnostics.append(
            Diagnostic(
                line=line,
                rule_id=coerce_optional_str(message.get("ruleId")),
                severity=ESLINT_WARNING_LEVEL if severity is None else severity,
                column=coerce_optional_int(message.get("column")),
                message=text.strip(),
                file=path,
            )
        )
    return diagnostics


class EslintRunner:
    """Lint source text with the ``eslint`` package installed in ``cwd``."""

    def __init__(
        self,
        *,
        cwd: Path | None = None,
        base_config: Mapping[str, JsonValue] | None = None,
        node: str = _NODE_EXECUTABLE,
        timeout: float | None = None,
    ) -> None:
        """Configure the bridge.

        Args:
            cwd: Directory ``eslint`` is resolved from; defaults to the process cwd.
            base_config: ESLint ``baseConfig`` object passed through unchanged.
            node: Node executable name or path.
            timeout: Seconds allowed per file.
        """

        self.cwd = cwd or Path.cwd()
        self.base_config = dict(base_config) if base_config else None
        self.node = node
        self.timeout = timeout

    def lint(self, source: str, path: str) -> list[Diagnostic]:
        """Lint ``source`` as if it were the file at ``path``.

        Raises:
            EslintNotFoundError: If ``eslint`` cannot be resolved from ``cwd``
                or Node is not installed.
            EslintExecutionError: If ESLint fails or prints unreadable output.
        """

        args = [self.node, "-e", _BRIDGE_SCRIPT, path, json.dumps(self.base_config) if self.base_config else ""]
        options = CommandOptions(cwd=self.cwd, check=True, timeout=self.timeout, input_text=source)
        try:
            completed = run_command(args, options=options)
        except FileNotFoundError as exc:
            raise EslintNotFoundError(f"{_ESLINT_MISSING_MESSAGE}: {exc}") from exc
        except SubprocessExecutionError as exc:
            if exc.returncode == _ESLINT_MISSING_EXIT:
                raise EslintNotFoundError(f"{_ESLINT_MISSING_MESSAGE} in {self.cwd}") from exc
            raise EslintExecutionError(f"ESLint failed for {path}: {(exc.stderr or '').strip()}") from exc
        try:
            payload: JsonValue = json.loads(completed.stdout or "[]")
        except json.JSONDecodeError as exc:
            raise EslintExecutionError(f"ESLint produced unreadable output for {path}") from exc
        diagnostics = parse_eslint_results(payload)
        LOGGER.debug("eslint reported %d message(s) for %s", len(diagnostics), path)
        return diagnostics


__all__ = ["EslintRunner", "Linter", "parse_eslint_results"]
