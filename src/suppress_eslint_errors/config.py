# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and ``pyproject.toml`` loading."""

from __future__ import annotations

import json
import logging
import math
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .suppression import DEFAULT_MESSAGE, AnnotationOptions

LOGGER = logging.getLogger(__name__)

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "suppress-eslint-errors"
DEFAULT_EXTENSIONS: Final[tuple[str, ...]] = ("js", "jsx", "mjs", "cjs")
_LIST_SEPARATOR: Final[str] = ","


def default_parallel_jobs() -> int:
    """Return 75% of available CPU cores (minimum of 1)."""
    cores = os.cpu_count() or 1
    return max(1, math.floor(cores * 0.75))


def _split_list(value: object) -> object:
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(_LIST_SEPARATOR) if part.strip())
    return value


class SuppressionConfig(BaseModel):
    """Every setting that shapes a suppression run."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    message: str = DEFAULT_MESSAGE
    rules: tuple[str, ...] = Field(default_factory=tuple)
    inline: bool = False
    base_config: dict[str, Any] | None = None
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    jobs: int = Field(default_factory=default_parallel_jobs, ge=1)
    dry_run: bool = False
    print_output: bool = False
    ignore_config: bool = True

    @field_validator("message")
    @classmethod
    def _default_blank_message(cls, value: str) -> str:
        """Fall back to the default explanation when the message is blank."""

        return value if value.strip() else DEFAULT_MESSAGE

    @field_validator("rules", mode="before")
    @classmethod
    def _coerce_rules(cls, value: object) -> object:
        """Accept a comma separated whitelist as well as a list."""

        value = _split_list(value)
        if isinstance(value, (list, tuple)):
            return tuple(str(rule).strip() for rule in value if str(rule).strip())
        return value

    @field_validator("extensions", mode="before")
    @classmethod
    def _coerce_extensions(cls, value: object) -> object:
        """Normalise extensions to lowercase without a leading dot."""

        value = _split_list(value)
        if isinstance(value, (list, tuple)):
            cleaned = tuple(str(ext).strip().lstrip(".").lower() for ext in value)
            return tuple(ext for ext in cleaned if ext)
        return value

    @field_validator("base_config", mode="before")
    @classmethod
    def _coerce_base_config(cls, value: object) -> object:
        """Decode a JSON document passed as text."""

        if isinstance(value, str):
            if not value.strip():
                return None
            try:
                value = json.loads(value)
            except json.JSONDecodeError as exc:
                raise ValueError(f"base config is not valid JSON: {exc.msg}") from exc
        if value is not None and not isinstance(value, dict):
            raise ValueError("base config must be a JSON object")
        return value

    def annotation_options(self) -> AnnotationOptions:
        """Return the subset of settings consumed by the annotator."""

        return AnnotationOptions(message=self.message, rules=frozenset(self.rules), inline=self.inline)

    def with_overrides(self, overrides: Mapping[str, object]) -> SuppressionConfig:
        """Return a validated copy with non-``None`` ``overrides`` applied.

        Raises:
            ConfigError: If an override is invalid.
        """

        payload = self.model_dump()
        payload.update({key: value for key, value in overrides.items() if value is not None})
        return _validate(payload, "command line")


def find_pyproject(start: Path) -> Path | None:
    """Return the nearest ``pyproject.toml`` at or above ``start``."""

    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_pyproject_section(path: Path) -> dict[str, Any]:
    """Return the ``[tool.suppress-eslint-errors]`` table from ``path``.

    Keys are normalised from kebab-case to snake_case.

    Raises:
        ConfigError: If the file is not valid TOML or the section is not a table.
    """

    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    section = document.get(PYPROJECT_TOOL_KEY, {}).get(PYPROJECT_SECTION_KEY, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return {str(key).replace("-", "_"): value for key, value in section.items()}


def load_config(
    start: Path | None = None,
    overrides: Mapping[str, object] | None = None,
) -> SuppressionConfig:
    """Build the effective configuration.

    Values from the nearest ``pyproject.toml`` are applied first, then any
    non-``None`` ``overrides``.

    Args:
        start: Directory the ``pyproject.toml`` search starts from.
        overrides: Explicit settings, typically from the command line.

    Returns:
        SuppressionConfig: Validated configuration.

    Raises:
        ConfigError: If any source holds invalid values.
    """

    payload: dict[str, Any] = {}
    source = "defaults"
    pyproject = find_pyproject(start or Path.cwd())
    if pyproject is not None:
        payload.update(load_pyproject_section(pyproject))
        source = str(pyproject)
        LOGGER.debug("loaded configuration from %s", pyproject)
    config = _validate(payload, source)
    if overrides:
        config = config.with_overrides(overrides)
    return config


def _validate(payload: Mapping[str, object], source: str) -> SuppressionConfig:
    try:
        return SuppressionConfig.model_validate(dict(payload))
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'config'}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigError(f"Invalid configuration from {source}: {problems}") from exc


__all__ = [
    "DEFAULT_EXTENSIONS",
    "SuppressionConfig",
    "default_parallel_jobs",
    "find_pyproject",
    "load_config",
    "load_pyproject_section",
]
