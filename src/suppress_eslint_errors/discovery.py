# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Expand command line paths into the source files to transform."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

LOGGER = logging.getLogger(__name__)

IGNORE_FILES: Final[tuple[str, ...]] = (".eslintignore", ".gitignore")
ALWAYS_EXCLUDE_DIRS: Final[frozenset[str]] = frozenset({"node_modules", ".git", ".hg", ".svn"})


def load_ignore_spec(root: Path) -> tuple[PathSpec | None, Path | None]:
    """Load ignore patterns from the first ignore file present in ``root``.

    ``.eslintignore`` wins over ``.gitignore``; negated patterns are honoured.

    Returns:
        tuple[PathSpec | None, Path | None]: Compiled patterns and the file
        they came from, or ``(None, None)`` when no ignore file exists.
    """

    for name in IGNORE_FILES:
        candidate = root / name
        if not candidate.is_file():
            continue
        lines = candidate.read_text(encoding="utf-8").splitlines()
        LOGGER.debug("using ignore patterns from %s", candidate)
        return PathSpec.from_lines(GitWildMatchPattern, lines), candidate
    return None, None


def _rel_for_match(path: Path, base: Path) -> str | None:
    """Return a POSIX-style path relative to ``base`` or ``None`` when outside it."""

    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return None


@dataclass(slots=True)
class SourceDiscovery:
    """Walk files and directories, keeping sources with a configured extension.

    Attributes:
        root: Directory ignore patterns are relative to.
        extensions: Extensions (without dot) that mark a source file.
        ignore_spec: Compiled ignore patterns, if any.
    """

    root: Path
    extensions: frozenset[str]
    ignore_spec: PathSpec | None = None
    _seen: set[Path] = field(default_factory=set, repr=False)

    def discover(self, paths: Sequence[Path]) -> list[Path]:
        """Return the unique source files reachable from ``paths``, in walk order.

        Explicit files are kept regardless of their extension; ignore patterns
        apply to both explicit files and walked directories.
        """

        self._seen.clear()
        return list(self._iter_sources(paths))

    def _iter_sources(self, paths: Iterable[Path]) -> Iterator[Path]:
        for entry in paths:
            candidate = entry if entry.is_absolute() else self.root / entry
            if candidate.is_file():
                if not self._is_ignored(candidate):
                    yield from self._once(candidate)
            elif candidate.is_dir():
                yield from self._walk(candidate)
            else:
                LOGGER.warning("%s does not exist; skipping", entry)

    def _walk(self, base: Path) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(base):
            current = Path(dirpath)
            dirnames[:] = sorted(
                name
                for name in dirnames
                if name not in ALWAYS_EXCLUDE_DIRS and not self._is_ignored(current / name, directory=True)
            )
            for filename in sorted(filenames):
                candidate = current / filename
                if self._has_source_extension(candidate) and not self._is_ignored(candidate):
                    yield from self._once(candidate)

    def _once(self, path: Path) -> Iterator[Path]:
        resolved = path.resolve()
        if resolved not in self._seen:
            self._seen.add(resolved)
            yield resolved

    def _has_source_extension(self, path: Path) -> bool:
        return path.suffix.lstrip(".").lower() in self.extensions

    def _is_ignored(self, path: Path, *, directory: bool = False) -> bool:
        if self.ignore_spec is None:
            return False
        relative = _rel_for_match(path, self.root)
        if relative is None:
            return False
        return self.ignore_spec.match_file(f"{relative}/" if directory else relative)


def discover_sources(
    paths: Sequence[Path],
    *,
    root: Path,
    extensions: Iterable[str],
    use_ignore_files: bool = True,
) -> list[Path]:
    """Expand ``paths`` into source files below ``root``.

    Args:
        paths: Files and directories named on the command line.
        root: Working directory holding the ignore files.
        extensions: Extensions of files picked up while walking directories.
        use_ignore_files: Read ``.eslintignore``/``.gitignore`` from ``root``.

    Returns:
        list[Path]: Resolved, de-duplicated source files.
    """

    spec = load_ignore_spec(root)[0] if use_ignore_files else None
    discovery = SourceDiscovery(root=root, extensions=frozenset(extensions), ignore_spec=spec)
    return discovery.discover(paths)


__all__ = ["ALWAYS_EXCLUDE_DIRS", "IGNORE_FILES", "SourceDiscovery", "discover_sources", "load_ignore_spec"]
