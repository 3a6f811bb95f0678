# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the per-file transform over many files."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from .config import SuppressionConfig
from .linting import Linter
from .transform import FileResult, FileStatus, transform_file

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class RunSummary:
    """Results of a run in input order."""

    results: list[FileResult] = field(default_factory=list)

    @property
    def counts(self) -> Counter[FileStatus]:
        return Counter(result.status for result in self.results)

    @property
    def has_errors(self) -> bool:
        return self.counts[FileStatus.ERROR] > 0

    def describe(self) -> str:
        """Return the one-line summary, e.g. ``0 errors, 1 unmodified, 0 skipped, 2 ok``."""

        counts = self.counts
        return (
            f"{counts[FileStatus.ERROR]} errors, "
            f"{counts[FileStatus.UNMODIFIED]} unmodified, "
            f"{counts[FileStatus.SKIPPED]} skipped, "
            f"{counts[FileStatus.OK]} ok"
        )


def run_suppression(
    paths: Sequence[Path],
    config: SuppressionConfig,
    linter: Linter,
    on_result: Callable[[FileResult], None] | None = None,
) -> RunSummary:
    """Transform ``paths`` concurrently with ``config.jobs`` workers.

    Each file gets its own parser and tree. ``on_result`` is called in input
    order as results become available.

    Raises:
        EslintNotFoundError: If ESLint cannot be resolved; pending files are cancelled.
    """

    summary = RunSummary()
    if not paths:
        return summary
    workers = max(1, min(config.jobs, len(paths)))
    LOGGER.debug("processing %d file(s) with %d worker(s)", len(paths), workers)
    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="suppress-eslint")
    try:
        futures: list[Future[FileResult]] = [executor.submit(transform_file, path, linter, config) for path in paths]
        for future in futures:
            result = future.result()
            summary.results.append(result)
            if on_result is not None:
                on_result(result)
    finally:
        executor.shutdown(wait=True, cancel_futures=True)
    return summary


__all__ = ["RunSummary", "run_suppression"]
