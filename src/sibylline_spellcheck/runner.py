"""Run orchestration: expand the file glob, check files in parallel, report."""

from __future__ import annotations

import glob
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from .checker import SpellChecker
from .config import SpellcheckConfig
from .report import DiagnosticSink, FileResult, RunOutcome, aggregate, render

logger = logging.getLogger(__name__)


@dataclass
class RunReport:
    """Everything a run produced."""

    files: list[str]
    results: list[FileResult]
    outcome: RunOutcome


def collect_files(pattern: str) -> list[str]:
    """Expand *pattern* to a sorted list of regular files.

    ``**`` matches across directories.
    """
    matches = glob.glob(os.path.expanduser(pattern), recursive=True)
    return sorted({m for m in matches if os.path.isfile(m)})


def check_files(
    checker: SpellChecker,
    files: list[str],
    workers: int | None = None,
) -> list[FileResult]:
    """Check *files* concurrently, one task per file.

    Returns once every file is done. Results are in the order of *files*.
    """
    if not files:
        return []

    # Never on the caller's thread: asyncio.run needs a thread without a running loop
    with ThreadPoolExecutor(max_workers=workers) as ex:
        return list(ex.map(checker.check_file, files))


def run(
    config: SpellcheckConfig,
    sink: DiagnosticSink | None = None,
    checker: SpellChecker | None = None,
) -> RunReport:
    """Check every file matched by the configured glob.

    Configuration problems (missing glob, malformed include pattern,
    unreadable allowlist) raise before any file is read. Per-file problems
    are reported in the file's result.

    Args:
        config: Run configuration.
        sink: Where diagnostics go. When ``None`` nothing is rendered.
        checker: Prebuilt checker; built from *config* when omitted.
    """
    pattern = config.require_files()
    logger.debug("File glob: %s", pattern)
    logger.debug("Include pattern: %s", config.include_regex)

    if checker is None:
        checker = SpellChecker.from_config(config)

    files = collect_files(pattern)
    logger.info("Checking %d files matching %s", len(files), pattern)

    results = check_files(checker, files, workers=config.workers)

    if sink is not None:
        outcome = render(results, sink, mode=config.report_mode)
    else:
        outcome = aggregate(results)
    return RunReport(files=files, results=results, outcome=outcome)
