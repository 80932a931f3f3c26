"""Aggregation of per-file results and diagnostic rendering.

Diagnostics go to a sink with two calls: ``error(message)`` for each
diagnostic line and one terminal ``set_result(failed, message)`` per run.

* :class:`StreamSink` writes to a text stream (used by the CLI).
* :class:`LoggingSink` routes diagnostics through :mod:`logging`.
* :class:`CollectingSink` keeps everything in memory.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, TextIO, runtime_checkable

from .spans import Misspelling

logger = logging.getLogger(__name__)


class ReportMode(Enum):
    POSITION = "position"
    OFFSETS = "offsets"


@dataclass
class FileResult:
    """Outcome of checking one file."""

    file_path: str
    misspellings: list[Misspelling] = field(default_factory=list)
    error: str | None = None
    """Reason the file could not be checked, if it could not."""

    encoding: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class RunOutcome:
    """Pass/fail summary of a run."""

    failed: bool
    total_error_count: int
    failed_files: int = 0
    """Files that could not be checked at all."""

    @property
    def message(self) -> str:
        message = f"{self.total_error_count} misspellings detected"
        if self.failed_files:
            message += f", {self.failed_files} files could not be checked"
        return message


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------


@runtime_checkable
class DiagnosticSink(Protocol):
    """Receives rendered diagnostics."""

    def error(self, message: str) -> None: ...

    def set_result(self, failed: bool, message: str) -> None: ...


class StreamSink:
    """Write diagnostics and the final status line to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def error(self, message: str) -> None:
        print(message, file=self._stream)

    def set_result(self, failed: bool, message: str) -> None:
        status = "failed" if failed else "succeeded"
        print(f"Spell check {status}: {message}", file=self._stream)


class LoggingSink:
    """Emit diagnostics as log records."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def error(self, message: str) -> None:
        self._log.error(message)

    def set_result(self, failed: bool, message: str) -> None:
        if failed:
            self._log.error("Spell check failed: %s", message)
        else:
            self._log.info("Spell check succeeded: %s", message)


class CollectingSink:
    """Keep diagnostics in memory."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.result: tuple[bool, str] | None = None

    def error(self, message: str) -> None:
        self.errors.append(message)

    def set_result(self, failed: bool, message: str) -> None:
        if self.result is not None:
            raise RuntimeError("Result already set for this run")
        self.result = (failed, message)


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


def aggregate(results: Iterable[FileResult]) -> RunOutcome:
    """Summarise per-file results into a :class:`RunOutcome`.

    The run fails if any misspelling was found or any file could not be
    checked.
    """
    total = 0
    failed_files = 0
    for result in results:
        total += len(result.misspellings)
        if not result.ok:
            failed_files += 1
    return RunOutcome(
        failed=total > 0 or failed_files > 0,
        total_error_count=total,
        failed_files=failed_files,
    )


def format_misspelling(misspelling: Misspelling, mode: ReportMode = ReportMode.POSITION) -> str:
    if mode is ReportMode.OFFSETS:
        location = misspelling.format_offsets()
    else:
        location = misspelling.format_position()
    return f"{location} Misspelling '{misspelling.text}'"


def render(
    results: list[FileResult],
    sink: DiagnosticSink,
    mode: ReportMode = ReportMode.POSITION,
) -> RunOutcome:
    """Write diagnostics for *results* to *sink* and set the run result.

    Files are rendered in the order given; misspellings keep their
    detection order. Files with nothing to report are silent.
    """
    for result in results:
        if not result.ok:
            sink.error(f"Could not check {result.file_path}: {result.error}")
            continue
        if not result.misspellings:
            continue
        sink.error(f"Misspellings in {result.file_path}")
        for misspelling in result.misspellings:
            sink.error(format_misspelling(misspelling, mode))

    outcome = aggregate(results)
    sink.set_result(outcome.failed, outcome.message)
    return outcome
