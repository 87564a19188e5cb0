"""Base class for end-of-run summary formats.

A result format receives every RunResult of a run once, when the run ends,
and writes a summary to the stream it was created with.
"""

import math
from abc import ABC, abstractmethod
from collections.abc import Collection
from dataclasses import dataclass
from typing import TextIO

from benchreport.models.constants import ResultFormatType
from benchreport.models.result_models import Result, RunResult


class ResultFormatError(Exception):
    """Base exception for result format errors."""

    pass


class UnknownResultFormatError(ResultFormatError):
    """Raised when no formatter is registered for a format type or name."""

    def __init__(self, name: object) -> None:
        self.name = name
        valid = ", ".join(t.value for t in ResultFormatType)
        super().__init__(f"Unknown result format: '{name}'. Valid: {valid}")


@dataclass(frozen=True)
class SummaryRow:
    """One metric of one benchmark, flattened for tabular formats."""

    benchmark: str
    mode: str
    threads: int
    samples: int | None
    score: float
    score_error: float | None
    unit: str
    params: dict[str, str]


def _row(run: RunResult, name: str, result: Result) -> SummaryRow:
    error = result.score_error
    if error is not None and not math.isfinite(error):
        error = None
    return SummaryRow(
        benchmark=name,
        mode=run.params.mode.short_label,
        threads=run.params.threads,
        samples=run.sample_count,
        score=result.score,
        score_error=error,
        unit=result.unit,
        params=dict(run.params.params),
    )


def summary_rows(results: Collection[RunResult]) -> list[SummaryRow]:
    """Flatten run results into rows, primary metric first.

    Secondary metrics are named ``benchmark:label``.
    """
    rows = []
    for run in results:
        rows.append(_row(run, run.params.benchmark, run.primary))
        for label, result in run.secondary.items():
            rows.append(_row(run, f"{run.params.benchmark}:{label}", result))
    return rows


def param_names(results: Collection[RunResult]) -> list[str]:
    """Sorted union of parameter names across all results."""
    names: set[str] = set()
    for run in results:
        names.update(run.params.params)
    return sorted(names)


class ResultFormat(ABC):
    """Abstract base class for summary formats.

    Subclasses write to ``self.out``. ``close`` flushes the stream but
    leaves it open, since it is shared with the per-event report.
    """

    format_type: ResultFormatType

    def __init__(self, out: TextIO) -> None:
        self.out = out

    @abstractmethod
    def write_out(self, results: Collection[RunResult]) -> None:
        """Write the summary of all results.

        Args:
            results: Every RunResult of the run, possibly empty.
        """
        pass

    def close(self) -> None:
        """Flush pending output; the stream itself stays open."""
        self.out.flush()
