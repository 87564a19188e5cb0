"""JSON and YAML summaries.

Both emit the same document: a list with one object per benchmark, keyed
the way existing benchmark-result visualizers expect (camelCase).
"""

import json
import math
from collections.abc import Collection
from typing import Any, TextIO

import yaml  # type: ignore[import-untyped, unused-ignore]

from benchreport.models.constants import ResultFormatType
from benchreport.models.result_models import Result, RunResult
from benchreport.results.base import ResultFormat


def _finite(value: float | None) -> float | None:
    """Non-finite values have no JSON form; they are written as null."""
    if value is None or not math.isfinite(value):
        return None
    return value


def _metric(result: Result) -> dict[str, Any]:
    metric: dict[str, Any] = {
        "score": _finite(result.score),
        "scoreError": _finite(result.score_error),
        "scoreUnit": result.unit,
    }
    stats = result.statistics
    if stats is not None:
        metric["scoreConfidence"] = [_finite(stats.ci_lower), _finite(stats.ci_upper)]
        metric["statistics"] = {
            "n": stats.n,
            "min": _finite(stats.min),
            "mean": _finite(stats.mean),
            "max": _finite(stats.max),
            "stdev": _finite(stats.stdev),
            "confidence": stats.confidence,
        }
    return metric


def run_result_to_dict(run: RunResult) -> dict[str, Any]:
    """Convert one RunResult to the summary document entry."""
    params = run.params
    return {
        "benchmark": params.benchmark,
        "mode": params.mode.short_label,
        "threads": params.threads,
        "synchIterations": params.synch_iterations,
        "warmupIterations": params.warmup.count,
        "warmupTime": str(params.warmup.time),
        "warmupBatchSize": params.warmup.batch_size,
        "measurementIterations": params.measurement.count,
        "measurementTime": str(params.measurement.time),
        "measurementBatchSize": params.measurement.batch_size,
        "params": dict(sorted(params.params.items())) or None,
        "primaryMetric": _metric(run.primary),
        "secondaryMetrics": {
            label: _metric(result) for label, result in run.secondary.items()
        },
    }


class JSONResultFormat(ResultFormat):
    """Indented JSON array of benchmark entries."""

    format_type = ResultFormatType.JSON

    def __init__(self, out: TextIO, indent: int = 4) -> None:
        super().__init__(out)
        self.indent = indent

    def write_out(self, results: Collection[RunResult]) -> None:
        document = [run_result_to_dict(run) for run in results]
        text = json.dumps(document, indent=self.indent, allow_nan=False)
        self.out.write(text + "\n")


class YAMLResultFormat(ResultFormat):
    """YAML sequence of benchmark entries."""

    format_type = ResultFormatType.YAML

    def write_out(self, results: Collection[RunResult]) -> None:
        document = [run_result_to_dict(run) for run in results]
        self.out.write(
            yaml.safe_dump(document, default_flow_style=False, sort_keys=False)
        )
