"""Models for measured results at iteration and benchmark level.

Results arrive fully computed from the harness. Statistics are carried as
given; nothing here aggregates samples.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from benchreport.models.benchmark_models import BenchmarkParams
from benchreport.models.constants import DEFAULT_CONFIDENCE
from benchreport.utils.score import format_percent, format_score


class ResultStatistics(BaseModel):
    """Precomputed sample statistics behind an aggregated result."""

    model_config = ConfigDict(frozen=True)

    n: int = Field(..., ge=1, description="Number of samples")
    min: float = Field(..., description="Smallest sample")
    mean: float = Field(..., description="Arithmetic mean of the samples")
    max: float = Field(..., description="Largest sample")
    stdev: float = Field(0.0, ge=0, description="Sample standard deviation")
    ci_lower: float | None = Field(None, description="Confidence interval low end")
    ci_upper: float | None = Field(None, description="Confidence interval high end")
    confidence: float = Field(
        DEFAULT_CONFIDENCE, gt=0, lt=1, description="Confidence level (e.g. 0.999)"
    )


class Result(BaseModel):
    """One measured metric.

    ``str(result)`` is the short form written after an iteration label;
    ``extended_info`` is the multi-line block written when a benchmark ends.
    """

    model_config = ConfigDict(frozen=True)

    label: str | None = Field(
        None, description="Display label of the metric; overrides its result key"
    )
    score: float = Field(..., description="Measured value")
    unit: str = Field(..., description="Score unit (e.g. 'ops/s')")
    score_error: float | None = Field(
        None, ge=0, description="Half-width of the confidence interval"
    )
    statistics: ResultStatistics | None = Field(
        None, description="Sample statistics, for aggregated results"
    )

    @property
    def confidence(self) -> float:
        """Confidence level the error is quoted at."""
        if self.statistics is not None:
            return self.statistics.confidence
        return DEFAULT_CONFIDENCE

    def __str__(self) -> str:
        score = format_score(self.score)
        if self.score_error is None:
            return f"{score} {self.unit}"
        error = format_score(self.score_error)
        return f"{score} ±({format_percent(self.confidence)}) {error} {self.unit}"

    def extended_info(self, label: str | None = None) -> str:
        """Render the multi-line summary of this result.

        Args:
            label: Name shown in the heading; omitted when None.

        Returns:
            Lines joined by newlines, without a trailing newline.
        """
        lines = [f'Result "{label}":' if label else "Result:", f"  {self}"]
        stats = self.statistics
        if stats is not None:
            lines.append(
                f"  (min, avg, max) = ({format_score(stats.min)}, "
                f"{format_score(stats.mean)}, {format_score(stats.max)}), "
                f"stdev = {format_score(stats.stdev)}"
            )
            if stats.ci_lower is not None and stats.ci_upper is not None:
                lines.append(
                    f"  CI ({format_percent(stats.confidence)}): "
                    f"[{format_score(stats.ci_lower)}, {format_score(stats.ci_upper)}] "
                    "(assumes normal distribution)"
                )
        return "\n".join(lines)


class IterationResult(BaseModel):
    """Primary and secondary results of a single iteration."""

    model_config = ConfigDict(frozen=True)

    primary: Result = Field(..., description="Principal metric")
    secondary: dict[str, Result] = Field(
        default_factory=dict, description="Auxiliary metrics keyed by label"
    )


class RunResult(BaseModel):
    """Aggregate of all iterations of one benchmark."""

    model_config = ConfigDict(frozen=True)

    params: BenchmarkParams = Field(..., description="Benchmark that produced it")
    primary: Result = Field(..., description="Aggregated principal metric")
    secondary: dict[str, Result] = Field(
        default_factory=dict, description="Aggregated auxiliary metrics by label"
    )

    @property
    def sample_count(self) -> int | None:
        """Samples behind the primary score, when statistics are known."""
        if self.primary.statistics is None:
            return None
        return self.primary.statistics.n


class MissingResult(Enum):
    """Marker for a benchmark that ended without producing a RunResult."""

    NO_RESULT = "no-result"


NO_RESULT = MissingResult.NO_RESULT

BenchmarkOutcome = RunResult | Literal[MissingResult.NO_RESULT]
