"""Replay a recorded benchmark run through an output format.

A recorded run is a YAML or JSON document listing benchmarks with their
iteration results and, if they finished, their aggregate result:

    benchmarks:
      - params:
          benchmark: pkg.Bench.method
          mode: thrpt
          threads: 4
          warmup: {count: 1, time: "1 s"}
          measurement: {count: 2, time: "200 ms"}
        warmup:
          - primary: {score: 1180.1, unit: ops/s}
        measurement:
          - primary: {score: 1234.5, unit: ops/s}
            secondary:
              gc.count: {score: 3, unit: counts}
          - primary: {score: 1240.0, unit: ops/s}
        result:
          primary: {score: 1237.2, score_error: 12.3, unit: ops/s}

A benchmark without ``result`` failed; ``interrupted: true`` additionally
marks that it failed inside the iteration after its last recorded one.

Usage:
    from benchreport.output import create_output_format
    from benchreport.replay import ReplayDriver, load_recorded_run

    run = load_recorded_run("run.yaml")
    ReplayDriver(create_output_format()).replay(run)
"""

import json
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped, unused-ignore]
from pydantic import BaseModel, Field, ValidationError, model_validator

from benchreport.models.benchmark_models import BenchmarkParams
from benchreport.models.constants import IterationType
from benchreport.models.result_models import (
    NO_RESULT,
    IterationResult,
    Result,
    RunResult,
)
from benchreport.output.base import OutputFormat
from benchreport.utils.logger import Logger, LogLevel


class ReplayError(Exception):
    """Raised when a recorded run cannot be loaded."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot replay {source}: {reason}")


class RecordedResult(BaseModel):
    """Aggregate result of a recorded benchmark, without its params."""

    primary: Result = Field(..., description="Aggregated principal metric")
    secondary: dict[str, Result] = Field(
        default_factory=dict, description="Aggregated auxiliary metrics"
    )

    def to_run_result(self, params: BenchmarkParams) -> RunResult:
        return RunResult(params=params, primary=self.primary, secondary=self.secondary)


class RecordedBenchmark(BaseModel):
    """One benchmark of a recorded run."""

    params: BenchmarkParams = Field(..., description="Benchmark configuration")
    warmup: list[IterationResult] = Field(
        default_factory=list, description="Warmup iteration results in order"
    )
    measurement: list[IterationResult] = Field(
        default_factory=list, description="Measurement iteration results in order"
    )
    result: RecordedResult | None = Field(
        None, description="Aggregate result; absent when the benchmark failed"
    )
    interrupted: bool = Field(
        False, description="Failed inside the iteration after the last recorded one"
    )

    @model_validator(mode="after")
    def _interrupted_has_no_result(self) -> "RecordedBenchmark":
        if self.interrupted and self.result is not None:
            raise ValueError("an interrupted benchmark cannot have a result")
        return self

    def interrupted_phase(self) -> IterationType:
        """Phase the benchmark was in when it was interrupted."""
        if self.measurement or len(self.warmup) >= self.params.warmup.count:
            return IterationType.MEASUREMENT
        return IterationType.WARMUP


class RecordedRun(BaseModel):
    """A whole recorded run."""

    benchmarks: list[RecordedBenchmark] = Field(
        default_factory=list, description="Benchmarks in execution order"
    )


def load_recorded_run(path: str | Path) -> RecordedRun:
    """Load and validate a recorded run from a YAML or JSON file.

    Args:
        path: File to load; ``.yaml``/``.yml`` parse as YAML, anything else
            as JSON.

    Returns:
        The validated recorded run.

    Raises:
        ReplayError: If the file is missing, unparsable or invalid.
    """
    path = Path(path)
    source = str(path)
    if not path.exists():
        raise ReplayError(source, "file not found")

    try:
        content = path.read_text()
        if path.suffix in (".yaml", ".yml"):
            data: Any = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ReplayError(source, f"failed to parse: {e}") from e

    if not isinstance(data, dict):
        raise ReplayError(source, "top level must be a mapping")

    try:
        run = RecordedRun.model_validate(data)
    except ValidationError as e:
        raise ReplayError(source, str(e)) from e

    Logger.log_if_configured(
        "replay", LogLevel.INFO, f"Loaded {len(run.benchmarks)} benchmark(s) from {source}"
    )
    return run


class ReplayDriver:
    """Drives an output format through a recorded run in lifecycle order."""

    def __init__(self, output: OutputFormat) -> None:
        self.output = output

    def replay(self, run: RecordedRun) -> list[RunResult]:
        """Replay every benchmark, then end the run.

        Args:
            run: Recorded run to replay.

        Returns:
            The RunResults handed to end_run, failed benchmarks excluded.
        """
        results: list[RunResult] = []
        self.output.start_run()
        for benchmark in run.benchmarks:
            outcome = self._replay_benchmark(benchmark)
            if outcome is not None:
                results.append(outcome)
        self.output.end_run(results)
        return results

    def _replay_benchmark(self, benchmark: RecordedBenchmark) -> RunResult | None:
        params = benchmark.params
        self.output.start_benchmark(params)

        phases = (
            (IterationType.WARMUP, params.warmup, benchmark.warmup),
            (IterationType.MEASUREMENT, params.measurement, benchmark.measurement),
        )
        for iteration_type, iteration_params, iterations in phases:
            for number, data in enumerate(iterations, start=1):
                self.output.iteration(params, iteration_params, number, iteration_type)
                self.output.iteration_result(
                    params, iteration_params, number, iteration_type, data
                )

        if benchmark.interrupted:
            iteration_type = benchmark.interrupted_phase()
            if iteration_type is IterationType.WARMUP:
                iteration_params, done = params.warmup, len(benchmark.warmup)
            else:
                iteration_params, done = params.measurement, len(benchmark.measurement)
            self.output.iteration(params, iteration_params, done + 1, iteration_type)

        if benchmark.result is None:
            Logger.log_if_configured(
                "replay", LogLevel.DEBUG, f"{params.benchmark} has no result"
            )
            self.output.end_benchmark(NO_RESULT)
            return None

        run_result = benchmark.result.to_run_result(params)
        self.output.end_benchmark(run_result)
        return run_result
