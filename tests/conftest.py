"""Shared fixtures for benchreport tests."""

import logging
from io import StringIO

import pytest

from benchreport.models import (
    BenchmarkParams,
    IterationParams,
    IterationResult,
    Mode,
    Result,
    ResultStatistics,
    RunResult,
    TimeValue,
)
from benchreport.utils.logger import Logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Leave the package logger unconfigured around every test."""
    Logger._configured = False
    yield
    Logger._configured = False
    root = logging.getLogger("benchreport")
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()


@pytest.fixture
def out():
    """Output stream a renderer writes to."""
    return StringIO()


def _build_params(**overrides) -> BenchmarkParams:
    """Benchmark params with sensible defaults, overridable per field."""
    values = {
        "benchmark": "pkg.Bench.method",
        "mode": Mode.THROUGHPUT,
        "threads": 4,
        "synch_iterations": True,
        "params": {},
        "warmup": IterationParams(count=0, time=TimeValue.parse("1 s")),
        "measurement": IterationParams(count=5, time=TimeValue.parse("200 ms")),
    }
    values.update(overrides)
    return BenchmarkParams(**values)


def _build_run_result(
    params: BenchmarkParams | None = None, **secondary: Result
) -> RunResult:
    """RunResult with full statistics on the primary metric."""
    primary = Result(
        score=1234.5678,
        score_error=12.3456,
        unit="ops/s",
        statistics=ResultStatistics(
            n=5,
            min=1200.0,
            mean=1234.5678,
            max=1260.0,
            stdev=10.0,
            ci_lower=1222.2222,
            ci_upper=1246.9134,
        ),
    )
    return RunResult(
        params=params or _build_params(),
        primary=primary,
        secondary=secondary,
    )


def _build_iteration(score: float = 1234.5678, **secondary: Result) -> IterationResult:
    return IterationResult(primary=Result(score=score, unit="ops/s"), secondary=secondary)


@pytest.fixture
def make_params():
    """Factory for BenchmarkParams; keyword arguments override defaults."""
    return _build_params


@pytest.fixture
def make_run_result():
    """Factory for RunResult; keyword arguments become secondary results."""
    return _build_run_result


@pytest.fixture
def make_iteration():
    """Factory for IterationResult; keyword arguments become secondary results."""
    return _build_iteration


@pytest.fixture
def params() -> BenchmarkParams:
    return _build_params()
