"""Pydantic models for benchmark identity, results and report configuration."""

from benchreport.models.benchmark_models import (
    BenchmarkParams,
    IterationParams,
    Mode,
    TimeValue,
)
from benchreport.models.config_models import ReportConfig
from benchreport.models.constants import (
    IterationType,
    ResultFormatType,
    TimeUnit,
    VerboseMode,
)
from benchreport.models.result_models import (
    NO_RESULT,
    BenchmarkOutcome,
    IterationResult,
    MissingResult,
    Result,
    ResultStatistics,
    RunResult,
)

__all__ = [
    "BenchmarkOutcome",
    "BenchmarkParams",
    "IterationParams",
    "IterationResult",
    "IterationType",
    "MissingResult",
    "Mode",
    "NO_RESULT",
    "ReportConfig",
    "Result",
    "ResultFormatType",
    "ResultStatistics",
    "RunResult",
    "TimeUnit",
    "TimeValue",
    "VerboseMode",
]
