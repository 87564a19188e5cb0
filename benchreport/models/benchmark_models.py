"""Models for benchmark identity and per-phase iteration configuration."""

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from benchreport.models.constants import TimeUnit

_TIME_VALUE_PATTERN = re.compile(r"^\s*(\d+)\s*([a-z]+)\s*$")


class Mode(Enum):
    """Benchmark execution mode.

    The value is the short label used in summaries and recorded runs; the
    long label appears in the per-benchmark header.
    """

    THROUGHPUT = "thrpt"
    AVERAGE_TIME = "avgt"
    SAMPLE_TIME = "sample"
    SINGLE_SHOT_TIME = "ss"

    @property
    def short_label(self) -> str:
        """Short label (e.g. 'thrpt')."""
        return str(self.value)

    @property
    def long_label(self) -> str:
        """Human-readable label (e.g. 'Throughput')."""
        return _LONG_LABELS[self]

    @classmethod
    def parse(cls, value: "str | Mode") -> "Mode":
        """Resolve a mode from its short label, long label or member name.

        Raises:
            ValueError: If the value names no mode.
        """
        if isinstance(value, Mode):
            return value
        key = value.strip().lower()
        for mode in cls:
            if key in (mode.short_label, mode.long_label.lower(), mode.name.lower()):
                return mode
        # "SingleShotTime" style names
        compact = key.replace("_", "").replace(" ", "")
        for mode in cls:
            if compact == mode.name.lower().replace("_", ""):
                return mode
        raise ValueError(f"Unknown benchmark mode: {value!r}")


_LONG_LABELS = {
    Mode.THROUGHPUT: "Throughput",
    Mode.AVERAGE_TIME: "Average time",
    Mode.SAMPLE_TIME: "Sampling time",
    Mode.SINGLE_SHOT_TIME: "Single shot invocation time",
}


class TimeValue(BaseModel):
    """A duration such as ``200 ms``.

    Accepts either the structured form or the display string when validated,
    so recorded runs can write ``time: "200 ms"``.
    """

    model_config = ConfigDict(frozen=True)

    amount: int = Field(..., ge=0, description="Duration amount")
    unit: TimeUnit = Field(TimeUnit.SECONDS, description="Duration unit")

    @model_validator(mode="before")
    @classmethod
    def _parse_display_form(cls, data: Any) -> Any:
        if isinstance(data, str):
            match = _TIME_VALUE_PATTERN.match(data)
            if match is None:
                raise ValueError(f"Invalid time value: {data!r}")
            return {"amount": int(match.group(1)), "unit": match.group(2)}
        return data

    @classmethod
    def parse(cls, text: str) -> "TimeValue":
        """Parse the display form (e.g. '200 ms')."""
        return cls.model_validate(text)

    def __str__(self) -> str:
        return f"{self.amount} {self.unit.value}"


class IterationParams(BaseModel):
    """Configuration of one phase (warmup or measurement)."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(..., ge=0, description="Number of iterations in the phase")
    time: TimeValue = Field(..., description="Duration of each iteration")
    batch_size: int = Field(
        1, ge=1, description="Calls per batch; 1 means no batching"
    )


class BenchmarkParams(BaseModel):
    """Identity and configuration of one benchmark."""

    model_config = ConfigDict(frozen=True)

    benchmark: str = Field(
        ..., min_length=1, description="Benchmark identity (e.g. 'pkg.Bench.method')"
    )
    mode: Mode = Field(..., description="Execution mode")
    threads: int = Field(1, ge=1, description="Worker thread count")
    synch_iterations: bool = Field(
        True, description="Whether iterations start synchronized across threads"
    )
    params: dict[str, str] = Field(
        default_factory=dict, description="Benchmark parameters (name -> value)"
    )
    warmup: IterationParams = Field(..., description="Warmup phase configuration")
    measurement: IterationParams = Field(
        ..., description="Measurement phase configuration"
    )

    @field_validator("mode", mode="before")
    @classmethod
    def _parse_mode(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Mode.parse(value)
        return value

    @field_validator("params", mode="before")
    @classmethod
    def _stringify_params(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {str(k): str(v) for k, v in value.items()}
        return value
