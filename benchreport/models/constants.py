"""Constants for benchreport models and commands."""

from enum import StrEnum


class IterationType(StrEnum):
    """Phase an iteration belongs to."""

    WARMUP = "warmup"
    MEASUREMENT = "measurement"


class VerboseMode(StrEnum):
    """Verbosity of the per-event report, one renderer class per mode."""

    SILENT = "silent"
    NORMAL = "normal"
    EXTRA = "extra"


class ResultFormatType(StrEnum):
    """Formats for the end-of-run summary."""

    TEXT = "text"
    CSV = "csv"
    SCSV = "scsv"
    JSON = "json"
    YAML = "yaml"


class TimeUnit(StrEnum):
    """Time units with their display suffixes."""

    NANOSECONDS = "ns"
    MICROSECONDS = "us"
    MILLISECONDS = "ms"
    SECONDS = "s"
    MINUTES = "min"
    HOURS = "hr"
    DAYS = "day"


# Confidence level quoted next to score errors and intervals
DEFAULT_CONFIDENCE = 0.999

DEFAULT_VERBOSE_MODE = VerboseMode.NORMAL
DEFAULT_RESULT_FORMAT = ResultFormatType.TEXT
