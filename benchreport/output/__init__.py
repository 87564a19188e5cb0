"""Per-event report output for benchmark runs.

Provides the lifecycle contract a harness drives and the output formats
implementing it (text, silent, verbose text).
"""

from benchreport.output.base import (
    AbstractOutputFormat,
    BenchmarkState,
    LifecycleGuard,
    OutputFormat,
    ProtocolViolationError,
)
from benchreport.output.factory import OutputFormatFactory, create_output_format
from benchreport.output.silent import SilentFormat
from benchreport.output.text import TextReportFormat, VerboseTextReportFormat

__all__ = [
    "AbstractOutputFormat",
    "BenchmarkState",
    "LifecycleGuard",
    "OutputFormat",
    "OutputFormatFactory",
    "ProtocolViolationError",
    "SilentFormat",
    "TextReportFormat",
    "VerboseTextReportFormat",
    "create_output_format",
]
