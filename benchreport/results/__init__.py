"""End-of-run summary formats.

A renderer hands every RunResult of the run to the formatter selected by
ResultFormatType once the run ends.
"""

from benchreport.results.base import (
    ResultFormat,
    ResultFormatError,
    SummaryRow,
    UnknownResultFormatError,
    summary_rows,
)
from benchreport.results.factory import (
    ResultFormatFactory,
    get_result_format,
    parse_result_format,
)

__all__ = [
    "ResultFormat",
    "ResultFormatError",
    "ResultFormatFactory",
    "SummaryRow",
    "UnknownResultFormatError",
    "get_result_format",
    "parse_result_format",
    "summary_rows",
]
