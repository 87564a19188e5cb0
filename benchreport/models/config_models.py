"""Models for report configuration."""

from pathlib import Path

from pydantic import BaseModel, Field

from benchreport.models.constants import (
    DEFAULT_RESULT_FORMAT,
    DEFAULT_VERBOSE_MODE,
    ResultFormatType,
    VerboseMode,
)


class ReportConfig(BaseModel):
    """How a run is reported: renderer verbosity and summary format."""

    verbose: VerboseMode = Field(
        DEFAULT_VERBOSE_MODE, description="Per-event report verbosity"
    )
    result_format: ResultFormatType = Field(
        DEFAULT_RESULT_FORMAT, description="Format of the end-of-run summary"
    )
    output: Path | None = Field(
        None, description="Report destination file; stdout when unset"
    )
