"""Factory for creating output formats by verbosity."""

import sys
from typing import ClassVar, TextIO

from benchreport.models.constants import (
    DEFAULT_RESULT_FORMAT,
    DEFAULT_VERBOSE_MODE,
    ResultFormatType,
    VerboseMode,
)
from benchreport.output.base import AbstractOutputFormat
from benchreport.output.silent import SilentFormat
from benchreport.output.text import TextReportFormat, VerboseTextReportFormat


class OutputFormatFactory:
    """Creates the output format for a verbosity level.

    Each VerboseMode maps to one class; the choice is made once, when the
    run is configured.
    """

    FORMATS: ClassVar[dict[VerboseMode, type[AbstractOutputFormat]]] = {
        VerboseMode.SILENT: SilentFormat,
        VerboseMode.NORMAL: TextReportFormat,
        VerboseMode.EXTRA: VerboseTextReportFormat,
    }

    @classmethod
    def create(
        cls,
        out: TextIO,
        verbose: VerboseMode = DEFAULT_VERBOSE_MODE,
        result_format: ResultFormatType = DEFAULT_RESULT_FORMAT,
    ) -> AbstractOutputFormat:
        """Create an output format.

        Args:
            out: Stream the report is written to.
            verbose: Verbosity, selecting the output format class.
            result_format: Summary format handed the results at end of run.

        Returns:
            A fresh output format for one run.
        """
        return cls.FORMATS[verbose](out, result_format)


def create_output_format(
    out: TextIO | None = None,
    verbose: VerboseMode = DEFAULT_VERBOSE_MODE,
    result_format: ResultFormatType = DEFAULT_RESULT_FORMAT,
) -> AbstractOutputFormat:
    """Create an output format, writing to stdout unless out is given.

    Convenience function around OutputFormatFactory.create.
    """
    return OutputFormatFactory.create(
        sys.stdout if out is None else out, verbose, result_format
    )
