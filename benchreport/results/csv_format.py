"""Comma- and semicolon-separated summaries."""

import csv
from collections.abc import Collection

from benchreport.models.constants import DEFAULT_CONFIDENCE, ResultFormatType
from benchreport.models.result_models import RunResult
from benchreport.results.base import ResultFormat, param_names, summary_rows
from benchreport.utils.score import format_percent


class CSVResultFormat(ResultFormat):
    """One row per metric; text fields quoted, numbers bare."""

    format_type = ResultFormatType.CSV
    delimiter = ","

    def write_out(self, results: Collection[RunResult]) -> None:
        params = param_names(results)
        writer = csv.writer(
            self.out,
            delimiter=self.delimiter,
            quoting=csv.QUOTE_NONNUMERIC,
            lineterminator="\n",
        )
        writer.writerow(
            [
                "Benchmark",
                "Mode",
                "Threads",
                "Samples",
                "Score",
                f"Score Error ({format_percent(DEFAULT_CONFIDENCE)})",
                "Unit",
                *(f"Param: {p}" for p in params),
            ]
        )
        for row in summary_rows(results):
            writer.writerow(
                [
                    row.benchmark,
                    row.mode,
                    row.threads,
                    "" if row.samples is None else row.samples,
                    row.score,
                    "" if row.score_error is None else row.score_error,
                    row.unit,
                    *(row.params.get(p, "") for p in params),
                ]
            )


class SCSVResultFormat(CSVResultFormat):
    """Semicolon-separated variant for locales using a decimal comma."""

    format_type = ResultFormatType.SCSV
    delimiter = ";"
