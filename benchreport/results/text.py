"""Column-aligned text summary."""

from collections.abc import Collection

from benchreport.models.constants import ResultFormatType
from benchreport.models.result_models import RunResult
from benchreport.results.base import ResultFormat, param_names, summary_rows
from benchreport.utils.score import format_score


class TextResultFormat(ResultFormat):
    """Summary table with one line per metric.

    Example:
        Benchmark          (size)  Mode  Cnt     Score     Error  Units
        pkg.Bench.method       10  thrpt   5  1234.568 ± 12.346  ops/s
    """

    format_type = ResultFormatType.TEXT

    def write_out(self, results: Collection[RunResult]) -> None:
        rows = summary_rows(results)
        if not rows:
            return

        params = param_names(results)
        header = ["Benchmark", *(f"({p})" for p in params)]
        header += ["Mode", "Cnt", "Score", "Error", "Units"]

        table = [header]
        for row in rows:
            error = "" if row.score_error is None else f"± {format_score(row.score_error)}"
            table.append(
                [
                    row.benchmark,
                    *(row.params.get(p, "N/A") for p in params),
                    row.mode,
                    "" if row.samples is None else str(row.samples),
                    format_score(row.score),
                    error,
                    row.unit,
                ]
            )

        widths = [max(len(line[i]) for line in table) for i in range(len(header))]
        last = len(header) - 1
        for line in table:
            cells = []
            for i, cell in enumerate(line):
                if i == 0 or i == last:
                    cells.append(cell.ljust(widths[i]))
                else:
                    cells.append(cell.rjust(widths[i]))
            self.out.write("  ".join(cells).rstrip() + "\n")
