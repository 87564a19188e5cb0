"""Human-readable per-event report.

Example output for one benchmark::

    # Warmup: 3 iterations, 1 s each
    # Measurement: 5 iterations, 200 ms each
    # Threads: 4 threads, will synchronize iterations
    # Benchmark mode: Throughput
    # Benchmark: pkg.Bench.method
    # Warmup Iteration   1: 1180.112 ops/s
    Iteration   1: 1234.568 ops/s
                     gc.count : 3.000 counts
                     gc.time  : 12.000 ms

"""

from collections.abc import Collection

from benchreport.models.benchmark_models import (
    BenchmarkParams,
    IterationParams,
    Mode,
)
from benchreport.models.constants import IterationType, VerboseMode
from benchreport.models.result_models import (
    NO_RESULT,
    BenchmarkOutcome,
    IterationResult,
    RunResult,
)
from benchreport.output.base import AbstractOutputFormat, ProtocolViolationError
from benchreport.results.factory import ResultFormatFactory

SYNCHRONIZED_SUFFIX = ", will synchronize iterations"
UNSYNCHRONIZED_WARNING = ", ***WARNING: Synchronize iterations are disabled!***"


def iteration_label(iteration: int, iteration_type: IterationType) -> str:
    """Return the fixed-width label written before an iteration's result.

    Raises:
        ProtocolViolationError: If the type is not a known iteration type.
    """
    if iteration_type is IterationType.WARMUP:
        return f"# Warmup Iteration {iteration:3d}: "
    if iteration_type is IterationType.MEASUREMENT:
        return f"Iteration {iteration:3d}: "
    raise ProtocolViolationError(
        "iteration", f"Unknown iteration type: {iteration_type!r}"
    )


def phase_line(title: str, phase: IterationParams) -> str:
    """Describe a warmup or measurement phase."""
    if phase.count <= 0:
        return f"# {title}: <none>"
    line = f"# {title}: {phase.count} iterations, {phase.time} each"
    if phase.batch_size > 1:
        line += f", {phase.batch_size} calls per batch"
    return line


def threads_word(threads: int) -> str:
    return "thread" if threads == 1 else "threads"


def format_params(params: dict[str, str]) -> str:
    """Render benchmark parameters as ``{name=value, ...}`` sorted by name."""
    return "{" + ", ".join(f"{k}={v}" for k, v in sorted(params.items())) + "}"


class TextReportFormat(AbstractOutputFormat):
    """Writes each lifecycle event as text and flushes after every call.

    Alignment of secondary results is computed from each call's data
    alone; nothing is carried between iterations.
    """

    def _on_start_run(self) -> None:
        self.verbose_write_line("# Run started")
        self.flush()

    def _on_start_benchmark(self, params: BenchmarkParams) -> None:
        self.write_line(phase_line("Warmup", params.warmup))
        self.write_line(phase_line("Measurement", params.measurement))

        threads = f"# Threads: {params.threads} {threads_word(params.threads)}"
        if params.synch_iterations:
            threads += SYNCHRONIZED_SUFFIX
        elif params.mode is not Mode.SINGLE_SHOT_TIME:
            threads += UNSYNCHRONIZED_WARNING
        self.write_line(threads)

        self.write_line(f"# Benchmark mode: {params.mode.long_label}")
        self.write_line(f"# Benchmark: {params.benchmark}")
        if params.params:
            self.write_line(f"# Parameters: {format_params(params.params)}")
        self.flush()

    def _on_iteration(
        self,
        benchmark_params: BenchmarkParams,
        iteration_params: IterationParams,
        iteration: int,
        iteration_type: IterationType,
    ) -> None:
        self.write(iteration_label(iteration, iteration_type))
        # Output from the measured code lands after the label
        self.flush()

    def _on_iteration_result(
        self,
        benchmark_params: BenchmarkParams,
        iteration_params: IterationParams,
        iteration: int,
        iteration_type: IterationType,
        result: IterationResult,
    ) -> None:
        text = str(result.primary)

        if iteration_type is IterationType.MEASUREMENT and result.secondary:
            indent = " " * len(iteration_label(iteration, iteration_type))
            width = max(len(label) for label in result.secondary) + 1
            lines = [text]
            for label, secondary in result.secondary.items():
                lines.append(f"{indent}  {label:<{width}}: {secondary}")
            text = "\n".join(lines) + "\n"

        self.write_line(text)
        self.flush()

    def _on_end_benchmark(self, result: BenchmarkOutcome) -> None:
        self.write_line()
        if result is not NO_RESULT:
            self.write_line(result.primary.extended_info(None))
            for label, secondary in result.secondary.items():
                self.write_line(secondary.extended_info(secondary.label or label))
            self.write_line()
        self.flush()

    def _on_end_run(self, results: Collection[RunResult]) -> None:
        self.verbose_write_line(
            f"# Run complete: {len(results)} benchmark result(s), "
            f"{self.result_format.value} summary"
        )
        summary = ResultFormatFactory.get_instance(self.result_format, self.out)
        try:
            summary.write_out(results)
        finally:
            summary.close()
        self.flush()


class VerboseTextReportFormat(TextReportFormat):
    """Text report with run-level progress lines."""

    verbose = VerboseMode.EXTRA
