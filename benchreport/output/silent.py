"""Output format that validates the lifecycle and writes nothing."""

from collections.abc import Collection

from benchreport.models.benchmark_models import BenchmarkParams, IterationParams
from benchreport.models.constants import IterationType, VerboseMode
from benchreport.models.result_models import BenchmarkOutcome, IterationResult, RunResult
from benchreport.output.base import AbstractOutputFormat


class SilentFormat(AbstractOutputFormat):
    """Discards every event, including the end-of-run summary."""

    verbose = VerboseMode.SILENT

    def _on_start_run(self) -> None:
        pass

    def _on_start_benchmark(self, params: BenchmarkParams) -> None:
        pass

    def _on_iteration(
        self,
        benchmark_params: BenchmarkParams,
        iteration_params: IterationParams,
        iteration: int,
        iteration_type: IterationType,
    ) -> None:
        pass

    def _on_iteration_result(
        self,
        benchmark_params: BenchmarkParams,
        iteration_params: IterationParams,
        iteration: int,
        iteration_type: IterationType,
        result: IterationResult,
    ) -> None:
        pass

    def _on_end_benchmark(self, result: BenchmarkOutcome) -> None:
        pass

    def _on_end_run(self, results: Collection[RunResult]) -> None:
        pass
