"""Lifecycle contract between a benchmark harness and its report output.

A harness drives exactly one OutputFormat per run, in this order::

    start_run()
    for each benchmark:
        start_benchmark(params)
        for each warmup, then measurement iteration:
            iteration(params, phase, n, type)
            iteration_result(params, phase, n, type, result)
        end_benchmark(run_result or NO_RESULT)
    end_run(all_run_results)

Calls out of this order are defects in the harness and raise
ProtocolViolationError. Every output format enforces the same order through
LifecycleGuard, whether or not it writes anything.
"""

from abc import ABC, abstractmethod
from collections.abc import Collection
from enum import Enum
from typing import ClassVar, NoReturn, TextIO

from benchreport.models.benchmark_models import BenchmarkParams, IterationParams
from benchreport.models.constants import (
    DEFAULT_RESULT_FORMAT,
    IterationType,
    ResultFormatType,
    VerboseMode,
)
from benchreport.models.result_models import (
    NO_RESULT,
    BenchmarkOutcome,
    IterationResult,
    RunResult,
)
from benchreport.utils.logger import Logger, LogLevel


class ProtocolViolationError(RuntimeError):
    """Raised when lifecycle calls arrive out of order or malformed."""

    def __init__(self, call: str, reason: str) -> None:
        self.call = call
        self.reason = reason
        super().__init__(f"Protocol violation in {call}(): {reason}")


class BenchmarkState(Enum):
    """Position of the current benchmark in its lifecycle."""

    NOT_STARTED = "not_started"
    STARTED = "started"
    OPEN = "open"  # iteration announced, result pending
    CLOSED = "closed"  # iteration result delivered
    ENDED = "ended"


class LifecycleGuard:
    """Tracks lifecycle position and rejects out-of-order calls.

    Holds only what is needed to validate the next call: whether the run
    is open, the benchmark state, the current iteration and the phases
    already entered. Each phase is entered once, warmup before measurement.
    """

    def __init__(self) -> None:
        self.run_started = False
        self.run_ended = False
        self.state = BenchmarkState.NOT_STARTED
        self._phase: IterationType | None = None
        self._iteration = 0
        self._phases_seen: set[IterationType] = set()

    def _fail(self, call: str, reason: str) -> NoReturn:
        error = ProtocolViolationError(call, reason)
        Logger.log_if_configured("output", LogLevel.ERROR, str(error))
        raise error

    def _require_run(self, call: str) -> None:
        if not self.run_started:
            self._fail(call, "run has not been started")
        if self.run_ended:
            self._fail(call, "run has already ended")

    def start_run(self) -> None:
        if self.run_started:
            self._fail("start_run", "run has already been started")
        self.run_started = True

    def start_benchmark(self, params: BenchmarkParams) -> None:
        self._require_run("start_benchmark")
        if self.state not in (BenchmarkState.NOT_STARTED, BenchmarkState.ENDED):
            self._fail("start_benchmark", "previous benchmark has not ended")
        self.state = BenchmarkState.STARTED
        self._phase = None
        self._iteration = 0
        self._phases_seen = set()
        Logger.log_if_configured(
            "output", LogLevel.DEBUG, f"Benchmark started: {params.benchmark}"
        )

    def iteration(self, iteration: int, iteration_type: IterationType) -> None:
        if not isinstance(iteration_type, IterationType):
            self._fail("iteration", f"Unknown iteration type: {iteration_type!r}")
        if isinstance(iteration, bool) or not isinstance(iteration, int) or iteration < 1:
            self._fail("iteration", f"iteration number must be >= 1, got {iteration!r}")
        self._require_run("iteration")
        if self.state not in (BenchmarkState.STARTED, BenchmarkState.CLOSED):
            self._fail("iteration", f"not allowed while benchmark is {self.state.value}")
        if iteration_type == self._phase and iteration <= self._iteration:
            self._fail(
                "iteration",
                f"{iteration_type.value} iteration {iteration} does not follow "
                f"iteration {self._iteration}",
            )
        if iteration_type != self._phase:
            if iteration_type in self._phases_seen:
                self._fail(
                    "iteration", f"{iteration_type.value} phase has already ended"
                )
            if (
                iteration_type is IterationType.WARMUP
                and IterationType.MEASUREMENT in self._phases_seen
            ):
                self._fail("iteration", "warmup iteration after measurement began")
            self._phases_seen.add(iteration_type)
        self._phase = iteration_type
        self._iteration = iteration
        self.state = BenchmarkState.OPEN

    def iteration_result(self, iteration: int, iteration_type: IterationType) -> None:
        if not isinstance(iteration_type, IterationType):
            self._fail(
                "iteration_result", f"Unknown iteration type: {iteration_type!r}"
            )
        self._require_run("iteration_result")
        if self.state is not BenchmarkState.OPEN:
            self._fail("iteration_result", "no iteration is open")
        if iteration_type != self._phase or iteration != self._iteration:
            self._fail(
                "iteration_result",
                f"result for {iteration_type.value} iteration {iteration} but "
                f"{self._phase.value if self._phase else 'no'} iteration "
                f"{self._iteration} is open",
            )
        self.state = BenchmarkState.CLOSED

    def end_benchmark(self, result: object) -> None:
        self._require_run("end_benchmark")
        if result is not NO_RESULT and not isinstance(result, RunResult):
            self._fail(
                "end_benchmark",
                f"expected a RunResult or NO_RESULT, got {type(result).__name__}",
            )
        if self.state in (BenchmarkState.NOT_STARTED, BenchmarkState.ENDED):
            self._fail("end_benchmark", "no benchmark is in progress")
        if self.state is BenchmarkState.OPEN and result is not NO_RESULT:
            self._fail("end_benchmark", "iteration is still open")
        if result is NO_RESULT:
            Logger.log_if_configured(
                "output", LogLevel.WARNING, "Benchmark ended without a result"
            )
        self.state = BenchmarkState.ENDED

    def end_run(self) -> None:
        self._require_run("end_run")
        if self.state not in (BenchmarkState.NOT_STARTED, BenchmarkState.ENDED):
            self._fail("end_run", "a benchmark is still in progress")
        self.run_ended = True


class OutputFormat(ABC):
    """Event sink a harness reports a run to.

    Implementations must not retain the objects passed in beyond the call.
    """

    @abstractmethod
    def start_run(self) -> None:
        """Mark the start of the run."""
        pass

    @abstractmethod
    def start_benchmark(self, params: BenchmarkParams) -> None:
        """Announce a benchmark, before any of its iterations."""
        pass

    @abstractmethod
    def iteration(
        self,
        benchmark_params: BenchmarkParams,
        iteration_params: IterationParams,
        iteration: int,
        iteration_type: IterationType,
    ) -> None:
        """Announce an iteration, before it is measured."""
        pass

    @abstractmethod
    def iteration_result(
        self,
        benchmark_params: BenchmarkParams,
        iteration_params: IterationParams,
        iteration: int,
        iteration_type: IterationType,
        result: IterationResult,
    ) -> None:
        """Deliver the measurement of the open iteration."""
        pass

    @abstractmethod
    def end_benchmark(self, result: BenchmarkOutcome) -> None:
        """Close a benchmark with its aggregate, or NO_RESULT if it failed."""
        pass

    @abstractmethod
    def end_run(self, results: Collection[RunResult]) -> None:
        """Close the run with every benchmark's aggregate."""
        pass


class AbstractOutputFormat(OutputFormat):
    """Stream-backed output format with lifecycle validation.

    Validates each call with a LifecycleGuard, then delegates to the
    matching ``_on_*`` hook. Subclasses implement the hooks.
    """

    verbose: ClassVar[VerboseMode] = VerboseMode.NORMAL

    def __init__(
        self,
        out: TextIO,
        result_format: ResultFormatType = DEFAULT_RESULT_FORMAT,
    ) -> None:
        """Initialize the output format.

        Args:
            out: Append-only text stream the report is written to.
            result_format: Summary format handed the results at end of run.
        """
        self.out = out
        self.result_format = result_format
        self._guard = LifecycleGuard()

    # -------------------------------------------------------------------------
    # Stream helpers
    # -------------------------------------------------------------------------

    def write(self, text: str) -> None:
        """Write text without a newline."""
        self.out.write(text)

    def write_line(self, text: str = "") -> None:
        """Write text followed by a newline."""
        self.out.write(text + "\n")

    def verbose_write_line(self, text: str = "") -> None:
        """Write a line only when the format runs at extra verbosity."""
        if self.verbose is VerboseMode.EXTRA:
            self.write_line(text)

    def flush(self) -> None:
        """Flush the output stream."""
        self.out.flush()

    # -------------------------------------------------------------------------
    # Lifecycle contract
    # -------------------------------------------------------------------------

    def start_run(self) -> None:
        self._guard.start_run()
        self._on_start_run()

    def start_benchmark(self, params: BenchmarkParams) -> None:
        self._guard.start_benchmark(params)
        self._on_start_benchmark(params)

    def iteration(
        self,
        benchmark_params: BenchmarkParams,
        iteration_params: IterationParams,
        iteration: int,
        iteration_type: IterationType,
    ) -> None:
        self._guard.iteration(iteration, iteration_type)
        self._on_iteration(benchmark_params, iteration_params, iteration, iteration_type)

    def iteration_result(
        self,
        benchmark_params: BenchmarkParams,
        iteration_params: IterationParams,
        iteration: int,
        iteration_type: IterationType,
        result: IterationResult,
    ) -> None:
        self._guard.iteration_result(iteration, iteration_type)
        self._on_iteration_result(
            benchmark_params, iteration_params, iteration, iteration_type, result
        )

    def end_benchmark(self, result: BenchmarkOutcome) -> None:
        self._guard.end_benchmark(result)
        self._on_end_benchmark(result)

    def end_run(self, results: Collection[RunResult]) -> None:
        self._guard.end_run()
        self._on_end_run(results)

    # -------------------------------------------------------------------------
    # Rendering hooks
    # -------------------------------------------------------------------------

    @abstractmethod
    def _on_start_run(self) -> None:
        pass

    @abstractmethod
    def _on_start_benchmark(self, params: BenchmarkParams) -> None:
        pass

    @abstractmethod
    def _on_iteration(
        self,
        benchmark_params: BenchmarkParams,
        iteration_params: IterationParams,
        iteration: int,
        iteration_type: IterationType,
    ) -> None:
        pass

    @abstractmethod
    def _on_iteration_result(
        self,
        benchmark_params: BenchmarkParams,
        iteration_params: IterationParams,
        iteration: int,
        iteration_type: IterationType,
        result: IterationResult,
    ) -> None:
        pass

    @abstractmethod
    def _on_end_benchmark(self, result: BenchmarkOutcome) -> None:
        pass

    @abstractmethod
    def _on_end_run(self, results: Collection[RunResult]) -> None:
        pass
