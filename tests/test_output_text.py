"""Tests for the text report output format."""

from io import StringIO
from unittest.mock import patch

from benchreport.models import (
    NO_RESULT,
    IterationParams,
    IterationType,
    Mode,
    Result,
    ResultFormatType,
    TimeValue,
)
from benchreport.output.text import (
    TextReportFormat,
    VerboseTextReportFormat,
    format_params,
    iteration_label,
    threads_word,
)


class FlushCountingStream(StringIO):
    """StringIO that records what had been written at each flush."""

    def __init__(self) -> None:
        super().__init__()
        self.flushed: list[str] = []

    def flush(self) -> None:
        super().flush()
        self.flushed.append(self.getvalue())


def _started(out, params, result_format=ResultFormatType.TEXT):
    """Text format with the run and one benchmark started."""
    fmt = TextReportFormat(out, result_format)
    fmt.start_run()
    fmt.start_benchmark(params)
    return fmt


def _header_lines(out, params):
    _started(out, params)
    return out.getvalue().splitlines()


# -----------------------------------------------------------------------------
# start_benchmark
# -----------------------------------------------------------------------------


def test_header_end_to_end(out, params):
    """Test the exact header for a synchronized throughput benchmark."""
    assert _header_lines(out, params) == [
        "# Warmup: <none>",
        "# Measurement: 5 iterations, 200 ms each",
        "# Threads: 4 threads, will synchronize iterations",
        "# Benchmark mode: Throughput",
        "# Benchmark: pkg.Bench.method",
    ]


def test_warmup_line_with_iterations(out, make_params):
    """Test that a warmup phase lists count and duration without a batch clause."""
    params = make_params(
        warmup=IterationParams(count=3, time=TimeValue.parse("1 s"), batch_size=1)
    )
    lines = _header_lines(out, params)

    assert lines[0] == "# Warmup: 3 iterations, 1 s each"
    assert "calls per batch" not in lines[0]


def test_batch_clause_only_for_batches(out, make_params):
    """Test that batch size above one is reported."""
    params = make_params(
        warmup=IterationParams(count=2, time=TimeValue.parse("10 ms"), batch_size=50),
        measurement=IterationParams(count=0, time=TimeValue.parse("1 s")),
    )
    lines = _header_lines(out, params)

    assert lines[0] == "# Warmup: 2 iterations, 10 ms each, 50 calls per batch"
    assert lines[1] == "# Measurement: <none>"


def test_thread_pluralization(out, make_params):
    """Test that one thread is singular and two are plural."""
    lines = _header_lines(out, make_params(threads=1))
    assert lines[2].startswith("# Threads: 1 thread,")

    other = StringIO()
    lines = _header_lines(other, make_params(threads=2))
    assert lines[2].startswith("# Threads: 2 threads,")

    assert threads_word(1) == "thread"
    assert threads_word(16) == "threads"


def test_unsynchronized_warning(out, make_params):
    """Test the warning when synchronization is disabled outside single-shot."""
    lines = _header_lines(out, make_params(synch_iterations=False, mode=Mode.AVERAGE_TIME))

    assert lines[2] == (
        "# Threads: 4 threads, ***WARNING: Synchronize iterations are disabled!***"
    )
    assert lines[3] == "# Benchmark mode: Average time"


def test_single_shot_has_no_synchronization_suffix(out, make_params):
    """Test that single-shot mode without synchronization adds nothing."""
    lines = _header_lines(
        out, make_params(synch_iterations=False, mode=Mode.SINGLE_SHOT_TIME, threads=1)
    )

    assert lines[2] == "# Threads: 1 thread"
    assert "WARNING" not in out.getvalue()


def test_parameters_line(out, make_params):
    """Test that parameters are listed sorted and only when present."""
    lines = _header_lines(out, make_params(params={"size": 10, "alg": "quick"}))

    assert lines[-1] == "# Parameters: {alg=quick, size=10}"
    assert format_params({}) == "{}"


def test_no_parameters_line_when_empty(out, params):
    """Test that an empty parameter map suppresses the line."""
    _started(out, params)
    assert "# Parameters" not in out.getvalue()


# -----------------------------------------------------------------------------
# iteration / iteration_result
# -----------------------------------------------------------------------------


def test_iteration_label_width():
    """Test that iteration numbers are right-justified to three characters."""
    assert iteration_label(7, IterationType.MEASUREMENT) == "Iteration   7: "
    assert iteration_label(123, IterationType.MEASUREMENT) == "Iteration 123: "
    assert iteration_label(7, IterationType.WARMUP) == "# Warmup Iteration   7: "


def test_iteration_writes_label_and_flushes(params):
    """Test that the label is flushed without a newline before measurement."""
    out = FlushCountingStream()
    fmt = _started(out, params)
    fmt.iteration(params, params.measurement, 7, IterationType.MEASUREMENT)

    assert out.getvalue().endswith("# Benchmark: pkg.Bench.method\nIteration   7: ")
    assert out.flushed[-1] == out.getvalue()


def test_iteration_result_primary_only(out, params, make_iteration):
    """Test that the primary result completes the iteration line."""
    fmt = _started(out, params)
    out.seek(0)
    out.truncate()

    fmt.iteration(params, params.measurement, 1, IterationType.MEASUREMENT)
    fmt.iteration_result(
        params, params.measurement, 1, IterationType.MEASUREMENT, make_iteration()
    )

    assert out.getvalue() == "Iteration   1: 1234.568 ops/s\n"


def test_secondary_results_align(out, params, make_iteration):
    """Test that secondary labels pad to a shared column."""
    fmt = _started(out, params)
    out.seek(0)
    out.truncate()

    data = make_iteration(
        a=Result(score=1.0, unit="x"),
        bbb=Result(score=2.0, unit="y"),
    )
    fmt.iteration(params, params.measurement, 1, IterationType.MEASUREMENT)
    fmt.iteration_result(params, params.measurement, 1, IterationType.MEASUREMENT, data)

    indent = " " * len("Iteration   1: ")
    assert out.getvalue() == (
        "Iteration   1: 1234.568 ops/s\n"
        f"{indent}  a   : 1.000 x\n"
        f"{indent}  bbb : 2.000 y\n"
        "\n"
    )

    lines = out.getvalue().splitlines()
    assert lines[1].index(":") == lines[2].index(":")


def test_secondary_alignment_recomputed_per_iteration(out, params, make_iteration):
    """Test that a later iteration with shorter labels is not padded to earlier ones."""
    fmt = _started(out, params)

    first = make_iteration(**{"gc.alloc.rate": Result(score=1.0, unit="MB/s")})
    second = make_iteration(**{"gc.n": Result(score=3.0, unit="counts")})
    for number, data in ((1, first), (2, second)):
        fmt.iteration(params, params.measurement, number, IterationType.MEASUREMENT)
        fmt.iteration_result(
            params, params.measurement, number, IterationType.MEASUREMENT, data
        )

    assert f"{' ' * 15}  gc.n : 3.000 counts\n" in out.getvalue()


def test_warmup_never_renders_secondary(out, make_params, make_iteration):
    """Test that warmup iterations drop secondary results."""
    params = make_params(warmup=IterationParams(count=1, time=TimeValue.parse("1 s")))
    fmt = _started(out, params)
    out.seek(0)
    out.truncate()

    data = make_iteration(a=Result(score=1.0, unit="x"))
    fmt.iteration(params, params.warmup, 1, IterationType.WARMUP)
    fmt.iteration_result(params, params.warmup, 1, IterationType.WARMUP, data)

    assert out.getvalue() == "# Warmup Iteration   1: 1234.568 ops/s\n"


# -----------------------------------------------------------------------------
# end_benchmark / end_run
# -----------------------------------------------------------------------------


def test_end_benchmark_without_result(out, params):
    """Test that a failed benchmark emits one blank line only."""
    fmt = _started(out, params)
    out.seek(0)
    out.truncate()

    fmt.end_benchmark(NO_RESULT)

    assert out.getvalue() == "\n"


def test_end_benchmark_with_result(out, params, make_run_result):
    """Test the extended info block of a finished benchmark."""
    fmt = _started(out, params)
    out.seek(0)
    out.truncate()

    result = make_run_result(params, **{"gc.time": Result(score=12.0, unit="ms")})
    fmt.end_benchmark(result)

    assert out.getvalue() == (
        "\n"
        "Result:\n"
        "  1234.568 ±(99.9%) 12.346 ops/s\n"
        "  (min, avg, max) = (1200.000, 1234.568, 1260.000), stdev = 10.000\n"
        "  CI (99.9%): [1222.222, 1246.913] (assumes normal distribution)\n"
        'Result "gc.time":\n'
        "  12.000 ms\n"
        "\n"
    )


def test_end_benchmark_prefers_result_label(out, params, make_run_result):
    """Test that a secondary's own label heads its block, falling back to its key."""
    fmt = _started(out, params)
    out.seek(0)
    out.truncate()

    result = make_run_result(
        params,
        **{
            "gc.alloc": Result(label="gc.alloc.rate", score=5.0, unit="MB/sec"),
            "gc.time": Result(score=12.0, unit="ms"),
        },
    )
    fmt.end_benchmark(result)

    report = out.getvalue()
    assert 'Result "gc.alloc.rate":\n  5.000 MB/sec\n' in report
    assert 'Result "gc.alloc":' not in report
    assert 'Result "gc.time":\n  12.000 ms\n' in report


def test_end_run_dispatches_empty_results(out):
    """Test that the summary formatter runs even with no results."""
    fmt = TextReportFormat(out, ResultFormatType.CSV)
    fmt.start_run()

    with patch(
        "benchreport.output.text.ResultFormatFactory.get_instance"
    ) as mock_get_instance:
        fmt.end_run([])

    mock_get_instance.assert_called_once_with(ResultFormatType.CSV, out)
    summary = mock_get_instance.return_value
    summary.write_out.assert_called_once_with([])
    summary.close.assert_called_once()


def test_end_run_writes_summary(out, params, make_run_result):
    """Test that the configured summary follows the per-event report."""
    fmt = _started(out, params, ResultFormatType.JSON)
    result = make_run_result(params)
    fmt.end_benchmark(result)
    fmt.end_run([result])

    assert '"benchmark": "pkg.Bench.method"' in out.getvalue()
    assert not out.closed


def test_verbose_adds_run_lines(out, params, make_run_result):
    """Test the run progress lines of the verbose text format."""
    fmt = VerboseTextReportFormat(out)
    fmt.start_run()
    assert out.getvalue() == "# Run started\n"

    fmt.start_benchmark(params)
    result = make_run_result(params)
    fmt.end_benchmark(result)
    fmt.end_run([result])

    assert "# Run complete: 1 benchmark result(s), text summary\n" in out.getvalue()
    assert "# Benchmark: pkg.Bench.method" in out.getvalue()


def test_normal_omits_run_lines(out):
    """Test that the normal text format writes no run progress lines."""
    fmt = TextReportFormat(out)
    fmt.start_run()
    assert out.getvalue() == ""

    fmt.verbose_write_line("hidden")
    fmt.end_run([])
    assert out.getvalue() == ""
