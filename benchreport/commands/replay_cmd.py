"""Replay command - render a recorded benchmark run.

CLI Examples:
    benchreport replay run.yaml                        # Text report to stdout
    benchreport replay run.yaml --result-format json   # JSON summary at the end
    benchreport replay run.yaml --verbose extra        # Include run progress lines
    benchreport replay run.yaml --config report.yaml -o report.txt
"""

import json
import sys
from pathlib import Path
from typing import Any, TextIO

import click
import yaml  # type: ignore[import-untyped, unused-ignore]
from pydantic import ValidationError

from benchreport.models.config_models import ReportConfig
from benchreport.models.constants import ResultFormatType, VerboseMode
from benchreport.output.base import ProtocolViolationError
from benchreport.output.factory import create_output_format
from benchreport.replay import (
    RecordedRun,
    ReplayDriver,
    ReplayError,
    load_recorded_run,
)
from benchreport.utils.env import (
    RESULT_FORMAT_VAR,
    VERBOSE_VAR,
    EnvVarError,
    get_env,
)
from benchreport.utils.logger import Logger, LogLevel


def _load_config(config_path: str | None) -> dict[str, Any]:
    """Load report configuration from a JSON or YAML file."""
    if not config_path:
        return {}

    path = Path(config_path)
    if not path.exists():
        click.echo(f"Error: Config file not found: {config_path}", err=True)
        sys.exit(1)

    try:
        content = path.read_text()
        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
        click.echo(f"Error: Failed to parse config file {config_path}: {e}", err=True)
        sys.exit(1)

    if data is None:
        return {}
    if not isinstance(data, dict):
        click.echo(f"Error: Config file {config_path} must be a dictionary", err=True)
        sys.exit(1)
    return data


def resolve_report_config(
    config_path: str | None = None,
    verbose: str | None = None,
    result_format: str | None = None,
    output: str | None = None,
) -> ReportConfig:
    """Build the report configuration.

    Environment variables are overridden by the config file, which is
    overridden by command-line options.

    Args:
        config_path: Optional JSON/YAML config file.
        verbose: Verbosity from the command line.
        result_format: Summary format from the command line.
        output: Report destination from the command line.

    Returns:
        The merged configuration.
    """
    data: dict[str, Any] = {}
    try:
        env_verbose = get_env(VERBOSE_VAR, default=None, as_type=VerboseMode)
        env_format = get_env(RESULT_FORMAT_VAR, default=None, as_type=ResultFormatType)
    except EnvVarError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    if env_verbose is not None:
        data["verbose"] = env_verbose
    if env_format is not None:
        data["result_format"] = env_format

    data.update(_load_config(config_path))

    overrides = {"verbose": verbose, "result_format": result_format, "output": output}
    data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ReportConfig.model_validate(data)
    except ValidationError as e:
        click.echo(f"Error: Invalid report configuration: {e}", err=True)
        sys.exit(1)


def _replay_to(out: TextIO, run: RecordedRun, config: ReportConfig) -> None:
    output = create_output_format(out, config.verbose, config.result_format)
    results = ReplayDriver(output).replay(run)
    Logger.log_if_configured(
        "replay",
        LogLevel.INFO,
        f"Replayed {len(run.benchmarks)} benchmark(s), {len(results)} with results",
    )


def run_replay(run_file: str, config: ReportConfig) -> None:
    """Replay a recorded run and write the report.

    Args:
        run_file: Recorded run (YAML or JSON).
        config: Report configuration.
    """
    try:
        run = load_recorded_run(run_file)
        if config.output is None:
            _replay_to(sys.stdout, run, config)
        else:
            with config.output.open("w") as out:
                _replay_to(out, run, config)
            click.echo(f"Report written to: {config.output}", err=True)
    except (ReplayError, ProtocolViolationError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
