#!/usr/bin/env python3
"""benchreport CLI - Command-line interface for benchreport."""

import click

from benchreport.models.constants import ResultFormatType, VerboseMode
from benchreport.utils.env import LOG_LEVEL_VAR, get_env
from benchreport.utils.logger import Logger


@click.group()
def benchreport():
    """Render benchmark runs as text reports."""
    # Logs go to stderr so they never interleave with the report on stdout
    if not Logger.is_configured():
        Logger.configure(
            level=get_env(LOG_LEVEL_VAR, default="WARNING"),
            output="stderr",
            timestamps=True,
        )


@benchreport.command()
@click.argument("run_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Report configuration file (JSON or YAML)",
)
@click.option(
    "--verbose",
    "-v",
    type=click.Choice([m.value for m in VerboseMode]),
    default=None,
    help="Report verbosity (default: normal)",
)
@click.option(
    "--result-format",
    "-f",
    type=click.Choice([t.value for t in ResultFormatType]),
    default=None,
    help="Format of the end-of-run summary (default: text)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the report to a file instead of stdout",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging",
)
def replay(run_file, config_path, verbose, result_format, output, debug):
    r"""Replay a recorded benchmark run through the report renderer.

    \b
    Examples:
      benchreport replay run.yaml
      benchreport replay run.yaml --result-format json
      benchreport replay run.yaml --verbose extra -o report.txt
    """
    from benchreport.commands.replay_cmd import resolve_report_config, run_replay

    if debug:
        Logger.set_level("DEBUG")

    config = resolve_report_config(config_path, verbose, result_format, output)
    run_replay(run_file, config)


@benchreport.command()
def formats():
    """List summary formats and verbosity modes."""
    from benchreport.commands.formats_cmd import list_formats

    list_formats()


@benchreport.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display benchreport version information."""
    from benchreport.commands.version_cmd import run_version

    run_version(verbose=verbose)


if __name__ == "__main__":
    benchreport()
