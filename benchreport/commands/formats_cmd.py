"""Formats command - list summary and verbosity choices.

CLI Examples:
    benchreport formats
"""

import click

from benchreport.output.factory import OutputFormatFactory
from benchreport.results.factory import ResultFormatFactory


def _summary(cls: type) -> str:
    doc = (cls.__doc__ or "").strip()
    return doc.splitlines()[0] if doc else ""


def list_formats() -> None:
    """List result formats and verbosity modes with their implementations."""
    click.echo("Result Formats:")
    click.echo("-" * 50)
    for format_type, format_cls in ResultFormatFactory.FORMATS.items():
        click.echo(f"  {format_type.value:<10} {_summary(format_cls)}")

    click.echo()
    click.echo("Verbosity Modes:")
    click.echo("-" * 50)
    for mode, output_cls in OutputFormatFactory.FORMATS.items():
        click.echo(f"  {mode.value:<10} {_summary(output_cls)}")
