"""
Version command - displays benchreport version information
"""

import click

from benchreport.version import BENCHREPORT_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display benchreport version information.

    Args:
        verbose: If True, show the release date and semver breakdown
    """
    if verbose:
        click.echo(f"benchreport version {BENCHREPORT_VERSION.full_version()}")
        major, minor, patch = BENCHREPORT_VERSION.semver()
        click.echo("\nDetailed version information:")
        click.echo(f"  Semantic Version: {major}.{minor}.{patch}")
        click.echo(f"  Release Date:     {BENCHREPORT_VERSION.date_string()}")
    else:
        click.echo(f"benchreport {BENCHREPORT_VERSION}")
