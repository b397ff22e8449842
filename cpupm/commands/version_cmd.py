"""
Version command - displays cpupm version information
"""

import click

from cpupm.version import CPUPM_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display cpupm version information.

    Args:
        verbose: If True, show the release date as well
    """
    if verbose:
        click.echo(f"cpupm version {CPUPM_VERSION.full_version()}")
        click.echo("\nDetailed version information:")
        click.echo(f"  Semantic Version: {CPUPM_VERSION}")
        click.echo(f"  Release Date:     {CPUPM_VERSION.date_string()}")
    else:
        click.echo(f"cpupm {CPUPM_VERSION}")
