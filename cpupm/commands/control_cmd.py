"""Control commands - governor, frequency and turbo changes on every core."""

from __future__ import annotations

import sys
from collections.abc import Callable

import click

from cpupm.backends.cpu.manager import CpuManager
from cpupm.errors import CpuPowerError, PartialFailureError


def _run_control(action: Callable[[CpuManager], None], success: str) -> None:
    """Build a CpuManager, run one mutation and report the outcome.

    Exits with status 1 on any failure. For partial failures the cores that
    did change are left as they are and the failed ones are listed.
    """
    try:
        cpu = CpuManager()
        action(cpu)
    except PartialFailureError as e:
        click.echo(f"Error: {e.operation} failed on some cores:", err=True)
        for core, error in e.failures:
            click.echo(f"  core {core}: {error}", err=True)
        sys.exit(1)
    except CpuPowerError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(success)


def run_set_governor(governor: str) -> None:
    """Set the governor on every core."""
    _run_control(
        lambda cpu: cpu.set_governor_all(governor), f"Governor set to: {governor}"
    )


def run_set_frequency(frequency: int) -> None:
    """Pin every core to one frequency in MHz."""
    _run_control(
        lambda cpu: cpu.set_frequency_all(frequency),
        f"Frequency set to: {frequency} MHz",
    )


def run_set_turbo(enabled: bool) -> None:
    """Enable or disable turbo boost."""
    _run_control(
        lambda cpu: cpu.set_turbo(enabled),
        f"Turbo boost: {'Enabled' if enabled else 'Disabled'}",
    )


def run_reset_limits() -> None:
    """Restore the full hardware frequency range on every core."""
    _run_control(
        lambda cpu: cpu.reset_frequency_limits(),
        "Frequency limits reset to hardware range",
    )
