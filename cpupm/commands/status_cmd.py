"""Status command - prints CPU model, driver, governor, frequencies and turbo."""

from __future__ import annotations

import sys

import click

from cpupm.backends.cpu.manager import CpuManager
from cpupm.errors import CpuPowerError, UnsupportedDriverOperationError


def run_status() -> None:
    """Display the current CPU state."""
    try:
        cpu = CpuManager()
        info = cpu.get_cpu_info()
        statuses = cpu.get_all_core_status()
    except CpuPowerError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo("CPU Status:")
    click.echo(f"  Model:     {info.model}")
    click.echo(f"  Cores:     {info.core_count}")
    click.echo(f"  Driver:    {info.driver}")
    click.echo(f"  HW range:  {info.min_freq}-{info.max_freq} MHz")
    click.echo(f"  Governor:  {statuses[0].governor}")
    click.echo(
        f"  Average:   {sum(s.current_freq for s in statuses) // len(statuses)} MHz"
    )
    click.echo(f"  Turbo:     {_turbo_label(cpu)}")
    click.echo("  Frequencies:")
    for status in statuses:
        click.echo(
            f"    Core {status.core_id}: {status.current_freq} MHz ({status.governor})"
        )


def _turbo_label(cpu: CpuManager) -> str:
    try:
        return "Enabled" if cpu.is_turbo_enabled() else "Disabled"
    except UnsupportedDriverOperationError:
        return "Unsupported"
    except CpuPowerError as e:
        return f"Unavailable ({e})"
