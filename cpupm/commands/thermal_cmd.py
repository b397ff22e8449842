"""Thermal command - lists zones, trip points and the CPU temperature."""

from __future__ import annotations

import sys

import click

from cpupm.backends.thermal import ThermalManager
from cpupm.errors import CpuPowerError
from cpupm.models.thermal_models import classify_temperature


def run_thermal(show_trips: bool = False) -> None:
    """Display every thermal zone and the derived CPU temperature."""
    try:
        thermal = ThermalManager()
        zones = thermal.get_all_zones()
        cpu_temp = thermal.get_cpu_temperature() if zones else None
    except CpuPowerError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not zones:
        click.echo("No thermal zones found.")
        return

    click.echo("Thermal Zones:")
    for zone in zones:
        click.echo(f"  Zone {zone.id}: {zone.type_name:<20} {zone.temp_celsius:.1f}°C")
        if show_trips:
            for trip in zone.trip_points:
                click.echo(
                    f"      trip {trip.id}: {trip.temp_celsius:.1f}°C ({trip.trip_type})"
                )

    level = classify_temperature(cpu_temp)
    click.echo(f"CPU temperature: {cpu_temp:.1f}°C ({level.value})")
