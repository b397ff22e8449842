#!/usr/bin/env python3
"""cpupm CLI - Command-line interface for cpupm."""

import click

from cpupm.config import Settings
from cpupm.utils.logger import Logger


@click.group()
@click.option("--debug", "-d", is_flag=True, help="Enable debug logging")
def cpupm(debug):
    """Linux CPU power management: governors, frequencies, turbo and thermals."""
    if not Logger.is_configured():
        Logger.configure(level=Settings.from_env().log_level, timestamps=True)
    if debug:
        Logger.set_level("DEBUG")


@cpupm.command()
def status():
    """Show current CPU status."""
    from cpupm.commands.status_cmd import run_status

    run_status()


@cpupm.command("set-governor")
@click.argument("governor")
def set_governor(governor):
    """Set the scaling governor on every core."""
    from cpupm.commands.control_cmd import run_set_governor

    run_set_governor(governor)


@cpupm.command("set-frequency")
@click.argument("frequency", type=click.IntRange(min=1))
def set_frequency(frequency):
    """Pin every core to FREQUENCY (in MHz)."""
    from cpupm.commands.control_cmd import run_set_frequency

    run_set_frequency(frequency)


@cpupm.command("set-turbo")
@click.argument("state", type=click.Choice(["on", "off"], case_sensitive=False))
def set_turbo(state):
    """Enable or disable turbo boost."""
    from cpupm.commands.control_cmd import run_set_turbo

    run_set_turbo(state.lower() == "on")


@cpupm.command("reset-limits")
def reset_limits():
    """Restore the full hardware frequency range on every core."""
    from cpupm.commands.control_cmd import run_reset_limits

    run_reset_limits()


@cpupm.command()
def profiles():
    """List built-in and stored profiles."""
    from cpupm.commands.profile_cmd import run_list_profiles

    run_list_profiles()


@cpupm.command("apply-profile")
@click.argument("name")
def apply_profile(name):
    """Apply the profile NAME to every core."""
    from cpupm.commands.profile_cmd import run_apply_profile

    run_apply_profile(name)


@cpupm.command()
@click.option("--trips", "-t", is_flag=True, help="Show trip points for each zone")
def thermal(trips):
    """Show thermal zones and the CPU temperature."""
    from cpupm.commands.thermal_cmd import run_thermal

    run_thermal(show_trips=trips)


@cpupm.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display cpupm version information."""
    from cpupm.commands.version_cmd import run_version

    run_version(verbose=verbose)


if __name__ == "__main__":
    cpupm()
