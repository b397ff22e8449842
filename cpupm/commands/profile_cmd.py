"""Profile commands - list and apply profiles."""

from __future__ import annotations

import sys

import click

from cpupm.backends.cpu.manager import CpuManager
from cpupm.errors import CpuPowerError, ProfileApplyError
from cpupm.profiles.manager import ProfileManager
from cpupm.profiles.store import ProfileStore


def _load_manager() -> ProfileManager:
    """Registry of built-in profiles plus everything in the profile store."""
    return ProfileManager(ProfileStore().get_profiles())


def run_list_profiles() -> None:
    """Print every available profile."""
    click.echo("Available Profiles:")
    click.echo("-" * 50)
    for profile in _load_manager().get_profiles():
        settings = [f"governor={profile.governor}"]
        if profile.max_freq is not None:
            settings.append(f"max={profile.max_freq} MHz")
        if profile.turbo is not None:
            settings.append(f"turbo={'on' if profile.turbo else 'off'}")
        click.echo(f"  {profile.name:<20} {', '.join(settings)}")
        if profile.description:
            click.echo(f"      {profile.description}")


def run_apply_profile(name: str) -> None:
    """Apply a profile by name."""
    try:
        profiles = _load_manager()
        profiles.apply(profiles.get_profile(name), CpuManager())
    except ProfileApplyError as e:
        click.echo(f"Error: profile '{name}' was only partially applied:", err=True)
        for failure in e.failures:
            click.echo(f"  {failure}", err=True)
        sys.exit(1)
    except CpuPowerError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Profile '{name}' applied")
