"""Profile registry and application.

Usage:
    from cpupm.profiles.manager import ProfileManager

    profiles = ProfileManager(store.get_profiles())
    profiles.apply(profiles.get_profile("performance"), cpu_manager)
"""

from __future__ import annotations

from collections.abc import Iterable

from cpupm.backends.cpu.manager import CpuManager
from cpupm.errors import (
    CpuPowerError,
    PartialFailureError,
    ProfileApplyError,
    ProfileNotFoundError,
)
from cpupm.models.profile_models import ApplyFailure, ApplyStep, Profile
from cpupm.profiles.builtin import BUILTIN_PROFILES
from cpupm.utils.logger import Logger


class ProfileManager:
    """Holds named profiles and applies them through a CpuManager.

    The registry starts with the built-in profiles. Profiles passed in by the
    caller (usually loaded by ProfileStore) are added after them; a profile
    whose name is already registered replaces the earlier entry.
    """

    def __init__(self, profiles: Iterable[Profile] = ()) -> None:
        self._logger = Logger.get("profiles")
        self._profiles: dict[str, Profile] = {p.name: p for p in BUILTIN_PROFILES}
        for profile in profiles:
            self.add_profile(profile)

    def add_profile(self, profile: Profile) -> None:
        """Register a profile, replacing any profile with the same name."""
        if profile.name in self._profiles:
            self._logger.info("Replacing profile '%s'", profile.name)
        self._profiles[profile.name] = profile

    def get_profiles(self) -> list[Profile]:
        """Return all registered profiles in registration order."""
        return list(self._profiles.values())

    def get_profile(self, name: str) -> Profile:
        """Look up a profile by name.

        Raises:
            ProfileNotFoundError: If no profile has that name.
        """
        try:
            return self._profiles[name]
        except KeyError:
            raise ProfileNotFoundError(name) from None

    def apply(self, profile: Profile, cpu_manager: CpuManager) -> None:
        """Apply a profile to every core.

        Steps run in a fixed order:

        1. governor on every core;
        2. if ``max_freq`` is set, every core's min bound reset to its
           hardware minimum, then every core's max bound set to ``max_freq``;
        3. if ``turbo`` is set, turbo boost.

        A failing step never stops the later ones, and nothing is rolled back.

        Raises:
            ProfileApplyError: Naming every failed step and core.
        """
        self._logger.info("Applying profile '%s'", profile.name)
        failures: list[ApplyFailure] = []

        try:
            cpu_manager.set_governor_all(profile.governor)
        except PartialFailureError as e:
            failures.extend(
                ApplyFailure(step=ApplyStep.GOVERNOR, core=core, error=error)
                for core, error in e.failures
            )

        if profile.max_freq is not None:
            for core in range(cpu_manager.core_count):
                try:
                    cpu_manager.set_scaling_min_freq(
                        core, cpu_manager.get_hardware_min_freq(core)
                    )
                except CpuPowerError as e:
                    failures.append(
                        ApplyFailure(step=ApplyStep.MIN_RESET, core=core, error=e)
                    )
            for core in range(cpu_manager.core_count):
                try:
                    cpu_manager.set_scaling_max_freq(core, profile.max_freq)
                except CpuPowerError as e:
                    failures.append(
                        ApplyFailure(step=ApplyStep.MAX_FREQUENCY, core=core, error=e)
                    )

        if profile.turbo is not None:
            try:
                cpu_manager.set_turbo(profile.turbo)
            except CpuPowerError as e:
                failures.append(ApplyFailure(step=ApplyStep.TURBO, core=None, error=e))

        if failures:
            error = ProfileApplyError(profile.name, failures)
            self._logger.error("%s", error)
            raise error
        self._logger.info("Profile '%s' applied", profile.name)
