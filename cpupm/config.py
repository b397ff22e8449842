"""Runtime settings resolved from the environment.

Every path the managers touch can be redirected, which is how the test suite
points them at fake sysfs trees and how a caller targets a chroot.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cpupm.models.constants import (
    DEFAULT_CPU_ROOT,
    DEFAULT_CPUINFO_PATH,
    DEFAULT_PROFILE_DIR,
    DEFAULT_THERMAL_ROOT,
    ENV_CPU_ROOT,
    ENV_CPUINFO_PATH,
    ENV_LOG_LEVEL,
    ENV_PROFILE_DIR,
    ENV_THERMAL_ROOT,
)
from cpupm.utils.env import get_env


@dataclass(frozen=True)
class Settings:
    """Resolved locations and log level.

    Attributes:
        cpu_root: Directory holding ``cpu{N}`` entries.
        thermal_root: Directory holding ``thermal_zone{N}`` entries.
        cpuinfo_path: Source of the CPU model string.
        profile_dir: Where stored profiles live.
        log_level: Default log level for the CLI.
    """

    cpu_root: Path = DEFAULT_CPU_ROOT
    thermal_root: Path = DEFAULT_THERMAL_ROOT
    cpuinfo_path: Path = DEFAULT_CPUINFO_PATH
    profile_dir: Path = DEFAULT_PROFILE_DIR
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``CPUPM_*`` variables, falling back to defaults."""
        return cls(
            cpu_root=get_env(ENV_CPU_ROOT, default=DEFAULT_CPU_ROOT, as_type=Path),
            thermal_root=get_env(
                ENV_THERMAL_ROOT, default=DEFAULT_THERMAL_ROOT, as_type=Path
            ),
            cpuinfo_path=get_env(
                ENV_CPUINFO_PATH, default=DEFAULT_CPUINFO_PATH, as_type=Path
            ),
            profile_dir=get_env(
                ENV_PROFILE_DIR, default=DEFAULT_PROFILE_DIR, as_type=Path
            ),
            log_level=get_env(ENV_LOG_LEVEL, default="INFO"),
        )
