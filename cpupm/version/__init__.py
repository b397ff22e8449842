"""Version information for cpupm."""

from cpupm.version.cpupm_version import CPUPM_VERSION, Version

__all__ = ["CPUPM_VERSION", "Version"]
