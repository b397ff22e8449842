"""cpupm - Linux CPU frequency scaling, thermal readings and power profiles."""

from cpupm.version.cpupm_version import CPUPM_VERSION, Version

__version__ = str(CPUPM_VERSION)
__version_info__ = CPUPM_VERSION

__all__ = [
    "CPUPM_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
