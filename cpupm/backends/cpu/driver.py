"""Scaling driver detection.

The driver decides how turbo boost is encoded on disk, so it is probed once
when the CPU manager is built and never re-read.
"""

from __future__ import annotations

from pathlib import Path

from cpupm.backends import sysfs
from cpupm.errors import CpuPowerError
from cpupm.models.cpu_models import Driver, DriverFamily
from cpupm.utils.logger import Logger

# Substrings of scaling_driver identifiers, checked in order.
# intel_cpufreq is intel_pstate running in passive mode.
DRIVER_MARKERS: tuple[tuple[str, DriverFamily], ...] = (
    ("intel_pstate", DriverFamily.INTEL_PSTATE),
    ("intel_cpufreq", DriverFamily.INTEL_PSTATE),
    ("acpi-cpufreq", DriverFamily.ACPI_CPUFREQ),
    ("acpi_cpufreq", DriverFamily.ACPI_CPUFREQ),
    ("amd-pstate", DriverFamily.AMD_PSTATE),
    ("amd_pstate", DriverFamily.AMD_PSTATE),
)


def classify_driver(raw: str) -> Driver:
    """Map a scaling_driver identifier to a Driver.

    Args:
        raw: Identifier as read from sysfs (e.g., "amd-pstate-epp").

    Returns:
        Driver with a known family, or UNKNOWN carrying ``raw``.
    """
    name = raw.strip()
    lowered = name.lower()
    for marker, family in DRIVER_MARKERS:
        if marker in lowered:
            return Driver(family=family, raw=name)
    return Driver(family=DriverFamily.UNKNOWN, raw=name)


class DriverProbe:
    """Reads and classifies a core's scaling driver."""

    def __init__(self, cpu_root: Path) -> None:
        self._cpu_root = cpu_root
        self._logger = Logger.get("cpu.driver")

    def detect(self, core_id: int) -> Driver:
        """Detect the scaling driver of one core.

        Never raises: an unreadable identifier degrades to an UNKNOWN driver,
        which only disables turbo control.

        Args:
            core_id: Kernel cpu number (the N in ``cpu{N}``).
        """
        path = self._cpu_root / f"cpu{core_id}" / "cpufreq" / "scaling_driver"
        try:
            raw = sysfs.read_text(path)
        except CpuPowerError as e:
            self._logger.warning("Cannot read scaling driver: %s", e)
            return Driver(family=DriverFamily.UNKNOWN, raw="")

        driver = classify_driver(raw)
        if driver.family is DriverFamily.UNKNOWN:
            self._logger.warning(
                "Unrecognized scaling driver '%s'; turbo control disabled", raw
            )
        else:
            self._logger.info("Detected scaling driver: %s", driver)
        return driver
