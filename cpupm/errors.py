"""Exception hierarchy for cpupm.

Every error raised by the managers derives from CpuPowerError, so callers can
catch one type around any operation and still inspect the specific failure.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cpupm.models.cpu_models import Driver
    from cpupm.models.profile_models import ApplyFailure


class CpuPowerError(Exception):
    """Base exception for all cpupm errors."""

    pass


class ManagerInitError(CpuPowerError):
    """Raised when a manager cannot discover the hardware it manages."""

    pass


class ControlFileError(CpuPowerError):
    """Raised when a control file cannot be read or written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class ControlFileParseError(CpuPowerError):
    """Raised when a control file holds malformed or undecodable content."""

    def __init__(self, path: str | Path, raw: str) -> None:
        self.path = Path(path)
        self.raw = raw
        super().__init__(f"{self.path}: cannot parse {raw!r}")


class InvalidCoreError(CpuPowerError, IndexError):
    """Raised when a core index is outside ``[0, core_count)``."""

    def __init__(self, core: int, core_count: int) -> None:
        self.core = core
        self.core_count = core_count
        super().__init__(f"Core {core} does not exist (core count: {core_count})")


class InvalidZoneError(CpuPowerError, IndexError):
    """Raised when a thermal zone index is outside ``[0, zone_count)``."""

    def __init__(self, zone: int, zone_count: int) -> None:
        self.zone = zone
        self.zone_count = zone_count
        super().__init__(
            f"Thermal zone {zone} does not exist (zone count: {zone_count})"
        )


class FrequencyOutOfRangeError(CpuPowerError):
    """Raised when a requested frequency lies outside the hardware bounds."""

    def __init__(self, value: int, min: int, max: int) -> None:
        self.value = value
        self.min = min
        self.max = max
        super().__init__(
            f"Frequency {value} MHz is outside the hardware range {min}-{max} MHz"
        )


class UnknownGovernorError(CpuPowerError):
    """Raised when a governor is not in the core's available list."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown governor '{name}' (available: {', '.join(available)})"
        )


class UnsupportedDriverOperationError(CpuPowerError):
    """Raised when the scaling driver has no known control for an operation."""

    def __init__(self, driver: Driver, operation: str) -> None:
        self.driver = driver
        self.operation = operation
        super().__init__(
            f"{operation} is not supported by scaling driver '{driver.raw or 'unknown'}'"
        )


class PartialFailureError(CpuPowerError):
    """Raised when a multi-core mutation failed on at least one core.

    Cores that are not listed were updated and keep their new state.
    """

    def __init__(
        self, operation: str, failures: list[tuple[int, CpuPowerError]]
    ) -> None:
        self.operation = operation
        self.failures = failures
        details = "; ".join(f"core {core}: {error}" for core, error in failures)
        super().__init__(
            f"{operation} failed on {len(failures)} core(s): {details}"
        )

    @property
    def failed_cores(self) -> list[int]:
        """Core ids that failed, in the order they were attempted."""
        return [core for core, _ in self.failures]


class NoThermalZonesError(CpuPowerError):
    """Raised when an aggregate temperature is requested with no zones."""

    def __init__(self) -> None:
        super().__init__("No thermal zones found")


class ProfileNotFoundError(CpuPowerError):
    """Raised when a requested profile is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Profile not found: '{name}'")


class ProfileApplyError(CpuPowerError):
    """Raised when one or more steps of a profile application failed.

    Steps that succeeded remain in effect.
    """

    def __init__(self, profile_name: str, failures: list[ApplyFailure]) -> None:
        self.profile_name = profile_name
        self.failures = failures
        details = "; ".join(str(failure) for failure in failures)
        super().__init__(f"Profile '{profile_name}' partially applied: {details}")
