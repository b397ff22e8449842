"""Per-core frequency, governor and turbo control through cpufreq sysfs.

The manager is not internally synchronized. Callers that share one instance
between a polling refresh and interactive actions must hold a single lock
around every call.

Multi-core mutations are best-effort: every core is attempted, failures are
collected into a PartialFailureError, and cores that succeeded keep their new
state. The kernel offers no cross-file transaction, so there is no rollback.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from cpupm.backends import sysfs
from cpupm.backends.cpu.driver import DriverProbe
from cpupm.backends.cpu.enumerator import CoreEnumerator, CorePaths
from cpupm.config import Settings
from cpupm.errors import (
    ControlFileParseError,
    CpuPowerError,
    FrequencyOutOfRangeError,
    InvalidCoreError,
    ManagerInitError,
    PartialFailureError,
    UnknownGovernorError,
    UnsupportedDriverOperationError,
)
from cpupm.models.constants import (
    CPUFREQ_BOOST,
    CPUINFO_MODEL_KEYS,
    INTEL_NO_TURBO,
    KHZ_PER_MHZ,
)
from cpupm.models.cpu_models import CoreStatus, CpuInfo, Driver, DriverFamily
from cpupm.utils.logger import Logger


@dataclass(frozen=True)
class TurboControl:
    """On-disk encoding of the turbo switch for one driver family.

    Attributes:
        path: Control file to read and write.
        inverted: True when the file means "turbo disabled" (intel_pstate's
            no_turbo), False when it means "boost enabled".
    """

    path: Path
    inverted: bool

    def encode(self, enabled: bool) -> int:
        """Value to write for the normalized ``enabled`` state."""
        return int(enabled != self.inverted)

    def decode(self, raw: int) -> bool:
        """Normalized "boost enabled" state for a raw file value."""
        return (raw != 0) != self.inverted


def turbo_control(driver: Driver, cpu_root: Path) -> TurboControl:
    """Resolve the turbo control for a driver.

    Raises:
        UnsupportedDriverOperationError: If the driver family is unknown.
    """
    if driver.family is DriverFamily.INTEL_PSTATE:
        return TurboControl(path=cpu_root / INTEL_NO_TURBO, inverted=True)
    if driver.family in (DriverFamily.ACPI_CPUFREQ, DriverFamily.AMD_PSTATE):
        return TurboControl(path=cpu_root / CPUFREQ_BOOST, inverted=False)
    raise UnsupportedDriverOperationError(driver, "turbo control")


class CpuManager:
    """Frequency-scaling control for every logical core.

    Example:
        >>> cpu = CpuManager()
        >>> cpu.get_available_governors(0)
        ['performance', 'powersave']
        >>> cpu.set_governor_all("performance")
        >>> cpu.set_turbo(True)
    """

    def __init__(
        self,
        cpu_root: Path | None = None,
        cpuinfo_path: Path | None = None,
    ) -> None:
        """Discover cores, probe the driver and read hardware bounds.

        Args:
            cpu_root: Directory holding ``cpu{N}``. Defaults to
                ``Settings.from_env().cpu_root``.
            cpuinfo_path: Source of the model string. Defaults to
                ``Settings.from_env().cpuinfo_path``.

        Raises:
            ManagerInitError: If no core can be discovered or core 0's
                hardware bounds cannot be read or are inverted.
        """
        settings = Settings.from_env()
        self._cpu_root = cpu_root or settings.cpu_root
        self._cpuinfo_path = cpuinfo_path or settings.cpuinfo_path
        self._logger = Logger.get("cpu.manager")

        self._cores: list[CorePaths] = CoreEnumerator(self._cpu_root).discover()
        self._driver: Driver = DriverProbe(self._cpu_root).detect(
            self._cores[0].cpu_number
        )

        try:
            self._hw_min_freq = self._read_mhz(self._cores[0].cpuinfo_min_freq)
            self._hw_max_freq = self._read_mhz(self._cores[0].cpuinfo_max_freq)
        except CpuPowerError as e:
            raise ManagerInitError(f"Cannot read hardware frequency range: {e}") from e
        if self._hw_min_freq > self._hw_max_freq:
            raise ManagerInitError(
                f"Invalid hardware frequency range: min {self._hw_min_freq} MHz "
                f"exceeds max {self._hw_max_freq} MHz"
            )

        self._logger.info(
            "CPU manager ready: %d cores, driver %s, hardware range %d-%d MHz",
            len(self._cores),
            self._driver,
            self._hw_min_freq,
            self._hw_max_freq,
        )

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def core_count(self) -> int:
        """Number of managed logical cores."""
        return len(self._cores)

    @property
    def driver(self) -> Driver:
        """Scaling driver detected at construction."""
        return self._driver

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_cpu_info(self) -> CpuInfo:
        """Return model, core count, driver and hardware range.

        Raises:
            ControlFileError: If the cpuinfo source is unreadable.
            ControlFileParseError: If it holds no recognizable model line.
        """
        return CpuInfo(
            model=self._read_model(),
            core_count=self.core_count,
            driver=self._driver,
            min_freq=self._hw_min_freq,
            max_freq=self._hw_max_freq,
        )

    def get_governor(self, core: int) -> str:
        """Return the active governor of a core."""
        return sysfs.read_text(self._core(core).scaling_governor)

    def get_available_governors(self, core: int) -> list[str]:
        """Return the governors a core accepts, in kernel order."""
        return sysfs.read_list(self._core(core).scaling_available_governors)

    def get_current_freq(self, core: int) -> int:
        """Return a core's current frequency in MHz."""
        return self._read_mhz(self._core(core).scaling_cur_freq)

    def get_all_frequencies(self) -> list[int]:
        """Return every core's current frequency in MHz, in core order.

        Fails on the first unreadable core; a partial list is never returned.
        """
        return [self.get_current_freq(core) for core in range(self.core_count)]

    def get_average_frequency(self) -> int:
        """Return the integer mean of all current frequencies in MHz."""
        freqs = self.get_all_frequencies()
        return sum(freqs) // len(freqs)

    def get_hardware_min_freq(self, core: int) -> int:
        """Return a core's hardware minimum in MHz, read fresh from sysfs."""
        return self._read_mhz(self._core(core).cpuinfo_min_freq)

    def get_hardware_max_freq(self, core: int) -> int:
        """Return a core's hardware maximum in MHz, read fresh from sysfs."""
        return self._read_mhz(self._core(core).cpuinfo_max_freq)

    def get_scaling_min_freq(self, core: int) -> int:
        """Return a core's current lower scaling bound in MHz."""
        return self._read_mhz(self._core(core).scaling_min_freq)

    def get_scaling_max_freq(self, core: int) -> int:
        """Return a core's current upper scaling bound in MHz."""
        return self._read_mhz(self._core(core).scaling_max_freq)

    def get_all_core_status(self) -> list[CoreStatus]:
        """Return a fresh status for every core.

        Fails as a whole on the first unreadable core.
        """
        return [
            CoreStatus(
                core_id=core,
                current_freq=self.get_current_freq(core),
                governor=self.get_governor(core),
            )
            for core in range(self.core_count)
        ]

    def is_turbo_enabled(self) -> bool:
        """Return whether turbo boost is enabled, whatever the driver encoding.

        Raises:
            UnsupportedDriverOperationError: If the driver is unknown.
        """
        control = turbo_control(self._driver, self._cpu_root)
        return control.decode(sysfs.read_int(control.path))

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def set_governor(self, core: int, name: str) -> None:
        """Set one core's governor.

        Raises:
            UnknownGovernorError: If the core does not offer ``name``. Nothing
                is written in that case.
            ControlFileError: If the write fails.
        """
        paths = self._core(core)
        available = self.get_available_governors(core)
        if name not in available:
            raise UnknownGovernorError(name, available)
        self._write(paths.scaling_governor, name)

    def set_governor_all(self, name: str) -> None:
        """Set the governor on every core, attempting all of them.

        Raises:
            PartialFailureError: Listing each core that failed.
        """
        self._for_each_core(
            f"set governor '{name}'", lambda core: self.set_governor(core, name)
        )

    def set_scaling_min_freq(self, core: int, freq: int) -> None:
        """Set a core's lower scaling bound in MHz.

        Raises:
            FrequencyOutOfRangeError: If ``freq`` is outside the core's
                hardware range. Nothing is written in that case.
        """
        paths = self._core(core)
        self._check_range(core, freq)
        self._write(paths.scaling_min_freq, freq * KHZ_PER_MHZ)

    def set_scaling_max_freq(self, core: int, freq: int) -> None:
        """Set a core's upper scaling bound in MHz.

        Raises:
            FrequencyOutOfRangeError: If ``freq`` is outside the core's
                hardware range. Nothing is written in that case.
        """
        paths = self._core(core)
        self._check_range(core, freq)
        self._write(paths.scaling_max_freq, freq * KHZ_PER_MHZ)

    def set_frequency_all(self, freq: int) -> None:
        """Pin every core to ``freq`` MHz by setting both scaling bounds.

        Raises:
            PartialFailureError: Listing each core that failed.
        """
        self._for_each_core(
            f"set frequency {freq} MHz", lambda core: self._pin_frequency(core, freq)
        )

    def reset_frequency_limits(self) -> None:
        """Restore every core's scaling bounds to its full hardware range.

        Raises:
            PartialFailureError: Listing each core that failed.
        """
        self._for_each_core("reset frequency limits", self._reset_limits)

    def set_turbo(self, enabled: bool) -> None:
        """Enable or disable turbo boost system-wide.

        Raises:
            UnsupportedDriverOperationError: If the driver is unknown.
            ControlFileError: If the write fails.
        """
        control = turbo_control(self._driver, self._cpu_root)
        self._write(control.path, control.encode(enabled))
        self._logger.info("Turbo boost %s", "enabled" if enabled else "disabled")

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _core(self, core: int) -> CorePaths:
        if not 0 <= core < len(self._cores):
            raise InvalidCoreError(core, len(self._cores))
        return self._cores[core]

    def _read_mhz(self, path: Path) -> int:
        return sysfs.read_int(path) // KHZ_PER_MHZ

    def _write(self, path: Path, value: str | int) -> None:
        self._logger.debug("Writing '%s' to %s", value, path)
        sysfs.write_value(path, value)

    def _check_range(self, core: int, freq: int) -> None:
        hw_min = self.get_hardware_min_freq(core)
        hw_max = self.get_hardware_max_freq(core)
        if not hw_min <= freq <= hw_max:
            raise FrequencyOutOfRangeError(freq, hw_min, hw_max)

    def _pin_frequency(self, core: int, freq: int) -> None:
        # The kernel rejects min > max, so raise the ceiling first when going up.
        self._check_range(core, freq)
        if freq > self.get_scaling_max_freq(core):
            self.set_scaling_max_freq(core, freq)
            self.set_scaling_min_freq(core, freq)
        else:
            self.set_scaling_min_freq(core, freq)
            self.set_scaling_max_freq(core, freq)

    def _reset_limits(self, core: int) -> None:
        self.set_scaling_min_freq(core, self.get_hardware_min_freq(core))
        self.set_scaling_max_freq(core, self.get_hardware_max_freq(core))

    def _for_each_core(self, operation: str, action: Callable[[int], None]) -> None:
        failures: list[tuple[int, CpuPowerError]] = []
        for core in range(self.core_count):
            try:
                action(core)
            except CpuPowerError as e:
                self._logger.warning("%s failed on core %d: %s", operation, core, e)
                failures.append((core, e))

        if failures:
            error = PartialFailureError(operation, failures)
            self._logger.error("%s", error)
            raise error
        self._logger.info("%s on %d cores", operation, self.core_count)

    def _read_model(self) -> str:
        text = sysfs.read_text(self._cpuinfo_path)
        fields: dict[str, str] = {}
        for line in text.splitlines():
            key, sep, value = line.partition(":")
            if sep and key.strip() not in fields:
                fields[key.strip()] = value.strip()

        for key in CPUINFO_MODEL_KEYS:
            if fields.get(key):
                return fields[key]
        raise ControlFileParseError(self._cpuinfo_path, text[:200])
