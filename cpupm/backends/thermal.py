"""Thermal zone discovery and temperature readings.

Zones live under /sys/class/thermal/thermal_zone{N}. Each exposes ``temp`` in
millidegrees Celsius, a ``type`` label, and optional trip points
``trip_point_{K}_temp`` / ``trip_point_{K}_type``.

Zones are ordered by their numeric suffix, so thermal_zone2 precedes
thermal_zone10 and zone ids match the kernel's numbering on contiguous
platforms.
"""

from __future__ import annotations

import re
from pathlib import Path

from cpupm.backends import sysfs
from cpupm.config import Settings
from cpupm.errors import (
    CpuPowerError,
    InvalidZoneError,
    ManagerInitError,
    NoThermalZonesError,
)
from cpupm.models.constants import (
    CPU_ZONE_MARKERS,
    MILLIDEGREES_PER_DEGREE,
    UNKNOWN_TRIP_TYPE,
)
from cpupm.models.thermal_models import ThermalZone, TripPoint
from cpupm.utils.logger import Logger

ZONE_DIR_PATTERN = re.compile(r"^thermal_zone(\d+)$")


class ThermalManager:
    """Reads thermal zones and derives a CPU temperature.

    Not internally synchronized; see CpuManager for the locking contract.
    """

    def __init__(self, thermal_root: Path | None = None) -> None:
        """Discover thermal zones.

        Args:
            thermal_root: Directory holding ``thermal_zone{N}``. Defaults to
                ``Settings.from_env().thermal_root``.

        Raises:
            ManagerInitError: If the thermal root cannot be listed. A readable
                root with no zones is valid.
        """
        self._thermal_root = thermal_root or Settings.from_env().thermal_root
        self._logger = Logger.get("thermal")
        self._zones = self._discover_zones()
        self._logger.info("Discovered %d thermal zones", len(self._zones))

    def _discover_zones(self) -> list[Path]:
        try:
            entries = list(self._thermal_root.iterdir())
        except OSError as e:
            raise ManagerInitError(
                f"Cannot read thermal directory {self._thermal_root}: {e}"
            ) from e

        zones: list[tuple[int, Path]] = []
        for entry in entries:
            match = ZONE_DIR_PATTERN.match(entry.name)
            if match is not None:
                zones.append((int(match.group(1)), entry))
        return [path for _, path in sorted(zones)]

    @property
    def zone_count(self) -> int:
        """Number of discovered zones."""
        return len(self._zones)

    def _zone(self, zone: int) -> Path:
        if not 0 <= zone < len(self._zones):
            raise InvalidZoneError(zone, len(self._zones))
        return self._zones[zone]

    def get_temperature(self, zone: int) -> float:
        """Return a zone's temperature in Celsius."""
        return sysfs.read_int(self._zone(zone) / "temp") / MILLIDEGREES_PER_DEGREE

    def get_all_temperatures(self) -> list[float]:
        """Return every zone's temperature; fails if any zone fails."""
        return [self.get_temperature(zone) for zone in range(self.zone_count)]

    def get_zone_type(self, zone: int) -> str:
        """Return a zone's type label."""
        return sysfs.read_text(self._zone(zone) / "type")

    def get_trip_points(self, zone: int) -> list[TripPoint]:
        """Return a zone's trip points.

        Probes trip_point_0, trip_point_1, ... and stops at the first index
        with no temperature file. Points after a gap are not reported.
        A missing or unreadable type file is reported as "unknown".
        """
        zone_path = self._zone(zone)
        trip_points: list[TripPoint] = []
        trip_id = 0

        while True:
            temp_path = zone_path / f"trip_point_{trip_id}_temp"
            if not temp_path.exists():
                break

            temp_celsius = sysfs.read_int(temp_path) / MILLIDEGREES_PER_DEGREE
            try:
                trip_type = sysfs.read_text(zone_path / f"trip_point_{trip_id}_type")
            except CpuPowerError as e:
                self._logger.debug("No type for trip point %d: %s", trip_id, e)
                trip_type = UNKNOWN_TRIP_TYPE

            trip_points.append(
                TripPoint(id=trip_id, temp_celsius=temp_celsius, trip_type=trip_type)
            )
            trip_id += 1

        return trip_points

    def get_zone_info(self, zone: int) -> ThermalZone:
        """Return a fully resolved zone, or fail."""
        return ThermalZone(
            id=zone,
            type_name=self.get_zone_type(zone),
            temp_celsius=self.get_temperature(zone),
            trip_points=self.get_trip_points(zone),
        )

    def get_all_zones(self) -> list[ThermalZone]:
        """Return every zone; fails as a whole if any zone fails."""
        return [self.get_zone_info(zone) for zone in range(self.zone_count)]

    def get_max_temperature(self) -> float:
        """Return the hottest zone's temperature.

        Raises:
            NoThermalZonesError: If there are no zones.
        """
        temps = self.get_all_temperatures()
        if not temps:
            raise NoThermalZonesError()
        return max(temps)

    def get_cpu_temperature(self) -> float:
        """Return the CPU package temperature.

        Uses the first zone, in id order, whose type names a CPU sensor.
        Zones whose type cannot be read are skipped. Falls back to the
        hottest zone when nothing matches.
        """
        for zone in range(self.zone_count):
            try:
                zone_type = self.get_zone_type(zone).lower()
            except CpuPowerError:
                continue
            if any(marker in zone_type for marker in CPU_ZONE_MARKERS):
                return self.get_temperature(zone)

        self._logger.debug("No CPU thermal zone found, using hottest zone")
        return self.get_max_temperature()
