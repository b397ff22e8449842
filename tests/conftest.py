"""Shared fixtures: fake sysfs trees and logger setup."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

import pytest

from cpupm.utils.logger import Logger

INTEL_CPUINFO = """processor\t: 0
vendor_id\t: GenuineIntel
model name\t: Intel(R) Core(TM) i7-1185G7 @ 3.00GHz
cpu MHz\t\t: 2995.209

processor\t: 1
vendor_id\t: GenuineIntel
model name\t: Intel(R) Core(TM) i7-1185G7 @ 3.00GHz
"""

HW_MIN_KHZ = 800_000
HW_MAX_KHZ = 4_500_000


@pytest.fixture(autouse=True)
def configure_logger():
    """Managers need a configured logger; capture output per test."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)
    return output


def write_file(path: Path, content: str | int) -> None:
    """Create parents and write a sysfs-style value."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"{content}\n")


def build_cpu_root(
    root: Path,
    driver: str = "intel_pstate",
    cores: int = 4,
    governors: tuple[str, ...] = ("performance", "powersave"),
    governor: str = "powersave",
    cur_khz: int = 2_000_000,
    turbo_enabled: bool = True,
) -> Path:
    """Build a fake /sys/devices/system/cpu tree.

    intel_pstate gets ``intel_pstate/no_turbo``; every other driver gets
    ``cpufreq/boost``.
    """
    for n in range(cores):
        freq = root / f"cpu{n}" / "cpufreq"
        write_file(freq / "scaling_driver", driver)
        write_file(freq / "scaling_governor", governor)
        write_file(freq / "scaling_available_governors", " ".join(governors))
        write_file(freq / "scaling_cur_freq", cur_khz + n * 100_000)
        write_file(freq / "scaling_min_freq", HW_MIN_KHZ)
        write_file(freq / "scaling_max_freq", HW_MAX_KHZ)
        write_file(freq / "cpuinfo_min_freq", HW_MIN_KHZ)
        write_file(freq / "cpuinfo_max_freq", HW_MAX_KHZ)

    # Entries that look like cpus but are not cores
    write_file(root / "online", f"0-{cores - 1}")
    (root / "cpuidle").mkdir(exist_ok=True)

    if driver.startswith("intel"):
        write_file(root / "intel_pstate" / "no_turbo", 0 if turbo_enabled else 1)
    else:
        write_file(root / "cpufreq" / "boost", 1 if turbo_enabled else 0)
    return root


def build_zone(
    root: Path,
    number: int,
    zone_type: str | None,
    temp_millic: int | str | None,
    trips: list[tuple[int, str | None]] = (),
) -> Path:
    """Build one fake thermal_zone{number} directory.

    Trip points are written at consecutive indices; a None type leaves the
    type file out.
    """
    zone = root / f"thermal_zone{number}"
    zone.mkdir(parents=True, exist_ok=True)
    if zone_type is not None:
        write_file(zone / "type", zone_type)
    if temp_millic is not None:
        write_file(zone / "temp", temp_millic)
    for index, (trip_temp, trip_type) in enumerate(trips):
        write_file(zone / f"trip_point_{index}_temp", trip_temp)
        if trip_type is not None:
            write_file(zone / f"trip_point_{index}_type", trip_type)
    return zone


def break_file(path: Path) -> None:
    """Replace a control file with a directory so reads and writes fail."""
    path.unlink()
    path.mkdir()


@pytest.fixture
def cpuinfo_path(tmp_path):
    """A /proc/cpuinfo with an Intel model line."""
    path = tmp_path / "cpuinfo"
    path.write_text(INTEL_CPUINFO)
    return path


@pytest.fixture
def cpu_root(tmp_path):
    """Four intel_pstate cores, turbo enabled."""
    return build_cpu_root(tmp_path / "cpu")


@pytest.fixture
def thermal_root(tmp_path):
    """An empty thermal directory for tests to populate."""
    root = tmp_path / "thermal"
    root.mkdir()
    return root


@pytest.fixture
def sysfs_env(monkeypatch, tmp_path, cpu_root, cpuinfo_path, thermal_root):
    """Point every CPUPM_* path at the fake trees."""
    monkeypatch.setenv("CPUPM_CPU_ROOT", str(cpu_root))
    monkeypatch.setenv("CPUPM_CPUINFO_PATH", str(cpuinfo_path))
    monkeypatch.setenv("CPUPM_THERMAL_ROOT", str(thermal_root))
    monkeypatch.setenv("CPUPM_PROFILE_DIR", str(tmp_path / "profiles"))
    return tmp_path
