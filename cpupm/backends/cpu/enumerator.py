"""Logical core discovery under the cpu sysfs root."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from cpupm.errors import ManagerInitError
from cpupm.utils.logger import Logger

CPU_DIR_PATTERN = re.compile(r"^cpu(\d+)$")


@dataclass(frozen=True)
class CorePaths:
    """Control file locations for one logical core.

    Attributes:
        core_id: Index used by the public API, contiguous from 0.
        cpu_number: Kernel cpu number (the N in ``cpu{N}``). Differs from
            core_id when some cpus expose no cpufreq directory.
        cpufreq_dir: Path to ``cpu{N}/cpufreq``.
    """

    core_id: int
    cpu_number: int
    cpufreq_dir: Path

    @property
    def scaling_governor(self) -> Path:
        return self.cpufreq_dir / "scaling_governor"

    @property
    def scaling_available_governors(self) -> Path:
        return self.cpufreq_dir / "scaling_available_governors"

    @property
    def scaling_cur_freq(self) -> Path:
        return self.cpufreq_dir / "scaling_cur_freq"

    @property
    def scaling_min_freq(self) -> Path:
        return self.cpufreq_dir / "scaling_min_freq"

    @property
    def scaling_max_freq(self) -> Path:
        return self.cpufreq_dir / "scaling_max_freq"

    @property
    def cpuinfo_min_freq(self) -> Path:
        return self.cpufreq_dir / "cpuinfo_min_freq"

    @property
    def cpuinfo_max_freq(self) -> Path:
        return self.cpufreq_dir / "cpuinfo_max_freq"


class CoreEnumerator:
    """Finds every ``cpu{N}`` directory that exposes a cpufreq interface."""

    def __init__(self, cpu_root: Path) -> None:
        self._cpu_root = cpu_root
        self._logger = Logger.get("cpu.enumerator")

    def discover(self) -> list[CorePaths]:
        """Enumerate cores in kernel cpu-number order.

        Returns:
            One CorePaths per core, with core ids assigned 0..n-1.

        Raises:
            ManagerInitError: If the root cannot be listed or no core exposes
                cpufreq.
        """
        try:
            entries = list(self._cpu_root.iterdir())
        except OSError as e:
            raise ManagerInitError(
                f"Cannot read cpu directory {self._cpu_root}: {e}"
            ) from e

        numbers: list[int] = []
        for entry in entries:
            match = CPU_DIR_PATTERN.match(entry.name)
            if match is None:
                continue
            if not (entry / "cpufreq").is_dir():
                self._logger.debug("Skipping %s: no cpufreq interface", entry.name)
                continue
            numbers.append(int(match.group(1)))

        if not numbers:
            raise ManagerInitError(
                f"No cores with a cpufreq interface under {self._cpu_root}"
            )

        cores = [
            CorePaths(
                core_id=core_id,
                cpu_number=number,
                cpufreq_dir=self._cpu_root / f"cpu{number}" / "cpufreq",
            )
            for core_id, number in enumerate(sorted(numbers))
        ]
        self._logger.info("Discovered %d cores", len(cores))
        return cores
