"""CPU frequency-scaling backend."""

from cpupm.backends.cpu.driver import DriverProbe, classify_driver
from cpupm.backends.cpu.enumerator import CoreEnumerator, CorePaths
from cpupm.backends.cpu.manager import CpuManager, TurboControl, turbo_control

__all__ = [
    "CoreEnumerator",
    "CorePaths",
    "CpuManager",
    "DriverProbe",
    "TurboControl",
    "classify_driver",
    "turbo_control",
]
