"""Models for CPU, thermal and profile state."""

from cpupm.models.cpu_models import (
    CoreStatus,
    CpuInfo,
    Driver,
    DriverFamily,
)
from cpupm.models.profile_models import (
    ApplyFailure,
    ApplyStep,
    Profile,
)
from cpupm.models.thermal_models import (
    TemperatureLevel,
    ThermalZone,
    TripPoint,
    classify_temperature,
)

__all__ = [
    "CoreStatus",
    "CpuInfo",
    "Driver",
    "DriverFamily",
    # Profile models
    "ApplyFailure",
    "ApplyStep",
    "Profile",
    # Thermal models
    "TemperatureLevel",
    "ThermalZone",
    "TripPoint",
    "classify_temperature",
]
