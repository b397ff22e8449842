"""Pydantic models for thermal zones and trip points."""

from enum import Enum

from pydantic import BaseModel, Field

from cpupm.models.constants import TEMP_CRITICAL_C, TEMP_HOT_C, TEMP_WARM_C


class TripPoint(BaseModel):
    """A configured temperature threshold within a thermal zone."""

    id: int = Field(..., description="Trip point index within the zone", ge=0)
    temp_celsius: float = Field(..., description="Threshold in Celsius")
    trip_type: str = Field(
        ..., description="Kernel trip type (e.g., 'passive', 'critical')"
    )


class ThermalZone(BaseModel):
    """A kernel thermal zone with its current reading."""

    id: int = Field(..., description="Zone index in discovery order", ge=0)
    type_name: str = Field(..., description="Zone label (e.g., 'x86_pkg_temp')")
    temp_celsius: float = Field(..., description="Current temperature in Celsius")
    trip_points: list[TripPoint] = Field(
        default_factory=list, description="Trip points ordered by index"
    )


class TemperatureLevel(str, Enum):
    """Coarse temperature bands used for status display."""

    NORMAL = "normal"  # below 60C
    WARM = "warm"  # 60-75C
    HOT = "hot"  # 75-85C
    CRITICAL = "critical"  # 85C and above


def classify_temperature(temp_celsius: float) -> TemperatureLevel:
    """Map a temperature to its display band.

    Args:
        temp_celsius: Temperature in Celsius.

    Returns:
        The band the temperature falls into. Lower bounds are inclusive.
    """
    if temp_celsius < TEMP_WARM_C:
        return TemperatureLevel.NORMAL
    if temp_celsius < TEMP_HOT_C:
        return TemperatureLevel.WARM
    if temp_celsius < TEMP_CRITICAL_C:
        return TemperatureLevel.HOT
    return TemperatureLevel.CRITICAL
