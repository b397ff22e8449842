"""Pydantic models for CPU frequency-scaling state."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DriverFamily(str, Enum):
    """Known families of kernel scaling drivers."""

    INTEL_PSTATE = "intel_pstate"
    ACPI_CPUFREQ = "acpi-cpufreq"
    AMD_PSTATE = "amd-pstate"
    UNKNOWN = "unknown"


class Driver(BaseModel):
    """Scaling driver detected for the system.

    ``raw`` keeps the identifier exactly as the kernel reported it, which is
    the only useful information when the family is UNKNOWN.
    """

    model_config = ConfigDict(frozen=True)

    family: DriverFamily = Field(..., description="Classified driver family")
    raw: str = Field("", description="Identifier read from scaling_driver")

    @property
    def supports_turbo(self) -> bool:
        """Whether turbo control has a known encoding for this driver."""
        return self.family is not DriverFamily.UNKNOWN

    def __str__(self) -> str:
        if self.family is DriverFamily.UNKNOWN:
            return f"unknown ({self.raw})" if self.raw else "unknown"
        return self.raw or self.family.value


class CpuInfo(BaseModel):
    """Static CPU facts. Frequencies are hardware limits in MHz."""

    model: str = Field(..., description="CPU model name")
    core_count: int = Field(..., description="Number of logical cores", ge=1)
    driver: Driver = Field(..., description="Detected scaling driver")
    min_freq: int = Field(..., description="Hardware minimum frequency in MHz", ge=0)
    max_freq: int = Field(..., description="Hardware maximum frequency in MHz", ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> "CpuInfo":
        if self.min_freq > self.max_freq:
            raise ValueError(
                f"min_freq ({self.min_freq}) exceeds max_freq ({self.max_freq})"
            )
        return self


class CoreStatus(BaseModel):
    """Point-in-time state of one core."""

    core_id: int = Field(..., description="Core index", ge=0)
    current_freq: int = Field(..., description="Current frequency in MHz", ge=0)
    governor: str = Field(..., description="Active scaling governor")
