"""Models for power profiles and the outcome of applying them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from cpupm.errors import CpuPowerError


class Profile(BaseModel):
    """A named power policy.

    ``max_freq`` and ``turbo`` are optional; when unset, applying the profile
    leaves the corresponding hardware state alone.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        pattern=r"^[A-Za-z0-9._-]+$",
        description="Unique profile name, also used as the file stem",
    )
    description: str = Field("", description="Human-readable summary")
    governor: str = Field(..., min_length=1, description="Governor for every core")
    max_freq: int | None = Field(
        None, ge=1, description="Frequency cap in MHz applied to every core"
    )
    turbo: bool | None = Field(None, description="Turbo boost state to set")


class ApplyStep(str, Enum):
    """Steps of a profile application, in execution order."""

    GOVERNOR = "governor"
    MIN_RESET = "min_reset"
    MAX_FREQUENCY = "max_frequency"
    TURBO = "turbo"


@dataclass
class ApplyFailure:
    """One failed sub-step of a profile application.

    Attributes:
        step: Which step failed.
        core: Core the failure belongs to, or None for system-wide steps.
        error: The underlying error.
    """

    step: ApplyStep
    core: int | None
    error: CpuPowerError

    def __str__(self) -> str:
        where = f"core {self.core}" if self.core is not None else "system"
        return f"{self.step.value} ({where}): {self.error}"
