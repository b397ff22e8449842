"""Profiles shipped with cpupm."""

from cpupm.models.profile_models import Profile

POWER_SAVER = Profile(
    name="power-saver",
    description="Favor the lowest frequencies and disable turbo boost",
    governor="powersave",
    turbo=False,
)

BALANCED = Profile(
    name="balanced",
    description="Scale with load and allow turbo boost",
    governor="schedutil",
    turbo=True,
)

PERFORMANCE = Profile(
    name="performance",
    description="Run at the highest frequencies with turbo boost",
    governor="performance",
    turbo=True,
)

BUILTIN_PROFILES: tuple[Profile, ...] = (POWER_SAVER, BALANCED, PERFORMANCE)
