"""Power profiles - built-ins, registry and file storage."""

from cpupm.profiles.builtin import BUILTIN_PROFILES
from cpupm.profiles.manager import ProfileManager
from cpupm.profiles.store import ProfileStore

__all__ = ["BUILTIN_PROFILES", "ProfileManager", "ProfileStore"]
