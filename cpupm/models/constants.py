"""Constants for cpupm models, backends and commands."""

from pathlib import Path

# Kernel interface roots
DEFAULT_CPU_ROOT = Path("/sys/devices/system/cpu")
DEFAULT_THERMAL_ROOT = Path("/sys/class/thermal")
DEFAULT_CPUINFO_PATH = Path("/proc/cpuinfo")
DEFAULT_PROFILE_DIR = Path.home() / ".config" / "cpupm" / "profiles"

# Turbo controls, relative to the cpu root
INTEL_NO_TURBO = Path("intel_pstate") / "no_turbo"
CPUFREQ_BOOST = Path("cpufreq") / "boost"

# Sysfs reports frequencies in kHz
KHZ_PER_MHZ = 1000
MILLIDEGREES_PER_DEGREE = 1000.0

# Trip points whose type file cannot be read
UNKNOWN_TRIP_TYPE = "unknown"

# Zone type substrings that identify a CPU package sensor (lower case)
CPU_ZONE_MARKERS = ("x86_pkg_temp", "cpu", "core", "k10temp")

# /proc/cpuinfo keys carrying the model string, in order of preference
CPUINFO_MODEL_KEYS = ("model name", "Hardware", "cpu model", "Processor")

# Temperature bands (upper bounds, Celsius)
TEMP_WARM_C = 60.0
TEMP_HOT_C = 75.0
TEMP_CRITICAL_C = 85.0

# Environment variables
ENV_CPU_ROOT = "CPUPM_CPU_ROOT"
ENV_THERMAL_ROOT = "CPUPM_THERMAL_ROOT"
ENV_CPUINFO_PATH = "CPUPM_CPUINFO_PATH"
ENV_PROFILE_DIR = "CPUPM_PROFILE_DIR"
ENV_LOG_LEVEL = "CPUPM_LOG_LEVEL"
