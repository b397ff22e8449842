"""cpupm utilities - logging and environment helpers."""

from cpupm.utils.env import (
    EnvVarError,
    EnvVarTypeError,
    get_env,
)
from cpupm.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarTypeError",
    "LogLevel",
    # Logger
    "Logger",
    "LoggerNotConfiguredError",
    "get_env",
]
