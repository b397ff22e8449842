"""Environment variable helpers with type coercion.

Usage:
    from cpupm.utils.env import get_env

    level = get_env("CPUPM_LOG_LEVEL", default="INFO")
    root = get_env("CPUPM_CPU_ROOT", default=Path("/sys/devices/system/cpu"),
                   as_type=Path)
"""

from __future__ import annotations

import os
from typing import Any, TypeVar, cast, overload

T = TypeVar("T")


class EnvVarError(Exception):
    """Base exception for environment variable errors."""

    pass


class EnvVarTypeError(EnvVarError):
    """Raised when an environment variable cannot be converted to the expected type."""

    def __init__(self, name: str, value: str, expected_type: type) -> None:
        self.name = name
        self.value = value
        self.expected_type = expected_type
        super().__init__(f"Cannot convert {name}='{value}' to {expected_type.__name__}")


def _coerce_type(name: str, value: str, as_type: type) -> Any:
    """Convert a string value to the specified type.

    Args:
        name: Variable name (for error messages).
        value: String value to convert.
        as_type: Target type. ``bool`` treats "false", "0", "", "no" and
            "off" as False; any other type is called with the raw string.

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    try:
        if as_type is bool:
            return value.lower() not in ("false", "0", "", "no", "off")
        return as_type(value)
    except (ValueError, TypeError) as e:
        raise EnvVarTypeError(name, value, as_type) from e


@overload
def get_env(name: str, *, default: T, as_type: type[T]) -> T:
    ...


@overload
def get_env(name: str, *, default: T) -> T:
    ...


@overload
def get_env(name: str, *, as_type: type[T]) -> T | None:
    ...


@overload
def get_env(name: str) -> str | None:
    ...


def get_env(
    name: str,
    *,
    default: T | None = None,
    as_type: type[T] | None = None,
) -> T | str | None:
    """Get an environment variable with optional type coercion.

    Empty values count as unset, so ``CPUPM_CPU_ROOT=`` falls back to the
    default instead of resolving to the current directory.

    Args:
        name: Environment variable name.
        default: Returned when the variable is unset or empty.
        as_type: Type to convert the value to.

    Returns:
        The converted value, or default.

    Raises:
        EnvVarTypeError: If as_type is specified and conversion fails.
    """
    value = os.environ.get(name)

    if value is None or value == "":
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value

