"""Read and write helpers for kernel control files.

Every sysfs access in cpupm goes through these functions so that failures
always carry the offending path. Nothing here retries or substitutes a default.
"""

from __future__ import annotations

import os
from pathlib import Path

from cpupm.errors import ControlFileError, ControlFileParseError


def _open_existing(path: str | Path, flags: int) -> int:
    # Control files are created by the kernel; a missing one means absent
    # hardware, never something to create.
    return os.open(path, flags & ~os.O_CREAT)


def read_text(path: Path) -> str:
    """Read a control file and strip surrounding whitespace.

    Raises:
        ControlFileError: If the file is missing or unreadable.
        ControlFileParseError: If the content is not valid UTF-8.
    """
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise ControlFileError(path, e.strerror or str(e)) from e

    try:
        return raw.decode("utf-8").strip()
    except UnicodeDecodeError as e:
        raise ControlFileParseError(path, repr(raw)) from e


def read_int(path: Path) -> int:
    """Read a control file holding a single integer.

    Raises:
        ControlFileError: If the file is missing or unreadable.
        ControlFileParseError: If the content is not an integer.
    """
    raw = read_text(path)
    try:
        return int(raw)
    except ValueError as e:
        raise ControlFileParseError(path, raw) from e


def read_list(path: Path) -> list[str]:
    """Read a whitespace-separated list, keeping the kernel's order."""
    return read_text(path).split()


def write_value(path: Path, value: str | int) -> None:
    """Write a value to an existing control file.

    Raises:
        ControlFileError: If the file does not exist, cannot be opened, or
            the kernel rejects the value.
    """
    try:
        with open(path, "w", opener=_open_existing) as f:
            f.write(str(value))
    except OSError as e:
        raise ControlFileError(path, e.strerror or str(e)) from e
