"""Centralized logging for cpupm.

Logging must be configured once before use. The CLI does this at startup;
library callers that embed the managers do it themselves.

Usage:
    from cpupm.utils.logger import Logger

    Logger.configure(level="INFO")

    # Get a logger anywhere in the codebase
    log = Logger.get("cpu.manager")
    log.info("Discovered %d cores", 8)
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import TextIO


class LogLevel(Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        """Convert to Python logging level."""
        level: int = getattr(logging, self.value)
        return level


class LoggerNotConfiguredError(Exception):
    """Raised when trying to use Logger before calling Logger.configure()."""

    def __init__(self) -> None:
        super().__init__(
            "Logger not configured. Call Logger.configure() at application startup."
        )


class Logger:
    """Centralized logging for cpupm.

    Every manager pulls a child of the ``cpupm`` logger at construction time,
    so configuration has to happen before a manager is built.

    Example:
        >>> Logger.configure(level="DEBUG")
        >>> log = Logger.get("thermal")
        >>> log.debug("Reading %s", "/sys/class/thermal/thermal_zone0/temp")
    """

    _configured: bool = False
    _root_name: str = "cpupm"

    @classmethod
    def configure(
        cls,
        level: str | LogLevel = "INFO",
        output: str | Path | TextIO | None = None,
        timestamps: bool = True,
    ) -> None:
        """Install the single handler on the ``cpupm`` logger.

        Calling it again replaces the previous handler, which is how tests
        redirect manager logs into a buffer.

        Args:
            level: Level name (``CPUPM_LOG_LEVEL``) or a LogLevel value.
            output: None for stderr, so command output on stdout stays
                clean; a path to append to a file; or any stream.
            timestamps: Prefix each line with the time.
        """
        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())

        for existing_handler in logger.handlers[:]:
            logger.removeHandler(existing_handler)
            existing_handler.close()

        new_handler: logging.Handler
        if output is None:
            new_handler = logging.StreamHandler(sys.stderr)
        elif isinstance(output, str | Path):
            new_handler = logging.FileHandler(str(output))
        elif hasattr(output, "write"):
            new_handler = logging.StreamHandler(output)
        else:
            raise ValueError(f"Invalid output: {type(output)}")

        new_handler.setLevel(level.to_logging_level())

        fmt = "%(levelname)s [%(name)s] %(message)s"
        if timestamps:
            fmt = "%(asctime)s " + fmt
        new_handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(new_handler)
        logger.propagate = False

        cls._configured = True

    @classmethod
    def get(cls, name: str | None = None) -> logging.Logger:
        """Return ``cpupm.<name>``, or the ``cpupm`` logger when name is None.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if name:
            return logging.getLogger(f"{cls._root_name}.{name}")
        return logging.getLogger(cls._root_name)

    @classmethod
    def set_level(cls, level: str | LogLevel) -> None:
        """Change log level without reconfiguring.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())
        for handler in logger.handlers:
            handler.setLevel(level.to_logging_level())

    @classmethod
    def is_configured(cls) -> bool:
        """Check if logger has been configured."""
        return cls._configured
