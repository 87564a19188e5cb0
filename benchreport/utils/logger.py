"""Centralized logging for benchreport.

Simple, explicit logging that requires configuration before use. Library
code (renderers, result formats, replay) only emits diagnostics once the
application has configured the logger, so a harness embedding a renderer
gets no log output unless it asks for it.

Usage:
    from benchreport.utils.logger import Logger

    # Configure once at startup (required before Logger.get)
    Logger.configure(level="INFO", output="stderr", timestamps=True)

    # Get a logger anywhere in the codebase
    log = Logger.get("output.text")
    log.info("Rendering run...")

    # Library code that must work unconfigured
    Logger.log_if_configured("replay", LogLevel.DEBUG, "Replaying 3 benchmarks")
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
    """Centralized logging for benchreport.

    Must be configured once before use. Attempting to get a logger before
    configuration raises LoggerNotConfiguredError.

    Example:
        >>> Logger.configure(level="INFO", output="stderr")
        >>> log = Logger.get("replay")
        >>> log.info("Loaded recorded run")
    """

    _configured: bool = False
    _root_name: str = "benchreport"

    @classmethod
    def configure(
        cls,
        level: str | LogLevel = "INFO",
        output: str | Path | TextIO | None = None,
        timestamps: bool = True,
    ) -> None:
        """Configure the package logger. Reconfiguring replaces the handler.

        Args:
            level: Level name (e.g. "DEBUG") or LogLevel.
            output: "stderr" or None for standard error, "stdout", a file
                path, or any writable stream. Reports own stdout, so the CLI
                keeps logs on stderr.
            timestamps: Prefix each record with its time.
        """
        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())

        for existing_handler in logger.handlers[:]:
            logger.removeHandler(existing_handler)
            existing_handler.close()

        new_handler: logging.Handler
        if output is None or output == "stderr":
            new_handler = logging.StreamHandler(sys.stderr)
        elif output == "stdout":
            new_handler = logging.StreamHandler(sys.stdout)
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
        """Get a logger instance.

        Args:
            name: Logger name (appended to "benchreport."). If None, returns
                the package root logger.

        Returns:
            Logger instance.

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

    @classmethod
    def log_if_configured(cls, name: str, level: LogLevel, message: str) -> None:
        """Log a message only when the application configured logging.

        Args:
            name: Logger name (appended to "benchreport.").
            level: Level to log at.
            message: Message text.
        """
        if not cls._configured:
            return
        cls.get(name).log(level.to_logging_level(), message)
