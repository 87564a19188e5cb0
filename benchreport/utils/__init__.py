"""benchreport utilities - shared helper functions and utilities."""

from benchreport.utils.env import (
    LOG_LEVEL_VAR,
    RESULT_FORMAT_VAR,
    VERBOSE_VAR,
    EnvVarError,
    EnvVarTypeError,
    get_env,
)
from benchreport.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarTypeError",
    "LOG_LEVEL_VAR",
    "RESULT_FORMAT_VAR",
    "VERBOSE_VAR",
    "get_env",
    # Logger
    "LogLevel",
    "Logger",
    "LoggerNotConfiguredError",
]
