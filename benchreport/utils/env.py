"""Environment variable helpers with type coercion.

Usage:
    from benchreport.utils.env import get_env

    level = get_env("BENCHREPORT_LOG_LEVEL", default="INFO")
    verbose = get_env("BENCHREPORT_VERBOSE", default=VerboseMode.NORMAL,
                      as_type=VerboseMode)
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Any, TypeVar, cast, overload

T = TypeVar("T")

LOG_LEVEL_VAR = "BENCHREPORT_LOG_LEVEL"
VERBOSE_VAR = "BENCHREPORT_VERBOSE"
RESULT_FORMAT_VAR = "BENCHREPORT_RESULT_FORMAT"


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

    Enum types are matched case-insensitively against member values, then
    member names.

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    try:
        if as_type is bool:
            return value.lower() not in ("false", "0", "", "no", "off")
        if isinstance(as_type, type) and issubclass(as_type, Enum):
            lowered = value.strip().lower()
            for member in as_type:
                if str(member.value).lower() == lowered:
                    return member
            return as_type[value.strip().upper()]
        if as_type is int:
            return int(value)
        if as_type is float:
            return float(value)
        if as_type is str:
            return value
        return as_type(value)

    except (ValueError, TypeError, KeyError) as e:
        raise EnvVarTypeError(name, value, as_type) from e


@overload
def get_env(name: str, *, default: T, as_type: type[T]) -> T:
    ...


@overload
def get_env(name: str, *, default: T) -> T:
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

    Args:
        name: Environment variable name.
        default: Returned when the variable is unset or empty.
        as_type: Type to convert the value to (bool, int, float, str, or an
            Enum subclass).

    Returns:
        The converted value, or default if not set.

    Raises:
        EnvVarTypeError: If as_type is specified and conversion fails.
    """
    value = os.environ.get(name)

    if value is None or value == "":
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value

