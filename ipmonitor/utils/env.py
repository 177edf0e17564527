"""Environment variable helpers with type coercion.

Usage:
    from ipmonitor.utils.env import get_env

    interval = get_env("IPMONITOR_POLL_INTERVAL", default=2.0, as_type=float)
"""

from __future__ import annotations

import logging
import os
from typing import Any, TypeVar, cast, overload

T = TypeVar("T")

logger = logging.getLogger(__name__)


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

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    try:
        # "false", "0", "" and friends are False
        if as_type is bool:
            return value.lower() not in ("false", "0", "", "no", "off")
        if as_type is int:
            return int(value)
        if as_type is float:
            return float(value)
        if as_type is str:
            return value
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
        default: Returned when the variable is not set.
        as_type: bool, int, float, str or any callable taking the raw string.

    Returns:
        The value converted to as_type, or default if not set.

    Raises:
        EnvVarTypeError: If as_type is specified and conversion fails.

    Examples:
        >>> get_env("IPMONITOR_SNAP_DISTANCE", default=100, as_type=int)
        100
    """
    value = os.environ.get(name)
    logger.debug("ENV GET %s=%s", name, value)

    if value is None:
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value


def env_is_set(name: str) -> bool:
    """Check if an environment variable is set (not empty)."""
    value = os.environ.get(name)
    return value is not None and value != ""
