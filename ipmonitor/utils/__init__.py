"""ipmonitor utilities - logging and environment helpers."""

from ipmonitor.utils.env import (
    EnvVarError,
    EnvVarTypeError,
    env_is_set,
    get_env,
)
from ipmonitor.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarTypeError",
    "env_is_set",
    "get_env",
    # Logger
    "LogLevel",
    "Logger",
    "LoggerNotConfiguredError",
]
