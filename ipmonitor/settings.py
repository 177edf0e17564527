"""Runtime settings resolved from environment variables.

Variables:
    IPMONITOR_LOG_LEVEL      log level for the CLI (default INFO)
    IPMONITOR_POLL_INTERVAL  seconds between change polls (default 2.0)
    IPMONITOR_SNAP_DISTANCE  snap threshold in pixels (default 100)
"""

from __future__ import annotations

from dataclasses import dataclass

from ipmonitor.monitoring import DEFAULT_INTERVAL_SECONDS
from ipmonitor.snapping import SNAP_DISTANCE
from ipmonitor.utils.env import EnvVarError, get_env
from ipmonitor.utils.logger import LogLevel

ENV_PREFIX = "IPMONITOR_"


class InvalidSettingError(EnvVarError):
    """Raised when an environment variable parses but holds an unusable value."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name}='{value}': {reason}")


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    poll_interval: float = DEFAULT_INTERVAL_SECONDS
    snap_distance: int = SNAP_DISTANCE


def load_settings() -> Settings:
    """Read settings from the environment, falling back to defaults.

    Raises:
        EnvVarTypeError: If a numeric variable does not parse.
        InvalidSettingError: If a value parses but is out of range.
    """
    log_level = get_env(f"{ENV_PREFIX}LOG_LEVEL", default="INFO")
    poll_interval = get_env(
        f"{ENV_PREFIX}POLL_INTERVAL", default=DEFAULT_INTERVAL_SECONDS, as_type=float
    )
    snap_distance = get_env(
        f"{ENV_PREFIX}SNAP_DISTANCE", default=SNAP_DISTANCE, as_type=int
    )

    try:
        LogLevel(log_level.upper())
    except ValueError as e:
        raise InvalidSettingError(
            f"{ENV_PREFIX}LOG_LEVEL",
            log_level,
            f"expected one of {', '.join(level.value for level in LogLevel)}",
        ) from e
    if poll_interval <= 0:
        raise InvalidSettingError(
            f"{ENV_PREFIX}POLL_INTERVAL", poll_interval, "must be greater than zero"
        )
    if snap_distance < 0:
        raise InvalidSettingError(
            f"{ENV_PREFIX}SNAP_DISTANCE", snap_distance, "must not be negative"
        )

    return Settings(
        log_level=log_level,
        poll_interval=poll_interval,
        snap_distance=snap_distance,
    )
