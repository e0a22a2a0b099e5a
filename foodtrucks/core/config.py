import logging
import os
from dataclasses import dataclass
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from foodtrucks.core.errors import ConfigError

DEFAULT_BASE_URL = "https://data.sfgov.org/resource/bbb8-hzi6.json"
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class FinderConfig:
    base_url: str
    timeout: float
    page_size: int
    timezone: Optional[str]
    log_level: str

    def tzinfo(self) -> Optional[ZoneInfo]:
        if not self.timezone:
            return None
        return ZoneInfo(self.timezone)


def _env_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")
    if value < 1:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


def load_config() -> FinderConfig:
    timezone = os.getenv("FOODTRUCKS_TIMEZONE") or None
    if timezone:
        try:
            ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError):
            raise ConfigError(f"Unknown timezone in FOODTRUCKS_TIMEZONE: {timezone!r}")

    log_level = os.getenv("FOODTRUCKS_LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"Unknown log level in FOODTRUCKS_LOG_LEVEL: {log_level!r}")

    return FinderConfig(
        base_url=os.getenv("FOODTRUCKS_BASE_URL", DEFAULT_BASE_URL),
        timeout=_env_float("FOODTRUCKS_TIMEOUT_SECONDS", "5"),
        page_size=_env_int("FOODTRUCKS_PAGE_SIZE", str(DEFAULT_PAGE_SIZE)),
        timezone=timezone,
        log_level=log_level,
    )
