"""Runtime settings, read from the environment and an optional .env file."""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import dotenv_values, load_dotenv


ENV_PREFIX = "BTC_STATS_"


def _env(name: str, default: Optional[str] = None, file_values: Optional[Dict[str, Optional[str]]] = None) -> Optional[str]:
    key = ENV_PREFIX + name
    value = os.getenv(key)
    if (value is None or value.strip() == "") and file_values:
        value = file_values.get(key)
    if value is None or value.strip() == "":
        return default
    return value.strip()


@dataclass(frozen=True)
class Settings:
    """Holds service endpoints, credentials and engine sizing."""

    coingecko_url: str = "https://api.coingecko.com/api/v3"
    coingecko_api_key: Optional[str] = None
    http_timeout: float = 10.0
    default_days: int = 90
    buffer_size: int = 10000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None) -> "Settings":
        """
        Build settings from BTC_STATS_* variables.

        Values in `env_file` fill in whatever the process environment
        leaves unset; the process environment always wins.
        """
        file_values = dotenv_values(env_file) if env_file else {}
        defaults = cls()
        return cls(
            coingecko_url=_env("COINGECKO_URL", defaults.coingecko_url, file_values).rstrip("/"),
            coingecko_api_key=_env("COINGECKO_API_KEY", None, file_values),
            http_timeout=float(_env("HTTP_TIMEOUT", str(defaults.http_timeout), file_values)),
            default_days=int(_env("DEFAULT_DAYS", str(defaults.default_days), file_values)),
            buffer_size=int(_env("BUFFER_SIZE", str(defaults.buffer_size), file_values)),
            log_level=_env("LOG_LEVEL", defaults.log_level, file_values).upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return process-wide settings, loading ./.env first when present."""

    load_dotenv(Path.cwd() / ".env")
    return Settings.from_env()


__all__ = ["Settings", "get_settings"]
