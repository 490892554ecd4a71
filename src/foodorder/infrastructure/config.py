"""Runtime configuration.

Values come from the environment, after a local ``.env`` file (if any)
has been loaded into it. Command line options override both.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3333"
DEFAULT_TIMEOUT = 10.0

API_URL_ENV = "FOODORDER_API_URL"
TIMEOUT_ENV = "FOODORDER_TIMEOUT"


class ConfigurationError(Exception):
    """Raised when configuration is invalid."""


@dataclass(frozen=True)
class Settings:

    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT


def load_environment(env_file: Path = Path(".env")) -> None:
    """Load *env_file* into os.environ without overriding what is set."""
    if env_file.exists():
        load_dotenv(env_file)
        logger.debug("Loaded environment from %s", env_file)


def load_settings(
    api_url: str | None = None,
    timeout: float | None = None,
) -> Settings:
    load_environment()

    url = (api_url or os.getenv(API_URL_ENV) or DEFAULT_API_URL).strip()
    if not url.startswith(("http://", "https://")):
        raise ConfigurationError(f"API URL must be http(s), got {url!r}")

    if timeout is None:
        raw_timeout = os.getenv(TIMEOUT_ENV)
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError as exc:
            raise ConfigurationError(f"{TIMEOUT_ENV} must be a number, got {raw_timeout!r}") from exc
    if timeout <= 0:
        raise ConfigurationError(f"Timeout must be positive, got {timeout}")

    return Settings(api_url=url.rstrip("/"), timeout=timeout)
