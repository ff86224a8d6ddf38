"""Environment loading and validation for the EvalDSL action."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import httpx
from dotenv import dotenv_values

from evaldsl.config.model import ActionConfig
from evaldsl.constants.config import (
    DEFAULT_TIMEOUT_SECONDS,
    DEVELOPMENT_MODE,
    DOTENV_FILENAME,
    ENV_MODE,
    ENV_TIMEOUT,
    ENV_TOKEN,
    ENV_URL,
)
from evaldsl.exceptions import ConfigError

logger = logging.getLogger(__name__)


def merge_dotenv(env: Mapping[str, str], env_file: Path | None = None) -> dict[str, str]:
    """Overlay ``env`` on top of values from a ``.env`` file.

    The file is read when ``env_file`` is given or when ``EVALDSL_ENV`` is
    ``development``. Variables already present in ``env`` always win.
    """
    merged = dict(env)
    if env_file is None:
        if merged.get(ENV_MODE) != DEVELOPMENT_MODE:
            return merged
        env_file = Path(DOTENV_FILENAME)
    elif not env_file.is_file():
        raise ConfigError(f"Env file not found: {env_file}")

    file_values = {key: value for key, value in dotenv_values(env_file).items() if value is not None}
    logger.debug("Loaded %d variable(s) from %s", len(file_values), env_file)
    return {**file_values, **merged}


def load_config(env: Mapping[str, str]) -> ActionConfig:
    """Build server settings from ``CDRO_URL``, ``CDRO_TOKEN`` and ``CDRO_TIMEOUT``."""
    url = env.get(ENV_URL, "").strip()
    if not url:
        raise ConfigError(f"{ENV_URL} is not defined")

    token = env.get(ENV_TOKEN, "").strip()
    if not token:
        raise ConfigError(f"{ENV_TOKEN} is not defined")

    return ActionConfig(url=_validate_url(url), token=token, timeout=_parse_timeout(env.get(ENV_TIMEOUT)))


def _validate_url(raw: str) -> str:
    """Return the base URL without a trailing slash; it must be absolute http(s)."""
    if any(char.isspace() for char in raw):
        raise ConfigError(f"{ENV_URL} is not a valid URL: {raw!r} (contains whitespace)")
    try:
        parsed = httpx.URL(raw)
    except httpx.InvalidURL as exc:
        raise ConfigError(f"{ENV_URL} is not a valid URL: {raw!r} ({exc})") from exc
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ConfigError(f"{ENV_URL} is not a valid URL: {raw!r} (expected http:// or https:// with a host)")
    return raw.rstrip("/")


def _parse_timeout(raw: str | None) -> float:
    """Parse a positive timeout in seconds, defaulting when unset."""
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{ENV_TIMEOUT} must be a number of seconds, got {raw!r}") from exc
    if timeout <= 0:
        raise ConfigError(f"{ENV_TIMEOUT} must be positive, got {raw!r}")
    return timeout
