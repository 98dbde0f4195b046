"""Configuration loading for clockiReport.

Values are read from an env file (``clockireport.env`` by default, see
``clockireport.env.example``). Variables already set in the process
environment take precedence over the file.
"""
import os
from typing import NamedTuple, Optional, Dict

from dotenv import dotenv_values

DEFAULT_ENV_FILE = "clockireport.env"
DEFAULT_BASE_URL = "https://api.clockify.me/api/v1"
DEFAULT_TIMEOUT = 60


class ConfigError(Exception):
    """Raised when the configuration is missing or invalid."""


class Config(NamedTuple):
    """Settings for one run, built once at startup."""
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    workspace_name: str = ""
    timeout: float = DEFAULT_TIMEOUT


def _lookup(values: Dict[str, Optional[str]], key: str, default: str = "") -> str:
    return os.environ.get(key) or values.get(key) or default


def load_config(env_file: str = DEFAULT_ENV_FILE) -> Config:
    """Load the configuration from an env file.

    Args:
        env_file: Path to the env file

    Returns:
        Config for this run

    Raises:
        ConfigError: If the file does not exist, CLOCKIFY_API_KEY is unset or
            CLOCKIFY_TIMEOUT is not a positive number
    """
    if not os.path.exists(env_file):
        raise ConfigError(f"Missing environment file: {env_file} (see clockireport.env.example)")
    values = dotenv_values(env_file)

    api_key = _lookup(values, "CLOCKIFY_API_KEY")
    if not api_key:
        raise ConfigError(f"Set CLOCKIFY_API_KEY in your environment or {env_file}.")

    raw_timeout = _lookup(values, "CLOCKIFY_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ConfigError(f"CLOCKIFY_TIMEOUT must be a number of seconds, got {raw_timeout!r}")
    if timeout <= 0:
        raise ConfigError(f"CLOCKIFY_TIMEOUT must be positive, got {raw_timeout!r}")

    return Config(
        api_key=api_key,
        base_url=_lookup(values, "CLOCKIFY_URL_BASE_ENDPOINT", DEFAULT_BASE_URL),
        workspace_name=_lookup(values, "WORKSPACE_NAME"),
        timeout=timeout,
    )
