"""
Configuration module for the OSRM client.

Defaults live in config.yaml next to this file; environment variables
(optionally loaded from a .env file) override them. Every value can also be
overridden per client instance when constructing OSRMClient.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Any

import yaml


class ConfigurationError(Exception):
    """Raised when configuration is missing or malformed."""
    pass


# Load YAML config once at module level
_CONFIG_PATH = Path(__file__).parent / "config.yaml"
_YAML_CONFIG: dict = {}


def _load_yaml_config() -> dict:
    """Load configuration from config.yaml file."""
    global _YAML_CONFIG
    if not _YAML_CONFIG:
        if _CONFIG_PATH.exists():
            with open(_CONFIG_PATH, "r") as f:
                _YAML_CONFIG = yaml.safe_load(f) or {}
        else:
            raise ConfigurationError(f"Configuration file not found: {_CONFIG_PATH}")
    return _YAML_CONFIG


def get_yaml_setting(*keys: str, default: Any = None) -> Any:
    """
    Get a setting from config.yaml by walking nested keys.

    Example: get_yaml_setting("osrm", "version") -> "v1"
    """
    config = _load_yaml_config()
    value = config
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value


def get_optional_env(key: str) -> Optional[str]:
    """Get an optional environment variable. Returns None if not set."""
    value = os.environ.get(key)
    if value is None or value.strip() == "":
        return None
    return value.strip()


# Process-wide defaults
DEFAULT_BASE_URL: str = get_yaml_setting("osrm", "base_url", default="http://router.project-osrm.org")
DEFAULT_VERSION: str = get_yaml_setting("osrm", "version", default="v1")
DEFAULT_TIMEOUT: float = float(get_yaml_setting("osrm", "timeout_seconds", default=30.0))


@dataclass(frozen=True)
class Config:
    """Client configuration - immutable after creation."""

    base_url: str = DEFAULT_BASE_URL
    version: str = DEFAULT_VERSION
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables, falling back to config.yaml."""
        base_url = get_optional_env("OSRM_BASE_URL") or DEFAULT_BASE_URL
        version = get_optional_env("OSRM_VERSION") or DEFAULT_VERSION

        timeout_str = get_optional_env("OSRM_TIMEOUT")
        if timeout_str is None:
            timeout = DEFAULT_TIMEOUT
        else:
            try:
                timeout = float(timeout_str)
            except ValueError:
                raise ConfigurationError(
                    f"OSRM_TIMEOUT must be a number of seconds, got {timeout_str!r}"
                )
            if timeout <= 0:
                raise ConfigurationError(f"OSRM_TIMEOUT must be positive, got {timeout}")

        return cls(
            base_url=base_url.rstrip("/"),
            version=version,
            timeout=timeout,
        )


def load_config() -> Config:
    """Load configuration, reading a .env file first if present."""
    from dotenv import load_dotenv

    load_dotenv()

    return Config.from_env()
