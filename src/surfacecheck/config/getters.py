"""Configuration getter functions."""

import os
from pathlib import Path
from typing import Any

from .env_loader import get_global_config_dir, load_global_config, load_global_env


def get_config(key: str, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Global .env file
    3. Global config file
    4. Default value
    """
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    env_file = load_global_env()
    if env_file.get(key):
        return env_file[key]

    global_config = load_global_config()
    if key in global_config and global_config[key] is not None:
        return global_config[key]

    return default


def get_hibp_api_key() -> str | None:
    """Get the Have I Been Pwned API key."""
    return get_config("HIBP_API_KEY")


def get_shodan_api_key() -> str | None:
    """Get the Shodan API key (enrichment is skipped without one)."""
    return get_config("SHODAN_API_KEY")


def get_db_path() -> Path:
    """Get the SQLite database path for the account store."""
    value = get_config("SURFACECHECK_DB")
    if value:
        return Path(str(value)).expanduser()
    return get_global_config_dir() / "surfacecheck.db"


def get_concurrency() -> int:
    """Get the probe worker pool size (1 = sequential)."""
    value = get_config("SURFACECHECK_CONCURRENCY", default=1)
    try:
        return max(1, int(value))
    except (TypeError, ValueError):
        return 1


def get_user_agent() -> str | None:
    """Get an override for the probe User-Agent header."""
    return get_config("SURFACECHECK_USER_AGENT")
