"""Environment variable and configuration file loading."""

from pathlib import Path
from typing import Any

import yaml


def get_global_config_dir() -> Path:
    """Return the global ~/.surfacecheck configuration directory."""
    return Path.home() / ".surfacecheck"


def load_env_file(env_path: Path) -> dict[str, str]:
    """Load environment variables from .env file."""
    env_vars = {}
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    # Remove quotes if present
                    value = value.strip().strip("\"'")
                    env_vars[key.strip()] = value
    return env_vars


def load_global_env() -> dict[str, str]:
    """Load ~/.surfacecheck/.env."""
    return load_env_file(get_global_config_dir() / ".env")


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.surfacecheck/config.yml."""
    config_path = get_global_config_dir() / "config.yml"
    if config_path.exists():
        with open(config_path) as f:
            return yaml.safe_load(f) or {}
    return {}
