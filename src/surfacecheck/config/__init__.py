"""
Configuration management for SurfaceCheck.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. Global .env file (~/.surfacecheck/.env)
3. Global config file (~/.surfacecheck/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import (
    get_global_config_dir,
    load_env_file,
    load_global_config,
    load_global_env,
)
from .getters import (
    get_concurrency,
    get_config,
    get_db_path,
    get_hibp_api_key,
    get_shodan_api_key,
    get_user_agent,
)
from .settings import BreachSettings, SurfaceSettings

__all__ = [
    # env_loader
    "get_global_config_dir",
    "load_env_file",
    "load_global_config",
    "load_global_env",
    # getters
    "get_concurrency",
    "get_config",
    "get_db_path",
    "get_hibp_api_key",
    "get_shodan_api_key",
    "get_user_agent",
    # settings
    "BreachSettings",
    "SurfaceSettings",
]
