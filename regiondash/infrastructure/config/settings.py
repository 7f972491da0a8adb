"""Provides functions for loading and accessing configuration settings.

Supports loading from a YAML configuration file (~/.regiondash/config.yaml),
a .env file, and environment variables prefixed with REGIONDASH_.
"""

import logging
import math
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# --- Configuration Constants ---
DEFAULT_CONFIG_DIR = Path.home() / ".regiondash"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"
ENV_FILE_NAME = ".env"
ENV_PREFIX = "REGIONDASH_"

DEFAULT_API_BASE_URL = "http://localhost:9191/api"
DEFAULT_CACHE_TTL_SECONDS = 5 * 60
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0

# --- Global Configuration Store (Simple Approach) ---
_config: Dict[str, Any] = {}
_test_config: Dict[str, Any] = {}
_loaded = False

def load_configuration(config_file: Path = DEFAULT_CONFIG_FILE, env_file: Optional[Path] = None) -> None:
    """Loads configuration from a YAML file and a .env file.

    Priority order (highest to lowest):
    1. Test overrides (set_config_for_testing)
    2. Environment Variables
    3. .env file (never overrides variables already set)
    4. YAML configuration file
    5. Defaults passed to get_config

    Args:
        config_file: Path to the YAML configuration file.
        env_file: Path to the .env file (searches upwards from cwd if None).
    """
    global _config, _loaded
    if _loaded:
        logger.debug("Configuration already loaded.")
        return

    _config = {}

    if config_file.exists():
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                yaml_config = yaml.safe_load(f)
            if isinstance(yaml_config, dict):
                _config.update(_flatten(yaml_config))
                logger.info(f"Loaded configuration from YAML: {config_file}")
            elif yaml_config is not None:
                logger.warning(f"YAML config file {config_file} did not contain a dictionary.")
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load or parse YAML config {config_file}: {e}")
    else:
        logger.debug(f"YAML config file not found: {config_file}")

    dotenv_path = env_file or find_dotenv_path()
    if dotenv_path:
        if load_dotenv(dotenv_path=dotenv_path, override=False):
            logger.info(f"Loaded environment variables from: {dotenv_path}")
    else:
        logger.debug("No .env file found at or above current directory.")

    _loaded = True
    logger.info("Configuration loading process completed.")

def _flatten(data: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Turns nested YAML sections into dotted keys ('cache': {'ttl_seconds': 1} -> 'cache.ttl_seconds')."""
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, prefix=f"{dotted}."))
        else:
            flat[dotted] = value
    return flat

def env_var_name(key: str) -> str:
    """Environment variable consulted for a dotted key ('api.base_url' -> 'REGIONDASH_API_BASE_URL')."""
    return ENV_PREFIX + key.upper().replace('.', '_')

def _coerce(value: str) -> Any:
    if value.lower() == 'true':
        return True
    if value.lower() == 'false':
        return False
    try:
        return float(value) if '.' in value else int(value)
    except ValueError:
        return value

def get_config(key: str, default: Any = None) -> Any:
    """
    Get a configuration value by dotted key.

    Args:
        key: The configuration key (e.g. 'cache.ttl_seconds')
        default: Default value if the key is not found

    Returns:
        The configuration value
    """
    if key in _test_config:
        return _test_config[key]

    env_key = env_var_name(key)
    if env_key in os.environ:
        return _coerce(os.environ[env_key])

    if key in _config:
        return _config[key]

    logger.debug(f"Config key '{key}' not found in environment or loaded config. Returning default: {default}")
    return default

def find_dotenv_path() -> Optional[Path]:
    """Searches for the .env file upwards from the current directory."""
    cwd = Path.cwd()
    for path in [cwd] + list(cwd.parents):
        env_path = path / ENV_FILE_NAME
        if env_path.is_file():
            return env_path
    return None

# --- Convenience Functions ---

def get_api_base_url() -> str:
    """Root URL of the manager statistics API."""
    return str(get_config('api.base_url', DEFAULT_API_BASE_URL))

def get_request_timeout_seconds() -> float:
    timeout = get_config('api.timeout_seconds', DEFAULT_REQUEST_TIMEOUT_SECONDS)
    try:
        return float(timeout)
    except (TypeError, ValueError):
        logger.warning(f"Invalid api.timeout_seconds '{timeout}'. Using {DEFAULT_REQUEST_TIMEOUT_SECONDS}.")
        return DEFAULT_REQUEST_TIMEOUT_SECONDS

def get_cache_ttl_seconds() -> float:
    """Time-to-live shared by every cached manager list and manager entry."""
    ttl = get_config('cache.ttl_seconds', DEFAULT_CACHE_TTL_SECONDS)
    try:
        ttl = float(ttl)
    except (TypeError, ValueError):
        logger.warning(f"Invalid cache.ttl_seconds '{ttl}'. Using {DEFAULT_CACHE_TTL_SECONDS}.")
        return DEFAULT_CACHE_TTL_SECONDS
    if not math.isfinite(ttl) or ttl < 0:
        logger.warning(f"Invalid cache.ttl_seconds {ttl}. Using {DEFAULT_CACHE_TTL_SECONDS}.")
        return DEFAULT_CACHE_TTL_SECONDS
    return ttl

def set_config_for_testing(config_dict: Dict[str, Any]) -> None:
    """
    Set configuration values for testing purposes.
    These values will override any existing configuration.

    Args:
        config_dict: Dictionary of configuration values to set
    """
    _test_config.update(config_dict)
    logger.debug(f"Set testing configuration: {config_dict}")

def clear_test_config() -> None:
    """Clear all testing configuration values."""
    _test_config.clear()
    logger.debug("Cleared testing configuration")
