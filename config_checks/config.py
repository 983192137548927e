"""
Configuration loading.

Configuration is a YAML mapping with two optional sections:

    logging:
      level: INFO
      file: config_checks.log
    profiles:
      tsig_key: [key, algorithm, secret, "{", "}", ";"]

Profiles are named pattern sets for the file requirement check. User
profiles are merged over the built-in ones.
"""

import copy
import logging
from typing import Dict, List

import yaml

logger = logging.getLogger(__name__)

DEFAULT_PROFILES = {
    "tsig_key": ["key", "algorithm", "secret", "{", "}", ";"],
    "acl": ["acl", "{", "}", ";"],
}


class ConfigError(ValueError):
    """Raised when configuration is malformed or a profile is unknown."""


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "logging": {"level": "INFO"},
        "profiles": copy.deepcopy(DEFAULT_PROFILES),
    }


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    try:
        with open(config_path, "r") as f:
            user_config = yaml.safe_load(f)
        logger.info(f"Configuration loaded from {config_path}")
    except FileNotFoundError:
        logger.warning(f"Config file {config_path} not found, using defaults")
        return get_default_config()
    except yaml.YAMLError as e:
        logger.error(f"Error parsing config file: {e}")
        raise ConfigError(f"Error parsing config file {config_path}: {e}") from e

    return merge_config(user_config or {})


def merge_config(user_config: Dict) -> Dict:
    """Merge a user configuration mapping over the defaults."""
    if not isinstance(user_config, dict):
        raise ConfigError("Configuration must be a mapping")

    config = get_default_config()

    logging_config = user_config.get("logging") or {}
    if not isinstance(logging_config, dict):
        raise ConfigError("'logging' must be a mapping")
    config["logging"].update(logging_config)

    profiles = user_config.get("profiles") or {}
    if not isinstance(profiles, dict):
        raise ConfigError("'profiles' must be a mapping")
    for name, patterns in profiles.items():
        config["profiles"][name] = _validate_profile(name, patterns)

    return config


def get_profile(config: Dict, name: str) -> List[str]:
    """
    Look up a named pattern set.

    Args:
        config: Configuration as returned by load_config
        name: Profile name

    Returns:
        The profile's patterns

    Raises:
        ConfigError: If the profile is not defined
    """
    profiles = config.get("profiles") or {}
    if name not in profiles:
        raise ConfigError(f"Unknown profile: {name}")

    return list(profiles[name])


def _validate_profile(name, patterns) -> List[str]:
    if not isinstance(patterns, list) or not all(
        isinstance(pattern, str) for pattern in patterns
    ):
        raise ConfigError(f"Profile '{name}' must be a list of strings")

    return patterns
