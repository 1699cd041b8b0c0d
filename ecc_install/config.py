#!/usr/bin/env python3

import os
import json
import tomllib
from pathlib import Path

import logging
import sys

import yaml

from .exit_codes import ConfigError

# Configure logging
_handler = logging.StreamHandler(sys.stderr) # Default to stderr
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s",
    handlers=[_handler]
)
logger = logging.getLogger("ecc_install")

CONFIG_ENV_VAR = 'ECC_INSTALL_CONFIG'
ENV_PREFIX = 'ECC_INSTALL_'


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. ECC_INSTALL_CONFIG environment variable
    2. ~/.ecc-install/config.{json,toml,yaml,yml}
    """
    if CONFIG_ENV_VAR in os.environ:
        path = Path(os.environ[CONFIG_ENV_VAR]).expanduser()
        if path.exists():
            return path

    config_dir = Path.home() / '.ecc-install'
    for filename in ['config.json', 'config.toml', 'config.yaml', 'config.yml']:
        path = config_dir / filename
        if path.exists() and path.stat().st_size > 10:  # Not empty/trivial
            return path

    return config_dir / 'config.json'


def get_default_config():
    """Get default configuration.

    The defaults install from the current directory into ~/.claude with
    rsync, which is what running the installer with no config file does.
    """
    return {
        "general": {
            "destination": "~/.claude",
            "source": "",  # empty = directory the command is run from
        },
        "mirror": {
            "backend": "rsync",  # rsync | copy
            "rsync_binary": "rsync",
        },
        "git": {
            "binary": "git",
        },
        "commit": {
            "message_prefix": "Update from everything-claude-code",
        },
        "logging": {
            "level": "WARNING",
            "format": "%(levelname)s: %(message)s",
        },
    }


def _read_config_file(config_path):
    """Parse a JSON, TOML or YAML config file into a dict."""
    suffix = config_path.suffix.lower()
    if suffix == '.toml':
        with open(config_path, 'rb') as f:
            return tomllib.load(f)
    if suffix in ('.yaml', '.yml'):
        with open(config_path, 'r') as f:
            return yaml.safe_load(f) or {}
    with open(config_path, 'r') as f:
        return json.load(f)


def load_config():
    """Load configuration from file.

    Raises:
        ConfigError: the config file exists but cannot be parsed
    """
    config_path = get_config_path()

    # Start with default config
    config = get_default_config()

    if config_path.exists():
        try:
            file_config = _read_config_file(config_path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            # json and tomllib decode errors are ValueError subclasses
            raise ConfigError(f"Error loading config from {config_path}: {e}") from e

        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")

        logger.debug(f"Loaded config from {config_path}")
        config = merge_configs(config, file_config)

    # Apply environment variable overrides
    config = apply_env_overrides(config)

    return config


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            # Recursively merge nested dictionaries
            merged[key] = merge_configs(merged[key], value)
        else:
            # Override or add new key
            merged[key] = value

    return merged


def _coerce_env_value(env_key, value, current):
    """
    Convert an environment string to the type of the value it replaces.

    Only bool and int settings are converted; everything else stays a
    string, so a numeric path or prefix is never turned into an int.
    """
    if isinstance(current, bool):
        if value.lower() in ('true', 'yes', 'on', '1'):
            return True
        if value.lower() in ('false', 'no', 'off', '0'):
            return False
        raise ConfigError(f"{env_key} must be a boolean, got '{value}'")
    if isinstance(current, int):
        try:
            return int(value)
        except ValueError:
            raise ConfigError(f"{env_key} must be an integer, got '{value}'") from None
    return value


def apply_env_overrides(config):
    """
    Apply environment variable overrides to configuration.
    Environment variables follow the pattern: ECC_INSTALL_SECTION_KEY
    For example: ECC_INSTALL_MIRROR_BACKEND=copy
    """
    for env_key, value in os.environ.items():
        if not env_key.startswith(ENV_PREFIX) or env_key == CONFIG_ENV_VAR:
            continue

        key_parts = env_key[len(ENV_PREFIX):].lower().split('_')

        current_level = config
        i = 0
        while i < len(key_parts):
            # Find the longest key in current_level that is a prefix of the remaining key_parts
            best_match_len = 0
            matched_key = None

            for config_key in current_level.keys():
                config_key_parts = config_key.split('_')
                if key_parts[i : i + len(config_key_parts)] == config_key_parts:
                    if len(config_key_parts) > best_match_len:
                        best_match_len = len(config_key_parts)
                        matched_key = config_key

            if matched_key is None:
                break

            # If we are at the end of the env var, we have found the key to set
            if i + best_match_len == len(key_parts):
                current_level[matched_key] = _coerce_env_value(
                    env_key, value, current_level[matched_key]
                )
                break

            # Otherwise, we descend into the dictionary
            if isinstance(current_level[matched_key], dict):
                current_level = current_level[matched_key]
                i += best_match_len
            else:
                # Path conflict, e.g., env var is longer but we found a non-dict value
                break

    return config


def get_source_root(config):
    """Directory holding the agents/commands/rules/skills sources."""
    source = config.get('general', {}).get('source') or ''
    if not source:
        return Path.cwd()
    return Path(str(source)).expanduser().resolve()


def get_destination_root(config):
    """Directory the categories are installed into (default ~/.claude)."""
    destination = config.get('general', {}).get('destination') or '~/.claude'
    return Path(str(destination)).expanduser()


def setup_logging(config):
    """Apply the configured log level and format to the root handler."""
    log_config = config.get('logging', {})
    level_name = str(log_config.get('level', 'WARNING')).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ConfigError(f"Unknown logging level '{level_name}'")

    root = logging.getLogger()
    root.setLevel(level)
    fmt = log_config.get('format')
    if fmt:
        _handler.setFormatter(logging.Formatter(fmt))
