"""Manages configuration for pyuserval.

This module is responsible for loading, managing, and saving the application's
configuration settings. It aggregates settings from default values, TOML files,
and environment variables, providing a unified interface for accessing them.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Dict, Any, Optional

try:
    import tomllib  # Available in Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for Python versions < 3.11

import tomli_w

from .settings import DEFAULT_SETTINGS

logger = logging.getLogger(__name__)

# The default path for the user-specific global configuration file.
USER_CONFIG_PATH = Path.home() / ".config" / "userval" / "config.toml"

# The project-level configuration file, looked up in the working directory.
PROJECT_CONFIG_NAME = "userval.toml"

# Maps dot-separated config keys onto `ValidatorSettings` field names.
SETTINGS_KEYS = {
    "email.pattern": "email_pattern",
    "username.pattern": "username_pattern",
    "username.min_length": "username_min_length",
    "username.max_length": "username_max_length",
    "password.pattern": "password_pattern",
    "password.min_length": "password_min_length",
    "password.max_length": "password_max_length",
}

_BOOL_KEYS = ("colors",)
_INT_KEYS = ("min_length", "max_length")


class Config:
    """Handles the configuration for the pyuserval application.

    This class loads configuration from multiple sources with a defined
    precedence:
    1.  Default values (lowest precedence).
    2.  Project-specific `userval.toml` file.
    3.  User-level `~/.config/userval/config.toml` file.
    4.  A custom configuration file specified at runtime (replaces 2 and 3).
    5.  Environment variables (highest precedence).

    Attributes:
        DEFAULT_CONFIG (Dict[str, Any]): A dictionary containing the default
            configuration values.
    """

    DEFAULT_CONFIG = {
        "colors": True,
        "email": {
            "pattern": DEFAULT_SETTINGS.email_pattern,
        },
        "username": {
            "pattern": DEFAULT_SETTINGS.username_pattern,
            "min_length": DEFAULT_SETTINGS.username_min_length,
            "max_length": DEFAULT_SETTINGS.username_max_length,
        },
        "password": {
            "pattern": DEFAULT_SETTINGS.password_pattern,
            "min_length": DEFAULT_SETTINGS.password_min_length,
            "max_length": DEFAULT_SETTINGS.password_max_length,
        },
    }

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initializes the configuration manager.

        Args:
            config_path (Optional[Path]): An optional path to a specific
                configuration file to load. If provided, it takes precedence
                over default file locations.
        """
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self._load_config(config_path)

    def _load_config(self, config_path: Optional[Path] = None) -> None:
        """Loads configuration from files and environment variables.

        Args:
            config_path (Optional[Path]): A specific config file path.
        """
        if config_path:
            self._load_file_config(Path(config_path))
        else:
            self._load_default_configs()

        self._load_env_config()

    def _load_default_configs(self) -> None:
        """Loads configs from standard locations if they exist."""
        project_config = Path.cwd() / PROJECT_CONFIG_NAME
        if project_config.exists():
            self._load_file_config(project_config)

        if USER_CONFIG_PATH.exists():
            self._load_file_config(USER_CONFIG_PATH)

    def _merge_configs(self, base: Dict[str, Any], new: Dict[str, Any]) -> None:
        """Recursively merges a new config dict into a base dict.

        Args:
            base (Dict[str, Any]): The base configuration dictionary.
            new (Dict[str, Any]): The new configuration to merge in.
        """
        for key, value in new.items():
            if isinstance(value, dict) and key in base and isinstance(base[key], dict):
                self._merge_configs(base[key], value)
            else:
                base[key] = value

    def _load_file_config(self, config_path: Path) -> None:
        """Loads and merges configuration from a TOML file.

        A file that cannot be read or parsed is skipped with a warning.

        Args:
            config_path (Path): The path to the TOML configuration file.
        """
        try:
            with open(config_path, "rb") as f:
                file_config = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Could not load config from {config_path}: {e}")
            return
        self._merge_configs(self.config, file_config)

    def _load_env_config(self) -> None:
        """Loads and merges configuration from environment variables."""
        env_mapping = {
            "USERVAL_COLORS": "colors",
            "USERVAL_EMAIL_PATTERN": "email.pattern",
            "USERVAL_USERNAME_PATTERN": "username.pattern",
            "USERVAL_USERNAME_MIN_LENGTH": "username.min_length",
            "USERVAL_USERNAME_MAX_LENGTH": "username.max_length",
            "USERVAL_PASSWORD_PATTERN": "password.pattern",
            "USERVAL_PASSWORD_MIN_LENGTH": "password.min_length",
            "USERVAL_PASSWORD_MAX_LENGTH": "password.max_length",
        }

        for env_var, config_key in env_mapping.items():
            value = os.getenv(env_var)
            if value is not None:
                self._set_nested_key(config_key, value)

    def _set_nested_key(self, key_path: str, value: str) -> None:
        """Sets a value in the config dict using a dot-separated path.

        This method correctly parses and casts values from environment
        variables, which are always strings.

        Args:
            key_path (str): The dot-separated key (e.g., "username.min_length").
            value (str): The string value from the environment variable.
        """
        keys = key_path.split('.')
        target_config = self.config
        for key in keys[:-1]:
            if key not in target_config or not isinstance(target_config[key], dict):
                target_config[key] = {}
            target_config = target_config[key]

        leaf_key = keys[-1]

        # Type casting based on the key
        if leaf_key in _BOOL_KEYS:
            target_config[leaf_key] = value.lower() in ("true", "1", "yes", "on")
        elif leaf_key in _INT_KEYS:
            try:
                target_config[leaf_key] = int(value)
            except ValueError:
                logger.warning(f"Invalid integer value for {key_path}: {value}")
        else:
            target_config[leaf_key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieves a configuration value using a dot-separated key.

        Args:
            key (str): The dot-separated key (e.g., "password.max_length").
            default (Any): The default value to return if the key is not found.

        Returns:
            Any: The configuration value or the default.
        """
        keys = key.split('.')
        value = self.config
        try:
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """Sets a configuration value in memory.

        Args:
            key (str): The dot-separated key (e.g., "password.max_length").
            value (Any): The value to set.
        """
        keys = key.split('.')
        target_config = self.config
        for k in keys[:-1]:
            target_config = target_config.setdefault(k, {})
        target_config[keys[-1]] = value

    def settings_overrides(self) -> Dict[str, Any]:
        """Returns the configured rule parameters keyed by settings field name.

        Only keys present in the configuration are returned, so the result
        can be applied on top of any defaults.

        Returns:
            Dict[str, Any]: A partial mapping suitable for
            `create_validator()` or `Builder.with_config()`.
        """
        overrides = {}
        missing = object()
        for key, field_name in SETTINGS_KEYS.items():
            value = self.get(key, missing)
            if value is missing:
                continue
            if not self._has_setting_type(key, value):
                logger.warning(f"Ignoring {key} = {value!r}: expected {self._setting_type(key).__name__}")
                continue
            overrides[field_name] = value
        return overrides

    @staticmethod
    def _setting_type(key: str) -> type:
        """Returns the type a validator setting key must hold."""
        return int if key.split('.')[-1] in _INT_KEYS else str

    @classmethod
    def _has_setting_type(cls, key: str, value: Any) -> bool:
        # bool is a subclass of int but never a valid length.
        if isinstance(value, bool):
            return False
        return isinstance(value, cls._setting_type(key))

    @staticmethod
    def parse_value(key: str, value: str) -> Any:
        """Casts a value typed on the command line for the given key.

        Pattern keys always keep the raw string. Length keys and anything
        that looks like an integer become ints, "true"/"false" become bools.

        Args:
            key (str): The dot-separated key the value is for.
            value (str): The raw string value.

        Returns:
            Any: The cast value.
        """
        if key in SETTINGS_KEYS and key.split('.')[-1] == "pattern":
            return value
        if value.lower() in ("true", "false"):
            return value.lower() == "true"
        try:
            return int(value)
        except ValueError:
            return value

    def _get_user_config(self) -> Dict[str, Any]:
        """Loads and returns the contents of the user config file.

        Returns:
            Dict[str, Any]: The user configuration dictionary, or an empty
            dict if the file doesn't exist or fails to parse.
        """
        if not USER_CONFIG_PATH.exists():
            return {}
        try:
            with open(USER_CONFIG_PATH, "rb") as f:
                return tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Ignoring unreadable user config {USER_CONFIG_PATH}: {e}")
            return {}

    def _non_default_values(self, current: Dict[str, Any], defaults: Dict[str, Any]) -> Dict[str, Any]:
        """Returns the parts of `current` that differ from `defaults`."""
        changed = {}
        for key, value in current.items():
            default = defaults.get(key)
            if isinstance(value, dict) and isinstance(default, dict):
                nested = self._non_default_values(value, default)
                if nested:
                    changed[key] = nested
            elif key not in defaults or value != default:
                changed[key] = value
        return changed

    def save_user_config(self) -> None:
        """Saves the current configuration to the user config file.

        This method persists settings that differ from the defaults, allowing
        users to maintain their customizations across sessions.

        Raises:
            IOError: If the configuration file cannot be written.
        """
        user_config = self._get_user_config()
        self._merge_configs(user_config, self._non_default_values(self.config, self.DEFAULT_CONFIG))

        try:
            USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
            with open(USER_CONFIG_PATH, "wb") as f:
                tomli_w.dump(user_config, f)
        except OSError as e:
            raise IOError(f"Failed to save configuration to {USER_CONFIG_PATH}: {e}") from e

    @staticmethod
    def reset_user_config() -> bool:
        """Deletes the user config file.

        Returns:
            bool: True if a file was removed, False if there was none.
        """
        if not USER_CONFIG_PATH.exists():
            return False
        USER_CONFIG_PATH.unlink()
        return True

    def __str__(self) -> str:
        """Returns a string representation of the configuration.

        Returns:
            str: A string showing the current configuration state.
        """
        return f"Config({self.config})"
