# src/a11y_auditor/managers/config_manager.py
import json
import logging
from typing import Any, Dict, Optional

from a11y_auditor.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


class ConfigManager:
    """
    A singleton class to manage the engine's configuration.
    It loads the packaged settings.json, overlays the optional user file and
    allows for in-memory modifications.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Loads the configuration from the file."""
        self._config: Dict[str, Any] = {}
        self.reset()
        logger.debug("ConfigManager initialized.")

    def get_all(self) -> Dict[str, Any]:
        """Returns the entire current configuration dictionary."""
        return self._config

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Safely retrieves a nested value from the configuration.
        e.g., 'validators.phone_min_digits'.
        """
        keys = key_path.split('.')
        value = self._config
        for key in keys:
            if isinstance(value, dict):
                value = value.get(key)
            else:
                return default
        return value if value is not None else default

    def set_nested(self, key_path: str, value: Any) -> bool:
        """
        Sets a nested value in the in-memory configuration.
        e.g., 'viewport.min_maximum_scale', '3'
        """
        keys = key_path.split('.')
        d = self._config
        # Navigate to the second-to-last dictionary
        for key in keys[:-1]:
            d = d.setdefault(key, {})
            if not isinstance(d, dict):
                logger.error("Cannot set value: '%s' is not a dictionary.", key)
                return False

        # Cast to the type of the existing value where possible
        original_value = d.get(keys[-1])
        if isinstance(original_value, bool) and isinstance(value, str):
            value = value.strip().lower() in ("1", "true", "yes", "on")
        elif original_value is not None and not isinstance(original_value, (list, dict)):
            try:
                value = type(original_value)(value)
            except (ValueError, TypeError):
                logger.warning(
                    "Could not cast new value for '%s' to type %s. Storing as given.",
                    key_path, type(original_value).__name__
                )

        d[keys[-1]] = value
        logger.info("Configuration updated: %s = %s", key_path, value)
        return True

    def reset(self):
        """Resets the in-memory configuration from settings.json (plus the user override)."""
        self._config = self._load(PathUtils.get_settings_file()) or {}

        user_file = PathUtils.get_user_settings_file()
        if user_file is not None:
            overrides = self._load(user_file)
            if overrides:
                _deep_merge(self._config, overrides)
                logger.info("Applied user settings from %s.", user_file)

        logger.info("Configuration has been (re)loaded from settings.json.")

    @staticmethod
    def _load(path) -> Optional[Dict[str, Any]]:
        if not path.exists():
            logger.warning("Settings file not found at %s. Using empty config.", path)
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load %s: %s", path, e, exc_info=True)
            return None


# The global singleton instance that the entire engine uses.
config_manager = ConfigManager()
