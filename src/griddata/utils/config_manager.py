# src/griddata/utils/config_manager.py
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "GRIDDATA_SETTINGS"


def get_settings_path() -> Path:
    """Returns the settings file, honouring the GRIDDATA_SETTINGS override."""
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return Path(override)
    return Path(__file__).resolve().parent.parent / "settings.json"


class ConfigManager:
    """
    A singleton class to manage the package configuration.
    It loads settings from a file and allows for in-memory modifications.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self._config: Dict[str, Any] = {}
        self.reset()
        logger.debug("ConfigManager initialized.")

    def get_all(self) -> Dict[str, Any]:
        """Returns the entire current configuration dictionary."""
        return self._config

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Safely retrieves a nested value from the configuration.
        e.g., 'context.features.normalize_whitespace'.
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
        e.g., 'debug.level', 'INFO'
        """
        keys = key_path.split('.')
        d = self._config
        for key in keys[:-1]:
            d = d.setdefault(key, {})
            if not isinstance(d, dict):
                logger.error("Cannot set value: '%s' is not a dictionary.", key)
                return False

        # Cast to the type of the value being replaced
        original_value = d.get(keys[-1])
        if original_value is not None:
            if isinstance(original_value, bool) and isinstance(value, str):
                value = value.strip().lower() in ("true", "1", "yes", "on")
            else:
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
        """Resets the in-memory configuration from the settings file."""
        config_path = get_settings_path()
        if not config_path.exists():
            logger.warning("settings.json not found at %s. Using empty config.", config_path)
            self._config = {}
            return
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                self._config = json.load(f)
            logger.debug("Configuration has been (re)loaded from %s.", config_path)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load %s: %s", config_path, e, exc_info=True)
            self._config = {}


# The global singleton instance used by the package.
config_manager = ConfigManager()
