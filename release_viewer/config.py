import json
import logging
import os

from release_viewer.sorting import SortKey

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "release_viewer_config.json"


class ConfigManager:
    def __init__(self, config_file=DEFAULT_CONFIG_FILE):
        self.config = {}
        self.config_file = config_file
        self.load_config()

    def get(self, key, default=None):
        """Get a config value, falling back to the built-in default"""
        if key in self.config:
            return self.config[key]
        return self._get_default_config().get(key, default)

    def set(self, key, value):
        """Set a config value in memory; call save_config() to persist it"""
        self.config[key] = value

    def load_config(self):
        """Load configuration from file, filling gaps with default values"""
        self.config = self._get_default_config()
        if not os.path.exists(self.config_file):
            logger.info(f"Configuration file {self.config_file} not found, using defaults")
            return

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {e}")
            return

        if not isinstance(loaded, dict):
            logger.error(f"Configuration in {self.config_file} is not an object, using defaults")
            return

        self.config.update(loaded)
        logger.info(f"Configuration loaded from {self.config_file}")

    def _get_default_config(self):
        """Return default configuration"""
        return {
            # Data source: path to a JSON file or an http(s) URL
            "source": "versions.json",
            "request_timeout": 10,

            # Empty means "pick from the dataset"
            "default_sort": "",

            # Appearance
            "appearance_mode": "System",  # System, Dark or Light
            "color_theme": "blue",
            "window_geometry": "1100x760"
        }

    def initial_sort(self):
        """Configured sort key, or None when unset or not a known key"""
        value = self.get("default_sort")
        if not value:
            return None

        sort_key = SortKey.parse(value)
        if sort_key is None:
            logger.warning(f"Ignoring unknown default_sort '{value}' in configuration")
        return sort_key

    def save_config(self):
        """Save configuration to file"""
        try:
            with open(self.config_file, "w", encoding="utf-8") as f:
                json.dump(self.config, f, indent=4)
            return True
        except (OSError, TypeError) as e:
            logger.error(f"Error saving configuration: {e}")
            return False
