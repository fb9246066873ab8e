"""Configuration management"""

import copy
import os
from pathlib import Path
from typing import Any

import yaml

CONFIG_ENV_VAR = "WIKILOOKUP_CONFIG"

DEFAULT_CONFIG: dict[str, Any] = {
    "wikipedia": {
        "api_url": "https://{lang}.wikipedia.org/w/api.php",
        "user_agent": "wikilookup/1.0 (spreadsheet lookup functions)",
        "timeout": 30,
    },
    "wikidata": {
        "api_url": "https://wikidata.org/w/api.php",
    },
    "suggest": {
        "api_url": "https://suggestqueries.google.com/complete/search",
        "default_language": "en",
    },
    "geocoordinates": {
        # The coordinates endpoint historically ignored the article language
        "language": "en",
    },
    "logging": {
        "level": "WARNING",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    },
}


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """Configuration singleton"""

    _instance = None
    _config = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def load(self, config_path: str | None = None):
        """Load configuration from YAML file, layered over the defaults.

        The path defaults to ``$WIKILOOKUP_CONFIG`` and then ``config.yaml``.
        A missing file leaves the defaults in place.
        """
        config_path = config_path or os.environ.get(CONFIG_ENV_VAR) or "config.yaml"
        path = Path(config_path)
        if path.exists():
            with open(path) as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                raise ValueError(f"Config file must contain a mapping: {path}")
            self._config = _merge(DEFAULT_CONFIG, loaded)
        else:
            self._config = copy.deepcopy(DEFAULT_CONFIG)

    def reset(self):
        """Drop loaded values so the next access reloads them."""
        self._config = None

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key (supports dot notation)"""
        if self._config is None:
            self.load()

        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value


# Global config instance
config = Config()
