# File: src/chainlens/config/settings.py

import copy
import os
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG_PATH = "config/chainlens.yaml"

DEFAULTS: Dict[str, Any] = {
    "server": {
        "host": "0.0.0.0",
        "port": 8000,
        "cors_origins": ["*"],
    },
    "logging": {
        "log_dir": "logs",
        "log_level": "INFO",
        "to_file": True,
    },
    "monitoring": {
        "enabled": True,
    },
}


class ServiceConfig:
    """Runtime settings for the API server, read from a YAML file.

    Missing files and missing keys fall back to ``DEFAULTS``.
    """

    def __init__(self, config_path: Optional[str] = DEFAULT_CONFIG_PATH):
        self.config_path = config_path
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        config = copy.deepcopy(DEFAULTS)
        if not self.config_path or not os.path.exists(self.config_path):
            return config

        with open(self.config_path, 'r') as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {self.config_path} must contain a mapping")

        return self._merge(config, loaded)

    @classmethod
    def _merge(cls, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                base[key] = cls._merge(base[key], value)
            else:
                base[key] = value
        return base

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dotted key, e.g. ``server.port``."""
        try:
            keys = key.split('.')
            value = self.config
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def update(self, key: str, value: Any):
        """Update configuration value in memory."""
        keys = key.split('.')
        config = self.config
        for k in keys[:-1]:
            config = config.setdefault(k, {})
        config[keys[-1]] = value

    def save(self):
        """Write the current configuration back to ``config_path``."""
        if not self.config_path:
            raise ValueError("No config path to save to")
        directory = os.path.dirname(self.config_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.config_path, 'w') as f:
            yaml.safe_dump(self.config, f, default_flow_style=False)
