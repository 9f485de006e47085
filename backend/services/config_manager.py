"""
Configuration Manager - Load backend settings
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "EDIT_FILE_LINES_CONFIG_DIR"


class ConfigManager:
    """Read configuration from a JSON file layered over defaults"""

    _instance = None
    _config_file = None

    def __init__(self, config_dir: str | None = None):
        # 1. explicit argument, 2. environment, 3. ~/.edit_file_lines
        config_dir = config_dir or os.environ.get(CONFIG_DIR_ENV)
        if not config_dir:
            config_dir = os.path.expanduser("~/.edit_file_lines")

        config_path = Path(config_dir)
        try:
            config_path.mkdir(parents=True, exist_ok=True)
            self._config_file = config_path / "config.json"
        except OSError as e:
            logger.warning("Cannot write to %s: %s", config_dir, e)
            self._config_file = None

        # Last resort: temp directory
        if not self._config_file:
            tmp_dir = Path(tempfile.gettempdir()) / "edit_file_lines"
            tmp_dir.mkdir(parents=True, exist_ok=True)
            self._config_file = tmp_dir / "config.json"
            logger.warning("Using temporary config path: %s", self._config_file)

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, layered over the defaults"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file, encoding="utf-8") as f:
                loaded = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Error loading config %s: %s", self._config_file, e)
            return config

        if not isinstance(loaded, dict):
            logger.warning("Ignoring config %s: top level is not an object", self._config_file)
            return config

        server = {**config["server"], **(loaded.get("server") or {})}
        config.update(loaded)
        config["server"] = server
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "allowedDirectories": [],
            "server": {"host": "127.0.0.1", "port": 8000},
            "logLevel": "INFO",
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload so edits made while running are picked up
        self._config = self._load_config()
        return self._config.copy()

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def allowed_directories(self, extra: list[str] | None = None) -> list[str]:
        """Configured directories followed by extra ones, without duplicates"""
        directories = []
        for directory in list(self._config.get("allowedDirectories") or []) + list(extra or []):
            if directory not in directories:
                directories.append(directory)
        return directories
