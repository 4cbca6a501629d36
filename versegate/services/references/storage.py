# versegate/services/references/storage.py
"""
Data directory management for downloaded translations.

Holds one SQLite file per translation plus a config.json with reader
defaults. The base path can be configured via environment variable.
"""

import json
import os
from pathlib import Path
from typing import Optional


class CorpusStorage:
    """
    Manages the data directory and its configuration file.

    Directory structure:
        {VERSEGATE_HOME}/
        ├── ESV.sql
        ├── KJV.sql
        └── config.json
    """

    def __init__(self, base_path: Optional[str] = None):
        self.base_path = Path(
            base_path
            or os.getenv("VERSEGATE_HOME")
            or Path.home() / ".versegate"
        ).expanduser()
        self._ensure_structure()

    def _ensure_structure(self):
        """Create directory and default config if missing."""
        self.base_path.mkdir(parents=True, exist_ok=True)

        if not self.config_path.exists():
            self._write_config(self._default_config())

    def _default_config(self) -> dict:
        """Return default configuration values."""
        return {
            "default_translation": os.getenv("VERSEGATE_TRANSLATION", "ESV"),
            "padding": 0,
            "wrap": False,
            "download_delay_ms": 100,
        }

    @property
    def config_path(self) -> Path:
        return self.base_path / "config.json"

    def translation_path(self, translation: str) -> Path:
        """Path to the SQLite file for a translation."""
        return self.base_path / f"{translation.upper()}.sql"

    def has_local(self, translation: str) -> bool:
        """Return True if the translation has been downloaded."""
        return self.translation_path(translation).is_file()

    def list_local(self) -> list[str]:
        """Return codes of downloaded translations."""
        return sorted(p.stem for p in self.base_path.glob("*.sql"))

    def get_config(self) -> dict:
        """Load and return current configuration merged over defaults."""
        config = self._default_config()
        with open(self.config_path) as f:
            config.update(json.load(f))
        return config

    def _write_config(self, config: dict):
        with open(self.config_path, "w") as f:
            json.dump(config, f, indent=2)

    def update_config(self, **kwargs):
        """Update configuration with provided key-value pairs."""
        config = self.get_config()
        config.update(kwargs)
        self._write_config(config)
