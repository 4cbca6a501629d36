# versegate/core/config.py
"""
Reader configuration.

Values come from, in increasing priority: built-in defaults, the data
directory's config.json, environment variables (loaded from .env), and
explicit overrides such as command-line flags. The result is an
explicit value passed to whatever needs it; nothing reads settings
globally.
"""

import os
import shutil
from dataclasses import dataclass, asdict
from typing import Optional

from dotenv import load_dotenv

from ..services.references.storage import CorpusStorage


@dataclass(frozen=True)
class ReaderConfig:
    translation: str = "ESV"
    padding: int = 0
    wrap: bool = False
    width: int = 80
    download_delay_ms: int = 100

    def to_dict(self) -> dict:
        return asdict(self)


def load_config(storage: Optional[CorpusStorage] = None, **overrides) -> ReaderConfig:
    """
    Build a ReaderConfig.

    Args:
        storage: Data directory whose config.json supplies defaults
        **overrides: Values that win over everything else; None is ignored

    Returns:
        ReaderConfig
    """
    load_dotenv()
    storage = storage or CorpusStorage()
    stored = storage.get_config()

    values = {
        "translation": os.getenv("VERSEGATE_TRANSLATION")
        or stored.get("default_translation", "ESV"),
        "padding": int(stored.get("padding", 0)),
        "wrap": bool(stored.get("wrap", False)),
        "width": shutil.get_terminal_size((80, 24)).columns,
        "download_delay_ms": int(stored.get("download_delay_ms", 100)),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    values["translation"] = values["translation"].upper()

    return ReaderConfig(**values)
