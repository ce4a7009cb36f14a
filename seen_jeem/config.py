from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

SETTINGS_KEY = "sj:settings"
QUESTIONS_KEY = "sj:questions"
PACKS_KEY = "sj:packs"
ACTIVE_PACK_KEY = "sj:activePack"
SELECTED_CATS_KEY = "sj:selectedCats"
TEAM_NAMES_KEY = "sj:teamNames"

DEFAULT_PACK_ID = "default"
DEFAULT_PACK_NAME = "الافتراضية"
DEFAULT_SETTINGS = {"players": 2, "roundTime": 60, "difficulty": "normal"}
DEFAULT_TEAM_NAMES = {"teamA": "الفريق 1", "teamB": "الفريق 2"}

DEFAULT_LEVEL = 100
UNCATEGORIZED = "غير مصنفة"
UNNAMED_PACK = "بدون اسم"

# Quick-start selection after an import.
MAX_SELECTED_CATEGORIES = 6

EXPORT_FILENAME = "seen-jeem-export.json"

STORE_PATH_ENV = "SEEN_JEEM_STORE"
LOG_LEVEL_ENV = "SEEN_JEEM_LOG_LEVEL"


def default_pack():
    return {"id": DEFAULT_PACK_ID, "name": DEFAULT_PACK_NAME, "category": None}


@dataclass(frozen=True)
class AppConfig:
    """Runtime configuration for the UI process.

    Attributes:
        store_path: JSON file backing the key-value store
        log_level: Name of the root logging level
    """

    store_path: Path = Path("seen-jeem-store.json")
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppConfig":
        store_path = os.environ.get(STORE_PATH_ENV)
        log_level = os.environ.get(LOG_LEVEL_ENV)
        return cls(
            store_path=Path(store_path) if store_path else cls.store_path,
            log_level=(log_level or cls.log_level).upper(),
        )
