"""Flat key -> JSON value stores.

Values are kept JSON-encoded, so reads always return fresh copies and a
value that fails to decode reads back as the caller's fallback.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str, fallback: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


def _decode(raw: Optional[str], fallback: Any) -> Any:
    if raw is None:
        return fallback
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        return fallback
    return fallback if value is None else value


class MemoryStore:
    """In-process store; handy for tests and previews."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._raw: Dict[str, str] = dict(initial or {})

    def get(self, key: str, fallback: Any = None) -> Any:
        return _decode(self._raw.get(key), fallback)

    def set(self, key: str, value: Any) -> None:
        self._raw[key] = json.dumps(value, ensure_ascii=False)

    def snapshot(self) -> Dict[str, str]:
        return dict(self._raw)


class JsonFileStore:
    """Store persisted as one JSON object of encoded values on disk.

    Every `set` rewrites the file through a temp file and `os.replace`.
    """

    def __init__(self, path):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read store %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str, fallback: Any = None) -> Any:
        return _decode(self._load().get(key), fallback)

    def set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = json.dumps(value, ensure_ascii=False)
        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
