from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, List, Optional

from .categories import first_categories, infer_pack_categories
from .config import (
    ACTIVE_PACK_KEY,
    DEFAULT_PACK_ID,
    DEFAULT_SETTINGS,
    DEFAULT_TEAM_NAMES,
    PACKS_KEY,
    QUESTIONS_KEY,
    SELECTED_CATS_KEY,
    SETTINGS_KEY,
    TEAM_NAMES_KEY,
    UNCATEGORIZED,
    default_pack,
)
from .dialects import normalize_payload
from .io_utils import dump_export, write_export
from .reconcile import ImportMode, reconcile
from .records import parse_level, to_text
from .slugs import new_question_id, slugify
from .storage import KeyValueStore

logger = logging.getLogger(__name__)


class PackExistsError(ValueError):
    pass


class ProtectedPackError(ValueError):
    pass


class TriviaRepository:
    """Packs, questions and game state on top of a key-value store."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def init_defaults(self) -> None:
        defaults = {
            SETTINGS_KEY: dict(DEFAULT_SETTINGS),
            PACKS_KEY: [default_pack()],
            ACTIVE_PACK_KEY: DEFAULT_PACK_ID,
            QUESTIONS_KEY: [],
            SELECTED_CATS_KEY: [],
            TEAM_NAMES_KEY: dict(DEFAULT_TEAM_NAMES),
        }
        for key, value in defaults.items():
            if self.store.get(key, None) is None:
                self.store.set(key, value)

    def replace_all(self, payload: Dict[str, Any]) -> None:
        """Overwrite each collection the payload supplies (None and "" are skipped)."""
        for key, store_key in (
            ('settings', SETTINGS_KEY),
            ('packs', PACKS_KEY),
            ('activePack', ACTIVE_PACK_KEY),
            ('questions', QUESTIONS_KEY),
        ):
            if payload.get(key) not in (None, ''):
                self.store.set(store_key, payload[key])

    # --- Packs ---

    def list_packs(self) -> List[Dict[str, Any]]:
        return self.store.get(PACKS_KEY, [])

    def active_pack(self) -> str:
        return self.store.get(ACTIVE_PACK_KEY, DEFAULT_PACK_ID)

    def set_active_pack(self, pack_id: str) -> None:
        self.store.set(ACTIVE_PACK_KEY, pack_id)

    def add_pack(self, name: str, category: Optional[str] = None) -> str:
        pack_id = slugify(name) or f"pack-{int(time.time() * 1000)}"
        packs = self.list_packs()
        if any(p.get('id') == pack_id for p in packs):
            raise PackExistsError(f"A pack named {name!r} already exists.")
        packs.append({'id': pack_id, 'name': name, 'category': category or None})
        self.store.set(PACKS_KEY, packs)
        return pack_id

    def delete_pack(self, pack_id: str) -> None:
        """Delete a pack and every question in it."""
        if pack_id == DEFAULT_PACK_ID:
            raise ProtectedPackError("The default pack cannot be deleted.")
        self.store.set(PACKS_KEY, [p for p in self.list_packs() if p.get('id') != pack_id])
        self.store.set(QUESTIONS_KEY, [q for q in self.list_questions() if q.get('pack') != pack_id])
        if self.active_pack() == pack_id:
            self.set_active_pack(DEFAULT_PACK_ID)

    def delete_category(self, category: str) -> None:
        """Delete a category's questions, its packs (except the default) and its selection."""
        packs = self.list_packs()
        doomed = {p.get('id') for p in packs if p.get('category') == category and p.get('id') != DEFAULT_PACK_ID}
        self.store.set(PACKS_KEY, [p for p in packs if p.get('id') not in doomed])
        self.store.set(
            QUESTIONS_KEY,
            [q for q in self.list_questions() if q.get('category') != category and q.get('pack') not in doomed],
        )
        self.set_selected_categories([c for c in self.get_selected_categories() if c != category])
        if self.active_pack() in doomed:
            self.set_active_pack(DEFAULT_PACK_ID)

    # --- Questions ---

    def list_questions(self) -> List[Dict[str, Any]]:
        return self.store.get(QUESTIONS_KEY, [])

    def list_questions_by_pack(self, pack_id: str) -> List[Dict[str, Any]]:
        return [q for q in self.list_questions() if q.get('pack') == pack_id]

    def add_question(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        item = {
            'id': new_question_id(),
            'pack': fields.get('pack') or self.active_pack(),
            'category': fields.get('category') or UNCATEGORIZED,
            'level': parse_level(fields.get('level')),
            'q': to_text(fields.get('q')),
            'a': to_text(fields.get('a')),
            'img': fields.get('img') or None,
        }
        questions = self.list_questions()
        questions.append(item)
        self.store.set(QUESTIONS_KEY, questions)
        return item

    def update_question(self, question_id: str, partial: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        questions = self.list_questions()
        for i, question in enumerate(questions):
            if question.get('id') == question_id:
                updated = {**question, **partial}
                updated['level'] = parse_level(updated.get('level'))
                questions[i] = updated
                self.store.set(QUESTIONS_KEY, questions)
                return updated
        return None

    def delete_question(self, question_id: str) -> None:
        self.store.set(QUESTIONS_KEY, [q for q in self.list_questions() if q.get('id') != question_id])

    def distinct_categories(self, pack_id: str) -> List[str]:
        return first_categories(self.list_questions_by_pack(pack_id), limit=None)

    # --- Teams & selected categories ---

    def get_selected_categories(self) -> List[str]:
        return self.store.get(SELECTED_CATS_KEY, [])

    def set_selected_categories(self, categories: Optional[List[str]]) -> None:
        self.store.set(SELECTED_CATS_KEY, list(categories or []))

    def get_team_names(self) -> Dict[str, str]:
        return self.store.get(TEAM_NAMES_KEY, dict(DEFAULT_TEAM_NAMES))

    def set_team_names(self, names: Dict[str, Any]) -> None:
        self.store.set(TEAM_NAMES_KEY, {
            'teamA': names.get('teamA') or DEFAULT_TEAM_NAMES['teamA'],
            'teamB': names.get('teamB') or DEFAULT_TEAM_NAMES['teamB'],
        })

    # --- Import / export ---

    def export_payload(self) -> Dict[str, Any]:
        return {
            'settings': self.store.get(SETTINGS_KEY, {}),
            'packs': self.list_packs(),
            'activePack': self.active_pack(),
            'questions': self.list_questions(),
        }

    def export_json(self) -> str:
        return dump_export(self.export_payload())

    def write_export(self, directory=None) -> str:
        return write_export(self.export_payload(), directory)

    def import_all(self, source_text: str, mode=ImportMode.MERGE, stable_ids: bool = True) -> bool:
        """Import a JSON export of any known dialect.

        Raises json.JSONDecodeError for text that is not JSON, before any
        write; every other irregularity is absorbed by normalization.
        """
        mode = ImportMode.parse(mode)
        try:
            data = json.loads(source_text)
        except json.JSONDecodeError as exc:
            logger.warning("Import rejected, invalid JSON: %s", exc)
            raise

        payload = infer_pack_categories(normalize_payload(data, stable_ids=stable_ids))
        packs, questions = reconcile(
            self.list_packs(),
            self.list_questions(),
            payload['packs'],
            payload['questions'],
            mode,
        )

        if mode is ImportMode.REPLACE:
            self.replace_all({
                'settings': payload['settings'] or self.store.get(SETTINGS_KEY, {}),
                'packs': packs or [default_pack()],
                'activePack': payload['activePack'] or DEFAULT_PACK_ID,
                'questions': questions,
            })
        else:
            self.store.set(PACKS_KEY, packs)
            self.store.set(QUESTIONS_KEY, questions)
            if payload['activePack']:
                self.set_active_pack(payload['activePack'])
            if payload['settings']:
                self.store.set(SETTINGS_KEY, {**self.store.get(SETTINGS_KEY, {}), **payload['settings']})

        if payload['questions']:
            self.set_selected_categories(first_categories(payload['questions']))

        logger.info(
            "Imported %d packs, %d questions (%s)",
            len(payload['packs']),
            len(payload['questions']),
            mode.value,
        )
        return True
