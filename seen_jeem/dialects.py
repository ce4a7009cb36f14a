from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from .accessors import is_mapping, is_sequence
from .legacy import convert_legacy_packs
from .records import coerce_pack, coerce_question

logger = logging.getLogger(__name__)


class Dialect(Enum):
    FLAT = 'flat'
    LEGACY = 'legacy'
    BARE_ARRAY = 'bare_array'
    UNKNOWN = 'unknown'


def detect_dialect(data: Any) -> Dialect:
    """Classify a decoded JSON document; the first matching shape wins."""
    if is_mapping(data):
        packs = data.get('packs')
        if is_sequence(data.get('questions')) and is_sequence(packs):
            return Dialect.FLAT
        if is_mapping(packs):
            return Dialect.LEGACY
        return Dialect.UNKNOWN
    if is_sequence(data):
        return Dialect.BARE_ARRAY
    return Dialect.UNKNOWN


def empty_payload() -> Dict[str, Any]:
    return {'settings': None, 'packs': [], 'questions': [], 'activePack': None}


def _top_level_extras(data: Dict[str, Any]) -> Dict[str, Any]:
    settings = data.get('settings')
    active = data.get('activePack')
    return {
        'settings': settings if is_mapping(settings) else None,
        'activePack': active if isinstance(active, str) and active else None,
    }


def _coerce_questions(items: List[Any], default_pack: Optional[str], stable_ids: bool) -> List[Dict[str, Any]]:
    questions = []
    for position, raw in enumerate(items):
        question = coerce_question(raw, default_pack=default_pack, position=position, stable_ids=stable_ids)
        if question is None:
            logger.debug("Dropping unresolvable question entry at index %d", position)
            continue
        questions.append(question)
    return questions


def _normalize_flat(data: Dict[str, Any], stable_ids: bool) -> Dict[str, Any]:
    payload = empty_payload()
    payload.update(_top_level_extras(data))
    for position, raw in enumerate(data['packs']):
        pack = coerce_pack(raw, position=position, stable_ids=stable_ids)
        if pack is not None:
            payload['packs'].append(pack)
    payload['questions'] = _coerce_questions(data['questions'], payload['activePack'], stable_ids)
    return payload


def _normalize_legacy(data: Dict[str, Any], stable_ids: bool) -> Dict[str, Any]:
    payload = empty_payload()
    payload.update(_top_level_extras(data))
    payload.update(convert_legacy_packs(data['packs'], stable_ids=stable_ids))
    return payload


def _normalize_bare_array(data: List[Any], stable_ids: bool) -> Dict[str, Any]:
    payload = empty_payload()
    payload['questions'] = _coerce_questions(data, None, stable_ids)
    return payload


_NORMALIZERS = {
    Dialect.FLAT: _normalize_flat,
    Dialect.LEGACY: _normalize_legacy,
    Dialect.BARE_ARRAY: _normalize_bare_array,
}


def normalize_payload(data: Any, stable_ids: bool = True) -> Dict[str, Any]:
    """Convert any decoded JSON value into the canonical import payload.

    Never raises: shapes that match no known dialect normalize to an
    empty payload. With `stable_ids` (the default) synthesized ids are
    derived from content and position instead of being random.
    """
    dialect = detect_dialect(data)
    normalizer = _NORMALIZERS.get(dialect)
    if normalizer is None:
        logger.info("Unrecognized import shape (%s); nothing to import", type(data).__name__)
        return empty_payload()
    payload = normalizer(data, stable_ids)
    logger.info(
        "Normalized %s payload: %d packs, %d questions",
        dialect.value,
        len(payload['packs']),
        len(payload['questions']),
    )
    return payload
