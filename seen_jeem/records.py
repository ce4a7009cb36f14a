from __future__ import annotations

import math
import re
from typing import Any, Dict, Optional

from .accessors import CATEGORY_KEYS, ID_KEYS, LEVEL_KEYS, PACK_KEYS, first_present, is_mapping
from .config import DEFAULT_LEVEL, DEFAULT_PACK_ID, UNCATEGORIZED, UNNAMED_PACK
from .entries import resolve_entry
from .slugs import synth_pack_id, synth_question_id

# ASCII digits only: Arabic-Indic digits and '_' separators are not numbers.
_INT_PREFIX = re.compile(r'\s*([+-]?[0-9]+)')
_NUMBER = re.compile(r'[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?')


def parse_int_prefix(value: Any) -> Optional[int]:
    """Leading-integer parse: '100' -> 100, '100x' -> 100, 'abc' -> None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _INT_PREFIX.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def parse_level(value: Any, default: int = DEFAULT_LEVEL) -> int:
    """Coerce a point value to an int; unusable or zero values give `default`."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        text = value.strip()
        if text and not _NUMBER.fullmatch(text):
            return default
        value = float(text or 0)
    if isinstance(value, float):
        if not math.isfinite(value):
            return default
        value = int(value)
    if not isinstance(value, int):
        return default
    return value or default


def to_text(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _optional_text(value: Any) -> Optional[str]:
    text = to_text(value)
    return text or None


def build_question(
    resolved: Dict[str, Any],
    *,
    pack: str,
    category: str,
    level: int,
    qid: Optional[str] = None,
    position: int = 0,
    stable_ids: bool = True,
) -> Dict[str, Any]:
    q = to_text(resolved.get('q'))
    a = to_text(resolved.get('a'))
    if not qid:
        qid = synth_question_id([pack, category, level, position, q, a], stable=stable_ids)
    return {
        'id': qid,
        'pack': pack,
        'category': category,
        'level': level,
        'q': q,
        'a': a,
        'img': resolved.get('img') or None,
    }


def coerce_question(
    raw: Any,
    *,
    default_pack: Optional[str] = None,
    position: int = 0,
    stable_ids: bool = True,
) -> Optional[Dict[str, Any]]:
    """Full Question coercion for flat and bare-array entries.

    Returns None when the entry cannot be resolved at all.
    """
    resolved = resolve_entry(raw)
    if resolved is None:
        return None
    pack = _optional_text(first_present(raw, PACK_KEYS)) or default_pack or DEFAULT_PACK_ID
    return build_question(
        resolved,
        pack=pack,
        category=_optional_text(first_present(raw, CATEGORY_KEYS)) or UNCATEGORIZED,
        level=parse_level(first_present(raw, LEVEL_KEYS)),
        qid=_optional_text(first_present(raw, ID_KEYS)),
        position=position,
        stable_ids=stable_ids,
    )


def coerce_pack(raw: Any, *, position: int = 0, stable_ids: bool = True) -> Optional[Dict[str, Any]]:
    """Shallow Pack coercion; a bare string is taken as the pack name."""
    if isinstance(raw, str):
        raw = {'name': raw}
    if not is_mapping(raw):
        return None
    name = _optional_text(raw.get('name')) or UNNAMED_PACK
    pid = _optional_text(first_present(raw, ID_KEYS))
    if not pid:
        pid = synth_pack_id(name, [position], stable=stable_ids)
    return {
        'id': pid,
        'name': name,
        'category': _optional_text(first_present(raw, CATEGORY_KEYS)),
    }
