"""Conversion of the nested category -> pack-list -> level -> entries schema.

Older exports stored questions as::

    {"packs": {"<category>": [{"100": ["q|a", ...], "200": {...}}, ...]}}

Each category's packs become canonical Pack records with synthesized ids
("<slug>-01", "<slug>-02", ...) and every entry becomes a Question.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from .accessors import is_mapping, is_sequence
from .entries import resolve_entry
from .records import build_question, parse_int_prefix
from .slugs import legacy_pack_id

logger = logging.getLogger(__name__)


def legacy_pack_name(category: str, index: int) -> str:
    return f"{category} – {index + 1}"


def _as_bucket(value: Any) -> List[Any]:
    if is_sequence(value):
        return list(value)
    return [value]


def convert_legacy_packs(packs_by_category: Dict[str, Any], stable_ids: bool = True) -> Dict[str, List[Dict[str, Any]]]:
    """Flatten a legacy `packs` mapping into ``{packs, questions}``.

    Category order and pack order follow the source mapping. Categories
    whose names slugify to the same id share one Pack record, and all of
    their questions are attached to it.
    """
    packs: List[Dict[str, Any]] = []
    questions: List[Dict[str, Any]] = []
    seen_ids = set()

    for category, pack_list in packs_by_category.items():
        category = str(category)
        if not is_sequence(pack_list):
            logger.debug("Skipping legacy category %r: pack list is %s", category, type(pack_list).__name__)
            continue

        for index, pack_obj in enumerate(pack_list):
            pid = legacy_pack_id(category, index)
            if pid not in seen_ids:
                seen_ids.add(pid)
                packs.append({'id': pid, 'name': legacy_pack_name(category, index), 'category': category})

            if not is_mapping(pack_obj):
                continue

            # Position runs across the whole pack object; "100" and "100x" share a level.
            position = 0
            for key, bucket in pack_obj.items():
                level = parse_int_prefix(key)
                if level is None:
                    logger.debug("Skipping non-level key %r in pack %s", key, pid)
                    continue

                for entry in _as_bucket(bucket):
                    resolved = resolve_entry(entry)
                    if resolved is None:
                        continue
                    position += 1
                    questions.append(
                        build_question(
                            resolved,
                            pack=pid,
                            category=category,
                            level=level,
                            position=position,
                            stable_ids=stable_ids,
                        )
                    )

    logger.debug("Legacy conversion produced %d packs, %d questions", len(packs), len(questions))
    return {'packs': packs, 'questions': questions}
