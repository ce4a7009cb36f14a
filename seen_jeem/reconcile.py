from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple

logger = logging.getLogger(__name__)


class ImportMode(str, Enum):
    MERGE = 'merge'
    REPLACE = 'replace'

    @classmethod
    def parse(cls, value) -> "ImportMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or cls.MERGE.value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown import mode: {value!r}") from None


def union_by_id(existing: Iterable[Dict[str, Any]], incoming: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Existing records first, then incoming records with unseen ids.

    Existing records are never reordered or overwritten. An id repeated
    inside `incoming` is kept only once (first occurrence).
    """
    merged = list(existing)
    seen = {record.get('id') for record in merged}
    for record in incoming:
        rid = record.get('id')
        if rid in seen:
            continue
        seen.add(rid)
        merged.append(record)
    return merged


def reconcile(
    existing_packs: List[Dict[str, Any]],
    existing_questions: List[Dict[str, Any]],
    incoming_packs: List[Dict[str, Any]],
    incoming_questions: List[Dict[str, Any]],
    mode=ImportMode.MERGE,
) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
    mode = ImportMode.parse(mode)
    if mode is ImportMode.REPLACE:
        packs, questions = list(incoming_packs), list(incoming_questions)
    else:
        packs = union_by_id(existing_packs, incoming_packs)
        questions = union_by_id(existing_questions, incoming_questions)

    logger.info(
        "Reconciled (%s): packs %d -> %d, questions %d -> %d",
        mode.value,
        len(existing_packs),
        len(packs),
        len(existing_questions),
        len(questions),
    )
    return packs, questions
