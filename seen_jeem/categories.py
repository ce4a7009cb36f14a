from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List, Optional

from .config import MAX_SELECTED_CATEGORIES, UNCATEGORIZED


def majority_category(questions: List[Dict[str, Any]], pack_id: str) -> str:
    """Most frequent category among the pack's questions.

    Ties go to the category seen first; packs without questions get the
    uncategorized placeholder.
    """
    counts = Counter(q.get('category') for q in questions if q.get('pack') == pack_id and q.get('category'))
    if not counts:
        return UNCATEGORIZED
    # most_common() keeps insertion order among equal counts.
    return counts.most_common(1)[0][0]


def infer_pack_categories(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Fill in missing Pack categories in place and return the payload."""
    questions = payload.get('questions') or []
    for pack in payload.get('packs') or []:
        if not pack.get('category'):
            pack['category'] = majority_category(questions, pack.get('id'))
    return payload


def first_categories(questions: List[Dict[str, Any]], limit: Optional[int] = MAX_SELECTED_CATEGORIES) -> List[str]:
    """Up to `limit` distinct categories in first-seen order (all when None)."""
    selected: List[str] = []
    for question in questions:
        category = question.get('category')
        if category and category not in selected:
            selected.append(category)
            if limit is not None and len(selected) >= limit:
                break
    return selected
