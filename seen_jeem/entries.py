from __future__ import annotations

from typing import Any, Dict, Optional

from .accessors import ANSWER_KEYS, IMAGE_KEYS, QUESTION_KEYS, first_present, is_mapping, is_sequence


def _split_pipe(text: str) -> Dict[str, Any]:
    # Only the first '|' separates; the answer keeps any further ones.
    parts = text.split('|')
    if len(parts) >= 2:
        return {'q': parts[0], 'a': '|'.join(parts[1:]), 'img': None}
    return {'q': text, 'a': '', 'img': None}


def _from_pair(entry) -> Dict[str, Any]:
    q = entry[0] if len(entry) > 0 else ''
    a = entry[1] if len(entry) > 1 else ''
    img = entry[2] if len(entry) > 2 else None
    return {
        'q': '' if q is None else q,
        'a': '' if a is None else a,
        'img': img,
    }


def resolve_entry(entry: Any) -> Optional[Dict[str, Any]]:
    """Resolve one raw entry into ``{q, a, img}``.

    Accepted shapes:
    - "question|answer" or a bare "question" string
    - [q, a] or [q, a, img]
    - an object using any of the known field aliases

    Returns None for null entries and for any other shape (numbers,
    booleans). Values are returned untrimmed; coercion trims them.
    """
    if entry is None:
        return None
    if isinstance(entry, str):
        return _split_pipe(entry)
    if is_sequence(entry):
        return _from_pair(entry)
    if is_mapping(entry):
        return {
            'q': first_present(entry, QUESTION_KEYS, ''),
            'a': first_present(entry, ANSWER_KEYS, ''),
            'img': first_present(entry, IMAGE_KEYS),
        }
    return None
