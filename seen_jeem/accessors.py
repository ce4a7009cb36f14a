from __future__ import annotations

from typing import Any, Sequence

# Candidate keys per logical field, in priority order.
QUESTION_KEYS = ('q', 'Q', 'question', 'text', 'prompt', 'questionText', 'title', 'body', 'name')
ANSWER_KEYS = ('a', 'A', 'answer', 'correct', 'ans', 'answerText', 'solution')
IMAGE_KEYS = ('img', 'image', 'imageUrl', 'imageURL', 'imgUrl', 'photo')
CATEGORY_KEYS = ('category', 'cat')
LEVEL_KEYS = ('level', 'points', 'score')
PACK_KEYS = ('pack',)
ID_KEYS = ('id',)


def first_present(record: Any, keys: Sequence[str], default: Any = None) -> Any:
    """Return the value of the first key in `keys` that is set on `record`.

    A key counts as set when it exists and its value is not None.
    Non-dict records yield `default`.
    """
    if not isinstance(record, dict):
        return default
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return default


def is_sequence(value: Any) -> bool:
    """JSON arrays only; strings and mappings do not count."""
    return isinstance(value, (list, tuple))


def is_mapping(value: Any) -> bool:
    return isinstance(value, dict)
