from __future__ import annotations

import hashlib
import random
import re
import string
import time
from typing import Any, Iterable

_UNSAFE_RUN = re.compile(r"[^a-z0-9\u0600-\u06ff]+")
_SUFFIX_ALPHABET = string.digits + string.ascii_lowercase


def slugify(name: Any) -> str:
    """Turn a display name into a storage-safe identifier.

    Runs of characters outside ASCII lowercase letters, digits and the
    Arabic block collapse to a single '-'; edge dashes are dropped.
    Applying it to its own output returns the same string.
    """
    if name is None:
        return ''
    if not isinstance(name, str):
        name = str(name)
    return _UNSAFE_RUN.sub('-', name.lower()).strip('-')


def random_suffix(length: int = 4) -> str:
    return ''.join(random.choice(_SUFFIX_ALPHABET) for _ in range(length))


def stable_suffix(parts: Iterable[Any], length: int = 4) -> str:
    """Suffix derived from content, so the same input yields the same id."""
    digest = hashlib.sha1('\x1f'.join(str(p) for p in parts).encode('utf-8')).hexdigest()
    return digest[:length]


def synth_pack_id(name: Any, seed_parts: Iterable[Any] = (), stable: bool = False) -> str:
    base = slugify(name) or 'pack'
    suffix = stable_suffix([base, *seed_parts]) if stable else random_suffix()
    return f"{base}-{suffix}"


def legacy_pack_id(category: Any, index: int) -> str:
    """Pack id for the index-th (0-based) pack of a legacy category."""
    return f"{slugify(category) or 'cat'}-{index + 1:02d}"


def new_question_id() -> str:
    return f"q_{int(time.time() * 1000)}_{random.randrange(1_000_000)}"


def synth_question_id(seed_parts: Iterable[Any] = (), stable: bool = False) -> str:
    if not stable:
        return new_question_id()
    return 'q_' + stable_suffix(seed_parts, length=16)
