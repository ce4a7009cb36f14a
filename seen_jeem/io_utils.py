from __future__ import annotations

import base64
import json
import mimetypes
import os
import tempfile
from pathlib import Path

from .config import EXPORT_FILENAME


def read_text_content(upload) -> str:
    """Text of a Gradio upload: a path, a tempfile wrapper or an open file."""
    if upload is None:
        raise ValueError("No file uploaded.")
    if hasattr(upload, 'read'):
        raw = upload.read()
        return raw.decode('utf-8-sig') if isinstance(raw, bytes) else raw
    return Path(getattr(upload, 'name', upload)).read_text(encoding='utf-8-sig')


def dump_export(payload) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)


def write_export(payload, directory=None, file_name: str = EXPORT_FILENAME) -> str:
    """Write the export payload as pretty-printed JSON and return its path."""
    directory = directory or tempfile.gettempdir()
    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, file_name)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(dump_export(payload))
    return path


def file_to_data_url(path) -> str:
    """Encode an image file as a data: URL for a question's `img` field."""
    mime, _ = mimetypes.guess_type(str(path))
    with open(path, 'rb') as f:
        encoded = base64.b64encode(f.read()).decode('ascii')
    return f"data:{mime or 'application/octet-stream'};base64,{encoded}"
