from __future__ import annotations

import json
import logging

from .io_utils import read_text_content
from .reconcile import ImportMode

logger = logging.getLogger(__name__)


def summarize_library(repo):
    packs = repo.list_packs()
    questions = repo.list_questions()
    return {
        'packs': len(packs),
        'questions': len(questions),
        'activePack': repo.active_pack(),
        'selectedCategories': repo.get_selected_categories(),
    }


def import_file_handler(repo, file_obj, mode):
    """Import an uploaded JSON file; returns (status, summary)."""
    try:
        text = read_text_content(file_obj)
    except ValueError as exc:
        return str(exc), None
    except OSError as exc:
        return f"Error reading file: {exc}", None

    before = summarize_library(repo)
    try:
        repo.import_all(text, mode or ImportMode.MERGE.value)
    except json.JSONDecodeError as exc:
        return f"Error parsing JSON: {exc}", None
    except ValueError as exc:
        return str(exc), None

    after = summarize_library(repo)
    status = (
        f"Import successful ({mode or ImportMode.MERGE.value}). "
        f"Packs: {before['packs']} -> {after['packs']} | "
        f"Questions: {before['questions']} -> {after['questions']}."
    )
    return status, after


def export_handler(repo, directory=None):
    try:
        path = repo.write_export(directory)
    except OSError as exc:
        logger.warning("Export failed: %s", exc)
        return None, f"Error during export: {exc}"
    return path, f"Export successful! Saved to {path}"
