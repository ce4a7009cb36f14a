from __future__ import annotations

import gradio as gr

from .io_utils import file_to_data_url

PACK_HEADERS = ["ID", "Name", "Category", "Questions"]
QUESTION_HEADERS = ["ID", "Category", "Level", "Question", "Answer", "Image"]


def build_pack_rows(repo):
    questions = repo.list_questions()
    rows = []
    for pack in repo.list_packs():
        count = sum(1 for q in questions if q.get('pack') == pack.get('id'))
        rows.append([pack.get('id'), pack.get('name'), pack.get('category') or "", count])
    return rows


def build_question_rows(repo, pack_id):
    if not pack_id:
        return []
    return [
        [q.get('id'), q.get('category'), q.get('level'), q.get('q'), q.get('a'), "yes" if q.get('img') else ""]
        for q in repo.list_questions_by_pack(pack_id)
    ]


def pack_dropdown_update(repo, selected=None):
    choices = [p.get('id') for p in repo.list_packs()]
    value = selected if selected in choices else repo.active_pack()
    if value not in choices:
        value = choices[0] if choices else None
    return gr.update(choices=choices, value=value)


def refresh_library(repo):
    return build_pack_rows(repo), pack_dropdown_update(repo)


def add_pack_handler(repo, name, category):
    name = (name or "").strip()
    if not name:
        return "Enter a pack name.", build_pack_rows(repo), pack_dropdown_update(repo)
    try:
        pack_id = repo.add_pack(name, (category or "").strip() or None)
    except ValueError as exc:
        return str(exc), build_pack_rows(repo), pack_dropdown_update(repo)
    return f"Added pack {pack_id}.", build_pack_rows(repo), pack_dropdown_update(repo, pack_id)


def delete_pack_handler(repo, pack_id):
    if not pack_id:
        return "Select a pack.", build_pack_rows(repo), pack_dropdown_update(repo)
    try:
        repo.delete_pack(pack_id)
    except ValueError as exc:
        return str(exc), build_pack_rows(repo), pack_dropdown_update(repo, pack_id)
    return f"Deleted pack {pack_id}.", build_pack_rows(repo), pack_dropdown_update(repo)


def activate_pack_handler(repo, pack_id):
    if pack_id:
        repo.set_active_pack(pack_id)
    return build_question_rows(repo, pack_id)


def add_question_handler(repo, pack_id, category, level, question, answer, image_file=None):
    if not (question or "").strip():
        return "Question text is required.", build_question_rows(repo, pack_id)

    img = None
    if image_file is not None:
        path = image_file.name if hasattr(image_file, 'name') else image_file
        try:
            img = file_to_data_url(path)
        except OSError as exc:
            return f"Error reading image: {exc}", build_question_rows(repo, pack_id)

    item = repo.add_question({
        'pack': pack_id,
        'category': (category or "").strip(),
        'level': level,
        'q': question,
        'a': answer,
        'img': img,
    })
    return f"Added question {item['id']}.", build_question_rows(repo, pack_id)


def delete_question_handler(repo, question_id, pack_id):
    question_id = (question_id or "").strip()
    if not question_id:
        return "Enter a question ID.", build_question_rows(repo, pack_id)
    repo.delete_question(question_id)
    return f"Deleted question {question_id}.", build_question_rows(repo, pack_id)


def save_team_names_handler(repo, team_a, team_b):
    repo.set_team_names({'teamA': (team_a or "").strip(), 'teamB': (team_b or "").strip()})
    names = repo.get_team_names()
    return f"Teams: {names['teamA']} / {names['teamB']}"


def delete_category_handler(repo, category):
    category = (category or "").strip()
    if not category:
        return "Enter a category.", build_pack_rows(repo), pack_dropdown_update(repo)
    repo.delete_category(category)
    return f"Deleted category {category}.", build_pack_rows(repo), pack_dropdown_update(repo)
