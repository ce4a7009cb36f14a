import logging
from functools import partial

import gradio as gr

from seen_jeem.config import AppConfig
from seen_jeem.handlers_library import (
    PACK_HEADERS,
    QUESTION_HEADERS,
    activate_pack_handler,
    add_pack_handler,
    add_question_handler,
    build_pack_rows,
    delete_category_handler,
    delete_pack_handler,
    delete_question_handler,
    refresh_library,
    save_team_names_handler,
)
from seen_jeem.handlers_transfer import export_handler, import_file_handler, summarize_library
from seen_jeem.repository import TriviaRepository
from seen_jeem.storage import JsonFileStore

config = AppConfig.from_env()
logging.basicConfig(level=config.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

repo = TriviaRepository(JsonFileStore(config.store_path))
repo.init_defaults()

# --- UI Definition ---
with gr.Blocks(title="Seen Jeem Library") as demo:
    gr.Markdown("# Seen Jeem Library")
    gr.Markdown("Import question packs from any export version, edit them, and export a backup.")

    with gr.Tab("Import / Export"):
        with gr.Row():
            with gr.Column(scale=1):
                gr.Markdown("### 1. Import")
                import_file = gr.File(label="Upload JSON Export", file_types=[".json"])
                import_mode = gr.Radio(choices=["merge", "replace"], value="merge", label="Import Mode")
                import_btn = gr.Button("Import", variant="primary")
                import_status = gr.Textbox(label="Status", interactive=False)

            with gr.Column(scale=1):
                gr.Markdown("### 2. Export")
                export_btn = gr.Button("Export Library")
                export_download = gr.File(label="Download Export")
                export_status = gr.Textbox(label="Export Status", interactive=False)
                library_summary = gr.JSON(label="Library", value=summarize_library(repo))

        import_btn.click(
            fn=partial(import_file_handler, repo),
            inputs=[import_file, import_mode],
            outputs=[import_status, library_summary],
        )

        export_btn.click(
            fn=partial(export_handler, repo),
            inputs=[],
            outputs=[export_download, export_status],
        )

    with gr.Tab("Packs"):
        packs_table = gr.Dataframe(
            headers=PACK_HEADERS,
            datatype=["str", "str", "str", "number"],
            value=build_pack_rows(repo),
            interactive=False,
            label="Packs",
        )
        with gr.Row():
            with gr.Column():
                new_pack_name = gr.Textbox(label="Pack Name")
                new_pack_category = gr.Textbox(label="Category (optional)")
                add_pack_btn = gr.Button("Add Pack", variant="primary")
            with gr.Column():
                pack_selector = gr.Dropdown(label="Pack", choices=[], interactive=True)
                delete_pack_btn = gr.Button("Delete Pack", variant="stop")
                category_to_delete = gr.Textbox(label="Category")
                delete_category_btn = gr.Button("Delete Category", variant="stop")
        packs_status = gr.Textbox(label="Status", interactive=False)
        refresh_btn = gr.Button("Refresh")

        gr.Markdown("### Teams")
        with gr.Row():
            team_names = repo.get_team_names()
            team_a = gr.Textbox(label="Team A", value=team_names["teamA"])
            team_b = gr.Textbox(label="Team B", value=team_names["teamB"])
        save_teams_btn = gr.Button("Save Teams")
        teams_status = gr.Textbox(label="Teams Status", interactive=False)

        add_pack_btn.click(
            fn=partial(add_pack_handler, repo),
            inputs=[new_pack_name, new_pack_category],
            outputs=[packs_status, packs_table, pack_selector],
        )
        delete_pack_btn.click(
            fn=partial(delete_pack_handler, repo),
            inputs=[pack_selector],
            outputs=[packs_status, packs_table, pack_selector],
        )
        delete_category_btn.click(
            fn=partial(delete_category_handler, repo),
            inputs=[category_to_delete],
            outputs=[packs_status, packs_table, pack_selector],
        )
        refresh_btn.click(fn=partial(refresh_library, repo), inputs=[], outputs=[packs_table, pack_selector])
        save_teams_btn.click(
            fn=partial(save_team_names_handler, repo),
            inputs=[team_a, team_b],
            outputs=[teams_status],
        )

    with gr.Tab("Questions"):
        question_pack = gr.Dropdown(label="Pack", choices=[], interactive=True)
        questions_table = gr.Dataframe(
            headers=QUESTION_HEADERS,
            datatype=["str", "str", "number", "str", "str", "str"],
            interactive=False,
            label="Questions",
        )
        with gr.Row():
            with gr.Column():
                question_category = gr.Textbox(label="Category")
                question_level = gr.Number(label="Level", value=100, precision=0)
                question_text = gr.Textbox(label="Question", lines=2)
                answer_text = gr.Textbox(label="Answer")
                question_image = gr.File(label="Image (optional)", file_types=["image"])
                add_question_btn = gr.Button("Add Question", variant="primary")
            with gr.Column():
                question_id = gr.Textbox(label="Question ID")
                delete_question_btn = gr.Button("Delete Question", variant="stop")
        questions_status = gr.Textbox(label="Status", interactive=False)

        question_pack.change(
            fn=partial(activate_pack_handler, repo),
            inputs=[question_pack],
            outputs=[questions_table],
        )
        add_question_btn.click(
            fn=partial(add_question_handler, repo),
            inputs=[question_pack, question_category, question_level, question_text, answer_text, question_image],
            outputs=[questions_status, questions_table],
        )
        delete_question_btn.click(
            fn=partial(delete_question_handler, repo),
            inputs=[question_id, question_pack],
            outputs=[questions_status, questions_table],
        )

    demo.load(fn=partial(refresh_library, repo), inputs=[], outputs=[packs_table, pack_selector])
    demo.load(fn=partial(refresh_library, repo), inputs=[], outputs=[packs_table, question_pack])

if __name__ == "__main__":
    demo.launch()
