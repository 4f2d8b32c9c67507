import logging

import gradio as gr

from json_grid.handlers import (
    derive_handler,
    edit_handler,
    inspect_handler,
    load_file_handler,
    select_cell_handler,
)

# --- UI Definition ---
with gr.Blocks(title="JSON Grid") as demo:
    gr.Markdown("# JSON Grid")
    gr.Markdown("Paste or upload JSON, JSON5 or JSON Lines. The most table-like array is shown as a grid.")

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Input")
            file_input = gr.File(label="Open JSON File", file_types=[".json", ".json5", ".jsonl", ".txt"])
            text_input = gr.Code(label="JSON", language="json", lines=24)
            status_msg = gr.Textbox(label="Status", interactive=False)

        # Right Panel: Grid
        with gr.Column(scale=2):
            gr.Markdown("### 2. Grid")
            path_box = gr.Textbox(label="Array Path", interactive=False)
            note_box = gr.Textbox(label="Selection Note", interactive=False)
            columns_box = gr.Textbox(label="Columns", interactive=False)
            grid = gr.Dataframe(label="Rows", interactive=False, wrap=True)

            gr.Markdown("### 3. Inspect & Edit")
            gr.Markdown("Click a cell, or type a path below the array such as `$[0].owner.roles[0]`.")
            path_input = gr.Textbox(label="Path", placeholder="$[0].name")
            inspect_btn = gr.Button("Expand Nested Value")
            nested_table = gr.Dataframe(label="Nested Value", headers=["key", "value", "type"], interactive=False)
            new_value = gr.Textbox(label="New Value")
            edit_btn = gr.Button("Update Value", variant="primary")

    file_input.upload(
        fn=load_file_handler,
        inputs=[file_input],
        outputs=[text_input, status_msg],
    )

    # always_last drops derivations for text that has already changed again.
    text_input.change(
        fn=derive_handler,
        inputs=[text_input],
        outputs=[grid, path_box, note_box, columns_box, status_msg],
        trigger_mode="always_last",
    )

    grid.select(
        fn=select_cell_handler,
        inputs=[text_input],
        outputs=[path_input],
    )

    inspect_btn.click(
        fn=inspect_handler,
        inputs=[text_input, path_input],
        outputs=[nested_table, status_msg],
    )

    edit_btn.click(
        fn=edit_handler,
        inputs=[text_input, path_input, new_value],
        outputs=[text_input, status_msg],
    )

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    demo.launch()
