from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

import gradio as gr
import pandas as pd

from .accessors import apply_edit, cell_path, serialize_document
from .deriving import DerivationOutput, DeriveResult, derive_grid_data
from .io_utils import read_text_content
from .paths import ROOT, Path, format_path, parse_path
from .rows import GridRow, RowKind
from .values import kind_of

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "Paste JSON that contains an array of records, e.g. [{...}, {...}]."
PATH_HINT = "Enter a path below the grid's array, e.g. $[0].owner.name"
INSPECT_HEADERS = ["key", "value", "type"]


def grid_to_dataframe(result: Optional[DeriveResult]) -> pd.DataFrame:
    if result is None:
        return pd.DataFrame()
    keys = [c.key for c in result.columns]
    records = [r.to_record() for r in result.rows if r.is_primary]
    return pd.DataFrame(records, columns=keys)


def describe_columns(result: Optional[DeriveResult]) -> str:
    if result is None:
        return ""
    return ", ".join(f"{c.key}:{c.type}" for c in result.columns)


def status_text(output: DerivationOutput) -> str:
    if output.error is not None:
        return f"Error parsing JSON: {output.error}"
    if output.is_empty:
        return EMPTY_MESSAGE
    return f"Rows: {len(output.data.rows)}, columns: {len(output.data.columns)}"


def derive_handler(text: str):
    output = derive_grid_data(text or "")
    result = output.data
    return (
        grid_to_dataframe(result),
        result.path if result else "",
        result.note if result else "",
        describe_columns(result),
        status_text(output),
    )


def load_file_handler(file_obj):
    if file_obj is None:
        return gr.update(), "No file uploaded."
    try:
        text = read_text_content(file_obj)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        return gr.update(), f"Error reading file: {str(e)}"
    return text, f"Loaded {len(text)} characters."


def _resolve(result: DeriveResult, relative: str) -> Tuple[GridRow, Path]:
    """Map a path relative to the selected array to its row and document path."""
    segments = parse_path((relative or "").strip())
    if not segments or not isinstance(segments[0], int):
        raise ValueError(PATH_HINT)
    index = segments[0]
    if not 0 <= index < len(result.rows):
        raise IndexError(f"Row {index} is out of range (0-{len(result.rows) - 1}).")
    return result.rows[index], result.segments + segments


def _children_table(rows: Iterable[GridRow]) -> pd.DataFrame:
    data = []
    for child in rows:
        nested = child.nested.get('value')
        if nested is not None:
            data.append([child.cells['key'], nested.label, nested.kind.value])
        else:
            value = child.cells['value']
            data.append([child.cells['key'], value, kind_of(value).value])
    return pd.DataFrame(data, columns=INSPECT_HEADERS)


def select_cell_handler(text: str, evt: gr.SelectData):
    """Fill the path box with the relative path of the clicked grid cell."""
    output = derive_grid_data(text or "")
    if output.data is None or evt.index is None:
        return ""
    row_index, column_index = evt.index
    row = output.data.rows[row_index]
    if row.kind is RowKind.VALUE:
        return format_path(cell_path(ROOT, row_index, None))
    return format_path(cell_path(ROOT, row_index, output.data.columns[column_index].key))


def inspect_handler(text: str, relative: str):
    """Expand the nested value at a relative path into a key/value table."""
    empty = pd.DataFrame(columns=INSPECT_HEADERS)
    output = derive_grid_data(text or "")
    if output.data is None:
        return empty, status_text(output)
    try:
        row, path = _resolve(output.data, relative)
    except (IndexError, ValueError) as e:
        return empty, str(e)

    label = format_path(path[len(output.data.segments):])
    if path == row.path and row.kind is RowKind.RECORD:
        return _children_table(row.secondary_rows()), f"Nested fields of {label}."
    nested = row.find_nested(path)
    if nested is None:
        return empty, f"{label} is not a nested value."
    return _children_table(nested.children()), f"{label}: {nested.kind.value} {nested.label}"


def edit_handler(text: str, relative: str, new_value: str):
    """Write one edited scalar, at any depth, back into the document text."""
    output = derive_grid_data(text or "")
    if output.data is None:
        return gr.update(), status_text(output)

    try:
        _, path = _resolve(output.data, relative)
        updated = apply_edit(output.data.document, path, new_value)
    except (LookupError, ValueError) as e:
        return gr.update(), f"Error editing value: {str(e)}"

    logger.info("Edited %s at %s", output.data.path, format_path(path))
    return serialize_document(updated), "Value updated."
