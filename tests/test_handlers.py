from __future__ import annotations

import io
import json
from types import SimpleNamespace

import pytest

from json_grid.handlers import (
    EMPTY_MESSAGE,
    PATH_HINT,
    derive_handler,
    edit_handler,
    inspect_handler,
    load_file_handler,
    select_cell_handler,
)
from json_grid.io_utils import read_text_content

OWNERS = '[{"id": 1, "owner": {"name": "Ann", "tags": [1, 2]}}, {"id": 2, "owner": null}]'


class TestDeriveHandler:
    def test_success(self, people_text):
        df, path, note, columns, status = derive_handler(people_text)
        assert list(df.columns) == ["id", "name", "active"]
        assert df.shape == (2, 3)
        assert path == "$"
        assert note.startswith("Selected array at $;")
        assert columns == "id:number, name:string, active:boolean"
        assert status == "Rows: 2, columns: 3"

    def test_parse_error(self):
        df, path, _, _, status = derive_handler('{"a":}')
        assert df.empty
        assert path == ""
        assert status.startswith("Error parsing JSON:")

    @pytest.mark.parametrize("text", [None, "", '{"a": 1}'])
    def test_nothing_to_show(self, text):
        df, path, _, _, status = derive_handler(text)
        assert df.empty
        assert status == EMPTY_MESSAGE

    def test_missing_cells_are_blank(self):
        df = derive_handler('[{"a": 1, "b": 2}, {"a": 3}]')[0]
        assert df.shape == (2, 2)
        assert df["b"].isna().tolist() == [False, True]

    def test_deeply_nested_document(self):
        depth = 150
        text = '{"rows": [{"id": 1}], "deep": ' + "[" * depth + "1" + "]" * depth + "}"
        df, path, _, _, status = derive_handler(text)
        assert path == "$.rows"
        assert status == "Rows: 1, columns: 1"


class TestSelectCellHandler:
    def test_record_cell(self, friends_text):
        path = select_cell_handler(friends_text, SimpleNamespace(index=[2, 1]))
        assert path == "$[2].name"

    def test_value_cell(self):
        assert select_cell_handler("[1, 2, 3]", SimpleNamespace(index=[1, 0])) == "$[1]"

    def test_no_data(self):
        assert select_cell_handler("", SimpleNamespace(index=[0, 0])) == ""


class TestInspectHandler:
    def test_expand_cell(self):
        df, status = inspect_handler(OWNERS, "$[0].owner")
        assert df.values.tolist() == [["name", "Ann", "string"], ["tags", "[2]", "array"]]
        assert status == "$[0].owner: object {2}"

    def test_expand_grandchild(self):
        df, status = inspect_handler(OWNERS, " $[0].owner.tags ")
        assert df.values.tolist() == [[0, 1, "number"], [1, 2, "number"]]
        assert status == "$[0].owner.tags: array [2]"

    def test_expand_row(self):
        df, status = inspect_handler(OWNERS, "$[0]")
        assert df.values.tolist() == [["owner", "{2}", "object"]]
        assert status == "Nested fields of $[0]."

    def test_expand_value_row(self):
        df, _ = inspect_handler('[[1, "a"], [null]]', "$[1]")
        assert df.values.tolist() == [[0, None, "null"]]

    def test_scalar(self):
        df, status = inspect_handler(OWNERS, "$[0].owner.name")
        assert df.empty
        assert status == "$[0].owner.name is not a nested value."

    @pytest.mark.parametrize("relative", ["", "$", "$.owner", "owner"])
    def test_bad_path(self, relative):
        df, status = inspect_handler(OWNERS, relative)
        assert df.empty
        assert status

    def test_path_hint(self):
        _, status = inspect_handler(OWNERS, "$.owner")
        assert status == PATH_HINT

    def test_bad_row(self):
        _, status = inspect_handler(OWNERS, "$[9].owner")
        assert "out of range" in status


class TestEditHandler:
    def test_edit_record_cell(self, people_text):
        text, status = edit_handler(people_text, "$[1].name", "Robert")
        assert status == "Value updated."
        assert json.loads(text)[1] == {"id": 2, "name": "Robert", "active": False}

    def test_edit_keeps_type(self, people_text):
        text, _ = edit_handler(people_text, "$[0].active", "false")
        assert json.loads(text)[0]["active"] is False

    def test_edit_nested_array(self, friends_text):
        text, _ = edit_handler(friends_text, "$[0].id", "10")
        doc = json.loads(text)
        assert doc["friends"][0]["id"] == 10
        assert doc["user"] == "Hartman Tyler"

    def test_edit_nested_scalar(self):
        text, status = edit_handler(OWNERS, "$[0].owner.name", "Anna")
        assert status == "Value updated."
        assert json.loads(text)[0]["owner"] == {"name": "Anna", "tags": [1, 2]}

    def test_edit_deep_array_element(self):
        text, _ = edit_handler(OWNERS, "$[0].owner.tags[1]", "20")
        assert json.loads(text)[0]["owner"]["tags"] == [1, 20]

    def test_edit_value_row(self):
        text, _ = edit_handler('{"xs": [1, 2, 3]}', "$[2]", "30")
        assert json.loads(text) == {"xs": [1, 2, 30]}

    def test_edit_json_lines(self):
        text, _ = edit_handler('{"a":1}\n{"a":2}', "$[0].a", "9")
        assert json.loads(text) == [{"a": 9}, {"a": 2}]

    def test_missing_field(self):
        _, status = edit_handler('[{"a": 1, "b": 2}, {"a": 3}]', "$[1].b", "x")
        assert status.startswith("Error editing value: No value at")

    def test_nested_value_refused(self):
        _, status = edit_handler(OWNERS, "$[0].owner", "x")
        assert status.startswith("Error editing value:")

    def test_row_out_of_range(self, people_text):
        _, status = edit_handler(people_text, "$[5].name", "x")
        assert status == "Error editing value: Row 5 is out of range (0-1)."

    def test_parse_error(self):
        _, status = edit_handler('{"a":}', "$[0].a", "1")
        assert status.startswith("Error parsing JSON:")


class TestLoadFile:
    def test_read_file_object(self):
        assert read_text_content(io.BytesIO('\ufeff[1]'.encode('utf-8'))) == '[1]'

    def test_read_path(self, tmp_path):
        path = tmp_path / "data.jsonl"
        path.write_text('{"a": 1}\n', encoding='utf-8')
        assert read_text_content(str(path)) == '{"a": 1}\n'

    def test_no_file(self):
        with pytest.raises(ValueError):
            read_text_content(None)

    def test_handler(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text('[1, 2]', encoding='utf-8')
        text, status = load_file_handler(str(path))
        assert text == '[1, 2]'
        assert status == "Loaded 6 characters."

    def test_handler_missing_file(self, tmp_path):
        _, status = load_file_handler(str(tmp_path / "nope.json"))
        assert status.startswith("Error reading file:")
