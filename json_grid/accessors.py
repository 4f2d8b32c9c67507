from __future__ import annotations

import json
from copy import deepcopy
from typing import Any, Optional

import json5

from .paths import Path
from .values import ValueKind, kind_of


class PathError(LookupError):
    """A path does not address a location in the document."""


def get_value_at(data: Any, path: Path) -> Any:
    """Retrieve the value at an exact key/index path."""
    val = data
    for depth, segment in enumerate(path):
        try:
            if isinstance(val, dict) and isinstance(segment, str):
                val = val[segment]
            elif isinstance(val, list) and isinstance(segment, int):
                val = val[segment]
            else:
                raise PathError(f"Cannot step into {kind_of(val).value} with {segment!r}")
        except (KeyError, IndexError) as e:
            raise PathError(f"No value at {path[:depth + 1]!r}") from e
    return val


def set_value_at(data: Any, path: Path, value: Any) -> Any:
    """Return a copy of `data` with the value at `path` replaced.

    The input document is left untouched. An empty path replaces the root.
    """
    if not path:
        return value

    updated = deepcopy(data)
    parent = get_value_at(updated, path[:-1])
    last = path[-1]
    if isinstance(parent, dict) and isinstance(last, str):
        if last not in parent:
            raise PathError(f"No value at {path!r}")
        parent[last] = value
    elif isinstance(parent, list) and isinstance(last, int):
        if not -len(parent) <= last < len(parent):
            raise PathError(f"No value at {path!r}")
        parent[last] = value
    else:
        raise PathError(f"Cannot step into {kind_of(parent).value} with {last!r}")
    return updated


def coerce_edit_value(raw: Any, current: Any) -> Any:
    """Convert edited cell text to the type of the value it replaces.

    Text that does not fit the current type is kept as a string.
    """
    if not isinstance(raw, str):
        return raw

    kind = kind_of(current)
    text = raw.strip()
    if kind is ValueKind.BOOLEAN and text.lower() in ('true', 'false'):
        return text.lower() == 'true'
    if kind is ValueKind.NUMBER:
        try:
            number = json5.loads(text)
        except ValueError:
            return raw
        if kind_of(number) is ValueKind.NUMBER:
            return number
        return raw
    if kind is ValueKind.NULL and text in ('', 'null'):
        return None
    return raw


def cell_path(array_path: Path, row_index: int, column_key: Optional[str]) -> Path:
    """Document path of one grid cell; `None` addresses the whole element."""
    if column_key is None:
        return array_path + (row_index,)
    return array_path + (row_index, column_key)


def apply_edit(data: Any, path: Path, raw: Any) -> Any:
    """Write an edited scalar at any depth back into a copy of the document."""
    current = get_value_at(data, path)
    if kind_of(current) in (ValueKind.ARRAY, ValueKind.OBJECT):
        raise PathError(f"Value at {path!r} is not a scalar")
    return set_value_at(data, path, coerce_edit_value(raw, current))


def serialize_document(data: Any, indent: Optional[int] = 2) -> str:
    return json.dumps(data, indent=indent, ensure_ascii=False)
