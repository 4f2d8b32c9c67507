from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from .config import DEFAULTS, GridConfig
from .paths import ROOT, Path
from .values import MISSING, ValueKind, is_container, is_record, kind_of


class RowKind(str, Enum):
    RECORD = "record"
    VALUE = "value"


def summarize(value: Any) -> Any:
    """Convert nested structures to short printable strings for grid cells."""
    kind = kind_of(value)
    if kind is ValueKind.OBJECT:
        return 'Object'
    if kind is ValueKind.ARRAY:
        return f'Array({len(value)})'
    return value


@dataclass
class NestedValue:
    """An embedded object/array kept out of the primary cells.

    Children are only built when `children()` is called.
    """

    kind: ValueKind
    data: Any
    path: Path

    @property
    def label(self) -> str:
        if self.kind is ValueKind.ARRAY:
            return f'[{len(self.data)}]'
        return f'{{{len(self.data)}}}'

    def children(self) -> Iterator['GridRow']:
        items = enumerate(self.data) if self.kind is ValueKind.ARRAY else self.data.items()
        for key, value in items:
            yield _secondary_row(key, value, self.path + (key,))


def wrap_nested(value: Any, path: Path) -> NestedValue:
    return NestedValue(kind_of(value), value, path)


@dataclass
class GridRow:
    cells: Dict[str, Any]
    kind: RowKind
    path: Path
    nested: Dict[str, NestedValue] = field(default_factory=dict)
    is_primary: bool = True

    def secondary_rows(self) -> Iterator['GridRow']:
        """One (key, summary) row per nested field, expandable further."""
        for key, nested in self.nested.items():
            yield _secondary_row(key, nested.data, nested.path)

    def find_nested(self, path: Path) -> Optional[NestedValue]:
        """Walk this row's nested values down to the container stored at `path`.

        `path` is a document path below the row. Returns None when it runs into
        a scalar or a key that does not exist.
        """
        nested = next((n for n in self.nested.values() if path[:len(n.path)] == n.path), None)
        while nested is not None and nested.path != path:
            step = path[len(nested.path)]
            nested = next(
                (c.nested.get('value') for c in nested.children() if c.cells['key'] == step),
                None,
            )
        return nested

    def to_record(self) -> Dict[str, Any]:
        """Plain dict of cell values with undefined cells as None."""
        return {k: (None if v is MISSING else v) for k, v in self.cells.items()}


def _secondary_row(key: Any, value: Any, path: Path) -> GridRow:
    row = GridRow({'key': key, 'value': summarize(value)}, RowKind.RECORD, path, is_primary=False)
    if is_container(value):
        row.nested['value'] = wrap_nested(value, path)
    return row


def _value_row(value: Any, path: Path, config: GridConfig) -> GridRow:
    row = GridRow({config.value_column: summarize(value)}, RowKind.VALUE, path)
    if is_container(value):
        row.nested[config.value_column] = wrap_nested(value, path)
    return row


def _record_row(obj: Dict[str, Any], keys: List[str], path: Path) -> GridRow:
    row = GridRow({}, RowKind.RECORD, path)
    for key in dict.fromkeys([*keys, *obj]):
        if key not in obj:
            row.cells[key] = MISSING
            continue
        value = obj[key]
        if is_container(value):
            row.cells[key] = summarize(value)
            row.nested[key] = wrap_nested(value, path + (key,))
        else:
            row.cells[key] = value
    return row


def normalize_rows(
    arr: List[Any],
    stable_keys: List[str],
    base_path: Path = ROOT,
    config: GridConfig = DEFAULTS,
) -> List[GridRow]:
    """Convert the selected array into one primary row per element.

    With the synthetic value column every element becomes a VALUE row. Otherwise
    objects become RECORD rows over stable keys first, then their own keys;
    any other element degrades to a VALUE row on its own.
    """
    if stable_keys == [config.value_column]:
        return [_value_row(v, base_path + (i,), config) for i, v in enumerate(arr)]

    rows: List[GridRow] = []
    for i, item in enumerate(arr):
        path = base_path + (i,)
        if is_record(item):
            rows.append(_record_row(item, stable_keys, path))
        else:
            rows.append(_value_row(item, path, config))
    return rows
