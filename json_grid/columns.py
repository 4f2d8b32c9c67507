from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List

from .rows import GridRow
from .values import MISSING, ValueKind, kind_of

# e.g. "2023-01-01", "2023-01-01T10:00:00Z", "2023-01-01 10:00:00.123+02:00"
DATE_PATTERN = re.compile(
    r'^\d{4}-\d{2}-\d{2}([T\s]\d{2}:\d{2}:\d{2}(\.\d{1,3})?([+-]\d{2}:\d{2}|Z)?)?$',
    re.ASCII,
)


@dataclass
class GridColumn:
    key: str
    type: str


def infer_type(value: Any) -> str:
    """Heuristic: determine scalar-ish type for grid presentation."""
    if value is MISSING:
        return 'undefined'
    kind = kind_of(value)
    if kind is ValueKind.STRING:
        return 'date' if DATE_PATTERN.fullmatch(value) else 'string'
    return kind.value


def build_columns(rows: List[GridRow]) -> List[GridColumn]:
    """Ordered union of primary-row keys, each typed by its first defined value."""
    primary = [r for r in rows if r.is_primary]
    types: Dict[str, str] = {}
    for row in primary:
        for key in row.cells:
            types.setdefault(key, 'undefined')

    for key in types:
        for row in primary:
            value = row.cells.get(key, MISSING)
            if value is not MISSING:
                types[key] = infer_type(value)
                break

    return [GridColumn(key, t) for key, t in types.items()]
