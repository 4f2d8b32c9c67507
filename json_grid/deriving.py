from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from .columns import GridColumn, build_columns
from .config import DEFAULTS, GridConfig
from .parsing import parse_tolerant
from .paths import ROOT, Path, format_path
from .rows import GridRow, normalize_rows
from .scoring import select_best_candidate

logger = logging.getLogger(__name__)


@dataclass
class DeriveResult:
    rows: List[GridRow]
    columns: List[GridColumn]
    # Display path (e.g. $.data.items) of the array used
    path: str
    # Same location as segments, for writing edits back
    segments: Path = ROOT
    note: Optional[str] = None
    # Parsed document the array was taken from; treat as read-only
    document: Any = None


@dataclass
class DerivationOutput:
    """Exactly one of three states.

    - data set: a table was derived
    - error set: the text could not be parsed
    - neither: blank input, or nothing table-like in the document
    """

    data: Optional[DeriveResult] = None
    error: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.data is None and self.error is None


def derive_grid_data(text: str, config: GridConfig = DEFAULTS) -> DerivationOutput:
    """Process JSON / JSON5 / JSON Lines text into grid data."""
    if not text or not text.strip():
        return DerivationOutput()

    root, err = parse_tolerant(text)
    if err is not None:
        return DerivationOutput(error=str(err))

    best = select_best_candidate(root, config)
    if best is None:
        logger.debug("No tabular array found")
        return DerivationOutput()

    rows = normalize_rows(best.array, best.stable_keys, best.path, config)
    columns = build_columns(rows)
    path_str = format_path(best.path, config.root_marker)
    logger.debug("Selected %s (%s)", path_str, best.reason)

    data = DeriveResult(
        rows=rows,
        columns=columns,
        path=path_str,
        segments=best.path,
        note=f"Selected array at {path_str}; {best.reason}",
        document=root,
    )
    return DerivationOutput(data=data)
