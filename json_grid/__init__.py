"""Core logic for the JSON Grid viewer.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- parse JSON / JSON5 / JSON Lines text tolerantly
- find the most table-like array anywhere in the document
- normalize that array into grid rows and typed columns
- write single-cell edits back through stable paths
"""
from __future__ import annotations

from .config import DEFAULTS, GridConfig
from .deriving import DerivationOutput, DeriveResult, derive_grid_data
from .parsing import ParseFailure, parse_tolerant

__all__ = [
    "DEFAULTS",
    "DerivationOutput",
    "DeriveResult",
    "GridConfig",
    "ParseFailure",
    "derive_grid_data",
    "parse_tolerant",
]
