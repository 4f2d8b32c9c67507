from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GridConfig:
    # Array scoring
    sample_size: int = 50
    # A key is "stable" when present in at least this share of sampled objects.
    stable_key_ratio: float = 0.4
    shape_weight: float = 70.0
    key_weight: float = 5.0
    size_weight: float = 10.0
    # Presentation
    value_column: str = "value"
    root_marker: str = "$"


# Global defaults used across modules
DEFAULTS = GridConfig()
