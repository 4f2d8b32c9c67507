from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .config import DEFAULTS, GridConfig
from .discovery import iter_arrays
from .paths import Path
from .values import is_record

logger = logging.getLogger(__name__)


@dataclass
class ArrayScore:
    score: float
    reason: str
    stable_keys: List[str] = field(default_factory=list)


@dataclass
class ArrayCandidate:
    path: Path
    array: list
    score: float
    reason: str
    stable_keys: List[str]


def score_array(arr: List[Any], config: GridConfig = DEFAULTS) -> ArrayScore:
    """Score how table-like an array is.

    Shape (share of objects in the sample) dominates, the number of stable keys
    comes second and length only breaks near-ties.
    """
    if not arr:
        return ArrayScore(0.0, 'empty', [])

    sample_count = min(len(arr), config.sample_size)
    object_count = 0
    key_freq: Dict[str, int] = {}

    for item in arr[:sample_count]:
        if is_record(item):
            object_count += 1
            for key in item:
                key_freq[key] = key_freq.get(key, 0) + 1

    size_term = math.log10(len(arr) + 1)
    if object_count == 0:
        return ArrayScore(1 + size_term, 'primitive-array', [config.value_column])

    threshold = math.ceil(sample_count * config.stable_key_ratio)
    keys = [k for k, n in key_freq.items() if n >= threshold]

    ratio = object_count / sample_count
    score = (
        ratio * config.shape_weight
        + len(keys) * config.key_weight
        + size_term * config.size_weight
    )
    reason = f"objects={object_count}/{sample_count}, keys={len(keys)}, len={len(arr)}"
    return ArrayScore(score, reason, keys if keys else list(key_freq))


def rank_candidates(root: Any, config: GridConfig = DEFAULTS) -> List[ArrayCandidate]:
    """Score every array in the document, best first.

    Zero-score arrays are dropped. The sort is stable, so on equal scores the
    array discovered first wins.
    """
    candidates: List[ArrayCandidate] = []
    for path, arr in iter_arrays(root):
        result = score_array(arr, config)
        if result.score > 0:
            candidates.append(
                ArrayCandidate(path, arr, result.score, result.reason, result.stable_keys)
            )
    candidates.sort(key=lambda c: c.score, reverse=True)
    logger.debug("Scored %d candidate arrays", len(candidates))
    return candidates


def select_best_candidate(root: Any, config: GridConfig = DEFAULTS) -> Optional[ArrayCandidate]:
    candidates = rank_candidates(root, config)
    return candidates[0] if candidates else None
