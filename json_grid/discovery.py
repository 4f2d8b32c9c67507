from __future__ import annotations

from typing import Any, Iterator, List, Tuple

from .paths import ROOT, Path
from .values import ValueKind, kind_of


def iter_arrays(root: Any, base_path: Path = ROOT) -> Iterator[Tuple[Path, list]]:
    """Yield (path, array) for every array in `root`, depth-first pre-order.

    An array is yielded before any array nested in its elements. Object fields
    are walked in insertion order, array elements in index order.
    """
    stack: List[Tuple[Path, Any]] = [(base_path, root)]
    while stack:
        path, node = stack.pop()
        kind = kind_of(node)
        if kind is ValueKind.ARRAY:
            yield path, node
            children = [(path + (i,), item) for i, item in enumerate(node)]
        elif kind is ValueKind.OBJECT:
            children = [(path + (k,), v) for k, v in node.items()]
        else:
            continue
        # Reversed so the first child is popped first.
        stack.extend(reversed(children))
