from __future__ import annotations

from typing import List, Tuple, Union

from .config import DEFAULTS

Segment = Union[str, int]
Path = Tuple[Segment, ...]

# The root sentinel is implicit: an empty path addresses the document itself.
ROOT: Path = ()

_SPECIAL = ('\\', '.', '[', ']')


def escape_path_segment(segment: str) -> str:
    """Escape a single key segment for display-path representation.

    - Dots and brackets are escaped so keys like 'gpt-3.5-turbo' or 'a[0]'
      remain one segment.
    - Backslashes are escaped as '\\\\' to preserve round-tripping.
    """
    if not isinstance(segment, str):
        segment = str(segment)
    for ch in _SPECIAL:
        segment = segment.replace(ch, '\\' + ch)
    return segment


def format_path(path: Path, root_marker: str = DEFAULTS.root_marker) -> str:
    """Render a path as '$.data[0].items'.

    Index segments attach to the preceding segment as a bracketed suffix.
    """
    parts: List[str] = [root_marker]
    for segment in path:
        if isinstance(segment, int) and not isinstance(segment, bool):
            parts.append(f"[{segment}]")
        else:
            parts.append('.' + escape_path_segment(segment))
    return ''.join(parts)


def parse_path(text: str, root_marker: str = DEFAULTS.root_marker) -> Path:
    """Invert `format_path`; raises ValueError on malformed input."""
    if text is None or not text.startswith(root_marker):
        raise ValueError(f"Path must start with '{root_marker}': {text!r}")

    segments: List[Segment] = []
    i = len(root_marker)
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == '[':
            end = text.find(']', i)
            if end == -1:
                raise ValueError(f"Unclosed index in path: {text!r}")
            index = text[i + 1:end]
            if not index.isdigit():
                raise ValueError(f"Invalid array index {index!r} in path: {text!r}")
            segments.append(int(index))
            i = end + 1
        elif ch == '.':
            buf: List[str] = []
            i += 1
            while i < n and text[i] not in '.[':
                if text[i] == '\\' and i + 1 < n:
                    buf.append(text[i + 1])
                    i += 2
                    continue
                if text[i] == ']':
                    raise ValueError(f"Unexpected ']' in path: {text!r}")
                buf.append(text[i])
                i += 1
            segments.append(''.join(buf))
        else:
            raise ValueError(f"Unexpected character {ch!r} in path: {text!r}")
    return tuple(segments)
