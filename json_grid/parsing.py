from __future__ import annotations

import json
import logging
import re
from typing import Any, List, Optional, Tuple

import json5

logger = logging.getLogger(__name__)

_LINE_SPLIT = re.compile(r"\r?\n")

# json5 parses recursively and gives up far earlier than the json module.
_PARSE_ERRORS = (ValueError, RecursionError)


class ParseFailure(ValueError):
    """Returned when text is neither JSON, JSON5 nor JSON Lines."""


def _split_lines(text: str) -> List[str]:
    return [line.strip() for line in _LINE_SPLIT.split(text) if line.strip()]


def _parse_lines(lines: List[str]) -> Tuple[List[Any], Optional[Exception]]:
    values: List[Any] = []
    last_error: Optional[Exception] = None
    for line in lines:
        try:
            values.append(json5.loads(line))
        except _PARSE_ERRORS as e:
            last_error = e
    return values, last_error


def _describe(error: Exception) -> str:
    if isinstance(error, RecursionError):
        return f"Document is nested too deeply to parse ({error})"
    return str(error)


def parse_tolerant(text: str) -> Tuple[Any, Optional[ParseFailure]]:
    """Parse `text` as JSON5, then strict JSON, then JSON Lines.

    Returns a (value, error) pair; exactly one side is meaningful. Lines that
    fail in JSON Lines mode are dropped as long as at least one line parses.
    """
    try:
        return json5.loads(text), None
    except _PARSE_ERRORS as first_error:
        logger.debug("JSON5 parse failed: %s", first_error)
        try:
            return json.loads(text), None
        except _PARSE_ERRORS:
            pass

        lines = _split_lines(text)
        if len(lines) > 1:
            values, last_error = _parse_lines(lines)
            if values:
                logger.debug("Recovered %d of %d lines as JSON Lines", len(values), len(lines))
                return values, None
            if last_error is not None:
                return None, ParseFailure(
                    f"Failed to parse as JSON or JSONL. Last line error: {_describe(last_error)}"
                )
        return None, ParseFailure(_describe(first_error))
