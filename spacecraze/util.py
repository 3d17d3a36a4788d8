"""Small helpers: random numbers, the high-score file and log formatting."""

from __future__ import annotations

import logging
import random
import re
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger("spacecraze")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def random_int(min_value: int, max_value: int) -> int:
    """Return a random integer between the two bounds, both included.

    When the bounds describe an empty range (``max_value == min_value - 1``)
    the result is 0.
    """
    span = max_value - min_value + 1
    if span == 0:
        return 0
    return min_value + random.randrange(abs(span))


def _parse_leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {value}")
    return value


def read_scores(path: str | Path) -> list[tuple[str, int]]:
    """Read ``name,score`` lines from a high-score file.

    A file that cannot be opened gives an empty list; a line whose score is
    not a number raises ``ValueError``.
    """
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError:
        return []

    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    scores = []
    for line in lines:
        name, comma, rest = line.partition(",")
        score = _parse_leading_int(rest if comma else line)
        scores.append((name, score))
    return scores


def score_value(entry: tuple[str, int]) -> int:
    """Sort key for high-score entries: the score itself."""
    return entry[1]


def _format_number(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


def format_vector(vector: Sequence[float]) -> str:
    """Format a two-component vector as ``(x, y)``."""
    x, y = vector
    return f"({_format_number(x)}, {_format_number(y)})"