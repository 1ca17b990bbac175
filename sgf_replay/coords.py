"""SGF coordinate codec.

Axis labels are single letters: ``a..z`` map to ``0..25`` and ``A..Z`` to
``26..51``. A point is two labels, column first: ``"ee"`` is ``(x=4, y=4)``.
"""

from __future__ import annotations

import string
from typing import Iterable, List, Tuple

from .errors import InvalidCoordinate, MalformedCoordinate

Point = Tuple[int, int]

_ALPHABET = string.ascii_lowercase + string.ascii_uppercase
_OFFSETS = {char: offset for offset, char in enumerate(_ALPHABET)}

MAX_AXIS = len(_ALPHABET)


def encode(char: str) -> int:
    """Return the zero-based offset of a coordinate label."""

    try:
        return _OFFSETS[char]
    except (KeyError, TypeError):
        raise InvalidCoordinate(char) from None


def decode(offset: int) -> str:
    if not 0 <= offset < MAX_AXIS:
        raise InvalidCoordinate(offset)
    return _ALPHABET[offset]


def parse_point(text: str) -> Point:
    """Convert an SGF point such as ``"dp"`` to ``(x, y)``."""

    if len(text) < 2:
        raise MalformedCoordinate(text)
    return encode(text[0]), encode(text[1])


def format_point(point: Point) -> str:
    x, y = point
    return decode(x) + decode(y)


def expand_point_list(values: Iterable[str]) -> List[Point]:
    """Expand a point list, including compressed ``"ul:lr"`` rectangles.

    Plain points keep their order. A rectangle yields every point between its
    two corners, row by row.
    """

    points: List[Point] = []
    for value in values:
        if ":" not in value:
            points.append(parse_point(value))
            continue
        first, second = value.split(":", 1)
        x1, y1 = parse_point(first)
        x2, y2 = parse_point(second)
        for y in range(min(y1, y2), max(y1, y2) + 1):
            for x in range(min(x1, x2), max(x1, x2) + 1):
                points.append((x, y))
    return points
