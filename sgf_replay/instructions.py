"""Typed board instructions extracted from SGF node properties."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from .board import Color, GridSize
from .coords import Point, expand_point_list, parse_point
from .path import resolve_line
from .record import GameRecord, RecordNode

# Boards up to 19x19 may also encode a pass as "tt".
_LEGACY_PASS = "tt"
_LEGACY_PASS_LIMIT = 19


@dataclass(frozen=True)
class Setup:
    """Place a stone, or clear the point when ``color`` is None (AE)."""

    position: Point
    color: Optional[Color]


@dataclass(frozen=True)
class Move:
    position: Point
    color: Color


@dataclass(frozen=True)
class Pass:
    color: Color


@dataclass(frozen=True)
class NextPlayer:
    color: Color


Instruction = Union[Setup, Move, Pass, NextPlayer]

# Within one node: setups first, then the player override, then moves.
_SETUP_PROPERTIES = (("AW", Color.WHITE), ("AB", Color.BLACK), ("AE", None))
_MOVE_PROPERTIES = (("W", Color.WHITE), ("B", Color.BLACK))


def _is_pass(value: str, size: Optional[GridSize]) -> bool:
    if value == "":
        return True
    return (
        value == _LEGACY_PASS
        and size is not None
        and size.width <= _LEGACY_PASS_LIMIT
        and size.height <= _LEGACY_PASS_LIMIT
    )


def extract_instructions(node: RecordNode, size: Optional[GridSize] = None) -> List[Instruction]:
    """Convert one node's properties into instructions, in application order.

    Annotation properties (KO, MN, BM, TE, ...) never produce instructions.
    """

    instructions: List[Instruction] = []
    for key, color in _SETUP_PROPERTIES:
        for point in expand_point_list(node.get_points(key)):
            instructions.append(Setup(point, color))

    next_player = node.get_color("PL")
    if next_player is not None:
        instructions.append(NextPlayer(next_player))

    for key, color in _MOVE_PROPERTIES:
        value = node.get_point(key)
        if value is None:
            continue
        if _is_pass(value, size):
            instructions.append(Pass(color))
        else:
            instructions.append(Move(parse_point(value), color))
    return instructions


def collect_instructions(record: GameRecord, path: Iterable[int]) -> List[Instruction]:
    """Concatenate the instructions of every node from the root to ``path``."""

    line = resolve_line(record, path)
    size = record.size
    instructions: List[Instruction] = []
    for node in line:
        instructions.extend(extract_instructions(node, size))
    return instructions
