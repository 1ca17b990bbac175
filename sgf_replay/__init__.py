"""Replay SGF game records and analyse stone groups."""

from .board import Board, Color, GridSize
from .errors import (
    CoordinateOutOfBounds,
    InvalidColor,
    InvalidCoordinate,
    InvalidRecord,
    MalformedCoordinate,
    MissingBoardSize,
    PathNotFound,
    ReplayError,
    UnsupportedGame,
)
from .groups import connection_graph, groups_for, groups_to_move, neighbors
from .instructions import Move, NextPlayer, Pass, Setup, collect_instructions, extract_instructions
from .path import Direction, GamePath, resolve, resolve_line
from .record import GameRecord, RecordNode, load_sgf, parse_sgf
from .replay import apply_instructions, reconstruct
from .session import GameSession

__all__ = [
    "Board",
    "Color",
    "GridSize",
    "GameRecord",
    "RecordNode",
    "load_sgf",
    "parse_sgf",
    "GamePath",
    "Direction",
    "resolve",
    "resolve_line",
    "Setup",
    "Move",
    "Pass",
    "NextPlayer",
    "extract_instructions",
    "collect_instructions",
    "apply_instructions",
    "reconstruct",
    "neighbors",
    "connection_graph",
    "groups_for",
    "groups_to_move",
    "GameSession",
    "ReplayError",
    "InvalidCoordinate",
    "MalformedCoordinate",
    "InvalidColor",
    "PathNotFound",
    "CoordinateOutOfBounds",
    "MissingBoardSize",
    "UnsupportedGame",
    "InvalidRecord",
]
