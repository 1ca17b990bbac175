"""Rebuild the board position at any node of a game record."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .board import Board, Color, GridSize
from .instructions import Instruction, Move, NextPlayer, Pass, Setup, collect_instructions
from .record import GameRecord

logger = logging.getLogger(__name__)


def apply_instructions(
    size: GridSize,
    instructions: Iterable[Instruction],
    initial_player: Color = Color.BLACK,
) -> Board:
    """Fold instructions over an empty grid; later writes to a cell win.

    No captures are removed and no move is checked for legality.
    """

    board = Board(size, next_player=initial_player)
    for instruction in instructions:
        if isinstance(instruction, Setup):
            board.place(instruction.position, instruction.color)
        elif isinstance(instruction, Move):
            board.place(instruction.position, instruction.color)
            board.next_player = instruction.color.opponent
        elif isinstance(instruction, Pass):
            board.next_player = instruction.color.opponent
        elif isinstance(instruction, NextPlayer):
            board.next_player = instruction.color
        else:
            raise TypeError(f"Unexpected instruction {instruction!r}")
    return board


def reconstruct(
    record: GameRecord,
    path: Sequence[int] = (),
    initial_player: Color = Color.BLACK,
) -> Board:
    """Return the board at the node addressed by ``path``.

    Raises PathNotFound for paths that do not exist and CoordinateOutOfBounds
    for instructions that fall outside the board.
    """

    instructions = collect_instructions(record, path)
    board = apply_instructions(record.size, instructions, initial_player)
    logger.debug(
        "Reconstructed %s from %d instructions, %s to move",
        list(path), len(instructions), board.next_player.name,
    )
    return board
