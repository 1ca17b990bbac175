"""Navigation over a game record, keeping the last good position."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .board import Board
from .config import ReplayConfig
from .errors import CoordinateError, CoordinateOutOfBounds, PathNotFound, ReplayError
from .groups import Group, groups_to_move
from .metadata import GameInfo, NodeAnnotations
from .path import Direction, GamePath, resolve
from .record import GameRecord, RecordNode
from .replay import reconstruct

logger = logging.getLogger(__name__)

# Failures a viewer reports while staying on the previous position.
RECOVERABLE_ERRORS = (PathNotFound, CoordinateOutOfBounds, CoordinateError)


class GameSession:
    """Current path, board and groups for one game record.

    Every navigation call reconstructs the board from scratch. When the
    candidate path is invalid or its instructions do not fit the board, the
    previous state is kept, the error is stored in ``last_error`` and the
    call returns False.
    """

    def __init__(self, record: GameRecord, config: Optional[ReplayConfig] = None):
        self.record = record
        self.config = config or ReplayConfig()
        if self.config.requires_go_game():
            record.check_go_game()
        self.size = record.size
        self.info = GameInfo.from_record(record)
        self.initial_player = self.config.get_initial_player()
        self.last_error: Optional[ReplayError] = None

        self.path = GamePath()
        self.board: Board = reconstruct(record, self.path, self.initial_player)
        self.groups: List[Group] = groups_to_move(self.board)

    @property
    def node(self) -> RecordNode:
        return resolve(self.record, self.path)

    def go_to(self, path: Iterable[int]) -> bool:
        candidate = path if isinstance(path, GamePath) else GamePath.of(path)
        try:
            board = reconstruct(self.record, candidate, self.initial_player)
        except RECOVERABLE_ERRORS as exc:
            logger.warning("Staying at %s: %s", self.path, exc)
            self.last_error = exc
            return False
        self.path = candidate
        self.board = board
        self.groups = groups_to_move(board)
        self.last_error = None
        return True

    def go_to_root(self) -> bool:
        return self.go_to(GamePath())

    def next_move(self, variation: int = 0) -> bool:
        return self.go_to(self.path.descend(variation))

    def previous_move(self) -> bool:
        if self.path.is_root:
            return False
        return self.go_to(self.path.ascend())

    def next_variation(self) -> bool:
        return self._sibling(Direction.NEXT)

    def previous_variation(self) -> bool:
        return self._sibling(Direction.PREVIOUS)

    def _sibling(self, direction: Direction) -> bool:
        try:
            candidate = self.path.sibling(self.record, direction)
        except PathNotFound as exc:
            logger.warning("Cannot switch variation at %s: %s", self.path, exc)
            self.last_error = exc
            return False
        return self.go_to(candidate)

    def alternatives(self) -> int:
        """Number of variations sharing the current node's parent."""
        if self.path.is_root:
            return 1
        return len(resolve(self.record, self.path.ascend()).children)

    def annotations(self) -> NodeAnnotations:
        return NodeAnnotations.from_node(self.node)
