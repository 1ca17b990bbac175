"""Exception hierarchy for SGF replay.

Every error raised by the package derives from :class:`ReplayError`, so a
navigation shell can catch one type, report it and keep its previous state.

Usage:
    from sgf_replay.errors import ReplayError

    try:
        board = reconstruct(record, path)
    except ReplayError as exc:
        logger.warning("Cannot show position: %s", exc.message)
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

__all__ = [
    "ReplayError",
    "CoordinateError",
    "InvalidCoordinate",
    "MalformedCoordinate",
    "InvalidColor",
    "PathNotFound",
    "CoordinateOutOfBounds",
    "MissingBoardSize",
    "UnsupportedGame",
    "InvalidRecord",
]


class ReplayError(Exception):
    """Base exception for all SGF replay errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable description
        context: Extra values useful for debugging
    """

    code: str = "REPLAY_ERROR"

    def __init__(self, message: str = "", *, context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message or self.__class__.__doc__ or self.code
        self.context: Dict[str, Any] = dict(context or {})
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "context": self.context}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{self.message} ({details})"


# =============================================================================
# Coordinates
# =============================================================================


class CoordinateError(ReplayError, ValueError):
    """A coordinate value could not be decoded."""

    code = "COORDINATE_ERROR"


class InvalidCoordinate(CoordinateError):
    """Character outside the a-z/A-Z coordinate alphabet."""

    code = "INVALID_COORDINATE"

    def __init__(self, char: object) -> None:
        super().__init__(f"Cannot handle coordinate {char!r}", context={"char": char})
        self.char = char


class MalformedCoordinate(CoordinateError):
    """Coordinate string shorter than two characters."""

    code = "MALFORMED_COORDINATE"

    def __init__(self, text: str) -> None:
        super().__init__(f"Malformed coordinate {text!r}", context={"text": text})
        self.text = text


class InvalidColor(CoordinateError):
    """Color flag that is neither B nor W."""

    code = "INVALID_COLOR"

    def __init__(self, flag: str) -> None:
        super().__init__(f"Unknown color flag {flag!r}", context={"flag": flag})
        self.flag = flag


# =============================================================================
# Navigation and reconstruction
# =============================================================================


class PathNotFound(ReplayError):
    """A path element has no corresponding child node."""

    code = "PATH_NOT_FOUND"

    def __init__(self, path: Sequence[int], depth: int) -> None:
        path = tuple(path)
        super().__init__(
            f"No child {path[depth] if depth < len(path) else '?'} at depth {depth}",
            context={"path": path, "depth": depth},
        )
        self.path = path
        self.depth = depth


class CoordinateOutOfBounds(ReplayError):
    """Instruction position outside the declared board dimensions."""

    code = "COORDINATE_OUT_OF_BOUNDS"

    def __init__(self, position: Sequence[int], width: int, height: int) -> None:
        position = tuple(position)
        super().__init__(
            f"Position {position} outside {width}x{height} board",
            context={"position": position, "width": width, "height": height},
        )
        self.position = position
        self.width = width
        self.height = height


# =============================================================================
# Record
# =============================================================================


class MissingBoardSize(ReplayError):
    """Root node lacks a usable SZ directive."""

    code = "MISSING_BOARD_SIZE"


class UnsupportedGame(ReplayError):
    """Record describes a game other than Go (GM != 1)."""

    code = "UNSUPPORTED_GAME"

    def __init__(self, game_type: int) -> None:
        super().__init__("This is not a Go game", context={"game_type": game_type})
        self.game_type = game_type


class InvalidRecord(ReplayError):
    """SGF text could not be parsed into a game tree."""

    code = "INVALID_RECORD"
