"""Addressing nodes of a game record by child-index paths."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

from .errors import PathNotFound
from .record import GameRecord, RecordNode


class Direction(Enum):
    NEXT = 1
    PREVIOUS = -1


@dataclass(frozen=True)
class GamePath:
    """Sequence of child indices from the root; ``GamePath()`` is the root.

    Navigation methods return new paths. A path produced by :meth:`descend`
    or :meth:`sibling` is only a proposal until :func:`resolve` accepts it.
    """

    indices: Tuple[int, ...] = ()

    @classmethod
    def of(cls, indices: Iterable[int]) -> "GamePath":
        return cls(tuple(indices))

    @property
    def depth(self) -> int:
        return len(self.indices)

    @property
    def is_root(self) -> bool:
        return not self.indices

    def descend(self, choice: int = 0) -> "GamePath":
        if choice < 0:
            raise ValueError(f"Child index must be non-negative: {choice}")
        return GamePath(self.indices + (choice,))

    def ascend(self) -> "GamePath":
        return GamePath(self.indices[:-1])

    def sibling(self, record: GameRecord, direction: Direction) -> "GamePath":
        """Move the last index to a neighboring variation of the same parent.

        The index is clamped to the parent's children, so this never selects
        a missing sibling nor adds a level.
        """

        if self.is_root:
            return self
        parent_path = self.ascend()
        parent = resolve(record, parent_path)
        last = self.indices[-1]
        if direction is Direction.NEXT:
            last = max(min(last + 1, len(parent.children) - 1), 0)
        else:
            last = max(min(last, len(parent.children)) - 1, 0)
        return parent_path.descend(last)

    def __iter__(self):
        return iter(self.indices)

    def __len__(self) -> int:
        return len(self.indices)

    def __str__(self) -> str:
        return "[" + ", ".join(str(idx) for idx in self.indices) + "]"


def resolve_line(record: GameRecord, path: Iterable[int]) -> List[RecordNode]:
    """Return the nodes from the root down to the node addressed by ``path``."""

    indices = tuple(path)
    node = record.root
    line = [node]
    for depth, choice in enumerate(indices):
        if not 0 <= choice < len(node.children):
            raise PathNotFound(indices, depth)
        node = record.node(node.children[choice])
        line.append(node)
    return line


def resolve(record: GameRecord, path: Iterable[int]) -> RecordNode:
    return resolve_line(record, path)[-1]
