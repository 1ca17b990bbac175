"""Parsed SGF game records.

The SGF grammar itself is handled by ``sgfmill.sgf_grammar``; this module
flattens its coarse game tree into an arena of :class:`RecordNode` objects
whose children are referenced by arena index.
"""

from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from sgfmill import sgf_grammar

from .board import Color, GridSize
from .errors import InvalidRecord, MissingBoardSize, UnsupportedGame

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"
GO_GAME_TYPE = 1


@dataclass
class RecordNode:
    """One SGF node: raw property values plus child arena indices."""

    index: int
    properties: Dict[str, List[bytes]] = field(default_factory=dict)
    children: List[int] = field(default_factory=list)
    parent: Optional[int] = None
    encoding: str = DEFAULT_ENCODING

    def has(self, key: str) -> bool:
        return key in self.properties

    def _first(self, key: str) -> Optional[bytes]:
        values = self.properties.get(key)
        if not values:
            return None
        return values[0]

    def _decode(self, raw: bytes) -> str:
        return raw.decode(self.encoding, errors="replace")

    def get_raw_list(self, key: str) -> List[str]:
        return [self._decode(raw) for raw in self.properties.get(key, [])]

    def get_text(self, key: str) -> Optional[str]:
        raw = self._first(key)
        if raw is None:
            return None
        return self._decode(sgf_grammar.text_value(raw))

    def get_simple_text(self, key: str) -> Optional[str]:
        raw = self._first(key)
        if raw is None:
            return None
        return self._decode(sgf_grammar.simpletext_value(raw))

    def get_number(self, key: str) -> Optional[int]:
        text = self.get_simple_text(key)
        if text is None:
            return None
        try:
            return int(text.strip())
        except ValueError:
            logger.debug("Ignoring non-numeric %s[%s] on node %d", key, text, self.index)
            return None

    def get_real(self, key: str) -> Optional[float]:
        text = self.get_simple_text(key)
        if text is None:
            return None
        try:
            return float(text.strip())
        except ValueError:
            logger.debug("Ignoring non-real %s[%s] on node %d", key, text, self.index)
            return None

    def get_points(self, key: str) -> List[str]:
        """Coordinate strings of a point-list property, compressed lists included."""

        return [value.strip() for value in self.get_raw_list(key)]

    def get_point(self, key: str) -> Optional[str]:
        raw = self._first(key)
        if raw is None:
            return None
        return self._decode(raw).strip()

    def get_color(self, key: str) -> Optional[Color]:
        flag = self.get_simple_text(key)
        if flag is None:
            return None
        return Color.from_flag(flag)


class GameRecord:
    """Read-only arena of nodes for a single SGF game."""

    def __init__(self, nodes: List[RecordNode]) -> None:
        if not nodes:
            raise InvalidRecord("Game record has no nodes")
        self.nodes = nodes
        self._size: Optional[GridSize] = None

    @property
    def root(self) -> RecordNode:
        return self.nodes[0]

    def node(self, index: int) -> RecordNode:
        return self.nodes[index]

    def children(self, node: RecordNode) -> List[RecordNode]:
        return [self.nodes[idx] for idx in node.children]

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def size(self) -> GridSize:
        """Board dimensions from the root ``SZ`` property, ``N`` or ``W:H``."""

        if self._size is None:
            self._size = _board_size(self.root)
        return self._size

    @property
    def game_type(self) -> int:
        game_type = self.root.get_number("GM")
        return GO_GAME_TYPE if game_type is None else game_type

    def check_go_game(self) -> None:
        if self.game_type != GO_GAME_TYPE:
            raise UnsupportedGame(self.game_type)


def _board_size(root: RecordNode) -> GridSize:
    raw = root._first("SZ")
    if raw is None:
        raise MissingBoardSize("Error no field size defined!")
    first, second = sgf_grammar.parse_compose(raw)
    try:
        width = int(first.strip())
        height = width if second is None else int(second.strip())
        return GridSize(width, height)
    except ValueError:
        raise MissingBoardSize(
            "Unusable board size", context={"SZ": root._decode(raw)}
        ) from None


def _charset(coarse: sgf_grammar.Coarse_game_tree) -> str:
    root_props = {_ident(key): values for key, values in coarse.sequence[0].items()}
    values = root_props.get("CA")
    if not values:
        return DEFAULT_ENCODING
    name = values[0].decode("ascii", errors="replace").strip()
    try:
        return codecs.lookup(name).name
    except LookupError:
        logger.warning("Unknown charset %r, falling back to %s", name, DEFAULT_ENCODING)
        return DEFAULT_ENCODING


def _flatten(coarse: sgf_grammar.Coarse_game_tree, encoding: str) -> List[RecordNode]:
    nodes: List[RecordNode] = []
    # (subtree, parent index) pairs; a subtree's sequence is a chain of nodes.
    pending = [(coarse, None)]
    while pending:
        tree, parent = pending.pop()
        for props in tree.sequence:
            node = RecordNode(
                index=len(nodes),
                properties={_ident(key): list(values) for key, values in props.items()},
                parent=parent,
                encoding=encoding,
            )
            if parent is not None:
                nodes[parent].children.append(node.index)
            nodes.append(node)
            parent = node.index
        # Reversed so variations are visited, and numbered, in file order.
        for child in reversed(tree.children):
            pending.append((child, parent))
    return nodes


def _ident(key: Union[str, bytes]) -> str:
    return key.decode("ascii") if isinstance(key, bytes) else key


def parse_sgf(data: Union[bytes, str]) -> GameRecord:
    """Parse SGF content and return the first game of the collection."""

    # Text input is already decoded, so CA no longer applies.
    from_text = isinstance(data, str)
    if from_text:
        data = data.encode(DEFAULT_ENCODING)
    try:
        collection = sgf_grammar.parse_sgf_collection(data)
    except ValueError as exc:
        raise InvalidRecord(f"Error parsing SGF: {exc}") from exc
    if not collection:
        raise InvalidRecord("Empty SGF")
    if len(collection) > 1:
        logger.info("Collection of %d games, using the first", len(collection))
    coarse = collection[0]
    encoding = DEFAULT_ENCODING if from_text else _charset(coarse)
    record = GameRecord(_flatten(coarse, encoding))
    logger.debug("Parsed game record with %d nodes", len(record))
    return record


def load_sgf(path: Union[str, Path]) -> GameRecord:
    """Read and parse an SGF file."""

    data = Path(path).read_bytes()
    logger.info("%s read", path)
    return parse_sgf(data)
