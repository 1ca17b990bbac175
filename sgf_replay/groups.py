"""Connected groups of same-colored stones.

Stones are connected through their north, south, east and west neighbors
only; there is no diagonal adjacency and no wraparound at the edges.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

import networkx as nx

from .board import Board, Color, GridSize

Group = Tuple[int, ...]


def neighbors(index: int, size: GridSize) -> Iterator[int]:
    """Yield the cell indices 4-adjacent to ``index``."""

    y, x = divmod(index, size.width)
    if y > 0:
        yield index - size.width
    if y + 1 < size.height:
        yield index + size.width
    if x > 0:
        yield index - 1
    if x + 1 < size.width:
        yield index + 1


def connection_graph(board: Board, color: Color) -> nx.Graph:
    """Graph of the ``color`` stones with an edge between adjacent stones."""

    graph = nx.Graph()
    stones = board.occupied(color)
    graph.add_nodes_from(stones)
    for idx in stones:
        for other in neighbors(idx, board.size):
            # Each edge is added once, from its lower endpoint.
            if other > idx and board.cells[other] is color:
                graph.add_edge(idx, other)
    return graph


def groups_for(board: Board, color: Color) -> List[Group]:
    """Partition the ``color`` stones into groups.

    Members are sorted within a group and groups are ordered by their
    smallest member.
    """

    graph = connection_graph(board, color)
    groups = [tuple(sorted(component)) for component in nx.connected_components(graph)]
    return sorted(groups)


def groups_to_move(board: Board) -> List[Group]:
    """Groups of the side to move next."""

    return groups_for(board, board.next_player)
