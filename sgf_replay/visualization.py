"""Visualization helpers for reconstructed boards and their groups."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .board import Board
from .coords import MAX_AXIS, Point, decode

_COLOR_MAP = {-1: "black", 1: "white"}
_GROUP_COLORS = ("tab:red", "tab:blue", "tab:green", "tab:orange", "tab:purple", "tab:cyan")


def _axis_label(offset: int) -> str:
    # SGF letters run out after 52 lines.
    return decode(offset) if offset < MAX_AXIS else str(offset)


def _star_points(width: int, height: int) -> List[Tuple[int, int]]:
    if width != height:
        return []
    if width == 9:
        return [(2, 2), (2, 6), (4, 4), (6, 2), (6, 6)]
    if width == 13:
        return [(3, 3), (3, 9), (6, 6), (9, 3), (9, 9)]
    if width == 19:
        return [(3, 3), (3, 9), (3, 15), (9, 3), (9, 9), (9, 15), (15, 3), (15, 9), (15, 15)]
    return []


def plot_board(
    board: Board,
    *,
    last_move: Optional[Point] = None,
    title: Optional[str] = None,
    ax: Optional[plt.Axes] = None,
) -> plt.Axes:
    data = board.to_matrix()
    height, width = data.shape

    show_fig = False
    if ax is None:
        fig, ax = plt.subplots(figsize=(min(8, width / 1.2), min(8, height / 1.2)))
        show_fig = True

    ax.set_aspect("equal")
    ax.set_xlim(-0.5, width - 0.5)
    ax.set_ylim(-0.5, height - 0.5)
    ax.invert_yaxis()
    ax.set_xticks(range(width))
    ax.set_yticks(range(height))
    ax.set_xticklabels([_axis_label(x) for x in range(width)])
    ax.set_yticklabels([_axis_label(y) for y in range(height)])
    ax.grid(True, color="#b8874a", linewidth=1)

    stars = _star_points(width, height)
    if stars:
        ax.scatter([x for _, x in stars], [y for y, _ in stars], s=40, color="#5c3b09")

    for y, x in zip(*np.nonzero(data)):
        facecolor = _COLOR_MAP[int(data[y, x])]
        ax.add_patch(plt.Circle((x, y), 0.45, facecolor=facecolor, edgecolor="black", linewidth=1.5))

    if last_move is not None:
        lx, ly = last_move
        ax.scatter(lx, ly, s=200, facecolors="none", edgecolors="red", linewidths=2)

    if title:
        ax.set_title(title)

    if show_fig:
        plt.tight_layout()
    return ax


def plot_board_with_groups(
    board: Board,
    groups: Iterable[Sequence[int]],
    *,
    last_move: Optional[Point] = None,
    title: Optional[str] = None,
    annotation: Optional[str] = None,
    ax: Optional[plt.Axes] = None,
) -> plt.Axes:
    """Plot a board and outline the members of each group in its own color."""

    ax = plot_board(board, last_move=last_move, title=title, ax=ax)

    for number, group in enumerate(groups):
        points = [board.size.point(idx) for idx in group]
        if not points:
            continue
        ax.scatter(
            [x for x, _ in points],
            [y for _, y in points],
            s=260,
            facecolors="none",
            edgecolors=_GROUP_COLORS[number % len(_GROUP_COLORS)],
            linewidths=2,
        )

    if annotation:
        ax.text(
            0.02,
            0.02,
            annotation,
            transform=ax.transAxes,
            va="bottom",
            ha="left",
            fontsize=10,
            bbox={"facecolor": "white", "alpha": 0.75, "boxstyle": "round,pad=0.3"},
        )

    return ax
