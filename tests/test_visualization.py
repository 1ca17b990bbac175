import matplotlib.pyplot as plt

from sgf_replay.board import Color
from sgf_replay.groups import groups_for
from sgf_replay.replay import reconstruct
from sgf_replay.visualization import plot_board, plot_board_with_groups


def test_plot_board_draws_each_stone(make_record):
    board = reconstruct(make_record("(;SZ[9]AB[aa][bb]AW[cc])"))
    fig, ax = plt.subplots()
    try:
        result = plot_board(board, last_move=(2, 2), title="Setup", ax=ax)
        assert result is ax
        assert len(ax.patches) == 3
        assert ax.get_title() == "Setup"
        assert [label.get_text() for label in ax.get_xticklabels()][:3] == ["a", "b", "c"]
    finally:
        plt.close(fig)


def test_plot_rectangular_board(make_record):
    board = reconstruct(make_record("(;SZ[5:3]AW[ec])"))
    ax = plot_board(board)
    try:
        assert len(ax.get_xticks()) == 5
        assert len(ax.get_yticks()) == 3
    finally:
        plt.close(ax.figure)


def test_plot_board_with_groups_outlines_members(make_record):
    board = reconstruct(make_record("(;SZ[9]AW[cc][cd][gg])"))
    groups = groups_for(board, Color.WHITE)
    fig, ax = plt.subplots()
    try:
        plot_board_with_groups(board, groups, annotation="2 groups", ax=ax)
        # One scatter per group plus the star points.
        assert len(ax.collections) == len(groups) + 1
        assert any(text.get_text() == "2 groups" for text in ax.texts)
    finally:
        plt.close(fig)


def test_plot_board_past_letter_coordinates(make_record):
    board = reconstruct(make_record("(;SZ[60])"))
    ax = plot_board(board)
    try:
        labels = [label.get_text() for label in ax.get_xticklabels()]
        assert labels[51] == "Z"
        assert labels[52:54] == ["52", "53"]
        assert len(labels) == 60
    finally:
        plt.close(ax.figure)
