"""Shared pytest fixtures for sgf_replay tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from sgf_replay.record import parse_sgf

# Root with two variations; the second continues for two more moves.
#   root
#   ├── [0] B[cc]
#   └── [1] B[dd] ── W[de] ── B[ee]
VARIATIONS_SGF = "(;GM[1]FF[4]SZ[9](;B[cc])(;B[dd];W[de];B[ee]))"


@pytest.fixture
def make_record():
    """Build a GameRecord from SGF text."""

    def _make(sgf_text):
        return parse_sgf(sgf_text)

    return _make


@pytest.fixture
def variations_record():
    return parse_sgf(VARIATIONS_SGF)


@pytest.fixture
def white_move_record():
    """9x9 game whose root has a single child playing White at ee."""
    return parse_sgf("(;GM[1]SZ[9];W[ee])")
