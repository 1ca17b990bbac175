from sgf_replay.board import Color
from sgf_replay.instructions import (
    Move,
    NextPlayer,
    Pass,
    Setup,
    collect_instructions,
    extract_instructions,
)


def test_node_order_is_setups_then_player_then_moves(make_record):
    record = make_record("(;SZ[9]B[ff]W[ee]PL[W]AE[dd]AB[bb]AW[aa][cc])")
    assert extract_instructions(record.root, record.size) == [
        Setup((0, 0), Color.WHITE),
        Setup((2, 2), Color.WHITE),
        Setup((1, 1), Color.BLACK),
        Setup((3, 3), None),
        NextPlayer(Color.WHITE),
        Move((4, 4), Color.WHITE),
        Move((5, 5), Color.BLACK),
    ]


def test_player_flag_is_decoded(make_record):
    record = make_record("(;SZ[9]PL[B])")
    assert extract_instructions(record.root) == [NextPlayer(Color.BLACK)]


def test_compressed_setup_list(make_record):
    record = make_record("(;SZ[9]AB[aa:ba])")
    assert extract_instructions(record.root) == [
        Setup((0, 0), Color.BLACK),
        Setup((1, 0), Color.BLACK),
    ]


def test_empty_move_is_pass(make_record):
    record = make_record("(;SZ[9];B[])")
    assert extract_instructions(record.node(1), record.size) == [Pass(Color.BLACK)]


def test_tt_is_pass_on_small_boards(make_record):
    record = make_record("(;SZ[19];W[tt])")
    assert extract_instructions(record.node(1), record.size) == [Pass(Color.WHITE)]


def test_tt_is_a_point_on_large_boards(make_record):
    record = make_record("(;SZ[21];W[tt])")
    assert extract_instructions(record.node(1), record.size) == [Move((19, 19), Color.WHITE)]


def test_annotations_produce_no_instructions(make_record):
    record = make_record("(;SZ[9];B[aa]KO[]MN[12]BM[1]TE[2]C[nice])")
    assert extract_instructions(record.node(1), record.size) == [Move((0, 0), Color.BLACK)]


def test_instructions_are_value_types(make_record):
    record = make_record("(;SZ[9]AB[aa])")
    first = extract_instructions(record.root)
    second = extract_instructions(record.root)
    assert first == second
    assert hash(first[0]) == hash(second[0])


def test_collect_runs_root_to_leaf(variations_record):
    assert collect_instructions(variations_record, (1, 0, 0)) == [
        Move((3, 3), Color.BLACK),
        Move((3, 4), Color.WHITE),
        Move((4, 4), Color.BLACK),
    ]


def test_collect_only_follows_the_path(variations_record):
    assert collect_instructions(variations_record, (0,)) == [Move((2, 2), Color.BLACK)]
