import string

import pytest

from sgf_replay.coords import decode, encode, expand_point_list, format_point, parse_point
from sgf_replay.errors import InvalidCoordinate, MalformedCoordinate


def test_encode_alphabet_ranges():
    assert encode("a") == 0
    assert encode("z") == 25
    assert encode("A") == 26
    assert encode("Z") == 51


@pytest.mark.parametrize("char", ["1", " ", "é", "", "ab", "["])
def test_encode_rejects_characters_outside_alphabet(char):
    with pytest.raises(InvalidCoordinate):
        encode(char)


def test_decode_inverts_encode_for_every_label():
    for char in string.ascii_letters:
        assert decode(encode(char)) == char


@pytest.mark.parametrize("offset", [-1, 52])
def test_decode_rejects_out_of_range(offset):
    with pytest.raises(InvalidCoordinate):
        decode(offset)


def test_parse_point_is_column_then_row():
    assert parse_point("ee") == (4, 4)
    assert parse_point("ai") == (0, 8)
    assert parse_point("Ba") == (27, 0)


@pytest.mark.parametrize("text", ["", "a"])
def test_parse_point_requires_two_characters(text):
    with pytest.raises(MalformedCoordinate) as excinfo:
        parse_point(text)
    assert isinstance(excinfo.value, ValueError)


def test_parse_point_reports_invalid_character():
    with pytest.raises(InvalidCoordinate):
        parse_point("a?")


def test_format_point():
    assert format_point((4, 4)) == "ee"
    assert format_point((26, 0)) == "Aa"


def test_expand_point_list_keeps_plain_order():
    assert expand_point_list(["cc", "aa", "bb"]) == [(2, 2), (0, 0), (1, 1)]


def test_expand_point_list_expands_rectangles_row_major():
    assert expand_point_list(["aa:bc"]) == [
        (0, 0), (1, 0),
        (0, 1), (1, 1),
        (0, 2), (1, 2),
    ]


def test_expand_point_list_accepts_reversed_corners():
    assert expand_point_list(["bb:aa"]) == [(0, 0), (1, 0), (0, 1), (1, 1)]
