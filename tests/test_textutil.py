import pytest

from cubengine.textutil import copy_char_matrix, is_blank, rgb_atoi


@pytest.mark.parametrize("char", [" ", "\t", "\n"])
def test_is_blank_true(char):
    assert is_blank(char) is True


@pytest.mark.parametrize("char", ["a", "0", "\r", ","])
def test_is_blank_false(char):
    assert is_blank(char) is False


@pytest.mark.parametrize("text, expected", [("255", 255), ("  42\n", 42), ("+7", 7), ("-7", -7), ("\v\f0", 0)])
def test_rgb_atoi_values(text, expected):
    assert rgb_atoi(text) == expected


@pytest.mark.parametrize("text", ["1a", "12,", "x", "--3", "4.5"])
def test_rgb_atoi_rejects_stray_characters(text):
    assert rgb_atoi(text) == -1


def test_rgb_atoi_skips_inner_blanks():
    assert rgb_atoi("1 2\t3") == rgb_atoi("123")


def test_rgb_atoi_empty_is_zero():
    assert rgb_atoi("") == 0


def test_copy_char_matrix_is_independent():
    rows = ["111", "1N1", "111"]
    copy = copy_char_matrix(rows)
    assert copy == rows
    copy[1] = "101"
    assert rows[1] == "1N1"


def test_copy_char_matrix_none():
    assert copy_char_matrix(None) is None
    assert copy_char_matrix([]) == []