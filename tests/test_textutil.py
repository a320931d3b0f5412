import pytest

from cubraycaster.textutil import (
    atoi,
    create_line,
    find_first_of,
    has_digit,
    only_digits,
    split,
    trim,
)


def test_create_line_takes_rest_of_line():
    text = "R 1920 1080\nNO ./textures/north.xpm\n"
    assert create_line(text, "R ") == "1920 1080"
    assert create_line(text, "NO ") == "./textures/north.xpm"


def test_create_line_trims_spaces_around_value():
    assert create_line("F    220,100,0   \nC 1,2,3", "F ") == "220,100,0"


def test_create_line_without_newline_reads_to_end():
    assert create_line("EA ./east.xpm", "EA ") == "./east.xpm"


def test_create_line_missing_needle():
    assert create_line("R 10 10\n", "SO ") is None


def test_create_line_blank_value():
    assert create_line("C    \nF 1,2,3", "C ") == ""


def test_split_drops_empty_pieces():
    assert split(",,a,,b,", ",") == ["a", "b"]


@pytest.mark.parametrize("text", ["1 2  3", "  lead", "trail  ", "", "   "])
def test_split_words_hold_no_separator(text):
    words = split(text, " ")
    assert all(word and " " not in word for word in words)
    assert "".join(words) == text.replace(" ", "")


def test_split_keeps_map_rows():
    assert split("111\n101\n\n111\n", "\n") == ["111", "101", "111"]


@pytest.mark.parametrize("number", [0, 1, 255, -17, 2147483647, -2147483648])
def test_atoi_round_trip(number):
    assert atoi(str(number)) == number


def test_atoi_skips_whitespace_and_sign():
    assert atoi(" \t\n+42") == 42
    assert atoi("  -42abc") == -42


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("- 5") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("4294967296") == 0
    assert atoi("2147483648") == -2147483648


def test_has_digit():
    assert has_digit(" a1 ") is True
    assert has_digit("abc") is False
    assert has_digit("") is False
    assert has_digit(None) is False


def test_only_digits():
    assert only_digits("12 34 ") is True
    assert only_digits("") is True
    assert only_digits("12a") is False
    assert only_digits("-1") is False


def test_find_first_of():
    assert find_first_of("10N01", "NESW") == 2
    assert find_first_of("10001", "NESW") == -1
    assert find_first_of("", "NESW") == -1


def test_find_first_of_points_at_member():
    text = "  11W1E"
    index = find_first_of(text, "NESW")
    assert text[index] in "NESW"
    assert not any(c in "NESW" for c in text[:index])


def test_trim():
    assert trim("  a b  ", " ") == "a b"
    assert trim("xxaxx", "x") == "a"
    assert trim("  a ", "") == "  a "
    assert trim("  a ", None) == "  a "