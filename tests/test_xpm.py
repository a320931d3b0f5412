import pytest

from cubraycaster.colornames import lookup_color
from cubraycaster.xpm import (
    XpmError,
    load_xpm,
    parse_xpm,
    quoted_strings,
    split_words,
    strip_comments,
)

SAMPLE = """/* XPM */
static char *wall[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1",
"a c #102030",
"b c red",
". c None",
// pixels
"ab.",
"ba.",
};
"""


def test_strip_comments_keeps_length_and_quotes():
    text = '/* note */ "a /* kept */ b" // tail\n"x"'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "note" not in stripped
    assert "tail" not in stripped
    assert '"a /* kept */ b"' in stripped
    assert stripped.endswith('"x"')


def test_quoted_strings_yields_contents():
    assert list(quoted_strings('x "one" y "two words" "')) == ["one", "two words"]


def test_split_words_on_spaces_and_tabs():
    assert split_words("  3\t2  1 \t 1 ") == ["3", "2", "1", "1"]
    assert split_words(" \t ") == []


def test_parse_sample_from_text():
    image = parse_xpm(quoted_strings(strip_comments(SAMPLE)))
    assert (image.width, image.height) == (3, 2)
    assert image.get_pixel(0, 0) == 0x102030
    assert image.get_pixel(1, 0) == lookup_color("red")
    assert image.get_pixel(2, 0) == 0xFF000000
    assert image.get_pixel(0, 1) == lookup_color("red")
    assert image.get_pixel(1, 1) == 0x102030


def test_two_word_colour_names_and_two_chars_per_pixel():
    lines = ["2 1 2 2", "aa c light blue", "bb c #0000ff", "aabb"]
    image = parse_xpm(lines)
    assert image.pixels == [lookup_color("light blue"), 0x0000FF]


def test_unknown_pixel_key_is_black():
    image = parse_xpm(["2 1 1 1", "a c #abcdef", "az"])
    assert image.pixels == [0xABCDEF, 0]


def test_three_chars_per_pixel():
    lines = ["1 1 2 3", "abc c #000001", "xyz c #000002", "xyz"]
    assert parse_xpm(lines).pixels == [0x000002]


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c #000000", "a"],
        ["1 1 1", "a c #000000", "a"],
        ["1 1 1 1", "a s name", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c #000000", "a"],
        [],
    ],
)
def test_bad_xpm_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_load_xpm_from_file(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(SAMPLE)
    image = load_xpm(path)
    assert image.pixels == parse_xpm(quoted_strings(strip_comments(SAMPLE))).pixels


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "missing.xpm")