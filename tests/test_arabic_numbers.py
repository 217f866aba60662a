import pytest

from dmdgfx.arabic_numbers import fonts
from dmdgfx.bitmap import Bitmap, Color

NAMES = ["Arabic_number", "arab10x16", "arab16x10"]


def test_font_names():
    assert sorted(fonts()) == sorted(NAMES)


@pytest.mark.parametrize("name", NAMES)
def test_digits_and_colon_present(name):
    font = fonts()[name]
    assert all(font.contains(c) for c in "0123456789:")
    assert font.first_char == ord("0")
    assert not font.contains("/")
    assert not font.is_fixed


@pytest.mark.parametrize("name", NAMES)
def test_glyph_data_length_matches_widths(name):
    font = fonts()[name]
    codes = range(font.first_char, font.first_char + font.char_count)
    total = sum(font.char_width(c) for c in codes) * font.height_bytes
    assert len(font.glyph_data) == total


@pytest.mark.parametrize("name", NAMES)
def test_glyph_shape(name):
    font = fonts()[name]
    for c in "0123456789":
        rows = font.glyph(c)
        assert len(rows) == font.height
        assert all(len(row) == font.char_width(c) for row in rows)
        assert any(any(row) for row in rows)


@pytest.mark.parametrize("name", NAMES)
def test_missing_character(name):
    font = fonts()[name]
    assert font.char_width("x") == 0
    with pytest.raises(KeyError):
        font.glyph("x")


@pytest.mark.parametrize("name", NAMES)
def test_draw_char_matches_glyph(name):
    font = fonts()[name]
    bitmap = Bitmap(32, 16)
    bitmap.font = font
    width = bitmap.draw_char(2, 0, "5")
    assert width == font.char_width("5")
    for y, row in enumerate(font.glyph("5")):
        for x, lit in enumerate(row):
            expected = Color.WHITE if lit else Color.BLACK
            assert bitmap.pixel(2 + x, y) == expected


def test_arab16x10_blank_semicolon():
    font = fonts()["arab16x10"]
    assert font.char_width(";") == font.char_width(":")
    assert not any(any(row) for row in font.glyph(";"))


def test_arabic_number_wider_glyphs():
    font = fonts()["Arabic_number"]
    assert font.char_width("7") == 9
    assert font.char_width("8") == font.char_width("7")
    assert font.char_width("0") == font.width


def test_arab10x16_height():
    assert fonts()["arab10x16"].height == 15
    assert fonts()["arab10x16"].height_bytes == fonts()["arab16x10"].height_bytes