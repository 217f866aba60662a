import pytest

from dmdgfx.font import Font


def _fixed_font():
    # Two characters 'A' and 'B', two columns each, three pixels high.
    return Font.from_bytes(bytes([0, 0, 2, 3, 0x41, 2, 0x05, 0x02, 0x07, 0x00]))


def _variable_font():
    # Characters 'a', 'b', 'c' with widths 1, 2, 1 and height 3.
    return Font.from_bytes(
        bytes([0x01, 0x00, 5, 3, 0x61, 3, 1, 2, 1, 0x01, 0x05, 0x02, 0x07])
    )


def test_header_fields_are_parsed():
    font = _fixed_font()
    assert (font.width, font.height, font.first_char, font.char_count) == (2, 3, 0x41, 2)
    assert font.is_fixed
    assert font.last_char == ord("B")


def test_variable_font_reads_width_table():
    font = _variable_font()
    assert not font.is_fixed
    assert font.char_widths == (1, 2, 1)
    assert [font.char_width(c) for c in "abc"] == [1, 2, 1]


def test_contains_respects_range():
    font = _fixed_font()
    assert font.contains("A")
    assert font.contains(ord("B"))
    assert not font.contains("C")
    assert not font.contains("@")
    assert not font.contains(0x141)


def test_char_width_outside_font_is_zero():
    font = _fixed_font()
    assert font.char_width("A") == font.width
    assert font.char_width("z") == 0


def test_glyph_decodes_columns_lsb_first():
    font = _fixed_font()
    assert font.glyph("A") == (
        (True, False),
        (False, True),
        (True, False),
        (False, False),
    )


def test_single_byte_glyph_rows_cover_height_plus_one():
    font = _fixed_font()
    glyph = font.glyph("B")
    assert len(glyph) == font.height + 1
    assert all(len(row) == font.char_width("B") for row in glyph)


def test_variable_glyph_offsets_follow_previous_widths():
    variable = _variable_font()
    fixed = _fixed_font()
    # 'b' in the variable font uses the same column bytes as 'A' in the fixed one.
    assert variable.glyph("b") == fixed.glyph("A")
    assert variable.glyph("c") == tuple((col,) for col in (True, True, True, False))


def test_two_byte_glyph_rows_match_height():
    data = bytes([0, 0, 1, 16, 0x30, 1, 0xFF, 0x80])
    font = Font.from_bytes(data)
    glyph = font.glyph("0")
    assert len(glyph) == font.height
    lit = [row[0] for row in glyph]
    assert lit[:8] == [True] * 8
    assert lit[8:] == [False] * 7 + [True]


def test_missing_glyph_bytes_are_blank():
    font = Font.from_bytes(bytes([0, 0, 2, 3, 0x41, 2, 0x07, 0x07]))
    assert all(not pixel for row in font.glyph("B") for pixel in row)


def test_glyph_outside_font_raises_key_error():
    with pytest.raises(KeyError):
        _fixed_font().glyph("Z")


def test_short_header_raises():
    with pytest.raises(ValueError):
        Font.from_bytes(b"\x00\x00\x02")


def test_truncated_width_table_raises():
    with pytest.raises(ValueError):
        Font.from_bytes(bytes([1, 0, 5, 8, 0x30, 4, 1, 1]))


def test_multi_character_string_rejected():
    with pytest.raises(TypeError):
        _fixed_font().contains("AB")