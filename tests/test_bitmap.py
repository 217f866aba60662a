import pytest

from dmdgfx.bitmap import Bitmap, Color
from dmdgfx.small_fonts import SMALL_CAP_4X6


def lit(bm):
    return {
        (x, y)
        for y in range(bm.height)
        for x in range(bm.width)
        if bm.pixel(x, y) == Color.WHITE
    }


def test_new_bitmap_is_black():
    bm = Bitmap(10, 3)
    assert len(bm.data) == bm.stride * bm.height
    assert bm.data == b"\xff" * len(bm.data)
    assert lit(bm) == set()


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Bitmap(-1, 4)


def test_clear_white_and_black():
    bm = Bitmap(9, 2)
    bm.clear(Color.WHITE)
    assert bm.data == b"\x00" * len(bm.data)
    bm.clear()
    assert lit(bm) == set()


def test_pixel_round_trip_and_bounds():
    bm = Bitmap(8, 8)
    bm.set_pixel(3, 5, Color.WHITE)
    assert bm.pixel(3, 5) == Color.WHITE
    bm.set_pixel(3, 5, Color.BLACK)
    assert bm.pixel(3, 5) == Color.BLACK
    bm.set_pixel(8, 0, Color.WHITE)
    bm.set_pixel(-1, 0, Color.WHITE)
    assert lit(bm) == set()
    assert bm.pixel(100, 100) == Color.BLACK


def test_no_fill_lights_a_pixel():
    bm = Bitmap(4, 4)
    bm.set_pixel(0, 0, Color.NO_FILL)
    assert bm.pixel(0, 0) == Color.WHITE


def test_horizontal_and_diagonal_lines():
    bm = Bitmap(5, 5)
    bm.draw_line(0, 0, 3, 0)
    assert lit(bm) == {(0, 0), (1, 0), (2, 0), (3, 0)}
    bm.clear()
    bm.draw_line(4, 4, 0, 0)
    assert lit(bm) == {(i, i) for i in range(5)}


def test_line_direction_does_not_matter_for_steep_line():
    a = Bitmap(6, 6)
    b = Bitmap(6, 6)
    a.draw_line(0, 0, 1, 5)
    b.draw_line(1, 5, 0, 0)
    assert (0, 0) in lit(a) and (1, 5) in lit(a)
    assert len(lit(a)) == len(lit(b))


def test_rect_outline():
    bm = Bitmap(5, 5)
    bm.draw_rect(0, 0, 4, 4)
    border = {(x, y) for x in range(5) for y in range(5) if x in (0, 4) or y in (0, 4)}
    assert lit(bm) == border


def test_rect_corner_order_is_irrelevant():
    a = Bitmap(6, 6)
    b = Bitmap(6, 6)
    a.draw_rect(1, 1, 4, 3)
    b.draw_rect(4, 3, 1, 1)
    assert lit(a) == lit(b)


def test_filled_rect_and_fill_colour():
    bm = Bitmap(5, 5)
    bm.draw_filled_rect(1, 1, 3, 3)
    assert lit(bm) == {(x, y) for x in range(1, 4) for y in range(1, 4)}
    bm.clear(Color.WHITE)
    bm.draw_rect(0, 0, 4, 4, Color.WHITE, Color.BLACK)
    assert bm.pixel(2, 2) == Color.BLACK
    assert bm.pixel(0, 2) == Color.WHITE


def test_circle_points_and_symmetry():
    bm = Bitmap(11, 11)
    bm.draw_circle(5, 5, 3)
    points = lit(bm)
    assert {(8, 5), (2, 5), (5, 8), (5, 2)} <= points
    assert (5, 5) not in points
    assert all((10 - x, y) in points and (x, 10 - y) in points for x, y in points)


def test_negative_radius_matches_positive():
    a = Bitmap(11, 11)
    b = Bitmap(11, 11)
    a.draw_circle(5, 5, 4)
    b.draw_circle(5, 5, -4)
    assert lit(a) == lit(b)


def test_filled_circles():
    bm = Bitmap(11, 11)
    bm.draw_filled_circle(5, 5, 3)
    assert (5, 5) in lit(bm)
    small = Bitmap(3, 3)
    small.draw_filled_circle(1, 1, 1)
    assert (1, 1) in lit(small)


def test_draw_image_and_inverted():
    image = bytes([3, 2, 0b10100000, 0b01000000])
    bm = Bitmap(4, 4)
    bm.clear(Color.WHITE)
    bm.draw_image(0, 0, image)
    region = {p for p in lit(bm) if p[0] < 3 and p[1] < 2}
    assert region == {(0, 0), (2, 0), (1, 1)}
    bm.draw_inverted_image(0, 0, image)
    assert bm.pixel(0, 0) == Color.BLACK
    assert bm.pixel(1, 0) == Color.WHITE


def test_short_image_rejected():
    bm = Bitmap(4, 4)
    with pytest.raises(ValueError):
        bm.draw_image(0, 0, bytes([8, 2, 0xFF]))
    with pytest.raises(ValueError):
        bm.draw_image(0, 0, b"\x01")


def test_fill_pattern_tiles():
    bm = Bitmap(6, 2)
    bm.fill_pattern(0, 0, 6, 2, bytes([2, 1, 0b10000000]))
    assert lit(bm) == {(x, y) for x in range(0, 6, 2) for y in range(2)}


def test_empty_pattern_changes_nothing():
    bm = Bitmap(4, 4)
    bm.fill_pattern(0, 0, 4, 4, bytes([0, 0]))
    assert lit(bm) == set()


def test_draw_bitmap_and_inverted():
    src = Bitmap(3, 2)
    src.set_pixel(1, 0, Color.WHITE)
    dest = Bitmap(8, 8)
    dest.clear(Color.WHITE)
    dest.draw_bitmap(2, 1, src)
    assert dest.pixel(3, 1) == Color.WHITE
    assert dest.pixel(2, 1) == Color.BLACK
    dest.draw_inverted_bitmap(2, 1, src)
    assert dest.pixel(3, 1) == Color.BLACK
    assert dest.pixel(2, 1) == Color.WHITE


def test_draw_char_matches_glyph():
    bm = Bitmap(10, 10)
    bm.font = SMALL_CAP_4X6
    width = bm.draw_char(1, 1, "A")
    assert width == SMALL_CAP_4X6.char_width("A")
    for r, row in enumerate(SMALL_CAP_4X6.glyph("A")):
        for c, on in enumerate(row):
            assert bm.pixel(1 + c, 1 + r) == (Color.WHITE if on else Color.BLACK)


def test_draw_char_off_screen_and_missing():
    bm = Bitmap(10, 10)
    bm.font = SMALL_CAP_4X6
    before = bm.data
    assert bm.draw_char(-10, 0, "A") == SMALL_CAP_4X6.char_width("A")
    assert bm.draw_char(0, 0, chr(200)) == 0
    assert bm.data == before


def test_space_fills_with_background():
    bm = Bitmap(10, 10)
    bm.clear(Color.WHITE)
    bm.font = SMALL_CAP_4X6
    width = bm.draw_char(0, 0, " ")
    assert width == bm.char_width("n")
    assert all(
        bm.pixel(x, y) == Color.BLACK
        for x in range(width)
        for y in range(SMALL_CAP_4X6.height)
    )


def test_draw_text_puts_gap_between_chars():
    bm = Bitmap(20, 8)
    bm.clear(Color.WHITE)
    bm.font = SMALL_CAP_4X6
    bm.draw_text(0, 0, "AB")
    gap = bm.char_width("A")
    assert all(bm.pixel(gap, y) == Color.BLACK for y in range(SMALL_CAP_4X6.height))
    for r, row in enumerate(SMALL_CAP_4X6.glyph("B")):
        for c, on in enumerate(row):
            assert bm.pixel(gap + 1 + c, r) == (Color.WHITE if on else Color.BLACK)


def test_text_metrics():
    bm = Bitmap(20, 8)
    bm.font = SMALL_CAP_4X6
    assert bm.text_width("AB") == bm.char_width("A") + bm.char_width("B") + 1
    assert bm.text_width("") == 0
    assert bm.text_width("XAB", 1, 1) == bm.char_width("A")
    assert bm.char_width(" ") == bm.char_width("n")
    assert bm.text_height() == SMALL_CAP_4X6.height


def test_no_font():
    bm = Bitmap(8, 8)
    assert bm.char_width("A") == 0
    assert bm.text_height() == 0
    assert bm.draw_char(0, 0, "A") == 0
    bm.draw_text(0, 0, "AB")
    assert lit(bm) == set()


def test_invert_twice_is_identity():
    bm = Bitmap(6, 6)
    bm.draw_line(0, 0, 5, 5)
    before = bm.data
    bm.invert(1, 1, 4, 3)
    assert bm.pixel(2, 1) == Color.WHITE
    assert bm.pixel(1, 1) == Color.BLACK
    bm.invert(1, 1, 4, 3)
    assert bm.data == before


def test_copy_to_other_bitmap():
    src = Bitmap(4, 4)
    src.set_pixel(1, 2, Color.WHITE)
    dest = Bitmap(4, 4)
    dest.copy(1, 1, 2, 2, src, 0, 0) if False else src.copy(1, 1, 2, 2, dest, 0, 0)
    assert lit(dest) == {(0, 1)}


def test_copy_within_one_row():
    bm = Bitmap(8, 1)
    bm.set_pixel(0, 0, Color.WHITE)
    bm.copy(0, 0, 2, 1, bm, 4, 0)
    assert lit(bm) == {(0, 0), (4, 0)}


def test_horizontal_scroll():
    bm = Bitmap(8, 1)
    bm.set_pixel(0, 0, Color.WHITE)
    bm.scroll(2, 0)
    assert lit(bm) == {(2, 0)}
    bm.scroll(-1, 0)
    assert lit(bm) == {(1, 0)}


def test_scroll_fill_colour_and_no_op():
    bm = Bitmap(8, 1)
    bm.scroll(3, 0, Color.WHITE)
    assert lit(bm) == {(0, 0), (1, 0), (2, 0)}
    before = bm.data
    bm.scroll(0, 0, Color.WHITE)
    assert bm.data == before


def test_fill_is_clipped():
    bm = Bitmap(4, 4)
    bm.fill(2, 2, 10, 10, Color.WHITE)
    assert lit(bm) == {(x, y) for x in (2, 3) for y in (2, 3)}