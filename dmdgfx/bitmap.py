"""A one-bit frame buffer with drawing primitives for LED matrix panels.

Pixels are packed eight to a byte, most significant bit first.  A set bit
is an unlit (black) pixel and a clear bit is a lit (white) one, so a new
bitmap starts out all black.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from .font import Font

CharLike = Union[str, int]
ImageData = Union[bytes, bytearray, "list[int]"]


class Color(IntEnum):
    """Pixel colours; NO_FILL leaves shape interiors untouched."""

    BLACK = 0
    WHITE = 1
    NO_FILL = 2


def _inverse(color: int) -> Color:
    return Color.BLACK if color else Color.WHITE


def _is_space(ch: CharLike) -> bool:
    return ch == " " or ch == 32


def _char_at(text: str, index: int) -> str:
    if 0 <= index < len(text):
        return text[index]
    return "\0"


def _image_header(image: ImageData) -> tuple[bytes, int, int, int]:
    data = bytes(image)
    if len(data) < 2:
        raise ValueError("image data needs a width and a height byte")
    width, height = data[0], data[1]
    stride = (width + 7) >> 3
    if width and height and len(data) < 2 + stride * height:
        raise ValueError(
            f"image of {width}x{height} needs {stride * height} data bytes, "
            f"got {len(data) - 2}"
        )
    return data, width, height, stride


def _image_bit(data: bytes, stride: int, row: int, col: int) -> bool:
    return bool(data[2 + row * stride + (col >> 3)] & (0x80 >> (col & 0x07)))


class Bitmap:
    """A monochrome frame buffer."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"bitmap size must not be negative: {width}x{height}")
        self._width = width
        self._height = height
        self._stride = (width + 7) // 8
        self._fb = bytearray(b"\xff" * (self._stride * height))
        self.font: Font | None = None
        self.text_color: Color = Color.WHITE

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def stride(self) -> int:
        """Bytes per row of the frame buffer."""
        return self._stride

    @property
    def data(self) -> bytes:
        """A copy of the packed frame buffer."""
        return bytes(self._fb)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def clear(self, color: int = Color.BLACK) -> None:
        """Set every pixel to black, or to white for any other colour."""
        value = 0xFF if color == Color.BLACK else 0x00
        self._fb[:] = bytes([value]) * len(self._fb)

    def pixel(self, x: int, y: int) -> Color:
        """Colour at (x, y); pixels off the bitmap read as black."""
        if not self._in_bounds(x, y):
            return Color.BLACK
        byte = self._fb[y * self._stride + (x >> 3)]
        return Color.BLACK if byte & (0x80 >> (x & 0x07)) else Color.WHITE

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; any non-black colour lights it. Off-bitmap writes are ignored."""
        if not self._in_bounds(x, y):
            return
        offset = y * self._stride + (x >> 3)
        mask = 0x80 >> (x & 0x07)
        if color:
            self._fb[offset] &= ~mask & 0xFF
        else:
            self._fb[offset] |= mask

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: int = Color.WHITE) -> None:
        """Draw a line with the midpoint algorithm, both ends included."""
        dx = x2 - x1
        dy = y2 - y1
        xstep = -1 if dx < 0 else 1
        ystep = -1 if dy < 0 else 1
        dx = abs(dx)
        dy = abs(dy)
        self.set_pixel(x1, y1, color)
        if dx >= dy:
            d = 2 * dy - dx
            incr_e = 2 * dy
            incr_ne = 2 * (dy - dx)
            while x1 != x2:
                if d <= 0:
                    d += incr_e
                else:
                    d += incr_ne
                    y1 += ystep
                x1 += xstep
                self.set_pixel(x1, y1, color)
        else:
            d = 2 * dx - dy
            incr_e = 2 * dx
            incr_ne = 2 * (dx - dy)
            while y1 != y2:
                if d <= 0:
                    d += incr_e
                else:
                    d += incr_ne
                    x1 += xstep
                y1 += ystep
                self.set_pixel(x1, y1, color)

    def draw_rect(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        border_color: int = Color.WHITE,
        fill_color: int = Color.NO_FILL,
    ) -> None:
        """Draw a rectangle between two corners, optionally filled."""
        x1, x2 = min(x1, x2), max(x1, x2)
        y1, y2 = min(y1, y2), max(y1, y2)
        if fill_color == border_color:
            self.fill(x1, y1, x2 - x1 + 1, y2 - y1 + 1, fill_color)
            return
        self.draw_line(x1, y1, x2, y1, border_color)
        if y1 < y2:
            self.draw_line(x2, y1 + 1, x2, y2, border_color)
        if x1 < x2:
            self.draw_line(x2 - 1, y2, x1, y2, border_color)
        if y1 < y2 - 1:
            self.draw_line(x1, y2 - 1, x1, y1 + 1, border_color)
        if fill_color != Color.NO_FILL:
            self.fill(x1 + 1, y1 + 1, x2 - x1 - 1, y2 - y1 - 1, fill_color)

    def draw_filled_rect(self, x1: int, y1: int, x2: int, y2: int, color: int = Color.WHITE) -> None:
        """Draw a rectangle whose border and interior share one colour."""
        self.draw_rect(x1, y1, x2, y2, color, color)

    def draw_circle(
        self,
        center_x: int,
        center_y: int,
        radius: int,
        border_color: int = Color.WHITE,
        fill_color: int = Color.NO_FILL,
    ) -> None:
        """Draw a circle with the midpoint algorithm, optionally filled."""
        radius = abs(radius)
        x = 0
        y = radius
        d = 1 - radius
        delta_e = 3
        delta_se = 5 - 2 * radius
        self._draw_circle_points(center_x, center_y, radius, x, y, border_color, fill_color)
        while y > x:
            if d < 0:
                d += delta_e
                delta_e += 2
                delta_se += 2
            else:
                d += delta_se
                delta_e += 2
                delta_se += 4
                y -= 1
            x += 1
            self._draw_circle_points(center_x, center_y, radius, x, y, border_color, fill_color)

    def draw_filled_circle(self, center_x: int, center_y: int, radius: int, color: int = Color.WHITE) -> None:
        """Draw a circle whose border and interior share one colour."""
        self.draw_circle(center_x, center_y, radius, color, color)

    def draw_bitmap(self, x: int, y: int, bitmap: "Bitmap", color: int = Color.WHITE) -> None:
        """Draw another bitmap: its white pixels in ``color``, its black ones inverted."""
        inv = _inverse(color)
        for by in range(bitmap.height):
            for bx in range(bitmap.width):
                lit = bitmap.pixel(bx, by) == Color.WHITE
                self.set_pixel(x + bx, y + by, color if lit else inv)

    def draw_image(self, x: int, y: int, image: ImageData, color: int = Color.WHITE) -> None:
        """Draw a packed image: width byte, height byte, then rows, MSB first.

        Set bits are drawn in ``color`` and clear bits in its inverse.
        """
        data, width, height, stride = _image_header(image)
        inv = _inverse(color)
        for by in range(height):
            for bx in range(width):
                lit = _image_bit(data, stride, by, bx)
                self.set_pixel(x + bx, y + by, color if lit else inv)

    def draw_inverted_bitmap(self, x: int, y: int, bitmap: "Bitmap") -> None:
        self.draw_bitmap(x, y, bitmap, Color.BLACK)

    def draw_inverted_image(self, x: int, y: int, image: ImageData) -> None:
        self.draw_image(x, y, image, Color.BLACK)

    def draw_text(self, x: int, y: int, text: str, start: int = 0, length: int = -1) -> None:
        """Draw text in the current font with a one pixel gap between characters."""
        if self.font is None:
            return
        height = self.font.height
        if length < 0:
            length = len(text) - start
        for i in range(length):
            x += self.draw_char(x, y, _char_at(text, start + i))
            if i < length - 1:
                self.fill(x, y, 1, height, _inverse(self.text_color))
                x += 1
            if x >= self._width:
                break

    def draw_char(self, x: int, y: int, ch: CharLike) -> int:
        """Draw one character and return its width; 0 if it cannot be drawn."""
        font = self.font
        if font is None:
            return 0
        height = font.height
        inv = _inverse(self.text_color)
        if _is_space(ch):
            space_width = self.char_width("n")
            self.fill(x, y, space_width, height, inv)
            return space_width
        if not font.contains(ch):
            return 0
        width = font.char_width(ch)
        if x + width <= 0 or y + height <= 0:
            return width
        for row_index, row in enumerate(font.glyph(ch)):
            for cx, lit in enumerate(row):
                self.set_pixel(x + cx, y + row_index, self.text_color if lit else inv)
        return width

    def char_width(self, ch: CharLike) -> int:
        """Width of a character in the current font; a space is as wide as 'n'."""
        if self.font is None:
            return 0
        if _is_space(ch):
            ch = "n"
        return self.font.char_width(ch)

    def text_width(self, text: str, start: int = 0, length: int = -1) -> int:
        """Width of text as draw_text would lay it out."""
        if length < 0:
            length = len(text) - start
        total = 0
        for i in range(length):
            total += self.char_width(_char_at(text, start + i))
            if i < length - 1:
                total += 1
        return total

    def text_height(self) -> int:
        return self.font.height if self.font is not None else 0

    def copy(
        self, x: int, y: int, width: int, height: int, dest: "Bitmap", dest_x: int, dest_y: int
    ) -> None:
        """Copy a region into ``dest``, which may be this bitmap."""
        if dest is self:
            self._blit(x, y, x + width - 1, y + height - 1, dest_x, dest_y)
            return
        for row in range(max(height, 0)):
            for col in range(width):
                dest.set_pixel(dest_x + col, dest_y + row, self.pixel(x + col, y + row))

    def fill(self, x: int, y: int, width: int, height: int, color: int) -> None:
        """Fill a rectangle; parts off the bitmap are skipped."""
        for row in range(y, y + max(height, 0)):
            for col in range(x, x + max(width, 0)):
                self.set_pixel(col, row, color)

    def fill_pattern(
        self, x: int, y: int, width: int, height: int, pattern: ImageData, color: int = Color.WHITE
    ) -> None:
        """Tile a packed image over a rectangle, set bits in ``color``."""
        data, pat_w, pat_h, stride = _image_header(pattern)
        if not pat_w or not pat_h:
            return
        inv = _inverse(color)
        for tempy in range(height):
            row = tempy % pat_h
            for tempx in range(width):
                lit = _image_bit(data, stride, row, tempx % pat_w)
                self.set_pixel(x + tempx, y + tempy, color if lit else inv)

    def scroll(self, dx: int, dy: int, fill_color: int = Color.BLACK) -> None:
        """Scroll the whole bitmap."""
        self.scroll_region(0, 0, self._width, self._height, dx, dy, fill_color)

    def scroll_region(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        dx: int,
        dy: int,
        fill_color: int = Color.BLACK,
    ) -> None:
        """Scroll a region by (dx, dy) and fill the uncovered pixels."""
        if not dx and not dy:
            return
        if x < 0:
            width += x
            x = 0
        if y < 0:
            height += y
            y = 0
        if x + width > self._width:
            width = self._width - x
        if y + height > self._height:
            height = self._height - y
        if width <= 0 or height <= 0:
            return

        if dy < 0:
            if dx < 0:
                self._blit(x - dx, y - dy, x + width - 1 + dx, y + height - 1 + dy, x, y)
            else:
                self._blit(x, y - dy, x + width - 1 - dx, y + height - 1 + dy, x + dx, y)
        else:
            if dx < 0:
                self._blit(x - dx, y, x + width - 1 + dx, y + height - 1 - dy, x, y + dy)
            else:
                self._blit(x, y, x + width - 1 - dx, y + height - 1 - dy, x + dx, y + dy)

        if dy < 0:
            self.fill(x, y + height + dy, width, -dy, fill_color)
            if dx < 0:
                self.fill(x + width + dx, y, -dx, height + dy, fill_color)
            elif dx > 0:
                self.fill(x, y, dx, height + dy, fill_color)
        elif dy > 0:
            # The top band is given a negative height and so is left as it was.
            self.fill(x, y, width, -dy, fill_color)
            if dx < 0:
                self.fill(x + width + dx, y + dy, -dx, height - dy, fill_color)
            elif dx > 0:
                self.fill(x, y + dy, dx, height - dy, fill_color)
        elif dx < 0:
            self.fill(x + width + dx, y, -dx, height, fill_color)
        elif dx > 0:
            self.fill(x, y, dx, height, fill_color)

    def invert(self, x: int, y: int, width: int, height: int) -> None:
        """Swap black and white inside a rectangle."""
        for row in range(y, y + max(height, 0)):
            for col in range(x + width - 1, x - 1, -1):
                self.set_pixel(col, row, _inverse(self.pixel(col, row)))

    def _blit(self, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int) -> None:
        # Destination rows are placed at y1 - source_row + y3.
        offset_x = x3 - x1
        if y3 < y1 or (y1 == y3 and x3 <= x1):
            for tempy in range(y1, y2 + 1):
                dest_y = y1 - tempy + y3
                for tempx in range(x1, x2 + 1):
                    self.set_pixel(offset_x + tempx, dest_y, self.pixel(tempx, tempy))
        else:
            for tempy in range(y2, y1 - 1, -1):
                dest_y = y1 - tempy + y3
                for tempx in range(x2, x1 - 1, -1):
                    self.set_pixel(offset_x + tempx, dest_y, self.pixel(tempx, tempy))

    def _draw_circle_points(
        self,
        cx: int,
        cy: int,
        radius: int,
        x: int,
        y: int,
        border_color: int,
        fill_color: int,
    ) -> None:
        if x != y:
            for px, py in (
                (cx + x, cy + y), (cx + y, cy + x), (cx + y, cy - x), (cx + x, cy - y),
                (cx - x, cy - y), (cx - y, cy - x), (cx - y, cy + x), (cx - x, cy + y),
            ):
                self.set_pixel(px, py, border_color)
            if fill_color != Color.NO_FILL:
                if radius > 1:
                    self.draw_line(cx - x + 1, cy + y, cx + x - 1, cy + y, fill_color)
                    self.draw_line(cx - y + 1, cy + x, cx + y - 1, cy + x, fill_color)
                    self.draw_line(cx - x + 1, cy - y, cx + x - 1, cy - y, fill_color)
                    self.draw_line(cx - y + 1, cy - x, cx + y - 1, cy - x, fill_color)
                elif radius == 1:
                    self.set_pixel(cx, cy, fill_color)
        else:
            for px, py in ((cx + x, cy + y), (cx + y, cy - x), (cx - x, cy - y), (cx - y, cy + x)):
                self.set_pixel(px, py, border_color)
            if fill_color != Color.NO_FILL:
                if radius > 1:
                    self.draw_line(cx - x + 1, cy + y, cx + x - 1, cy + y, fill_color)
                    self.draw_line(cx - x + 1, cy - y, cx + x - 1, cy - y, fill_color)
                elif radius == 1:
                    self.set_pixel(cx, cy, fill_color)