"""Bitmap fonts in the column-major layout used by LED matrix displays.

A font blob starts with a six byte header::

    size (2 bytes), width, height, first char, char count

If both size bytes are zero the font is fixed width and every glyph is
``width`` columns wide.  Otherwise a table of ``char count`` widths follows
the header.  Glyph data is stored column by column, one byte per eight
pixel rows, least significant bit at the top.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

_HEADER_SIZE = 6

CharLike = Union[str, int]


def _char_code(ch: CharLike) -> int:
    if isinstance(ch, int):
        return ch
    if isinstance(ch, str) and len(ch) == 1:
        return ord(ch)
    raise TypeError(f"expected a single character or a character code, got {ch!r}")


@dataclass(frozen=True)
class Font:
    """A parsed bitmap font."""

    width: int
    height: int
    first_char: int
    char_count: int
    char_widths: tuple[int, ...] | None
    glyph_data: bytes

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | list[int]) -> "Font":
        """Parse a font blob; raise ValueError if the header or width table is cut short."""
        blob = bytes(data)
        if len(blob) < _HEADER_SIZE:
            raise ValueError(
                f"font data needs at least {_HEADER_SIZE} header bytes, got {len(blob)}"
            )
        width, height, first_char, char_count = blob[2:_HEADER_SIZE]
        if blob[0] == 0 and blob[1] == 0:
            return cls(width, height, first_char, char_count, None, blob[_HEADER_SIZE:])
        table_end = _HEADER_SIZE + char_count
        if len(blob) < table_end:
            raise ValueError(
                f"font width table needs {char_count} bytes, "
                f"only {len(blob) - _HEADER_SIZE} present"
            )
        return cls(
            width,
            height,
            first_char,
            char_count,
            tuple(blob[_HEADER_SIZE:table_end]),
            blob[table_end:],
        )

    @property
    def is_fixed(self) -> bool:
        """True when every glyph has the font's fixed width."""
        return self.char_widths is None

    @property
    def height_bytes(self) -> int:
        """Number of bytes per glyph column."""
        return (self.height + 7) >> 3

    @property
    def last_char(self) -> int:
        """Code of the last character in the font."""
        return self.first_char + self.char_count - 1

    def contains(self, ch: CharLike) -> bool:
        """Whether the character lies within the font's range."""
        code = _char_code(ch)
        if code < 0 or code > 0xFF:
            return False
        return self.first_char <= code < self.first_char + self.char_count

    def char_width(self, ch: CharLike) -> int:
        """Width in pixels of the character, or 0 when the font lacks it."""
        if not self.contains(ch):
            return 0
        if self.char_widths is None:
            return self.width
        return self.char_widths[_char_code(ch) - self.first_char]

    def _byte(self, offset: int) -> int:
        # Bytes beyond the end of the stored data read as blank columns.
        if offset < len(self.glyph_data):
            return self.glyph_data[offset]
        return 0

    def _row_count(self) -> int:
        height_bytes = self.height_bytes
        if height_bytes == 0:
            return 0
        if height_bytes == 1:
            # Rows up to and including ``height`` are decoded from the byte.
            return min(8, self.height + 1)
        return self.height

    def glyph(self, ch: CharLike) -> tuple[tuple[bool, ...], ...]:
        """Return the glyph as rows of lit (True) and unlit pixels.

        Raises KeyError when the character is outside the font.
        """
        if not self.contains(ch):
            raise KeyError(ch)
        index = _char_code(ch) - self.first_char
        height_bytes = self.height_bytes
        if self.char_widths is None:
            width = self.width
            start = index * height_bytes * width
        else:
            width = self.char_widths[index]
            start = sum(self.char_widths[:index]) * height_bytes

        rows = [[False] * width for _ in range(self._row_count())]
        for cx in range(width):
            for cy in range(height_bytes):
                value = self._byte(start + cy * width + cx)
                if height_bytes > 1 and cy == height_bytes - 1:
                    posn = self.height - 8
                else:
                    posn = cy * 8
                for bit in range(8):
                    row = posn + bit
                    if cy * 8 <= row <= self.height:
                        rows[row][cx] = bool((value >> bit) & 1)
        return tuple(tuple(row) for row in rows)