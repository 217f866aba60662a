# dmdgfx

A small, dependency-free library for drawing on 1-bit framebuffers of the kind
used by dot-matrix LED panels, together with a set of bitmap fonts in the
compact column-major format common on such displays.

## Installation

```
pip install dmdgfx
```

## Drawing

`dmdgfx.bitmap.Bitmap` is a monochrome framebuffer. Pixels are `Color.WHITE`
(lit) or `Color.BLACK` (unlit); `Color.NO_FILL` leaves the interior of a shape
untouched. A new bitmap starts out all black, and pixels outside the bitmap
read as black and ignore writes.

```python
from dmdgfx.bitmap import Bitmap, Color

screen = Bitmap(32, 16)
screen.clear(Color.BLACK)
screen.draw_line(0, 0, 31, 15, Color.WHITE)
screen.draw_rect(2, 2, 10, 8, Color.WHITE, Color.NO_FILL)
screen.draw_filled_circle(20, 8, 4, Color.WHITE)
screen.invert(0, 0, 4, 4)

print(screen.pixel(0, 0))
```

Regions can be copied between bitmaps (or within one) with `copy`, filled with
a solid colour (`fill`) or a repeating pattern (`fill_pattern`), and scrolled
either as a whole (`scroll`) or within a rectangle (`scroll_region`), with the
uncovered pixels set to a fill colour. Another `Bitmap` can be stamped onto a
bitmap with `draw_bitmap` / `draw_inverted_bitmap`, and a packed image (width
byte, height byte, then rows of MSB-first bits) with `draw_image` /
`draw_inverted_image`.

`width`, `height` and `stride` describe the buffer, and `data` returns a copy
of the packed frame buffer: eight pixels per byte, most significant bit first,
with a set bit meaning an unlit pixel.

## Fonts

Fonts are `dmdgfx.font.Font` objects, built from their packed byte form with
`Font.from_bytes`: a six-byte header (two size bytes, width, height, first
character, character count), then a width table unless both size bytes are
zero (a fixed-width font), then the glyph columns. `Font.contains`,
`Font.char_width` and `Font.glyph` give access to a font's characters;
`glyph` returns the character as rows of `True` (lit) and `False` pixels and
raises `KeyError` for a character the font does not have.

The package ships these fonts; each module's `fonts()` returns them by name:

- `dmdgfx.small_fonts` – `SmallCap4x6` (4×6 capitals, digits and punctuation)
  and `System3x5` (a small fixed-width font)
- `dmdgfx.number_fonts` – digit-and-colon fonts for clocks and counters:
  `BigMin`, `BigNumber`, `Bigest`, `segment`, `seven_sgmt16`, `Font6x6`,
  `KecNumber`
- `dmdgfx.arabic_numbers` – Arabic-Indic digit fonts: `Arabic_number`,
  `arab10x16`, `arab16x10`

## Text

```python
from dmdgfx.bitmap import Bitmap, Color
from dmdgfx.small_fonts import SMALL_CAP_4X6

screen = Bitmap(64, 16)
screen.font = SMALL_CAP_4X6
screen.text_color = Color.WHITE

width = screen.text_width("HELLO")
screen.draw_text(0, 0, "HELLO")
```

`draw_text` leaves a one-pixel gap between characters and stops once it runs
past the right edge. A space is drawn as wide as the letter `n`. `char_width`,
`text_width` and `text_height` measure text in the bitmap's current font, and
`draw_char` draws a single character and returns its width. Without a font,
nothing is drawn and every measurement is zero.

## What it does not do

The package only keeps the image in memory. It does not drive a panel, refresh
a display or talk to any hardware; send `Bitmap.data` to your display by
whatever means suits it. Its fonts are the small, capitals and numeral fonts
listed above; there is no larger proportional font for mixed-case text.

## Running the tests

```
pip install -e ".[test]"
pytest
```