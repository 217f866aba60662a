"""Eastern Arabic numeral fonts."""

from __future__ import annotations

from .font import Font

_ARABIC_NUMBER_DATA = bytes([
    0x05, 0xB1, 0x08, 0x10, 0x30, 0x0B,
    0x08, 0x08, 0x08, 0x08, 0x08, 0x08, 0x08, 0x09, 0x09, 0x08,
    0x08,
    0x00, 0x00, 0x00, 0x80, 0x80, 0x00, 0x00, 0x00,
    0x0C, 0x1E, 0x3F, 0x67, 0x67, 0x3F, 0x1E, 0x0C,  # 48
    0x07, 0x1F, 0x7F, 0xF8, 0xC0, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x07, 0x1F, 0xFE, 0xF0, 0x00,  # 49
    0x0E, 0x1C, 0x78, 0xF8, 0xF8, 0x1C, 0x0E, 0x07,
    0x00, 0x00, 0x00, 0x01, 0x07, 0x1F, 0x7C, 0xF0,  # 50
    0x1E, 0x7C, 0xF8, 0xDE, 0x9E, 0x18, 0x0E, 0x07,
    0x00, 0x00, 0x00, 0x01, 0x07, 0x1E, 0x78, 0xF0,  # 51
    0x78, 0x7C, 0xCE, 0xC7, 0xE3, 0x63, 0x01, 0x00,
    0x3E, 0x7F, 0xE3, 0xE1, 0xE0, 0x70, 0x38, 0x18,  # 52
    0x00, 0x00, 0x80, 0xC0, 0xC0, 0x80, 0x00, 0x00,
    0x7E, 0xE7, 0xC3, 0xC1, 0xC1, 0xC3, 0xE7, 0x7E,  # 53
    0x03, 0x07, 0x06, 0x06, 0x06, 0x0E, 0xFF, 0xFF,
    0x00, 0x00, 0x00, 0x00, 0xF0, 0xFE, 0x1F, 0x03,  # 54
    0xFF, 0xFF, 0x00, 0x00, 0x00, 0x00, 0x00, 0xFF, 0xFF,
    0x00, 0x0F, 0x3F, 0x60, 0x80, 0x60, 0x3F, 0x0F, 0x00,  # 55
    0x80, 0xF0, 0xFC, 0x06, 0x01, 0x06, 0xFC, 0xF0, 0x80,
    0xFF, 0xFF, 0x00, 0x00, 0x00, 0x00, 0x00, 0xFF, 0xFF,  # 56
    0x3C, 0x7E, 0xE7, 0xC3, 0xC3, 0xFF, 0xFE, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x1F, 0xFF, 0xF0,  # 57
    0x00, 0x00, 0x70, 0x70, 0x70, 0x70, 0x00, 0x00,
    0x00, 0x00, 0x0E, 0x0E, 0x0E, 0x0E, 0x00, 0x00,  # 58
])

_ARAB_10X16_DATA = bytes([
    0x06, 0xF1, 0x0A, 0x0F, 0x30, 0x0B,
    0x0A, 0x0A, 0x0A, 0x0A, 0x0A, 0x0A, 0x0A, 0x0A, 0x0A, 0x0A,
    0x0A,
    0x00, 0x00, 0x80, 0xC0, 0xE0, 0xC0, 0x80, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x01, 0x03, 0x07, 0x03, 0x01, 0x00, 0x00, 0x00,  # 48
    0x00, 0x00, 0x0F, 0x3E, 0x7C, 0xF8, 0xE0, 0x80, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x01, 0x07, 0x3F, 0xFC, 0x00,  # 49
    0x1C, 0x3E, 0x7C, 0xF0, 0xF0, 0x70, 0x38, 0x1C, 0x06, 0x01,
    0x00, 0x00, 0x00, 0x03, 0x0F, 0x7F, 0xF0, 0x00, 0x00, 0x00,  # 50
    0x0E, 0x3C, 0xF8, 0xF0, 0x38, 0x1C, 0x3F, 0x38, 0x1E, 0x0F,
    0x00, 0x00, 0x03, 0x3F, 0xF8, 0x00, 0x00, 0x00, 0x00, 0x00,  # 51
    0xF0, 0xF8, 0xCC, 0xC6, 0x83, 0x81, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x70, 0xFF, 0xE7, 0xE1, 0x60, 0x60, 0x20, 0x10,  # 52
    0x00, 0xC0, 0xE0, 0x3C, 0x3E, 0x3E, 0x3E, 0x7C, 0xF0, 0xC0,
    0x1F, 0x7F, 0xF0, 0xF0, 0xF0, 0xF0, 0x70, 0x30, 0x1F, 0x07,  # 53
    0x06, 0x0F, 0x0E, 0x0E, 0x0E, 0xFE, 0xFE, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x03, 0x1F, 0x7C, 0x70, 0x00,  # 54
    0x1F, 0x7E, 0xF8, 0xE0, 0x80, 0x00, 0x00, 0xE0, 0x7E, 0x0F,
    0x00, 0x00, 0x00, 0x03, 0x1F, 0xFE, 0x7F, 0x03, 0x00, 0x00,  # 55
    0x00, 0x00, 0xC0, 0xFE, 0x7F, 0xF8, 0xC0, 0x00, 0x00, 0x00,
    0xF0, 0x7E, 0x07, 0x00, 0x00, 0x01, 0x07, 0x1F, 0x7E, 0xF8,  # 56
    0x3C, 0x6E, 0xC7, 0x83, 0x83, 0xCE, 0xFC, 0xF8, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x01, 0x0F, 0x3F, 0x78, 0xF0,  # 57
    0x00, 0x00, 0x00, 0x70, 0x60, 0x40, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x01, 0x03, 0x07, 0x00, 0x00, 0x00, 0x00,  # 58
])

_ARAB_16X10_DATA = bytes([
    0x01, 0x20, 0x0A, 0x10, 0x30, 0x0C,
    0x0A, 0x0A, 0x0A, 0x0A, 0x0A, 0x0A,
    0x0A, 0x0A, 0x0A, 0x0A, 0x07, 0x07,
    0x00, 0x00, 0x80, 0xC0, 0xE0, 0xC0, 0x80, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x01, 0x03, 0x07, 0x03, 0x01, 0x00, 0x00, 0x00,  # 0
    0x00, 0x0F, 0x3E, 0x7C, 0xF8, 0xE0, 0x80, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x01, 0x07, 0x3F, 0xFC, 0x00, 0x00,  # 1
    0x1C, 0x3E, 0x7C, 0xF0, 0xF0, 0x70, 0x38, 0x1C, 0x06, 0x01,
    0x00, 0x00, 0x00, 0x03, 0x0F, 0x7F, 0xF0, 0x00, 0x00, 0x00,  # 2
    0x0E, 0x3C, 0xF8, 0xF8, 0x3C, 0x3F, 0x38, 0x38, 0x1C, 0x0F,
    0x00, 0x00, 0x03, 0x3F, 0xF8, 0x00, 0x00, 0x00, 0x00, 0x00,  # 3
    0xF0, 0xF8, 0xCC, 0xC6, 0x83, 0x81, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x70, 0xFF, 0xE7, 0xE1, 0x60, 0x60, 0x20, 0x10,  # 4
    0x80, 0xE0, 0x70, 0x1C, 0x1E, 0x1E, 0x3E, 0x7C, 0xF0, 0xC0,
    0x1F, 0x7F, 0xF0, 0xF0, 0xF0, 0xF0, 0x70, 0x38, 0x1F, 0x07,  # 5
    0x06, 0x0F, 0x0C, 0x0C, 0x0C, 0x0C, 0xFE, 0xFF, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x03, 0x1F, 0x7C, 0xF0,  # 6
    0x1F, 0x7E, 0xF8, 0xE0, 0x80, 0x00, 0x80, 0xF0, 0x7E, 0x0F,
    0x00, 0x00, 0x00, 0x03, 0x1F, 0xFF, 0x7F, 0x01, 0x00, 0x00,  # 7
    0x00, 0x00, 0xC0, 0xFE, 0x7F, 0xF8, 0xC0, 0x00, 0x00, 0x00,
    0xF0, 0x7E, 0x07, 0x00, 0x00, 0x01, 0x07, 0x1F, 0x7E, 0xF8,  # 8
    0x3C, 0x6E, 0xC7, 0x83, 0x87, 0xCE, 0xFC, 0xF8, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x01, 0x0F, 0x3F, 0x78, 0xF0,  # 9
    0x00, 0x00, 0x70, 0x60, 0x40, 0x00, 0x00,
    0x00, 0x00, 0x02, 0x06, 0x0E, 0x00, 0x00,  # :
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,  # ;
])

ARABIC_NUMBER = Font.from_bytes(_ARABIC_NUMBER_DATA)
ARAB_10X16 = Font.from_bytes(_ARAB_10X16_DATA)
ARAB_16X10 = Font.from_bytes(_ARAB_16X10_DATA)


def fonts() -> dict[str, Font]:
    """Return the Arabic numeral fonts keyed by name."""
    return {
        "Arabic_number": ARABIC_NUMBER,
        "arab10x16": ARAB_10X16,
        "arab16x10": ARAB_16X10,
    }