"""Numeral fonts for clock and counter displays: digits 0-9 and a colon."""

from __future__ import annotations

from .font import Font

_BIG_MIN_DATA = bytes([
    0x03, 0xD0, 0x06, 0x10, 0x30, 0x0B,
    0x06, 0x06, 0x06, 0x06, 0x06, 0x06, 0x06, 0x06,
    0x06, 0x06, 0x06,
    0xF8, 0xFC, 0x04, 0xC4, 0xFC, 0xF8, 0x1F, 0x3F, 0x23, 0x20, 0x3F, 0x1F,  # 0
    0x04, 0x04, 0xFC, 0xFC, 0x00, 0x00, 0x20, 0x20, 0x3F, 0x3F, 0x20, 0x20,  # 1
    0x18, 0x1C, 0x84, 0xC4, 0xFC, 0x78, 0x3E, 0x3F, 0x23, 0x21, 0x20, 0x20,  # 2
    0x18, 0x9C, 0x84, 0x84, 0xFC, 0x78, 0x18, 0x39, 0x21, 0x21, 0x3F, 0x1E,  # 3
    0x80, 0xE0, 0x38, 0xFC, 0xFC, 0x00, 0x07, 0x07, 0x24, 0x3F, 0x3F, 0x24,  # 4
    0xFC, 0xFC, 0x44, 0x44, 0xC4, 0x84, 0x18, 0x38, 0x20, 0x20, 0x3F, 0x1F,  # 5
    0xF8, 0xFC, 0x84, 0x84, 0x9C, 0x18, 0x1F, 0x3F, 0x20, 0x20, 0x3F, 0x1F,  # 6
    0x04, 0x04, 0x04, 0xC4, 0xF4, 0x1C, 0x00, 0x00, 0x3F, 0x3F, 0x00, 0x00,  # 7
    0x78, 0xFC, 0x84, 0x84, 0xFC, 0x78, 0x1E, 0x3F, 0x21, 0x21, 0x3F, 0x1E,  # 8
    0xF8, 0xFC, 0x04, 0x04, 0xFC, 0xF8, 0x18, 0x39, 0x21, 0x21, 0x3F, 0x1F,  # 9
    0x00, 0x00, 0x38, 0x38, 0x00, 0x00, 0x00, 0x00, 0x07, 0x07, 0x00, 0x00,  # :
])

_BIG_NUMBER_DATA = bytes([
    0x03, 0xD0, 0x06, 0x10, 0x30, 0x0B,
    0x06, 0x06, 0x06, 0x06, 0x06, 0x06, 0x06, 0x06,
    0x06, 0x06, 0x06,
    0xFC, 0xFE, 0x03, 0xC3, 0xFE, 0xFC, 0x3F, 0x7F, 0xC3, 0xC0, 0x7F, 0x3F,  # 0
    0x0C, 0x0C, 0xFF, 0xFF, 0x00, 0x00, 0xC0, 0xC0, 0xFF, 0xFF, 0xC0, 0xC0,  # 1
    0x0C, 0x0E, 0x83, 0xC3, 0xFE, 0x7C, 0xFE, 0xFF, 0xC3, 0xC1, 0xC0, 0xC0,  # 2
    0x0C, 0x8E, 0x83, 0x83, 0xFE, 0x7C, 0x30, 0x71, 0xC1, 0xC1, 0x7F, 0x3E,  # 3
    0x80, 0xF0, 0x3C, 0xFF, 0xFF, 0x00, 0x0F, 0x0F, 0xCC, 0xFF, 0xFF, 0xCC,  # 4
    0x7F, 0x7F, 0x33, 0x33, 0xF3, 0xE3, 0x38, 0x78, 0xC0, 0xC0, 0x7F, 0x3F,  # 5
    0xFC, 0xFE, 0xC3, 0xC3, 0xCE, 0x8C, 0x3F, 0x7F, 0xC0, 0xC0, 0x7F, 0x3F,  # 6
    0x07, 0x03, 0x03, 0xE3, 0xFF, 0x1F, 0x00, 0x00, 0xFF, 0xFF, 0x00, 0x00,  # 7
    0x7C, 0xFE, 0x83, 0x83, 0xFE, 0x7C, 0x3E, 0x7F, 0xC1, 0xC1, 0x7F, 0x3E,  # 8
    0xFC, 0xFE, 0x83, 0x83, 0xFE, 0xFC, 0x38, 0x79, 0xE1, 0xE1, 0x7F, 0x3F,  # 9
    0x00, 0x00, 0x38, 0x38, 0x00, 0x00, 0x00, 0x00, 0x1C, 0x1C, 0x00, 0x00,  # :
])

_BIGEST_DATA = bytes([
    0x06, 0xF1, 0x0A, 0x10, 0x30, 0x0C,
    0x0A, 0x0A, 0x0A, 0x0A, 0x0A, 0x0A, 0x0A, 0x0A, 0x0A, 0x0A,
    0x0A, 0x0A,
    0xFC, 0xFE, 0xFF, 0x03, 0x03, 0x03, 0x03, 0xFF, 0xFE, 0xFC,
    0x3F, 0x7F, 0xFF, 0xC0, 0xC0, 0xC0, 0xC0, 0xFF, 0x7F, 0x3F,  # 0
    0x00, 0x0C, 0x0C, 0x0E, 0xFF, 0xFF, 0xFF, 0x00, 0x00, 0x00,
    0x00, 0xC0, 0xC0, 0xC0, 0xFF, 0xFF, 0xFF, 0xC0, 0xC0, 0xC0,  # 1
    0x0C, 0x0E, 0x0F, 0x03, 0x03, 0x83, 0xC3, 0xFF, 0xFE, 0x7C,
    0xF0, 0xF8, 0xFC, 0xDE, 0xCF, 0xC7, 0xC3, 0xC1, 0xC0, 0xC0,  # 2
    0x0C, 0x0E, 0x0F, 0x83, 0x83, 0x83, 0xC3, 0xFF, 0xFE, 0x7C,
    0x30, 0x70, 0xF0, 0xC1, 0xC1, 0xC1, 0xC3, 0xFF, 0x7F, 0x3E,  # 3
    0xC0, 0xE0, 0xF0, 0x38, 0x1C, 0x0E, 0xFF, 0xFF, 0xFF, 0x00,
    0x1F, 0x1F, 0x1F, 0x18, 0x18, 0x18, 0xFF, 0xFF, 0xFF, 0x18,  # 4
    0xFF, 0xFF, 0xFF, 0x63, 0x63, 0x63, 0xE3, 0xE3, 0xC3, 0x83,
    0x30, 0x70, 0xF0, 0xC0, 0xC0, 0xC0, 0xC0, 0xFF, 0x7F, 0x3F,  # 5
    0xFC, 0xFE, 0xFF, 0x83, 0x83, 0x83, 0x83, 0x8F, 0x0E, 0x0C,
    0x3F, 0x7F, 0xFF, 0xC1, 0xC1, 0xC1, 0xC1, 0xFF, 0x7F, 0x3E,  # 6
    0x03, 0x03, 0x03, 0x03, 0x83, 0xC3, 0xE3, 0x7F, 0x3F, 0x1F,
    0x00, 0x00, 0x00, 0xFF, 0xFF, 0xFF, 0x00, 0x00, 0x00, 0x00,  # 7
    0x7C, 0xFE, 0xFF, 0x83, 0x83, 0x83, 0x83, 0xFF, 0xFE, 0x7C,
    0x3E, 0x7F, 0xFF, 0xC1, 0xC1, 0xC1, 0xC1, 0xFF, 0x7F, 0x3E,  # 8
    0x7C, 0xFE, 0xFF, 0x83, 0x83, 0x83, 0x83, 0xFF, 0xFE, 0xFC,
    0x30, 0x70, 0xF1, 0xC1, 0xC1, 0xC1, 0xC1, 0xFF, 0x7F, 0x3F,  # 9
    0x00, 0x00, 0x00, 0x18, 0x3C, 0x3C, 0x18, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x18, 0x3C, 0x3C, 0x18, 0x00, 0x00, 0x00,  # :
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,  # ;
])

_SEGMENT_DATA = bytes([
    0x00, 0x00, 0x07, 0x0F, 0x30, 0x0A,
    0x7E, 0x3D, 0x03, 0x03, 0x03, 0x3D, 0x7E, 0x7E, 0xBC, 0xC0, 0xC0, 0xC0, 0xBC, 0x7E,  # 0
    0x00, 0x00, 0x00, 0x00, 0x00, 0x3C, 0x7E, 0x00, 0x00, 0x00, 0x00, 0x00, 0x3C, 0x7E,  # 1
    0x00, 0x81, 0xC3, 0xC3, 0xC3, 0xBD, 0x7E, 0x7E, 0xBC, 0xC2, 0xC2, 0xC2, 0x80, 0x00,  # 2
    0x00, 0x81, 0xC3, 0xC3, 0xC3, 0xBD, 0x7E, 0x00, 0x80, 0xC2, 0xC2, 0xC2, 0xBC, 0x7E,  # 3
    0x7E, 0xBC, 0xC0, 0xC0, 0xC0, 0xBC, 0x7E, 0x00, 0x00, 0x02, 0x02, 0x02, 0x3C, 0x7E,  # 4
    0x7E, 0xBD, 0xC3, 0xC3, 0xC3, 0x81, 0x00, 0x00, 0x80, 0xC2, 0xC2, 0xC2, 0xBC, 0x7E,  # 5
    0x7E, 0xBD, 0xC3, 0xC3, 0xC3, 0x81, 0x00, 0x7E, 0xBC, 0xC2, 0xC2, 0xC2, 0xBC, 0x7E,  # 6
    0x00, 0x01, 0x03, 0x03, 0x03, 0x3D, 0x7E, 0x00, 0x00, 0x00, 0x00, 0x00, 0x3C, 0x7E,  # 7
    0x7E, 0xBD, 0xC3, 0xC3, 0xC3, 0xBD, 0x7E, 0x7E, 0xBC, 0xC2, 0xC2, 0xC2, 0xBC, 0x7E,  # 8
    0x7E, 0xBD, 0xC3, 0xC3, 0xC3, 0xBD, 0x7E, 0x00, 0x80, 0xC2, 0xC2, 0xC2, 0xBC, 0x7E,  # 9
])

_SEVEN_SGMT16_DATA = bytes([
    0x04, 0x31, 0x0A, 0x10, 0x30, 0x0B,
    0x06, 0x06, 0x06, 0x06, 0x06, 0x06, 0x06, 0x06, 0x06, 0x06,
    0x06,
    0xFE, 0xFF, 0x83, 0xC3, 0xFF, 0xFE, 0x7F, 0xFF, 0xC1, 0xC0, 0xFF, 0x7F,  # 0
    0x00, 0x00, 0xFE, 0xFF, 0x00, 0x00, 0x00, 0x00, 0x7F, 0xFF, 0x00, 0x00,  # 1
    0x01, 0x83, 0x83, 0x83, 0xFF, 0xFE, 0x7F, 0xFF, 0xC1, 0xC1, 0xC1, 0x80,  # 2
    0x01, 0x83, 0x83, 0x83, 0xFF, 0xFE, 0x80, 0xC1, 0xC1, 0xC1, 0xFF, 0x7F,  # 3
    0xFF, 0xFE, 0x80, 0x80, 0xFE, 0xFF, 0x00, 0x01, 0x01, 0x01, 0x7F, 0xFF,  # 4
    0xFE, 0xFF, 0x83, 0x83, 0x83, 0x01, 0x80, 0xC1, 0xC1, 0xC1, 0xFF, 0x7F,  # 5
    0xFE, 0xFF, 0x83, 0x83, 0x83, 0x01, 0x7F, 0xFF, 0xC1, 0xC1, 0xFF, 0x7F,  # 6
    0x01, 0x03, 0x03, 0x03, 0xFF, 0xFE, 0x00, 0x00, 0x00, 0x00, 0x7F, 0xFF,  # 7
    0x7E, 0xFF, 0x83, 0x83, 0xFF, 0x7E, 0x7F, 0xFF, 0xC1, 0xC1, 0xFF, 0x7F,  # 8
    0xFE, 0xFF, 0x83, 0x83, 0xFF, 0xFE, 0x80, 0xC1, 0xC1, 0xC1, 0xFF, 0x7F,  # 9
    0x00, 0x00, 0x70, 0x70, 0x00, 0x00, 0x00, 0x00, 0x1C, 0x1C, 0x00, 0x00,  # :
])

_FONT_6X6_DATA = bytes([
    0x03, 0xD0, 0x06, 0x06, 0x30, 0x0B,
    0x06, 0x06, 0x06, 0x06, 0x06, 0x06, 0x06, 0x06,
    0x06, 0x06, 0x06,
    0x3F, 0x3F, 0x21, 0x21, 0x3F, 0x3F,  # 0
    0x21, 0x21, 0x3F, 0x3F, 0x20, 0x20,  # 1
    0x39, 0x39, 0x29, 0x29, 0x2F, 0x2F,  # 2
    0x29, 0x29, 0x29, 0x29, 0x3F, 0x3F,  # 3
    0x0F, 0x0F, 0x08, 0x08, 0x3F, 0x3F,  # 4
    0x2F, 0x2F, 0x29, 0x29, 0x39, 0x39,  # 5
    0x3F, 0x3F, 0x29, 0x29, 0x39, 0x39,  # 6
    0x01, 0x01, 0x01, 0x01, 0x3F, 0x3F,  # 7
    0x3F, 0x3F, 0x29, 0x29, 0x3F, 0x3F,  # 8
    0x2F, 0x2F, 0x29, 0x29, 0x3F, 0x3F,  # 9
    0x00, 0x00, 0x33, 0x33, 0x00, 0x00,  # :
])

_KEC_NUMBER_DATA = bytes([
    0x03, 0xD0, 0x03, 0x10, 0x30, 0x0B,
    0x03, 0x03, 0x03, 0x03, 0x03, 0x03, 0x03, 0x03,
    0x03, 0x03, 0x03,
    0xFE, 0x02, 0xFE, 0x3F, 0x20, 0x3F,  # 0
    0x04, 0xFE, 0x00, 0x20, 0x3F, 0x20,  # 1
    0x82, 0x82, 0xFE, 0x3F, 0x20, 0x20,  # 2
    0x82, 0x82, 0xFE, 0x20, 0x20, 0x3F,  # 3
    0xFE, 0x80, 0xFE, 0x00, 0x00, 0x3F,  # 4
    0xFE, 0x82, 0x82, 0x20, 0x20, 0x3F,  # 5
    0xFE, 0x82, 0x82, 0x3F, 0x20, 0x3F,  # 6
    0x02, 0x02, 0xFE, 0x00, 0x00, 0x3F,  # 7
    0xFE, 0x82, 0xFE, 0x3F, 0x20, 0x3F,  # 8
    0xFE, 0x82, 0xFE, 0x20, 0x20, 0x3F,  # 9
    0x00, 0x30, 0x00, 0x00, 0x06, 0x00,  # :
])

BIG_MIN = Font.from_bytes(_BIG_MIN_DATA)
BIG_NUMBER = Font.from_bytes(_BIG_NUMBER_DATA)
BIGEST = Font.from_bytes(_BIGEST_DATA)
SEGMENT = Font.from_bytes(_SEGMENT_DATA)
SEVEN_SGMT16 = Font.from_bytes(_SEVEN_SGMT16_DATA)
FONT_6X6 = Font.from_bytes(_FONT_6X6_DATA)
KEC_NUMBER = Font.from_bytes(_KEC_NUMBER_DATA)


def fonts() -> dict[str, Font]:
    """Return the numeral fonts keyed by name."""
    return {
        "BigMin": BIG_MIN,
        "BigNumber": BIG_NUMBER,
        "Bigest": BIGEST,
        "segment": SEGMENT,
        "seven_sgmt16": SEVEN_SGMT16,
        "Font6x6": FONT_6X6,
        "KecNumber": KEC_NUMBER,
    }