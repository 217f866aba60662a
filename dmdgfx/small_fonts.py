"""Small fixed-width fonts: a 4x6 capitals font and a 3x5 system font."""

from __future__ import annotations

from .font import Font

_SMALL_CAP_4X6_DATA = bytes([
    0x00, 0x00, 0x04, 0x06, 0x20, 0x60,
    0x00, 0x00, 0x00, 0x00,  # (space)
    0x00, 0x5F, 0x00, 0x00,  # !
    0x07, 0x00, 0x07, 0x00,  # "
    0x7F, 0x14, 0x7F, 0x14,  # #
    0x2A, 0x7F, 0x2A, 0x12,  # $
    0x13, 0x08, 0x64, 0x62,  # %
    0x49, 0x55, 0x22, 0x50,  # &
    0x05, 0x03, 0x00, 0x00,  # '
    0x1C, 0x22, 0x41, 0x00,  # (
    0x41, 0x22, 0x1C, 0x00,  # )
    0x2A, 0x1C, 0x2A, 0x08,  # *
    0x08, 0x3E, 0x08, 0x08,  # +
    0x50, 0x30, 0x00, 0x00,  # ,
    0x08, 0x08, 0x08, 0x08,  # -
    0x60, 0x60, 0x00, 0x00,  # .
    0x10, 0x08, 0x04, 0x02,  # /
    0x3F, 0x21, 0x21, 0x3F,  # 0
    0x00, 0x21, 0x3F, 0x20,  # 1
    0x39, 0x29, 0x29, 0x2F,  # 2
    0x21, 0x29, 0x29, 0x3F,  # 3
    0x0F, 0x08, 0x08, 0x3F,  # 4
    0x2F, 0x29, 0x29, 0x39,  # 5
    0x3F, 0x29, 0x29, 0x39,  # 6
    0x01, 0x01, 0x01, 0x3F,  # 7
    0x3F, 0x29, 0x29, 0x3F,  # 8
    0x2F, 0x29, 0x29, 0x3F,  # 9
    0x00, 0x12, 0x12, 0x00,  # :
    0x00, 0x12, 0x12, 0x00,  # ;
    0x00, 0x12, 0x00, 0x00,  # <
    0x0A, 0x0A, 0x0A, 0x0A,  # =
    0x00, 0x12, 0x00, 0x00,  # >
    0x00, 0x00, 0x00, 0x00,  # ?
    0x3E, 0x23, 0x21, 0x3F,  # @
    0x3F, 0x09, 0x09, 0x3F,  # A
    0x3F, 0x29, 0x29, 0x37,  # B
    0x3F, 0x21, 0x21, 0x21,  # C
    0x3F, 0x21, 0x21, 0x1E,  # D
    0x3F, 0x29, 0x29, 0x21,  # E
    0x3F, 0x09, 0x09, 0x01,  # F
    0x3F, 0x21, 0x29, 0x39,  # G
    0x3F, 0x08, 0x08, 0x3F,  # H
    0x00, 0x3F, 0x00, 0x00,  # I
    0x38, 0x20, 0x20, 0x3F,  # J
    0x3F, 0x0C, 0x12, 0x21,  # K
    0x3F, 0x20, 0x20, 0x20,  # L
    0x3F, 0x0E, 0x0E, 0x3F,  # M
    0x3F, 0x01, 0x01, 0x3F,  # N
    0x3F, 0x21, 0x21, 0x3F,  # O
    0x3F, 0x09, 0x09, 0x0F,  # P
    0x3F, 0x29, 0x31, 0x3F,  # Q
    0x3F, 0x09, 0x19, 0x2F,  # R
    0x2F, 0x29, 0x29, 0x39,  # S
    0x01, 0x3F, 0x01, 0x00,  # T
    0x3F, 0x20, 0x20, 0x3F,  # U
    0x0F, 0x30, 0x30, 0x0F,  # V
    0x3F, 0x3C, 0x38, 0x3F,  # W
    0x33, 0x0C, 0x0C, 0x3B,  # X
    0x2F, 0x28, 0x28, 0x3F,  # Y
    0x31, 0x29, 0x25, 0x23,  # Z
])

_SYSTEM_3X5_DATA = bytes([
    0x00, 0x00, 0x03, 0x05, 0x20, 0x60,
    0x00, 0x00, 0x00,  # (space)
    0x00, 0x0B, 0x00,  # !
    0x01, 0x00, 0x01,  # "
    0x14, 0x7F, 0x14,  # #
    0x24, 0x2A, 0x7F,  # $
    0x23, 0x13, 0x08,  # %
    0x36, 0x49, 0x55,  # &
    0x00, 0x05, 0x03,  # '
    0x00, 0x1C, 0x22,  # (
    0x00, 0x41, 0x22,  # )
    0x08, 0x2A, 0x1C,  # *
    0x08, 0x08, 0x3E,  # +
    0x00, 0x50, 0x30,  # ,
    0x08, 0x08, 0x08,  # -
    0x00, 0x60, 0x60,  # .
    0x20, 0x10, 0x08,  # /
    0x1F, 0x11, 0x1F,  # 0
    0x12, 0x1F, 0x10,  # 1
    0x1D, 0x15, 0x17,  # 2
    0x11, 0x15, 0x1F,  # 3
    0x07, 0x04, 0x1F,  # 4
    0x17, 0x15, 0x1D,  # 5
    0x1F, 0x15, 0x1D,  # 6
    0x01, 0x01, 0x1F,  # 7
    0x1F, 0x15, 0x1F,  # 8
    0x07, 0x05, 0x1F,  # 9
    0x00, 0x0A, 0x00,  # :
    0x10, 0x0A, 0x00,  # ;
    0x04, 0x0A, 0x11,  # <
    0x0A, 0x0A, 0x0A,  # =
    0x11, 0x0A, 0x04,  # >
    0x01, 0x15, 0x07,  # ?
    0x0F, 0x17, 0x17,  # @
    0x1E, 0x05, 0x1E,  # A
    0x1F, 0x15, 0x0A,  # B
    0x0E, 0x41, 0x41,  # C
    0x7F, 0x41, 0x41, 0x22, 0x1C,  # D
    0x7F, 0x49, 0x49, 0x49, 0x41,  # E
    0x7F, 0x09, 0x09, 0x01, 0x01,  # F
    0x3E, 0x41, 0x41, 0x51, 0x32,  # G
    0x7F, 0x08, 0x08, 0x08, 0x7F,  # H
    0x00, 0x41, 0x7F, 0x41, 0x00,  # I
    0x20, 0x40, 0x41, 0x3F, 0x01,  # J
    0x7F, 0x08, 0x14, 0x22, 0x41,  # K
    0x7F, 0x40, 0x40, 0x40, 0x40,  # L
    0x7F, 0x02, 0x04, 0x02, 0x7F,  # M
    0x7F, 0x04, 0x08, 0x10, 0x7F,  # N
    0x3E, 0x41, 0x41, 0x41, 0x3E,  # O
    0x7F, 0x09, 0x09, 0x09, 0x06,  # P
    0x3E, 0x41, 0x51, 0x21, 0x5E,  # Q
    0x7F, 0x09, 0x19, 0x29, 0x46,  # R
    0x1E, 0x05, 0x1E,  # s
    0x1F, 0x15, 0x0A,  # t
    0x1F, 0x15, 0x0A,  # U
    0x1F, 0x20, 0x40, 0x20, 0x1F,  # V
    0x7F, 0x20, 0x18, 0x20, 0x7F,  # W
    0x63, 0x14, 0x08, 0x14, 0x63,  # X
    0x03, 0x04, 0x78, 0x04, 0x03,  # Y
    0x61, 0x51, 0x49, 0x45, 0x43,  # Z
    0x00, 0x00, 0x7F, 0x41, 0x41,  # [
    0x02, 0x04, 0x08, 0x10, 0x20,  # backslash
    0x41, 0x41, 0x7F, 0x00, 0x00,  # ]
    0x04, 0x02, 0x01, 0x02, 0x04,  # ^
    0x40, 0x40, 0x40, 0x40, 0x40,  # _
    0x00, 0x01, 0x02, 0x04, 0x00,  # `
    0x20, 0x54, 0x54, 0x54, 0x78,  # a
    0x7F, 0x48, 0x44, 0x44, 0x38,  # b
    0x38, 0x44, 0x44, 0x44, 0x20,  # c
    0x38, 0x44, 0x44, 0x48, 0x7F,  # d
    0x38, 0x54, 0x54, 0x54, 0x18,  # e
    0x08, 0x7E, 0x09, 0x01, 0x02,  # f
    0x08, 0x14, 0x54, 0x54, 0x3C,  # g
    0x7F, 0x08, 0x04, 0x04, 0x78,  # h
    0x00, 0x44, 0x7D, 0x40, 0x00,  # i
    0x20, 0x40, 0x44, 0x3D, 0x00,  # j
    0x00, 0x7F, 0x10, 0x28, 0x44,  # k
    0x00, 0x41, 0x7F, 0x40, 0x00,  # l
    0x7C, 0x04, 0x18, 0x04, 0x78,  # m
    0x7C, 0x08, 0x04, 0x04, 0x78,  # n
    0x38, 0x44, 0x44, 0x44, 0x38,  # o
    0x7C, 0x14, 0x14, 0x14, 0x08,  # p
    0x08, 0x14, 0x14, 0x18, 0x7C,  # q
    0x7C, 0x08, 0x04, 0x04, 0x08,  # r
    0x48, 0x54, 0x54, 0x54, 0x20,  # s
    0x04, 0x3F, 0x44, 0x40, 0x20,  # t
    0x3C, 0x40, 0x40, 0x20, 0x7C,  # u
    0x1C, 0x20, 0x40, 0x20, 0x1C,  # v
    0x3C, 0x40, 0x30, 0x40, 0x3C,  # w
    0x44, 0x28, 0x10, 0x28, 0x44,  # x
    0x0C, 0x50, 0x50, 0x50, 0x3C,  # y
    0x44, 0x64, 0x54, 0x4C, 0x44,  # z
    0x00, 0x08, 0x36, 0x41, 0x00,  # {
    0x00, 0x00, 0x7F, 0x00, 0x00,  # |
    0x00, 0x41, 0x36, 0x08, 0x00,  # }
    0x08, 0x08, 0x2A, 0x1C, 0x08,  # ->
    0x08, 0x1C, 0x2A, 0x08, 0x08,  # <-
])

SMALL_CAP_4X6 = Font.from_bytes(_SMALL_CAP_4X6_DATA)
SYSTEM_3X5 = Font.from_bytes(_SYSTEM_3X5_DATA)


def fonts() -> dict[str, Font]:
    """Return the small fonts keyed by name."""
    return {"SmallCap4x6": SMALL_CAP_4X6, "System3x5": SYSTEM_3X5}