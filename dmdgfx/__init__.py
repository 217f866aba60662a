"""Monochrome framebuffer drawing and bitmap fonts for dot-matrix LED panels."""

__version__ = "0.1.0"

__all__ = [
    "arabic_numbers",
    "bitmap",
    "font",
    "number_fonts",
    "small_fonts",
]