from __future__ import annotations

from .types import ImageBuffer, as_bytes

FILTER_NONE = 0


def serialize_scanlines(pixels: bytes, width: int, height: int) -> bytes:
    """Split a flat RGB buffer into rows, each prefixed with a filter-type byte."""
    image = ImageBuffer(as_bytes(pixels, "Pixel buffer"), width, height)
    image.validate()
    stride = image.stride
    out = bytearray()
    for row in range(height):
        out.append(FILTER_NONE)
        out += image.pixels[row * stride : (row + 1) * stride]
    return bytes(out)


def scanline_length(width: int, height: int) -> int:
    return height + width * height * 3
