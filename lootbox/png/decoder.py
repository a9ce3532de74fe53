from __future__ import annotations

import zlib
from typing import Iterator, List, Tuple

from .chunks import IDAT, IEND, IHDR
from .crc import crc32
from .encoder import (
    BIT_DEPTH,
    COLOR_TYPE_TRUECOLOR,
    COMPRESSION_METHOD,
    FILTER_METHOD,
    INTERLACE_METHOD,
    PNG_SIGNATURE,
)
from .scanlines import FILTER_NONE, scanline_length
from .types import ImageBuffer


class PngDecodeError(ValueError):
    """Raised when a byte stream is not a PNG this package can read back."""


def iter_chunks(data: bytes) -> Iterator[Tuple[bytes, bytes]]:
    """Return an iterator of (tag, payload) pairs, verifying each CRC.

    The signature is checked before this returns; chunk errors surface while
    iterating.
    """
    if data[:8] != PNG_SIGNATURE:
        raise PngDecodeError("Missing PNG signature")
    return _walk_chunks(data, len(PNG_SIGNATURE))


def _walk_chunks(data: bytes, offset: int) -> Iterator[Tuple[bytes, bytes]]:
    while offset < len(data):
        if offset + 8 > len(data):
            raise PngDecodeError(f"Truncated chunk header at offset {offset}")
        length = int.from_bytes(data[offset : offset + 4], "big")
        tag = bytes(data[offset + 4 : offset + 8])
        start = offset + 8
        end = start + length
        if end + 4 > len(data):
            raise PngDecodeError(f"Truncated {tag!r} chunk at offset {offset}")
        payload = bytes(data[start:end])
        expected = int.from_bytes(data[end : end + 4], "big")
        actual = crc32(payload, crc32(tag))
        if actual != expected:
            raise PngDecodeError(f"CRC mismatch in {tag!r} chunk: {actual:08x} != {expected:08x}")
        yield tag, payload
        offset = end + 4


def _parse_header(payload: bytes) -> Tuple[int, int]:
    if len(payload) != 13:
        raise PngDecodeError(f"IHDR must be 13 bytes, got {len(payload)}")
    width = int.from_bytes(payload[0:4], "big")
    height = int.from_bytes(payload[4:8], "big")
    profile = bytes(
        [BIT_DEPTH, COLOR_TYPE_TRUECOLOR, COMPRESSION_METHOD, FILTER_METHOD, INTERLACE_METHOD]
    )
    if payload[8:] != profile:
        raise PngDecodeError("Only 8-bit truecolor, non-interlaced images are supported")
    if width <= 0 or height <= 0:
        raise PngDecodeError(f"Invalid image dimensions {width}x{height}")
    return width, height


def decode_png(data: bytes, compressed: bool = False) -> ImageBuffer:
    """Decode the 8-bit truecolor, unfiltered profile written by encode_png."""
    chunks = list(iter_chunks(data))
    if not chunks or chunks[0][0] != IHDR:
        raise PngDecodeError("First chunk must be IHDR")
    if chunks[-1][0] != IEND:
        raise PngDecodeError("Last chunk must be IEND")
    width, height = _parse_header(chunks[0][1])

    parts: List[bytes] = [payload for tag, payload in chunks if tag == IDAT]
    if not parts:
        raise PngDecodeError("No IDAT chunk found")
    scan = b"".join(parts)
    if compressed:
        try:
            scan = zlib.decompress(scan)
        except zlib.error as exc:
            raise PngDecodeError(f"IDAT inflate failed: {exc}") from exc

    if len(scan) != scanline_length(width, height):
        raise PngDecodeError(
            f"Scanline data is {len(scan)} bytes, expected {scanline_length(width, height)}"
        )
    stride = width * 3
    pixels = bytearray()
    for row in range(height):
        start = row * (stride + 1)
        if scan[start] != FILTER_NONE:
            raise PngDecodeError(f"Unsupported filter type {scan[start]} on row {row}")
        pixels += scan[start + 1 : start + 1 + stride]
    return ImageBuffer(bytes(pixels), width, height)
