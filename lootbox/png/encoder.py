from __future__ import annotations

import io
import zlib
from pathlib import Path
from typing import BinaryIO, Union

from .chunks import IDAT, IEND, IHDR, write_chunk
from .scanlines import serialize_scanlines
from .types import ImageBuffer, InvalidArgument, check_dimension

PNG_SIGNATURE = bytes([137, 80, 78, 71, 13, 10, 26, 10])

BIT_DEPTH = 8
COLOR_TYPE_TRUECOLOR = 2
COMPRESSION_METHOD = 0
FILTER_METHOD = 0
INTERLACE_METHOD = 0

# PNG limits both dimensions to 2**31 - 1.
MAX_DIMENSION = 0x7FFFFFFF


def ihdr_payload(width: int, height: int) -> bytes:
    """Build the 13-byte IHDR payload for an 8-bit truecolor image."""
    check_dimension("Width", width)
    check_dimension("Height", height)
    if not (0 < width <= MAX_DIMENSION and 0 < height <= MAX_DIMENSION):
        raise InvalidArgument(f"Image dimensions out of range: {width}x{height}")
    tail = bytes(
        [
            BIT_DEPTH,
            COLOR_TYPE_TRUECOLOR,
            COMPRESSION_METHOD,
            FILTER_METHOD,
            INTERLACE_METHOD,
        ]
    )
    return width.to_bytes(4, "big") + height.to_bytes(4, "big") + tail


def write_png(
    sink: BinaryIO,
    pixels: bytes,
    width: int,
    height: int,
    compress: bool = False,
) -> None:
    """Write signature, IHDR, IDAT and IEND chunks for an RGB buffer to sink.

    All input checks run before the first byte is written, so a rejected
    buffer never leaves a partial stream behind. The IDAT payload is the raw
    scanline buffer unless ``compress`` is set, in which case it is wrapped in
    a zlib stream as the PNG standard expects for compression method 0.
    """
    header = ihdr_payload(width, height)
    scan = serialize_scanlines(pixels, width, height)
    if compress:
        scan = zlib.compress(scan)
    sink.write(PNG_SIGNATURE)
    write_chunk(sink, IHDR, header)
    write_chunk(sink, IDAT, scan)
    write_chunk(sink, IEND, b"")


def encode_png(pixels: bytes, width: int, height: int, compress: bool = False) -> bytes:
    """Encode an RGB buffer as PNG bytes."""
    out = io.BytesIO()
    write_png(out, pixels, width, height, compress=compress)
    return out.getvalue()


def encode_image(image: ImageBuffer, compress: bool = False) -> bytes:
    """Encode an ImageBuffer helper object."""
    image.validate()
    return encode_png(image.pixels, image.width, image.height, compress=compress)


def save_png(path: Union[str, Path], image: ImageBuffer, compress: bool = False) -> None:
    data = encode_image(image, compress=compress)
    Path(path).write_bytes(data)
