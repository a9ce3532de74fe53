from .chunks import chunk_tag, make_chunk, write_chunk
from .crc import CRC32_TABLE, crc32, crc32_bytes
from .decoder import PngDecodeError, decode_png, iter_chunks
from .encoder import PNG_SIGNATURE, encode_image, encode_png, ihdr_payload, save_png, write_png
from .scanlines import serialize_scanlines
from .types import ImageBuffer, InvalidArgument

__all__ = [
    "chunk_tag",
    "crc32",
    "crc32_bytes",
    "CRC32_TABLE",
    "decode_png",
    "encode_image",
    "encode_png",
    "ihdr_payload",
    "ImageBuffer",
    "InvalidArgument",
    "iter_chunks",
    "make_chunk",
    "PNG_SIGNATURE",
    "PngDecodeError",
    "save_png",
    "serialize_scanlines",
    "write_chunk",
    "write_png",
]
