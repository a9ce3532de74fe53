from __future__ import annotations

from typing import BinaryIO, Union

from .crc import crc32, crc32_bytes
from .types import InvalidArgument, as_bytes

Tag = Union[bytes, str]

IHDR = b"IHDR"
IDAT = b"IDAT"
IEND = b"IEND"


def chunk_tag(tag: Tag) -> bytes:
    """Normalize a chunk type tag to 4 ASCII bytes."""
    if isinstance(tag, str):
        try:
            tag = tag.encode("ascii")
        except UnicodeEncodeError as exc:
            raise InvalidArgument(f"Chunk type must be ASCII: {tag!r}") from exc
    tag = as_bytes(tag, "Chunk type")
    if len(tag) != 4:
        raise InvalidArgument(f"Chunk type must be exactly 4 bytes, got {len(tag)}")
    return tag


def make_chunk(tag: Tag, data: bytes) -> bytes:
    """Frame data as a length-prefixed, CRC-checked PNG chunk."""
    tag = chunk_tag(tag)
    data = as_bytes(data, "Chunk data")
    checksum = crc32_bytes(data, crc32(tag))
    return len(data).to_bytes(4, "big") + tag + data + checksum


def write_chunk(sink: BinaryIO, tag: Tag, data: bytes) -> None:
    """Write one chunk to sink; the length field is not covered by the CRC."""
    sink.write(make_chunk(tag, data))
