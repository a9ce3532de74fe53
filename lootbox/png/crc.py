from __future__ import annotations

from typing import List

CRC32_POLYNOMIAL = 0xEDB88320


def build_crc32_table() -> List[int]:
    table = []
    for value in range(256):
        crc = value
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ CRC32_POLYNOMIAL
            else:
                crc >>= 1
        table.append(crc)
    return table


CRC32_TABLE = tuple(build_crc32_table())


def crc32(data: bytes, value: int = 0) -> int:
    """Return the CRC-32 of data, continuing from a previous checksum value."""
    crc = (value ^ 0xFFFFFFFF) & 0xFFFFFFFF
    for byte in data:
        crc = (crc >> 8) ^ CRC32_TABLE[(crc ^ byte) & 0xFF]
    return crc ^ 0xFFFFFFFF


def crc32_bytes(data: bytes, value: int = 0) -> bytes:
    """Return the CRC-32 of data as 4 big-endian bytes."""
    return crc32(data, value).to_bytes(4, "big")
