import io
import zlib

import pytest
from PIL import Image

from lootbox.png import (
    PNG_SIGNATURE,
    ImageBuffer,
    InvalidArgument,
    encode_image,
    encode_png,
    save_png,
    write_png,
)


def _crc(data: bytes) -> bytes:
    return (zlib.crc32(data) & 0xFFFFFFFF).to_bytes(4, "big")


def test_single_red_pixel_is_byte_exact():
    data = encode_png(b"\xff\x00\x00", 1, 1)
    ihdr_body = b"IHDR" + b"\x00\x00\x00\x01" + b"\x00\x00\x00\x01" + b"\x08\x02\x00\x00\x00"
    idat_body = b"IDAT" + b"\x00\xff\x00\x00"
    expected = (
        bytes([0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A])
        + b"\x00\x00\x00\x0d" + ihdr_body + _crc(ihdr_body)
        + b"\x00\x00\x00\x04" + idat_body + _crc(idat_body)
        + b"\x00\x00\x00\x00" + b"IEND" + b"\xae\x42\x60\x82"
    )
    assert len(data) == 61
    assert data == expected


def test_single_pixel_section_sizes():
    data = encode_png(b"\xff\x00\x00", 1, 1)
    assert data[:8] == PNG_SIGNATURE
    ihdr = data[8:33]
    idat = data[33:49]
    iend = data[49:]
    assert ihdr[4:8] == b"IHDR"
    assert ihdr[21:] == b"\x90\x77\x53\xde"
    assert idat[4:8] == b"IDAT"
    assert idat[8:12] == b"\x00\xff\x00\x00"
    assert len(iend) == 12


def test_idat_is_uncompressed_by_default():
    pixels = bytes(range(12))
    data = encode_png(pixels, 2, 2)
    idat_length = int.from_bytes(data[33:37], "big")
    assert idat_length == 2 + 12
    assert data[37:41] == b"IDAT"
    assert data[41 : 41 + idat_length] == b"\x00" + pixels[:6] + b"\x00" + pixels[6:]


def test_output_is_deterministic():
    pixels = bytes((i * 31) % 256 for i in range(4 * 3 * 3))
    assert encode_png(pixels, 4, 3) == encode_png(pixels, 4, 3)


def test_write_png_matches_encode_png():
    pixels = bytes(range(18))
    sink = io.BytesIO()
    write_png(sink, pixels, 3, 2)
    assert sink.getvalue() == encode_png(pixels, 3, 2)


def test_invalid_buffer_writes_nothing():
    sink = io.BytesIO()
    with pytest.raises(InvalidArgument):
        write_png(sink, bytes(11), 2, 2)
    assert sink.getvalue() == b""


@pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (2**31, 1)])
def test_dimension_out_of_range(width, height):
    with pytest.raises(InvalidArgument):
        encode_png(b"", width, height)


def test_compressed_output_opens_in_pillow():
    width, height = 3, 2
    pixels = bytes([255, 0, 0, 0, 255, 0, 0, 0, 255, 10, 20, 30, 40, 50, 60, 70, 80, 90])
    data = encode_png(pixels, width, height, compress=True)
    with Image.open(io.BytesIO(data)) as img:
        img.load()
        assert img.size == (width, height)
        assert img.mode == "RGB"
        assert img.tobytes() == pixels


def test_encode_image_and_save(tmp_path):
    image = ImageBuffer(b"\x01\x02\x03\x04\x05\x06", 2, 1)
    path = tmp_path / "loot.png"
    save_png(path, image)
    assert path.read_bytes() == encode_image(image)
    assert path.read_bytes() == encode_png(image.pixels, 2, 1)


def test_integer_pixels_rejected():
    sink = io.BytesIO()
    with pytest.raises(InvalidArgument):
        write_png(sink, 3, 1, 1)
    assert sink.getvalue() == b""


@pytest.mark.parametrize("width,height", [(1.0, 1), (1, 1.0), ("1", 1)])
def test_non_integer_dimensions_rejected(width, height):
    with pytest.raises(InvalidArgument):
        encode_png(b"\x00\x00\x00", width, height)


def test_out_of_range_sample_rejected():
    with pytest.raises(InvalidArgument):
        encode_png([256, 0, 0], 1, 1)


def test_image_buffer_with_float_width_rejected():
    with pytest.raises(InvalidArgument):
        encode_image(ImageBuffer(b"\x00\x00\x00", 1.0, 1))
