from __future__ import annotations

from dataclasses import dataclass

BYTES_PER_PIXEL = 3


class InvalidArgument(ValueError):
    """Raised for a malformed chunk tag or a pixel buffer that does not match its dimensions."""


def as_bytes(value: object, what: str) -> bytes:
    """Convert a bytes-like value or a sequence of byte values to bytes."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    # bytes(n) would silently build n zero bytes.
    if isinstance(value, (int, str)):
        raise InvalidArgument(f"{what} must be bytes-like, got {type(value).__name__}")
    try:
        return bytes(value)  # type: ignore[call-overload]
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"{what} must be a sequence of byte values: {exc}") from exc


def check_dimension(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class ImageBuffer:
    """Row-major RGB pixel buffer used by the PNG encoder."""

    pixels: bytes
    width: int
    height: int

    def validate(self) -> None:
        """Validate dimensions against the buffer length."""
        check_dimension("Width", self.width)
        check_dimension("Height", self.height)
        if self.width <= 0 or self.height <= 0:
            raise InvalidArgument("Width and height must be greater than zero")
        expected = self.width * self.height * BYTES_PER_PIXEL
        if len(self.pixels) != expected:
            raise InvalidArgument(
                f"Pixel buffer length {len(self.pixels)} does not match "
                f"{self.width}x{self.height} RGB ({expected} bytes)"
            )

    @property
    def stride(self) -> int:
        """Return the number of pixel bytes in one row."""
        return self.width * BYTES_PER_PIXEL
