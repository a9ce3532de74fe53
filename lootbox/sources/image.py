from __future__ import annotations

from pathlib import Path
from typing import Union

from PIL import Image, ImageOps

from ..png.types import ImageBuffer
from .base import PixelSource


def image_to_rgb_pixels(img: Image.Image) -> bytes:
    if img.mode != "RGB":
        img = img.convert("RGB")
    return img.tobytes()


class ImagePixelSource(PixelSource):
    """Pixel source backed by a Pillow image, resized to each request."""

    def __init__(self, image: Image.Image) -> None:
        self.image = self._normalize_image(image)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "ImagePixelSource":
        with Image.open(path) as img:
            img = ImageOps.exif_transpose(img)
            return cls(img.copy())

    def produce(self, width: int, height: int) -> ImageBuffer:
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
        img = self.image
        if img.size != (width, height):
            img = img.resize((width, height), Image.LANCZOS)
        return ImageBuffer(image_to_rgb_pixels(img), width, height)

    @staticmethod
    def _normalize_image(img: Image.Image) -> Image.Image:
        if img.mode != "RGB":
            return img.convert("RGB")
        return img
