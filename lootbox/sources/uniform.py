from __future__ import annotations

from ..png.types import ImageBuffer
from .base import RandomPixelSource


class UniformRandomSource(RandomPixelSource):
    def produce(self, width: int, height: int) -> ImageBuffer:
        return ImageBuffer(self._random_pixels(width, height), width, height)
