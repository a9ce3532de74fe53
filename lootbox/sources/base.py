from __future__ import annotations

import random
from typing import Optional

from ..png.types import BYTES_PER_PIXEL, ImageBuffer

# Samples are drawn from [0, 255), so a channel never reaches 255.
SAMPLE_LIMIT = 255


class PixelSource:
    """Produces an RGB ImageBuffer of the requested dimensions."""

    def produce(self, width: int, height: int) -> ImageBuffer:
        raise NotImplementedError


class RandomPixelSource(PixelSource):
    def __init__(self, seed: Optional[str] = None) -> None:
        self._random = random.Random(seed)

    def _random_pixels(self, width: int, height: int) -> bytes:
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
        count = width * height * BYTES_PER_PIXEL
        return bytes(self._random.randrange(SAMPLE_LIMIT) for _ in range(count))
