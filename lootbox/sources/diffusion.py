from __future__ import annotations

import logging
from typing import List, Optional

from ..png.types import ImageBuffer
from .base import RandomPixelSource

log = logging.getLogger(__name__)

DEFAULT_TIMESTEPS = 10
NOISE_LOW = -30
NOISE_HIGH = 30


class DiffusionNoiseSource(RandomPixelSource):
    """Additive-noise stand-in for a diffusion model.

    Starts from uniform noise and, for each timestep ``t``, adds a random
    delta in ``[NOISE_LOW, NOISE_HIGH)`` scaled by ``t / timesteps`` to every
    byte. Results are folded back into byte range with ``abs`` and ``% 256``.
    """

    def __init__(self, seed: Optional[str] = None, timesteps: int = DEFAULT_TIMESTEPS) -> None:
        super().__init__(seed)
        if timesteps < 0:
            raise ValueError("Timesteps must not be negative")
        self.timesteps = timesteps

    def produce(self, width: int, height: int) -> ImageBuffer:
        image = list(self._random_pixels(width, height))
        for t in range(self.timesteps):
            noise = self._generate_noise(len(image))
            image = self._add_noise(image, noise, t / self.timesteps)
        log.debug("Diffused %dx%d image over %d timesteps", width, height, self.timesteps)
        return ImageBuffer(bytes(image), width, height)

    def _generate_noise(self, length: int) -> List[int]:
        return [self._random.randrange(NOISE_LOW, NOISE_HIGH) for _ in range(length)]

    @staticmethod
    def _add_noise(image: List[int], noise: List[int], noise_level: float) -> List[int]:
        return [abs(value + int(delta * noise_level)) % 256 for value, delta in zip(image, noise)]
