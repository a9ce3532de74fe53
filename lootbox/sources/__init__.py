from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from .base import PixelSource, RandomPixelSource
from .diffusion import DEFAULT_TIMESTEPS, DiffusionNoiseSource
from .image import ImagePixelSource, image_to_rgb_pixels
from .uniform import UniformRandomSource

SourceFactory = Callable[..., PixelSource]


class SourceRegistry:
    def __init__(self, factories: Optional[Dict[str, SourceFactory]] = None) -> None:
        if factories is None:
            factories = {
                "uniform": lambda seed=None, **_: UniformRandomSource(seed),
                "diffusion": lambda seed=None, timesteps=DEFAULT_TIMESTEPS, **_: DiffusionNoiseSource(
                    seed, timesteps=timesteps
                ),
            }
        self._factories = factories

    @property
    def names(self) -> List[str]:
        return sorted(self._factories)

    def create(self, name: str, seed: Optional[str] = None, **options: Any) -> PixelSource:
        factory = self._factories.get(name.lower())
        if not factory:
            raise ValueError(f"Unknown pixel source '{name}' (choose from: {', '.join(self.names)})")
        return factory(seed=seed, **options)


def create_source(name: str, seed: Optional[str] = None, **options: Any) -> PixelSource:
    return SourceRegistry().create(name, seed, **options)


SOURCE_NAMES: List[str] = SourceRegistry().names

__all__ = [
    "create_source",
    "DiffusionNoiseSource",
    "image_to_rgb_pixels",
    "ImagePixelSource",
    "PixelSource",
    "RandomPixelSource",
    "SOURCE_NAMES",
    "SourceRegistry",
    "UniformRandomSource",
]
