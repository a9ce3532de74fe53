from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .items import Item, ItemFactory, ItemRarity, ItemType
from .png import encode_image
from .sources import DEFAULT_TIMESTEPS, PixelSource, create_source

log = logging.getLogger(__name__)

DEFAULT_WIDTH = 24
DEFAULT_HEIGHT = 24
DEFAULT_SOURCE = "diffusion"

ENV_WIDTH = "LOOTBOX_WIDTH"
ENV_HEIGHT = "LOOTBOX_HEIGHT"
ENV_SOURCE = "LOOTBOX_SOURCE"
ENV_COMPRESS = "LOOTBOX_COMPRESS"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class LootSettings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    source: str = DEFAULT_SOURCE
    timesteps: int = DEFAULT_TIMESTEPS
    compress: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LootSettings":
        """Build settings from LOOTBOX_* environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        settings = cls()
        if env.get(ENV_WIDTH):
            settings.width = _parse_dimension(ENV_WIDTH, env[ENV_WIDTH])
        if env.get(ENV_HEIGHT):
            settings.height = _parse_dimension(ENV_HEIGHT, env[ENV_HEIGHT])
        if env.get(ENV_SOURCE):
            settings.source = env[ENV_SOURCE].strip().lower()
        if ENV_COMPRESS in env:
            settings.compress = _parse_flag(ENV_COMPRESS, env[ENV_COMPRESS])
        return settings


def _parse_dimension(name: str, value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{value}'") from None
    if number <= 0:
        raise ValueError(f"{name} must be greater than zero")
    return number


def _parse_flag(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got '{value}'")


class LootManager:
    def __init__(
        self,
        factory: Optional[ItemFactory] = None,
        settings: Optional[LootSettings] = None,
        source: Optional[PixelSource] = None,
    ) -> None:
        self.factory = factory or ItemFactory()
        self.settings = settings or LootSettings()
        self.source = source

    def get_loot(
        self,
        level: int = 1,
        rarity: ItemRarity = ItemRarity.Common,
        item_type: ItemType = ItemType.Potion,
    ) -> Item:
        item = self.factory.create_item(level, rarity=rarity, item_type=item_type)
        log.debug("Created %s %s at level %d", item.rarity, item.type, item.level)
        return item

    def generate_loot_image(self, item: Optional[Item] = None) -> bytes:
        """Render a PNG for item, seeding the pixel source with the item's name."""
        source = self._select_source(item)
        image = source.produce(self.settings.width, self.settings.height)
        data = encode_image(image, compress=self.settings.compress)
        log.info(
            "Encoded %dx%d loot image (%d bytes, compress=%s)",
            image.width,
            image.height,
            len(data),
            self.settings.compress,
        )
        return data

    def _select_source(self, item: Optional[Item]) -> PixelSource:
        if self.source is not None:
            return self.source
        seed = None if item is None else (item.name or "")
        return create_source(self.settings.source, seed, timesteps=self.settings.timesteps)
