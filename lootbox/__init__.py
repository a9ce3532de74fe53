__version__ = "0.0.1"

from .items import Item, ItemFactory, ItemRarity, ItemType, StatModifier
from .loot import LootManager, LootSettings
from .png import ImageBuffer, InvalidArgument, decode_png, encode_png

__all__ = [
    "decode_png",
    "encode_png",
    "ImageBuffer",
    "InvalidArgument",
    "Item",
    "ItemFactory",
    "ItemRarity",
    "ItemType",
    "LootManager",
    "LootSettings",
    "StatModifier",
]
