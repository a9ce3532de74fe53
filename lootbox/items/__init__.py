from .factory import DEFAULT_ITEM_NAME, ItemFactory
from .models import Item, ItemRarity, ItemType, StatModifier, parse_item_type, parse_rarity

__all__ = [
    "DEFAULT_ITEM_NAME",
    "Item",
    "ItemFactory",
    "ItemRarity",
    "ItemType",
    "parse_item_type",
    "parse_rarity",
    "StatModifier",
]
