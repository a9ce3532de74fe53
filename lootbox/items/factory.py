from __future__ import annotations

from .models import Item, ItemRarity, ItemType

DEFAULT_ITEM_NAME = "New Item"


class ItemFactory:
    def __init__(self, default_name: str = DEFAULT_ITEM_NAME) -> None:
        self.default_name = default_name

    def create_item(
        self,
        level: int,
        rarity: ItemRarity = ItemRarity.Common,
        item_type: ItemType = ItemType.Potion,
    ) -> Item:
        """Create an item of the given level, rarity and type."""
        if level < 1:
            raise ValueError("Item level must be at least 1")
        return Item(
            level=level,
            name=self.default_name,
            type_id=item_type,
            rarity_id=rarity,
        )
