from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional


class ItemRarity(IntEnum):
    Common = 0
    Uncommon = 1
    Rare = 2
    Epic = 3
    Legendary = 4


class ItemType(IntEnum):
    Potion = 0
    Weapon = 1
    Armor = 2
    Ring = 3
    Scroll = 4


@dataclass(frozen=True)
class StatModifier:
    stat: str
    value: int

    def to_dict(self) -> Dict[str, Any]:
        return {"stat": self.stat, "value": self.value}


@dataclass
class Item:
    level: int
    name: Optional[str] = None
    type_id: ItemType = ItemType.Potion
    rarity_id: ItemRarity = ItemRarity.Common
    modifiers: List[StatModifier] = field(default_factory=list)

    @property
    def type(self) -> str:
        return self.type_id.name

    @property
    def rarity(self) -> str:
        return self.rarity_id.name

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON shape served for an item."""
        return {
            "level": self.level,
            "name": self.name,
            "type": self.type,
            "rarity": self.rarity,
            "modifiers": [modifier.to_dict() for modifier in self.modifiers],
            "typeId": int(self.type_id),
            "rarityId": int(self.rarity_id),
        }


def parse_rarity(value: str) -> ItemRarity:
    for rarity in ItemRarity:
        if rarity.name.lower() == value.strip().lower():
            return rarity
    raise ValueError(f"Unknown item rarity '{value}'")


def parse_item_type(value: str) -> ItemType:
    for item_type in ItemType:
        if item_type.name.lower() == value.strip().lower():
            return item_type
    raise ValueError(f"Unknown item type '{value}'")
