"""Catalogue of every item in the game and random item drops."""

import random
from typing import List, Optional

from .console import ConsoleManager
from .enums import ItemID, Job
from .items import Armor, AttackBoost, HealthPotion, Item, Sword, UniquePotion

# Screen layout shared by the shop and inventory windows.
WINDOW_WIDTH = 118
WINDOW_HEIGHT = 28
DIALOG_HEIGHT = 6
MENU_NAME_HEIGHT = 5
OFFSET = 2
ITEM_WIDTH = 23
ITEM_HEIGHT = 10


class ItemManager:
    """Holds one instance of each item, indexed by ``ItemID``."""

    ITEM_WIDTH = ITEM_WIDTH
    ITEM_HEIGHT = ITEM_HEIGHT

    def __init__(
        self, rng: Optional[random.Random] = None, job: Optional[Job] = None
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.items: List[Item] = [
            HealthPotion(),
            AttackBoost(),
            UniquePotion(job),
            Sword(),
            Armor(),
        ]

    def __len__(self) -> int:
        return len(self.items)

    def get_item(self, item_id: ItemID) -> Item:
        """Return the catalogue item for ``item_id``."""
        index = int(item_id)
        if 0 <= index < len(self.items):
            return self.items[index]
        raise IndexError(f"no item with id {index}")

    def random_item_id(self) -> ItemID:
        """Pick a drop: 5% equipment (armour 70%, sword 30%), else a consumable."""
        if self.rng.randrange(100) < 5:
            return ItemID.ARMOR if self.rng.randrange(100) < 70 else ItemID.SWORD
        roll = self.rng.randrange(100)
        if roll < 70:
            return ItemID.HEALTH_POTION
        if roll < 90:
            return ItemID.ATTACK_BOOST
        return ItemID.UNIQUE_POTION

    def show_item_db(self, console: Optional[ConsoleManager] = None) -> None:
        """Draw every catalogue item in a row of boxes."""
        console = console if console is not None else ConsoleManager()
        if not self.items:
            console.write("*************(오류) 아이템 DB가 비어 있습니다.*************\n")
            console.sleep(1000)
            return
        for number, item in enumerate(self.items):
            text = f"[아이템 번호 {number + 1}]\n{item.info_string()}"
            console.display_dialogue(
                text, number * ITEM_WIDTH, MENU_NAME_HEIGHT, ITEM_WIDTH, ITEM_HEIGHT, 0, 0
            )