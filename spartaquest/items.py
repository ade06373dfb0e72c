"""Items: consumable potions and base equipment."""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from .enums import ItemID, ItemType, Job, Status
from .player import PlayerCharacter, get_player


class Item(ABC):
    """Something the player can own and use."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def item_type(self) -> ItemType: ...

    @property
    @abstractmethod
    def price(self) -> int: ...

    @property
    @abstractmethod
    def item_id(self) -> ItemID: ...

    @property
    @abstractmethod
    def target_stat(self) -> Status: ...

    @property
    @abstractmethod
    def target_stat_string(self) -> str: ...

    @property
    @abstractmethod
    def stat_amount(self) -> int: ...

    def use(self, player: Optional[PlayerCharacter] = None) -> None:
        """Apply the item's effect to ``player`` (the shared player by default)."""
        target = player if player is not None else get_player()
        if target is None:
            raise RuntimeError("no player to use the item on")
        target.increase_stat(self.target_stat, self.stat_amount)

    def info_string(self) -> str:
        """Name, price and effect on three lines."""
        return (
            f"아이템: {self.name}\n가격: {self.price}\n"
            f"효과: {self.target_stat_string} +{self.stat_amount}"
        )

    def print_item_info(self, out: Optional[TextIO] = None) -> None:
        out = out if out is not None else sys.stdout
        out.write(
            f"\n아이템: {self.name}\n가격: {self.price}\n"
            f"효과: {self.target_stat_string} +{self.stat_amount}\n\n"
        )


class Equipment(Item):
    """An item that is worn and can be upgraded."""

    @property
    @abstractmethod
    def equipment_level(self) -> int: ...

    @property
    @abstractmethod
    def upgrade_cost(self) -> int: ...

    @property
    @abstractmethod
    def upgrade_amount(self) -> int: ...


class HealthPotion(Item):
    name = "체력 물약"
    item_type = ItemType.CONSUMABLES
    price = 100
    item_id = ItemID.HEALTH_POTION
    target_stat = Status.HP
    target_stat_string = "체력"
    stat_amount = 50


class AttackBoost(Item):
    name = "공격력 비약"
    item_type = ItemType.CONSUMABLES
    price = 200
    item_id = ItemID.ATTACK_BOOST
    target_stat = Status.ATTACK
    target_stat_string = "공격력"
    stat_amount = 10


_UNIQUE_EFFECTS = {
    Job.WARRIOR: (Status.STR, 1, "힘"),
    Job.MAGE: (Status.INTELLIGENCE, 2, "지능"),
}
_NO_EFFECT = (Status.HP, 0, "")


class UniquePotion(Item):
    """Raises the class stat: strength for warriors, intelligence for mages."""

    name = "유니크 비약"
    item_type = ItemType.CONSUMABLES
    price = 300
    item_id = ItemID.UNIQUE_POTION

    def __init__(self, job: Optional[Job] = None) -> None:
        if job is None:
            player = get_player()
            job = player.job if player is not None else None
        self.job = job

    @property
    def _effect(self):
        return _UNIQUE_EFFECTS.get(self.job, _NO_EFFECT)

    @property
    def target_stat(self) -> Status:
        return self._effect[0]

    @property
    def stat_amount(self) -> int:
        return self._effect[1]

    @property
    def target_stat_string(self) -> str:
        return self._effect[2]


class Sword(Equipment):
    name = "배틀 소드"
    item_type = ItemType.EQUIPMENT
    price = 500
    item_id = ItemID.SWORD
    target_stat = Status.ATTACK
    target_stat_string = "공격력"
    stat_amount = 20
    equipment_level = 0
    upgrade_cost = 0
    upgrade_amount = 0


class Armor(Equipment):
    name = "레더 아머"
    item_type = ItemType.EQUIPMENT
    price = 300
    item_id = ItemID.ARMOR
    target_stat = Status.MAXHP
    target_stat_string = "최대 체력"
    stat_amount = 30
    equipment_level = 0
    upgrade_cost = 0
    upgrade_amount = 0