"""Equipment upgrades that wrap a piece of equipment and add to its effect."""

import sys
from typing import Optional, TextIO

from .enums import ItemID, ItemType, Status
from .items import Equipment
from .player import PlayerCharacter, get_player

_UPGRADE_NAMES = {
    ItemID.SWORD: ("칼날 다듬기", "손잡이 경량화", "장인의 특별 개조", "아다만티움 코팅"),
    ItemID.ARMOR: ("무두질", "이음새 강화", "안감 덧대기", "표면 금속 코팅"),
}


def upgrade_name(item_id: ItemID, level: int) -> str:
    """Name of the upgrade applied to equipment currently at ``level``."""
    names = _UPGRADE_NAMES.get(item_id, ())
    return names[level] if 0 <= level < len(names) else ""


class EquipmentDecorator(Equipment):
    """Equipment that wraps another piece of equipment."""

    def __init__(self, equipment: Equipment) -> None:
        self.equipment = equipment

    @property
    def name(self) -> str:
        return self.equipment.name

    @property
    def item_type(self) -> ItemType:
        return self.equipment.item_type

    @property
    def target_stat_string(self) -> str:
        return self.equipment.target_stat_string


class _Upgrade(EquipmentDecorator):
    """One upgrade level: adds a fixed cost and a growing stat bonus."""

    _ITEM_ID: ItemID
    _TARGET_STAT: Status
    _COST_STEP: int
    _AMOUNT_STEP: int

    def __init__(self, equipment: Equipment) -> None:
        super().__init__(equipment)
        # Named after the level the equipment had before this upgrade.
        self.upgrade_name = upgrade_name(self._ITEM_ID, self.equipment_level - 1)

    @property
    def item_id(self) -> ItemID:
        return self._ITEM_ID

    @property
    def target_stat(self) -> Status:
        return self._TARGET_STAT

    @property
    def upgrade_cost(self) -> int:
        return self.equipment.upgrade_cost + self._COST_STEP

    @property
    def upgrade_amount(self) -> int:
        return self.equipment.upgrade_amount + self._AMOUNT_STEP

    @property
    def price(self) -> int:
        return self.equipment.price + self.upgrade_cost

    @property
    def stat_amount(self) -> int:
        return self.equipment.stat_amount + self.upgrade_amount

    @property
    def equipment_level(self) -> int:
        return self.equipment.equipment_level + 1

    def use(self, player: Optional[PlayerCharacter] = None) -> None:
        """Equip the wrapped item, then add this upgrade's bonus."""
        target = player if player is not None else get_player()
        if target is None:
            raise RuntimeError("no player to use the item on")
        self.equipment.use(target)
        target.increase_stat(self.target_stat, self.upgrade_amount)

    def print_item_info(self, out: Optional[TextIO] = None) -> None:
        out = out if out is not None else sys.stdout
        out.write(
            f"\n아이템: {self.name}(+{self.equipment_level})"
            f"\n가격: {self.price}\n효과: {self.target_stat_string} +{self.stat_amount}\n\n"
        )


class SwordUpgrade(_Upgrade):
    """A sword upgrade: +200 cost and +5 attack per level."""

    _ITEM_ID = ItemID.SWORD
    _TARGET_STAT = Status.ATTACK
    _COST_STEP = 200
    _AMOUNT_STEP = 5

    def use(self, player: Optional[PlayerCharacter] = None) -> None:
        super().use(player)

    def info_string(self) -> str:
        return (
            f"아이템: {self.name}(+{self.equipment_level})"
            f"\n가격: {self.price}\n효과: {self.target_stat_string} +{self.stat_amount}"
        )

    def print_item_info(self, out: Optional[TextIO] = None) -> None:
        super().print_item_info(out)


class ArmorUpgrade(_Upgrade):
    """An armour upgrade: +150 cost and +15 maximum health per level."""

    _ITEM_ID = ItemID.ARMOR
    _TARGET_STAT = Status.MAXHP
    _COST_STEP = 150
    _AMOUNT_STEP = 15

    def use(self, player: Optional[PlayerCharacter] = None) -> None:
        super().use(player)

    def info_string(self) -> str:
        return (
            f"아이템: {self.name}+{self.equipment_level}"
            f"\n가격: {self.price}\n효과: {self.target_stat_string} +{self.stat_amount}"
        )

    def print_item_info(self, out: Optional[TextIO] = None) -> None:
        super().print_item_info(out)