"""The player's inventory: stacked consumables and individual equipment."""

from typing import Dict, List, Optional

from .console import ConsoleManager
from .enums import ItemID, ItemType
from .item_manager import (
    DIALOG_HEIGHT,
    ITEM_HEIGHT,
    ITEM_WIDTH,
    MENU_NAME_HEIGHT,
    OFFSET,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    ItemManager,
)
from .items import Armor, AttackBoost, Equipment, HealthPotion, Item, Sword, UniquePotion
from .player import PlayerCharacter, get_player

SELL_RATIO = 0.6


class Inventory:
    """Items owned by the player and the equipment currently worn.

    A consumable is stored once and counted in ``counts``; every piece of
    equipment is stored as its own object.
    """

    _instance: Optional["Inventory"] = None

    def __init__(
        self,
        player: Optional[PlayerCharacter] = None,
        console: Optional[ConsoleManager] = None,
        item_manager: Optional[ItemManager] = None,
    ) -> None:
        self._player = player
        self.console = console if console is not None else ConsoleManager()
        if item_manager is None:
            item_manager = ItemManager(job=player.job if player is not None else None)
        self.item_manager = item_manager
        self.items: List[Item] = []
        self.counts: Dict[ItemID, int] = {}
        self.equipped_weapon: Optional[Equipment] = None
        self.equipped_armor: Optional[Equipment] = None

    @classmethod
    def get_instance(cls) -> "Inventory":
        """Return the shared inventory, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared inventory."""
        cls._instance = None

    @property
    def player(self) -> PlayerCharacter:
        player = self._player if self._player is not None else get_player()
        if player is None:
            raise RuntimeError("no player owns this inventory")
        return player

    def _show_message(self, text: str) -> None:
        self.console.display_dialogue(
            text, 0, WINDOW_HEIGHT - DIALOG_HEIGHT, WINDOW_WIDTH, DIALOG_HEIGHT, OFFSET, OFFSET
        )

    def _new_consumable(self, item_id: ItemID) -> Optional[Item]:
        if item_id == ItemID.HEALTH_POTION:
            return HealthPotion()
        if item_id == ItemID.ATTACK_BOOST:
            return AttackBoost()
        if item_id == ItemID.UNIQUE_POTION:
            player = self._player if self._player is not None else get_player()
            return UniquePotion(player.job if player is not None else None)
        return None

    def add_item(self, item_id: ItemID) -> None:
        """Add one item; new equipment is worn if it beats what is worn."""
        template = self.item_manager.get_item(item_id)
        self.console.clear_console_size_screen()
        self._show_message("._*^아이템 획득^*_.\n" + template.info_string())
        self.console.sleep(1000)

        if template.item_type == ItemType.CONSUMABLES:
            if item_id not in self.counts:
                item = self._new_consumable(item_id)
                if item is None:
                    self.console.write(
                        "\n(오류) 아이템 ID가 유효하지 않아 인벤토리에 추가하지 못했습니다.\n"
                    )
                else:
                    self.items.append(item)
            self.counts[item_id] = self.counts.get(item_id, 0) + 1
        elif template.item_type == ItemType.EQUIPMENT:
            if item_id == ItemID.SWORD:
                self.items.append(Sword())
                self.auto_equip(self.items[-1])
            elif item_id == ItemID.ARMOR:
                self.items.append(Armor())
                self.auto_equip(self.items[-1])
            else:
                self.console.write(
                    "\n(오류) 아이템 ID가 유효하지 않아 인벤토리에 추가하지 못했습니다.\n"
                )
        self.console.clear_console_size_screen()

    def remove_item(self, item: Optional[Item], index: int) -> None:
        """Remove one consumable, or the equipment stored at ``index``."""
        if item is None:
            raise ValueError("no item given to remove from the inventory")
        item_id = item.item_id

        if item.item_type == ItemType.CONSUMABLES:
            if self.counts.get(item_id, 0) > 0:
                self.counts[item_id] -= 1
                if self.counts[item_id] == 0:
                    position = next(
                        i for i, owned in enumerate(self.items) if owned.item_id == item_id
                    )
                    del self.items[position]
                    del self.counts[item_id]
            return

        if item_id == ItemID.SWORD and self.equipped_weapon is item:
            self.unequip(ItemID.SWORD)
        elif item_id == ItemID.ARMOR and self.equipped_armor is item:
            self.unequip(ItemID.ARMOR)

        if self.items[index].item_id != item_id:
            raise ValueError(f"inventory slot {index} does not hold the item to remove")
        del self.items[index]

    def use_item(self, item: Item) -> None:
        """Drink a consumable, or swap the given equipment in."""
        item_id = item.item_id

        if item.item_type == ItemType.CONSUMABLES:
            if self.counts.get(item_id, 0) > 0:
                item.use(self.player)
                self.remove_item(item, 0)
            return

        if item.item_type == ItemType.EQUIPMENT:
            if item_id == ItemID.SWORD:
                self.unequip(ItemID.SWORD)
                item.use(self.player)
                self.equipped_weapon = item
            elif item_id == ItemID.ARMOR:
                self.unequip(ItemID.ARMOR)
                item.use(self.player)
                self.equipped_armor = item
            self.console.clear_console_size_screen()
            self._show_message("._*oO@-아이템 장착-@Oo*_.\n" + item.info_string())
        self.console.sleep(1000)

    def replace_item(self, item: Optional[Item], index: int) -> None:
        """Put ``item`` in slot ``index``; out-of-range slots are ignored."""
        if item is not None and 0 <= index < len(self.items):
            self.items[index] = item

    def use_consumables(self) -> str:
        """Use the first consumable held and describe it, or return ''."""
        for item in self.items:
            if item.item_type == ItemType.CONSUMABLES and self.counts.get(item.item_id, 0) > 0:
                message = f"{item.name} 아이템을 사용하였습니다."
                self.use_item(self.item_manager.get_item(item.item_id))
                return message
        return ""

    def unequip(self, item_id: ItemID) -> None:
        """Take off the worn weapon or armour, if any."""
        if item_id == ItemID.SWORD:
            worn, message = self.equipped_weapon, "착용중인 무기가 해제되었습니다."
        elif item_id == ItemID.ARMOR:
            worn, message = self.equipped_armor, "착용중인 갑옷이 해제되었습니다."
        else:
            return
        if worn is None:
            return
        self.console.clear_console_size_screen()
        self._show_message(message)
        # The stat is reduced by its own index, as the game rules have it.
        self.player.increase_stat(worn.target_stat, -int(worn.target_stat))
        if item_id == ItemID.SWORD:
            self.equipped_weapon = None
        else:
            self.equipped_armor = None
        self.console.sleep(1000)

    def auto_equip(self, item: Item) -> None:
        """Wear ``item`` if nothing of its kind is worn or it is stronger."""
        if item.item_id == ItemID.SWORD:
            worn = self.equipped_weapon
        elif item.item_id == ItemID.ARMOR:
            worn = self.equipped_armor
        else:
            return
        if worn is None or worn.stat_amount < item.stat_amount:
            self.use_item(item)

    def show_inven(self) -> None:
        """Draw the inventory as a grid of boxes, five per row."""
        if not self.items:
            self._show_message("*************인벤토리가 비어 있습니다.*************")
            self.console.sleep(1000)
            return
        for number, item in enumerate(self.items):
            text = f"[아이템 번호 {number + 1}]\n이름: {item.name}"
            if item.item_type == ItemType.CONSUMABLES:
                text += f"\n개수: {self.counts.get(item.item_id, 0)}"
            elif item.item_type == ItemType.EQUIPMENT:
                if item is self.equipped_armor or item is self.equipped_weapon:
                    text += "\n**장착중**"
                text += f"\n강화 레벨: {item.equipment_level}"
            text += f"\n판매가: {int(item.price * SELL_RATIO)}"
            self.console.display_dialogue(
                text,
                (number % 5) * ITEM_WIDTH,
                MENU_NAME_HEIGHT + ITEM_HEIGHT * (number // 5),
                ITEM_WIDTH,
                ITEM_HEIGHT,
                0,
                0,
            )