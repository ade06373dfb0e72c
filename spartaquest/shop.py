"""The shop: buying, selling, upgrading equipment and tea with the keeper."""

import random
import re
from typing import Callable, Optional

from .console import ConsoleManager
from .enums import ItemID, ItemType, Status
from .inventory import SELL_RATIO, Inventory
from .item_manager import (
    DIALOG_HEIGHT,
    ITEM_HEIGHT,
    MENU_NAME_HEIGHT,
    OFFSET,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    ItemManager,
)
from .items import Equipment
from .player import PlayerCharacter, get_player
from .upgrades import ArmorUpgrade, SwordUpgrade, upgrade_name

DIALOG_WIDTH = 118
CHOICE_WIDTH = 60
CHOICE_HEIGHT = 10
INPUT_CURSOR_X = 1
INPUT_CURSOR_Y = WINDOW_HEIGHT - 1

PROMPT = "번호를 입력하세요: "

GREETINGS = (
    "(수염이 덥수룩하고 허리가 살짝 굽어 애처로운 모습의 상점 주인이 힙겹게 인사를 건넨다.)\n"
    "상점 주인: 어서...오세요...콜록...오늘은...무슨 일로...?"
)
FAREWELL = (
    "(상점 주인이 아쉬운 듯 내 얼굴을 흘끔 바라본다.)\n"
    "상점 주인: 그렇군요...갈 길이 바쁘시겠지요...그럼...행운을 빕니다...\n"
    "(상점 주인의 응원에 힘입어 가벼운 마음으로 상점을 나섰다.)"
)
DRINK_TEA = (
    "(상점 주인이 따뜻한 녹차를 내온다. 덜덜 떨리는 손에 들린 잔이 잔받침과 부딪혀 달그락거린다.)\n"
    "...\n"
    "상점 주인: 여행하시느라...힘드시겠어요...차가 뜨거우니...천천히...드세요..."
)
SHOP_MENU = (
    "(아래 번호를 입력해 원하는 메뉴로 진입하세요.)\n1 : 아이템 구매\n2 : 아이템 판매\n"
    "3 : 장비 강화\n4 : 상점 주인과 차 마시기\n0 : 상점 나가기"
)
RETURN_TO_SHOP = "상점 메뉴로 돌아갑니다."
NOT_VALID_INPUT = (
    "상점 주인: 글쎄...당최 무슨 말인지...다시 한 번 알려주시겠어요...?\n"
    "(유효하지 않은 입력입니다.)"
)
NOT_EQUIPMENT = (
    "상점 주인: 저런...강화할 수...있는 아이템을...골라주세요...\n"
    "(선택한 아이템이 장비 아이템이 아닙니다.)"
)
EQUIPMENT_MAX_LEVEL = (
    "상점 주인: 흠...이미 최고의...장비를 갖추었는걸요...\n더 이상의...강화는...어렵겠어요...\n"
    "(장비가 최대 레벨에 도달했습니다!)"
)
UPGRADE_FAILED = (
    "상점 주인: 어이쿠...손이...미끄러져서...다음에는 꼭...성공할게요...죄송해요...\n"
    "(강화에 실패했습니다...)"
)
AFTER_TEA = "(몸에 따뜻한 기운이 퍼진다. \n 주인과 이런저런 이야기를 나누며 마음이 편안해졌다.)"

_NUMBER = re.compile(r"\s*([+-]?\d+)")


def _parse_number(text: str) -> int:
    """Read a leading integer; anything else counts as -1."""
    match = _NUMBER.match(text)
    return int(match.group(1)) if match else -1


class Shop:
    """The shop menu and its services."""

    UPGRADE_MAX_LEVEL = 4
    ARMOR_UPGRADE_AMOUNT = 15
    ARMOR_UPGRADE_COST = 150
    SWORD_UPGRADE_AMOUNT = 5
    SWORD_UPGRADE_COST = 200

    def __init__(
        self,
        player: Optional[PlayerCharacter] = None,
        inventory: Optional[Inventory] = None,
        console: Optional[ConsoleManager] = None,
        item_manager: Optional[ItemManager] = None,
        rng: Optional[random.Random] = None,
        input_func: Optional[Callable[[], str]] = None,
    ) -> None:
        self._player = player
        self.inventory = inventory if inventory is not None else Inventory.get_instance()
        self.console = console if console is not None else ConsoleManager()
        self.rng = rng if rng is not None else random.Random()
        if item_manager is None:
            owner = player if player is not None else get_player()
            item_manager = ItemManager(job=owner.job if owner is not None else None)
        self.item_manager = item_manager
        self._input = input_func if input_func is not None else input

    @property
    def player(self) -> PlayerCharacter:
        player = self._player if self._player is not None else get_player()
        if player is None:
            raise RuntimeError("no player is visiting the shop")
        return player

    def _read_number(self, x: int, y: int) -> int:
        self.console.set_cursor_position(x, y)
        self.console.write(PROMPT)
        self.console.out.flush()
        return _parse_number(self._input())

    def _bottom_dialogue(self, text: str) -> None:
        self.console.display_dialogue(
            text, 0, WINDOW_HEIGHT - DIALOG_HEIGHT, WINDOW_WIDTH, DIALOG_HEIGHT, OFFSET, OFFSET
        )

    def _center_dialogue(self, text: str) -> None:
        self.console.display_dialogue(
            text,
            WINDOW_WIDTH // 2 - CHOICE_WIDTH // 2 - 1,
            WINDOW_HEIGHT // 2 - CHOICE_HEIGHT // 2 - 1,
            CHOICE_WIDTH,
            CHOICE_HEIGHT,
            OFFSET,
            OFFSET,
        )

    def _header(self, text: str) -> None:
        self.console.display_dialogue(text, 0, 0, WINDOW_WIDTH, MENU_NAME_HEIGHT, OFFSET, 0)

    def _return_to_shop(self) -> None:
        self.console.clear_console_size_screen()
        self._header(RETURN_TO_SHOP)

    def _complain(self, text: str) -> None:
        self.console.clear_console_size_screen()
        self._bottom_dialogue(text)
        self.console.sleep(1500)

    def _not_enough_gold(self) -> None:
        self._complain(
            "상점 주인: 미안하지만...골드가...모자란 것...같군...\n"
            f"(현재 소지 골드 : {self.player.gold})"
        )

    def _list_input_row(self) -> int:
        return MENU_NAME_HEIGHT + ITEM_HEIGHT * (len(self.inventory.items) // 5 + 1) + 1

    def start_shop(self) -> None:
        """Greet the player and run the shop menu until they leave."""
        console = self.console
        console.clear_console_size_screen()
        self._bottom_dialogue(GREETINGS)
        console.sleep(1500)
        console.clear_console_size_screen()
        actions = {
            1: self.buy_items,
            2: self.sell_items,
            3: self.upgrade_equipment,
            4: self.drink_tea,
        }
        while True:
            self._center_dialogue(SHOP_MENU)
            choice = self._read_number(INPUT_CURSOR_X, INPUT_CURSOR_Y - 1)
            console.clear_console_size_screen()
            if choice == 0:
                self._bottom_dialogue(FAREWELL)
                console.sleep(1500)
                console.clear_console_size_screen()
                return
            action = actions.get(choice)
            if action is None:
                self._bottom_dialogue(NOT_VALID_INPUT)
            else:
                action()
            console.sleep(1500)
            console.clear_console_size_screen()

    def buy_items(self) -> None:
        """Sell catalogue items to the player until they go back."""
        catalogue = self.item_manager.items
        while True:
            self.console.clear_console_size_screen()
            self._header(
                f"[아이템 구매]\n(현재 소지 골드 : {self.player.gold})\n0 : 상점 메뉴로 돌아가기"
            )
            self.item_manager.show_item_db(self.console)
            choice = self._read_number(INPUT_CURSOR_X, INPUT_CURSOR_Y - 1) - 1

            if choice == -1:
                self._return_to_shop()
                return
            if 0 <= choice < len(catalogue):
                item = catalogue[choice]
                if self.player.gold < item.price:
                    self._not_enough_gold()
                    continue
                self.console.write("\n")
                self.player.increase_stat(Status.GOLD, -item.price)
                self.inventory.add_item(item.item_id)
            else:
                self._complain(NOT_VALID_INPUT)

    def sell_items(self) -> None:
        """Buy items back from the player at a reduced price."""
        while True:
            self.console.clear_console_size_screen()
            self._header(
                f"[아이템 판매]\n(현재 소지 골드 : {self.player.gold})\n0 : 상점 메뉴로 돌아가기"
            )
            self.inventory.show_inven()
            choice = self._read_number(INPUT_CURSOR_X, self._list_input_row()) - 1

            if choice == -1:
                self._return_to_shop()
                return
            if 0 <= choice < len(self.inventory.items):
                item = self.inventory.items[choice]
                item_name = item.name
                self.player.increase_stat(Status.GOLD, int(item.price * SELL_RATIO))
                self.inventory.remove_item(item, choice)
                self.console.clear_console_size_screen()
                self._bottom_dialogue(
                    f"{item_name} 아이템을 판매하였습니다!\n...\n"
                    "상점 주인: 고맙군요...어딘가에 잘...써보도록...하지요..."
                )
                self.console.sleep(1500)
            else:
                self._complain(NOT_VALID_INPUT)

    def _upgrade_terms(self, equipment: Equipment):
        if equipment.item_id == ItemID.ARMOR:
            return (
                equipment.upgrade_amount + self.ARMOR_UPGRADE_AMOUNT,
                equipment.upgrade_cost + self.ARMOR_UPGRADE_COST,
            )
        if equipment.item_id == ItemID.SWORD:
            return (
                equipment.upgrade_amount + self.SWORD_UPGRADE_AMOUNT,
                equipment.upgrade_cost + self.SWORD_UPGRADE_COST,
            )
        raise RuntimeError(f"cannot upgrade item with id {int(equipment.item_id)}")

    def upgrade_equipment(self) -> None:
        """Let the player pick a piece of equipment and pay to upgrade it."""
        items = self.inventory.items
        while True:
            self.console.clear_console_size_screen()
            self._header(
                f"[아이템 강화]\n(현재 소지 골드 : {self.player.gold})\n0 : 상점 메뉴로 돌아가기"
            )
            self.inventory.show_inven()
            index = self._read_number(INPUT_CURSOR_X, self._list_input_row()) - 1

            if index == -1:
                self._return_to_shop()
                return
            if not 0 <= index < len(items):
                self._complain(NOT_VALID_INPUT)
                continue
            equipment = items[index]
            if equipment.item_type != ItemType.EQUIPMENT:
                self._complain(NOT_EQUIPMENT)
                continue

            amount, cost = self._upgrade_terms(equipment)
            name = self.get_upgrade_name(equipment.item_id, equipment.equipment_level)
            confirm = (
                f"아래의 장비를 강화할까요?:\n{equipment.info_string()}"
                f"\n \n[강화: {name}]\n"
                f"\n--> 현재 강화 레벨 : {equipment.equipment_level}"
                f" / 최대 강화 레벨 : {self.UPGRADE_MAX_LEVEL}"
                f"\n--> 강화 효과 : {equipment.target_stat_string} +{amount} 추가로 증가"
                f"\n--> 강화 성공 확률 : {self.upgrade_success_rate(equipment)}%"
                f"\n--> 강화 비용 : {cost} 골드 (현재 소지 골드: {self.player.gold})"
                "\n1: 강화하기 / 0: 상점 메뉴로 돌아가기"
            )
            self.console.clear_console_size_screen()
            self.console.display_dialogue(
                confirm,
                WINDOW_WIDTH // 2 - CHOICE_WIDTH // 2 - 1,
                WINDOW_HEIGHT // 2 - (CHOICE_HEIGHT + 2) // 2 - 1,
                CHOICE_WIDTH,
                CHOICE_HEIGHT + 2,
                OFFSET,
                0,
            )
            choice = self._read_number(INPUT_CURSOR_X, INPUT_CURSOR_Y - 1)

            if choice == 1:
                if self.player.gold < cost:
                    self._not_enough_gold()
                    continue
                if equipment.equipment_level >= self.UPGRADE_MAX_LEVEL:
                    self._complain(EQUIPMENT_MAX_LEVEL)
                    continue
                self.player.increase_stat(Status.GOLD, -cost)
                self.upgrade_item(equipment, index)
                return
            if choice == 0:
                self._return_to_shop()
                return
            self._complain(NOT_VALID_INPUT)

    def upgrade_item(self, equipment: Equipment, index: int) -> None:
        """Try to upgrade the equipment in slot ``index``, then re-equip."""
        inventory = self.inventory
        if equipment is inventory.equipped_weapon:
            inventory.unequip(ItemID.SWORD)
        elif equipment is inventory.equipped_armor:
            inventory.unequip(ItemID.ARMOR)

        console = self.console
        console.clear_console_size_screen()
        self._center_dialogue("\n'*_.,._*^*_.,강화 중,._*^*_.,._*'\n")
        x = WINDOW_WIDTH // 2 - CHOICE_WIDTH // 2 + OFFSET
        y = WINDOW_HEIGHT // 2 - CHOICE_HEIGHT // 2 + OFFSET + 3
        for step in range(6):
            console.set_cursor_position(x + step * 5, y)
            console.write("...깡")
            console.sleep(1500)

        if self.rng.randrange(100) < self.upgrade_success_rate(equipment):
            if equipment.item_id == ItemID.SWORD:
                inventory.replace_item(SwordUpgrade(equipment), index)
            elif equipment.item_id == ItemID.ARMOR:
                inventory.replace_item(ArmorUpgrade(equipment), index)
            upgraded = inventory.items[index]
            result = (
                "'*,._+-Oo 강화 성공! oO-+.,*^'\n"
                f"--> 현재 장비 효과 : {upgraded.target_stat_string} +{upgraded.stat_amount}"
                f"\n--> 현재 장비 강화 레벨 : {upgraded.equipment_level}"
                f" / 최대 레벨 : {self.UPGRADE_MAX_LEVEL}"
            )
        else:
            result = UPGRADE_FAILED
        self._bottom_dialogue(result)
        console.sleep(1500)
        inventory.auto_equip(inventory.items[index])

    def upgrade_success_rate(self, equipment: Equipment) -> int:
        """Chance in percent: 90 minus 20 per upgrade level."""
        return 90 - equipment.equipment_level * 20

    def drink_tea(self) -> None:
        """Share a cup of tea with the shopkeeper."""
        console = self.console
        console.clear_console_size_screen()
        self._center_dialogue("......차 마시는 중......")
        x = WINDOW_WIDTH // 2 - CHOICE_WIDTH // 2 + OFFSET
        y = WINDOW_HEIGHT // 2 - CHOICE_HEIGHT // 2 + OFFSET + 3
        for step in range(6):
            console.set_cursor_position(x + step * 7, y)
            console.write("...홀짝")
            console.sleep(1500)
        console.set_cursor_position(x, y + 1)
        self._bottom_dialogue(AFTER_TEA)

    def get_upgrade_name(self, item_id: ItemID, level: int) -> str:
        """Name of the upgrade for equipment currently at ``level``."""
        return upgrade_name(item_id, level)