"""Top-level game flow: character creation, battles, the shop and the ending."""

import random
import re
from typing import Callable, List, Optional

from .battle import BattleManager
from .console import ConsoleManager
from .enums import Job, Status
from .inventory import Inventory
from .player import MAX_LEVEL, PlayerCharacter, get_instance
from .shop import Shop

CHEAT_CODES = ("NBC", "nbc")
CHEAT_STAT_VALUE = 999
SEPARATOR = "=========================================="

_NUMBER = re.compile(r"\s*([+-]?\d+)")
_JOBS = {1: Job.WARRIOR, 2: Job.MAGE}


def _parse_number(text: str) -> int:
    """Read a leading integer; anything else counts as -1."""
    match = _NUMBER.match(text)
    return int(match.group(1)) if match else -1


def _first_token(text: str) -> str:
    tokens = text.split()
    return tokens[0] if tokens else ""


class GameManager:
    """Runs the adventure: battles in a row with shop visits in between."""

    def __init__(
        self,
        console: Optional[ConsoleManager] = None,
        input_func: Optional[Callable[[], str]] = None,
        rng: Optional[random.Random] = None,
        inventory: Optional[Inventory] = None,
    ) -> None:
        self.console = console if console is not None else ConsoleManager()
        self._input = input_func if input_func is not None else input
        self.rng = rng if rng is not None else random.Random()
        self._inventory = inventory
        self.player: Optional[PlayerCharacter] = None
        self.over = False

    @property
    def inventory(self) -> Inventory:
        if self._inventory is None:
            self._inventory = Inventory.get_instance()
        return self._inventory

    def _write(self, text: str) -> None:
        self.console.write(text)

    def _read(self) -> str:
        self.console.out.flush()
        return self._input()

    def start_game(self) -> None:
        """Create a character and fight until defeat or the boss falls."""
        console = self.console
        console.clear_console_size_screen()
        self.create_character()
        shop = Shop(
            player=self.player,
            inventory=self.inventory,
            console=console,
            rng=self.rng,
            input_func=self._input,
        )

        while True:
            self.battle()
            if self.over:
                console.clear_screen()
                self.show_ending()
                return

            console.clear_screen()
            self._write("상점을 방문하시겠습니까? (Y 입력...): ")
            choice = _first_token(self._read())

            if choice in CHEAT_CODES:
                self._enable_cheat()

            if choice[:1] not in ("Y", "y"):
                continue
            self.visit_shop(shop)

            if self.player.level >= MAX_LEVEL:
                self._write("레벨 10에 도달했습니다! 보스와의 전투를 시작합니다.\n")

    def _enable_cheat(self) -> None:
        player = self.player
        for level in range(player.level, MAX_LEVEL):
            player.increase_stat(Status.EXP, level * 10 - player.experience)
        player.increase_stat(Status.MAXHP, CHEAT_STAT_VALUE - player.max_health)
        player.increase_stat(Status.HP, CHEAT_STAT_VALUE - player.health)
        player.increase_stat(Status.ATTACK, CHEAT_STAT_VALUE - player.attack_power)
        self._write(f"{SEPARATOR}\nEnable CHEAT\n{SEPARATOR}\n")

    def create_character(self) -> PlayerCharacter:
        """Ask for a name and a class and create the shared player."""
        self._write("플레이어 캐릭터의 이름을 입력하세요: ")
        first = True
        while True:
            name = self._read()
            if name.strip(" "):
                break
            if not first:
                self._write("이름을 다시 작성해주세요.\n")
            first = False

        self._write("직업을 선택하세요: \n")
        while True:
            self._write("1.전사 2.마법사 \n")
            job = _JOBS.get(_parse_number(self._read()))
            if job is not None:
                break
            self._write("선택하신직업이 없습니다. 다시 선택해주세요 \n")

        self.player = get_instance(name, job)
        return self.player

    def display_inventory(self) -> None:
        """Show the contents of the player's inventory."""
        self._write("인벤토리 목록\n")
        self.inventory.show_inven()

    def visit_shop(self, shop: Shop) -> None:
        """Enter the shop and stay until the player leaves."""
        self.console.clear_console_size_screen()
        self._write("상점에 방문하셨습니다!\n")
        shop.start_shop()

    def show_ending(self) -> None:
        """Print the closing credits and mark the game as over."""
        self._write(
            "\n"
            f"{SEPARATOR}\n"
            "                GAME CREDITS              \n"
            f"{SEPARATOR}\n"
            "\n"
            f"{SEPARATOR}\n"
            "        Thank you for playing our game!   \n"
            f"{SEPARATOR}\n"
            "\n"
        )
        self.over = True

    def battle(self) -> bool:
        """Fight one battle; the game is over when it is not won."""
        manager = BattleManager(
            player=self.player,
            inventory=self.inventory,
            console=self.console,
            rng=self.rng,
        )
        result = manager.battle()
        if not result:
            self.over = True
        return result


def main(argv: Optional[List[str]] = None) -> int:
    """Show the title screen and start the game on request."""
    console = ConsoleManager()
    game = GameManager(console)

    console.display_main_menu()
    console.draw_rectangle(0, 0, 120, 30)
    console.set_cursor_position(50, 26)
    console.out.flush()

    try:
        choice = _parse_number(input())
        if choice != 1:
            return 0
        console.write("게임을 시작합니다. \n")
        game.start_game()
    except EOFError:
        return 0
    finally:
        Inventory.reset_instance()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())