"""Turn-based combat between the player and one monster."""

import random
import sys
from typing import List, Optional

from .console import ConsoleManager, colored_text
from .enums import BLUE, GREEN, RED, WHITE, YELLOW, Status
from .inventory import Inventory
from .item_manager import ItemManager
from .monsters import BaseMonster, BossMonster, create_basic_monster, create_boss_monster
from .player import PlayerCharacter, get_player

BOSS_LEVEL = 10
MONSTER_EXP = (5, 10, 15, 15, 15, 20, 20, 20, 20)
ITEM_DROP_CHANCE = 100
ITEM_USE_CHANCE = 100
BOSS_SKILL_CHANCE = 30


class BattleManager:
    """Runs one battle and reports whether the adventure continues."""

    def __init__(
        self,
        player: Optional[PlayerCharacter] = None,
        inventory: Optional[Inventory] = None,
        console: Optional[ConsoleManager] = None,
        rng: Optional[random.Random] = None,
        item_manager: Optional[ItemManager] = None,
    ) -> None:
        self.player = player if player is not None else get_player()
        self.inventory = inventory if inventory is not None else Inventory.get_instance()
        self.console = console if console is not None else ConsoleManager()
        self.rng = rng if rng is not None else random.Random()
        job = self.player.job if self.player is not None else None
        self.item_manager = (
            item_manager if item_manager is not None else ItemManager(self.rng, job)
        )
        self.monster: Optional[BaseMonster] = None
        self.player_level = 1
        self.player_attack_delay = self.player.attack_delay if self.player is not None else 0
        self._texts: List[str] = []

    def _push(self, text: str) -> None:
        if text:
            self._texts.append(text)

    def battle(self) -> bool:
        """Fight until one side falls; True means the adventure goes on."""
        if self.player is None:
            self.console.write("전투 준비 오류 발생")
            return False
        player, console = self.player, self.console

        console.clear_screen()
        player.increase_stat(Status.HP, player.max_health)
        self.player_level = player.level
        player.display_status(console)

        self._create_monster()
        monster = self.monster

        console.draw_vs()
        console.draw_sparta()
        self._display_monster_stats()

        turn = 1
        monster_delay = monster.attack_delay
        player_delay = self.player_attack_delay

        console.write("전투를 시작합니다!\n\n")
        console.sleep(1000)
        console.clear_screen()

        while not self._player_dead() and not monster.is_dead:
            self._push(colored_text("현재 턴 : ", WHITE) + colored_text(str(turn), GREEN))
            turn += 1
            monster_delay -= 1
            player_delay -= 1

            if player_delay <= 0:
                self._player_attack()
                player_delay = self.player_attack_delay

            if monster.is_dead:
                self._push(
                    colored_text(player.name, RED) + "이(가) "
                    + colored_text(monster.name, BLUE) + "를 처치했습니다!"
                )
                self._push("전투 승리!")
                self._give_rewards()
                self._print_battle()
                console.clear_screen()
                self._drop_random_item()
                self.monster = None
                return self.player_level < BOSS_LEVEL

            if monster_delay <= 0:
                self._monster_attack()
                monster_delay = monster.attack_delay

            if self._player_dead():
                self._push(f"{player.name}이(가) 사망했습니다.")
                self._push("전투 패배...")
                self._print_battle()
                self.monster = None
                return False

            self._print_battle()
        raise RuntimeError("battle ended without a winner")

    def _create_monster(self) -> None:
        if self.player_level < BOSS_LEVEL:
            self.monster = create_basic_monster(self.player_level, self.player, self.rng)
            self._push(f"몬스터 {self.monster.name}등장!")
        else:
            self.monster = create_boss_monster(self.player_level, self.player, self.rng)
            self._push("두두두둥~ 쾅!")
            self._push(f"보스 몬스터 {self.monster.name}이 불을 내뿜으며 등장합니다!")

    def _player_attack(self) -> None:
        self._random_use_item()
        self._push(colored_text(self.player.name, RED) + "이(가) 공격!! ")
        hit = int(self.player.attack() * self.rng.uniform(0.7, 1.0))
        self._push(self.player.skill_name)
        self._push(self.monster.take_damaged(hit))
        self._push(f"[{self.monster.name}]의 체력이 [{hit}] 감소했습니다.")

    def _monster_attack(self) -> None:
        monster, player = self.monster, self.player
        if isinstance(monster, BossMonster):
            if self.rng.randrange(100) < BOSS_SKILL_CHANCE:
                monster.use_random_skill()
                return
            self._push(f"{monster.name}이 일반 공격을 합니다! ")
        else:
            self._push(colored_text(monster.name, BLUE) + "이(가) 공격!! ")
        player.take_damage(monster.damage)
        self._push(f"[{player.name}]의 체력이 [{monster.damage}] 감소했습니다.")

    def _player_dead(self) -> bool:
        return self.player.health <= 0

    def _give_rewards(self) -> None:
        if self.player_level >= BOSS_LEVEL:
            return
        exp = MONSTER_EXP[self.player_level - 1]
        gold = self.rng.randint(100, 200)
        self.player.increase_stat(Status.EXP, exp)
        self.player.increase_stat(Status.GOLD, gold)
        self._push(
            colored_text(self.player.name, RED) + "이(가) "
            + colored_text(str(exp), YELLOW) + " EXP와"
            + colored_text(str(gold), YELLOW) + " Gold 획득 !"
        )

    def _drop_random_item(self) -> None:
        if self.rng.randrange(100) < ITEM_DROP_CHANCE:
            self.inventory.add_item(self.item_manager.random_item_id())
            self.console.sleep(1000)

    def _random_use_item(self) -> None:
        if self.rng.randrange(100) < ITEM_USE_CHANCE:
            self._push(self.inventory.use_consumables())

    def _print_battle(self) -> None:
        console = self.console
        console.clear_screen()
        for row, text in enumerate(self._texts):
            console.set_cursor_position(0, row)
            console.write(text + "\n")
        self._texts.clear()
        console.sleep(2000)
        self.player.display_status(console)
        self._display_monster_stats()

    def _display_monster_stats(self) -> None:
        console, monster = self.console, self.monster
        console.draw_rectangle(49, 19, 20, 8)
        console.set_cursor_position(50, 20)
        console.write(f"     [{monster.name}]  ")
        console.set_cursor_position(50, 22)
        console.write(f"  체력:    {monster.current_hp}  ")
        console.set_cursor_position(50, 23)
        console.write(f"  공격력:  {monster.damage}  ")
        console.set_cursor_position(0, 0)


def _stdout() -> object:
    return sys.stdout