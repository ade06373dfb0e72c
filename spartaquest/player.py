"""The player character, its two classes and the shared player instance."""

import random
import sys
from typing import List, Optional, TextIO

from .console import ConsoleManager, colored_text
from .enums import BLUE, CYAN, RED, YELLOW, Job, Status
from .skills import LastStrike, MagicArrow, Meteor, PowerStrike, Skill

MAX_LEVEL = 10
NORMAL_ATTACK_NAME = "일반공격"


class PlayerCharacter:
    """A player with health, attack, experience, gold and a level."""

    def __init__(
        self,
        name: str,
        rng: Optional[random.Random] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self.name = name
        self.job = Job.WARRIOR
        self.level = 1
        self.health = 200
        self.max_health = 200
        self.attack_power = 30
        self.experience = 0
        self.gold = 0
        self.attack_delay = 0
        self.skills: List[Skill] = []
        self.skill_name = ""
        self.rng = rng if rng is not None else random.Random()
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def max_experience(self) -> int:
        """Experience needed for the next level."""
        return self.level * 10

    @property
    def unique_stat(self) -> int:
        """The class-specific stat; a plain character has none."""
        return 0

    def attack(self) -> int:
        """Return the damage of one attack."""
        return 0

    def take_damage(self, amount: int) -> None:
        """Lose ``amount`` health, never going below zero."""
        self.health = max(self.health - int(amount), 0)

    def display_status(self, console: Optional[ConsoleManager] = None) -> None:
        """Draw the status panel in the lower-left of the battle screen."""
        console = console if console is not None else ConsoleManager()
        console.set_cursor_position(2, 20)
        console.write(f"===== {colored_text(self.name, CYAN)}의 상태 =====\n")
        console.set_cursor_position(2, 21)
        console.write(
            f"레벨: {self.level}, 경험치: {self.experience}/ {self.max_experience}  \n"
        )
        console.set_cursor_position(2, 22)
        health_color = RED if self.health < self.max_health * 0.5 else BLUE
        console.write(
            f"체력: {colored_text(str(self.health), health_color)}"
            f"/{colored_text(str(self.max_health), BLUE)}"
            f", 공격력: {self.attack_power}  \n"
        )
        console.set_cursor_position(2, 23)
        console.write(f"골드: {colored_text(str(self.gold), YELLOW)}\n")
        console.draw_rectangle(1, 19, 30, 8)
        console.set_cursor_position(0, 0)

    def increase_stat(self, stat: Status, amount: int) -> None:
        """Change one statistic by ``amount`` (which may be negative)."""
        if stat == Status.HP:
            self.health = min(self.health + amount, self.max_health)
        elif stat == Status.MAXHP:
            self.max_health += amount
        elif stat == Status.ATTACK:
            self.attack_power += amount
        elif stat == Status.GOLD:
            self.gold += amount
        elif stat == Status.EXP:
            self.experience += amount
            while self.experience >= self.max_experience:
                self.experience -= self.max_experience
                self.level_up()
        elif stat == Status.STR:
            if isinstance(self, Warrior):
                self.increase_str(amount)
        elif stat == Status.INTELLIGENCE:
            if isinstance(self, Mage):
                self.increase_int(amount)
        elif stat == Status.SPEED:
            self.attack_delay += amount
        else:
            print("알 수 없는 Stat 값입니다!", file=self.out)

    def level_up(self) -> None:
        """Advance one level, raising stats and restoring health."""
        if self.level >= MAX_LEVEL:
            print("최대 레벨에 도달했습니다!", file=self.out)
            return
        self.level += 1
        self.max_health += self.level * 20
        self.attack_power += self.level * 5
        self.health = self.max_health
        self.experience = 0
        print(f"레벨업! 현재 레벨: {self.level}", file=self.out)


class Warrior(PlayerCharacter):
    """Sturdy melee class that relies on strength."""

    def __init__(
        self,
        name: str,
        rng: Optional[random.Random] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        super().__init__(name, rng, out)
        self.strength = 1
        self.health = 150
        self.max_health = 150
        self.attack_power = 30
        self.gold = 10000
        self.attack_delay = 1
        self.job = Job.WARRIOR

    @property
    def unique_stat(self) -> int:
        return self.strength

    def attack(self) -> int:
        return self.random_attack()

    def increase_str(self, amount: int) -> None:
        self.strength += amount

    def random_attack(self) -> int:
        """Normal attack 70%, Power Strike 20%, Last Strike 10%."""
        weight = self.rng.randint(1, 100)
        if weight <= 70:
            self.skill_name = NORMAL_ATTACK_NAME
            return self.attack_power
        skill: Skill = PowerStrike() if weight <= 90 else LastStrike()
        damage = skill.activate(self.attack_power, self.strength)
        self.skill_name = skill.name
        return damage


class Mage(PlayerCharacter):
    """Spell-casting class that relies on intelligence."""

    def __init__(
        self,
        name: str,
        rng: Optional[random.Random] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        super().__init__(name, rng, out)
        self.intelligence = 1
        self.health = 170
        self.max_health = 170
        self.attack_power = 30
        self.gold = 0
        self.attack_delay = 2
        self.job = Job.MAGE

    @property
    def unique_stat(self) -> int:
        return self.intelligence

    def attack(self) -> int:
        return self.random_attack()

    def increase_int(self, amount: int) -> None:
        self.intelligence += amount

    def random_attack(self) -> int:
        """Normal attack 40%, Magic Arrow 40%, Meteor 20%."""
        weight = self.rng.randint(1, 100)
        if weight <= 40:
            self.skill_name = NORMAL_ATTACK_NAME
            return self.attack_power
        skill: Skill = MagicArrow() if weight <= 80 else Meteor()
        damage = skill.activate(self.attack_power, self.intelligence)
        self.skill_name = skill.name
        return damage


def create_player(
    name: str, job: Job = Job.WARRIOR, rng: Optional[random.Random] = None
) -> PlayerCharacter:
    """Build a new character of the given class."""
    if job == Job.WARRIOR:
        return Warrior(name, rng)
    if job == Job.MAGE:
        return Mage(name, rng)
    return PlayerCharacter(name, rng)


_instance: Optional[PlayerCharacter] = None


def get_instance(name: str = "", job: Job = Job.WARRIOR) -> PlayerCharacter:
    """Return the shared player, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = create_player(name, job)
    return _instance


def get_player() -> Optional[PlayerCharacter]:
    """Return the shared player, or None if none has been created."""
    return _instance


def reset_player() -> None:
    """Forget the shared player."""
    global _instance
    _instance = None