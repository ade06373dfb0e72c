"""Player skills: each computes damage and records its display name."""

from abc import ABC, abstractmethod

from .console import colored_text
from .enums import CYAN, GREEN


class Skill(ABC):
    """A combat skill; ``name`` is set when the skill is activated."""

    def __init__(self) -> None:
        self.name = ""

    @abstractmethod
    def activate(self, attack_power: int, stat: int) -> int:
        """Return the damage dealt and set ``name``."""


class PowerStrike(Skill):
    """Warrior skill: attack plus five times strength."""

    def activate(self, attack_power: int, stat: int) -> int:
        self.name = colored_text("파워 스트라이크!!!", GREEN)
        return attack_power + stat * 5


class MagicArrow(Skill):
    """Mage skill: twenty times intelligence."""

    def activate(self, attack_power: int, stat: int) -> int:
        self.name = "매직 미사일!!!"
        return stat * 20


class Meteor(Skill):
    """Mage skill: fifty-five times intelligence."""

    def activate(self, attack_power: int, stat: int) -> int:
        self.name = "메테오!!!!!"
        return stat * 55


class LastStrike(Skill):
    """Warrior skill: attack plus ten times strength."""

    def activate(self, attack_power: int, stat: int) -> int:
        self.name = colored_text("최후의 일격!!!!", CYAN)
        return attack_power + stat * 10