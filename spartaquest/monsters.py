"""Monsters, their rage states and the factory that spawns them."""

import random
from abc import ABC, abstractmethod
from typing import Optional

from .enums import MonsterType
from .player import PlayerCharacter, get_player

BOSS_NAME = "레드 드래곤"
_BASIC_NAMES = {
    MonsterType.GOBLIN: "고블린",
    MonsterType.ORC: "오크",
    MonsterType.SLIME: "슬라임",
    MonsterType.TROLL: "트롤",
}


class MonsterState(ABC):
    """A behavioural state a monster can be in."""

    @abstractmethod
    def handle(self, monster: "BaseMonster") -> str:
        """React to entering this state and return a message (may be empty)."""


class NormalState(MonsterState):
    """The calm state every monster starts in."""

    def handle(self, monster: "BaseMonster") -> str:
        return ""


class EnragedState(MonsterState):
    """Entered once a monster drops to half health; fires its rage skill."""

    def handle(self, monster: "BaseMonster") -> str:
        return monster.enraged_skill()


class BaseMonster(ABC):
    """A monster whose health and damage scale with the player's level."""

    def __init__(
        self,
        name: str,
        player_level: int,
        player: Optional[PlayerCharacter] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self._player = player
        self.name = name
        self.is_dead = False
        self.speed = 6
        self.damage = 10
        self.max_hp = 100
        self.state: MonsterState = NormalState()
        self._scale_to_level(player_level)
        self.current_hp = self.max_hp

    def _scale_to_level(self, player_level: int) -> None:
        hp_multiplier = self.rng.randint(50, 100)
        damage_multiplier = self.rng.randint(10, 14)
        self.max_hp += player_level * hp_multiplier
        self.damage += player_level * damage_multiplier

    @property
    def player(self) -> PlayerCharacter:
        player = self._player if self._player is not None else get_player()
        if player is None:
            raise RuntimeError("no player is fighting this monster")
        return player

    @property
    def attack_delay(self) -> int:
        """Turns between this monster's attacks."""
        return self.speed

    def take_damaged(self, amount: int) -> str:
        """Lose health; enrage on first falling to half. Returns any skill message."""
        self.current_hp -= amount
        if self.current_hp <= 0:
            self.current_hp = 0
            self.is_dead = True
            return ""
        if self.current_hp <= self.max_hp // 2 and isinstance(self.state, NormalState):
            self.set_state(EnragedState())
            return self.state.handle(self)
        return ""

    def set_state(self, state: MonsterState) -> None:
        self.state = state

    @abstractmethod
    def enraged_skill(self) -> str:
        """Apply the monster's rage effect and describe it."""


class Goblin(BaseMonster):
    """Fast and weak; doubles its damage when enraged."""

    def __init__(self, name, player_level, player=None, rng=None) -> None:
        super().__init__(name, player_level, player, rng)
        self.damage = int(self.damage * 0.7)
        self.speed = 2

    def enraged_skill(self) -> str:
        self.damage *= 2
        return f"{self.name}이 신체를 강화시켜 데미지가 2배 상승합니다!"


class Orc(BaseMonster):
    """Tough; recovers half of its lost health when enraged."""

    def __init__(self, name, player_level, player=None, rng=None) -> None:
        super().__init__(name, player_level, player, rng)
        self.speed = 3
        self.max_hp = int(self.max_hp * 1.5)
        self.current_hp = self.max_hp

    def enraged_skill(self) -> str:
        self.current_hp += (self.max_hp - self.current_hp) // 2
        return f"{self.name}가 잃은 체력의 절반을 회복합니다!"


class Slime(BaseMonster):
    """Cancels the player's last hit when enraged."""

    def __init__(self, name, player_level, player=None, rng=None) -> None:
        super().__init__(name, player_level, player, rng)
        self.speed = 2

    def enraged_skill(self) -> str:
        self.current_hp += self.player.attack_power
        return f"{self.name}이 플레이어의 방금 공격을 무효화 했습니다!"


class Troll(BaseMonster):
    """Hard-hitting; fully heals when enraged."""

    def __init__(self, name, player_level, player=None, rng=None) -> None:
        super().__init__(name, player_level, player, rng)
        self.speed = 5
        self.damage = int(self.damage * 1.5)

    def enraged_skill(self) -> str:
        self.current_hp = self.max_hp
        return f"{self.name}이 괴성을 지르며 최대 체력으로 회복합니다!"


class BossMonster(BaseMonster):
    """The final boss with five times the health and special attacks."""

    def __init__(self, name, player_level, player=None, rng=None) -> None:
        super().__init__(name, player_level, player, rng)
        self.max_hp *= 5
        self.current_hp = self.max_hp
        self.damage += int(self.damage * 1.5)
        self.speed = 6

    def enraged_skill(self) -> str:
        self.current_hp += (self.max_hp - self.current_hp) // 2
        return f"{self.name}이 잃은 체력의 절반을 회복합니다!"

    def use_random_skill(self) -> str:
        """Use the fire breath or the double attack, chosen at random."""
        if self.rng.randrange(2) == 0:
            self._fire_breath()
            return f"{self.name}이 용의 숨결 스킬로 공격합니다!"
        self._quick_attack()
        return f"{self.name}이 재빠르게 두 번 공격합니다!"

    def _fire_breath(self) -> None:
        self.player.take_damage(int(self.damage * 1.5))

    def _quick_attack(self) -> None:
        self.player.take_damage(self.damage)
        self.player.take_damage(int(self.damage * 0.3))


_BASIC_CLASSES = {
    MonsterType.GOBLIN: Goblin,
    MonsterType.ORC: Orc,
    MonsterType.SLIME: Slime,
    MonsterType.TROLL: Troll,
}


def create_basic_monster(
    player_level: int,
    player: Optional[PlayerCharacter] = None,
    rng: Optional[random.Random] = None,
) -> BaseMonster:
    """Spawn a random ordinary monster scaled to ``player_level``."""
    rng = rng if rng is not None else random.Random()
    monster_type = MonsterType(rng.randrange(4))
    cls = _BASIC_CLASSES[monster_type]
    return cls(_BASIC_NAMES[monster_type], player_level, player, rng)


def create_boss_monster(
    player_level: int,
    player: Optional[PlayerCharacter] = None,
    rng: Optional[random.Random] = None,
) -> BossMonster:
    """Spawn the boss scaled to ``player_level``."""
    return BossMonster(BOSS_NAME, player_level, player, rng)