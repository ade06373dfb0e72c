import pytest

from spartaquest.monsters import (
    BossMonster,
    EnragedState,
    Goblin,
    NormalState,
    Orc,
    Slime,
    Troll,
    create_basic_monster,
    create_boss_monster,
)
from spartaquest.player import Warrior


class StubRng:
    """Always picks the lowest value, or a fixed choice for randrange."""

    def __init__(self, choice=0):
        self.choice = choice

    def randint(self, a, b):
        return a

    def randrange(self, n):
        return self.choice % n

    def uniform(self, a, b):
        return a


@pytest.fixture
def player():
    return Warrior("hero")


def test_normal_state_returns_empty(player):
    goblin = Goblin("고블린", 1, player, StubRng())
    assert NormalState().handle(goblin) == ""


def test_enraged_state_runs_skill(player):
    troll = Troll("트롤", 1, player, StubRng())
    troll.current_hp = 1
    message = EnragedState().handle(troll)
    assert troll.current_hp == troll.max_hp
    assert message == "트롤이 괴성을 지르며 최대 체력으로 회복합니다!"


@pytest.mark.parametrize("level", [1, 3, 9])
def test_stats_within_scaling_range(player, level):
    slime = Slime("슬라임", level, player)
    assert 100 + level * 50 <= slime.max_hp <= 100 + level * 100
    assert 10 + level * 10 <= slime.damage <= 10 + level * 14
    assert slime.current_hp == slime.max_hp
    assert slime.attack_delay == 2


def test_class_modifiers_relative_to_base(player):
    base = Slime("s", 4, player, StubRng())
    goblin = Goblin("g", 4, player, StubRng())
    orc = Orc("o", 4, player, StubRng())
    troll = Troll("t", 4, player, StubRng())
    boss = BossMonster("b", 4, player, StubRng())
    assert goblin.damage == int(base.damage * 0.7)
    assert orc.max_hp == int(base.max_hp * 1.5)
    assert orc.current_hp == orc.max_hp
    assert troll.damage == int(base.damage * 1.5)
    assert boss.max_hp == base.max_hp * 5
    assert boss.damage == base.damage + int(base.damage * 1.5)
    assert (goblin.speed, orc.speed, troll.speed, boss.speed) == (2, 3, 5, 6)


def test_lethal_damage_kills(player):
    orc = Orc("오크", 1, player, StubRng())
    assert orc.take_damaged(orc.max_hp + 10) == ""
    assert orc.is_dead
    assert orc.current_hp == 0


def test_small_damage_does_not_enrage(player):
    goblin = Goblin("고블린", 1, player, StubRng())
    before = goblin.damage
    assert goblin.take_damaged(1) == ""
    assert isinstance(goblin.state, NormalState)
    assert goblin.damage == before


def test_goblin_enrages_once(player):
    goblin = Goblin("고블린", 1, player, StubRng())
    before = goblin.damage
    message = goblin.take_damaged(goblin.max_hp - 1)
    assert message == "고블린이 신체를 강화시켜 데미지가 2배 상승합니다!"
    assert goblin.damage == before * 2
    assert isinstance(goblin.state, EnragedState)
    assert goblin.take_damaged(0) == ""
    assert goblin.damage == before * 2


def test_orc_recovers_half_of_lost(player):
    orc = Orc("오크", 1, player, StubRng())
    message = orc.take_damaged(orc.max_hp - 10)
    assert message == "오크가 잃은 체력의 절반을 회복합니다!"
    lost = orc.max_hp - 10
    assert orc.current_hp == 10 + lost // 2


def test_slime_undoes_player_attack(player):
    slime = Slime("슬라임", 1, player, StubRng())
    slime.take_damaged(slime.max_hp - 5)
    assert slime.current_hp == 5 + player.attack_power


def test_troll_heals_fully(player):
    troll = Troll("트롤", 2, player, StubRng())
    troll.take_damaged(troll.max_hp - 1)
    assert troll.current_hp == troll.max_hp


def test_set_state_blocks_enrage(player):
    troll = Troll("트롤", 1, player, StubRng())
    troll.set_state(EnragedState())
    assert troll.take_damaged(troll.max_hp - 1) == ""
    assert troll.current_hp == 1


def test_boss_fire_breath(player):
    player.max_health = player.health = 100000
    boss = create_boss_monster(1, player, StubRng(0))
    message = boss.use_random_skill()
    assert message == "레드 드래곤이 용의 숨결 스킬로 공격합니다!"
    assert player.health == 100000 - int(boss.damage * 1.5)


def test_boss_quick_attack(player):
    player.max_health = player.health = 100000
    boss = create_boss_monster(1, player, StubRng(1))
    message = boss.use_random_skill()
    assert message == "레드 드래곤이 재빠르게 두 번 공격합니다!"
    assert player.health == 100000 - boss.damage - int(boss.damage * 0.3)


def test_boss_enrage_message(player):
    boss = create_boss_monster(1, player, StubRng())
    message = boss.take_damaged(boss.max_hp - 2)
    assert message == "레드 드래곤이 잃은 체력의 절반을 회복합니다!"
    assert 2 < boss.current_hp <= boss.max_hp


@pytest.mark.parametrize(
    "choice, cls, name",
    [(0, Goblin, "고블린"), (1, Orc, "오크"), (2, Slime, "슬라임"), (3, Troll, "트롤")],
)
def test_factory_creates_each_type(player, choice, cls, name):
    monster = create_basic_monster(2, player, StubRng(choice))
    assert type(monster) is cls
    assert monster.name == name


def test_boss_factory(player):
    boss = create_boss_monster(10, player)
    assert isinstance(boss, BossMonster)
    assert boss.name == "레드 드래곤"


def test_slime_without_player_raises():
    slime = Slime("슬라임", 1, None, StubRng())
    slime._player = None
    from spartaquest.player import reset_player

    reset_player()
    with pytest.raises(RuntimeError):
        slime.enraged_skill()