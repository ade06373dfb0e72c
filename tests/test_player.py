import io

import pytest

from spartaquest.console import ConsoleManager, colored_text
from spartaquest.enums import GREEN, Job, Status
from spartaquest.player import (
    Mage,
    PlayerCharacter,
    Warrior,
    create_player,
    get_instance,
    get_player,
    reset_player,
)
from spartaquest.skills import LastStrike, MagicArrow, Meteor, PowerStrike


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randint(self, a, b):
        return self.value


@pytest.fixture(autouse=True)
def _clean_singleton():
    reset_player()
    yield
    reset_player()


def test_warrior_starting_stats():
    w = create_player("hero", Job.WARRIOR)
    assert isinstance(w, Warrior)
    assert (w.health, w.max_health, w.attack_power) == (150, 150, 30)
    assert w.gold == 10000
    assert w.attack_delay == 1
    assert w.unique_stat == 1
    assert w.level == 1


def test_mage_starting_stats():
    m = create_player("wiz", Job.MAGE)
    assert isinstance(m, Mage)
    assert (m.health, m.max_health) == (170, 170)
    assert m.gold == 0
    assert m.attack_delay == 2
    assert m.job == Job.MAGE


def test_base_character_attack_is_zero():
    p = PlayerCharacter("plain")
    assert p.attack() == 0
    assert p.health == p.max_health


def test_take_damage_clamps_at_zero():
    w = create_player("hero", Job.WARRIOR)
    w.take_damage(w.health + 500)
    assert w.health == 0


def test_heal_capped_at_max():
    w = create_player("hero", Job.WARRIOR)
    w.take_damage(10)
    w.increase_stat(Status.HP, 1000)
    assert w.health == w.max_health


def test_exp_triggers_level_up():
    w = create_player("hero", Job.WARRIOR, )
    w._out = io.StringIO()
    before_max = w.max_health
    before_attack = w.attack_power
    w.increase_stat(Status.EXP, w.max_experience)
    assert w.level == 2
    assert w.experience == 0
    assert w.max_health == before_max + 2 * 20
    assert w.attack_power == before_attack + 2 * 5
    assert w.health == w.max_health
    assert "레벨업!" in w._out.getvalue()


def test_level_capped_at_ten():
    out = io.StringIO()
    w = Warrior("hero", out=out)
    w.level = 10
    w.increase_stat(Status.EXP, 250)
    assert w.level == 10
    assert w.experience < w.max_experience
    assert "최대 레벨에 도달했습니다!" in out.getvalue()


def test_strength_only_for_warrior():
    w = create_player("hero", Job.WARRIOR)
    m = create_player("wiz", Job.MAGE)
    w.increase_stat(Status.STR, 3)
    m.increase_stat(Status.STR, 3)
    assert w.strength == 4
    assert m.intelligence == 1


def test_intelligence_only_for_mage():
    w = create_player("hero", Job.WARRIOR)
    m = create_player("wiz", Job.MAGE)
    m.increase_stat(Status.INTELLIGENCE, 2)
    w.increase_stat(Status.INTELLIGENCE, 2)
    assert m.unique_stat == 3
    assert w.unique_stat == 1


def test_gold_attack_speed_maxhp():
    w = create_player("hero", Job.WARRIOR)
    w.increase_stat(Status.GOLD, -500)
    w.increase_stat(Status.ATTACK, 7)
    w.increase_stat(Status.SPEED, 2)
    w.increase_stat(Status.MAXHP, 30)
    assert w.gold == 10000 - 500
    assert w.attack_power == 30 + 7
    assert w.attack_delay == 1 + 2
    assert w.max_health == 150 + 30


def test_unknown_stat_reports():
    out = io.StringIO()
    w = Warrior("hero", out=out)
    w.increase_stat(Status.MP, 5)
    assert "알 수 없는 Stat 값입니다!" in out.getvalue()


def test_warrior_normal_attack():
    w = create_player("hero", Job.WARRIOR, FixedRng(70))
    assert w.attack() == w.attack_power
    assert w.skill_name == "일반공격"


def test_warrior_power_strike():
    w = create_player("hero", Job.WARRIOR, FixedRng(90))
    assert w.attack() == PowerStrike().activate(30, 1)
    assert w.skill_name == colored_text("파워 스트라이크!!!", GREEN)


def test_warrior_last_strike():
    w = create_player("hero", Job.WARRIOR, FixedRng(91))
    assert w.attack() == LastStrike().activate(30, 1)


def test_mage_skills():
    assert create_player("w", Job.MAGE, FixedRng(40)).attack() == 30
    m = create_player("w", Job.MAGE, FixedRng(41))
    assert m.attack() == MagicArrow().activate(30, 1)
    assert m.skill_name == "매직 미사일!!!"
    m = create_player("w", Job.MAGE, FixedRng(81))
    assert m.attack() == Meteor().activate(30, 1)
    assert m.skill_name == "메테오!!!!!"


def test_singleton_created_once():
    assert get_player() is None
    first = get_instance("wiz", Job.MAGE)
    second = get_instance("other", Job.WARRIOR)
    assert first is second
    assert isinstance(get_player(), Mage)
    assert get_player().name == "wiz"


def test_display_status_writes_panel():
    out = io.StringIO()
    w = create_player("hero", Job.WARRIOR)
    w.display_status(ConsoleManager(out=out, delay_scale=0))
    text = out.getvalue()
    assert "hero" in text
    assert "골드:" in text
    assert "레벨: 1" in text