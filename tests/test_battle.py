import io
import random

import pytest

from spartaquest.battle import BattleManager
from spartaquest.console import ConsoleManager
from spartaquest.enums import Job
from spartaquest.inventory import Inventory
from spartaquest.player import create_player, reset_player


def make_battle(player, seed=1):
    out = io.StringIO()
    console = ConsoleManager(out=out, delay_scale=0)
    inventory = Inventory(player=player, console=console)
    manager = BattleManager(
        player=player, inventory=inventory, console=console, rng=random.Random(seed)
    )
    return manager, inventory, out


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
@pytest.mark.parametrize("job", [Job.WARRIOR, Job.MAGE])
def test_sturdy_player_wins(seed, job):
    player = create_player("hero", job, random.Random(seed))
    player.max_health = 10**6
    gold_before = player.gold
    manager, inventory, out = make_battle(player, seed)
    assert manager.battle() is True
    assert player.experience == 5
    assert 100 <= player.gold - gold_before <= 200
    assert manager.monster is None
    assert len(inventory.items) == 1
    assert "전투 승리!" in out.getvalue()


@pytest.mark.parametrize("seed", [1, 7, 11])
def test_fragile_player_loses(seed):
    player = create_player("hero", Job.WARRIOR, random.Random(seed))
    player.max_health = 1
    manager, inventory, out = make_battle(player, seed)
    assert manager.battle() is False
    assert player.health == 0
    assert player.gold == 10000
    assert inventory.items == []
    assert "전투 패배..." in out.getvalue()


def test_level_ten_faces_boss_and_ends_adventure():
    player = create_player("hero", Job.WARRIOR, random.Random(3))
    player.level = 10
    manager, _, out = make_battle(player, 3)
    assert manager.battle() is False
    assert "레드 드래곤" in out.getvalue()


def test_no_player_reports_error():
    reset_player()
    out = io.StringIO()
    console = ConsoleManager(out=out, delay_scale=0)
    inventory = Inventory(console=console)
    manager = BattleManager(player=None, inventory=inventory, console=console)
    assert manager.battle() is False
    assert "전투 준비 오류 발생" in out.getvalue()


def test_dead_player_cannot_fight():
    player = create_player("hero", Job.WARRIOR, random.Random(2))
    player.max_health = 0
    manager, _, _ = make_battle(player, 2)
    with pytest.raises(RuntimeError):
        manager.battle()


def test_attack_delay_taken_from_player():
    player = create_player("mage", Job.MAGE, random.Random(1))
    manager, _, _ = make_battle(player)
    assert manager.player_attack_delay == player.attack_delay
    assert manager.monster is None


def test_consumables_used_during_battle():
    player = create_player("hero", Job.WARRIOR, random.Random(4))
    player.max_health = 10**6
    manager, inventory, out = make_battle(player, 4)
    inventory.items.clear()
    inventory.counts.clear()
    from spartaquest.enums import ItemID
    from spartaquest.items import HealthPotion

    inventory.items.append(HealthPotion())
    inventory.counts[ItemID.HEALTH_POTION] = 1
    manager.battle()
    assert ItemID.HEALTH_POTION not in inventory.counts or inventory.counts[
        ItemID.HEALTH_POTION
    ] >= 1
    assert "체력 물약 아이템을 사용하였습니다." in out.getvalue()