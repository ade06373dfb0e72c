import io
import random

import pytest

from spartaquest.enums import ItemID, ItemType, Status
from spartaquest.items import Armor, Sword
from spartaquest.player import Warrior, reset_player
from spartaquest.upgrades import ArmorUpgrade, SwordUpgrade, upgrade_name


@pytest.fixture
def warrior():
    return Warrior("hero", rng=random.Random(1), out=io.StringIO())


def test_sword_upgrade_first_level():
    base = Sword()
    up = SwordUpgrade(base)
    assert up.equipment_level == 1
    assert up.upgrade_cost == 200
    assert up.upgrade_amount == 5
    assert up.stat_amount == base.stat_amount + up.upgrade_amount
    assert up.price == base.price + up.upgrade_cost
    assert up.item_id == ItemID.SWORD
    assert up.item_type == ItemType.EQUIPMENT
    assert up.target_stat == Status.ATTACK
    assert up.name == "배틀 소드"
    assert up.target_stat_string == "공격력"
    assert up.upgrade_name == "칼날 다듬기"


def test_armor_upgrade_first_level():
    base = Armor()
    up = ArmorUpgrade(base)
    assert up.equipment_level == 1
    assert up.upgrade_cost == 150
    assert up.upgrade_amount == 15
    assert up.stat_amount == base.stat_amount + up.upgrade_amount
    assert up.target_stat == Status.MAXHP
    assert up.target_stat_string == "최대 체력"
    assert up.upgrade_name == "무두질"


def test_stacked_upgrades_accumulate():
    first = SwordUpgrade(Sword())
    second = SwordUpgrade(first)
    assert second.equipment_level == 2
    assert second.upgrade_cost == first.upgrade_cost + 200
    assert second.upgrade_amount == first.upgrade_amount + 5
    assert second.stat_amount == first.stat_amount + second.upgrade_amount
    assert second.upgrade_name == "손잡이 경량화"


def test_fifth_upgrade_has_no_name():
    item = Armor()
    for _ in range(5):
        item = ArmorUpgrade(item)
    assert item.equipment_level == 5
    assert item.upgrade_name == ""


@pytest.mark.parametrize(
    "item_id, level, expected",
    [
        (ItemID.SWORD, 0, "칼날 다듬기"),
        (ItemID.SWORD, 3, "아다만티움 코팅"),
        (ItemID.ARMOR, 1, "이음새 강화"),
        (ItemID.ARMOR, 3, "표면 금속 코팅"),
        (ItemID.SWORD, 4, ""),
        (ItemID.HEALTH_POTION, 0, ""),
    ],
)
def test_upgrade_name(item_id, level, expected):
    assert upgrade_name(item_id, level) == expected


def test_sword_upgrade_use_adds_base_and_bonus(warrior):
    before = warrior.attack_power
    up = SwordUpgrade(Sword())
    up.use(warrior)
    assert warrior.attack_power == before + Sword.stat_amount + up.upgrade_amount


def test_armor_upgrade_use_raises_max_health(warrior):
    before = warrior.max_health
    up = ArmorUpgrade(Armor())
    up.use(warrior)
    assert warrior.max_health == before + Armor.stat_amount + up.upgrade_amount


def test_use_without_player_raises():
    reset_player()
    with pytest.raises(RuntimeError):
        ArmorUpgrade(Armor()).use()


def test_info_strings():
    sword = SwordUpgrade(Sword())
    assert sword.info_string() == (
        f"아이템: 배틀 소드(+1)\n가격: {sword.price}\n효과: 공격력 +{sword.stat_amount}"
    )
    armor = ArmorUpgrade(Armor())
    assert armor.info_string() == (
        f"아이템: 레더 아머+1\n가격: {armor.price}\n효과: 최대 체력 +{armor.stat_amount}"
    )


def test_print_item_info():
    out = io.StringIO()
    up = ArmorUpgrade(ArmorUpgrade(Armor()))
    up.print_item_info(out)
    text = out.getvalue()
    assert text.startswith("\n아이템: 레더 아머(+2)")
    assert text.endswith(f"최대 체력 +{up.stat_amount}\n\n")