# spartaquest

A small turn-based role-playing game for the terminal. Its text is in Korean.

You name a hero, choose a job and fight one monster after another. Each win
gives experience, gold and an item. Between battles you can visit the shop to
buy, sell and upgrade gear. Once you reach level 10 the boss appears: a red
dragon.

## Installing

```
pip install .
```

## Playing

```
spartaquest
```

The game draws with ANSI escape codes and places the cursor directly, so use a
terminal that supports them and is at least 120 columns wide.

At the title screen, enter `1` to start. Any other input quits. Then:

1. Type your character's name. A blank name is asked for again.
2. Choose a job: `1` for a warrior or `2` for a mage.
   - **Warrior**: 150 HP, 30 attack and 10000 starting gold. Attacks every
     turn. A normal attack is used 70% of the time, *Power Strike*
     (attack + 5 × STR) 20% and *Last Strike* (attack + 10 × STR) 10%.
   - **Mage**: 170 HP, 30 attack and no starting gold. Attacks every other
     turn. A normal attack is used 40% of the time, *Magic Arrow*
     (20 × INT) 40% and *Meteor* (55 × INT) 20%.
3. Watch the battle. Your health is fully restored before each fight. Every
   hit deals 70–100% of the attack's damage. Before each of your attacks, the
   first consumable in your inventory is used automatically.
4. After a win, enter `Y` (or anything that starts with `y`) to visit the
   shop. Any other answer goes straight to the next fight.

The game ends, showing the credits, when you are defeated or when you beat
the boss.

### Levels and rewards

You need `level × 10` experience to reach the next level. Each level up
raises maximum HP by `new level × 20` and attack by `new level × 5`, and
fully heals you. A win against an ordinary monster gives 5–20 experience,
depending on your level, and 100–200 gold. It also drops one item: usually a
consumable, and occasionally a sword or armour.

### Monsters

Four ordinary monsters grow stronger with your level. Each becomes enraged
once, when it first falls to half health, and uses its own skill:

| Monster | Enraged skill |
| ------- | ------------- |
| Goblin | doubles its damage |
| Orc | recovers half of its lost health |
| Slime | regains health equal to your attack |
| Troll | recovers to full health |

From level 10 you face the red dragon. It has five times the health of an
ordinary monster. It sometimes uses a fire breath or a quick double attack
instead of a normal attack.

### The shop

| Choice | Action |
| ------ | ------ |
| 1 | Buy items |
| 2 | Sell items for 60% of their value |
| 3 | Upgrade a sword or armour, up to level 4 |
| 4 | Have tea with the shopkeeper |
| 0 | Leave |

An upgrade succeeds with a chance of 90% minus 20% per level the item
already has. Each sword level adds attack and each armour level adds maximum
HP.

Items for sale:

| Item | Kind | Price | Effect |
| ---- | ---- | ----- | ------ |
| Health potion | consumable | 100 | HP +50 |
| Attack elixir | consumable | 200 | Attack +10 |
| Unique elixir | consumable | 300 | STR +1 (warrior) or INT +2 (mage) |
| Battle sword | equipment | 500 | Attack +20 |
| Leather armour | equipment | 300 | Max HP +30 |

New equipment is put on automatically when you wear nothing of its kind or
when it is stronger than what you wear.

## Using it as a library

The game objects can be used on their own. Most of them accept a
`random.Random` instance, and the screen classes accept an output stream, so
you can run them reproducibly and without a terminal:

```python
import io
import random

from spartaquest.console import ConsoleManager
from spartaquest.enums import Job
from spartaquest.monsters import create_basic_monster
from spartaquest.player import create_player

rng = random.Random(1)
hero = create_player("Hero", Job.WARRIOR, rng)
monster = create_basic_monster(hero.level, hero, rng)
message = monster.take_damaged(hero.attack())

console = ConsoleManager(out=io.StringIO(), delay_scale=0)
hero.display_status(console)
```

- `spartaquest.player`: `PlayerCharacter`, `Warrior`, `Mage` and
  `create_player`. The game's shared player is handled by `get_instance`,
  `get_player` and `reset_player`.
- `spartaquest.items` and `spartaquest.upgrades`: the item classes,
  `SwordUpgrade`, `ArmorUpgrade` and `upgrade_name`.
- `spartaquest.item_manager.ItemManager`: the item catalogue and random drops.
- `spartaquest.inventory.Inventory`: stacked consumables, equipment and
  auto-equipping.
- `spartaquest.monsters`: the monster classes, `create_basic_monster` and
  `create_boss_monster`.
- `spartaquest.battle.BattleManager`, `spartaquest.shop.Shop` and
  `spartaquest.game.GameManager`. `Shop` and `GameManager` take an
  `input_func` that supplies each line of player input.
- `spartaquest.game.main`: the command above.

## What it does not do

There is no saving or loading. A game lives only as long as the process. The
screen is drawn for a fixed 120-column terminal layout and is not resized.

## Running the tests

```
pip install .[test]
pytest
```