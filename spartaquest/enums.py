"""Enumerations and terminal colour codes shared across the game."""

from enum import IntEnum

# Bright ANSI text colours.
BLACK = "\033[1;30m"
RED = "\033[1;31m"
GREEN = "\033[1;32m"
YELLOW = "\033[1;33m"
BLUE = "\033[1;34m"
MAGENTA = "\033[1;35m"
CYAN = "\033[1;36m"
WHITE = "\033[1;37m"

# Resets every text attribute.
RESET = "\033[0m"


class Status(IntEnum):
    """Character statistics that items and rewards can change."""

    HP = 0
    MAXHP = 1
    ATTACK = 2
    GOLD = 3
    EXP = 4
    MP = 5
    STR = 6
    INTELLIGENCE = 7
    SPEED = 8


class ItemID(IntEnum):
    """Identifiers of every item in the game, in catalogue order."""

    HEALTH_POTION = 0
    ATTACK_BOOST = 1
    UNIQUE_POTION = 2
    SWORD = 3
    ARMOR = 4


class ItemType(IntEnum):
    """Broad item categories."""

    CONSUMABLES = 0
    EQUIPMENT = 1


class MonsterType(IntEnum):
    """Kinds of ordinary monster."""

    GOBLIN = 0
    ORC = 1
    SLIME = 2
    TROLL = 3


class Job(IntEnum):
    """Player classes."""

    WARRIOR = 0
    MAGE = 1


class ColorType(IntEnum):
    """Console text attribute values (foreground colours)."""

    BLACK = 0
    DARK_BLUE = 1
    DARK_GREEN = 2
    DARK_SKY_BLUE = 3
    DARK_RED = 4
    DARK_PURPLE = 5
    DARK_YELLOW = 6
    GRAY = 7
    DARK_GRAY = 8
    BLUE = 9
    GREEN = 10
    SKY_BLUE = 11
    RED = 12
    PURPLE = 13
    YELLOW = 14
    WHITE = 15