# raid_checker/game_logic/combat.py
import math

from raid_checker import config
from raid_checker.errors import InvalidInputError

# Combat formula weights
DEFENSIVE_WEIGHT = 0.25
OFFENSIVE_WEIGHT = 0.325
RANGED_MAGIC_MULTIPLIER = 1.5


def get_defensive_base(defence: int, hitpoints: int, prayer: int) -> float:
    """Defence, hitpoints and half of prayer, weighted."""
    return DEFENSIVE_WEIGHT * (defence + hitpoints + math.floor(prayer / 2))


def get_melee_contribution(attack: int, strength: int) -> float:
    return OFFENSIVE_WEIGHT * (attack + strength)


def get_ranged_contribution(ranged: int) -> float:
    return OFFENSIVE_WEIGHT * math.floor(RANGED_MAGIC_MULTIPLIER * ranged)


def get_magic_contribution(magic: int) -> float:
    return OFFENSIVE_WEIGHT * math.floor(RANGED_MAGIC_MULTIPLIER * magic)


def calculate_combat_level(levels: dict) -> int:
    """Combines the seven combat skill levels into one combat level.

    Only the final sum is floored; the intermediate terms keep their
    fractions except where a floor is part of the formula itself.
    """
    missing = [skill for skill in config.COMBAT_SKILLS if skill not in levels]
    if missing:
        raise InvalidInputError(missing[0], f"Missing level for '{missing[0]}'.")

    base = get_defensive_base(levels["defence"], levels["hitpoints"], levels["prayer"])
    melee = get_melee_contribution(levels["attack"], levels["strength"])
    ranged = get_ranged_contribution(levels["ranged"])
    magic = get_magic_contribution(levels["magic"])
    return math.floor(base + max(melee, ranged, magic))
