# raid_checker/game_logic/experience.py
import bisect
import math

from raid_checker import config
from raid_checker.errors import InvalidInputError


def _build_xp_thresholds(max_level: int) -> list:
    """Index i holds the experience needed to reach level i + 1."""
    thresholds = [0]
    points = 0
    for level in range(1, max_level):
        points += math.floor(level + 300 * 2 ** (level / 7))
        thresholds.append(math.floor(points / 4))
    return thresholds


XP_THRESHOLDS = _build_xp_thresholds(config.MAX_LEVEL)
MAX_EXPERIENCE_THRESHOLD = XP_THRESHOLDS[-1]


def level_for(experience: int) -> int:
    """Returns the level (1..126) reached with the given experience."""
    if isinstance(experience, bool) or not isinstance(experience, int):
        raise InvalidInputError("experience", f"Experience must be a whole number, got {experience!r}.")
    if experience < 0:
        raise InvalidInputError("experience", f"Experience cannot be negative ({experience}).")
    # Number of thresholds <= experience is the level itself.
    return min(bisect.bisect_right(XP_THRESHOLDS, experience), config.MAX_LEVEL)


def experience_for(level: int) -> int:
    """Minimum experience needed to be at `level`."""
    if isinstance(level, bool) or not isinstance(level, int) or not config.MIN_LEVEL <= level <= config.MAX_LEVEL:
        raise InvalidInputError("level", f"Level must be between {config.MIN_LEVEL} and {config.MAX_LEVEL}, got {level!r}.")
    return XP_THRESHOLDS[level - 1]
