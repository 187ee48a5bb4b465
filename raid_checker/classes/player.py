# raid_checker/classes/player.py
from types import MappingProxyType

from raid_checker import config
from raid_checker.errors import InvalidInputError
from raid_checker.game_logic import combat
from raid_checker.game_logic import experience as experience_curve


class SkillRecord:
    """One hiscore line for a skill. rank is None when the account is unranked."""

    __slots__ = ("rank", "level", "experience")

    def __init__(self, rank, level, experience):
        self.rank = rank
        self.level = level
        self.experience = experience

    @property
    def virtual_level(self):
        return experience_curve.level_for(self.experience)

    def to_dict(self):
        return {"rank": self.rank, "level": self.level, "experience": self.experience}

    @classmethod
    def from_dict(cls, data):
        return cls(data.get("rank"), data["level"], data["experience"])

    def __eq__(self, other):
        if not isinstance(other, SkillRecord):
            return NotImplemented
        return (self.rank, self.level, self.experience) == (other.rank, other.level, other.experience)

    def __repr__(self):
        return f"SkillRecord(rank={self.rank!r}, level={self.level!r}, experience={self.experience!r})"


class PlayerProfile:
    """Read-only snapshot of the seven combat skills, quests and worn gear.

    Build with build_profile() or profile_from_hiscores(); a new snapshot is
    made for every evaluation instead of editing an old one.
    """

    def __init__(self, skills, combat_level, quests=(), gear=None, name=None):
        self.name = name
        self._skills = MappingProxyType({skill: skills[skill] for skill in config.COMBAT_SKILLS})
        self.combat_level = combat_level
        self.quests = frozenset(quests)
        self.gear = MappingProxyType(dict(gear or {}))

    @property
    def skills(self):
        return self._skills

    @property
    def levels(self):
        return {skill: record.level for skill, record in self._skills.items()}

    @property
    def prayer(self):
        return self._skills["prayer"].level

    def level(self, skill_name):
        record = self._skills.get(skill_name)
        if record is None:
            raise KeyError(f"'{skill_name}' is not a tracked combat skill.")
        return record.level

    def equipped_items(self):
        """Item names worn anywhere in the loadout, slot ignored."""
        return {item for item in self.gear.values() if item}

    def to_dict(self):
        return {
            "name": self.name,
            "skills": {skill: record.to_dict() for skill, record in self._skills.items()},
            "combat_level": self.combat_level,
            "quests": sorted(self.quests),
            "gear": dict(self.gear),
        }

    @classmethod
    def from_dict(cls, data):
        skills_data = data.get("skills") or {}
        missing = [skill for skill in config.COMBAT_SKILLS if skill not in skills_data]
        if missing:
            raise InvalidInputError(missing[0], f"Stored profile has no '{missing[0]}' record.")
        skills = {skill: SkillRecord.from_dict(skills_data[skill]) for skill in config.COMBAT_SKILLS}
        return cls(skills, data["combat_level"], data.get("quests", []), data.get("gear", {}), name=data.get("name"))

    def __repr__(self):
        return f"PlayerProfile(name={self.name!r}, combat_level={self.combat_level!r}, levels={self.levels!r})"


def validate_level(skill_name, value):
    if isinstance(value, bool):
        raise InvalidInputError(skill_name, f"Level for '{skill_name}' must be a number.")
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise InvalidInputError(skill_name, f"Level for '{skill_name}' must be a number, got '{value.strip()}'.") from None
    if not isinstance(value, int):
        raise InvalidInputError(skill_name, f"Level for '{skill_name}' must be a number.")
    if not config.MIN_LEVEL <= value <= config.MAX_LEVEL:
        raise InvalidInputError(skill_name, f"Level for '{skill_name}' must be between {config.MIN_LEVEL} and {config.MAX_LEVEL}, got {value}.")
    return value


def _clean_quests(quests):
    if quests is None:
        return []
    if isinstance(quests, str):
        raise InvalidInputError("quests", "Quests must be a list of quest names.")
    cleaned = []
    for quest in quests:
        if not isinstance(quest, str):
            raise InvalidInputError("quests", f"Quest names must be text, got {quest!r}.")
        if quest.strip():
            cleaned.append(quest.strip())
    return cleaned


def _clean_gear(gear):
    if gear is None:
        return {}
    if not isinstance(gear, dict):
        raise InvalidInputError("gear", "Gear must map equipment slots to item names.")
    cleaned = {}
    for slot, item in gear.items():
        if slot not in config.EQUIPMENT_SLOTS:
            raise InvalidInputError("gear", f"Unknown equipment slot '{slot}'.")
        if item is None:
            continue
        if not isinstance(item, str):
            raise InvalidInputError("gear", f"Item in slot '{slot}' must be text, got {item!r}.")
        if item.strip():
            cleaned[slot] = item.strip()
    return cleaned


def build_profile(levels, quests=None, gear=None, combat_level=None, name=None):
    """Builds a profile from manually entered values.

    combat_level is derived from the seven levels unless the caller supplies
    it (the manual form lets a player type their in-game combat level).
    """
    if not isinstance(levels, dict):
        raise InvalidInputError("levels", "Levels must map skill names to levels.")
    skills = {}
    for skill in config.COMBAT_SKILLS:
        if levels.get(skill) in (None, ""):
            raise InvalidInputError(skill, f"Missing level for '{skill}'.")
        level = validate_level(skill, levels[skill])
        skills[skill] = SkillRecord(None, level, experience_curve.experience_for(level))

    if combat_level in (None, ""):
        combat_level = combat.calculate_combat_level({skill: record.level for skill, record in skills.items()})
    else:
        combat_level = validate_level("combat_level", combat_level)

    return PlayerProfile(skills, combat_level, _clean_quests(quests), _clean_gear(gear), name=name)


def profile_from_hiscores(records, quests=None, gear=None, name=None):
    """Builds a profile from parsed hiscore records; combat level is always derived."""
    missing = [skill for skill in config.COMBAT_SKILLS if skill not in records]
    if missing:
        raise InvalidInputError(missing[0], f"Hiscore data has no '{missing[0]}' record.")
    skills = {skill: records[skill] for skill in config.COMBAT_SKILLS}
    combat_level = combat.calculate_combat_level({skill: record.level for skill, record in skills.items()})
    return PlayerProfile(skills, combat_level, _clean_quests(quests), _clean_gear(gear), name=name)
