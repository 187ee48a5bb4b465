# raid_checker/classes/raid.py
from types import MappingProxyType

from raid_checker import config


def _unique_in_order(names):
    seen = set()
    ordered = []
    for name in names or ():
        if name not in seen:
            seen.add(name)
            ordered.append(name)
    return tuple(ordered)


class RaidRequirement:
    """Static requirements for one raid or boss.

    None for min_combat / min_prayer means "no requirement", which is not the
    same thing as a threshold of 0. Skill, quest and gear requirements keep
    the order they were declared in so unmet reasons come out in that order.
    """

    def __init__(self, name, min_combat=None, min_prayer=None, min_skill_levels=None,
                 required_quests=None, required_gear_items=None, description=""):
        if not name:
            raise ValueError("RaidRequirement needs a name.")
        unknown_skills = [skill for skill in (min_skill_levels or {}) if skill not in config.HISCORE_SKILL_ORDER]
        if unknown_skills:
            raise ValueError(f"Raid '{name}' references unknown skill '{unknown_skills[0]}'.")
        self.name = name
        self.description = description
        self.min_combat = min_combat
        self.min_prayer = min_prayer
        self.min_skill_levels = MappingProxyType(dict(min_skill_levels or {}))
        self.required_quests = _unique_in_order(required_quests)
        self.required_gear_items = _unique_in_order(required_gear_items)

    def to_dict(self):
        return {
            "name": self.name,
            "description": self.description,
            "min_combat": self.min_combat,
            "min_prayer": self.min_prayer,
            # Stored as a list of pairs so declared order survives a database round trip.
            "min_skill_levels": [[skill, level] for skill, level in self.min_skill_levels.items()],
            "required_quests": list(self.required_quests),
            "required_gear_items": list(self.required_gear_items),
        }

    @classmethod
    def from_dict(cls, data):
        skill_levels = data.get("min_skill_levels") or {}
        if isinstance(skill_levels, dict):
            skill_levels = list(skill_levels.items())
        return cls(
            data["name"],
            min_combat=data.get("min_combat"),
            min_prayer=data.get("min_prayer"),
            min_skill_levels={skill: level for skill, level in skill_levels},
            required_quests=data.get("required_quests"),
            required_gear_items=data.get("required_gear_items"),
            description=data.get("description", ""),
        )

    def __repr__(self):
        return f"RaidRequirement(name={self.name!r}, min_combat={self.min_combat!r}, min_prayer={self.min_prayer!r})"
