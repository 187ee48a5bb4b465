# raid_checker/game_logic/eligibility.py
"""Decides which raids a profile has unlocked.

Every requirement category is checked for every raid, so a locked raid
reports all of its shortfalls at once. Shortfalls are produced as
UnmetRequirement records; turning them into text is format_reason's job.
"""
from collections import namedtuple

from raid_checker import config

CATEGORY_COMBAT = "combat"
CATEGORY_PRAYER = "prayer"
CATEGORY_SKILL = "skill"
CATEGORY_QUEST = "quest"
CATEGORY_GEAR = "gear"

# required/current are levels for combat, prayer and skill; for quest and gear
# required is the missing name and current is None.
UnmetRequirement = namedtuple("UnmetRequirement", ["category", "subject", "required", "current"])


class EligibilityResult:
    def __init__(self, unmet, formatter=None):
        self.unmet = tuple(unmet)
        render = formatter or format_reason
        self.unmet_reasons = tuple(render(item) for item in self.unmet)

    @property
    def unlocked(self):
        return not self.unmet

    def to_dict(self):
        return {
            "unlocked": self.unlocked,
            "unmet_reasons": list(self.unmet_reasons),
            "unmet": [item._asdict() for item in self.unmet],
        }

    def __repr__(self):
        return f"EligibilityResult(unlocked={self.unlocked!r}, unmet_reasons={list(self.unmet_reasons)!r})"


def format_reason(unmet: UnmetRequirement) -> str:
    """Default English rendering of one shortfall."""
    if unmet.category == CATEGORY_COMBAT:
        return f"Combat level {unmet.required} required (current: {unmet.current})"
    if unmet.category == CATEGORY_PRAYER:
        return f"Prayer level {unmet.required} required (current: {unmet.current})"
    if unmet.category == CATEGORY_SKILL:
        return f"{unmet.subject.capitalize()} level {unmet.required} required (current: {unmet.current})"
    if unmet.category == CATEGORY_QUEST:
        return f"Quest required: {unmet.required}"
    if unmet.category == CATEGORY_GEAR:
        return f"Item required: {unmet.required}"
    return f"Requirement not met: {unmet.subject}"


def _profile_skill_level(profile, skill_name):
    if skill_name in config.COMBAT_SKILLS:
        return profile.level(skill_name)
    # Only the seven combat skills are tracked; anything else counts as level 1.
    return config.MIN_LEVEL


def find_unmet_requirements(profile, requirement) -> list:
    unmet = []

    if requirement.min_combat is not None and profile.combat_level < requirement.min_combat:
        unmet.append(UnmetRequirement(CATEGORY_COMBAT, "combat", requirement.min_combat, profile.combat_level))

    if requirement.min_prayer is not None and profile.prayer < requirement.min_prayer:
        unmet.append(UnmetRequirement(CATEGORY_PRAYER, "prayer", requirement.min_prayer, profile.prayer))

    for skill_name, min_level in requirement.min_skill_levels.items():
        current = _profile_skill_level(profile, skill_name)
        if current < min_level:
            unmet.append(UnmetRequirement(CATEGORY_SKILL, skill_name, min_level, current))

    for quest in requirement.required_quests:
        if quest not in profile.quests:
            unmet.append(UnmetRequirement(CATEGORY_QUEST, "quest", quest, None))

    worn_items = profile.equipped_items()
    for item in requirement.required_gear_items:
        if item not in worn_items:
            unmet.append(UnmetRequirement(CATEGORY_GEAR, "gear", item, None))

    return unmet


def evaluate_raid(profile, requirement, formatter=None) -> EligibilityResult:
    return EligibilityResult(find_unmet_requirements(profile, requirement), formatter)


def evaluate(profile, catalog, formatter=None) -> list:
    """Returns [(requirement, EligibilityResult), ...] in catalog order."""
    return [(requirement, evaluate_raid(profile, requirement, formatter)) for requirement in catalog]


def unlocked_raid_names(results) -> list:
    return [requirement.name for requirement, result in results if result.unlocked]
