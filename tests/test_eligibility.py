from conftest import DEFAULT_LEVELS

from raid_checker.classes.player import build_profile
from raid_checker.classes.raid import RaidRequirement
from raid_checker.database.data_loader import default_raid_catalog
from raid_checker.game_logic import eligibility
from raid_checker.game_logic.eligibility import UnmetRequirement, evaluate, evaluate_raid, format_reason

CHAMBERS = RaidRequirement(
    "Chambers of Xeric",
    min_combat=70,
    min_prayer=43,
    min_skill_levels={"attack": 70, "strength": 70, "defence": 70, "hitpoints": 70},
    required_quests=["Priest in Peril"],
)


def test_chambers_unlocked_for_qualified_profile() -> None:
    profile = build_profile(DEFAULT_LEVELS, quests=["Priest in Peril"], combat_level=75)
    result = evaluate_raid(profile, CHAMBERS)
    assert result.unlocked is True
    assert result.unmet_reasons == ()


def test_chambers_locked_reports_prayer_then_quest() -> None:
    profile = build_profile(dict(DEFAULT_LEVELS, prayer=40), quests=[], combat_level=75)
    result = evaluate_raid(profile, CHAMBERS)
    assert result.unlocked is False
    assert list(result.unmet_reasons) == [
        "Prayer level 43 required (current: 40)",
        "Quest required: Priest in Peril",
    ]


def test_default_catalog_matches_chambers_scenario() -> None:
    profile = build_profile(DEFAULT_LEVELS, quests=["Priest in Peril"], combat_level=75)
    results = evaluate(profile, default_raid_catalog())
    assert results[0][0].name == "Chambers of Xeric"
    assert results[0][1].unlocked is True


def test_all_shortfalls_reported_in_category_order() -> None:
    raid = RaidRequirement(
        "Everything",
        min_combat=100,
        min_prayer=70,
        min_skill_levels={"strength": 90, "attack": 90},
        required_quests=["Song of the Elves", "Dragon Slayer II"],
        required_gear_items=["Fire cape", "Barrows gloves"],
    )
    profile = build_profile(DEFAULT_LEVELS, combat_level=75)
    result = evaluate_raid(profile, raid)
    assert [item.category for item in result.unmet] == [
        "combat", "prayer", "skill", "skill", "quest", "quest", "gear", "gear",
    ]
    assert [item.subject for item in result.unmet if item.category == "skill"] == ["strength", "attack"]
    assert result.unmet[0] == UnmetRequirement("combat", "combat", 100, 75)
    assert result.unmet_reasons[2] == "Strength level 90 required (current: 75)"
    assert result.unmet_reasons[-2:] == ("Item required: Fire cape", "Item required: Barrows gloves")


def test_unset_fields_are_satisfied_but_zero_is_a_real_threshold() -> None:
    profile = build_profile(dict(DEFAULT_LEVELS, prayer=1), combat_level=3)
    assert evaluate_raid(profile, RaidRequirement("Open")).unlocked is True
    assert evaluate_raid(profile, RaidRequirement("Zero", min_combat=0, min_prayer=0)).unlocked is True
    assert evaluate_raid(profile, RaidRequirement("One", min_prayer=1)).unlocked is True
    assert evaluate_raid(profile, RaidRequirement("Two", min_prayer=2)).unlocked is False


def test_gear_matches_any_slot() -> None:
    raid = RaidRequirement("Defender check", required_gear_items=["Dragon defender"])
    in_shield = build_profile(DEFAULT_LEVELS, gear={"shield": "Dragon defender"})
    in_weapon = build_profile(DEFAULT_LEVELS, gear={"weapon": "Dragon defender"})
    missing = build_profile(DEFAULT_LEVELS, gear={"shield": "Book of the dead"})
    assert evaluate_raid(in_shield, raid).unlocked is True
    assert evaluate_raid(in_weapon, raid).unlocked is True
    assert evaluate_raid(missing, raid).unmet_reasons == ("Item required: Dragon defender",)


def test_without_quest_or_gear_only_levels_matter() -> None:
    raid = RaidRequirement("Levels only", min_combat=70, min_prayer=43, min_skill_levels={"defence": 70})
    profile = build_profile(DEFAULT_LEVELS, combat_level=75, quests=[], gear={})
    assert evaluate_raid(profile, raid).unlocked is True
    weaker = build_profile(dict(DEFAULT_LEVELS, defence=60), combat_level=75, quests=["Priest in Peril"], gear={"cape": "Fire cape"})
    assert evaluate_raid(weaker, raid).unlocked is False


def test_untracked_skill_requirement_counts_as_level_one() -> None:
    raid = RaidRequirement("Agility gate", min_skill_levels={"agility": 50})
    result = evaluate_raid(build_profile(DEFAULT_LEVELS), raid)
    assert result.unmet == (UnmetRequirement("skill", "agility", 50, 1),)


def test_evaluate_is_deterministic_and_in_catalog_order() -> None:
    catalog = default_raid_catalog()
    profile = build_profile(dict(DEFAULT_LEVELS, prayer=40), combat_level=85, quests=["Beneath Cursed Sands"])
    first = evaluate(profile, catalog)
    second = evaluate(profile, catalog)
    assert [raid.name for raid, _ in first] == [raid.name for raid in catalog]
    assert [result.unmet for _, result in first] == [result.unmet for _, result in second]
    assert [result.unmet_reasons for _, result in first] == [result.unmet_reasons for _, result in second]


def test_reasons_empty_iff_unlocked() -> None:
    profiles = [
        build_profile(DEFAULT_LEVELS, combat_level=75),
        build_profile({skill: 99 for skill in DEFAULT_LEVELS}, quests=["Priest in Peril", "Beneath Cursed Sands"],
                      gear={"shield": "Dragon defender"}),
        build_profile({skill: 1 for skill in DEFAULT_LEVELS}),
    ]
    for profile in profiles:
        for _, result in evaluate(profile, default_raid_catalog()):
            assert (result.unmet_reasons == ()) == result.unlocked
            assert len(result.unmet_reasons) == len(result.unmet)


def test_maxed_profile_unlocks_whole_catalog() -> None:
    profile = build_profile({skill: 99 for skill in DEFAULT_LEVELS}, quests=["Priest in Peril", "Beneath Cursed Sands"],
                            gear={"shield": "Dragon defender"})
    results = evaluate(profile, default_raid_catalog())
    assert eligibility.unlocked_raid_names(results) == ["Chambers of Xeric", "Theatre of Blood", "Tombs of Amascut"]


def test_custom_formatter_replaces_text_only() -> None:
    profile = build_profile(dict(DEFAULT_LEVELS, prayer=40), combat_level=75)
    result = evaluate_raid(profile, CHAMBERS, formatter=lambda unmet: f"{unmet.category}:{unmet.required}")
    assert result.unmet_reasons == ("prayer:43", "quest:Priest in Peril")
    assert result.unmet[0] == UnmetRequirement("prayer", "prayer", 43, 40)


def test_result_serializes_structured_and_text_reasons() -> None:
    profile = build_profile(dict(DEFAULT_LEVELS, prayer=40), combat_level=75, quests=["Priest in Peril"])
    data = evaluate_raid(profile, CHAMBERS).to_dict()
    assert data == {
        "unlocked": False,
        "unmet_reasons": ["Prayer level 43 required (current: 40)"],
        "unmet": [{"category": "prayer", "subject": "prayer", "required": 43, "current": 40}],
    }


def test_format_reason_for_combat() -> None:
    assert format_reason(UnmetRequirement("combat", "combat", 90, 85)) == "Combat level 90 required (current: 85)"
