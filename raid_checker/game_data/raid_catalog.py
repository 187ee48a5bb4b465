# raid_checker/game_data/raid_catalog.py
"""
Default raid requirement templates.
Seeded into the raids collection on first start; list order is the order
raids are shown and evaluated in.
Skill names must match config.HISCORE_SKILL_ORDER, equipment names should
match game_data/equipment.py.
"""

CATALOG_VERSION = 1

DEFAULT_RAID_TEMPLATES = [
    {
        "_id": "chambers_of_xeric",
        "name": "Chambers of Xeric",
        "description": "Great Kourend raid. Prayer for protection prayers is the main gate.",
        "min_combat": 70,
        "min_prayer": 43,
        "min_skill_levels": [
            ["attack", 70],
            ["strength", 70],
            ["defence", 70],
            ["hitpoints", 70],
        ],
        "required_quests": ["Priest in Peril"],
        "required_gear_items": [],
    },
    {
        "_id": "theatre_of_blood",
        "name": "Theatre of Blood",
        "description": "Ver Sinhaza raid in Morytania.",
        "min_combat": 90,
        "min_prayer": 43,
        "min_skill_levels": [
            ["attack", 80],
            ["strength", 85],
            ["defence", 80],
            ["hitpoints", 85],
            ["ranged", 80],
            ["magic", 80],
        ],
        "required_quests": ["Priest in Peril"],
        "required_gear_items": ["Dragon defender"],
    },
    {
        "_id": "tombs_of_amascut",
        "name": "Tombs of Amascut",
        "description": "Kharidian Desert raid with scalable invocations.",
        "min_combat": 80,
        "min_prayer": 43,
        "min_skill_levels": [
            ["hitpoints", 75],
            ["ranged", 75],
            ["magic", 75],
        ],
        "required_quests": ["Beneath Cursed Sands"],
        "required_gear_items": [],
    },
]
