# raid_checker/game_data/quests.py

# Quests offered in the quest picker. Raid templates may name others; these are only suggestions.
QUEST_LIST = [
    "Beneath Cursed Sands",
    "Desert Treasure I",
    "Dragon Slayer I",
    "Dragon Slayer II",
    "Lunar Diplomacy",
    "Monkey Madness I",
    "Priest in Peril",
    "Recipe for Disaster",
    "Sins of the Father",
    "Song of the Elves",
    "A Taste of Hope",
    "The Fremennik Trials",
]
