# raid_checker/game_data/equipment.py
"""
Item names offered per equipment slot in the gear picker.
Keys must match config.EQUIPMENT_SLOTS.
"""

DEFAULT_EQUIPMENT_OPTIONS = {
    "head": ["Helm of neitiznot", "Serpentine helm", "Void melee helm"],
    "cape": ["Fire cape", "Infernal cape", "Ava's accumulator"],
    "neck": ["Amulet of fury", "Amulet of glory", "Salve amulet(ei)"],
    "ammo": ["Rada's blessing 4", "Dragon arrow", "Amethyst arrow"],
    "weapon": ["Abyssal whip", "Toxic blowpipe", "Trident of the swamp", "Dragon hunter lance"],
    "body": ["Fighter torso", "Bandos chestplate", "Ahrim's robetop"],
    "shield": ["Dragon defender", "Avernic defender", "Book of the dead"],
    "legs": ["Bandos tassets", "Obsidian platelegs", "Ahrim's robeskirt"],
    "hands": ["Barrows gloves", "Regen bracelet"],
    "feet": ["Dragon boots", "Primordial boots"],
    "ring": ["Berserker ring (i)", "Ring of suffering (i)", "Archers ring (i)"],
}
