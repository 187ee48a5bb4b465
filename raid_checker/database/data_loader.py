# raid_checker/database/data_loader.py
import copy

from pymongo.errors import PyMongoError

from raid_checker import config
from raid_checker.classes.raid import RaidRequirement
from raid_checker.database import connection
from raid_checker.game_data import equipment as default_equipment_data
from raid_checker.game_data import quests as default_quest_data
from raid_checker.game_data import raid_catalog as default_raid_data


def default_raid_catalog():
    """The built-in catalog, used directly when no database is reachable."""
    return [RaidRequirement.from_dict(template) for template in default_raid_data.DEFAULT_RAID_TEMPLATES]


def initialize_raid_collection(db):
    """Seeds the raids collection from game_data when it is empty."""
    if db is None:
        print("DATA_LOADER: DB not available, cannot initialize raids.")
        return 0

    collection = db[config.RAIDS_COLLECTION]
    if collection.count_documents({}) > 0:
        if config.DEBUG_MODE: print(f"DATA_LOADER: Collection '{config.RAIDS_COLLECTION}' already has data. Skipping initialization.")
        return 0

    list_to_insert = []
    for position, template in enumerate(default_raid_data.DEFAULT_RAID_TEMPLATES):
        doc = copy.deepcopy(template)
        doc["position"] = position
        doc["catalog_version"] = default_raid_data.CATALOG_VERSION
        list_to_insert.append(doc)

    collection.insert_many(list_to_insert)
    print(f"DATA_LOADER: Collection '{config.RAIDS_COLLECTION}' initialized with {len(list_to_insert)} raids.")
    return len(list_to_insert)


def load_raid_catalog(db=None):
    """Loads the catalog once at start: database copy if reachable, built-in defaults otherwise."""
    if db is None:
        db = connection.get_db()
    if db is None:
        print("DATA_LOADER: Database not available. Using built-in raid catalog.")
        return default_raid_catalog()

    try:
        initialize_raid_collection(db)
        docs = list(db[config.RAIDS_COLLECTION].find().sort("position", 1))
    except PyMongoError as e:
        print(f"DATA_LOADER: Error loading '{config.RAIDS_COLLECTION}': {e}. Using built-in raid catalog.")
        return default_raid_catalog()

    catalog = []
    for doc in docs:
        try:
            catalog.append(RaidRequirement.from_dict(doc))
        except (KeyError, ValueError) as e:
            print(f"DATA_LOADER: Skipping invalid raid document {doc.get('_id')!r}: {e}")
    if not catalog:
        print("DATA_LOADER: Raids collection produced no usable entries. Using built-in raid catalog.")
        return default_raid_catalog()
    if config.DEBUG_MODE: print(f"DATA_LOADER: Loaded {len(catalog)} raids from '{config.RAIDS_COLLECTION}'.")
    return catalog


def load_ui_options():
    """Static lists used to fill the quest and gear pickers."""
    return {
        "quests": list(default_quest_data.QUEST_LIST),
        "equipment_slots": dict(config.EQUIPMENT_SLOTS),
        "equipment": {slot: list(items) for slot, items in default_equipment_data.DEFAULT_EQUIPMENT_OPTIONS.items()},
        "skills": list(config.COMBAT_SKILLS),
    }
