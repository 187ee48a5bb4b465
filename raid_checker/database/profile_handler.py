# raid_checker/database/profile_handler.py
import datetime
import traceback

import pytz
from pymongo.errors import PyMongoError

from raid_checker import config
from raid_checker.classes.player import PlayerProfile
from raid_checker.database import connection as db_connection
from raid_checker.errors import InvalidInputError
from raid_checker.game_logic.cache import normalize_key


def save_profile(player_name: str, profile: PlayerProfile, db=None) -> bool:
    """Saves one profile per player name (case-insensitive)."""
    if not player_name or not player_name.strip():
        if config.DEBUG_MODE: print("DEBUG HANDLER ERROR: Empty player name for saving.")
        return False

    if db is None:
        db = db_connection.get_db()
    if db is None:
        if config.DEBUG_MODE: print(f"DEBUG HANDLER ERROR: Database connection not available. Cannot save profile '{player_name}'.")
        return False

    profile_data = profile.to_dict()
    profile_data["name"] = player_name.strip()
    profile_data["name_lower"] = normalize_key(player_name.strip())
    profile_data["saved_at"] = datetime.datetime.now(pytz.utc)

    try:
        result = db[config.PROFILES_COLLECTION].update_one(
            {"name_lower": profile_data["name_lower"]},
            {"$set": profile_data},
            upsert=True
        )
    except PyMongoError as e:
        print(f"ERROR HANDLER: Exception during save_profile for '{player_name}': {e}")
        traceback.print_exc()
        return False

    if config.DEBUG_MODE:
        if result.upserted_id is not None:
            print(f"DEBUG HANDLER: New profile '{player_name}' saved with _id {result.upserted_id}.")
        else:
            print(f"DEBUG HANDLER: Profile '{player_name}' updated. Matched: {result.matched_count}, Modified: {result.modified_count}")
    return True


def load_profile(player_name: str, db=None):
    """Returns the stored PlayerProfile, or None if absent or unreadable."""
    if not player_name or not player_name.strip():
        return None

    if db is None:
        db = db_connection.get_db()
    if db is None:
        if config.DEBUG_MODE: print(f"DEBUG HANDLER: DB not available for loading profile {player_name}.")
        return None

    name_lower = normalize_key(player_name.strip())
    try:
        profile_doc = db[config.PROFILES_COLLECTION].find_one({"name_lower": name_lower})
    except PyMongoError as e:
        print(f"ERROR HANDLER: Exception during load_profile for '{name_lower}': {e}")
        return None

    if not profile_doc:
        if config.DEBUG_MODE: print(f"DEBUG HANDLER: Profile '{name_lower}' not found in database.")
        return None

    try:
        profile = PlayerProfile.from_dict(profile_doc)
    except (InvalidInputError, KeyError, TypeError) as e:
        print(f"ERROR HANDLER: Stored profile '{name_lower}' is unreadable: {e}")
        return None
    if config.DEBUG_MODE: print(f"DEBUG HANDLER: Profile '{profile.name}' loaded successfully.")
    return profile
