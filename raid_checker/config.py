# --- FILE DIRECTORY ---
# raid_checker/
#├── main.py                   # Flask + SocketIO app: hiscore pass-through, raid checks
#├── config.py                 # Constants, database and hiscore configuration
#├── errors.py                 # Typed failures raised by the core
#|
#├── game_data/                # Static data loaded once at start
#│   ├── raid_catalog.py       # Raid requirement templates
#│   ├── quests.py             # Quest names offered in the UI
#│   └── equipment.py          # Item names offered per equipment slot
#|
#├── game_logic/               # Rules and lookups
#│   ├── experience.py         # Experience -> level curve
#│   ├── combat.py             # Combat level formula
#│   ├── hiscores.py           # index_lite payload parser
#│   ├── eligibility.py        # Raid requirement evaluation + reason text
#│   ├── cache.py              # Time-bounded hiscore cache
#│   └── lookup.py             # Upstream fetch strategies + cached lookup
#|
#├── database/                 # Database interaction logic
#│   ├── connection.py         # MongoDB connection setup (connect_to_mongo, get_db)
#│   ├── data_loader.py        # Seeding and loading the raid catalog
#│   └── profile_handler.py    # Saving/loading player profiles
#|
#├── classes/
#│   ├── player.py             # SkillRecord, PlayerProfile, profile builders
#│   └── raid.py               # RaidRequirement
#|
#└── templates/                # Flask HTML templates
#    └── index.html

# raid_checker/config.py
import os

# --- General Configuration ---
APP_NAME = "OSRS Raid Checker"

# --- Server Configuration ---
HOST = '0.0.0.0'
PORT = int(os.environ.get('PORT', 3000))
SECRET_KEY = os.environ.get('SECRET_KEY', 'change-me-raid-checker')  # IMPORTANT: Change this for production
SOCKETIO_ASYNC_MODE = 'threading'

# --- DATABASE CONFIGURATION ---
MONGODB_URI = os.environ.get('MONGODB_URI', "mongodb://localhost:27017/")
DATABASE_NAME = "raid_checker"
MONGO_SERVER_SELECTION_TIMEOUT_MS = 5000
PROFILES_COLLECTION = "profiles"
RAIDS_COLLECTION = "raids"

# --- DEBUGGING GRANULARITY ---
DEBUG_MODE = True
DEBUG_MODE_FLASK = False
FLASK_USE_RELOADER = False
DEBUG_CACHE_VERBOSE = False

# --- HISCORES ---
HISCORE_URL = "https://secure.runescape.com/m=hiscore_oldschool/index_lite.ws"
# Public CORS proxy used when the direct call fails. {url} is the fully built hiscore URL.
HISCORE_PROXY_URL = "https://api.allorigins.win/raw?url={url}"
HISCORE_FETCH_STRATEGIES = ["direct", "proxy"]
HISCORE_REQUEST_TIMEOUT_SECONDS = 10
HISCORE_CACHE_TTL_MS = 300000  # 5 minutes
HISCORE_UNRANKED = -1
MAX_PLAYER_NAME_LENGTH = 12

# Positional order of the skill lines in an index_lite payload.
HISCORE_SKILL_ORDER = [
    "overall", "attack", "defence", "strength", "hitpoints", "ranged", "prayer",
    "magic", "cooking", "woodcutting", "fletching", "fishing", "firemaking",
    "crafting", "smithing", "mining", "herblore", "agility", "thieving",
    "slayer", "farming", "runecrafting", "hunter", "construction",
]

# --- SKILLS & LEVELS ---
COMBAT_SKILLS = ["attack", "strength", "defence", "hitpoints", "ranged", "prayer", "magic"]
# Lines up to and including magic must be present for a usable profile.
HISCORE_MIN_SKILL_LINES = HISCORE_SKILL_ORDER.index("magic") + 1
MIN_LEVEL = 1
MAX_LEVEL = 126

# --- EQUIPMENT SLOTS ---
EQUIPMENT_SLOTS = {
    "head": "Head",
    "cape": "Cape",
    "neck": "Neck",
    "ammo": "Ammunition",
    "weapon": "Weapon",
    "body": "Body",
    "shield": "Shield",
    "legs": "Legs",
    "hands": "Hands",
    "feet": "Feet",
    "ring": "Ring",
}

# --- USER-FACING MESSAGES ---
MSG_UPSTREAM_UNAVAILABLE = "Could not reach the hiscores. Try again later."
MSG_UNEXPECTED_FORMAT = "Could not read stats: unexpected data format."
MSG_MISSING_PLAYER = "Missing player parameter"
MSG_FETCH_FAILED = "Error fetching hiscore data"
