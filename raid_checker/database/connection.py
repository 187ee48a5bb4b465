# raid_checker/database/connection.py
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from raid_checker import config

client = None
db = None


def connect_to_mongo():
    global client, db
    if db is not None:
        if config.DEBUG_MODE: print("MongoDB connection already established.")
        return db

    mongo_uri = config.MONGODB_URI
    database_name = config.DATABASE_NAME

    try:
        if config.DEBUG_MODE: print(f"Attempting to connect to MongoDB at {mongo_uri}...")
        client = MongoClient(mongo_uri, serverSelectionTimeoutMS=config.MONGO_SERVER_SELECTION_TIMEOUT_MS)
        client.admin.command('ping')  # Verify connection
        db = client[database_name]
        if config.DEBUG_MODE: print(f"Successfully connected to MongoDB. Database: '{database_name}'")
        return db
    except PyMongoError as e:
        # Profiles just won't persist; raid checks and lookups still work without a database.
        print(f"ERROR: Could not connect to MongoDB at {mongo_uri}. Check if MongoDB is running. Error: {e}")
        if client is not None:
            client.close()
        client = None
        db = None
        return None


def get_db():
    if db is None and config.DEBUG_MODE:
        print("WARNING (get_db): Database connection is None. Operations requiring DB will be skipped.")
    return db


def close_mongo_connection():
    global client, db
    if client:
        client.close()
        if config.DEBUG_MODE: print("MongoDB connection closed.")
    client = None
    db = None
