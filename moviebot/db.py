"""
db.py — MongoDB connection singleton + collection helpers.
"""
from pymongo import MongoClient, ASCENDING, DESCENDING
from pymongo.collection import Collection
from pymongo.database import Database
from moviebot.config import MONGODB_URI, DB_NAME, COL_FAQS, COL_CONVERSATIONS, COL_MESSAGES

_client = None
_db     = None

def is_configured() -> bool:
    return bool(MONGODB_URI)

def get_db() -> Database:
    global _client, _db
    if _db is None:
        _client = MongoClient(MONGODB_URI, serverSelectionTimeoutMS=10_000)
        _db = _client[DB_NAME]
        _ensure_indexes(_db)
    return _db

def _ensure_indexes(db):
    db[COL_FAQS].create_index([("created_at", ASCENDING)], background=True)
    db[COL_FAQS].create_index([("category", ASCENDING)], background=True)
    db[COL_CONVERSATIONS].create_index([("session_id", ASCENDING)], unique=True, background=True)
    db[COL_CONVERSATIONS].create_index([("last_activity", DESCENDING)], background=True)
    db[COL_MESSAGES].create_index([("session_id", ASCENDING)], background=True)
    db[COL_MESSAGES].create_index([("detected_emotion", ASCENDING)], background=True)

def col_faqs()          -> Collection: return get_db()[COL_FAQS]
def col_conversations() -> Collection: return get_db()[COL_CONVERSATIONS]
def col_messages()      -> Collection: return get_db()[COL_MESSAGES]
