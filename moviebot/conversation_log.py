"""
conversation_log.py — Optional record of chat turns for analytics.

One `conversations` document per session (message_count, last_activity) and
one `conversation_messages` document per message, tagged with the emotion
detected for the user's text. Nothing here is read back by the composer.
"""
import logging
from datetime import datetime, timezone

from pymongo.errors import PyMongoError

from moviebot.config import MAX_LOGGED_CHARS
from moviebot.db import col_conversations, col_messages
from moviebot.schemas import ComposedReply

logger = logging.getLogger(__name__)


def _now():
    return datetime.now(timezone.utc)


def log_turn(session_id: str, utterance: str, composed: ComposedReply) -> None:
    now = _now()
    try:
        col_conversations().update_one(
            {"session_id": session_id},
            {"$inc": {"message_count": 2},
             "$set": {"last_activity": now},
             "$setOnInsert": {"started_at": now, "created_at": now}},
            upsert=True,
        )
        col_messages().insert_many([
            {
                "session_id":         session_id,
                "message_text":       utterance[:MAX_LOGGED_CHARS],
                "is_bot":             False,
                "detected_emotion":   composed.emotion.value,
                "emotion_confidence": round(composed.confidence, 2),
                "emotion_keywords":   list(composed.matched_keywords),
                "timestamp":          now,
            },
            {
                "session_id":   session_id,
                "message_text": composed.reply[:MAX_LOGGED_CHARS],
                "is_bot":       True,
                "faq_id":       composed.faq_id,
                "match_score":  round(composed.match_score, 4),
                "timestamp":    now,
            },
        ])
    except PyMongoError as e:
        logger.warning(f"[CONVLOG] log error: {e}")


def recent_messages(limit: int = 50) -> list:
    try:
        return list(col_messages().find({}, {"_id": 0}).sort("timestamp", -1).limit(limit))
    except PyMongoError as e:
        logger.warning(f"[CONVLOG] read error: {e}")
        return []
