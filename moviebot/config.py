"""
config.py — All settings, thresholds, and constants.
"""
import os
from dotenv import load_dotenv
load_dotenv()


def _positive_float(name: str, default: str) -> float:
    value = float(os.getenv(name, default))
    if value <= 0:
        raise ValueError(f"{name} must be greater than 0, got {value}")
    return value


# ── MongoDB (optional remote FAQ store + conversation log) ────────────────
MONGODB_URI = os.getenv("MONGO_URI", os.getenv("MONGODB_URI"))
DB_NAME     = os.getenv("MONGODB_DB_NAME", os.getenv("DB_NAME", "moviebot"))
COL_FAQS          = "faqs"
COL_CONVERSATIONS = "conversations"
COL_MESSAGES      = "conversation_messages"

# ── Matcher ────────────────────────────────────────────────────────────────
FUZZY_MATCH_THRESHOLD   = float(os.getenv("FUZZY_MATCH_THRESHOLD", "0.35"))
EXACT_MATCH_SCORE       = 1.0
QUESTION_SIM_WEIGHT     = 0.6
QUESTION_OVERLAP_WEIGHT = 0.4
ANSWER_SIM_WEIGHT       = 0.5
ANSWER_OVERLAP_WEIGHT   = 0.5

# ── Emotion scoring ───────────────────────────────────────────────────────
KEYWORD_WEIGHT      = 2
PHRASE_WEIGHT       = 3
QUESTION_MARK_BONUS = 1
EXCLAMATION_BONUS   = 0.5
EMOTION_CONFIDENCE_DIVISOR = _positive_float("EMOTION_CONFIDENCE_DIVISOR", "10")

# ── Response templates ────────────────────────────────────────────────────
EMPATHY_MIN_CONFIDENCE = 0.3

# ── Service ───────────────────────────────────────────────────────────────
LOG_LEVEL        = os.getenv("LOG_LEVEL", "INFO")
MAX_LOGGED_CHARS = 1000
