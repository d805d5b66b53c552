"""
schemas.py — Pydantic models: FAQ records, analyzer results, HTTP payloads.
"""
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Emotion(str, Enum):
    # Declaration order is the tie-break order for emotion scoring.
    HAPPY      = "happy"
    SAD        = "sad"
    ANGRY      = "angry"
    FRUSTRATED = "frustrated"
    CONFUSED   = "confused"
    ANXIOUS    = "anxious"
    EXCITED    = "excited"
    NEUTRAL    = "neutral"


class FAQ(BaseModel):
    """One question/answer topic. Read-only once loaded."""
    model_config = ConfigDict(frozen=True)

    id:              str = ""
    question:        str = ""
    answer:          str = ""
    category:        str = ""
    keywords:        str = ""
    emotion_answers: Optional[Dict[str, str]] = None
    created_at:      Optional[datetime] = None

    @field_validator("id", "question", "answer", "category", "keywords", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else str(value)

    def keyword_list(self) -> List[str]:
        return [k.strip() for k in self.keywords.lower().split(",") if k.strip()]

    def override_for(self, emotion: Emotion) -> Optional[str]:
        if not self.emotion_answers:
            return None
        return self.emotion_answers.get(Emotion(emotion).value) or None


class MatchResult(BaseModel):
    faq:   Optional[FAQ] = None
    score: float = 0.0
    phase: Optional[str] = None     # "exact" | "fuzzy" | None

    @property
    def faq_id(self) -> Optional[str]:
        return self.faq.id if self.faq is not None else None

    def is_usable(self, threshold: float) -> bool:
        # The threshold only gates fuzzy scores; keyword hits always count.
        if self.faq is None:
            return False
        return self.phase == "exact" or self.score >= threshold


class EmotionResult(BaseModel):
    emotion:          Emotion
    confidence:       float
    matched_keywords: List[str] = []


class ComposedReply(BaseModel):
    emotion:          Emotion
    confidence:       float
    matched_keywords: List[str] = []
    base_answer:      Optional[str] = None
    reply:            str
    faq_id:           Optional[str] = None
    match_score:      float = 0.0


# ── HTTP ───────────────────────────────────────────────────────────────────

class ChatRequest(BaseModel):
    session_id: str = Field(..., examples=["visitor_abc123"])
    message:    str = Field(..., examples=["What are the ticket prices?"])

class ChatResponse(BaseModel):
    session_id:       str
    reply:            str
    emotion:          Emotion
    confidence:       float
    matched_keywords: List[str]
    emoji:            str
    color:            str
    base_answer:      Optional[str] = None
    faq_id:           Optional[str] = None
    match_score:      float = 0.0
