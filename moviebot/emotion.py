"""
emotion.py — Lexicon emotion detection for support-chat messages.

Labels: happy | sad | angry | frustrated | confused | anxious | excited | neutral

Scoring per emotion (all additive, substring match on the lower-cased text):
  keyword hit  +2
  phrase hit   +3
  "?" anywhere +1 confused
  "!" anywhere +0.5 excited, +0.5 angry
Highest score wins; ties go to the emotion declared first. No score → neutral.
"""
from typing import Dict, List

from moviebot.config import (
    KEYWORD_WEIGHT, PHRASE_WEIGHT,
    QUESTION_MARK_BONUS, EXCLAMATION_BONUS,
    EMOTION_CONFIDENCE_DIVISOR,
)
from moviebot.schemas import Emotion, EmotionResult

# ── Lexicons ───────────────────────────────────────────────────────────────
LEXICONS: Dict[Emotion, Dict[str, List[str]]] = {
    Emotion.HAPPY: {
        "keywords": [
            "happy", "great", "awesome", "excellent", "wonderful", "fantastic",
            "love", "perfect", "amazing", "thank", "thanks", "good", "nice",
            "😊", "😃", "😄", "🎉", "👍", "❤️",
        ],
        "phrases": ["thank you", "thanks so much", "appreciate it", "love it"],
    },
    Emotion.SAD: {
        "keywords": [
            "sad", "unhappy", "disappointed", "sorry", "upset", "down",
            "depressed", "miserable", "terrible", "awful", "horrible", "bad",
            "😢", "😞", "😔", "☹️",
        ],
        "phrases": ["feel bad", "not good", "very disappointed", "let down"],
    },
    Emotion.ANGRY: {
        "keywords": [
            "angry", "mad", "furious", "outraged", "livid", "hate", "disgusting",
            "ridiculous", "unacceptable", "pathetic", "stupid", "worst",
            "😠", "😡", "🤬",
        ],
        "phrases": ["fed up", "sick of", "had enough", "this is ridiculous"],
    },
    Emotion.FRUSTRATED: {
        "keywords": [
            "frustrated", "frustrating", "annoying", "irritating", "aggravating",
            "troublesome", "difficult", "struggling", "stuck", "problem", "issue",
            "ugh", "argh",
            "😤", "😫",
        ],
        "phrases": [
            "not working", "nothing works", "doesnt work", "doesn't work",
            "cant seem", "keep trying",
        ],
    },
    Emotion.CONFUSED: {
        "keywords": [
            "confused", "confusing", "unclear", "understand", "what", "how",
            "why", "help", "lost", "unsure", "uncertain", "dont know",
            "😕", "🤔", "😵",
        ],
        "phrases": ["dont understand", "don't understand", "not sure", "how do", "what is", "explain"],
    },
    Emotion.ANXIOUS: {
        "keywords": [
            "worried", "concern", "nervous", "anxious", "scared", "afraid",
            "uncertain", "unsure", "hesitant", "doubt", "fear",
            "😰", "😨", "😟",
        ],
        "phrases": ["worried about", "concerned about", "what if", "will it"],
    },
    Emotion.EXCITED: {
        "keywords": [
            "excited", "cant wait", "can't wait", "looking forward", "eager",
            "pumped", "thrilled", "stoked", "yay", "woohoo", "wow",
            "🎉", "🤩", "😍", "🥳",
        ],
        "phrases": ["cant wait", "can't wait", "so excited", "looking forward"],
    },
}

# ── Presentation hints (badge next to a chat bubble) ───────────────────────
EMOTION_EMOJI: Dict[Emotion, str] = {
    Emotion.HAPPY:      "😊",
    Emotion.SAD:        "😔",
    Emotion.ANGRY:      "😠",
    Emotion.FRUSTRATED: "😤",
    Emotion.CONFUSED:   "🤔",
    Emotion.ANXIOUS:    "😟",
    Emotion.EXCITED:    "🎉",
    Emotion.NEUTRAL:    "😐",
}

EMOTION_COLOR: Dict[Emotion, str] = {
    Emotion.HAPPY:      "text-green-600",
    Emotion.SAD:        "text-blue-600",
    Emotion.ANGRY:      "text-red-600",
    Emotion.FRUSTRATED: "text-orange-600",
    Emotion.CONFUSED:   "text-purple-600",
    Emotion.ANXIOUS:    "text-yellow-600",
    Emotion.EXCITED:    "text-pink-600",
    Emotion.NEUTRAL:    "text-gray-600",
}


def emotion_badge(emotion: Emotion) -> Dict[str, str]:
    return {"emoji": EMOTION_EMOJI[emotion], "color": EMOTION_COLOR[emotion]}


def detect_emotion(message: str, divisor: float = EMOTION_CONFIDENCE_DIVISOR) -> EmotionResult:
    text = (message or "").lower().strip()

    scores:  Dict[Emotion, float]     = {em: 0 for em in LEXICONS}
    matches: Dict[Emotion, List[str]] = {em: [] for em in LEXICONS}

    for em, lexicon in LEXICONS.items():
        for kw in lexicon["keywords"]:
            if kw.lower() in text:
                scores[em] += KEYWORD_WEIGHT
                matches[em].append(kw)
        for phrase in lexicon["phrases"]:
            if phrase.lower() in text:
                scores[em] += PHRASE_WEIGHT
                matches[em].append(phrase)

    if "?" in text:
        scores[Emotion.CONFUSED] += QUESTION_MARK_BONUS
    if "!" in text:
        scores[Emotion.EXCITED] += EXCLAMATION_BONUS
        scores[Emotion.ANGRY]   += EXCLAMATION_BONUS

    # max() returns the first of equal scores, i.e. declaration order
    top = max(scores, key=scores.__getitem__)
    if scores[top] == 0:
        return EmotionResult(emotion=Emotion.NEUTRAL, confidence=1.0, matched_keywords=[])

    return EmotionResult(
        emotion=top,
        confidence=min(scores[top] / divisor, 1.0),
        matched_keywords=matches[top],
    )
