"""
empathy.py — Emotion-driven reply templates.

  A) Empathetic wrap  — acknowledgment + transition, answer, supportive closing
  B) No-answer reply  — apologetic intro, suggested topics, outro
  C) Phrase choosers  — how one line is picked out of a pool

Wrapping is skipped for neutral messages and for weak signals
(confidence < EMPATHY_MIN_CONFIDENCE).
"""
import random
import threading
from typing import Callable, Dict, List, Sequence, Tuple

from moviebot.config import EMPATHY_MIN_CONFIDENCE
from moviebot.schemas import FAQ, Emotion

# A chooser gets a pool and returns the index to use.
Chooser = Callable[[Sequence], int]


# ══════════════════════════════════════════════════════════════════════════
# C) Choosers
# ══════════════════════════════════════════════════════════════════════════

def random_index(pool: Sequence) -> int:
    return random.randrange(len(pool))


def first_index(pool: Sequence) -> int:
    return 0


class RoundRobin:
    """Cycles through pool positions; safe to share between request threads."""

    def __init__(self):
        self._next = 0
        self._lock = threading.Lock()

    def __call__(self, pool: Sequence) -> int:
        with self._lock:
            idx = self._next % len(pool)
            self._next += 1
        return idx


# ══════════════════════════════════════════════════════════════════════════
# A) Empathetic wrap
# ══════════════════════════════════════════════════════════════════════════

# (acknowledgment, transition)
_OPENERS: Dict[Emotion, List[Tuple[str, str]]] = {
    Emotion.HAPPY: [
        ("I'm glad you're feeling positive!", "Let me help you with that."),
        ("That's wonderful to hear!", "Here's what I can tell you:"),
        ("Great energy!", "I'd be happy to assist."),
    ],
    Emotion.SAD: [
        ("I understand this might be disappointing.", "Let me see how I can help make this better."),
        ("I'm sorry to hear you're not feeling great about this.", "Here's what I can do to assist:"),
        ("I can sense some disappointment.", "Let me provide you with helpful information."),
    ],
    Emotion.ANGRY: [
        ("I understand your frustration, and I'm here to help.", "Let me provide you with the information you need:"),
        ("I hear you, and I want to make this right.", "Here's what you need to know:"),
        ("I can see this is frustrating for you.", "Let me help clarify things:"),
    ],
    Emotion.FRUSTRATED: [
        ("I can see you're having some difficulty with this.", "Let me break this down for you:"),
        ("I understand this can be confusing.", "Here's a clearer explanation:"),
        ("I'm here to help make this easier for you.", "Let me explain:"),
    ],
    Emotion.CONFUSED: [
        ("That's a great question! Let me clarify.", "Here's a simple explanation:"),
        ("I can help clear that up for you.", "Here's what you need to know:"),
        ("No worries, I'm here to explain!", "Let me walk you through this:"),
    ],
    Emotion.ANXIOUS: [
        ("I understand your concern. Let me help put your mind at ease.", "Here's what you should know:"),
        ("Don't worry, I'm here to help you with this.", "Here's the information you need:"),
        ("I can help address your concerns.", "Let me explain:"),
    ],
    Emotion.EXCITED: [
        ("I love the enthusiasm!", "Here's what you need to know:"),
        ("That's exciting!", "Let me help you with that:"),
        ("Great to see you so interested!", "Here's the information:"),
    ],
}

_CLOSINGS: Dict[Emotion, List[str]] = {
    Emotion.HAPPY: [
        "Feel free to ask if you need anything else!",
        "Is there anything else I can help you with?",
        "Let me know if you have any other questions!",
    ],
    Emotion.SAD: [
        "I hope this helps improve your experience. Please let me know if you need anything else.",
        "If there's anything more I can do to help, please don't hesitate to ask.",
        "I'm here if you need any additional support or information.",
    ],
    Emotion.ANGRY: [
        "I appreciate your patience. Is there anything else I can help clarify?",
        "Thank you for giving me the opportunity to help. Let me know if you need more information.",
        "I'm here to ensure you have the best experience possible. Feel free to ask anything else.",
    ],
    Emotion.FRUSTRATED: [
        "I hope that makes things clearer. Don't hesitate to ask if you need more help!",
        "Feel free to ask follow-up questions if anything is still unclear.",
        "I'm here to help make this as smooth as possible for you.",
    ],
    Emotion.CONFUSED: [
        "Does that make sense? Feel free to ask for more clarification!",
        "I'm happy to explain further if you need more details.",
        "Let me know if you'd like me to break it down differently!",
    ],
    Emotion.ANXIOUS: [
        "I hope this helps ease your concerns. Please reach out if you have more questions.",
        "Feel free to ask anything else that might help you feel more comfortable.",
        "I'm here to support you through this process.",
    ],
    Emotion.EXCITED: [
        "Enjoy! Let me know if you have any other questions!",
        "Hope you have a great experience! Feel free to reach out anytime.",
        "Can't wait for you to enjoy this! Ask away if you need more info!",
    ],
}


def empathetic_wrap(
    answer: str,
    emotion: Emotion,
    confidence: float,
    choose: Chooser = random_index,
    min_confidence: float = EMPATHY_MIN_CONFIDENCE,
) -> str:
    if confidence < min_confidence or emotion == Emotion.NEUTRAL:
        return answer

    openers  = _OPENERS[emotion]
    closings = _CLOSINGS[emotion]
    acknowledgment, transition = openers[choose(openers)]
    closing = closings[choose(closings)]
    return f"{acknowledgment} {transition}\n\n{answer}\n\n{closing}"


# ══════════════════════════════════════════════════════════════════════════
# B) No-answer reply
# ══════════════════════════════════════════════════════════════════════════

_NO_ANSWER_INTRO: Dict[Emotion, str] = {
    Emotion.HAPPY:      "I appreciate your positive energy! While I don't have a specific answer to that exact question,",
    Emotion.SAD:        "I'm sorry I don't have a direct answer to your question.",
    Emotion.ANGRY:      "I understand you need information, and I apologize that I don't have a specific answer to that question.",
    Emotion.FRUSTRATED: "I can see you're looking for specific information. While I don't have that exact answer,",
    Emotion.CONFUSED:   "That's a great question! While I don't have that specific information,",
    Emotion.ANXIOUS:    "I understand you're looking for clarity. While I don't have that exact answer,",
    Emotion.EXCITED:    "I love your enthusiasm! While I don't have that specific information right now,",
    Emotion.NEUTRAL:    "I don't have a specific answer to that question.",
}

_NO_ANSWER_OUTRO: Dict[Emotion, str] = {
    Emotion.HAPPY:      "I'm sure we can find what you're looking for together!",
    Emotion.SAD:        "I hope these topics can still be helpful to you.",
    Emotion.ANGRY:      "I want to ensure you get the help you need, so please try one of these topics.",
    Emotion.FRUSTRATED: "I hope one of these topics addresses what you're looking for!",
    Emotion.CONFUSED:   "I hope one of these common topics can help clarify things for you!",
    Emotion.ANXIOUS:    "I'm confident one of these topics will help address your needs.",
    Emotion.EXCITED:    "I'm sure one of these topics will be just what you need!",
    Emotion.NEUTRAL:    "Please try asking about one of these topics.",
}

TOPICS_HEADER = "Here are some common topics I can help with:"


def suggested_topics_block(catalog: Sequence[FAQ]) -> str:
    bullets = "\n".join(f"• {faq.question}" for faq in catalog)
    return f"{TOPICS_HEADER}\n\n{bullets}"


def no_answer_reply(emotion: Emotion, topics_block: str) -> str:
    return f"{_NO_ANSWER_INTRO[emotion]} {topics_block}\n\n{_NO_ANSWER_OUTRO[emotion]}"
