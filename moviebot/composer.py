"""
composer.py — One chat turn: emotion + FAQ match → reply text.

Stateless; every call is evaluated on its own. The only nondeterminism is
which empathetic phrase the chooser picks.
"""
from typing import Sequence

from moviebot.config import FUZZY_MATCH_THRESHOLD
from moviebot.emotion import detect_emotion
from moviebot.empathy import Chooser, empathetic_wrap, no_answer_reply, random_index, suggested_topics_block
from moviebot.matcher import find_best_match
from moviebot.schemas import FAQ, ComposedReply


def compose(
    utterance: str,
    catalog: Sequence[FAQ],
    choose: Chooser = random_index,
    threshold: float = FUZZY_MATCH_THRESHOLD,
) -> ComposedReply:
    emotion = detect_emotion(utterance)
    match   = find_best_match(utterance, catalog)

    base_answer = None
    if match.is_usable(threshold):
        override = match.faq.override_for(emotion.emotion)
        if override:
            # Written for this emotion already, so no extra wrapping.
            base_answer = override
            reply = override
        else:
            base_answer = match.faq.answer
            reply = empathetic_wrap(base_answer, emotion.emotion, emotion.confidence, choose=choose)
    else:
        reply = no_answer_reply(emotion.emotion, suggested_topics_block(catalog))

    return ComposedReply(
        emotion=emotion.emotion,
        confidence=emotion.confidence,
        matched_keywords=emotion.matched_keywords,
        base_answer=base_answer,
        reply=reply,
        faq_id=match.faq_id if base_answer is not None else None,
        match_score=match.score,
    )
