"""
matcher.py — Pick the FAQ a visitor's message is about.

Two phases, first hit wins:
  1. Exact keyword phase: any catalog keyword (or the whole question text)
     contained in the message → score 1.0
  2. Fuzzy phase: normalised Levenshtein similarity + token overlap
     against both question and answer text

The composer decides whether a fuzzy score is good enough (FUZZY_MATCH_THRESHOLD).
"""
import logging
import re
from typing import List, Sequence

from rapidfuzz.distance import Levenshtein

from moviebot.config import (
    EXACT_MATCH_SCORE,
    QUESTION_SIM_WEIGHT, QUESTION_OVERLAP_WEIGHT,
    ANSWER_SIM_WEIGHT, ANSWER_OVERLAP_WEIGHT,
)
from moviebot.schemas import FAQ, MatchResult

logger = logging.getLogger(__name__)

_TOKEN_SPLIT = re.compile(r"\W+")


def similarity(a: str, b: str) -> float:
    """1 - editDistance / longer length. Empty input on either side → 0."""
    if not a or not b:
        return 0.0
    return 1.0 - Levenshtein.distance(a, b) / max(len(a), len(b))


def tokenize(text: str) -> List[str]:
    return [t for t in _TOKEN_SPLIT.split(text) if t]


def token_overlap(a: str, b: str) -> float:
    a_tokens = tokenize(a)
    b_tokens = tokenize(b)
    if not a_tokens or not b_tokens:
        return 0.0
    b_set  = set(b_tokens)
    common = sum(1 for t in a_tokens if t in b_set)
    return common / max(len(a_tokens), len(b_tokens))


def _exact_hit(text: str, faq: FAQ) -> bool:
    if any(k in text for k in faq.keyword_list()):
        return True
    question = faq.question.lower()
    return bool(question) and question in text


def _fuzzy_score(text: str, faq: FAQ) -> float:
    q = faq.question.lower()
    a = faq.answer.lower()
    by_question = QUESTION_SIM_WEIGHT * similarity(text, q) + QUESTION_OVERLAP_WEIGHT * token_overlap(text, q)
    by_answer   = ANSWER_SIM_WEIGHT * similarity(text, a) + ANSWER_OVERLAP_WEIGHT * token_overlap(text, a)
    return max(by_question, by_answer)


def find_best_match(utterance: str, catalog: Sequence[FAQ]) -> MatchResult:
    text = (utterance or "").lower()

    # Phase 1: catalog order decides between several keyword hits
    for faq in catalog:
        if _exact_hit(text, faq):
            logger.debug(f"[MATCH] exact faq={faq.id!r}")
            return MatchResult(faq=faq, score=EXACT_MATCH_SCORE, phase="exact")

    # Phase 2: strictly-greater keeps the first of equal scores
    best = MatchResult()
    for faq in catalog:
        score = _fuzzy_score(text, faq)
        if score > best.score:
            best = MatchResult(faq=faq, score=score, phase="fuzzy")

    logger.debug(f"[MATCH] fuzzy faq={best.faq_id!r} score={best.score:.3f}")
    return best
