# ssb_core/analyzer.py
from __future__ import annotations
from typing import Any, Iterable, List

from .lexicon import POSITIVE_INDICATORS, NEGATIVE_INDICATORS, ACTION_WORDS, CLICHE_PHRASES, CONCEPT_MAP
from .types import Indicators, ResponseAnalysis
from .config import (
    SCORE_BASE,
    SCORE_MIN,
    SCORE_MAX,
    POSITIVE_WEIGHT,
    NEGATIVE_WEIGHT,
    ACTION_WEIGHT,
    GOOD_LENGTH_BONUS,
    GOOD_LENGTH_RANGE,
    SHORT_LENGTH,
    LONG_LENGTH,
    FLAG_PENALTIES,
)

FLAGS: tuple[str, ...] = (
    "no_response",
    "negative_language",
    "too_short",
    "too_long",
    "cliche_response",
    "unrelated_response",
)


def _clamp_score(x: int) -> int:
    if x < SCORE_MIN: return SCORE_MIN
    if x > SCORE_MAX: return SCORE_MAX
    return x


def _count_hits(text: str, terms: Iterable[str]) -> int:
    # plain containment: "novel" counts as "no", "leader" as "lead"
    return sum(1 for term in terms if term in text)


def _add_flag(flags: List[str], flag: str) -> None:
    if flag not in flags:
        flags.append(flag)


def is_conceptually_related(word: Any, text: str) -> bool:
    """True when `text` holds a term mapped to `word` in CONCEPT_MAP.

    Words without a mapping are never conceptually related; only literal
    containment of the stimulus counts for those.
    """
    key = str(word or "").lower()
    return any(concept in text for concept in CONCEPT_MAP.get(key, ()))


def _no_response(word: str, response: str) -> ResponseAnalysis:
    return ResponseAnalysis(word=word, response=response, score=0, flags=["no_response"], indicators=Indicators())


def analyze_response(word: Any, response: Any) -> ResponseAnalysis:
    """
    Score one stimulus/response pair in 0..100 and attach diagnostic flags.
    Missing, non-string and blank responses all score 0 with `no_response`.
    """
    w = word if isinstance(word, str) else str(word or "")
    if not isinstance(response, str) or not response.strip():
        return _no_response(w, response if isinstance(response, str) else "")

    clean = response.lower().strip()
    length = len(response)
    flags: List[str] = []

    positive = _count_hits(clean, POSITIVE_INDICATORS)
    negative = _count_hits(clean, NEGATIVE_INDICATORS)
    action = _count_hits(clean, ACTION_WORDS)
    if negative:
        _add_flag(flags, "negative_language")

    if length < SHORT_LENGTH:
        _add_flag(flags, "too_short")
    elif length > LONG_LENGTH:
        _add_flag(flags, "too_long")

    if any(phrase in clean for phrase in CLICHE_PHRASES):
        _add_flag(flags, "cliche_response")

    if w.lower() not in clean and not is_conceptually_related(w, clean):
        _add_flag(flags, "unrelated_response")

    score = SCORE_BASE
    score += positive * POSITIVE_WEIGHT
    score -= negative * NEGATIVE_WEIGHT
    score += action * ACTION_WEIGHT
    lo, hi = GOOD_LENGTH_RANGE
    if lo <= length <= hi:
        score += GOOD_LENGTH_BONUS
    for flag in flags:
        score -= FLAG_PENALTIES.get(flag, 0)

    return ResponseAnalysis(
        word=w,
        response=response,
        score=_clamp_score(score),
        flags=flags,
        indicators=Indicators(positive=positive, negative=negative, action=action, length=length),
    )
