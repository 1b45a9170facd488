from __future__ import annotations

import logging
import math
from collections import Counter
from typing import Any, Iterable, List, Mapping, Sequence

from . import config
from .analyzer import analyze_response
from .types import Patterns, ResponseAnalysis, ResponseRecord, TestAnalysis

log = logging.getLogger(__name__)

NO_RESPONSES_FEEDBACK = "No responses were recorded. Please ensure you complete the test."
CLOSING_NOTE = (
    "Remember, WAT reflects your subconscious thought patterns. Regular practice with "
    "positive, action-oriented thinking will improve your performance."
)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _safe_float(value: Any, default: float = 0.0) -> float:
    try:
        out = float(value)
    except Exception:
        return default
    return out if math.isfinite(out) else default


def _unpack(entry: Any) -> tuple[Any, Any]:
    """Accept ResponseRecord or the HTTP payload dicts ({word, response})."""

    if isinstance(entry, ResponseRecord):
        return entry.stimulus, entry.text
    if isinstance(entry, Mapping):
        word = entry.get("word", entry.get("stimulus"))
        text = entry.get("response", entry.get("text"))
        return word, text
    return getattr(entry, "stimulus", None), getattr(entry, "text", None)


def completion_rate(count: int, total_words: int | None = None) -> int:
    total = total_words or config.WAT_TOTAL_WORDS
    if total <= 0:
        return 0
    rate = _round_half_up(count / total * 100)
    if config.WAT_CLAMP_COMPLETION:
        rate = min(rate, 100)
    return rate


def time_efficiency(used_seconds: Any, ideal_seconds: float | None = None) -> int:
    """Closeness of the elapsed time to the ideal duration, as a percentage."""

    ideal = ideal_seconds or config.WAT_IDEAL_SECONDS
    if ideal <= 0:
        return 0
    used = _safe_float(used_seconds)
    return _round_half_up(max(0.0, 100 - abs(used - ideal) / ideal * 100))


def fold_patterns(analyses: Iterable[ResponseAnalysis]) -> Patterns:
    flags: Counter[str] = Counter()
    pos = neg = act = 0
    for a in analyses:
        flags.update(a.flags)
        pos += a.indicators.positive
        neg += a.indicators.negative
        act += a.indicators.action
    return Patterns(positive_indicators=pos, negative_indicators=neg, action_words=act, flags=dict(flags))


def _strengths(rate: int, efficiency: int, patterns: Patterns, n: int) -> List[str]:
    out: List[str] = []
    if rate >= config.STRENGTH_COMPLETION_MIN:
        out.append("Excellent completion rate - shows good time management")
    if patterns.positive_indicators > patterns.negative_indicators * 2:
        out.append("Positive mindset - responses show optimistic thinking")
    if patterns.action_words > n * config.STRENGTH_ACTION_RATIO:
        out.append("Action-oriented responses - shows leadership potential")
    if efficiency > config.STRENGTH_TIME_MIN:
        out.append("Good time management throughout the test")
    return out


def _improvements(rate: int, patterns: Patterns, n: int) -> List[str]:
    flags = patterns.flags
    out: List[str] = []
    if rate < config.IMPROVE_COMPLETION_MAX:
        out.append("Work on time management to complete more words")
    if flags.get("negative_language", 0) > n * config.IMPROVE_NEGATIVE_RATIO:
        out.append("Reduce negative language - focus on positive framing")
    if flags.get("too_short", 0) > n * config.IMPROVE_SHORT_RATIO:
        out.append("Provide more detailed responses - aim for complete thoughts")
    if flags.get("cliche_response", 0) > n * config.IMPROVE_CLICHE_RATIO:
        out.append("Avoid cliche responses - be more original and personal")
    if patterns.action_words < n * config.IMPROVE_ACTION_RATIO:
        out.append("Include more action-oriented language to show initiative")
    return out


def generate_feedback(score: int, rate: int, strengths: Sequence[str], improvements: Sequence[str]) -> str:
    if score >= config.BAND_EXCELLENT[0] and rate >= config.BAND_EXCELLENT[1]:
        text = ("Excellent performance! Your responses demonstrate strong psychological "
                "fitness for leadership roles. ")
    elif score >= config.BAND_GOOD[0] and rate >= config.BAND_GOOD[1]:
        text = ("Good performance with room for improvement. Your responses show potential "
                "for leadership development. ")
    elif score >= config.BAND_AVERAGE_SCORE:
        text = ("Average performance. Focus on developing more positive and action-oriented "
                "thinking patterns. ")
    else:
        text = ("Below average performance. Consider working on positive thinking and "
                "reducing negative language patterns. ")
    if strengths:
        text += f"Your key strengths include: {', '.join(strengths)}. "
    if improvements:
        text += f"Areas for improvement: {', '.join(improvements)}. "
    return text + CLOSING_NOTE


def _empty_analysis() -> TestAnalysis:
    return TestAnalysis(
        overall_score=0,
        completion_rate=0,
        time_efficiency=0,
        total_responses=0,
        total_words=config.WAT_TOTAL_WORDS,
        feedback=NO_RESPONSES_FEEDBACK,
        areas_for_improvement=["Complete the test with responses"],
    )


def analyze_test(responses: Sequence[Any] | None, total_time_used: Any = 0) -> TestAnalysis:
    """Score a full WAT attempt.

    Every response goes through `analyze_response` in input order, so
    `detailed_analysis[i]` always belongs to `responses[i]`.
    """

    if not responses:
        return _empty_analysis()

    detailed = [analyze_response(*_unpack(r)) for r in responses]
    n = len(detailed)
    valid = [a.score for a in detailed if a.score > 0]
    overall = _round_half_up(sum(valid) / len(valid)) if valid else 0
    rate = completion_rate(n)
    efficiency = time_efficiency(total_time_used)
    patterns = fold_patterns(detailed)

    strengths = _strengths(rate, efficiency, patterns, n)
    improvements = _improvements(rate, patterns, n)
    log.debug(
        "wat scored n=%d valid=%d overall=%d completion=%d efficiency=%d",
        n, len(valid), overall, rate, efficiency,
    )
    return TestAnalysis(
        overall_score=overall,
        completion_rate=rate,
        time_efficiency=efficiency,
        total_responses=n,
        total_words=config.WAT_TOTAL_WORDS,
        feedback=generate_feedback(overall, rate, strengths, improvements),
        strengths=strengths,
        areas_for_improvement=improvements,
        detailed_analysis=detailed,
        patterns=patterns,
    )
