# ssb_core/stats.py
from __future__ import annotations
from collections import Counter
from statistics import mean
from typing import Any, Dict, Iterable, List, Mapping

from . import config

# flag -> what to practise next
_FOCUS_BY_FLAG: Dict[str, str] = {
    "no_response": "Attempt every word; a short positive thought beats a blank",
    "negative_language": "Reframe reactions positively",
    "too_short": "Write complete sentences",
    "too_long": "Keep each response to one crisp sentence",
    "cliche_response": "Use personal, original associations",
    "unrelated_response": "Stay connected to the stimulus word",
}

EMPTY_STATS: Dict[str, Any] = {
    "totalTests": 0,
    "averageScore": 0,
    "bestScore": 0,
    "averageCompletionRate": 0,
    "improvementTrend": "stable",
    "strongestAreas": [],
    "weakestAreas": [],
    "recommendedFocus": [],
}


def _num(row: Mapping[str, Any], key: str) -> float:
    try:
        return float(row.get(key) or 0)
    except (TypeError, ValueError):
        return 0.0


def _trend(scores: List[float]) -> str:
    if len(scores) < 2:
        return "stable"
    delta = scores[-1] - mean(scores[:-1])
    if delta > config.TREND_DELTA:
        return "improving"
    if delta < -config.TREND_DELTA:
        return "declining"
    return "stable"


def _top(counter: Counter, cap: int = 3) -> List[str]:
    return [name for name, _ in counter.most_common(cap)]


def summarize_history(results: Iterable[Mapping[str, Any]], cap: int = 3) -> Dict[str, Any]:
    """
    Roll stored WAT analyses (camelCase dicts, oldest first) into the user
    stats record: averages, best score, trend and the recurring themes.
    """
    rows = [r for r in results if isinstance(r, Mapping)]
    if not rows:
        return {k: (list(v) if isinstance(v, list) else v) for k, v in EMPTY_STATS.items()}

    scores = [_num(r, "overallScore") for r in rows]
    rates = [_num(r, "completionRate") for r in rows]
    strengths: Counter = Counter()
    weaknesses: Counter = Counter()
    flags: Counter = Counter()
    for r in rows:
        strengths.update(r.get("strengths") or [])
        weaknesses.update(r.get("areasForImprovement") or [])
        flags.update((r.get("patterns") or {}).get("flags") or {})

    return {
        "totalTests": len(rows),
        "averageScore": int(mean(scores) + 0.5),
        "bestScore": int(max(scores)),
        "averageCompletionRate": int(mean(rates) + 0.5),
        "improvementTrend": _trend(scores),
        "strongestAreas": _top(strengths, cap),
        "weakestAreas": _top(weaknesses, cap),
        "recommendedFocus": [_FOCUS_BY_FLAG[f] for f in _top(flags, len(flags)) if f in _FOCUS_BY_FLAG][:cap],
    }
