"""OIR (Officer Intelligence Rating) test generation and evaluation.

Questions come from the bundled static bank; verbal answers are strings and
non-verbal answers are figure descriptors (shape, rotation, fill, size).
"""
from __future__ import annotations

import json
import logging
import random
import time
import importlib.resources as ir
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from . import config
from .types import OirEvaluation, OirQuestionResult

log = logging.getLogger(__name__)

FIGURE_KEYS: tuple[str, ...] = ("shape", "rotation", "fill", "size")

# (min score, value), checked top-down
_PERCENTILE_BANDS: tuple[tuple[int, int], ...] = (
    (90, 95), (80, 85), (70, 75), (60, 65), (50, 50), (40, 35), (30, 25),
)
_LEVEL_BANDS: tuple[tuple[int, str], ...] = (
    (85, "Excellent"), (75, "Very Good"), (65, "Good"), (50, "Average"), (35, "Below Average"),
)

TEST_INFO: Dict[str, Any] = {
    "test_name": "Officer Intelligence Rating (OIR)",
    "description": "A comprehensive test to assess verbal and non-verbal reasoning abilities",
    "duration": f"{config.OIR_TIME_LIMIT_MINUTES} minutes",
    "total_questions": 20,
    "question_types": {"verbal_reasoning": 10, "non_verbal_reasoning": 10},
    "scoring": {
        "max_score": 100,
        "passing_score": 60,
        "excellent": "85-100",
        "good": "70-84",
        "average": "50-69",
        "below_average": "35-49",
        "poor": "0-34",
    },
    "instructions": [
        "Read each question carefully before answering",
        "For verbal questions, select the most appropriate option",
        "For non-verbal questions, identify the pattern and complete the sequence",
        "Manage your time effectively - 1.5 minutes per question on average",
        "Do not spend too much time on any single question",
        "Review your answers if time permits",
    ],
}


def load_oir_bank() -> Dict[str, Any]:
    data = ir.files(__package__).joinpath("data").joinpath("oir_bank.json").read_text(encoding="utf-8")
    return json.loads(data)


def _public_question(q: Mapping[str, Any]) -> Dict[str, Any]:
    out = {
        "id": q.get("id"),
        "type": q.get("type"),
        "question": q.get("question"),
        "options": q.get("options"),
    }
    if q.get("type") == "non-verbal":
        out["sequence"] = q.get("sequence")
    return out


def generate_test(rng: Optional[random.Random] = None, bank: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Shuffled copy of the static bank with the answers stripped."""

    data = bank if bank is not None else load_oir_bank()
    questions = list(data.get("questions") or [])
    (rng or random).shuffle(questions)
    return {
        "test_id": f"oir_test_static_{int(time.time() * 1000)}",
        "time_limit_minutes": int(data.get("time_limit_minutes") or config.OIR_TIME_LIMIT_MINUTES),
        "questions": [_public_question(q) for q in questions],
        "generated_by": "static_data",
    }


def compare_figures(user: Any, correct: Any) -> bool:
    if not isinstance(user, Mapping) or not isinstance(correct, Mapping):
        return False
    return all(user.get(k) == correct.get(k) for k in FIGURE_KEYS)


def _pct(num: int, den: int) -> int:
    return int(num / den * 100 + 0.5) if den > 0 else 0


def percentile(score: int) -> int:
    for floor, value in _PERCENTILE_BANDS:
        if score >= floor:
            return value
    return 15


def performance_level(score: int) -> str:
    for floor, label in _LEVEL_BANDS:
        if score >= floor:
            return label
    return "Needs Improvement"


def evaluate_test(
    test_id: str,
    answers: Mapping[str, Any],
    time_taken: float = 0,
    bank: Optional[Mapping[str, Any]] = None,
) -> OirEvaluation:
    """
    Grade submitted answers against the bank's answer key.
    `answers` maps question id (str or int) -> chosen option; null counts as
    unattempted. The score denominator is the full answer key, so skipped
    questions cost marks.
    """
    data = bank if bank is not None else load_oir_bank()
    key: Dict[str, Any] = {str(k): v for k, v in (data.get("answer_key") or {}).items()}
    total = len(key)

    results: List[OirQuestionResult] = []
    correct = attempted = 0
    verbal = {"seen": 0, "correct": 0}
    figural = {"seen": 0, "correct": 0}
    for qid, user_answer in (answers or {}).items():
        qkey = str(qid)
        if qkey not in key:
            log.warning("oir %s: ignoring answer for unknown question %r", test_id, qid)
            continue
        expected = key[qkey]
        if user_answer is not None:
            attempted += 1
        if isinstance(expected, str):
            bucket = verbal
            ok = user_answer == expected
        else:
            bucket = figural
            ok = compare_figures(user_answer, expected)
        bucket["seen"] += 1
        if ok:
            bucket["correct"] += 1
            correct += 1
        try:
            num_id = int(qkey)
        except ValueError:
            num_id = 0
        results.append(OirQuestionResult(question_id=num_id, user_answer=user_answer,
                                         correct_answer=expected, is_correct=ok))

    score = _pct(correct, total)
    return OirEvaluation(
        test_id=str(test_id),
        score=score,
        correct_answers=correct,
        total_questions=total,
        attempted_questions=attempted,
        verbal_score=_pct(verbal["correct"], verbal["seen"]),
        non_verbal_score=_pct(figural["correct"], figural["seen"]),
        percentile=percentile(score),
        performance_level=performance_level(score),
        time_taken=time_taken,
        results=results,
        evaluated_at=datetime.now(timezone.utc).isoformat(),
    )


def _strengths(verbal: int, non_verbal: int) -> List[str]:
    out: List[str] = []
    if verbal >= 75:
        out.append("Strong verbal reasoning and analytical thinking")
    if non_verbal >= 75:
        out.append("Excellent pattern recognition and spatial intelligence")
    if verbal >= 65 and non_verbal >= 65:
        out.append("Well-balanced cognitive abilities")
    if not out:
        out.append("Room for improvement in all areas")
    return out


def _weaknesses(verbal: int, non_verbal: int) -> List[str]:
    out: List[str] = []
    if verbal < 60:
        out.append("Verbal reasoning and logical thinking need practice")
    if non_verbal < 60:
        out.append("Pattern recognition and spatial intelligence require improvement")
    return out


def _recommendations(score: int) -> List[str]:
    if score < 50:
        return [
            "Focus on basic reasoning concepts and practice regularly",
            "Solve puzzles and brain teasers daily",
            "Practice time management during tests",
        ]
    if score < 70:
        return [
            "Work on advanced reasoning techniques",
            "Practice with timed mock tests",
            "Analyze your mistakes to avoid repetition",
        ]
    return [
        "Maintain your performance with regular practice",
        "Focus on speed and accuracy",
        "Help others to strengthen your own understanding",
    ]


def result_analytics(result: Mapping[str, Any] | OirEvaluation) -> Dict[str, Any]:
    """Verbal/non-verbal breakdown with strengths and recommendations."""

    payload = result.to_dict() if isinstance(result, OirEvaluation) else dict(result or {})
    rows = [r for r in (payload.get("results") or []) if isinstance(r, Mapping)]
    verbal_rows = [r for r in rows if isinstance(r.get("correct_answer"), str)]
    figural_rows = [r for r in rows if not isinstance(r.get("correct_answer"), str)]
    verbal = _pct(sum(1 for r in verbal_rows if r.get("is_correct")), len(verbal_rows))
    non_verbal = _pct(sum(1 for r in figural_rows if r.get("is_correct")), len(figural_rows))
    try:
        overall = int(payload.get("score") or 0)
    except (TypeError, ValueError):
        overall = 0
    return {
        "overall_score": overall,
        "verbal_reasoning_score": verbal,
        "non_verbal_reasoning_score": non_verbal,
        "strengths": _strengths(verbal, non_verbal),
        "areas_for_improvement": _weaknesses(verbal, non_verbal),
        "recommendations": _recommendations(overall),
    }
