from __future__ import annotations

import random

from ssb_core import oir


def _key() -> dict:
    return oir.load_oir_bank()["answer_key"]


def test_bank_shape():
    bank = oir.load_oir_bank()
    types = [q["type"] for q in bank["questions"]]
    assert types.count("verbal") == 10
    assert types.count("non-verbal") == 10
    assert {str(q["id"]) for q in bank["questions"]} == set(bank["answer_key"])
    for q in bank["questions"]:
        assert bank["answer_key"][str(q["id"])] in q["options"]


def test_generated_test_hides_answers():
    test = oir.generate_test(rng=random.Random(7))
    assert test["generated_by"] == "static_data"
    assert test["time_limit_minutes"] == 30
    assert len(test["questions"]) == 20
    for q in test["questions"]:
        assert "answer" not in q
        assert ("sequence" in q) == (q["type"] == "non-verbal")


def test_perfect_submission():
    res = oir.evaluate_test("t1", _key(), time_taken=600)
    assert res.score == 100
    assert res.correct_answers == res.total_questions == 20
    assert res.attempted_questions == 20
    assert res.unattempted_questions == 0
    assert (res.verbal_score, res.non_verbal_score) == (100, 100)
    assert res.percentile == 95
    assert res.performance_level == "Excellent"
    assert res.to_dict()["time_taken"] == 600


def test_partial_submission_counts_skips_against_score():
    key = _key()
    answers = {qid: ans for qid, ans in key.items() if isinstance(ans, str)}
    answers["11"] = None
    answers["99"] = "ignored"

    res = oir.evaluate_test("t2", answers)
    assert res.score == 50
    assert res.attempted_questions == 10
    assert res.unattempted_questions == 10
    assert res.verbal_score == 100
    assert res.non_verbal_score == 0
    assert res.percentile == 50
    assert res.performance_level == "Average"
    assert 99 not in [r.question_id for r in res.results]


def test_figure_comparison_needs_every_attribute():
    fig = {"shape": "triangle", "rotation": 180, "fill": "none", "size": "medium"}
    assert oir.compare_figures(dict(fig), fig)
    assert not oir.compare_figures(dict(fig, rotation=90), fig)
    assert not oir.compare_figures("triangle", fig)
    assert not oir.compare_figures(None, fig)


def test_bands():
    assert [oir.percentile(s) for s in (95, 85, 72, 60, 55, 45, 30, 0)] == [95, 85, 75, 65, 50, 35, 25, 15]
    assert oir.performance_level(85) == "Excellent"
    assert oir.performance_level(80) == "Very Good"
    assert oir.performance_level(34) == "Needs Improvement"


def test_analytics_from_evaluation_dict():
    key = _key()
    answers = {qid: ans for qid, ans in key.items() if isinstance(ans, str)}
    answers.update({qid: {"shape": "circle"} for qid, ans in key.items() if not isinstance(ans, str)})
    result = oir.evaluate_test("t3", answers).to_dict()

    out = oir.result_analytics(result)
    assert out["overall_score"] == 50
    assert out["verbal_reasoning_score"] == 100
    assert out["non_verbal_reasoning_score"] == 0
    assert out["strengths"] == ["Strong verbal reasoning and analytical thinking"]
    assert out["areas_for_improvement"] == ["Pattern recognition and spatial intelligence require improvement"]
    assert out["recommendations"][0] == "Work on advanced reasoning techniques"


def test_analytics_with_no_rows():
    out = oir.result_analytics({"score": 10, "results": []})
    assert out["strengths"] == ["Room for improvement in all areas"]
    assert out["recommendations"][0] == "Focus on basic reasoning concepts and practice regularly"
