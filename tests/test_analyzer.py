from __future__ import annotations

import pytest

from ssb_core.analyzer import analyze_response, is_conceptually_related


@pytest.mark.parametrize("blank", ["", "   ", "\n\t", None])
def test_blank_response_scores_zero_with_single_flag(blank):
    res = analyze_response("Courage", blank)

    assert res.score == 0
    assert res.flags == ["no_response"]
    ind = res.indicators
    assert (ind.positive, ind.negative, ind.action, ind.length) == (0, 0, 0, 0)


def test_same_input_gives_identical_result():
    a = analyze_response("Trust", "Trust builds strong teams over time.")
    b = analyze_response("Trust", "Trust builds strong teams over time.")
    assert a == b
    assert a.to_dict() == b.to_dict()


def test_leader_example_counts_lead_inside_leader():
    res = analyze_response("Leader", "Leader inspires others by example.")

    assert res.indicators.positive == 1  # inspire
    assert res.indicators.action == 1  # "lead" inside "leader"
    assert res.indicators.negative == 0
    assert res.indicators.length == 34
    assert res.flags == []
    assert res.score == 50 + 10 + 8 + 10


def test_failure_is_bad_clamps_to_zero():
    res = analyze_response("Failure", "Failure is bad.")

    # fail, failure and bad all match
    assert res.indicators.negative == 3
    assert res.flags == ["negative_language"]
    assert "too_short" not in res.flags
    assert res.score == 0


def test_negative_language_flag_is_recorded_once_per_response():
    res = analyze_response("Risk", "No risk is never worth a hopeless fear")
    assert res.indicators.negative >= 3
    assert res.flags.count("negative_language") == 1


def test_length_flags():
    short = analyze_response("Courage", "Brave")
    assert "too_short" in short.flags
    assert "too_long" not in short.flags

    long = analyze_response("Courage", "a" * 150)
    assert "too_long" in long.flags
    assert "too_short" not in long.flags

    mid = analyze_response("Courage", "x" * 50)
    assert "too_short" not in mid.flags
    assert "too_long" not in mid.flags


def test_unrelated_response_penalised():
    res = analyze_response("Trust", "Sunny weather today")
    assert res.flags == ["unrelated_response"]
    assert res.score == 50 - 25


def test_concept_map_counts_as_related():
    res = analyze_response("Team", "We win as one group")
    assert "unrelated_response" not in res.flags
    assert res.score == 50


def test_concept_map_only_for_mapped_words():
    assert is_conceptually_related("TEAM", "a strong group")
    assert not is_conceptually_related("Victory", "a strong group")


def test_cliche_penalty():
    res = analyze_response("Discipline", "Discipline is the key to success.")
    assert res.flags == ["cliche_response"]
    assert res.indicators.positive == 1
    assert res.score == 50 + 10 + 10 - 10


def test_substring_matching_quirk_is_preserved():
    res = analyze_response("Book", "A novel book")
    assert res.indicators.negative >= 1
    assert "negative_language" in res.flags


def test_score_is_clamped_to_upper_bound():
    res = analyze_response("Leader", "lead build create develop success achieve inspire")
    assert res.score == 100


@pytest.mark.parametrize(
    "word,text",
    [
        ("Defeat", "never never no not cannot hopeless helpless useless worthless"),
        ("Goal", "I set a goal and work hard to achieve it together with my team"),
        ("Enemy", "?"),
        ("Vision", "x" * 400),
        ("", "anything goes"),
    ],
)
def test_score_always_within_bounds(word, text):
    res = analyze_response(word, text)
    assert 0 <= res.score <= 100
