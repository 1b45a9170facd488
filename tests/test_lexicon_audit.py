from __future__ import annotations

from ssb_core import audit_lexicon, config
from ssb_core.lexicon import ACTION_WORDS, CONCEPT_MAP, NEGATIVE_INDICATORS, POSITIVE_INDICATORS
from ssb_core.word_bank import WORD_BANK


def test_lexicon_sizes():
    assert len(POSITIVE_INDICATORS) == 53
    assert len(NEGATIVE_INDICATORS) == 37
    assert len(ACTION_WORDS) == 31
    assert len(WORD_BANK) == 65
    assert {w.lower() for w in WORD_BANK} >= set(CONCEPT_MAP)


def test_audit_reports_overlaps():
    summary = audit_lexicon.audit_lexicons()
    warnings = "\n".join(summary["warnings"])

    assert summary["shared"]["guide"] == ["action", "positive"]
    assert "no" in summary["short_terms"] and "do" in summary["short_terms"]
    assert ["fail", "failure"] in summary["nested"]
    assert "'fail' also counts whenever 'failure' matches" in warnings
    assert "concept map entry" not in warnings
    assert "leader" not in summary["unmapped_words"]


def test_audit_flags_concept_without_stimulus(monkeypatch):
    monkeypatch.setattr(config, "LEXICON_MIN_TERM_LEN", 0)
    summary = audit_lexicon.audit_lexicons(
        lexicons={"positive": ("brave",), "negative": ("weak",)},
        concept_map={"valour": ("brave",)},
        bank=["Courage"],
    )
    assert summary["warnings"] == ["concept map entry 'valour' has no stimulus word in the bank"]
    assert summary["unmapped_words"] == ["courage"]


def test_main_returns_warning_exit(tmp_path, capsys):
    out = tmp_path / "audit.json"
    code = audit_lexicon.main(["--out", str(out)])
    captured = capsys.readouterr()

    assert code == 2
    assert "Lexicon Audit" in captured.out
    assert out.exists()
