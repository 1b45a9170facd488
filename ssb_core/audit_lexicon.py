from __future__ import annotations

import argparse
import json
import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, Mapping, Sequence

from . import config
from .lexicon import CONCEPT_MAP, LEXICONS
from .word_bank import WORD_BANK

log = logging.getLogger(__name__)


def _nested_terms(terms: Sequence[str]) -> list[tuple[str, str]]:
    """Pairs (inner, outer) where `inner` also matches inside `outer`."""
    out: list[tuple[str, str]] = []
    for inner in terms:
        for outer in terms:
            if inner != outer and inner in outer:
                out.append((inner, outer))
    return sorted(set(out))


def audit_lexicons(
    lexicons: Mapping[str, Sequence[str]] = LEXICONS,
    concept_map: Mapping[str, Sequence[str]] = CONCEPT_MAP,
    bank: Iterable[str] = WORD_BANK,
) -> dict[str, object]:
    warnings: list[str] = []
    sizes = {name: len(terms) for name, terms in lexicons.items()}

    owners: dict[str, list[str]] = {}
    for name, terms in lexicons.items():
        for term, n in Counter(terms).items():
            if n > 1:
                warnings.append(f"{name} lists '{term}' {n} times")
        for term in set(terms):
            owners.setdefault(term, []).append(name)
    shared = {term: sorted(names) for term, names in owners.items() if len(names) > 1}
    for term, names in sorted(shared.items()):
        warnings.append(f"'{term}' is in several lexicons: {', '.join(names)}")

    short = sorted(t for t in owners if len(t) < config.LEXICON_MIN_TERM_LEN)
    for term in short:
        warnings.append(f"'{term}' is shorter than {config.LEXICON_MIN_TERM_LEN} chars and matches inside other words")

    nested = _nested_terms(sorted(owners))
    for inner, outer in nested:
        warnings.append(f"'{inner}' also counts whenever '{outer}' matches")

    bank_lower = {w.lower() for w in bank}
    for key in sorted(concept_map):
        if key not in bank_lower:
            warnings.append(f"concept map entry '{key}' has no stimulus word in the bank")
    unmapped = sorted(w for w in bank_lower if w not in concept_map)

    return {
        "sizes": sizes,
        "shared": shared,
        "short_terms": short,
        "nested": [list(p) for p in nested],
        "unmapped_words": unmapped,
        "warnings": warnings,
    }


def print_report(summary: dict[str, object]) -> None:
    print("=== Lexicon Audit ===")
    for name, size in summary["sizes"].items():  # type: ignore[union-attr]
        print(f"  {name:<9} {size:3d} terms")
    unmapped: list[str] = summary["unmapped_words"]  # type: ignore[assignment]
    print(f"  stimulus words without concept entries: {len(unmapped)}")

    warnings: list[str] = summary["warnings"]  # type: ignore[assignment]
    if warnings:
        print("\nWarnings:")
        for msg in warnings:
            print(f" - {msg}")
    else:
        print("\nNo warnings.")


def write_summary(summary: dict[str, object], path: Path) -> str:
    text = json.dumps(summary, indent=2, sort_keys=True)
    path.write_text(text + "\n", encoding="utf-8")
    return text


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Audit the WAT scoring lexicons")
    ap.add_argument("--out", default="lexicon_audit.json", help="where to write the JSON summary")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    summary = audit_lexicons()
    print_report(summary)
    write_summary(summary, Path(args.out))
    log.info("Lexicon audit written to %s (%d warnings)", args.out, len(summary["warnings"]))  # type: ignore[arg-type]
    return 2 if summary["warnings"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
