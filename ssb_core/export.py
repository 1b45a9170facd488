"""Helpers to export per-word WAT analyses in JSON/CSV formats."""
from __future__ import annotations

from typing import Iterable, List, Dict, Any
import csv
import io

from .types import ResponseAnalysis

_FIELDS: tuple[str, ...] = (
    "index",
    "word",
    "response",
    "score",
    "flags",
    "positive",
    "negative",
    "action",
    "length",
)


def _normalize_row(index: int, row: ResponseAnalysis | Dict[str, Any]) -> Dict[str, Any]:
    data = row.to_dict() if isinstance(row, ResponseAnalysis) else dict(row or {})
    indicators = data.get("indicators") or {}
    out: Dict[str, Any] = {"index": index}
    for key in _FIELDS[1:]:
        if key in {"positive", "negative", "action", "length"}:
            val = indicators.get(key)
        else:
            val = data.get(key)
        if key in {"score", "positive", "negative", "action", "length"}:
            try:
                out[key] = int(val)
            except (TypeError, ValueError):
                out[key] = 0
        elif key == "flags":
            out[key] = ";".join(str(f) for f in (val or []))
        else:
            out[key] = "" if val is None else str(val)
    return out


def to_json(rows: Iterable[ResponseAnalysis | Dict[str, Any]]) -> Dict[str, Any]:
    """Return a JSON-safe payload of flattened analysis rows."""

    normalized: List[Dict[str, Any]] = [_normalize_row(i, r) for i, r in enumerate(rows)]
    return {"rows": normalized}


def to_csv(rows: Iterable[ResponseAnalysis | Dict[str, Any]]) -> str:
    """Render analysis rows as CSV with a fixed header."""

    normalized = [_normalize_row(i, r) for i, r in enumerate(rows)]
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=_FIELDS)
    writer.writeheader()
    for row in normalized:
        writer.writerow(row)
    return buf.getvalue()


__all__ = ["to_json", "to_csv"]
