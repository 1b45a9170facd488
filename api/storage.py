"""File-backed result store for scored WAT/OIR attempts.

The production deployment should ideally swap this module for a proper
database-backed implementation.  For now we use simple JSON files stored on
disk so results survive restarts and history/stat endpoints have data.
"""

from __future__ import annotations

import json
import os
import re
import threading
import time
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional


DATA_ROOT = Path(os.getenv("DATA_DIR", "data")).resolve()
_ID_UNSAFE = re.compile(r"[^A-Za-z0-9_-]+")


def _read_json(path: Path, default: Any) -> Any:
    if not path.exists():
        return default
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return default


def _write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
    tmp.replace(path)


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class FileResultStore:
    """One JSON file per result plus an index keyed by result id."""

    def __init__(self, root: Path = DATA_ROOT) -> None:
        self.root = Path(root)
        self.results_dir = self.root / "results"
        self.index_path = self.root / "results_index.json"
        self._lock = threading.Lock()

    def _result_path(self, result_id: str) -> Path:
        return self.results_dir / f"{result_id}.json"

    def save(self, user_id: str, kind: str, payload: Dict[str, Any]) -> str:
        """Persist `payload` and return its new result id."""

        safe_user = _ID_UNSAFE.sub("-", user_id)
        result_id = f"{kind}_{safe_user}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:6]}"
        saved_at = utcnow_iso()
        record = dict(payload)
        record["meta"] = {"resultId": result_id, "userId": user_id, "kind": kind, "savedAt": saved_at}

        _write_json(self._result_path(result_id), record)
        with self._lock:
            index: Dict[str, Dict[str, Any]] = _read_json(self.index_path, {})
            seq = 1 + max((int(m.get("seq", 0)) for m in index.values()), default=0)
            index[result_id] = {"userId": user_id, "kind": kind, "savedAt": saved_at, "seq": seq}
            _write_json(self.index_path, index)
        return result_id

    def load(self, result_id: str) -> Optional[Dict[str, Any]]:
        # ids become file names
        if not result_id or "/" in result_id or "\\" in result_id or result_id.startswith("."):
            return None
        return _read_json(self._result_path(result_id), None)

    def delete(self, result_id: str) -> bool:
        removed = False
        with self._lock:
            index: Dict[str, Dict[str, Any]] = _read_json(self.index_path, {})
            if result_id in index:
                index.pop(result_id, None)
                _write_json(self.index_path, index)
                removed = True
        path = self._result_path(result_id)
        if removed and path.exists():
            path.unlink()
        return removed

    def history(self, user_id: str, kind: Optional[str] = None, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Stored results for `user_id`, newest first."""

        index: Dict[str, Dict[str, Any]] = _read_json(self.index_path, {})
        rows = [
            (int(meta.get("seq", 0)), rid)
            for rid, meta in index.items()
            if meta.get("userId") == user_id and (kind is None or meta.get("kind") == kind)
        ]
        rows.sort(reverse=True)
        if limit is not None:
            rows = rows[:limit]
        out: List[Dict[str, Any]] = []
        for _, rid in rows:
            record = self.load(rid)
            if record:
                out.append(record)
        return out
