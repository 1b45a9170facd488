from __future__ import annotations
from typing import Any, Dict, List, Optional, Protocol


class ResultStore(Protocol):
    """Persistence seam for scored attempts; the scoring engine never calls it."""

    def save(self, user_id: str, kind: str, payload: Dict[str, Any]) -> str: ...

    def load(self, result_id: str) -> Optional[Dict[str, Any]]: ...

    def history(
        self, user_id: str, kind: Optional[str] = None, limit: Optional[int] = None
    ) -> List[Dict[str, Any]]: ...

    def delete(self, result_id: str) -> bool: ...
