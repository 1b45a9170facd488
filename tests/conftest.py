from __future__ import annotations

import importlib
import os
import sys

import pytest

from ssb_core.types import ResponseRecord
from ssb_core.word_bank import WORD_BANK


_APP_MODULES = [
    "ssb_core.config",
    "api.storage",
    "api.app",
]


def build_records(
    texts: list[str] | None = None,
    *,
    count: int | None = None,
    text: str = "",
) -> list[ResponseRecord]:
    """Deterministic WAT attempt: explicit texts, or `count` copies of `text`."""

    if texts is None:
        texts = [text] * (count or 0)
    return [
        ResponseRecord(stimulus=WORD_BANK[i % len(WORD_BANK)], text=t)
        for i, t in enumerate(texts)
    ]


def reload_app(tmp_path):
    os.environ["DATA_DIR"] = str(tmp_path)
    for name in _APP_MODULES:
        if name in sys.modules:
            importlib.reload(sys.modules[name])
        else:
            __import__(name)
    return sys.modules["api.storage"], sys.modules["api.app"]


@pytest.fixture
def client(tmp_path):
    from fastapi.testclient import TestClient

    _storage, app_module = reload_app(tmp_path)
    return TestClient(app_module.app)
