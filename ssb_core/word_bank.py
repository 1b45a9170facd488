from __future__ import annotations
import json, random, importlib.resources as ir
from typing import List, Optional
from .config import WAT_DEFAULT_WORD_COUNT
def load_word_bank() -> List[str]:
    data = ir.files(__package__).joinpath("data").joinpath("wat_words.json").read_text(encoding="utf-8")
    return [str(w) for w in json.loads(data)]
WORD_BANK: tuple[str, ...] = tuple(load_word_bank())
def get_test_words(count: int = WAT_DEFAULT_WORD_COUNT, rng: Optional[random.Random] = None) -> List[str]:
    """Shuffled draw from the stimulus bank, capped at the bank size."""
    if count <= 0:
        return []
    words = list(WORD_BANK)
    (rng or random).shuffle(words)
    return words[:min(count, len(words))]
