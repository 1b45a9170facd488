from __future__ import annotations
import os, json, pathlib, random


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


# Standard WAT: 60 words in 15 minutes.
WAT_TOTAL_WORDS: int = 60
WAT_DEFAULT_WORD_COUNT: int = 60
WAT_IDEAL_SECONDS: float = 900.0
WAT_CLAMP_COMPLETION: bool = False

SCORE_BASE: int = 50
SCORE_MIN: int = 0
SCORE_MAX: int = 100
POSITIVE_WEIGHT: int = 10
NEGATIVE_WEIGHT: int = 15
ACTION_WEIGHT: int = 8
GOOD_LENGTH_BONUS: int = 10
GOOD_LENGTH_RANGE: tuple[int, int] = (20, 80)
SHORT_LENGTH: int = 10
LONG_LENGTH: int = 100

FLAG_PENALTIES: dict[str, int] = {
    "negative_language": 20,
    "too_short": 15,
    "cliche_response": 10,
    "unrelated_response": 25,
}

# feedback bands: (min score, min completion rate)
BAND_EXCELLENT: tuple[int, int] = (80, 90)
BAND_GOOD: tuple[int, int] = (65, 75)
BAND_AVERAGE_SCORE: int = 50

STRENGTH_COMPLETION_MIN: int = 90
STRENGTH_TIME_MIN: int = 80
STRENGTH_ACTION_RATIO: float = 0.3
IMPROVE_COMPLETION_MAX: int = 70
IMPROVE_NEGATIVE_RATIO: float = 0.2
IMPROVE_SHORT_RATIO: float = 0.3
IMPROVE_CLICHE_RATIO: float = 0.2
IMPROVE_ACTION_RATIO: float = 0.1

OIR_TIME_LIMIT_MINUTES: int = 30

EXPORT_ENABLED: bool = True
HISTORY_LIMIT: int = 50
TREND_DELTA: float = 5.0

LEXICON_MIN_TERM_LEN: int = 3
# // env overrides for staging/ops; defaults follow the standard test format.
WAT_TOTAL_WORDS = _env_int("WAT_TOTAL_WORDS", WAT_TOTAL_WORDS)
WAT_DEFAULT_WORD_COUNT = _env_int("WAT_DEFAULT_WORD_COUNT", WAT_DEFAULT_WORD_COUNT)
WAT_IDEAL_SECONDS = _env_float("WAT_IDEAL_SECONDS", WAT_IDEAL_SECONDS)
WAT_CLAMP_COMPLETION = _env_bool("WAT_CLAMP_COMPLETION", WAT_CLAMP_COMPLETION)
EXPORT_ENABLED = _env_bool("EXPORT_ENABLED", EXPORT_ENABLED)
HISTORY_LIMIT = _env_int("HISTORY_LIMIT", HISTORY_LIMIT)
TREND_DELTA = _env_float("TREND_DELTA", TREND_DELTA)

def _env_true(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1","true","yes","on")
def load_config() -> dict:
    cfg = {}
    p = pathlib.Path("config.json")
    if p.exists():
        try: cfg = json.loads(p.read_text(encoding="utf-8"))
        except Exception: cfg = {}
    e = os.environ
    if e.get("WAT_CLAMP_COMPLETION"): cfg["WAT_CLAMP_COMPLETION"] = _env_true("WAT_CLAMP_COMPLETION")
    for k in ("WAT_TOTAL_WORDS", "WAT_DEFAULT_WORD_COUNT", "HISTORY_LIMIT"):
        if e.get(k): cfg[k] = _env_int(k, cfg.get(k, 0))
    if e.get("WAT_IDEAL_SECONDS"): cfg["WAT_IDEAL_SECONDS"] = _env_float("WAT_IDEAL_SECONDS", WAT_IDEAL_SECONDS)
    if e.get("DATA_DIR"): cfg["DATA_DIR"] = e.get("DATA_DIR")
    if e.get("SEED"): cfg["SEED"] = int(e.get("SEED"))
    return cfg
def seed_rng(cfg: dict):
    s = cfg.get("SEED")
    if s is not None:
        random.seed(int(s))
