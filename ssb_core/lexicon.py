# ssb_core/lexicon.py
from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Tuple

POSITIVE_INDICATORS: Tuple[str, ...] = (
    "success", "achieve", "accomplish", "overcome", "solve", "inspire", "motivate",
    "help", "support", "guide", "teach", "learn", "grow", "improve", "develop",
    "progress", "advance", "forward", "positive", "good", "great", "excellent",
    "strong", "confident", "determined", "dedicated", "committed", "responsible",
    "honest", "loyal", "trustworthy", "reliable", "capable", "skilled", "talented",
    "creative", "innovative", "adaptive", "flexible", "resilient", "persistent",
    "focused", "disciplined", "organized", "efficient", "effective", "productive",
    "collaborative", "cooperative", "united", "together", "team", "unity",
)

# every hit also raises the negative_language flag
NEGATIVE_INDICATORS: Tuple[str, ...] = (
    "no", "not", "never", "cannot", "can't", "won't", "shouldn't", "wouldn't",
    "impossible", "difficult", "hard", "bad", "terrible", "awful", "horrible",
    "hate", "dislike", "avoid", "fear", "scared", "worried", "anxious", "stress",
    "fail", "failure", "defeat", "lose", "loss", "weak", "weakness", "poor",
    "unable", "incapable", "useless", "worthless", "hopeless", "helpless",
)

ACTION_WORDS: Tuple[str, ...] = (
    "lead", "guide", "direct", "manage", "organize", "plan", "execute", "implement",
    "create", "build", "develop", "establish", "initiate", "start", "begin",
    "act", "take", "make", "do", "work", "strive", "fight", "defend", "protect",
    "serve", "contribute", "participate", "engage", "involve", "commit", "dedicate",
)

CLICHE_PHRASES: Tuple[str, ...] = ("key to success", "important for", "leads to")

CONCEPT_MAP: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "leader": ("guide", "inspire", "direct", "manage", "team", "follow"),
    "failure": ("success", "learn", "try", "again", "overcome", "mistake"),
    "team": ("together", "cooperate", "group", "work", "unite", "collective"),
    "courage": ("brave", "bold", "fear", "strength", "face", "overcome"),
    "responsibility": ("duty", "accountable", "task", "role", "obligation"),
})

LEXICONS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "positive": POSITIVE_INDICATORS,
    "negative": NEGATIVE_INDICATORS,
    "action": ACTION_WORDS,
})
