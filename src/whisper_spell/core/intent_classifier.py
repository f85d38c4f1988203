"""Keyword-weighted intent classification for normalized whispers."""

from __future__ import annotations

import re

from whisper_spell.core.lexicon import LexiconStore, get_lexicon
from whisper_spell.domain.models import DEFAULT_INTENT, IntentCategory

_TOKEN_RE = re.compile(r"[a-z0-9]+")


def _tokenize(text: str) -> list[str]:
    return _TOKEN_RE.findall(text.lower())


def score_intents(whisper: str, lexicon: LexiconStore | None = None) -> dict[IntentCategory, int]:
    """Sum keyword weights per intent; each keyword counts once."""
    store = lexicon or get_lexicon()
    tokens = _tokenize(whisper)
    scores: dict[IntentCategory, int] = {}
    for intent in IntentCategory:
        total = 0
        for keyword, weight in store.entry(intent).keywords.items():
            if any(keyword in token for token in tokens):
                total += weight
        scores[intent] = total
    return scores


def classify_intent(whisper: str, lexicon: LexiconStore | None = None) -> IntentCategory:
    """Return the highest scoring intent; ties go to the earliest category."""
    scores = score_intents(whisper, lexicon)
    best = DEFAULT_INTENT
    best_score = 0
    for intent in IntentCategory:
        if scores[intent] > best_score:
            best = intent
            best_score = scores[intent]
    return best
