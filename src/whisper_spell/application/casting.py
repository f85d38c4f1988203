"""Casting service that layers an optional cache over the spell pipeline."""

from __future__ import annotations

import logging
from typing import Protocol

from whisper_spell.core.lexicon import get_lexicon
from whisper_spell.core.seeding import whisper_fingerprint
from whisper_spell.core.spell_pipeline import generate_spell
from whisper_spell.core.spell_schema import Spell
from whisper_spell.core.whisper_input import normalize_whisper

logger = logging.getLogger(__name__)


class SpellCache(Protocol):
    """Holds already generated spells keyed by whisper fingerprint."""

    def get(self, fingerprint: str) -> Spell | None:
        ...

    def put(self, spell: Spell) -> None:
        ...


class SpellCaster:
    """Prepares raw whispers and serves spells, reusing cached ones.

    Construction loads and validates the lexicon, so a broken corpus raises
    ``LexiconIntegrityError`` before any whisper is served.
    """

    def __init__(self, cache: SpellCache | None = None, *, parallel: bool | None = None) -> None:
        self._cache = cache
        self._parallel = parallel
        self._lexicon = get_lexicon()

    def cast(self, raw_whisper: str) -> Spell:
        whisper = normalize_whisper(raw_whisper)
        fingerprint = whisper_fingerprint(whisper)
        if self._cache is not None:
            cached = self._cache.get(fingerprint)
            if cached is not None:
                logger.info("cache.hit fingerprint=%s", fingerprint)
                return cached
        spell = generate_spell(whisper, lexicon=self._lexicon, parallel=self._parallel)
        if self._cache is not None:
            self._cache.put(spell)
        return spell
