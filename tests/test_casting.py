from __future__ import annotations

import logging

import pytest

from whisper_spell.adapters.spell_cache import InMemorySpellCache
from whisper_spell.application.casting import SpellCaster
from whisper_spell.core.lexicon import LexiconIntegrityError
from whisper_spell.core.spell_pipeline import generate_spell
from whisper_spell.domain.models import IntentCategory


def test_caster_normalizes_raw_whisper_before_generation() -> None:
    spell = SpellCaster().cast("  PROTECT my\thome   from HARM ")
    expected = generate_spell("protect my home from harm")
    assert spell.metadata.intent == IntentCategory.PROTECTION
    assert spell.content_key() == expected.content_key()
    assert spell.metadata.whisper_fingerprint == expected.metadata.whisper_fingerprint


def test_caster_reuses_cached_spell(caplog: pytest.LogCaptureFixture) -> None:
    cache = InMemorySpellCache(max_entries=8)
    caster = SpellCaster(cache=cache)
    first = caster.cast("summon good luck")
    caplog.set_level(logging.INFO, logger="whisper_spell.application.casting")
    second = caster.cast("Summon  good LUCK")
    assert second is first
    assert len(cache) == 1
    assert "cache.hit" in caplog.text


def test_caster_rejects_invalid_whisper() -> None:
    with pytest.raises(ValueError):
        SpellCaster().cast("\n\n")


def test_caster_validates_lexicon_before_serving(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_lexicon() -> None:
        raise LexiconIntegrityError("Intent 'passage' has no corpus entry for: keywords.")

    monkeypatch.setattr("whisper_spell.application.casting.get_lexicon", broken_lexicon)
    with pytest.raises(LexiconIntegrityError, match="passage"):
        SpellCaster()
