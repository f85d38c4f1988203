"""Combine validated components into one immutable spell."""

from __future__ import annotations

from whisper_spell.core.spell_contracts import validate_glyph, validate_ritual, validate_verse
from whisper_spell.core.spell_schema import (
    Glyph,
    Ritual,
    Spell,
    SpellMetadata,
    Verse,
    utc_now_iso,
)
from whisper_spell.domain.models import IntentCategory


def assemble_spell(
    glyph: Glyph,
    ritual: Ritual,
    verse: Verse,
    *,
    intent: IntentCategory,
    whisper_fingerprint: str,
    generated_at_utc: str | None = None,
) -> Spell:
    """Validate each component and stamp metadata. Raises ``SpellInvariantError``."""
    validate_glyph(glyph)
    validate_ritual(ritual)
    validate_verse(verse)
    metadata = SpellMetadata(
        intent=intent,
        generated_at_utc=generated_at_utc or utc_now_iso(),
        whisper_fingerprint=whisper_fingerprint,
    )
    return Spell(glyph=glyph, ritual=ritual, verse=verse, metadata=metadata)
