"""Deterministic whisper-to-spell generation."""

from whisper_spell.core.intent_classifier import classify_intent
from whisper_spell.core.lexicon import LexiconIntegrityError, get_lexicon
from whisper_spell.core.spell_contracts import SpellInvariantError
from whisper_spell.core.spell_pipeline import SpellGenerationError, generate_spell
from whisper_spell.core.spell_schema import Glyph, Ritual, Spell, SpellMetadata, Verse
from whisper_spell.domain.models import IntentCategory

__all__ = [
    "Glyph",
    "IntentCategory",
    "LexiconIntegrityError",
    "Ritual",
    "Spell",
    "SpellGenerationError",
    "SpellInvariantError",
    "SpellMetadata",
    "Verse",
    "classify_intent",
    "generate_spell",
    "get_lexicon",
]
