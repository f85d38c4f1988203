"""Domain models for whisper classification and corpus entries."""

from whisper_spell.domain.models import (
    DEFAULT_INTENT,
    SLOT_KINDS,
    IntentCategory,
    IntentCorpusEntry,
    SlotKind,
    TemplateToken,
    VerseTemplate,
)

__all__ = [
    "DEFAULT_INTENT",
    "IntentCategory",
    "IntentCorpusEntry",
    "SLOT_KINDS",
    "SlotKind",
    "TemplateToken",
    "VerseTemplate",
]
