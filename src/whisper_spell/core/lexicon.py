"""Process-wide, read-only lexicon and corpus store with integrity checks."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from functools import cache
from types import MappingProxyType
from typing import Final

from whisper_spell.core import lexicon_data
from whisper_spell.core.spell_schema import VERSE_SYLLABLE_BOUNDS
from whisper_spell.core.syllables import count_line_syllables
from whisper_spell.domain.models import (
    SLOT_KINDS,
    IntentCategory,
    IntentCorpusEntry,
    SlotKind,
    VerseTemplate,
)

logger = logging.getLogger(__name__)

RITUAL_CORPUS_BOUNDS: Final[tuple[int, int]] = (30, 50)
MIN_RITUAL_STEPS_REQUIRED: Final[int] = 5
_BANNED_VERSE_CHARS: Final[frozenset[str]] = frozenset("!?'’")
_KEYWORD_PATTERN = re.compile(r"^[a-z]{3,}$")


class LexiconIntegrityError(RuntimeError):
    """Raised when the corpus cannot support every intent and generator."""


@dataclass(frozen=True)
class LexiconStore:
    """Frozen view over all corpus tables."""

    entries: Mapping[IntentCategory, IntentCorpusEntry]
    slot_words: Mapping[SlotKind, tuple[str, ...]]
    material_tags: tuple[str, ...]
    timing_markers: tuple[str, ...]
    duration_phrases: tuple[str, ...]

    def entry(self, intent: IntentCategory) -> IntentCorpusEntry:
        return self.entries[intent]

    def words(self, kind: SlotKind) -> tuple[str, ...]:
        return self.slot_words[kind]


def build_lexicon(
    *,
    keywords: Mapping[str, Mapping[str, int]] = lexicon_data.INTENT_KEYWORDS,
    symbols: Mapping[str, tuple[str, ...]] = lexicon_data.INTENT_SYMBOLS,
    ritual_steps: Mapping[str, tuple[str, ...]] = lexicon_data.RITUAL_STEPS,
    metaphors: Mapping[str, tuple[str, ...]] = lexicon_data.INTENT_METAPHORS,
    verse_templates: Mapping[
        str, tuple[tuple[str, str, str], ...]
    ] = lexicon_data.VERSE_TEMPLATES,
    slot_words: Mapping[str, tuple[str, ...]] = lexicon_data.SLOT_WORDS,
    material_tags: tuple[str, ...] = lexicon_data.MATERIAL_TAGS,
    timing_markers: tuple[str, ...] = lexicon_data.TIMING_MARKERS,
    duration_phrases: tuple[str, ...] = lexicon_data.DURATION_PHRASES,
) -> LexiconStore:
    """Freeze raw tables into a store. Missing intents raise immediately."""
    entries: dict[IntentCategory, IntentCorpusEntry] = {}
    for intent in IntentCategory:
        key = intent.value
        missing = [
            name
            for name, table in (
                ("keywords", keywords),
                ("symbols", symbols),
                ("ritual_steps", ritual_steps),
                ("metaphors", metaphors),
                ("verse_templates", verse_templates),
            )
            if key not in table
        ]
        if missing:
            raise LexiconIntegrityError(
                f"Intent '{key}' has no corpus entry for: {', '.join(missing)}."
            )
        entries[intent] = IntentCorpusEntry(
            intent=intent,
            keywords=MappingProxyType(dict(keywords[key])),
            symbols=tuple(symbols[key]),
            ritual_steps=tuple(ritual_steps[key]),
            metaphors=tuple(metaphors[key]),
            verse_templates=tuple(
                VerseTemplate(template_id=template_id, pattern=pattern, fallback=fallback)
                for template_id, pattern, fallback in verse_templates[key]
            ),
        )

    frozen_words: dict[SlotKind, tuple[str, ...]] = {}
    for kind in SLOT_KINDS:
        if kind == "metaphor":
            continue
        frozen_words[kind] = tuple(slot_words.get(kind, ()))

    return LexiconStore(
        entries=MappingProxyType(entries),
        slot_words=MappingProxyType(frozen_words),
        material_tags=tuple(material_tags),
        timing_markers=tuple(timing_markers),
        duration_phrases=tuple(duration_phrases),
    )


def lexicon_issues(store: LexiconStore) -> list[str]:
    """Return every integrity problem found in the store."""
    issues: list[str] = []
    if set(store.entries) != set(IntentCategory):
        issues.append("Corpus must define exactly one entry per intent category.")

    for kind, words in store.slot_words.items():
        if not words:
            issues.append(f"Slot word list '{kind}' is empty.")
        for word in words:
            if _has_banned_chars(word):
                issues.append(f"Slot word '{word}' contains forbidden punctuation.")
    if not store.duration_phrases:
        issues.append("Duration phrase list is empty.")
    if not store.material_tags and not store.timing_markers:
        issues.append("Material tags and timing markers are both empty.")

    for intent in IntentCategory:
        entry = store.entries.get(intent)
        if entry is None:
            continue
        issues.extend(_entry_issues(entry, store))
    return issues


def _entry_issues(entry: IntentCorpusEntry, store: LexiconStore) -> list[str]:
    label = entry.intent.value
    issues: list[str] = []

    if not entry.keywords:
        issues.append(f"{label}: keyword set is empty.")
    for keyword, weight in entry.keywords.items():
        if not _KEYWORD_PATTERN.match(keyword):
            issues.append(f"{label}: keyword '{keyword}' must be 3+ lowercase letters.")
        if weight <= 0:
            issues.append(f"{label}: keyword '{keyword}' must have a positive weight.")

    if not entry.symbols:
        issues.append(f"{label}: symbol set is empty.")
    if len(set(entry.symbols)) != len(entry.symbols):
        issues.append(f"{label}: symbol set contains duplicates.")
    for symbol in entry.symbols:
        if len(symbol) != 1 or symbol.isspace():
            issues.append(f"{label}: symbol {symbol!r} must be one visible character.")

    low, high = RITUAL_CORPUS_BOUNDS
    if not low <= len(entry.ritual_steps) <= high:
        issues.append(
            f"{label}: ritual corpus has {len(entry.ritual_steps)} steps, expected {low}-{high}."
        )
    if len(entry.ritual_steps) < MIN_RITUAL_STEPS_REQUIRED:
        issues.append(f"{label}: ritual corpus cannot supply {MIN_RITUAL_STEPS_REQUIRED} steps.")
    normalized_steps = [step.strip().lower() for step in entry.ritual_steps]
    if len(set(normalized_steps)) != len(normalized_steps):
        issues.append(f"{label}: ritual corpus contains duplicate steps.")
    for step in entry.ritual_steps:
        if not extract_materials(step, store) and extract_timing(step, store) is None:
            issues.append(f"{label}: ritual step '{step}' has no material or timing tag.")

    if not entry.metaphors:
        issues.append(f"{label}: metaphor list is empty.")
    for metaphor in entry.metaphors:
        if _has_banned_chars(metaphor):
            issues.append(f"{label}: metaphor '{metaphor}' contains forbidden punctuation.")

    if not entry.verse_templates:
        issues.append(f"{label}: verse template list is empty.")
    for template in entry.verse_templates:
        issues.extend(_template_issues(label, template))
    return issues


def _template_issues(label: str, template: VerseTemplate) -> list[str]:
    issues: list[str] = []
    prefix = f"{label}: template '{template.template_id}'"
    slots = template.slot_names()
    if not slots:
        issues.append(f"{prefix} has no slots.")
    for slot in slots:
        if slot not in SLOT_KINDS:
            issues.append(f"{prefix} uses unknown slot '{slot}'.")
    if _has_banned_chars(template.pattern) or _has_banned_chars(template.fallback):
        issues.append(f"{prefix} contains forbidden punctuation.")
    tokens = template.tokens()
    for current, following in zip(tokens, tokens[1:]):
        if current.slot == "adjective" and following.slot == "adjective":
            issues.append(f"{prefix} stacks two adjectives on one noun.")
    low, high = VERSE_SYLLABLE_BOUNDS
    syllables = count_line_syllables(template.fallback)
    if not low <= syllables <= high:
        issues.append(f"{prefix} fallback has {syllables} syllables, expected {low}-{high}.")
    return issues


def _has_banned_chars(text: str) -> bool:
    return any(char in _BANNED_VERSE_CHARS for char in text)


def extract_materials(text: str, store: LexiconStore) -> tuple[str, ...]:
    """Material tags mentioned as whole words, in tag-list order."""
    lowered = text.lower()
    return tuple(
        tag for tag in store.material_tags if re.search(rf"\b{re.escape(tag)}\b", lowered)
    )


def extract_timing(text: str, store: LexiconStore) -> str | None:
    """First temporal or spatial marker mentioned in the text."""
    lowered = text.lower()
    for marker in store.timing_markers:
        if re.search(rf"\b{re.escape(marker)}\b", lowered):
            return marker
    return None


def validate_lexicon(store: LexiconStore) -> None:
    """Raise ``LexiconIntegrityError`` listing every problem found."""
    issues = lexicon_issues(store)
    if issues:
        raise LexiconIntegrityError("Lexicon integrity check failed:\n" + "\n".join(issues))


def load_lexicon() -> LexiconStore:
    """Build and validate the store from the bundled tables."""
    store = build_lexicon()
    validate_lexicon(store)
    logger.info(
        "lexicon.loaded intents=%s ritual_steps=%s templates=%s",
        len(store.entries),
        sum(len(entry.ritual_steps) for entry in store.entries.values()),
        sum(len(entry.verse_templates) for entry in store.entries.values()),
    )
    return store


@cache
def get_lexicon() -> LexiconStore:
    """Return the process-wide store, loading it on first use."""
    return load_lexicon()
