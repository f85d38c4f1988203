"""Seeded, syllable-bounded verse generation."""

from __future__ import annotations

from dataclasses import dataclass

from whisper_spell.core.lexicon import LexiconStore, get_lexicon
from whisper_spell.core.seeding import SeededDraws
from whisper_spell.core.spell_schema import (
    VERSE_LINE_BOUNDS,
    VERSE_SYLLABLE_BOUNDS,
    Verse,
    VerseLine,
)
from whisper_spell.core.syllables import count_line_syllables
from whisper_spell.domain.models import IntentCategory, SlotKind, VerseTemplate


@dataclass
class _SlotFill:
    kind: SlotKind
    index: int
    trailing: str


def _distance(total: int) -> int:
    low, high = VERSE_SYLLABLE_BOUNDS
    if total < low:
        return low - total
    if total > high:
        return total - high
    return 0


def _capitalize(text: str) -> str:
    for position, char in enumerate(text):
        if char.isalpha():
            return text[:position] + char.upper() + text[position + 1 :]
    return text


def _render(
    template: VerseTemplate,
    fills: list[_SlotFill],
    metaphor: str,
    store: LexiconStore,
) -> str:
    parts: list[str] = []
    slot_position = 0
    for token in template.tokens():
        if token.slot is None:
            parts.append(token.text)
            continue
        fill = fills[slot_position]
        slot_position += 1
        word = metaphor if fill.kind == "metaphor" else store.words(fill.kind)[fill.index]
        parts.append(f"{word}{fill.trailing}")
    return " ".join(parts)


def _fit_line(
    template: VerseTemplate,
    fills: list[_SlotFill],
    metaphor: str,
    store: LexiconStore,
) -> VerseLine:
    """Swap slot words in a fixed rotation order until the line is in bounds."""
    text = _render(template, fills, metaphor, store)
    total = count_line_syllables(text)
    if _distance(total) == 0:
        return VerseLine(text=_capitalize(text), syllables=total, template_id=template.template_id)

    for fill in fills:
        if fill.kind == "metaphor":
            continue
        pool = store.words(fill.kind)
        current = count_line_syllables(pool[fill.index])
        best_index = fill.index
        best_total = total
        for step in range(1, len(pool)):
            candidate = (fill.index + step) % len(pool)
            candidate_total = total - current + count_line_syllables(pool[candidate])
            if _distance(candidate_total) < _distance(best_total):
                best_index = candidate
                best_total = candidate_total
            if _distance(candidate_total) == 0:
                break
        fill.index = best_index
        total = best_total
        if _distance(total) == 0:
            text = _render(template, fills, metaphor, store)
            return VerseLine(
                text=_capitalize(text),
                syllables=count_line_syllables(text),
                template_id=template.template_id,
            )

    return VerseLine(
        text=_capitalize(template.fallback),
        syllables=count_line_syllables(template.fallback),
        template_id=template.template_id,
        used_fallback=True,
    )


def generate_verse(
    verse_seed: int,
    intent: IntentCategory,
    lexicon: LexiconStore | None = None,
) -> Verse:
    """Line count, metaphor, then per line: template, then one word per slot."""
    store = lexicon or get_lexicon()
    entry = store.entry(intent)
    draws = SeededDraws(verse_seed)

    line_count = draws.between(*VERSE_LINE_BOUNDS)
    metaphor = draws.choice(entry.metaphors)

    lines: list[VerseLine] = []
    for _ in range(line_count):
        template = draws.choice(entry.verse_templates)
        fills: list[_SlotFill] = []
        for token in template.tokens():
            if token.slot is None:
                continue
            if token.slot == "metaphor":
                fills.append(_SlotFill(kind="metaphor", index=0, trailing=token.trailing))
                continue
            index = draws.choice_index(store.words(token.slot))
            fills.append(_SlotFill(kind=token.slot, index=index, trailing=token.trailing))
        lines.append(_fit_line(template, fills, metaphor, store))

    return Verse(lines=tuple(lines), metaphor=metaphor)
