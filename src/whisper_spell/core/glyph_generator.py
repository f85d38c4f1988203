"""Seeded glyph block generation."""

from __future__ import annotations

from typing import Final

from whisper_spell.core.lexicon import LexiconStore, get_lexicon
from whisper_spell.core.seeding import SeededDraws
from whisper_spell.core.spell_schema import (
    GLYPH_LINE_BOUNDS,
    PATTERN_SHAPES,
    Glyph,
    PatternShape,
)
from whisper_spell.domain.models import IntentCategory

# Symbols per row for every (shape, line count). Widths are odd so rows
# joined with single spaces center without a half-cell offset.
GLYPH_PATTERNS: Final[dict[PatternShape, dict[int, tuple[int, ...]]]] = {
    "circle": {
        3: (3, 5, 3),
        4: (3, 5, 5, 3),
        5: (3, 5, 7, 5, 3),
        6: (3, 5, 7, 7, 5, 3),
        7: (3, 5, 7, 7, 7, 5, 3),
    },
    "triangle": {
        3: (1, 3, 5),
        4: (1, 3, 5, 7),
        5: (1, 3, 5, 7, 9),
        6: (1, 3, 5, 7, 9, 11),
        7: (1, 3, 5, 7, 9, 11, 13),
    },
    "line": {
        3: (5, 5, 5),
        4: (5, 5, 5, 5),
        5: (5, 5, 5, 5, 5),
        6: (5, 5, 5, 5, 5, 5),
        7: (5, 5, 5, 5, 5, 5, 5),
    },
    "cross": {
        3: (1, 5, 1),
        4: (1, 5, 1, 1),
        5: (1, 1, 7, 1, 1),
        6: (1, 1, 7, 1, 1, 1),
        7: (1, 1, 1, 7, 1, 1, 1),
    },
}
PAD_CHAR: Final[str] = " "


def center_lines(rows: list[str]) -> tuple[str, ...]:
    """Pad every row with spaces to the width of the widest row."""
    width = max((len(row) for row in rows), default=0)
    centered: list[str] = []
    for row in rows:
        left = (width - len(row)) // 2
        right = width - len(row) - left
        centered.append(f"{PAD_CHAR * left}{row}{PAD_CHAR * right}")
    return tuple(centered)


def generate_glyph(
    glyph_seed: int,
    intent: IntentCategory,
    lexicon: LexiconStore | None = None,
) -> Glyph:
    """Build a glyph: line count, then shape, then one symbol per position."""
    store = lexicon or get_lexicon()
    symbols = store.entry(intent).symbols
    draws = SeededDraws(glyph_seed)

    line_count = draws.between(*GLYPH_LINE_BOUNDS)
    shape = draws.choice(PATTERN_SHAPES)

    rows: list[str] = []
    used: list[str] = []
    for width in GLYPH_PATTERNS[shape][line_count]:
        picked = [draws.choice(symbols) for _ in range(width)]
        for symbol in picked:
            if symbol not in used:
                used.append(symbol)
        rows.append(PAD_CHAR.join(picked))

    return Glyph(lines=center_lines(rows), symbols_used=tuple(used), pattern=shape)
