"""Seeded ritual step selection."""

from __future__ import annotations

from whisper_spell.core.lexicon import (
    LexiconStore,
    extract_materials,
    extract_timing,
    get_lexicon,
)
from whisper_spell.core.seeding import SeededDraws
from whisper_spell.core.spell_schema import RITUAL_STEP_BOUNDS, Ritual, RitualStep
from whisper_spell.domain.models import IntentCategory


def generate_ritual(
    ritual_seed: int,
    intent: IntentCategory,
    lexicon: LexiconStore | None = None,
) -> Ritual:
    """Pick a step count, sample distinct steps in draw order, then a duration."""
    store = lexicon or get_lexicon()
    corpus = store.entry(intent).ritual_steps
    draws = SeededDraws(ritual_seed)

    step_count = draws.between(*RITUAL_STEP_BOUNDS)
    # Corpus size is guaranteed by lexicon validation at load time.
    chosen = draws.sample(corpus, step_count)
    duration = draws.choice(store.duration_phrases)

    steps = tuple(
        RitualStep(
            order=order,
            action=text,
            materials=extract_materials(text, store),
            timing=extract_timing(text, store),
        )
        for order, text in enumerate(chosen, start=1)
    )
    return Ritual(steps=steps, duration=duration)
