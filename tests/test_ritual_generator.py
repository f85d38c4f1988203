from __future__ import annotations

from whisper_spell.core.lexicon import get_lexicon
from whisper_spell.core.ritual_generator import generate_ritual
from whisper_spell.core.spell_contracts import validate_ritual
from whisper_spell.domain.models import IntentCategory


def test_rituals_draw_distinct_tagged_steps_from_intent_corpus() -> None:
    store = get_lexicon()
    for intent in IntentCategory:
        corpus = set(store.entry(intent).ritual_steps)
        for seed in range(60):
            ritual = generate_ritual(seed * 104729 + intent.index, intent)
            validate_ritual(ritual)
            actions = [step.action for step in ritual.steps]
            assert 3 <= len(actions) <= 5
            assert len(set(actions)) == len(actions)
            assert set(actions) <= corpus
            assert [step.order for step in ritual.steps] == list(range(1, len(actions) + 1))
            assert all(step.materials or step.timing for step in ritual.steps)
            assert ritual.duration in store.duration_phrases


def test_same_seed_gives_same_ritual() -> None:
    first = generate_ritual(0x01ADD3EAD8403E0C, IntentCategory.PROTECTION)
    second = generate_ritual(0x01ADD3EAD8403E0C, IntentCategory.PROTECTION)
    assert first == second
    assert len(first.steps) == 3


def test_step_counts_span_full_range() -> None:
    counts = {len(generate_ritual(seed, IntentCategory.PASSAGE).steps) for seed in range(200)}
    assert counts == {3, 4, 5}
