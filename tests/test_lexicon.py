from __future__ import annotations

import pytest

from whisper_spell.core.lexicon import (
    LexiconIntegrityError,
    build_lexicon,
    extract_materials,
    extract_timing,
    get_lexicon,
    lexicon_issues,
    load_lexicon,
    validate_lexicon,
)
from whisper_spell.core.lexicon_data import INTENT_KEYWORDS, RITUAL_STEPS, VERSE_TEMPLATES
from whisper_spell.domain.models import IntentCategory


def test_bundled_lexicon_passes_integrity_checks() -> None:
    store = load_lexicon()
    assert lexicon_issues(store) == []
    assert set(store.entries) == set(IntentCategory)
    for entry in store.entries.values():
        assert 30 <= len(entry.ritual_steps) <= 50
        assert entry.symbols
        assert entry.verse_templates


def test_get_lexicon_returns_one_shared_store() -> None:
    assert get_lexicon() is get_lexicon()


def test_store_tables_are_read_only() -> None:
    store = build_lexicon()
    with pytest.raises(TypeError):
        passage = store.entry(IntentCategory.PASSAGE)
        store.entries[IntentCategory.PROTECTION] = passage  # type: ignore[index]
    with pytest.raises(TypeError):
        store.entry(IntentCategory.BINDING).keywords["bind"] = 99  # type: ignore[index]


def test_missing_intent_fails_at_build_time() -> None:
    keywords = {key: value for key, value in INTENT_KEYWORDS.items() if key != "passage"}
    with pytest.raises(LexiconIntegrityError, match="passage"):
        build_lexicon(keywords=keywords)


def test_short_ritual_corpus_is_reported() -> None:
    store = build_lexicon(
        ritual_steps={**RITUAL_STEPS, "protection": RITUAL_STEPS["protection"][:10]}
    )
    issues = lexicon_issues(store)
    assert any("protection: ritual corpus has 10 steps" in issue for issue in issues)
    with pytest.raises(LexiconIntegrityError, match="ritual corpus"):
        validate_lexicon(store)


def test_untagged_ritual_step_is_reported() -> None:
    steps = (*RITUAL_STEPS["binding"][:-1], "Hum softly with closed eyes")
    store = build_lexicon(ritual_steps={**RITUAL_STEPS, "binding": steps})
    issues = lexicon_issues(store)
    assert issues == [
        "binding: ritual step 'Hum softly with closed eyes' has no material or timing tag."
    ]


def test_template_problems_are_reported() -> None:
    templates = {
        **VERSE_TEMPLATES,
        "passage": (
            (
                "passage.x",
                "the {adjective} {adjective} {natural_noun} is {passive_verb}",
                "the road is kept",
            ),
            (
                "passage.y",
                "where does the {metaphor} lead?",
                "at dusk the wall is kept, the door is held",
            ),
        ),
    }
    issues = lexicon_issues(build_lexicon(verse_templates=templates))
    assert any("'passage.x' stacks two adjectives" in issue for issue in issues)
    assert any("'passage.x' fallback has 4 syllables" in issue for issue in issues)
    assert any("'passage.y' contains forbidden punctuation" in issue for issue in issues)


def test_material_and_timing_extraction_use_whole_words() -> None:
    store = get_lexicon()
    step = "Scatter a line of salt across the threshold at dusk"
    assert extract_materials(step, store) == ("salt",)
    assert extract_timing(step, store) == "at dusk"
    assert extract_materials("Walk past the saltmarsh", store) == ()
    assert extract_timing("Walk past the saltmarsh", store) is None
