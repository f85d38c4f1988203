from __future__ import annotations

import logging

import pytest

from whisper_spell import generate_spell as exported_generate_spell
from whisper_spell.core.spell_pipeline import (
    SpellGenerationError,
    generate_spell,
    parallel_generators_enabled,
)
from whisper_spell.core.spell_schema import Glyph, Spell
from whisper_spell.domain.models import IntentCategory

_FIXED_CLOCK = "2026-01-01T00:00:00+00:00"


def _fixed_clock() -> str:
    return _FIXED_CLOCK


def test_protective_whisper_produces_protection_spell() -> None:
    spell = generate_spell("protect my home from harm", clock=_fixed_clock)
    assert spell.metadata.intent == IntentCategory.PROTECTION
    assert spell.metadata.generated_at_utc == _FIXED_CLOCK
    assert spell.metadata.schema_version == "spell.v1"
    assert set(spell.glyph.symbols_used) <= {"◯", "═", "║", "⊙"}
    assert spell.glyph.pattern == "cross"
    assert len(spell.glyph.lines) == 7
    assert len(spell.ritual.steps) == 3
    assert len(spell.verse.lines) == 2
    for step in spell.ritual.steps:
        assert step.materials or step.timing
    for line in spell.verse.lines:
        assert not any(char in line.text for char in "!?'")


def test_identical_whispers_give_identical_content() -> None:
    keys = {generate_spell("protect my home from harm").content_key() for _ in range(10)}
    assert len(keys) == 1
    assert generate_spell("keep this memory", clock=_fixed_clock) == generate_spell(
        "keep this memory", clock=_fixed_clock
    )


def test_parallel_and_sequential_modes_agree() -> None:
    for whisper in ("protect my home from harm", "banish the nightmare", "xyz qqq"):
        sequential = generate_spell(whisper, parallel=False, clock=_fixed_clock)
        parallel = generate_spell(whisper, parallel=True, clock=_fixed_clock)
        assert sequential == parallel


def test_varied_whispers_of_one_intent_give_distinct_spells() -> None:
    spells = [generate_spell(f"protect my home {index}") for index in range(50)]
    assert {spell.metadata.intent for spell in spells} == {IntentCategory.PROTECTION}
    assert len({spell.content_key() for spell in spells}) >= 45


def test_every_intent_generates_valid_spells() -> None:
    whispers = {
        IntentCategory.PROTECTION: "guard the children",
        IntentCategory.REVELATION: "show me the hidden truth",
        IntentCategory.BINDING: "bind us with a vow",
        IntentCategory.TRANSFORMATION: "help me transform",
        IntentCategory.SUMMONING: "summon good luck",
        IntentCategory.BANISHMENT: "banish my nightmares",
        IntentCategory.PRESERVATION: "preserve this memory",
        IntentCategory.PASSAGE: "a long journey across the sea",
    }
    for intent, whisper in whispers.items():
        spell = generate_spell(whisper)
        assert spell.metadata.intent == intent, whisper
        assert 3 <= len(spell.glyph.lines) <= 7
        assert 3 <= len(spell.ritual.steps) <= 5
        assert 2 <= len(spell.verse.lines) <= 4


def test_spell_survives_json_round_trip() -> None:
    spell = generate_spell("protect my home from harm", clock=_fixed_clock)
    assert Spell.model_validate(spell.model_dump(mode="json")) == spell


def test_invariant_failure_becomes_generic_generation_error(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(
        "whisper_spell.core.spell_pipeline.generate_glyph",
        lambda seed, intent, store: Glyph(lines=("◯",), symbols_used=("◯",), pattern="line"),
    )
    caplog.set_level(logging.ERROR, logger="whisper_spell.core.spell_pipeline")
    with pytest.raises(SpellGenerationError, match="^Spell generation failed.$"):
        generate_spell("protect my home from harm", parallel=False)
    assert "spell.invariant_violation" in caplog.text
    assert "Glyph line count" in caplog.text


def test_parallel_flag_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("WHISPER_SPELL_PARALLEL_GENERATORS", raising=False)
    assert parallel_generators_enabled() is False
    monkeypatch.setenv("WHISPER_SPELL_PARALLEL_GENERATORS", "true")
    assert parallel_generators_enabled() is True


def test_package_exports_pipeline_entrypoint() -> None:
    assert exported_generate_spell is generate_spell
