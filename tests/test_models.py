from __future__ import annotations

from whisper_spell.domain.models import IntentCategory, VerseTemplate


def test_intent_order_defines_tie_break_index() -> None:
    assert [intent.index for intent in IntentCategory] == list(range(8))
    assert IntentCategory.PROTECTION.index == 0
    assert IntentCategory.PASSAGE.value == "passage"


def test_verse_template_parses_slots_and_trailing_punctuation() -> None:
    template = VerseTemplate(
        template_id="binding.9",
        pattern="{temporal}, the {metaphor} is {passive_verb}.",
        fallback="at dusk the wall is kept, the door is held",
    )
    slots = [token for token in template.tokens() if token.slot is not None]
    assert [token.slot for token in slots] == ["temporal", "metaphor", "passive_verb"]
    assert [token.trailing for token in slots] == [",", "", "."]
    assert template.slot_names() == ("temporal", "metaphor", "passive_verb")


def test_unknown_slot_is_kept_as_literal_text() -> None:
    template = VerseTemplate(template_id="x", pattern="the {colour} gate", fallback="")
    assert all(token.slot is None for token in template.tokens())
    assert template.slot_names() == ("colour",)
