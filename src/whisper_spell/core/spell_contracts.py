"""Validation helpers that enforce spell component contracts."""

from __future__ import annotations

from dataclasses import dataclass

from whisper_spell.core.spell_schema import (
    GLYPH_LINE_BOUNDS,
    PATTERN_SHAPES,
    RITUAL_STEP_BOUNDS,
    VERSE_LINE_BOUNDS,
    VERSE_SYLLABLE_BOUNDS,
    Glyph,
    Ritual,
    Verse,
)
from whisper_spell.core.syllables import count_line_syllables


class SpellInvariantError(RuntimeError):
    """Raised when a generator produced a structurally invalid component."""


@dataclass(frozen=True)
class PipelineStageContract:
    """Track one pipeline stage input/output contract boundary."""

    stage_id: str
    inputs: tuple[str, ...]
    outputs: tuple[str, ...]
    validator_functions: tuple[str, ...]
    description: str


PIPELINE_STAGE_CONTRACTS: tuple[PipelineStageContract, ...] = (
    PipelineStageContract(
        stage_id="intent.classify",
        inputs=("str",),
        outputs=("IntentCategory",),
        validator_functions=(),
        description="Total keyword classification with a fixed default intent.",
    ),
    PipelineStageContract(
        stage_id="seed.derive",
        inputs=("str", "IntentCategory"),
        outputs=("ComponentSeeds",),
        validator_functions=(),
        description="FNV-1a base seed and per-component sub-seeds.",
    ),
    PipelineStageContract(
        stage_id="glyph.generate",
        inputs=("int", "IntentCategory"),
        outputs=("Glyph",),
        validator_functions=("validate_glyph",),
        description="Seeded symbol block centered on a common axis.",
    ),
    PipelineStageContract(
        stage_id="ritual.generate",
        inputs=("int", "IntentCategory"),
        outputs=("Ritual",),
        validator_functions=("validate_ritual",),
        description="Distinct ritual steps sampled without replacement.",
    ),
    PipelineStageContract(
        stage_id="verse.generate",
        inputs=("int", "IntentCategory"),
        outputs=("Verse",),
        validator_functions=("validate_verse",),
        description="Template verse lines held inside syllable bounds.",
    ),
    PipelineStageContract(
        stage_id="spell.assemble",
        inputs=("Glyph", "Ritual", "Verse"),
        outputs=("Spell",),
        validator_functions=("validate_glyph", "validate_ritual", "validate_verse"),
        description="Stamp metadata onto validated components.",
    ),
)


def registered_pipeline_stage_contracts() -> tuple[PipelineStageContract, ...]:
    """Return the tracked stage-level pipeline contract registry."""
    return PIPELINE_STAGE_CONTRACTS


def _assert_bounds(value: int, bounds: tuple[int, int], *, label: str) -> None:
    low, high = bounds
    if not low <= value <= high:
        raise SpellInvariantError(f"{label} must be within [{low}, {high}], got {value}.")


def validate_glyph(glyph: Glyph) -> None:
    """Validate glyph line count, alignment and symbol bookkeeping."""
    _assert_bounds(len(glyph.lines), GLYPH_LINE_BOUNDS, label="Glyph line count")
    if glyph.pattern not in PATTERN_SHAPES:
        raise SpellInvariantError(f"Unknown glyph pattern '{glyph.pattern}'.")
    widths = {len(line) for line in glyph.lines}
    if len(widths) != 1:
        raise SpellInvariantError("Glyph lines must share one centered width.")
    if any(not line.strip() for line in glyph.lines):
        raise SpellInvariantError("Glyph lines must contain at least one symbol.")
    drawn = {char for line in glyph.lines for char in line if not char.isspace()}
    if drawn != set(glyph.symbols_used):
        raise SpellInvariantError("Glyph symbols_used must match the symbols drawn.")


def validate_ritual(ritual: Ritual) -> None:
    """Validate ritual step count, order and uniqueness."""
    _assert_bounds(len(ritual.steps), RITUAL_STEP_BOUNDS, label="Ritual step count")
    orders = [step.order for step in ritual.steps]
    if orders != list(range(1, len(orders) + 1)):
        raise SpellInvariantError("Ritual step order must be a contiguous 1..N sequence.")
    actions = [step.action.strip().lower() for step in ritual.steps]
    if len(set(actions)) != len(actions):
        raise SpellInvariantError("Ritual steps must not repeat an action.")


def validate_verse(verse: Verse) -> None:
    """Validate verse line count and per-line syllable annotations."""
    _assert_bounds(len(verse.lines), VERSE_LINE_BOUNDS, label="Verse line count")
    for line in verse.lines:
        _assert_bounds(line.syllables, VERSE_SYLLABLE_BOUNDS, label="Verse line syllables")
        if count_line_syllables(line.text) != line.syllables:
            raise SpellInvariantError("Verse syllable annotation does not match its line.")
        if any(char in line.text for char in "!?'"):
            raise SpellInvariantError("Verse lines must not contain ! ? or contractions.")
