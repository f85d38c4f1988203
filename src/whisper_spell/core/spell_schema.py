"""Canonical spell schema shared by generators, assembler and callers."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Final, Literal

from pydantic import BaseModel, ConfigDict, Field

from whisper_spell.domain.models import IntentCategory

SPELL_SCHEMA_VERSION: Final[Literal["spell.v1"]] = "spell.v1"

PatternShape = Literal["circle", "triangle", "line", "cross"]
PATTERN_SHAPES: Final[tuple[PatternShape, ...]] = ("circle", "triangle", "line", "cross")

GLYPH_LINE_BOUNDS: Final[tuple[int, int]] = (3, 7)
RITUAL_STEP_BOUNDS: Final[tuple[int, int]] = (3, 5)
VERSE_LINE_BOUNDS: Final[tuple[int, int]] = (2, 4)
VERSE_SYLLABLE_BOUNDS: Final[tuple[int, int]] = (8, 12)


def utc_now_iso() -> str:
    """Return current UTC timestamp in ISO-8601 form."""
    return datetime.now(UTC).isoformat()


class SchemaModel(BaseModel):
    """Strict, immutable model configuration for spell values."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class Glyph(SchemaModel):
    """Symbolic block centered on a common axis."""

    lines: tuple[str, ...]
    symbols_used: tuple[str, ...]
    pattern: PatternShape

    @property
    def width(self) -> int:
        return max((len(line) for line in self.lines), default=0)


class RitualStep(SchemaModel):
    """One ceremonial step with the tags read from its text."""

    order: int = Field(ge=1)
    action: str = Field(min_length=1)
    materials: tuple[str, ...] = ()
    timing: str | None = None


class Ritual(SchemaModel):
    """Ordered step list plus how long the ritual lasts."""

    steps: tuple[RitualStep, ...]
    duration: str = Field(min_length=1)


class VerseLine(SchemaModel):
    """One verse line annotated with its syllable count."""

    text: str = Field(min_length=1)
    syllables: int = Field(ge=0)
    template_id: str = Field(min_length=1)
    used_fallback: bool = False


class Verse(SchemaModel):
    """Short syllable-bounded verse."""

    lines: tuple[VerseLine, ...]
    metaphor: str = Field(min_length=1)


class SpellMetadata(SchemaModel):
    """Stamp applied by the assembler."""

    intent: IntentCategory
    generated_at_utc: str = Field(default_factory=utc_now_iso)
    whisper_fingerprint: str = Field(min_length=1)
    schema_version: Literal["spell.v1"] = SPELL_SCHEMA_VERSION


class Spell(SchemaModel):
    """Immutable aggregate returned for one whisper."""

    glyph: Glyph
    ritual: Ritual
    verse: Verse
    metadata: SpellMetadata

    def content_key(self) -> tuple[tuple[str, ...], tuple[str, ...], str, tuple[str, ...]]:
        """Generated content without the timestamp, for equality checks."""
        return (
            self.glyph.lines,
            tuple(step.action for step in self.ritual.steps),
            self.ritual.duration,
            tuple(line.text for line in self.verse.lines),
        )
