"""Core spell domain models."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

SlotKind = Literal[
    "temporal",
    "passive_verb",
    "mystical_noun",
    "natural_noun",
    "abstract_noun",
    "elemental_noun",
    "preposition",
    "adjective",
    "metaphor",
]
SLOT_KINDS: tuple[SlotKind, ...] = (
    "temporal",
    "passive_verb",
    "mystical_noun",
    "natural_noun",
    "abstract_noun",
    "elemental_noun",
    "preposition",
    "adjective",
    "metaphor",
)

_SLOT_TOKEN = re.compile(r"^\{(?P<kind>[a-z_]+)\}(?P<trail>[,.;:]?)$")


class IntentCategory(StrEnum):
    """Closed set of whisper intents; member order is the tie-break order."""

    PROTECTION = "protection"
    REVELATION = "revelation"
    BINDING = "binding"
    TRANSFORMATION = "transformation"
    SUMMONING = "summoning"
    BANISHMENT = "banishment"
    PRESERVATION = "preservation"
    PASSAGE = "passage"

    @property
    def index(self) -> int:
        return list(IntentCategory).index(self)


DEFAULT_INTENT = IntentCategory.REVELATION


@dataclass(frozen=True)
class TemplateToken:
    """One token of a verse template: either fixed text or a slot."""

    text: str
    slot: SlotKind | None = None
    trailing: str = ""


@dataclass(frozen=True)
class VerseTemplate:
    """A verse line template with its pre-authored compliant fallback."""

    template_id: str
    pattern: str
    fallback: str

    def tokens(self) -> tuple[TemplateToken, ...]:
        parsed: list[TemplateToken] = []
        for raw in self.pattern.split():
            match = _SLOT_TOKEN.match(raw)
            if match is None:
                parsed.append(TemplateToken(text=raw))
                continue
            kind = match.group("kind")
            parsed.append(
                TemplateToken(
                    text=raw,
                    slot=kind if kind in SLOT_KINDS else None,  # type: ignore[arg-type]
                    trailing=match.group("trail") or "",
                )
            )
        return tuple(parsed)

    def slot_names(self) -> tuple[str, ...]:
        return tuple(
            match.group("kind")
            for match in (_SLOT_TOKEN.match(raw) for raw in self.pattern.split())
            if match is not None
        )


@dataclass(frozen=True)
class IntentCorpusEntry:
    """Everything the generators may draw from for one intent."""

    intent: IntentCategory
    keywords: Mapping[str, int]
    symbols: tuple[str, ...]
    ritual_steps: tuple[str, ...]
    metaphors: tuple[str, ...]
    verse_templates: tuple[VerseTemplate, ...]
