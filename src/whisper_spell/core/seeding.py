"""Deterministic seed derivation and the seeded draw stream used by generators.

The hash (FNV-1a, 64-bit) and the stream (SplitMix64) are part of the
reproducibility contract: a whisper must map to the same spell on every
run, in every process and in any reimplementation. Both use fixed 64-bit
integer arithmetic only.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from hashlib import sha256
from typing import Final, Literal, TypeVar

from whisper_spell.domain.models import IntentCategory

_MASK64: Final[int] = 0xFFFFFFFFFFFFFFFF
FNV64_OFFSET_BASIS: Final[int] = 0xCBF29CE484222325
FNV64_PRIME: Final[int] = 0x100000001B3
_GOLDEN_GAMMA: Final[int] = 0x9E3779B97F4A7C15

ComponentLabel = Literal["glyph", "ritual", "verse"]
COMPONENT_LABELS: Final[tuple[ComponentLabel, ...]] = ("glyph", "ritual", "verse")

T = TypeVar("T")


def fnv1a_64(payload: bytes) -> int:
    """Return the 64-bit FNV-1a hash of ``payload``."""
    value = FNV64_OFFSET_BASIS
    for byte in payload:
        value ^= byte
        value = (value * FNV64_PRIME) & _MASK64
    return value


def base_seed(whisper: str, intent: IntentCategory) -> int:
    """Derive the base seed for one (whisper, intent) pair."""
    return fnv1a_64(f"{whisper}::{intent.value}".encode("utf-8"))


def sub_seed(seed: int, label: str) -> int:
    """Derive an independent component seed from the base seed."""
    return fnv1a_64(f"{seed & _MASK64:016x}::{label}".encode("ascii"))


@dataclass(frozen=True)
class ComponentSeeds:
    """Per-generator seeds derived from one base seed."""

    glyph: int
    ritual: int
    verse: int


def derive_component_seeds(seed: int) -> ComponentSeeds:
    return ComponentSeeds(
        glyph=sub_seed(seed, "glyph"),
        ritual=sub_seed(seed, "ritual"),
        verse=sub_seed(seed, "verse"),
    )


def whisper_fingerprint(whisper: str, *, length: int = 16) -> str:
    """Stable identifier of a normalized whisper, used as a cache key."""
    digest = sha256(whisper.encode("utf-8")).hexdigest()[:length]
    return f"whisper_{digest}"


class SeededDraws:
    """SplitMix64 draw stream.

    Callers must draw in a fixed order; every helper consumes exactly one
    ``next_u64`` per elementary choice so draw counts stay predictable.
    """

    def __init__(self, seed: int) -> None:
        self._state = seed & _MASK64
        self._draws = 0

    @property
    def draw_count(self) -> int:
        return self._draws

    def next_u64(self) -> int:
        self._state = (self._state + _GOLDEN_GAMMA) & _MASK64
        z = self._state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK64
        self._draws += 1
        return z ^ (z >> 31)

    def below(self, bound: int) -> int:
        """Return an integer in ``[0, bound)``."""
        if bound <= 0:
            raise ValueError("bound must be positive.")
        return self.next_u64() % bound

    def between(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high]`` (inclusive)."""
        if high < low:
            raise ValueError("high must be >= low.")
        return low + self.below(high - low + 1)

    def choice_index(self, items: Sequence[T]) -> int:
        if not items:
            raise ValueError("Cannot choose from an empty sequence.")
        return self.below(len(items))

    def choice(self, items: Sequence[T]) -> T:
        return items[self.choice_index(items)]

    def sample(self, items: Sequence[T], count: int) -> list[T]:
        """Pick ``count`` distinct positions via partial Fisher-Yates, in draw order."""
        if count < 0 or count > len(items):
            raise ValueError("sample count must be within the sequence length.")
        pool = list(items)
        for index in range(count):
            swap_with = index + self.below(len(pool) - index)
            pool[index], pool[swap_with] = pool[swap_with], pool[index]
        return pool[:count]
