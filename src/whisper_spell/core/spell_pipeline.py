"""End-to-end whisper-to-spell pipeline orchestration."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

from whisper_spell.core.glyph_generator import generate_glyph
from whisper_spell.core.intent_classifier import classify_intent
from whisper_spell.core.lexicon import LexiconStore, get_lexicon
from whisper_spell.core.ritual_generator import generate_ritual
from whisper_spell.core.runtime_settings import env_flag
from whisper_spell.core.seeding import (
    ComponentSeeds,
    base_seed,
    derive_component_seeds,
    whisper_fingerprint,
)
from whisper_spell.core.spell_assembler import assemble_spell
from whisper_spell.core.spell_contracts import SpellInvariantError
from whisper_spell.core.spell_schema import Glyph, Ritual, Spell, Verse, utc_now_iso
from whisper_spell.core.verse_generator import generate_verse
from whisper_spell.domain.models import IntentCategory

logger = logging.getLogger(__name__)


class SpellGenerationError(RuntimeError):
    """Generic per-request failure; details are only written to the log."""


def parallel_generators_enabled() -> bool:
    """Whether generators run on a thread pool by default."""
    return env_flag("WHISPER_SPELL_PARALLEL_GENERATORS")


def generate_components(
    seeds: ComponentSeeds,
    intent: IntentCategory,
    store: LexiconStore,
    *,
    parallel: bool = False,
) -> tuple[Glyph, Ritual, Verse]:
    """Run the three independent generators, sequentially or on a thread pool."""
    if not parallel:
        return (
            generate_glyph(seeds.glyph, intent, store),
            generate_ritual(seeds.ritual, intent, store),
            generate_verse(seeds.verse, intent, store),
        )
    with ThreadPoolExecutor(max_workers=3) as executor:
        glyph_future = executor.submit(generate_glyph, seeds.glyph, intent, store)
        ritual_future = executor.submit(generate_ritual, seeds.ritual, intent, store)
        verse_future = executor.submit(generate_verse, seeds.verse, intent, store)
        return glyph_future.result(), ritual_future.result(), verse_future.result()


def generate_spell(
    whisper: str,
    *,
    lexicon: LexiconStore | None = None,
    parallel: bool | None = None,
    clock: Callable[[], str] | None = None,
) -> Spell:
    """Turn one normalized whisper into a spell.

    The whisper is expected to be sanitized and lowercased already; it is
    not re-validated here. Identical whispers yield identical spell
    content, whichever execution mode is used.
    """
    store = lexicon or get_lexicon()
    run_parallel = parallel_generators_enabled() if parallel is None else parallel
    fingerprint = whisper_fingerprint(whisper)
    started = time.perf_counter()
    logger.info(
        "spell.start fingerprint=%s chars=%s parallel=%s",
        fingerprint,
        len(whisper),
        run_parallel,
    )

    intent = classify_intent(whisper, store)
    seeds = derive_component_seeds(base_seed(whisper, intent))
    glyph, ritual, verse = generate_components(seeds, intent, store, parallel=run_parallel)

    try:
        spell = assemble_spell(
            glyph,
            ritual,
            verse,
            intent=intent,
            whisper_fingerprint=fingerprint,
            generated_at_utc=(clock or utc_now_iso)(),
        )
    except SpellInvariantError as exc:
        logger.error(
            "spell.invariant_violation fingerprint=%s intent=%s detail=%s",
            fingerprint,
            intent.value,
            exc,
        )
        raise SpellGenerationError("Spell generation failed.") from exc

    logger.info(
        "spell.complete fingerprint=%s intent=%s glyph_lines=%s ritual_steps=%s "
        "verse_lines=%s elapsed_ms=%.3f",
        fingerprint,
        intent.value,
        len(spell.glyph.lines),
        len(spell.ritual.steps),
        len(spell.verse.lines),
        (time.perf_counter() - started) * 1000.0,
    )
    return spell
