"""CLI for casting one whisper into a spell."""

from __future__ import annotations

import argparse
import json

from whisper_spell.adapters.observability import configure_runtime_logging
from whisper_spell.adapters.spell_cache import InMemorySpellCache
from whisper_spell.application.casting import SpellCaster
from whisper_spell.core.lexicon import LexiconIntegrityError
from whisper_spell.core.spell_pipeline import SpellGenerationError
from whisper_spell.core.spell_schema import Spell


def build_arg_parser() -> argparse.ArgumentParser:
    """Define CLI flags for spell generation."""
    parser = argparse.ArgumentParser(description="Turn a whispered intention into a spell.")
    parser.add_argument("whisper", help="Free-text whisper, 1-500 characters.")
    parser.add_argument("--format", choices=["text", "json"], default="text")
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Run the glyph, ritual and verse generators on a thread pool.",
    )
    return parser


def render_spell_text(spell: Spell) -> str:
    lines: list[str] = [f"~ {spell.metadata.intent.value} ~", ""]
    lines.extend(spell.glyph.lines)
    lines.append("")
    for step in spell.ritual.steps:
        lines.append(f"{step.order}. {step.action}")
    lines.append(f"Duration: {spell.ritual.duration}")
    lines.append("")
    lines.extend(line.text for line in spell.verse.lines)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> None:
    configure_runtime_logging()
    parser = build_arg_parser()
    parsed = parser.parse_args(argv)
    try:
        caster = SpellCaster(cache=InMemorySpellCache(), parallel=True if parsed.parallel else None)
    except LexiconIntegrityError as exc:
        raise SystemExit(str(exc)) from exc
    try:
        spell = caster.cast(str(parsed.whisper))
    except ValueError as exc:
        raise SystemExit(f"Invalid whisper: {exc}") from exc
    except SpellGenerationError as exc:
        raise SystemExit("The spell could not be woven. Try again later.") from exc

    if parsed.format == "json":
        print(json.dumps(spell.model_dump(mode="json"), ensure_ascii=False, indent=2))
    else:
        print(render_spell_text(spell))


if __name__ == "__main__":
    main()
