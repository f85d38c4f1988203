"""CLI that runs the corpus integrity check used at startup."""

from __future__ import annotations

import argparse

from whisper_spell.core.lexicon import LexiconIntegrityError, build_lexicon, lexicon_issues


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate that every intent has a complete, well-formed corpus."
    )
    parser.add_argument("--quiet", action="store_true", help="Only report failures.")
    return parser


def main(argv: list[str] | None = None) -> None:
    parsed = build_arg_parser().parse_args(argv)
    try:
        store = build_lexicon()
    except LexiconIntegrityError as exc:
        raise SystemExit(str(exc)) from exc
    issues = lexicon_issues(store)
    if issues:
        raise SystemExit("\n".join(issues))
    if parsed.quiet:
        return
    for intent, entry in store.entries.items():
        print(
            f"{intent.value}: keywords={len(entry.keywords)} symbols={len(entry.symbols)} "
            f"ritual_steps={len(entry.ritual_steps)} templates={len(entry.verse_templates)}"
        )
    print("lexicon checks passed")


if __name__ == "__main__":
    main()
