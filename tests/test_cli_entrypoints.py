from __future__ import annotations

import json
import runpy

import pytest

from whisper_spell.cli import cast, lexicon_check
from whisper_spell.core.lexicon import LexiconIntegrityError
from whisper_spell.core.spell_pipeline import SpellGenerationError, generate_spell


@pytest.fixture(autouse=True)
def _quiet_runtime_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("whisper_spell.cli.cast.configure_runtime_logging", lambda: None)


def test_cast_main_prints_text_spell(capsys: pytest.CaptureFixture[str]) -> None:
    cast.main(["protect my home from harm"])
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "~ protection ~"
    assert "1. " in out
    assert "Duration: " in out
    assert "4. " not in out


def test_cast_main_prints_json_spell(capsys: pytest.CaptureFixture[str]) -> None:
    cast.main(["protect my home from harm", "--format", "json", "--parallel"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["metadata"]["intent"] == "protection"
    assert payload["metadata"]["schema_version"] == "spell.v1"
    assert len(payload["glyph"]["lines"]) == 7
    assert len(payload["ritual"]["steps"]) == 3


def test_cast_main_rejects_blank_whisper() -> None:
    with pytest.raises(SystemExit, match="Invalid whisper"):
        cast.main(["   "])


def test_cast_main_hides_generation_details(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_generate(whisper: str, **kwargs: object) -> None:
        raise SpellGenerationError("Spell generation failed.")

    monkeypatch.setattr("whisper_spell.application.casting.generate_spell", failing_generate)
    with pytest.raises(SystemExit, match="could not be woven"):
        cast.main(["protect my home from harm"])


def test_render_spell_text_orders_sections() -> None:
    spell = generate_spell("bind us with a vow")
    text = cast.render_spell_text(spell)
    glyph_at = text.index(spell.glyph.lines[0])
    ritual_at = text.index(f"1. {spell.ritual.steps[0].action}")
    verse_at = text.index(spell.verse.lines[0].text)
    assert glyph_at < ritual_at < verse_at


def test_lexicon_check_main_reports_counts(capsys: pytest.CaptureFixture[str]) -> None:
    lexicon_check.main([])
    out = capsys.readouterr().out
    assert "protection: keywords=" in out
    assert "lexicon checks passed" in out


def test_lexicon_check_main_fails_on_issues(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "whisper_spell.cli.lexicon_check.lexicon_issues",
        lambda store: ["passage: metaphor list is empty."],
    )
    with pytest.raises(SystemExit, match="metaphor list is empty"):
        lexicon_check.main(["--quiet"])


def test_package_main_module_executes_cli_main(monkeypatch: pytest.MonkeyPatch) -> None:
    called = {"value": False}

    def fake_main() -> None:
        called["value"] = True

    monkeypatch.setattr("whisper_spell.cli.cast.main", fake_main)
    runpy.run_module("whisper_spell.__main__", run_name="__main__")
    assert called["value"] is True


def test_cast_main_refuses_to_run_with_broken_lexicon(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_lexicon() -> None:
        raise LexiconIntegrityError("Lexicon integrity check failed:\npassage: no metaphors.")

    monkeypatch.setattr("whisper_spell.application.casting.get_lexicon", broken_lexicon)
    with pytest.raises(SystemExit, match="Lexicon integrity check failed"):
        cast.main(["protect my home from harm"])
