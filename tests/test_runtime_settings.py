from __future__ import annotations

import pytest

from whisper_spell.core.runtime_settings import env_flag, int_env, str_env


def test_env_flag_accepts_common_truthy_values(monkeypatch: pytest.MonkeyPatch) -> None:
    for raw in ("1", "true", "YES", " on "):
        monkeypatch.setenv("WHISPER_SPELL_TEST_FLAG", raw)
        assert env_flag("WHISPER_SPELL_TEST_FLAG") is True
    monkeypatch.setenv("WHISPER_SPELL_TEST_FLAG", "off")
    assert env_flag("WHISPER_SPELL_TEST_FLAG") is False


def test_int_env_clamps_and_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("WHISPER_SPELL_TEST_INT", raising=False)
    assert int_env("WHISPER_SPELL_TEST_INT", 7, minimum=1, maximum=10) == 7
    monkeypatch.setenv("WHISPER_SPELL_TEST_INT", "500")
    assert int_env("WHISPER_SPELL_TEST_INT", 7, minimum=1, maximum=10) == 10
    monkeypatch.setenv("WHISPER_SPELL_TEST_INT", "seven")
    assert int_env("WHISPER_SPELL_TEST_INT", 7, minimum=1, maximum=10) == 7


def test_str_env_treats_blank_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WHISPER_SPELL_TEST_STR", "   ")
    assert str_env("WHISPER_SPELL_TEST_STR", "fallback") == "fallback"
