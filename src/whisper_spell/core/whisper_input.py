"""Whisper preparation for callers that accept raw text."""

from __future__ import annotations

import re
import unicodedata
from typing import Final

MAX_WHISPER_CHARS: Final[int] = 500

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_WHITESPACE = re.compile(r"\s+")


def normalize_whisper(text: str) -> str:
    """NFKC-normalize, strip control characters, collapse spaces and lowercase.

    Raises ``ValueError`` when nothing usable remains or the whisper is longer
    than ``MAX_WHISPER_CHARS``.
    """
    normalized = unicodedata.normalize("NFKC", text)
    normalized = _CONTROL_CHARS.sub(" ", normalized)
    normalized = _WHITESPACE.sub(" ", normalized).strip().lower()
    if not normalized:
        raise ValueError("Whisper must contain at least one visible character.")
    if len(normalized) > MAX_WHISPER_CHARS:
        raise ValueError(f"Whisper must be at most {MAX_WHISPER_CHARS} characters.")
    return normalized
