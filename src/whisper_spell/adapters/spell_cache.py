"""In-memory LRU cache of generated spells keyed by whisper fingerprint."""

from __future__ import annotations

import threading
from collections import OrderedDict

from whisper_spell.core.runtime_settings import int_env
from whisper_spell.core.spell_schema import Spell

DEFAULT_MAX_ENTRIES = 256


def configured_max_entries() -> int:
    return int_env(
        "WHISPER_SPELL_CACHE_MAX_ENTRIES",
        DEFAULT_MAX_ENTRIES,
        minimum=1,
        maximum=100_000,
    )


class InMemorySpellCache:
    """Bounded, process-local spell cache. Not persisted anywhere."""

    def __init__(self, max_entries: int | None = None) -> None:
        self._max_entries = max_entries if max_entries is not None else configured_max_entries()
        if self._max_entries < 1:
            raise ValueError("max_entries must be at least 1.")
        self._entries: OrderedDict[str, Spell] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, fingerprint: str) -> Spell | None:
        with self._lock:
            spell = self._entries.get(fingerprint)
            if spell is not None:
                self._entries.move_to_end(fingerprint)
            return spell

    def put(self, spell: Spell) -> None:
        key = spell.metadata.whisper_fingerprint
        with self._lock:
            self._entries[key] = spell
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
