"""Process logging setup for the spell CLIs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path

from whisper_spell.core.runtime_settings import int_env, str_env

DEFAULT_LOG_PATH = "work/logs/whisper_spell.log"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_CONFIGURED = False


@dataclass(frozen=True)
class LoggingSettings:
    level: int
    log_path: Path
    max_bytes: int
    backup_count: int

    @classmethod
    def from_env(cls) -> LoggingSettings:
        level_name = str_env("WHISPER_SPELL_LOG_LEVEL", "INFO").upper()
        return cls(
            level=getattr(logging, level_name, logging.INFO),
            log_path=Path(str_env("WHISPER_SPELL_LOG_PATH", DEFAULT_LOG_PATH)),
            max_bytes=int_env(
                "WHISPER_SPELL_LOG_MAX_BYTES",
                5 * 1024 * 1024,
                minimum=64 * 1024,
                maximum=100 * 1024 * 1024,
            ),
            backup_count=int_env("WHISPER_SPELL_LOG_BACKUP_COUNT", 10, minimum=1, maximum=120),
        )


def configure_runtime_logging(settings: LoggingSettings | None = None) -> None:
    """Install console and rotating-file handlers on the root logger, once."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    resolved = settings or LoggingSettings.from_env()
    resolved.log_path.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")

    console = logging.StreamHandler()
    rotating = RotatingFileHandler(
        filename=resolved.log_path,
        maxBytes=resolved.max_bytes,
        backupCount=resolved.backup_count,
        encoding="utf-8",
    )
    for handler in (console, rotating):
        handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(resolved.level)
    root.handlers.clear()
    root.addHandler(console)
    root.addHandler(rotating)
    logging.getLogger(__name__).debug(
        "logging.configured path=%s max_bytes=%s backups=%s",
        resolved.log_path,
        resolved.max_bytes,
        resolved.backup_count,
    )
    _CONFIGURED = True
