from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional

_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_REPL_HOST = "127.0.0.1"
_DEFAULT_REPL_PORT = 8765


def str_from_env(var: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def int_from_env(var: str, default: int) -> int:
    raw = str_from_env(var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_log_level() -> int:
    name = str_from_env("TINYSCHEME_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"TINYSCHEME_LOG_LEVEL: unknown level {name!r}")
    return level


def configure_logging() -> None:
    """Apply TINYSCHEME_LOG_LEVEL to the package logger tree."""
    logging.basicConfig(format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logging.getLogger("tinyscheme").setLevel(get_log_level())


def get_repl_address() -> tuple[str, int]:
    return (
        str_from_env("TINYSCHEME_REPL_HOST", _DEFAULT_REPL_HOST),
        int_from_env("TINYSCHEME_REPL_PORT", _DEFAULT_REPL_PORT),
    )


def get_prelude_path() -> Optional[Path]:
    raw = str_from_env("TINYSCHEME_PRELUDE")
    return Path(raw) if raw else None
