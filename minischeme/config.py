from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


def paths_from_env(var: str, defaults: Iterable[Path] = ()) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_paths() -> List[Path]:
    return paths_from_env('MINISCHEME_PRELUDE')


# Each Scheme call costs several Python frames
DEFAULT_RECURSION_LIMIT = 10000


def get_recursion_limit() -> int:
    """Recursion limit from MINISCHEME_RECURSION_LIMIT, else DEFAULT_RECURSION_LIMIT."""
    raw = os.environ.get('MINISCHEME_RECURSION_LIMIT', '').strip()
    if not raw:
        return DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"MINISCHEME_RECURSION_LIMIT must be an integer, got {raw!r}")
    return limit if limit > 0 else DEFAULT_RECURSION_LIMIT


def get_log_level() -> int:
    """
    Determine log level from LOGLEVEL environment variable.
    Defaults to WARNING if not set.
    """
    loglevel_env = os.getenv("LOGLEVEL", "").upper()
    if loglevel_env:
        level = getattr(logging, loglevel_env, None)
        if isinstance(level, int):
            return level
    return logging.WARNING
