from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, Optional

BASE_DIR = Path(__file__).resolve().parent.parent
PARSING_DIR = Path(__file__).resolve().parent / "parsing"

DEFAULT_NO_DEFINITION_FILE = PARSING_DIR / "no_definition_headwords.txt"


def _resolve_path(env_value: str) -> Path:
    candidate = Path(env_value).expanduser()
    if not candidate.is_absolute():
        return (BASE_DIR / candidate).resolve()
    return candidate.resolve()


def default_data_dir() -> Path:
    env_value = os.getenv("CREGEEN_DATA_DIR")
    if env_value:
        return _resolve_path(env_value)
    return (BASE_DIR / "data").resolve()


def no_definition_file() -> Path:
    env_value = os.getenv("CREGEEN_NO_DEFINITION_FILE")
    if env_value:
        return _resolve_path(env_value)
    return DEFAULT_NO_DEFINITION_FILE


def load_headword_list(path: Path) -> FrozenSet[str]:
    """Read one headword per line, skipping blank lines and ``#`` comments."""
    words = set()
    for line in path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        words.add(stripped)
    return frozenset(words)


@lru_cache(maxsize=None)
def headwords_without_definition(path: Optional[Path] = None) -> FrozenSet[str]:
    """Headwords which legitimately appear without a definition."""
    return load_headword_list(path or no_definition_file())
