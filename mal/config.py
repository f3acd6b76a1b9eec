from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

# Defaults
_DEFAULT_HISTORY_PATH = Path.home() / '.mal_history'
_DEFAULT_PROMPT = 'user> '
_DEFAULT_HISTORY_LENGTH = 1000


def get_history_path() -> Optional[Path]:
    """REPL history file; MAL_HISTORY_PATH='' turns persistence off."""
    raw = os.environ.get('MAL_HISTORY_PATH')
    if raw is None:
        return _DEFAULT_HISTORY_PATH
    raw = raw.strip()
    if not raw:
        return None
    return Path(raw).expanduser()


def get_prompt() -> str:
    return os.environ.get('MAL_PROMPT', _DEFAULT_PROMPT)


def get_history_length() -> int:
    raw = os.environ.get('MAL_HISTORY_LENGTH')
    if not raw:
        return _DEFAULT_HISTORY_LENGTH
    try:
        return int(raw)
    except ValueError:
        return _DEFAULT_HISTORY_LENGTH
