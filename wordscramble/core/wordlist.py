from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class WordListError(RuntimeError):
    """The start-word list is missing, unreadable or empty. The game cannot start."""


def read_word_file(path: PathLike) -> List[str]:
    """
    Read a text file (UTF-8) and return non-empty, stripped, lowercase lines.

    Notes
    -----
    - Raises `WordListError` if the file is missing or can't be read.
    - Each line should contain exactly one word.
    """
    p = Path(path)
    if not p.is_file():
        raise WordListError(f"Could not load {p.name}: no such file at {p}.")
    try:
        raw = p.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListError(f"Could not load {p.name}: {exc}") from exc
    return [ln.strip().lower() for ln in raw if ln.strip()]


def load_start_words(path: Optional[PathLike] = None) -> List[str]:
    """
    Load the list of candidate root words.

    Parameters
    ----------
    path : str | Path | None
        File to read; defaults to the configured `WORDSCRAMBLE_START_WORDS`.

    Returns
    -------
    list[str]
        Non-empty list of lowercase words. An empty file is as fatal as a missing one.
    """
    if path is None:
        from ..config import load_settings

        path = load_settings().start_words_path
    words = read_word_file(path)
    if not words:
        raise WordListError(f"Could not load {Path(path).name}: the file has no words.")
    logger.info("Loaded %s start words from %s", len(words), path)
    return words


__all__ = ["WordListError", "read_word_file", "load_start_words"]
