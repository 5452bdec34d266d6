from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .state import GameState, Verdict
from .validator import IsReal, validate
from .wordlist import PathLike, WordListError, load_start_words

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordError:
    """Alert shown to the player for a rejected word."""
    title: str
    message: str


def start_session(words: Sequence[str], rng: Optional[random.Random] = None) -> GameState:
    """
    Start a new session with a root word picked uniformly at random from `words`.

    Parameters
    ----------
    words : Sequence[str]
        Candidate root words. Blank entries are skipped.
    rng : random.Random, optional
        Source of randomness; pass a seeded instance for reproducible picks.

    Returns
    -------
    GameState
        A fresh state with an empty history.

    Raises
    ------
    WordListError
        If `words` is empty (or only blanks). This is not recoverable.
    """
    pool = [w.strip().lower() for w in (words or []) if w and w.strip()]
    if not pool:
        raise WordListError("Could not start a game: the word list is empty.")
    root = (rng or random).choice(pool)
    logger.info("New session with a %s-letter root word", len(root))
    return GameState(root_word=root)


def new_game(path: Optional[PathLike] = None, rng: Optional[random.Random] = None) -> GameState:
    """Load the start-word list (configured path by default) and start a session."""
    return start_session(load_start_words(path), rng=rng)


def normalize(raw: str) -> str:
    """Lowercase and trim whitespace/newlines, so 'Silk ' and 'silk' are the same guess."""
    return (raw or "").strip().lower()


def submit(state: GameState, raw: str, is_real: IsReal) -> Tuple[GameState, Verdict]:
    """
    Apply one submission and return `(new_state, verdict)`.

    Behavior
    --------
    - The input is normalized first; empty input is IGNORED.
    - On ACCEPTED the word is prepended to `used_words` (most recent first).
    - Any other verdict returns `state` unchanged.
    """
    answer = normalize(raw)
    verdict = validate(answer, state.root_word, state.used_words, is_real)
    if verdict is not Verdict.ACCEPTED:
        return state, verdict
    return GameState(root_word=state.root_word, used_words=(answer,) + state.used_words), verdict


def word_error(verdict: Verdict, root_word: str) -> Optional[WordError]:
    """Return the alert for a rejecting verdict, or None for ACCEPTED/IGNORED."""
    if not verdict.is_error:
        return None
    if verdict is Verdict.ALREADY_USED:
        return WordError("Word used already", "Be more original!")
    if verdict is Verdict.NOT_POSSIBLE:
        return WordError("Word not possible", f"You can't spell that word from '{root_word}'!")
    return WordError("Word not recognized", "You can't just make them up, you know!")


def score(state: GameState) -> int:
    """One point per word found plus one per letter in those words."""
    return len(state.used_words) + sum(len(w) for w in state.used_words)


__all__ = [
    "WordError",
    "WordListError",
    "start_session",
    "new_game",
    "normalize",
    "submit",
    "word_error",
    "score",
]
