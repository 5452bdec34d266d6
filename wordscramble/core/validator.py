from __future__ import annotations

from typing import Callable, Iterable

from .state import Verdict

IsReal = Callable[[str], bool]


def is_original(word: str, used_words: Iterable[str]) -> bool:
    """True if `word` has not been accepted yet this session."""
    return word not in used_words


def is_possible(word: str, root: str) -> bool:
    """
    Return True if `word` can be spelled from the letters of `root`.

    Each letter of `root` may be used at most as many times as it occurs there:
    walk `word` and strike one matching letter from a working copy of `root`
    per character; a character with nothing left to strike fails.
    """
    remaining = list(root)
    for ch in word:
        try:
            remaining.remove(ch)
        except ValueError:
            return False
    return True


def validate(candidate: str, root: str, used_words: Iterable[str], is_real: IsReal) -> Verdict:
    """
    Decide whether an already-normalized `candidate` may be added to the history.

    Rules (first failure wins)
    --------------------------
    - Empty candidate  -> IGNORED (no checks run).
    - Already used     -> ALREADY_USED.
    - Not spellable    -> NOT_POSSIBLE.
    - Not a real word  -> NOT_REAL (dictionary is only consulted last).
    - Otherwise        -> ACCEPTED.

    The root word itself and one-letter words are not blocked here.
    """
    if not candidate:
        return Verdict.IGNORED
    if not is_original(candidate, tuple(used_words)):
        return Verdict.ALREADY_USED
    if not is_possible(candidate, root):
        return Verdict.NOT_POSSIBLE
    if not is_real(candidate):
        return Verdict.NOT_REAL
    return Verdict.ACCEPTED


__all__ = ["IsReal", "is_original", "is_possible", "validate"]
