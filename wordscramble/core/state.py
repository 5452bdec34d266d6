from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class Verdict(str, Enum):
    """Outcome of one submission."""

    ACCEPTED = "accepted"
    IGNORED = "ignored"            # empty input; nothing happens
    ALREADY_USED = "already_used"
    NOT_POSSIBLE = "not_possible"  # letters can't be drawn from the root word
    NOT_REAL = "not_real"

    @property
    def is_error(self) -> bool:
        return self in (Verdict.ALREADY_USED, Verdict.NOT_POSSIBLE, Verdict.NOT_REAL)


@dataclass(frozen=True)
class GameState:
    """
    Immutable container for one Word Scramble session.

    Notes
    -----
    - `used_words` is ordered most-recent-first, matching how the list is shown.
    - Rule transitions (validation, accepting a word) live in `core.engine` and
      `core.validator`; this file only defines the data and its invariants.
    - A new session is a new `GameState`; nothing here is ever mutated.
    """

    root_word: str
    used_words: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """
        Normalize and validate fields.

        Normalization
        -------------
        - `root_word` is stripped and lowercased.
        - `used_words` is coerced to a tuple.

        Validation
        ----------
        - `root_word` must be non-empty.
        - Every used word must be non-empty, lowercase, trimmed and distinct.
        """
        rw = (self.root_word or "").strip().lower()
        if not rw:
            raise ValueError("`root_word` must be non-empty.")
        object.__setattr__(self, "root_word", rw)

        used = tuple(self.used_words or ())
        for w in used:
            if not w or w != w.strip().lower():
                raise ValueError(f"Used word {w!r} must be non-empty, lowercase and trimmed.")
        if len(set(used)) != len(used):
            raise ValueError("`used_words` must not contain duplicates.")
        object.__setattr__(self, "used_words", used)
