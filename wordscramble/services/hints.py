from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from openai import OpenAI

from wordscramble.config import Settings, load_settings
from wordscramble.core.validator import is_possible

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HintSuggestion:
    """Container for a hint."""
    target: Optional[str]   # the word being hinted at (None if nothing is left)
    text: str               # clue shown to the player; never contains `target`
    used_llm: bool          # whether the clue came from the LLM
    remaining: int          # how many findable words are still unfound


def find_unfound_words(
    root: str,
    used_words: Iterable[str],
    candidates: Iterable[str],
    min_length: int = 3,
) -> List[str]:
    """
    Return candidate words still findable this session, longest first.

    Rules
    -----
    - At least `min_length` letters, letters only.
    - Spellable from `root` (multiset containment) and not the root itself.
    - Not already in `used_words`.
    """
    used = set(used_words)
    seen = set()
    found: List[str] = []
    for raw in candidates:
        w = raw.strip().lower()
        if w in seen or w in used or w == root:
            continue
        seen.add(w)
        if len(w) < min_length or not w.isalpha():
            continue
        if is_possible(w, root):
            found.append(w)
    found.sort(key=lambda w: (-len(w), w))  # deterministic
    return found


def _contains_answer(text: str, target: str) -> bool:
    return target.lower() in (text or "").lower()


def _local_clue(target: str, remaining: int) -> str:
    """Always-available local clue (simple and safe)."""
    left = "There is still 1 word" if remaining == 1 else f"There are still {remaining} words"
    return (
        f"{left} to find. "
        f"Try a {len(target)}-letter word starting with '{target[0].upper()}'."
    )


def _llm_clue(root: str, target: str, settings: Settings, temperature: float = 0.7) -> Optional[str]:
    """
    Ask the LLM for ONE short clue for `target`; None when unavailable or unusable.

    A reply that contains the target word itself is thrown away.
    """
    if not settings.llm_enabled:
        return None

    client = OpenAI(api_key=settings.openai_api_key)
    user = (
        f"In a word game the player builds words from the letters of '{root}'. "
        f"Give exactly ONE short clue that helps them find the word '{target}'. "
        "Do NOT include the word itself. Reply with the clue only."
    )
    try:
        resp = client.chat.completions.create(
            model=settings.model_name,
            messages=[{"role": "system", "content": "You are a helpful word-game clue-giver."},
                      {"role": "user", "content": user}],
            temperature=temperature,
            max_tokens=60,
        )
        text = (resp.choices[0].message.content or "").strip()
    except Exception:
        logger.warning("LLM hint failed; using local clue", exc_info=True)
        return None
    if not text or _contains_answer(text, target):
        logger.info("LLM hint rejected; using local clue")
        return None
    # Trim extreme verbosity (soft cap ~25 words)
    words = text.split()
    if len(words) > 25:
        text = " ".join(words[:25])
    return text


def suggest_word(
    root: str,
    used_words: Iterable[str],
    candidates: Iterable[str],
    settings: Optional[Settings] = None,
) -> HintSuggestion:
    """
    Pick an unfound word and describe it without giving it away.

    Steps
    -----
    1) Filter `candidates` down to words still findable from `root`.
    2) Target the longest one (ties broken alphabetically).
    3) Phrase a clue with the LLM; fall back to a local sentence.
    """
    settings = settings or load_settings()
    remaining = find_unfound_words(root, used_words, candidates, min_length=settings.hint_min_length)
    if not remaining:
        return HintSuggestion(target=None, text="No more words to find. Try a new game!",
                              used_llm=False, remaining=0)

    target = remaining[0]
    llm_text = _llm_clue(root, target, settings)
    if llm_text:
        return HintSuggestion(target=target, text=llm_text, used_llm=True, remaining=len(remaining))
    return HintSuggestion(target=target, text=_local_clue(target, len(remaining)),
                          used_llm=False, remaining=len(remaining))


__all__ = ["HintSuggestion", "find_unfound_words", "suggest_word"]
