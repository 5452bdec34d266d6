from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Protocol, Set

import nltk
from nltk.corpus import words as nltk_words
from wordfreq import top_n_list, zipf_frequency

from wordscramble.config import Settings
from wordscramble.core.wordlist import read_word_file

logger = logging.getLogger(__name__)

# How many of the most frequent words wordfreq offers as hint candidates.
_WORDFREQ_CANDIDATES = 50000


class Dictionary(Protocol):
    """Anything that can answer `is_real_word(word, locale)`."""

    def is_real_word(self, word: str, locale: str) -> bool: ...

    def words(self, locale: str) -> List[str]: ...


class WordSetDictionary:
    """Membership in a fixed set of lowercase words. The locale is ignored."""

    def __init__(self, words: Iterable[str]):
        self._words: Set[str] = {w.strip().lower() for w in words if w and w.strip()}

    @classmethod
    def from_file(cls, path) -> "WordSetDictionary":
        words = read_word_file(path)
        logger.info("Loaded %s dictionary words from %s", len(words), path)
        return cls(words)

    def is_real_word(self, word: str, locale: str) -> bool:
        return bool(word) and word.lower() in self._words

    def words(self, locale: str) -> List[str]:
        return sorted(self._words)


class WordfreqDictionary:
    """
    A word is real if `wordfreq` has seen it often enough in `locale`.

    Notes
    -----
    - `min_zipf` is on the Zipf scale (0 = unseen, ~3 = once per million words).
    - Only alphabetic words are considered; wordfreq also knows numbers and symbols.
    - Frequency alone lets through fragments and abbreviations ("tesl", "isl");
      `SpellingDictionary` adds a spelling list on top.
    """

    def __init__(self, min_zipf: float = 1.5):
        self.min_zipf = min_zipf
        self._candidates: Dict[str, List[str]] = {}

    def is_real_word(self, word: str, locale: str) -> bool:
        if not word or not word.isalpha():
            return False
        return zipf_frequency(word, locale) >= self.min_zipf

    def words(self, locale: str) -> List[str]:
        # Hint candidates must pass the same test the validator applies.
        if locale not in self._candidates:
            self._candidates[locale] = [
                w for w in top_n_list(locale, _WORDFREQ_CANDIDATES) if self.is_real_word(w, locale)
            ]
        return self._candidates[locale]


def load_spelling_words() -> Set[str]:
    """
    Lowercase entries of the NLTK `words` corpus, downloading it on first use.

    Capitalized entries are proper nouns and are left out. Raises `LookupError`
    if the corpus is neither installed nor downloadable.
    """
    try:
        entries = nltk_words.words()
    except LookupError:
        logger.info("NLTK 'words' corpus not found; downloading it")
        nltk.download("words", quiet=True)
        entries = nltk_words.words()
    spelled = {w for w in entries if w.isalpha() and w.islower()}
    logger.info("Loaded %s spelling words from the NLTK corpus", len(spelled))
    return spelled


class SpellingDictionary(WordfreqDictionary):
    """
    A word is real if it is spelled correctly AND wordfreq has seen it.

    Notes
    -----
    - The spelling list holds base forms, so a plural is accepted when its
      stem is listed ("worms" -> "worm", "boxes" -> "box").
    - The spelling list is English; other locales still get the frequency check.
    """

    def __init__(self, spelled: Optional[Iterable[str]] = None, min_zipf: float = 1.5):
        super().__init__(min_zipf=min_zipf)
        self._spelled: Set[str] = set(spelled) if spelled is not None else load_spelling_words()

    def is_spelled(self, word: str) -> bool:
        w = word.lower()
        if w in self._spelled:
            return True
        if len(w) > 2 and w.endswith("s") and w[:-1] in self._spelled:
            return True
        return len(w) > 3 and w.endswith("es") and w[:-2] in self._spelled

    def is_real_word(self, word: str, locale: str) -> bool:
        if not word or not word.isalpha():
            return False
        if locale.split("_")[0].lower() == "en" and not self.is_spelled(word):
            return False
        return super().is_real_word(word, locale)


class DictionaryService:
    """Binds a dictionary backend to one locale."""

    def __init__(self, backend: Dictionary, locale: str = "en"):
        self.backend = backend
        self.locale = locale

    def is_valid(self, word: str) -> bool:
        return self.backend.is_real_word(word, self.locale)

    def candidates(self) -> List[str]:
        return self.backend.words(self.locale)


def build_dictionary(settings: Settings) -> DictionaryService:
    """Pick the backend named by `settings.dictionary_backend`."""
    backend: Dictionary
    if settings.dictionary_backend == "file":
        backend = WordSetDictionary.from_file(settings.dictionary_path)
    elif settings.dictionary_backend == "wordfreq":
        backend = WordfreqDictionary(min_zipf=settings.wordfreq_min_zipf)
    else:
        backend = SpellingDictionary(min_zipf=settings.wordfreq_min_zipf)
    logger.info("Dictionary backend: %s (locale=%s)", settings.dictionary_backend, settings.dictionary_locale)
    return DictionaryService(backend, locale=settings.dictionary_locale)


__all__ = [
    "Dictionary",
    "WordSetDictionary",
    "WordfreqDictionary",
    "SpellingDictionary",
    "load_spelling_words",
    "DictionaryService",
    "build_dictionary",
]
