import random
from pathlib import Path

import pytest

from wordscramble.core.engine import (
    WordError,
    new_game,
    normalize,
    score,
    start_session,
    submit,
    word_error,
)
from wordscramble.core.state import GameState, Verdict
from wordscramble.core.wordlist import WordListError

WORDS = {"silk", "worm", "worms", "ilk", "milk"}


def real(word):
    return word in WORDS


def test_start_session_picks_member_of_list():
    words = ["silkworm", "listen", "baseline"]
    for seed in range(20):
        state = start_session(words, rng=random.Random(seed))
        assert state.root_word in words
        assert state.used_words == ()


def test_start_session_is_reproducible_with_seed():
    words = ["silkworm", "listen", "baseline", "calendar"]
    a = start_session(words, rng=random.Random(42))
    b = start_session(words, rng=random.Random(42))
    assert a.root_word == b.root_word


@pytest.mark.parametrize("words", [[], ["", "   "], None])
def test_start_session_empty_list_is_fatal(words):
    with pytest.raises(WordListError):
        start_session(words)


def test_new_game_reads_word_file(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("Silkworm\n\n", encoding="utf-8")
    state = new_game(p)
    assert state.root_word == "silkworm"


def test_new_game_missing_file_is_fatal(tmp_path: Path):
    with pytest.raises(WordListError):
        new_game(tmp_path / "nope.txt")


def test_normalize():
    assert normalize("  Silk\n") == "silk"
    assert normalize("") == ""
    assert normalize(None) == ""


def test_submit_accepts_and_prepends():
    state = GameState(root_word="silkworm")
    state, v1 = submit(state, "Silk ", real)
    state, v2 = submit(state, "worm", real)
    assert (v1, v2) == (Verdict.ACCEPTED, Verdict.ACCEPTED)
    assert state.used_words == ("worm", "silk")


def test_submit_rejections_leave_state_unchanged():
    state = GameState(root_word="silkworm", used_words=("silk",))
    for raw, expected in [
        ("SILK", Verdict.ALREADY_USED),
        ("silks", Verdict.NOT_POSSIBLE),
        ("wols", Verdict.NOT_REAL),
        ("   ", Verdict.IGNORED),
    ]:
        new_state, verdict = submit(state, raw, real)
        assert verdict is expected
        assert new_state is state


def test_word_error_messages():
    assert word_error(Verdict.ALREADY_USED, "silkworm") == WordError("Word used already", "Be more original!")
    assert word_error(Verdict.NOT_POSSIBLE, "silkworm") == WordError(
        "Word not possible", "You can't spell that word from 'silkworm'!"
    )
    assert word_error(Verdict.NOT_REAL, "silkworm") == WordError(
        "Word not recognized", "You can't just make them up, you know!"
    )
    assert word_error(Verdict.ACCEPTED, "silkworm") is None
    assert word_error(Verdict.IGNORED, "silkworm") is None


def test_score_counts_words_and_letters():
    assert score(GameState(root_word="silkworm")) == 0
    assert score(GameState(root_word="silkworm", used_words=("worm", "silk"))) == 10


@pytest.mark.parametrize("kwargs", [
    {"root_word": ""},
    {"root_word": "   "},
    {"root_word": "silkworm", "used_words": ("silk", "silk")},
    {"root_word": "silkworm", "used_words": ("Silk",)},
    {"root_word": "silkworm", "used_words": ("",)},
])
def test_game_state_rejects_broken_invariants(kwargs):
    with pytest.raises(ValueError):
        GameState(**kwargs)


def test_game_state_normalizes_root():
    assert GameState(root_word=" Silkworm ").root_word == "silkworm"


@pytest.mark.parametrize("verdict", list(Verdict))
def test_word_error_only_for_error_verdicts(verdict):
    assert (word_error(verdict, "silkworm") is not None) is verdict.is_error
