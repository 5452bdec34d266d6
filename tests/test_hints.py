from types import SimpleNamespace

from wordscramble.config import load_settings
from wordscramble.services import hints
from wordscramble.services.hints import find_unfound_words, suggest_word

CANDIDATES = ["silk", "worm", "worms", "silks", "mill", "ilk", "so", "silkworm", "Silk"]

OFFLINE = load_settings({"OFFLINE_MODE": "true"})
ONLINE = load_settings({"OFFLINE_MODE": "false", "OPENAI_API_KEY": "sk-test"})


def _fake_openai(reply=None, error=None):
    class FakeClient:
        def __init__(self, api_key=None):
            self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

        def _create(self, **kwargs):
            if error:
                raise error
            return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=reply))])

    return FakeClient


def test_find_unfound_words_filters_and_orders():
    assert find_unfound_words("silkworm", [], CANDIDATES) == ["worms", "silk", "worm", "ilk"]
    assert find_unfound_words("silkworm", ["worms"], CANDIDATES) == ["silk", "worm", "ilk"]
    assert find_unfound_words("silkworm", [], CANDIDATES, min_length=5) == ["worms"]


def test_suggest_word_local_clue_offline():
    hint = suggest_word("silkworm", ["worms"], CANDIDATES, settings=OFFLINE)
    assert hint.target == "silk"
    assert hint.used_llm is False
    assert hint.remaining == 3
    assert "4-letter" in hint.text and "'S'" in hint.text
    assert "silk" not in hint.text


def test_suggest_word_nothing_left():
    hint = suggest_word("silkworm", ["worms", "silk", "worm", "ilk"], CANDIDATES, settings=OFFLINE)
    assert hint.target is None
    assert hint.remaining == 0


def test_suggest_word_uses_llm(monkeypatch):
    monkeypatch.setattr(hints, "OpenAI", _fake_openai(reply="Something caterpillars spin."))
    hint = suggest_word("silkworm", ["worms"], CANDIDATES, settings=ONLINE)
    assert hint.used_llm is True
    assert hint.text == "Something caterpillars spin."


def test_suggest_word_llm_giving_answer_away_falls_back(monkeypatch):
    monkeypatch.setattr(hints, "OpenAI", _fake_openai(reply="It's SILK!"))
    hint = suggest_word("silkworm", ["worms"], CANDIDATES, settings=ONLINE)
    assert hint.used_llm is False
    assert "silk" not in hint.text.lower()


def test_suggest_word_llm_error_falls_back(monkeypatch):
    monkeypatch.setattr(hints, "OpenAI", _fake_openai(error=RuntimeError("network down")))
    hint = suggest_word("silkworm", ["worms"], CANDIDATES, settings=ONLINE)
    assert hint.used_llm is False
    assert hint.target == "silk"


def test_local_clue_singular_when_one_word_left():
    hint = suggest_word("silkworm", ["worms", "silk", "worm"], CANDIDATES, settings=OFFLINE)
    assert hint.target == "ilk"
    assert hint.remaining == 1
    assert hint.text.startswith("There is still 1 word to find.")
