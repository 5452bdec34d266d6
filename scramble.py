from __future__ import annotations

import logging

import streamlit as st

# --- Config (also loads .env) ---
from wordscramble.config import configure_logging, load_settings

# --- Core game imports ---
from wordscramble.core.engine import new_game, score, submit, word_error
from wordscramble.core.state import GameState, Verdict
from wordscramble.core.wordlist import WordListError

# --- Services ---
from wordscramble.services.dictionary import DictionaryService, build_dictionary
from wordscramble.services.hints import suggest_word

logger = logging.getLogger("wordscramble.app")


# =======================================
# Session-state helpers & game management
# =======================================

def _dictionary() -> DictionaryService:
    """One dictionary per browser session; building the file backend reads from disk."""
    if "dictionary" not in st.session_state:
        st.session_state["dictionary"] = build_dictionary(load_settings())
    return st.session_state["dictionary"]


def _start_new_game() -> None:
    """
    Start a new session: pick a fresh root word and clear history, input and alerts.
    A missing or empty start-word list is fatal; the page stops with the error.
    """
    try:
        st.session_state["game"] = new_game(load_settings().start_words_path)
    except WordListError as exc:
        logger.error("Cannot start a game: %s", exc)
        st.session_state["fatal_error"] = str(exc)
        return
    st.session_state["new_word"] = ""
    st.session_state["word_error"] = None
    st.session_state["hint"] = None


def _ensure_game() -> GameState:
    """Ensure there is a valid GameState in session state; create one if missing."""
    if "game" not in st.session_state or not isinstance(st.session_state["game"], GameState):
        _start_new_game()
    if st.session_state.get("fatal_error"):
        st.error(f"💥 {st.session_state['fatal_error']}")
        st.stop()
    st.session_state.setdefault("word_error", None)
    st.session_state.setdefault("hint", None)
    return st.session_state["game"]


def _add_new_word() -> None:
    """on_change callback for the input: validate, then accept or raise an alert."""
    game: GameState = st.session_state["game"]
    new_state, verdict = submit(game, st.session_state.get("new_word", ""), _dictionary().is_valid)
    st.session_state["word_error"] = word_error(verdict, game.root_word)
    if verdict is Verdict.ACCEPTED:
        st.session_state["game"] = new_state
        st.session_state["new_word"] = ""
        st.session_state["hint"] = None


# =========
# The App
# =========

def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)

    st.set_page_config(page_title="Word Scramble", page_icon="🔤", layout="centered")
    game: GameState = _ensure_game()

    # ---- Sidebar ----
    with st.sidebar:
        st.header("Game")
        st.button("🔁 New Game", key="new_game", use_container_width=True, on_click=_start_new_game)
        c1, c2 = st.columns(2)
        c1.metric("Words", len(game.used_words))
        c2.metric("Score", score(game))

        with st.expander("Need a hint?"):
            if st.button("✨ Suggest a word", key="suggest_word"):
                with st.spinner("Looking for words..."):
                    st.session_state["hint"] = suggest_word(
                        root=game.root_word,
                        used_words=game.used_words,
                        candidates=_dictionary().candidates(),
                        settings=settings,
                    )
            hint = st.session_state["hint"]
            if hint:
                src = "LLM" if hint.used_llm else "local"
                st.info(f"{hint.text}  \n*Source: {src}*")

        with st.expander("Debug (env)"):
            st.write("DICTIONARY_BACKEND:", settings.dictionary_backend)
            st.write("DICTIONARY_LOCALE:", settings.dictionary_locale)
            st.write("OFFLINE_MODE:", settings.offline_mode)
            st.write("Has OPENAI_API_KEY:", bool(settings.openai_api_key))

    # ---- Root word ----
    st.title(game.root_word)

    # ---- Move input ----
    st.text_input(
        "Enter your word",
        key="new_word",
        on_change=_add_new_word,
        placeholder="Press Enter to submit",
        help="Use the letters of the word above; each letter only as often as it appears.",
    )

    # The alert belongs to the submission that raised it; show it once.
    err = st.session_state["word_error"]
    st.session_state["word_error"] = None
    if err:
        st.error(f"**{err.title}**  \n{err.message}")

    # ---- Used words ----
    for word in game.used_words:
        st.markdown(f"`{len(word):>2}` {word}")


if __name__ == "__main__":
    main()
