from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from dotenv import load_dotenv

load_dotenv(override=False)  # Load .env into process env

# Bundled word lists ship inside the package, so they survive a regular install.
DATA_DIR = Path(__file__).resolve().parent / "data" / "wordlists"
BACKENDS = ("spelling", "wordfreq", "file")


def _get(env: Mapping[str, str], name: str, default: Any, cast: Callable[[str], Any] | None = None) -> Any:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    return cast(raw) if cast else raw


def _as_bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _as_path(raw: str) -> Path:
    p = Path(raw).expanduser()
    return p if p.is_absolute() else Path.cwd() / p


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings, read from the environment (and `.env`).

    Notes
    -----
    - Relative paths are resolved against the current working directory;
      the defaults point at the word lists bundled with the package.
    - `offline_mode` defaults to true: the LLM is only used when explicitly enabled.
    """

    # Word lists
    start_words_path: Path
    dictionary_backend: str
    dictionary_path: Path
    dictionary_locale: str
    wordfreq_min_zipf: float

    # Hints / LLM
    hint_min_length: int
    offline_mode: bool
    openai_api_key: str
    model_name: str

    log_level: str

    @property
    def llm_enabled(self) -> bool:
        return not self.offline_mode and bool(self.openai_api_key)


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build a `Settings` from `env` (defaults to `os.environ`)."""
    env = os.environ if env is None else env
    backend = str(_get(env, "DICTIONARY_BACKEND", "spelling")).strip().lower()
    if backend not in BACKENDS:
        raise ValueError(f"DICTIONARY_BACKEND must be one of {BACKENDS}, got {backend!r}.")
    return Settings(
        start_words_path=_get(env, "WORDSCRAMBLE_START_WORDS", DATA_DIR / "start.txt", cast=_as_path),
        dictionary_backend=backend,
        dictionary_path=_get(env, "DICTIONARY_FILE", DATA_DIR / "dictionary.txt", cast=_as_path),
        dictionary_locale=_get(env, "DICTIONARY_LOCALE", "en").strip(),
        wordfreq_min_zipf=_get(env, "WORDFREQ_MIN_ZIPF", 1.5, cast=float),
        hint_min_length=_get(env, "HINT_MIN_LENGTH", 3, cast=int),
        offline_mode=_get(env, "OFFLINE_MODE", True, cast=_as_bool),
        openai_api_key=_get(env, "OPENAI_API_KEY", ""),
        model_name=_get(env, "MODEL_NAME", "gpt-4o-mini"),
        log_level=_get(env, "LOG_LEVEL", "INFO").strip().upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    """Install a basic root handler once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    root.setLevel(getattr(logging, level, logging.INFO))


__all__ = ["Settings", "load_settings", "configure_logging", "BACKENDS", "DATA_DIR"]
