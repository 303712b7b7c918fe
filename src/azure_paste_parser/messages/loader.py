"""Message loader: resolves warning and feedback codes to localized text."""

from functools import lru_cache
from pathlib import Path

import yaml

MESSAGES_DIR = Path(__file__).parent

SUPPORTED_LANGUAGES = ("en", "nl")
DEFAULT_LANGUAGE = "en"
FALLBACK_KEY = "_fallback"


def resolve_language(code: str | None) -> str:
    """Map a locale such as 'nl-NL' or 'nl_BE' onto a supported language."""
    if not code:
        return DEFAULT_LANGUAGE
    base = code.replace("_", "-").split("-")[0].lower()
    return base if base in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE


@lru_cache(maxsize=None)
def load_messages(language: str) -> dict[str, str]:
    """Load the message table for a supported language."""
    path = MESSAGES_DIR / f"{resolve_language(language)}.yaml"
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def localized_message(key: str, language: str | None = None) -> str:
    """Return the text for key.

    Keys missing from the requested language fall back to English, then
    to the requested language's "translation unavailable" text.
    """
    messages = load_messages(resolve_language(language))
    text = messages.get(key) or load_messages(DEFAULT_LANGUAGE).get(key)
    return text or messages[FALLBACK_KEY]
