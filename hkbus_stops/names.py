"""
Helpers for the multi-lingual name mappings used by stops and routes
(e.g. {"en": "STAR FERRY", "zh": "尖沙咀碼頭"}).
"""

import unicodedata

from .config import Config


def localized_name(names, preferred=None, fallback=None):
    """
    Resolve a language-keyed name mapping to a single string.

    The lookup order is each of the `preferred` languages, then the
    `fallback` language, then the first non-empty value in the mapping.
    Plain strings are returned unchanged; an empty or missing mapping gives "".
    """
    if isinstance(names, str):
        return names
    if not names:
        return ""
    if preferred is None:
        preferred = Config.PREFERRED_LANGUAGES
    if fallback is None:
        fallback = Config.FALLBACK_LANGUAGE

    for lang in list(preferred) + [fallback]:
        value = names.get(lang)
        if value:
            return value
    for value in names.values():
        if value:
            return value
    return ""


def normalize_text(text):
    """Case and diacritic insensitive form of `text` used for matching."""
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", str(text))
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold().strip()
