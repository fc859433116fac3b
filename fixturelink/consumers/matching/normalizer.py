"""Team name normalization for cross-provider matching.

Turns a raw provider team name into a canonical identity key plus a token
set. Both providers' names go through the same pipeline:

1. Strip diacritics (NFD, drop combining marks; residual non-ASCII via unidecode)
2. Lowercase, "&" -> "and", collapse non-alphanumerics to single spaces
3. Split into tokens, apply token aliases, drop generic club words
4. Join surviving tokens into the key (fallback: cleaned text sans spaces)
5. Resolve the key: competition alias -> global alias -> identity

Examples:
    "Manchester United FC" -> key "manchesterunited", tokens {manchester, united}
    "Man Utd"              -> key "manchesterunited", tokens {man, united}
    "FC"                   -> key "fc", tokens {}
"""

import logging
import re
import unicodedata
from dataclasses import dataclass, field
from functools import lru_cache

from unidecode import unidecode

from fixturelink.utilities.constants import (
    COMPETITION_NAME_ALIASES,
    NAME_ALIASES,
    STOP_TOKENS,
    TOKEN_ALIASES,
)

logger = logging.getLogger(__name__)

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class CanonicalName:
    """Normalized identity of a team name."""

    key: str
    tokens: frozenset[str] = field(default_factory=frozenset)


EMPTY_NAME = CanonicalName(key="")


def strip_diacritics(text: str) -> str:
    """Remove accents ("Atlético" -> "Atletico").

    Combining marks are dropped after NFD decomposition. Letters that don't
    decompose ("ø", "ß") are transliterated by unidecode.
    """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    if stripped.isascii():
        return stripped
    return unidecode(stripped)


def clean_name(text: str) -> str:
    """Lowercase, spell out "&" and reduce punctuation runs to single spaces."""
    cleaned = strip_diacritics(text).lower()
    cleaned = cleaned.replace("&", "and")
    cleaned = _NON_ALNUM_RE.sub(" ", cleaned)
    return cleaned.strip()


def normalize_tokens(raw_tokens: list[str]) -> list[str]:
    """Apply token aliases, then drop stop tokens. Preserves order."""
    aliased = (TOKEN_ALIASES.get(token, token) for token in raw_tokens)
    return [token for token in aliased if token and token not in STOP_TOKENS]


def resolve_alias(key: str, competition_code: str | None = None) -> str:
    """Resolve a canonical key through competition, then global aliases."""
    if competition_code:
        scoped = COMPETITION_NAME_ALIASES.get(competition_code.strip().upper())
        if scoped is not None and key in scoped:
            return scoped[key]
    return NAME_ALIASES.get(key, key)


@lru_cache(maxsize=4096)
def normalize_team_name(name: str | None, competition_code: str | None = None) -> CanonicalName:
    """Normalize a raw team name into its canonical key and token set.

    Never raises: absent or blank names return an empty key.

    Args:
        name: Raw team name from either provider
        competition_code: Competition code selecting scoped aliases (e.g. "BSA")

    Returns:
        CanonicalName with alias-resolved key and surviving tokens
    """
    if not name or not name.strip():
        return EMPTY_NAME

    cleaned = clean_name(name)
    tokens = normalize_tokens(cleaned.split())

    # A name made only of stop tokens ("FC") keeps its cleaned text as key
    key = "".join(tokens) or _WHITESPACE_RE.sub("", cleaned)
    resolved = resolve_alias(key, competition_code)

    if resolved != key:
        logger.debug(
            "[NORMALIZE] Alias '%s' -> '%s' (competition=%s)", key, resolved, competition_code
        )

    return CanonicalName(key=resolved, tokens=frozenset(tokens))
