"""Text normalization shared by the letter blocks and the municipality keys."""

from __future__ import annotations

import unicodedata


def strip_accents(text: str) -> str:
    """Remove diacritics: decompose (NFD) and drop the combining marks."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def normalize_key(text: str) -> str:
    """Upper-case, accent-free, trimmed form used for exact-match lookups."""
    return strip_accents(text.strip().upper())
