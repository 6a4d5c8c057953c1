"""Surname and name blocks (characters 1-6 of the fiscal code).

Each block is read from the sequence: consonants in order, then vowels in
order, then "XX" filler. Non-letters are discarded.
"""

from __future__ import annotations

from cfgen.encoders.text import strip_accents

VOWELS = frozenset("AEIOU")
CONSONANTS = frozenset("BCDFGHJKLMNPQRSTVWXYZ")
FILLER = "XX"


def split_letters(text: str) -> tuple[str, str]:
    """Return (consonants, vowels) of an upper-cased, accent-free string."""
    reduced = strip_accents(text.upper())
    consonants = "".join(c for c in reduced if c in CONSONANTS)
    vowels = "".join(c for c in reduced if c in VOWELS)
    return consonants, vowels


def surname_block(surname: str) -> str:
    """First three characters of consonants + vowels + filler.

    >>> surname_block("Rossi")
    'RSS'
    >>> surname_block("Fo")
    'FOX'
    """
    consonants, vowels = split_letters(surname)
    return (consonants + vowels + FILLER)[:3]


def name_block(name: str) -> str:
    """Like surname_block, but four or more consonants give the 1st, 3rd and 4th.

    >>> name_block("Mario")
    'MRA'
    >>> name_block("Francesco")
    'FNC'
    """
    consonants, vowels = split_letters(name)
    sequence = consonants + vowels + FILLER
    if len(consonants) >= 4:
        return sequence[0] + sequence[2:4]
    return sequence[:3]
