"""Check character (position 16) of the fiscal code.

Positions are 1-indexed. Characters in even positions count their own
value (0-9 for digits, 0-25 for A-Z); characters in odd positions go
through ODD_VALUES, indexed the same way. The check letter is
chr(ord("A") + total % 26).

Reference: Decreto MEF 12/03/1974.
"""

from __future__ import annotations

import re

# Indexed by digit value (0-9) or letter offset (A=0 .. Z=25)
ODD_VALUES: tuple[int, ...] = (
    1, 0, 5, 7, 9, 13, 15, 17, 19, 21, 2, 4, 18,
    20, 11, 3, 6, 8, 12, 14, 16, 10, 22, 25, 24, 23,
)

_PREFIX_PATTERN = re.compile(r"[0-9A-Z]{15}")
_CODE_PATTERN = re.compile(r"[A-Z]{6}[0-9]{2}[A-Z][0-9]{2}[A-Z][0-9]{3}[A-Z]")


def _char_value(char: str) -> int:
    if char.isdigit():
        return int(char)
    return ord(char) - ord("A")


def check_letter(code15: str) -> str:
    """Compute the control letter of the first 15 characters.

    Args:
        code15: Upper-case prefix of a fiscal code.

    Returns:
        A single letter A-Z.

    Raises:
        ValueError: If code15 is not 15 upper-case alphanumeric characters.
    """
    if not _PREFIX_PATTERN.fullmatch(code15):
        msg = f"Expected 15 upper-case alphanumeric characters, got {code15!r}"
        raise ValueError(msg)

    total = 0
    for position, char in enumerate(code15, start=1):
        value = _char_value(char)
        if position % 2 == 0:
            total += value
        else:
            total += ODD_VALUES[value]
    return chr(ord("A") + total % 26)


def is_valid_fiscal_code(code: str) -> bool:
    """Check format and control letter of a complete 16-character code."""
    code = code.upper().strip()
    if not _CODE_PATTERN.fullmatch(code):
        return False
    return code[15] == check_letter(code[:15])
