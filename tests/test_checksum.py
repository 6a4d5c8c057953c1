"""Tests for the control character.

Tests cover:
- Known valid fiscal codes
- Odd/even position handling for digits and letters
- Sensitivity to single-character changes
- Input validation
"""

from __future__ import annotations

import pytest

from cfgen.encoders.checksum import ODD_VALUES, check_letter, is_valid_fiscal_code

KNOWN_CODES = [
    "RSSMRA80A01H501U",  # Mario Rossi, 1 Jan 1980, Roma
    "RSSMRA80A55H501M",  # Maria Rossi, 15 Jan 1980, Roma
    "RSSMRA85H52F205C",  # Maria Rossi, 12 Jun 1985, Milano
    "BNCMRC90C15H501W",  # Marco Bianchi, 15 Mar 1990, Roma
]


class TestCheckLetter:
    """Test check letter computation."""

    @pytest.mark.parametrize("code", KNOWN_CODES)
    def test_known_codes(self, code: str) -> None:
        assert check_letter(code[:15]) == code[15]

    def test_odd_table_values(self) -> None:
        assert len(ODD_VALUES) == 26
        assert ODD_VALUES[:10] == (1, 0, 5, 7, 9, 13, 15, 17, 19, 21)
        assert ODD_VALUES[23] == 25  # X

    def test_all_zeros(self) -> None:
        """Eight odd positions worth 1 each, seven even worth 0."""
        assert check_letter("0" * 15) == "I"

    def test_all_a(self) -> None:
        """Same values as all zeros: A and 0 share both tables."""
        assert check_letter("A" * 15) == "I"

    def test_first_position_is_odd(self) -> None:
        """Swapping the first two characters changes the result."""
        assert check_letter("BA" + "0" * 13) != check_letter("AB" + "0" * 13)

    def test_deterministic(self) -> None:
        prefix = "RSSMRA80A01H501"
        assert check_letter(prefix) == check_letter(prefix)

    @pytest.mark.parametrize("position", range(15))
    def test_single_change_alters_letter(self, position: int) -> None:
        prefix = "RSSMRA80A01H501"
        original = prefix[position]
        replacement = "7" if original.isdigit() else "Z"
        if replacement == original:
            replacement = "2" if original.isdigit() else "Q"
        mutated = prefix[:position] + replacement + prefix[position + 1:]
        assert check_letter(mutated) != check_letter(prefix)

    @pytest.mark.parametrize(
        "bad",
        ["", "RSSMRA80A01H50", "RSSMRA80A01H5011", "rssmra80a01h501", "RSSMRA80A01H50!", "RSSMRA80A01H501\n"],
    )
    def test_invalid_prefix(self, bad: str) -> None:
        with pytest.raises(ValueError, match="15"):
            check_letter(bad)


class TestIsValidFiscalCode:
    @pytest.mark.parametrize("code", KNOWN_CODES)
    def test_valid(self, code: str) -> None:
        assert is_valid_fiscal_code(code) is True

    def test_lowercase_and_whitespace(self) -> None:
        assert is_valid_fiscal_code("  rssmra85h52f205c ") is True

    def test_wrong_check_letter(self) -> None:
        assert is_valid_fiscal_code("RSSMRA85H52F205A") is False

    def test_wrong_format(self) -> None:
        assert is_valid_fiscal_code("RSSMRA85H52F205") is False
        assert is_valid_fiscal_code("RSSMRA85H52F2051") is False
