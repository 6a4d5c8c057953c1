"""Tests for the surname and name blocks.

Tests cover:
- Consonants first, then vowels, then X filler
- Name rule for 4+ consonants (1st, 3rd, 4th)
- Accents, apostrophes, spaces and mixed case
"""

from __future__ import annotations

import pytest

from cfgen.encoders.letters import name_block, surname_block


class TestSurnameBlock:
    """Test the surname block."""

    def test_consonants_only(self) -> None:
        assert surname_block("Rossi") == "RSS"

    def test_more_than_three_consonants(self) -> None:
        assert surname_block("Bianchi") == "BNC"

    def test_vowels_fill_missing_consonants(self) -> None:
        assert surname_block("Rea") == "REA"

    def test_filler_for_short_surname(self) -> None:
        assert surname_block("Fo") == "FOX"

    def test_single_letter(self) -> None:
        assert surname_block("O") == "OXX"

    def test_apostrophe_and_space_ignored(self) -> None:
        assert surname_block("D'Amico") == "DMC"
        assert surname_block("De Luca") == "DLC"

    def test_accented_vowel(self) -> None:
        assert surname_block("Nicolò") == "NCL"
        assert surname_block("Fò") == "FOX"

    def test_lowercase_input(self) -> None:
        assert surname_block("verdi") == "VRD"

    def test_surname_never_uses_name_rule(self) -> None:
        """Four consonants in a surname still give the first three."""
        assert surname_block("Franceschi") == "FRN"


class TestNameBlock:
    """Test the name block."""

    def test_three_consonants(self) -> None:
        assert name_block("Marco") == "MRC"

    def test_two_consonants_then_vowel(self) -> None:
        assert name_block("Mario") == "MRA"
        assert name_block("Maria") == "MRA"

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Francesco", "FNC"),
            ("Alessandro", "LSN"),
            ("Gianfranco", "GFR"),
            ("Roberto", "RRT"),
        ],
    )
    def test_four_or_more_consonants(self, name: str, expected: str) -> None:
        assert name_block(name) == expected

    def test_exactly_three_consonants_uses_first_three(self) -> None:
        assert name_block("Luca") == "LCU"
        assert name_block("Paolo") == "PLA"

    def test_filler_for_short_name(self) -> None:
        assert name_block("Al") == "LAX"

    def test_vowels_only(self) -> None:
        assert name_block("Ia") == "IAX"

    def test_compound_name(self) -> None:
        """Spaces are discarded, consonants of both parts count."""
        assert name_block("Anna Maria") == "NMR"

    def test_accented_name(self) -> None:
        assert name_block("Niccolò") == "NCL"
