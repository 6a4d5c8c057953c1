"""Deterministic encoders for each block of the fiscal code."""

from cfgen.encoders.checksum import check_letter, is_valid_fiscal_code
from cfgen.encoders.dates import day_sex_block, month_letter, validate_birth_date, year_block
from cfgen.encoders.letters import name_block, surname_block

__all__ = [
    "check_letter",
    "is_valid_fiscal_code",
    "day_sex_block",
    "month_letter",
    "validate_birth_date",
    "year_block",
    "name_block",
    "surname_block",
]
