"""Errors raised while building a fiscal code.

Every error is raised to the caller; nothing is recovered internally and
no partial code is ever returned.
"""

from __future__ import annotations


class FiscalCodeError(Exception):
    """Base class for all fiscal code errors."""


class InvalidFieldError(FiscalCodeError):
    """An input field is blank, out of range or malformed."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class InvalidDateError(FiscalCodeError):
    """The birth day does not exist in the given month and year."""

    def __init__(self, year: int, month: int, day: int) -> None:
        self.year = year
        self.month = month
        self.day = day
        super().__init__(f"Data inesistente: {year:04d}-{month:02d}-{day:02d}")


class MunicipalityNotFoundError(FiscalCodeError):
    """No reference entry matches the municipality and province."""

    def __init__(self, municipality: str, province: str) -> None:
        self.municipality = municipality
        self.province = province
        super().__init__(f"Comune non trovato nell'elenco: {municipality} ({province})")


class MunicipalityDataError(FiscalCodeError):
    """The municipality reference file is missing or malformed."""
