"""Italian fiscal code (codice fiscale) generator."""

from cfgen.builder import build, generate_fiscal_code
from cfgen.encoders.checksum import check_letter, is_valid_fiscal_code
from cfgen.exceptions import (
    FiscalCodeError,
    InvalidDateError,
    InvalidFieldError,
    MunicipalityDataError,
    MunicipalityNotFoundError,
)
from cfgen.models.enums import Sex
from cfgen.municipalities import MunicipalityIndex, load_municipality_index
from cfgen.schemas.person import PersonRecord

__all__ = [
    "build",
    "generate_fiscal_code",
    "check_letter",
    "is_valid_fiscal_code",
    "FiscalCodeError",
    "InvalidDateError",
    "InvalidFieldError",
    "MunicipalityDataError",
    "MunicipalityNotFoundError",
    "Sex",
    "MunicipalityIndex",
    "load_municipality_index",
    "PersonRecord",
]
