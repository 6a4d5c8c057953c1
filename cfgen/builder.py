"""Fiscal code builder: validated person data -> 16-character code.

CF format: AAABBB 00C00 D000 E
  - AAA:  surname consonants (then vowels, then X)
  - BBB:  name consonants (then vowels, then X)
  - 00:   year of birth (last 2 digits)
  - C:    month of birth (letter A-T, non-sequential)
  - 00:   day of birth (1-31 male, 41-71 female)
  - D000: birthplace code (codice catastale / Belfiore)
  - E:    check character

Reference: DPR 605/1973, Decreto MEF 12/03/1974.
"""

from __future__ import annotations

import logging

from cfgen.encoders.checksum import check_letter
from cfgen.encoders.dates import day_sex_block, month_letter, validate_birth_date, year_block
from cfgen.encoders.letters import name_block, surname_block
from cfgen.models.enums import Sex
from cfgen.municipalities import MunicipalityIndex, load_municipality_index
from cfgen.schemas.person import PersonRecord

logger = logging.getLogger(__name__)


def build(person: PersonRecord, index: MunicipalityIndex) -> str:
    """Compute the fiscal code of an already validated person.

    Raises:
        InvalidDateError: If the birth day does not exist in that month/year.
        MunicipalityNotFoundError: If the municipality is not in the index.
    """
    validate_birth_date(person.birth_year, person.birth_month, person.birth_day)

    prefix = (
        surname_block(person.surname)
        + name_block(person.name)
        + year_block(person.birth_year)
        + month_letter(person.birth_month)
        + day_sex_block(person.birth_day, person.sex)
        + index.resolve(person.municipality_name, person.province_code)
    )
    code = prefix + check_letter(prefix)

    logger.debug("Fiscal code generated (birthplace=%s)", code[11:15])
    return code


def generate_fiscal_code(
    surname: str,
    name: str,
    birth_year: int,
    birth_month: int,
    birth_day: int,
    sex: Sex | str,
    municipality_name: str,
    province_code: str,
    *,
    index: MunicipalityIndex | None = None,
) -> str:
    """Validate the inputs and return the 16-character fiscal code.

    Args:
        surname: Family name, accents allowed.
        name: Given name(s), accents allowed.
        birth_year: Four-digit year, not before settings.min_birth_year.
        birth_month: 1-12.
        birth_day: 1-31, must exist in the given month and year.
        sex: "M"/"F" (any case) or a Sex member.
        municipality_name: Birth municipality, e.g. "Roma".
        province_code: Two-letter province, e.g. "RM".
        index: Municipality index to resolve against. Defaults to the
            process-wide index loaded from settings.

    Returns:
        The fiscal code, e.g. "RSSMRA80A01H501U".

    Raises:
        InvalidFieldError: A field is blank, out of range or malformed.
        InvalidDateError: The date does not exist.
        MunicipalityNotFoundError: The municipality/province pair is unknown.
    """
    person = PersonRecord.create(
        surname=surname,
        name=name,
        birth_year=birth_year,
        birth_month=birth_month,
        birth_day=birth_day,
        sex=sex,
        municipality_name=municipality_name,
        province_code=province_code,
    )
    if index is None:
        index = load_municipality_index()
    return build(person, index)
