"""Validated personal data for a single fiscal code computation."""

from __future__ import annotations

import re
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cfgen.config import settings
from cfgen.encoders.letters import split_letters
from cfgen.exceptions import InvalidFieldError
from cfgen.models.enums import Sex

_PROVINCE_PATTERN = re.compile(r"[A-Za-z]{2}")
_SEX_MARKERS = frozenset(s.value for s in Sex)


def _first_error(exc: ValidationError) -> tuple[str, str]:
    """Field name and readable message of the first pydantic error."""
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"]) or "person"
    if error["type"] == "value_error":
        return field, str(error["ctx"]["error"])
    return field, error["msg"]


class PersonRecord(BaseModel):
    """Immutable person data, checked field by field.

    Day/month consistency (30-day months, 29 February) is not checked here:
    the builder does it right before encoding.
    """

    model_config = ConfigDict(frozen=True)

    surname: str
    name: str
    birth_year: int
    birth_month: int = Field(ge=1, le=12)
    birth_day: int = Field(ge=1, le=31)
    sex: Sex
    municipality_name: str
    province_code: str

    @field_validator("surname", "name", "municipality_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            msg = "non può essere vuoto o composto da soli spazi"
            raise ValueError(msg)
        return v

    @field_validator("surname", "name")
    @classmethod
    def validate_has_letters(cls, v: str) -> str:
        """The letter blocks need at least one A-Z letter once accents are gone."""
        consonants, vowels = split_letters(v)
        if not consonants and not vowels:
            msg = "deve contenere almeno una lettera"
            raise ValueError(msg)
        return v

    @field_validator("birth_year")
    @classmethod
    def validate_birth_year(cls, v: int) -> int:
        current_year = date.today().year
        if not settings.min_birth_year <= v <= current_year:
            msg = f"l'anno deve essere compreso tra {settings.min_birth_year} e {current_year}"
            raise ValueError(msg)
        return v

    @field_validator("sex", mode="before")
    @classmethod
    def normalize_sex(cls, v: object) -> object:
        """Accept m, M, f, F."""
        if isinstance(v, str):
            marker = v.strip().upper()
            if marker in _SEX_MARKERS:
                return marker
        msg = "sesso inserito non valido"
        raise ValueError(msg)

    @field_validator("province_code")
    @classmethod
    def validate_province_code(cls, v: str) -> str:
        v = v.strip()
        if not _PROVINCE_PATTERN.fullmatch(v):
            msg = "la sigla della provincia deve essere di 2 lettere"
            raise ValueError(msg)
        return v.upper()

    @classmethod
    def create(
        cls,
        surname: str,
        name: str,
        birth_year: int,
        birth_month: int,
        birth_day: int,
        sex: Sex | str,
        municipality_name: str,
        province_code: str,
    ) -> PersonRecord:
        """Validate all fields and build the record.

        Raises:
            InvalidFieldError: On the first field that fails validation.
        """
        try:
            return cls(
                surname=surname,
                name=name,
                birth_year=birth_year,
                birth_month=birth_month,
                birth_day=birth_day,
                sex=sex,
                municipality_name=municipality_name,
                province_code=province_code,
            )
        except ValidationError as exc:
            field, message = _first_error(exc)
            raise InvalidFieldError(field, message) from exc
