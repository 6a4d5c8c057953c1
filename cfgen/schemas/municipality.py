"""One row of the municipality reference table."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cfgen.encoders.text import normalize_key


class MunicipalityRecord(BaseModel):
    """Municipality name, province and cadastral (Belfiore) code."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    province: str = Field(pattern=r"^[A-Z]{2}$")
    cadastral_code: str = Field(pattern=r"^[A-Z]\d{3}$")  # e.g. "H501"

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("province", "cadastral_code", mode="before")
    @classmethod
    def upper_code(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def key(self) -> tuple[str, str]:
        """Lookup key: normalized name and province code."""
        return normalize_key(self.name), self.province
