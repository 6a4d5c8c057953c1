"""HTTP request/response payloads.

Only shapes are declared here; the domain rules live in PersonRecord so
that the HTTP layer and the Python API reject the same inputs.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class FiscalCodeRequest(BaseModel):
    """Input of POST /fiscal-code."""

    surname: str = Field(examples=["Rossi"])
    name: str = Field(examples=["Mario"])
    birth_year: int = Field(examples=[1980])
    birth_month: int = Field(examples=[1])
    birth_day: int = Field(examples=[1])
    sex: str = Field(examples=["M"])          # "M" or "F", case-insensitive
    municipality: str = Field(examples=["Roma"])
    province: str = Field(examples=["RM"])


class FiscalCodeResponse(BaseModel):
    """Output of POST /fiscal-code."""

    fiscal_code: str
