"""HTTP routes for fiscal code generation."""
# ruff: noqa: B008

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from cfgen.builder import generate_fiscal_code
from cfgen.exceptions import InvalidDateError, InvalidFieldError, MunicipalityNotFoundError
from cfgen.municipalities import MunicipalityIndex, load_municipality_index
from cfgen.schemas.api import FiscalCodeRequest, FiscalCodeResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["fiscal-code"])


def get_municipality_index() -> MunicipalityIndex:
    """Dependency returning the process-wide municipality index."""
    return load_municipality_index()


@router.post("/fiscal-code", response_model=FiscalCodeResponse)
def create_fiscal_code(
    payload: FiscalCodeRequest,
    index: MunicipalityIndex = Depends(get_municipality_index),
) -> FiscalCodeResponse:
    """Compute the fiscal code for the submitted person."""
    try:
        code = generate_fiscal_code(
            surname=payload.surname,
            name=payload.name,
            birth_year=payload.birth_year,
            birth_month=payload.birth_month,
            birth_day=payload.birth_day,
            sex=payload.sex,
            municipality_name=payload.municipality,
            province_code=payload.province,
            index=index,
        )
    except InvalidFieldError as exc:
        raise HTTPException(
            status_code=422,
            detail={"field": exc.field, "message": exc.message},
        ) from exc
    except InvalidDateError as exc:
        raise HTTPException(
            status_code=422,
            detail={"field": "birth_day", "message": str(exc)},
        ) from exc
    except MunicipalityNotFoundError as exc:
        logger.info("Unknown municipality %s (%s)", exc.municipality, exc.province)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"field": "municipality", "message": str(exc)},
        ) from exc

    return FiscalCodeResponse(fiscal_code=code)
