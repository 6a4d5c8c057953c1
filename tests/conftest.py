"""Shared fixtures."""

from __future__ import annotations

import pytest

from cfgen.municipalities import MunicipalityIndex
from cfgen.schemas.municipality import MunicipalityRecord


@pytest.fixture
def index() -> MunicipalityIndex:
    """Small in-memory municipality index."""
    return MunicipalityIndex.from_records([
        MunicipalityRecord(name="Roma", province="RM", cadastral_code="H501"),
        MunicipalityRecord(name="Milano", province="MI", cadastral_code="F205"),
        MunicipalityRecord(name="Forlì", province="FC", cadastral_code="D704"),
        MunicipalityRecord(name="Torino", province="TO", cadastral_code="L219"),
    ])
