"""Municipality name + province -> cadastral code (codice catastale / Belfiore).

The reference table is read once into a read-only, hash-keyed index.
Lookups are exact on the upper-cased, accent-free name and the upper-cased
province code: no fuzzy or partial matching.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from pydantic import ValidationError

from cfgen.config import settings
from cfgen.encoders.text import normalize_key
from cfgen.exceptions import MunicipalityDataError, MunicipalityNotFoundError
from cfgen.schemas.municipality import MunicipalityRecord

logger = logging.getLogger(__name__)

# CSV header columns
_COL_NAME = "comune"
_COL_PROVINCE = "provincia"
_COL_CODE = "codice_catastale"
_REQUIRED_COLUMNS = frozenset({_COL_NAME, _COL_PROVINCE, _COL_CODE})


class MunicipalityIndex:
    """Immutable (normalized name, province) -> cadastral code mapping.

    Safe to share between threads: it is never mutated after construction.
    """

    def __init__(self, entries: Mapping[tuple[str, str], str]) -> None:
        # Keys must already be normalized; use from_records() for raw data.
        self._entries: Mapping[tuple[str, str], str] = MappingProxyType(dict(entries))

    @classmethod
    def from_records(cls, records: Iterable[MunicipalityRecord]) -> MunicipalityIndex:
        """Build the index; on duplicate keys the first row wins."""
        entries: dict[tuple[str, str], str] = {}
        for record in records:
            key = record.key
            if key in entries:
                logger.warning(
                    "Duplicate municipality %s (%s): keeping %s, ignoring %s",
                    key[0], key[1], entries[key], record.cadastral_code,
                )
                continue
            entries[key] = record.cadastral_code
        return cls(entries)

    @classmethod
    def from_csv(cls, path: Path, delimiter: str = ",") -> MunicipalityIndex:
        """Read a delimited file with a comune/provincia/codice_catastale header.

        Raises:
            MunicipalityDataError: If the file is missing, lacks a column
                or contains an invalid row.
        """
        if not path.exists():
            msg = f"Municipality file not found: {path}"
            raise MunicipalityDataError(msg)

        records: list[MunicipalityRecord] = []
        with open(path, encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f, delimiter=delimiter)
            missing = _REQUIRED_COLUMNS - set(reader.fieldnames or ())
            if missing:
                msg = f"{path}: missing columns {sorted(missing)}"
                raise MunicipalityDataError(msg)

            for row in reader:
                try:
                    records.append(MunicipalityRecord(
                        name=row[_COL_NAME],
                        province=row[_COL_PROVINCE],
                        cadastral_code=row[_COL_CODE],
                    ))
                except ValidationError as exc:
                    error = exc.errors()[0]
                    msg = f"{path}:{reader.line_num}: invalid {error['loc'][0]} ({error['msg']})"
                    raise MunicipalityDataError(msg) from exc

        return cls.from_records(records)

    def resolve(self, municipality: str, province: str) -> str:
        """Return the 4-character cadastral code.

        Raises:
            MunicipalityNotFoundError: If no entry matches exactly.
        """
        key = (normalize_key(municipality), province.strip().upper())
        code = self._entries.get(key)
        if code is None:
            raise MunicipalityNotFoundError(municipality, province)
        return code

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MunicipalityIndex({len(self._entries)} entries)"


@lru_cache(maxsize=1)
def load_municipality_index() -> MunicipalityIndex:
    """Load the configured reference file once per process."""
    path = settings.reference.municipalities_path
    index = MunicipalityIndex.from_csv(path, settings.reference.municipalities_delimiter)
    logger.info("Loaded %d municipalities from %s", len(index), path)
    return index
