"""Birth date and sex encoding (characters 7-11 of the fiscal code).

Format: 00C00
  - 00: year of birth (last 2 digits)
  - C:  month of birth (letter A-T, non-sequential)
  - 00: day of birth (1-31 male, 41-71 female)
"""

from __future__ import annotations

from cfgen.exceptions import InvalidDateError
from cfgen.models.enums import Sex

# January..December
MONTH_LETTERS: tuple[str, ...] = ("A", "B", "C", "D", "E", "H", "L", "M", "P", "R", "S", "T")

FEMALE_DAY_OFFSET = 40

_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def year_block(year: int) -> str:
    """Last two digits of the year, e.g. 1986 -> "86"."""
    return f"{year % 100:02d}"


def month_letter(month: int) -> str:
    """Letter for a 1-based month."""
    if not 1 <= month <= 12:
        msg = f"Month out of range: {month}"
        raise ValueError(msg)
    return MONTH_LETTERS[month - 1]


def day_sex_block(day: int, sex: Sex) -> str:
    """Zero-padded day, plus 40 for women."""
    if Sex(sex) is Sex.FEMALE:
        day += FEMALE_DAY_OFFSET
    return f"{day:02d}"


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Number of days of a month, February depending on the year."""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


def validate_birth_date(year: int, month: int, day: int) -> None:
    """Raise InvalidDateError if the day does not exist in that month/year."""
    if not 1 <= day <= days_in_month(month, year):
        raise InvalidDateError(year, month, day)
