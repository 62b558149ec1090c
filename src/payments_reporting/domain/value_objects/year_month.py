from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from payments_reporting.domain.exceptions import InvalidYearMonthError

if TYPE_CHECKING:
    from datetime import datetime

_YEAR_MONTH_PATTERN = re.compile(r"^(-?\d{4,})-(\d{2})$")


@dataclass(frozen=True, slots=True, order=True)
class YearMonth:
    """A calendar month identified by year and month number.

    Ordering is chronological (year first, then month).
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise InvalidYearMonthError(f"Month must be between 1 and 12, got {self.month}")

    @classmethod
    def from_datetime(cls, dt: datetime) -> YearMonth:
        """Year-month of a datetime, read in the datetime's own zone."""
        return cls(year=dt.year, month=dt.month)

    @classmethod
    def parse(cls, text: str) -> YearMonth:
        """Parse a ``YYYY-MM`` string.

        Raises:
            InvalidYearMonthError: If the text is not in ``YYYY-MM`` form
                or the month is out of range.
        """
        match = _YEAR_MONTH_PATTERN.match(text.strip())
        if match is None:
            raise InvalidYearMonthError(f"Invalid year-month: {text!r}; expected YYYY-MM")
        return cls(year=int(match.group(1)), month=int(match.group(2)))

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
