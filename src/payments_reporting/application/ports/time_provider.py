from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from payments_reporting.domain.value_objects import YearMonth

if TYPE_CHECKING:
    from datetime import datetime


class TimeProvider(ABC):
    """Port for time operations.

    Contract:
    - now() MUST return a datetime with tzinfo=datetime.UTC
    - now() MUST NOT return naive datetimes under any circumstance
    - current_year_month() MUST agree with now()

    Reporting queries that depend on "today" read the clock only through
    this port, so tests can pin the current instant.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current UTC datetime (tzinfo=datetime.UTC)."""
        ...

    def current_year_month(self) -> YearMonth:
        """Return the calendar month containing now()."""
        return YearMonth.from_datetime(self.now())
