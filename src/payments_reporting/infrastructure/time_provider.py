from __future__ import annotations

from datetime import UTC, datetime, timedelta

from payments_reporting.application.ports import TimeProvider


class SystemTimeProvider(TimeProvider):
    """Production time provider reading the system clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedTimeProvider(TimeProvider):
    """Test time provider pinned to a UTC instant.

    current_year_month() is inherited from TimeProvider and therefore
    always agrees with the pinned instant. NOT thread-safe.
    """

    def __init__(self, fixed_time: datetime) -> None:
        self._fixed_time = self._require_utc(fixed_time)

    def now(self) -> datetime:
        return self._fixed_time

    def set_time(self, new_time: datetime) -> None:
        """Pin the clock to another instant (may move backwards)."""
        self._fixed_time = self._require_utc(new_time)

    def advance(self, delta: timedelta) -> datetime:
        """Move the pinned instant by ``delta`` and return the new time."""
        self._fixed_time = self._fixed_time + delta
        return self._fixed_time

    @staticmethod
    def _require_utc(dt: datetime) -> datetime:
        if dt.tzinfo is not UTC:
            raise ValueError(f"datetime must have tzinfo=UTC, got tzinfo={dt.tzinfo}")
        return dt
