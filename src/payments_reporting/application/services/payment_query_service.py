from __future__ import annotations

import logging
from collections.abc import Sized
from datetime import timedelta
from decimal import Decimal
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from payments_reporting.application.ports import PaymentRepository, TimeProvider
    from payments_reporting.domain.entities import Payment, PaymentItem
    from payments_reporting.domain.value_objects import YearMonth

logger = logging.getLogger(__name__)

SizedT = TypeVar("SizedT", bound=Sized)


def payment_date_key(payment: Payment) -> datetime:
    return payment.payment_date


def item_count_key(payment: Payment) -> int:
    return payment.item_count


def payment_value(payment: Payment) -> float:
    """Sum of final prices as a float.

    Only used by with_value_over(), which compares in floating point.
    """
    return sum(float(item.final_price) for item in payment.payment_items)


class PaymentQueryService:
    """Read-only reporting queries over the full payment dataset.

    Responsibilities:
    - Fetch the dataset from PaymentRepository on every call (no caching)
    - Sort, filter and aggregate in memory
    - Read "now" only through TimeProvider

    Every query returns a new container and never mutates the payments.
    A query with no matches returns an empty container or Decimal("0").
    Errors raised by the collaborators propagate unchanged.
    """

    def __init__(
        self,
        payment_repository: PaymentRepository,
        time_provider: TimeProvider,
    ) -> None:
        self._payment_repo = payment_repository
        self._time_provider = time_provider

    # -------------------------------------------------------------------------
    # Sorting
    # -------------------------------------------------------------------------

    def sorted_by_date_ascending(self) -> list[Payment]:
        """Payments ordered by date, earliest first. Ties keep dataset order."""
        return self._sorted_by(payment_date_key, "sorted_by_date_ascending")

    def sorted_by_date_descending(self) -> list[Payment]:
        """Payments ordered by date, latest first. Ties keep dataset order."""
        return self._sorted_by(payment_date_key, "sorted_by_date_descending", reverse=True)

    def sorted_by_item_count_ascending(self) -> list[Payment]:
        return self._sorted_by(item_count_key, "sorted_by_item_count_ascending")

    def sorted_by_item_count_descending(self) -> list[Payment]:
        return self._sorted_by(item_count_key, "sorted_by_item_count_descending", reverse=True)

    # -------------------------------------------------------------------------
    # Time window filters
    # -------------------------------------------------------------------------

    def for_month(self, year_month: YearMonth) -> list[Payment]:
        """Payments dated in the given month of the year.

        Only the month number is compared; the year of ``year_month`` is
        ignored, so March 2024 also matches payments from March 2023.
        """
        return self._for_month_of_year(year_month.month, "for_month")

    def for_current_month(self) -> list[Payment]:
        """Same as for_month(), using the provider's current month."""
        current = self._time_provider.current_year_month()
        return self._for_month_of_year(current.month, "for_current_month")

    def for_last_days(self, days: int) -> list[Payment]:
        """Payments dated strictly after ``now - (days - 1)`` days.

        ``days=1`` keeps only payments later than now itself. Negative values
        are not validated and move the boundary into the future.
        """
        payments = self._fetch("for_last_days")
        since = self._time_provider.now() - timedelta(days=days - 1)
        result = [payment for payment in payments if payment.payment_date > since]
        return self._done("for_last_days", result)

    # -------------------------------------------------------------------------
    # Cardinality filters
    # -------------------------------------------------------------------------

    def with_exactly_one_item(self) -> set[Payment]:
        payments = self._fetch("with_exactly_one_item")
        result = {payment for payment in payments if payment.item_count == 1}
        return self._done("with_exactly_one_item", result)

    def with_value_over(self, threshold: float) -> set[Payment]:
        """Payments whose float sum of final prices is strictly above threshold."""
        payments = self._fetch("with_value_over")
        result = {payment for payment in payments if payment_value(payment) > threshold}
        return self._done("with_value_over", result)

    # -------------------------------------------------------------------------
    # Aggregations
    # -------------------------------------------------------------------------

    def products_sold_in_current_month(self) -> set[str]:
        payments = self._fetch("products_sold_in_current_month")
        current = self._time_provider.current_year_month()
        result = {
            item.name
            for payment in payments
            if payment.year_month == current
            for item in payment.payment_items
        }
        return self._done("products_sold_in_current_month", result)

    def total_for_month(self, year_month: YearMonth) -> Decimal:
        """Exact sum of item final prices for payments in ``year_month``."""
        return self._sum_items_for_month(
            year_month, lambda item: item.final_price, "total_for_month"
        )

    def total_discount_for_month(self, year_month: YearMonth) -> Decimal:
        """Exact sum of item discounts for payments in ``year_month``."""
        return self._sum_items_for_month(
            year_month, lambda item: item.calculate_discount(), "total_discount_for_month"
        )

    def items_for_user_email(self, email: str) -> list[PaymentItem]:
        """Items of every payment made by the user with exactly this email.

        Items keep dataset order; duplicates are retained.
        """
        payments = self._fetch("items_for_user_email")
        result = [
            item
            for payment in payments
            if payment.user.email == email
            for item in payment.payment_items
        ]
        return self._done("items_for_user_email", result)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _fetch(self, operation: str) -> list[Payment]:
        payments = self._payment_repo.find_all()
        logger.debug("%s: fetched %s payments", operation, len(payments))
        return payments

    def _done(self, operation: str, result: SizedT) -> SizedT:
        logger.debug("%s: returning %s results", operation, len(result))
        return result

    def _sorted_by(
        self,
        key: Callable[[Payment], Any],
        operation: str,
        *,
        reverse: bool = False,
    ) -> list[Payment]:
        payments = self._fetch(operation)
        # sorted() is stable in both directions, so ties keep dataset order
        result = sorted(payments, key=key, reverse=reverse)
        return self._done(operation, result)

    def _for_month_of_year(self, month: int, operation: str) -> list[Payment]:
        payments = self._fetch(operation)
        result = [payment for payment in payments if payment.payment_date.month == month]
        return self._done(operation, result)

    def _sum_items_for_month(
        self,
        year_month: YearMonth,
        amount: Callable[[PaymentItem], Decimal],
        operation: str,
    ) -> Decimal:
        payments = self._fetch(operation)
        total = sum(
            (
                amount(item)
                for payment in payments
                if payment.year_month == year_month
                for item in payment.payment_items
            ),
            Decimal("0"),
        )
        logger.debug("%s: %s total for %s", operation, total, year_month)
        return total
