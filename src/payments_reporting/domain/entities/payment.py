"""Payment and PaymentItem entities.

Both are frozen dataclasses: equality and hashing cover every field, so two
payments with the same id, user, date and items collapse in a set.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from payments_reporting.domain.exceptions import InvalidAmountError, InvalidPaymentDateError
from payments_reporting.domain.value_objects import YearMonth

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime
    from decimal import Decimal

    from payments_reporting.domain.entities.user import User
    from payments_reporting.domain.value_objects import PaymentId


@dataclass(frozen=True, slots=True)
class PaymentItem:
    """One line item of a payment.

    Prices are exact decimals. ``final_price`` is what was actually charged;
    ``regular_price`` is the list price before any discount.
    """

    name: str
    regular_price: Decimal
    final_price: Decimal

    def __post_init__(self) -> None:
        if self.regular_price < 0:
            raise InvalidAmountError(
                f"Regular price must not be negative, got {self.regular_price}"
            )
        if self.final_price < 0:
            raise InvalidAmountError(f"Final price must not be negative, got {self.final_price}")

    def calculate_discount(self) -> Decimal:
        """Discount granted on this item (regular price minus final price)."""
        return self.regular_price - self.final_price


@dataclass(frozen=True, slots=True)
class Payment:
    """A sale transaction.

    ``payment_items`` is normalized to a tuple so the record stays hashable.
    It may be empty and may contain the same item more than once.
    """

    id: PaymentId
    user: User
    payment_date: datetime
    payment_items: tuple[PaymentItem, ...] = ()

    def __post_init__(self) -> None:
        if self.payment_date.tzinfo is None or self.payment_date.utcoffset() is None:
            raise InvalidPaymentDateError(
                f"Payment date must be timezone-aware, got naive {self.payment_date.isoformat()}"
            )
        if not isinstance(self.payment_items, tuple):
            items: Iterable[PaymentItem] = self.payment_items
            object.__setattr__(self, "payment_items", tuple(items))

    @property
    def item_count(self) -> int:
        return len(self.payment_items)

    @property
    def year_month(self) -> YearMonth:
        """Calendar month of the payment date, in the date's own zone."""
        return YearMonth.from_datetime(self.payment_date)
