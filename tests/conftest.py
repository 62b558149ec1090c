"""Shared pytest fixtures for the test suite."""

from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from payments_reporting.domain.entities import Payment, PaymentItem, User
from payments_reporting.domain.value_objects import PaymentId
from payments_reporting.infrastructure.time_provider import FixedTimeProvider

PaymentFactory = Callable[..., Payment]
ItemFactory = Callable[..., PaymentItem]


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 6, 10, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def buyer() -> User:
    return User(name="Anna Kowalska", email="anna@example.com")


@pytest.fixture
def make_item() -> ItemFactory:
    """Factory for items from string amounts; regular price defaults to final."""

    def _make(name: str, final_price: str, regular_price: str | None = None) -> PaymentItem:
        return PaymentItem(
            name=name,
            regular_price=Decimal(regular_price if regular_price is not None else final_price),
            final_price=Decimal(final_price),
        )

    return _make


@pytest.fixture
def make_payment(buyer: User) -> PaymentFactory:
    """Factory for payments with a fresh id and the default buyer."""

    def _make(
        payment_date: datetime,
        items: Iterable[PaymentItem] = (),
        user: User | None = None,
    ) -> Payment:
        return Payment(
            id=PaymentId.generate(),
            user=user or buyer,
            payment_date=payment_date,
            payment_items=tuple(items),
        )

    return _make
