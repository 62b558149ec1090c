from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from payments_reporting.application.ports import PaymentRepository

if TYPE_CHECKING:
    from collections.abc import Iterable

    from payments_reporting.domain.entities import Payment


class InMemoryPaymentRepository(PaymentRepository):
    """In-memory payment repository for testing and embedding.

    Implementation notes:
    - List-backed: insertion order is the dataset order
    - save() appends; saving an equal payment twice stores it twice
    - Returns deep copies from find_all() to mimic database detachment
    - NOT thread-safe for concurrent writers

    Deepcopy assumptions:
    - All entities and value objects must be deepcopy-safe (frozen dataclasses are)
    - Decimal and tz-aware datetime values survive deepcopy correctly
    """

    def __init__(self, payments: Iterable[Payment] = ()) -> None:
        self._payments: list[Payment] = []
        self.save_all(payments)

    def find_all(self) -> list[Payment]:
        return copy.deepcopy(self._payments)

    def save(self, payment: Payment) -> None:
        self._payments.append(copy.deepcopy(payment))

    def save_all(self, payments: Iterable[Payment]) -> None:
        for payment in payments:
            self.save(payment)
