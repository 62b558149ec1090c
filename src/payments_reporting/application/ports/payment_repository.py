from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payments_reporting.domain.entities import Payment


class PaymentRepository(ABC):
    """Port for reading the payment dataset.

    Contract:
    - find_all() returns every payment currently known, in storage order
    - find_all() never returns None; an empty dataset is an empty list
    - Returned list is a copy; mutating it does not affect stored state
    - Order carries no meaning beyond being stable between calls
    """

    @abstractmethod
    def find_all(self) -> list[Payment]:
        """Return the complete current dataset.

        Returns:
            All payments, possibly empty. Duplicates are kept as stored.
        """
