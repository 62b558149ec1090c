"""Domain entities - Sale records and their participants."""

from payments_reporting.domain.entities.payment import Payment, PaymentItem
from payments_reporting.domain.entities.user import User

__all__ = [
    "Payment",
    "PaymentItem",
    "User",
]
