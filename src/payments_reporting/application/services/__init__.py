"""Services - Read-only queries over the payment dataset."""

from payments_reporting.application.services.payment_query_service import PaymentQueryService

__all__ = [
    "PaymentQueryService",
]
