"""Domain exceptions for payments-reporting.

Exception hierarchy:
    DomainException (base)
    └── Validation Errors
        ├── InvalidPaymentIdError
        ├── InvalidYearMonthError
        ├── InvalidAmountError
        └── InvalidPaymentDateError

Queries never raise these. They surface only when a caller builds a
malformed domain object.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidPaymentIdError(DomainException):
    """Raised when a payment ID is not a valid UUID."""


class InvalidYearMonthError(DomainException):
    """Raised when a year-month has a month outside 1..12 or cannot be parsed."""


class InvalidAmountError(DomainException):
    """Raised when a monetary amount is negative.

    Enforced in PaymentItem construction for both regular and final price.
    """


class InvalidPaymentDateError(DomainException):
    """Raised when a payment date is a naive datetime.

    Payment dates are compared across zones, so they must carry tzinfo.
    """
