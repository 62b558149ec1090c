"""Domain layer - Payment records and the rules that keep them well-formed.

This layer contains:
- Entities: Sale records as delivered by storage (Payment, PaymentItem, User)
- Value Objects: Immutable objects defined by their attributes (e.g., YearMonth, PaymentId)
- Domain Exceptions: Validation failures raised while building domain objects

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
