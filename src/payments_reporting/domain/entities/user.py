from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    """Purchasing user attached to a payment.

    Email is matched exactly (case-sensitive) by reporting queries.
    """

    name: str
    email: str
