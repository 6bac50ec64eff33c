"""Looking customers up by name."""

from __future__ import annotations

from collections.abc import Sequence

from pinjam.model import Customer


class CustomerNotFound(LookupError):
    """Raised when no customer carries the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"❌ Data tidak ditemukan: {name}")
        self.name = name


def find_customer(customers: Sequence[Customer], name: str) -> int:
    """Return the position of the first customer named ``name``."""
    for index, customer in enumerate(customers):
        if customer.name == name:
            return index
    raise CustomerNotFound(name)


def name_taken(customers: Sequence[Customer], name: str) -> bool:
    """True if some customer already uses ``name``."""
    return any(customer.name == name for customer in customers)