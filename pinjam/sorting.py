"""Ordering customers by loan amount with selection and insertion sort."""

from __future__ import annotations

import bisect

from pinjam.model import Customer


def _amount(customer: Customer) -> float:
    return customer.loan_amount


def _negated_amount(customer: Customer) -> float:
    return -customer.loan_amount


def selection_sort(customers: list[Customer], descending: bool = False) -> None:
    """Sort ``customers`` in place by loan amount using selection sort."""
    pick = max if descending else min
    for start in range(len(customers) - 1):
        # min/max return the first extreme element, matching a strict comparison scan.
        chosen = pick(range(start, len(customers)), key=lambda i: customers[i].loan_amount)
        customers[start], customers[chosen] = customers[chosen], customers[start]


def insertion_sort(customers: list[Customer], descending: bool = False) -> None:
    """Sort ``customers`` in place by loan amount using insertion sort (stable)."""
    key = _negated_amount if descending else _amount
    ordered: list[Customer] = []
    keys: list[float] = []
    for customer in customers:
        position = bisect.bisect_right(keys, key(customer))
        keys.insert(position, key(customer))
        ordered.insert(position, customer)
    customers[:] = ordered