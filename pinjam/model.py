"""The customer record kept by the loan ledger."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Customer:
    """A borrower, the amount borrowed, the tenor in months and instalments paid."""

    name: str
    loan_amount: float
    tenor: int
    paid_installments: int = 0

    def remaining_installments(self) -> int:
        """Number of monthly instalments still to be paid."""
        return self.tenor - self.paid_installments

    def is_paid_off(self) -> bool:
        """True once every instalment of the tenor has been paid."""
        return self.paid_installments == self.tenor