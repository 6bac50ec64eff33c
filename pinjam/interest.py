"""Instalment simulations at a flat rate of 1% per month."""

from __future__ import annotations

from dataclasses import dataclass

from pinjam.model import Customer

MONTHLY_RATE = 0.01


@dataclass(frozen=True)
class FixedInterest:
    """Figures for a loan whose interest is charged on the original principal."""

    principal: float
    tenor: int
    monthly_interest: float
    total_interest: float
    total_payment: float
    installment: float


@dataclass(frozen=True)
class VariableInstallment:
    """One month of a loan whose interest is charged on the remaining principal."""

    month: int
    remaining_principal: float
    interest: float
    principal_portion: float
    installment: float


def _check_tenor(customer: Customer) -> None:
    if customer.tenor <= 0:
        raise ValueError(f"tenor must be positive, got {customer.tenor}")


def fixed_interest(customer: Customer) -> FixedInterest:
    """Compute the fixed-interest figures for ``customer``'s loan."""
    _check_tenor(customer)
    monthly = customer.loan_amount * MONTHLY_RATE
    total_interest = monthly * customer.tenor
    total_payment = customer.loan_amount + total_interest
    return FixedInterest(
        principal=customer.loan_amount,
        tenor=customer.tenor,
        monthly_interest=monthly,
        total_interest=total_interest,
        total_payment=total_payment,
        installment=total_payment / customer.tenor,
    )


def variable_schedule(customer: Customer) -> list[VariableInstallment]:
    """Month-by-month instalments with interest on the declining principal."""
    _check_tenor(customer)
    remaining = customer.loan_amount
    portion = remaining / customer.tenor
    schedule = []
    for month in range(1, customer.tenor + 1):
        interest = remaining * MONTHLY_RATE
        schedule.append(
            VariableInstallment(
                month=month,
                remaining_principal=remaining,
                interest=interest,
                principal_portion=portion,
                installment=portion + interest,
            )
        )
        remaining -= portion
    return schedule