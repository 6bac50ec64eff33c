"""Console loan manager: customers, payments, sorting and installment simulations."""

__version__ = "0.1.0"