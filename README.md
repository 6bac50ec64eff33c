# pinjam

A small interactive console program for keeping track of customer loans.
All screens and prompts are in Indonesian.

For each customer (*nasabah*) it records a name, the loan amount, the loan
term in months (3, 6 or 12), and how many installments have been paid.

## Installation

```
pip install .
```

## Usage

```
pinjam
```

The command takes no options apart from `--help`. When it starts, it asks
whether to load a set of ten sample customers (`y`/`n`). It then shows a menu:

1. Add a borrower. Names must be non-empty and unique. Amounts must be numbers.
2. Edit a borrower's data. You enter a new name, amount and term. If the
   borrower had already paid some installments, you are asked for the paid
   count again.
3. Delete a borrower. You are asked to confirm first (`y`/`n`).
4. Simulate a loan at 1% per month. There are two choices. Fixed interest
   charges interest on the original principal. Variable interest charges it on
   the declining principal, shown month by month.
5. Record how many installments a borrower has paid, from 0 up to the term.
   It then shows whether the loan is paid off or how many installments remain.
6. Search for a borrower by exact name.
7. Sort borrowers by loan amount, ascending or descending, with selection sort
   or insertion sort. The list is reordered in place.
8. Show a report of all borrowers.
9. Exit.

If the input ends, or you press Ctrl-C, the program stops.

## What it does not do

Data is held in memory only. Nothing is saved to or loaded from a file, so
every entry is lost when the program exits.

## Using the library

The building blocks can be used on their own:

```python
from pinjam.model import Customer
from pinjam.interest import fixed_interest, variable_schedule
from pinjam.sorting import insertion_sort, selection_sort
from pinjam.search import CustomerNotFound, find_customer

customer = Customer("Andi Setiawan", 15_000_000, 12)
summary = fixed_interest(customer)        # FixedInterest: monthly_interest, total_payment, installment, ...
schedule = variable_schedule(customer)    # list of VariableInstallment, one per month

customers = [customer, Customer("Citra Ayu", 10_000_000, 6)]
insertion_sort(customers, descending=True)    # sorts in place by loan_amount
index = find_customer(customers, "Citra Ayu") # raises CustomerNotFound if absent
```

`fixed_interest` and `variable_schedule` raise `ValueError` when the tenor is
not positive. `Customer.remaining_installments()` and `Customer.is_paid_off()`
report on payment progress.

The menu can also be driven with scripted input through `Console`:

```python
import io
from pinjam.app import run
from pinjam.console import Console

console = Console(io.StringIO("y\n8\n9\n"), io.StringIO())
customers = run(console)  # loads the sample data, prints the report, exits
```

## Running the tests

```
pip install .[test]
pytest
```