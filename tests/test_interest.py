import pytest

from pinjam.interest import MONTHLY_RATE, fixed_interest, variable_schedule
from pinjam.model import Customer


def test_fixed_interest_charges_one_percent_per_month():
    result = fixed_interest(Customer("Citra Ayu", 100000, 3))
    assert result.monthly_interest == pytest.approx(1000)
    assert result.total_interest == pytest.approx(3000)
    assert result.monthly_interest == pytest.approx(100000 * MONTHLY_RATE)


def test_fixed_interest_totals_are_consistent():
    customer = Customer("Andi Setiawan", 15000000, 12, 6)
    result = fixed_interest(customer)
    assert result.principal == 15000000
    assert result.tenor == 12
    assert result.total_interest == pytest.approx(result.monthly_interest * 12)
    assert result.total_payment == pytest.approx(15000000 + result.total_interest)
    assert result.installment * 12 == pytest.approx(result.total_payment)


def test_fixed_interest_pinned_example():
    result = fixed_interest(Customer("Ika Putri", 9000000, 6))
    assert result.monthly_interest == pytest.approx(90000)
    assert result.total_payment == pytest.approx(9540000)


def test_fixed_interest_rejects_zero_tenor():
    with pytest.raises(ValueError):
        fixed_interest(Customer("X", 1000, 0))


def test_variable_schedule_shape():
    customer = Customer("Hadi Santoso", 22000000, 6, 4)
    schedule = variable_schedule(customer)
    assert [row.month for row in schedule] == [1, 2, 3, 4, 5, 6]
    assert schedule[0].remaining_principal == 22000000
    assert sum(row.principal_portion for row in schedule) == pytest.approx(22000000)


def test_variable_schedule_rows_are_consistent():
    schedule = variable_schedule(Customer("Joko Susanto", 27000000, 12))
    for row in schedule:
        assert row.installment == pytest.approx(row.principal_portion + row.interest)
        assert row.interest == pytest.approx(row.remaining_principal * MONTHLY_RATE)
    interests = [row.interest for row in schedule]
    assert interests == sorted(interests, reverse=True)
    assert schedule[-1].remaining_principal == pytest.approx(schedule[-1].principal_portion)


def test_variable_interest_is_below_fixed_interest():
    customer = Customer("Gina Marissa", 18000000, 12)
    variable_total = sum(row.interest for row in variable_schedule(customer))
    assert variable_total < fixed_interest(customer).total_interest


def test_variable_schedule_rejects_negative_tenor():
    with pytest.raises(ValueError):
        variable_schedule(Customer("X", 1000, -3))