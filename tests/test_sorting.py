import pytest

from pinjam.model import Customer
from pinjam.sorting import insertion_sort, selection_sort


def _sample():
    return [
        Customer("Andi Setiawan", 15000000, 12, 6),
        Customer("Budi Hartono", 20000000, 12, 12),
        Customer("Citra Ayu", 10000000, 6, 6),
        Customer("Dewi Lestari", 25000000, 12, 3),
        Customer("Eka Pratama", 30000000, 3, 1),
        Customer("Fajar Nugroho", 12000000, 12, 3),
        Customer("Gina Marissa", 18000000, 12, 6),
        Customer("Hadi Santoso", 22000000, 6, 4),
        Customer("Ika Putri", 9000000, 6, 3),
        Customer("Joko Susanto", 27000000, 12, 12),
    ]


SORTS = [selection_sort, insertion_sort]


@pytest.mark.parametrize("sort", SORTS)
def test_ascending_is_ordered_permutation(sort):
    data = _sample()
    sort(data)
    amounts = [c.loan_amount for c in data]
    assert amounts == sorted(amounts)
    assert sorted(c.name for c in data) == sorted(c.name for c in _sample())


@pytest.mark.parametrize("sort", SORTS)
def test_descending_is_ordered_permutation(sort):
    data = _sample()
    sort(data, descending=True)
    amounts = [c.loan_amount for c in data]
    assert amounts == sorted(amounts, reverse=True)
    assert data[0].name == "Eka Pratama"
    assert data[-1].name == "Ika Putri"


@pytest.mark.parametrize("sort", SORTS)
def test_empty_and_single(sort):
    empty = []
    sort(empty)
    assert empty == []
    single = [Customer("Citra Ayu", 10000000, 6)]
    sort(single, descending=True)
    assert single == [Customer("Citra Ayu", 10000000, 6)]


def test_insertion_sort_is_stable():
    data = [Customer("A", 5, 3), Customer("B", 5, 3), Customer("C", 1, 3)]
    insertion_sort(data)
    assert [c.name for c in data] == ["C", "A", "B"]
    data = [Customer("A", 1, 3), Customer("B", 1, 3), Customer("C", 5, 3)]
    insertion_sort(data, descending=True)
    assert [c.name for c in data] == ["C", "A", "B"]


def test_selection_sort_swaps_like_classic_algorithm():
    data = [Customer("A", 5, 3), Customer("B", 5, 3), Customer("C", 1, 3)]
    selection_sort(data)
    assert [c.name for c in data] == ["C", "B", "A"]
    data = [Customer("A", 1, 3), Customer("B", 1, 3), Customer("C", 5, 3)]
    selection_sort(data, descending=True)
    assert [c.name for c in data] == ["C", "B", "A"]


@pytest.mark.parametrize("sort", SORTS)
def test_sort_keeps_same_objects(sort):
    data = _sample()
    originals = {id(c) for c in data}
    sort(data)
    assert {id(c) for c in data} == originals