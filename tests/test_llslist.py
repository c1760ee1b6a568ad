import pytest

from listbench.llslist import LLSList


def _chain(values):
    lst = LLSList()
    for value in values:
        lst.put_item(value)
    return lst


TENS = range(100, 0, -10)


def test_sorted_on_insert():
    values = [5, 3, 9, 1, 7, 3, -2, 9]
    lst = _chain(values)
    assert list(lst) == sorted(values)
    assert len(lst) == 8
    assert lst.is_full() is False


def test_tens_walkthrough():
    lst = _chain(TENS)
    assert str(lst) == "(10, 20, 30, 40, 50, 60, 70, 80, 90, 100)"
    lst.delete_item(50)
    assert str(lst) == "(10, 20, 30, 40, 60, 70, 80, 90, 100)"
    assert lst.get_item(80) == 6


@pytest.mark.parametrize("missing", [-5, 25, 105])
def test_missing_values(missing):
    lst = _chain(TENS)
    assert lst.get_item(missing) == -1
    with pytest.raises(ValueError):
        lst.delete_item(missing)
    assert len(lst) == 10


def test_first_duplicate_position():
    assert _chain([4, 2, 4, 4]).get_item(4) == 1


@pytest.mark.parametrize("removed", [10, 100, 40])
def test_delete_anywhere_keeps_order(removed):
    lst = _chain(TENS)
    lst.delete_item(removed)
    items = list(lst)
    assert removed not in items
    assert items == sorted(items)
    assert len(items) == 9


def test_single_duplicate_deleted_and_empty_reuse():
    lst = _chain([4, 4])
    lst.delete_item(4)
    assert list(lst) == [4]
    lst.make_empty()
    with pytest.raises(ValueError):
        lst.delete_item(4)
    lst.put_item(1)
    assert str(lst) == "(1)"