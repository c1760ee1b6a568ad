import pytest

from listbench.aulist import AUList

DESCENDING = [100, 90, 80, 70, 60, 50, 40, 30, 20, 10]


def _build(values, capacity=3500):
    lst = AUList(capacity)
    for value in values:
        lst.put_item(value)
    return lst


@pytest.mark.parametrize(
    "values, text",
    [
        ([], "()"),
        ([5, 3, 9, 3], "(5, 3, 9, 3)"),
        (DESCENDING, "(100, 90, 80, 70, 60, 50, 40, 30, 20, 10)"),
    ],
)
def test_keeps_insertion_order(values, text):
    lst = _build(values)
    assert list(lst) == values
    assert len(lst) == len(values)
    assert str(lst) == text


def test_delete_keeps_order_of_rest():
    lst = _build(DESCENDING)
    lst.delete_item(50)
    assert list(lst) == [100, 90, 80, 70, 60, 40, 30, 20, 10]
    assert lst.get_item(80) == 2
    assert lst.get_item(25) == -1


def test_duplicates_searched_from_end_deleted_from_front():
    lst = _build([7, 3, 7])
    assert lst.get_item(7) == 2
    lst.delete_item(7)
    assert list(lst) == [3, 7]


@pytest.mark.parametrize("capacity, count", [(10, 10), (3500, 3500)])
def test_capacity_limit(capacity, count):
    lst = _build(range(count), capacity)
    assert lst.is_full()
    with pytest.raises(OverflowError):
        lst.put_item(1)
    lst.delete_item(0)
    assert not lst.is_full()


def test_delete_missing_raises():
    lst = _build(DESCENDING)
    with pytest.raises(ValueError):
        lst.delete_item(25)
    assert len(lst) == 10


def test_make_empty_clears_everything():
    lst = _build(DESCENDING)
    lst.make_empty()
    assert str(lst) == "()"
    assert lst.get_item(100) == -1


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        AUList(-3)