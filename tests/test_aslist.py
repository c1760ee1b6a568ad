import pytest

from listbench.aslist import ASList


def _sorted_list(values, capacity=3500):
    lst = ASList(capacity)
    for value in values:
        lst.put_item(value)
    return lst


@pytest.mark.parametrize("values", [[5, 3, 9, 1, 7, 3, -2], [4, 4, 4, 1, 9]])
def test_items_come_out_sorted(values):
    lst = _sorted_list(values)
    assert list(lst) == sorted(values)
    assert list(lst)[lst.get_item(values[0])] == values[0]


def test_ten_item_array_walkthrough():
    lst = _sorted_list(range(100, 0, -10), capacity=10)
    assert str(lst) == "(10, 20, 30, 40, 50, 60, 70, 80, 90, 100)"
    assert lst.is_full()
    with pytest.raises(OverflowError):
        lst.put_item(5)

    lst.delete_item(50)
    assert str(lst) == "(10, 20, 30, 40, 60, 70, 80, 90, 100)"
    assert not lst.is_full()
    assert lst.get_item(80) == 6
    assert lst.get_item(25) == -1


def test_default_array_holds_3500():
    lst = _sorted_list(range(3499, -1, -1))
    assert lst.is_full()
    assert lst.get_item(0) == 0
    assert lst.get_item(3499) == 3499


@pytest.mark.parametrize("values, missing", [([], 4), ([10, 20], 15), ([10, 20], 25)])
def test_absent_values(values, missing):
    lst = _sorted_list(values)
    assert lst.get_item(missing) == -1
    with pytest.raises(ValueError):
        lst.delete_item(missing)
    assert len(lst) == len(values)


def test_only_one_duplicate_deleted_and_reuse_after_empty():
    lst = _sorted_list([4, 4])
    lst.delete_item(4)
    assert list(lst) == [4]
    lst.make_empty()
    assert str(lst) == "()"
    lst.put_item(3)
    assert list(lst) == [3]


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        ASList(-1)