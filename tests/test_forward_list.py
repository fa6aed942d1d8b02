import pytest

from aedstructs.forward_list import ForwardList


def test_empty_list_accessors_raise():
    lst = ForwardList()
    assert len(lst) == 0
    for method in (lst.front, lst.back, lst.pop_front, lst.pop_back):
        with pytest.raises(IndexError):
            method()
    with pytest.raises(IndexError):
        lst[2]


def test_push_front_and_back():
    lst = ForwardList()
    lst.push_front("front1")
    lst.push_front("front2")
    lst.push_back("back1")
    lst.push_back("back2")
    assert lst.front() == "front2"
    assert lst.back() == "back2"
    assert list(lst) == ["front2", "front1", "back1", "back2"]
    assert [lst[i] for i in range(len(lst))] == list(lst)


def test_pop_returns_removed_values():
    lst = ForwardList(["front2", "front1", "back1", "back2"])
    assert lst.pop_front() == "front2"
    assert lst.pop_back() == "back2"
    assert lst.front() == "front1"
    assert len(lst) == 2


def test_pop_back_single_element_empties():
    lst = ForwardList([7])
    assert lst.pop_back() == 7
    assert len(lst) == 0
    lst.push_back(8)
    assert list(lst) == [8]


def test_clear():
    lst = ForwardList([1, 2, 3])
    lst.clear()
    assert len(lst) == 0
    assert list(lst) == []


def test_str_joins_with_arrows():
    assert str(ForwardList([1, 2, 3])) == "1 -> 2 -> 3"
    assert str(ForwardList()) == ""


def test_sort_orders_values():
    values = [5, 10, 2, 4, 9, 5, 2, 3]
    lst = ForwardList(values)
    lst.sort()
    assert list(lst) == sorted(values)
    assert len(lst) == len(values)


def test_sort_empty_and_single():
    empty = ForwardList()
    empty.sort()
    assert list(empty) == []
    single = ForwardList([4])
    single.sort()
    assert list(single) == [4]


def test_reverse():
    values = [2, 2, 3, 4, 5]
    lst = ForwardList(values)
    lst.reverse()
    assert list(lst) == values[::-1]
    lst.reverse()
    assert list(lst) == values


def test_insert_positions():
    lst = ForwardList([9, 2, 5, 3])
    lst.insert(0, 1)
    lst.insert(2, 7)
    lst.insert(len(lst), 8)
    assert list(lst) == [1, 9, 7, 2, 5, 3, 8]


def test_insert_out_of_range():
    lst = ForwardList([9, 2, 5, 3])
    with pytest.raises(IndexError):
        lst.insert(88, 5)
    with pytest.raises(IndexError):
        lst.insert(-1, 5)
    assert list(lst) == [9, 2, 5, 3]


def test_remove_positions():
    lst = ForwardList([9, 2, 5, 3])
    lst.remove(0)
    assert list(lst) == [2, 5, 3]
    lst.remove(2)
    assert list(lst) == [2, 5]
    with pytest.raises(IndexError):
        lst.remove(9)
    assert len(lst) == 2