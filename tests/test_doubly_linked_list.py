import pytest

from dsakit.doubly_linked_list import DoublyLinkedList


def _assert_consistent(lst):
    forward = list(lst)
    assert list(reversed(lst)) == forward[::-1]
    assert len(lst) == len(forward)
    if forward:
        assert lst.head.prev is None
        assert lst.tail.next is None
    else:
        assert lst.head is None and lst.tail is None


def test_reverse_source_example():
    values = [1, 2, 3, 4, 5, 6]
    lst = DoublyLinkedList(values)
    lst.reverse()
    assert list(lst) == values[::-1]
    _assert_consistent(lst)


def test_reverse_twice_restores():
    values = ["a", "b", "c"]
    lst = DoublyLinkedList(values)
    lst.reverse()
    lst.reverse()
    assert list(lst) == values
    _assert_consistent(lst)


def test_reverse_empty_and_single():
    empty = DoublyLinkedList()
    empty.reverse()
    assert list(empty) == []
    single = DoublyLinkedList([9])
    single.reverse()
    assert list(single) == [9]
    _assert_consistent(single)


def test_insert_at_head_and_tail():
    lst = DoublyLinkedList()
    assert lst.is_empty()
    lst.insert_at_tail(2)
    lst.insert_at_head(1)
    lst.insert_at_tail(3)
    assert list(lst) == [1, 2, 3]
    assert not lst.is_empty()
    _assert_consistent(lst)


def test_delete_at_head_and_tail():
    lst = DoublyLinkedList([1, 2, 3])
    assert lst.delete_at_head() == 1
    assert lst.delete_at_tail() == 3
    assert lst.delete_at_tail() == 2
    assert lst.is_empty()
    _assert_consistent(lst)
    with pytest.raises(IndexError):
        lst.delete_at_head()
    with pytest.raises(IndexError):
        lst.delete_at_tail()


def test_get_node():
    lst = DoublyLinkedList([10, 20, 30])
    assert lst.get_node(0).info == 10
    assert lst.get_node(2).info == 30
    assert lst.get_node(50) is lst.tail
    assert DoublyLinkedList().get_node(0) is None
    with pytest.raises(IndexError):
        lst.get_node(-1)


def test_search():
    lst = DoublyLinkedList([10, 20, 30])
    assert lst.search(20) is lst.get_node(1)
    assert lst.search(99) is None


def test_insert_after_and_before():
    lst = DoublyLinkedList([10, 30])
    lst.insert_after(20, 10)
    lst.insert_after(40, 30)
    lst.insert_before(5, 10)
    lst.insert_before(25, 30)
    assert list(lst) == [5, 10, 20, 25, 30, 40]
    _assert_consistent(lst)


def test_insert_with_missing_key():
    lst = DoublyLinkedList([1])
    with pytest.raises(ValueError):
        lst.insert_after(2, 7)
    with pytest.raises(ValueError):
        lst.insert_before(2, 7)
    assert list(lst) == [1]


def test_delete_before():
    lst = DoublyLinkedList([1, 2, 3, 4])
    assert lst.delete_before(4) == 3
    assert lst.delete_before(2) == 1
    assert list(lst) == [2, 4]
    _assert_consistent(lst)
    with pytest.raises(IndexError):
        lst.delete_before(2)
    with pytest.raises(ValueError):
        lst.delete_before(9)


def test_delete_after():
    lst = DoublyLinkedList([1, 2, 3, 4])
    assert lst.delete_after(1) == 2
    assert lst.delete_after(3) == 4
    assert list(lst) == [1, 3]
    _assert_consistent(lst)
    with pytest.raises(IndexError):
        lst.delete_after(3)
    with pytest.raises(ValueError):
        lst.delete_after(9)


def test_length_tracks_operations():
    lst = DoublyLinkedList(range(5))
    lst.insert_after(100, 2)
    lst.delete_at_head()
    assert len(lst) == len(list(lst))
    _assert_consistent(lst)