import pytest

from dsakit.linked_list import ListNode, SinglyLinkedList, loop_length, middle_value


def _chain(values):
    nodes = [ListNode(v) for v in values]
    for a, b in zip(nodes, nodes[1:]):
        a.next = b
    return nodes


def test_loop_length_of_source_example():
    nodes = _chain([1, 2, 3, 4, 5])
    nodes[-1].next = nodes[1]
    assert loop_length(nodes[0]) == 4


def test_loop_length_without_loop_is_zero():
    nodes = _chain([1, 2, 3])
    assert loop_length(nodes[0]) == 0
    assert loop_length(None) == 0


def test_loop_length_full_cycle_counts_all_nodes():
    nodes = _chain([7, 8, 9, 10, 11, 12])
    nodes[-1].next = nodes[0]
    assert loop_length(nodes[0]) == len(nodes)


def test_middle_value_odd_length():
    nodes = _chain([1, 2, 3, 4, 5])
    assert middle_value(nodes[0]) == 3


def test_middle_value_empty_is_none():
    assert middle_value(None) is None


def test_middle_value_single():
    assert middle_value(ListNode(42)) == 42


def test_construction_round_trip():
    values = list(range(1, 11))
    lst = SinglyLinkedList(values)
    assert list(lst) == values
    assert len(lst) == len(values)


def test_swap_source_example():
    lst = SinglyLinkedList(range(1, 11))
    lst.swap(3, 5)
    assert list(lst) == [1, 2, 3, 6, 5, 4, 7, 8, 9, 10]


def test_swap_twice_restores():
    values = [5, 9, 1, 3]
    lst = SinglyLinkedList(values)
    lst.swap(0, 3)
    lst.swap(0, 3)
    assert list(lst) == values


def test_swap_out_of_range():
    lst = SinglyLinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.swap(0, 2)


def test_prepend_and_append():
    lst = SinglyLinkedList()
    lst.append(2)
    lst.prepend(1)
    lst.append(3)
    assert list(lst) == [1, 2, 3]


def test_insert_at_places_value_at_index():
    lst = SinglyLinkedList([10, 20, 30])
    lst.insert_at(1, 15)
    assert list(lst)[1] == 15
    lst.insert_at(0, 5)
    assert list(lst)[0] == 5
    lst.insert_at(len(lst), 35)
    assert list(lst)[-1] == 35
    assert len(lst) == 6


def test_insert_at_out_of_range():
    lst = SinglyLinkedList([1])
    with pytest.raises(IndexError):
        lst.insert_at(3, 9)
    with pytest.raises(IndexError):
        lst.insert_at(-1, 9)


def test_delete_at_returns_value_and_keeps_tail():
    lst = SinglyLinkedList([10, 20, 30])
    assert lst.delete_at(2) == 30
    lst.append(40)
    assert list(lst) == [10, 20, 40]
    assert lst.delete_at(0) == 10
    assert list(lst) == [20, 40]


def test_delete_at_out_of_range():
    with pytest.raises(IndexError):
        SinglyLinkedList([1, 2]).delete_at(2)


def test_remove_first_and_last():
    lst = SinglyLinkedList([1, 2, 3])
    assert lst.remove_first() == 1
    assert lst.remove_last() == 3
    assert list(lst) == [2]
    assert lst.remove_last() == 2
    assert len(lst) == 0
    with pytest.raises(IndexError):
        lst.remove_first()
    with pytest.raises(IndexError):
        lst.remove_last()


def test_append_after_emptying():
    lst = SinglyLinkedList([1])
    lst.remove_last()
    lst.append(7)
    assert list(lst) == [7]


def test_count_and_contains():
    lst = SinglyLinkedList([4, 1, 4, 2, 4])
    assert lst.count(4) == 3
    assert lst.count(9) == 0
    assert 2 in lst
    assert 4 in lst
    assert 9 not in lst


def test_find_last_returns_last_matching_node():
    lst = SinglyLinkedList([4, 1, 4, 2])
    node = lst.find_last(4)
    assert node.value == 4
    assert node.next.value == 2
    assert lst.find_last(8) is None


def test_middle_method():
    assert SinglyLinkedList([1, 2, 3, 4, 5]).middle() == 3
    with pytest.raises(IndexError):
        SinglyLinkedList().middle()