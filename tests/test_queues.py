import pytest

from dsakit.queues import ArrayQueue, LinkedQueue, QueueEmptyError


def test_fifo_order():
    for queue in (ArrayQueue(), LinkedQueue()):
        for value in [5, 1, 4]:
            assert queue.push(value) == value
        assert len(queue) == 3
        assert [queue.pop() for _ in range(3)] == [5, 1, 4]
        assert queue.is_empty()


def test_front_does_not_remove():
    for queue in (ArrayQueue(), LinkedQueue()):
        queue.push("a")
        queue.push("b")
        assert queue.front() == "a"
        assert len(queue) == 2
        assert queue.pop() == "a"
        assert queue.front() == "b"


def test_empty_queue_errors():
    for queue in (ArrayQueue(), LinkedQueue()):
        assert queue.is_empty()
        with pytest.raises(QueueEmptyError):
            queue.pop()
        with pytest.raises(QueueEmptyError):
            queue.front()


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        ArrayQueue().pop()
    with pytest.raises(IndexError):
        LinkedQueue().pop()


def test_reuse_after_emptied():
    for queue in (ArrayQueue(), LinkedQueue()):
        queue.push(1)
        assert queue.pop() == 1
        queue.push(2)
        assert queue.front() == 2
        assert len(queue) == 1


def test_array_queue_overflow():
    queue = ArrayQueue(2)
    queue.push(1)
    queue.push(2)
    with pytest.raises(OverflowError):
        queue.push(3)


def test_array_queue_slots_reclaimed_only_when_empty():
    queue = ArrayQueue(2)
    queue.push(1)
    queue.push(2)
    assert queue.pop() == 1
    with pytest.raises(OverflowError):
        queue.push(3)
    assert queue.pop() == 2
    queue.push(3)
    queue.push(4)
    assert [queue.pop(), queue.pop()] == [3, 4]


def test_array_queue_invalid_capacity():
    with pytest.raises(ValueError):
        ArrayQueue(0)


def test_linked_queue_many_values():
    queue = LinkedQueue()
    for value in range(500):
        queue.push(value)
    assert [queue.pop() for _ in range(500)] == list(range(500))