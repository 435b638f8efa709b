import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from wordcalc.linked_queue import Queue


def test_new_queue_is_empty():
    queue = Queue()
    assert queue.is_empty() is True
    assert len(queue) == 0
    assert not queue


def test_fifo_order():
    queue = Queue()
    queue.enqueue("first")
    queue.enqueue("second")
    assert queue.peek() == "first"
    assert queue.dequeue() == "first"
    assert queue.peek() == "second"
    assert len(queue) == 1


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        Queue().dequeue()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        Queue().peek()


def test_nan_can_be_dequeued():
    queue = Queue()
    queue.enqueue(math.nan)
    assert math.isnan(queue.dequeue())
    assert queue.is_empty() is True


@given(st.lists(st.integers()))
def test_dequeues_keep_insertion_order(values):
    queue = Queue()
    for value in values:
        queue.enqueue(value)
    assert len(queue) == len(values)
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty()