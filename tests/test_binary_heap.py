import random

import pytest

from dsalgo.binary_heap import MinHeap


def test_push_peek_pop():
    heap = MinHeap()
    for value in (5, 3, 7, 1):
        heap.push(value)
    assert heap.peek() == 1
    assert heap.pop() == 1
    assert heap.pop() == 3
    assert len(heap) == 2


def test_from_iterable_peek():
    heap = MinHeap.from_iterable([5, 3, 7, 1, 4])
    assert heap.peek() == 1
    assert len(heap) == 5


def test_from_iterable_pops_in_sorted_order():
    values = [5, 3, 7, 1, 4]
    heap = MinHeap.from_iterable(values)
    assert [heap.pop() for _ in values] == sorted(values)


def test_random_pushes_pop_sorted():
    rng = random.Random(7)
    values = [rng.randint(-1000, 1000) for _ in range(300)]
    heap = MinHeap()
    for value in values:
        heap.push(value)
    assert [heap.pop() for _ in values] == sorted(values)
    assert len(heap) == 0


def test_single_item_pop_empties_heap():
    heap = MinHeap()
    heap.push(42)
    assert heap.pop() == 42
    assert len(heap) == 0


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        MinHeap().pop()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        MinHeap().peek()