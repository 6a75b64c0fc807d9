import random

import pytest

from prim_heap import Entry, PrimHeap


def check_invariants(heap):
    entries = heap._heap
    for i in range(1, len(entries)):
        parent = (i - 1) // 2
        assert heap._compare(entries[parent].value, entries[i].value) <= 0
    assert len(heap._index) == len(entries)
    for i, entry in enumerate(entries):
        assert heap._index[entry.key] == i


def test_pop_in_sorted_order():
    heap = PrimHeap()
    values = [5, 3, 8, 1, 9, 2, 7]
    for key, value in enumerate(values):
        heap.push_or_decrease(key, value)
        check_invariants(heap)
    popped = []
    while heap:
        popped.append(heap.pop_min().value)
        check_invariants(heap)
    assert popped == sorted(values)


def test_decrease_key_moves_entry_up():
    heap = PrimHeap()
    heap.push_or_decrease('a', 10)
    heap.push_or_decrease('b', 20)
    heap.push_or_decrease('c', 30)
    assert heap.push_or_decrease('c', 5) is True
    check_invariants(heap)
    assert heap.value_of('c') == 5
    assert heap.pop_min() == Entry('c', 5)


def test_non_improving_value_is_noop():
    heap = PrimHeap()
    for key, value in [(0, 4), (1, 2), (2, 6)]:
        heap.push_or_decrease(key, value)
    before = list(heap._heap)
    assert heap.push_or_decrease(0, 4) is False
    assert heap.push_or_decrease(0, 9) is False
    assert heap.push_or_decrease(0, 9) is False
    assert heap._heap == before
    assert heap.value_of(0) == 4


def test_single_entry_pop_empties_heap():
    heap = PrimHeap()
    heap.push_or_decrease(7, 1)
    assert heap.pop_min() == Entry(7, 1)
    assert heap.is_empty()
    assert len(heap) == 0
    assert 7 not in heap


def test_pop_empty_raises():
    heap = PrimHeap()
    with pytest.raises(IndexError, match="empty heap"):
        heap.pop_min()


def test_membership_follows_pushes_and_pops():
    heap = PrimHeap()
    heap.push_or_decrease(1, 1)
    heap.push_or_decrease(2, 2)
    assert 1 in heap and 2 in heap
    heap.pop_min()
    assert 1 not in heap and 2 in heap


def test_custom_comparator_max_heap():
    heap = PrimHeap(compare=lambda a, b: b - a)
    for key, value in enumerate([3, 9, 1]):
        heap.push_or_decrease(key, value)
    assert heap.pop_min().value == 9
    # "decrease" under this order means a larger number
    heap.push_or_decrease(2, 50)
    assert heap.pop_min() == Entry(2, 50)


def test_left_child_wins_ties():
    heap = PrimHeap()
    heap.push_or_decrease('root', 0)
    heap.push_or_decrease('left', 5)
    heap.push_or_decrease('right', 5)
    heap.push_or_decrease('last', 9)
    heap.pop_min()
    # 'last' was moved to the root and sifted down past the left child
    assert heap.peek() == Entry('left', 5)
    check_invariants(heap)


def test_trace_hook_sees_swaps():
    lines = []
    heap = PrimHeap(trace=lines.append)
    heap.push_or_decrease(0, 5)
    heap.push_or_decrease(1, 1)
    assert lines
    assert all(line.startswith('[heap]') for line in lines)


def test_random_operations_keep_invariants():
    rng = random.Random(1234)
    heap = PrimHeap()
    best = {}
    for _ in range(500):
        if best and rng.random() < 0.3:
            entry = heap.pop_min()
            assert entry.value == min(best.values())
            assert best.pop(entry.key) == entry.value
        else:
            key = rng.randrange(40)
            value = rng.randrange(1000)
            heap.push_or_decrease(key, value)
            best[key] = min(value, best.get(key, value))
        check_invariants(heap)
        assert len(heap) == len(best)
        assert heap.is_empty() == (not best)
