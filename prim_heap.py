"""Indexed binary min-heap (heap + key map) for Prim's and Dijkstra's algorithms.

Entries map a key (e.g. a vertex) to a value (e.g. a cost, or an edge index
compared through the graph's tie-break rule). The key map is kept in sync
on every move, so ``key in heap`` and ``value_of`` are valid at all times.
"""
from typing import Callable, Dict, Generic, Hashable, List, NamedTuple, Optional, TypeVar

K = TypeVar('K', bound=Hashable)
V = TypeVar('V')


class Entry(NamedTuple):
    key: Hashable
    value: object


def natural_order(a, b) -> int:
    """Three-way comparison using ``<``."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


class PrimHeap(Generic[K, V]):
    def __init__(self,
                 compare: Optional[Callable[[V, V], int]] = None,
                 trace: Optional[Callable[[str], None]] = None):
        """
        Args:
            compare: three-way comparator over values (negative, zero or
                positive). Defaults to ordinary ``<`` ordering.
            trace: optional callable receiving a line per sift move.
        """
        self._compare = compare if compare is not None else natural_order
        self._trace = trace
        self._heap: List[Entry] = []
        self._index: Dict[K, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, key) -> bool:
        return key in self._index

    def is_empty(self) -> bool:
        return not self._heap

    def value_of(self, key: K) -> V:
        return self._heap[self._index[key]].value

    def peek(self) -> Entry:
        if not self._heap:
            raise IndexError("can't peek into empty heap")
        return self._heap[0]

    def push_or_decrease(self, key: K, value: V) -> bool:
        """Insert ``key`` or lower its value. Returns True if the heap changed.

        An existing key with an equal or better value is left alone.
        """
        index = self._index.get(key)
        if index is None:
            # no entry for this key yet
            index = len(self._heap)
            self._heap.append(Entry(key, value))
            self._index[key] = index
        elif self._compare(value, self._heap[index].value) < 0:
            self._heap[index] = Entry(key, value)
        else:
            return False
        self._sift_up(index)
        return True

    def pop_min(self) -> Entry:
        if not self._heap:
            raise IndexError("can't extract from empty heap")

        entry = self._heap[0]
        del self._index[entry.key]

        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._index[last.key] = 0
            self._sift_down(0)

        return entry

    def _sift_up(self, child: int) -> None:
        while child != 0:
            parent = (child - 1) // 2
            if self._compare(self._heap[parent].value, self._heap[child].value) <= 0:
                break
            self._swap(parent, child)
            child = parent

    def _sift_down(self, parent: int) -> None:
        while True:
            child = self._pick_child(parent)
            if child is None or self._compare(self._heap[parent].value, self._heap[child].value) <= 0:
                break
            self._swap(parent, child)
            parent = child

    def _pick_child(self, parent: int) -> Optional[int]:
        left = parent * 2 + 1
        if left >= len(self._heap):
            return None
        right = left + 1
        if right == len(self._heap) or self._compare(self._heap[left].value, self._heap[right].value) <= 0:
            return left
        return right

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[heap[i].key] = i
        self._index[heap[j].key] = j
        if self._trace is not None:
            self._trace(f"[heap] swap {heap[j].key!r}={heap[j].value!r} (now @{j}) "
                        f"with {heap[i].key!r}={heap[i].value!r} (now @{i})")
