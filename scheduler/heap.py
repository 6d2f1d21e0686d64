"""
Array-backed binary min-heap with a pluggable ordering.

Layout: a plain Python list where the children of index i live at
2i + 1 and 2i + 2, and the parent of index i lives at (i - 1) // 2.
The heap property: no element is strictly less than its parent.

- insert:     append as a leaf, sift up    → O(log n)
- min:        read index 0                 → O(1)
- remove_min: move last leaf to the root,
              sift down                    → O(log n)

Ordering is a capability handed to the constructor, the same way
sorted() takes key=. Without a key, elements are compared with `<`.
The heap only ever asks "is a strictly less than b?", so genuinely
equal elements may come out in either order. Give elements a
secondary field (like Job.arrival_time) when you need a stable order.

Why not heapq?
heapq has no key= argument, so callers wrap every element in a
(key, counter, item) tuple. Here the ordering lives on the queue,
and the sift steps are spelled out so the invariant is easy to check.

Empty queries return EMPTY rather than None: a queue of Optional
values can hold None, and "nothing queued" must not look like one.
"""

from typing import Any, Callable, Generic, Optional, TypeVar, Union

K = TypeVar("K")


class Empty:
    """Type of the EMPTY signal returned by min()/remove_min() on an empty queue."""

    _instance: Optional["Empty"] = None

    def __new__(cls) -> "Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = Empty()


class OrderedPriorityQueue(Generic[K]):

    def __init__(self, key: Optional[Callable[[K], Any]] = None):
        self._heap: list[K] = []
        self._key = key

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def insert(self, item: K) -> None:
        """
        Add an item and sift it up.

        If the ordering raises part way through, the sift is undone and the
        item dropped before the exception propagates: the heap is left
        exactly as it was before the call.
        """
        self._heap.append(item)
        swaps: list[tuple[int, int]] = []
        try:
            self._upheap(len(self._heap) - 1, swaps)
        except Exception:
            for child, parent in reversed(swaps):
                self._swap(child, parent)
            self._heap.pop()
            raise

    def min(self) -> Union[K, Empty]:
        """Return the smallest element without removing it, or EMPTY."""
        if not self._heap:
            return EMPTY
        return self._heap[0]

    def remove_min(self) -> Union[K, Empty]:
        """Remove and return the smallest element, or EMPTY if there is none."""
        if not self._heap:
            return EMPTY
        result = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._downheap(0)
        return result

    # ── Ordering ────────────────────────────────────────────────

    def _less(self, a: K, b: K) -> bool:
        if self._key is None:
            return a < b
        return self._key(a) < self._key(b)

    # ── Restructuring ───────────────────────────────────────────

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _upheap(self, i: int, swaps: list[tuple[int, int]]) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if not self._less(self._heap[i], self._heap[parent]):
                break
            self._swap(i, parent)
            swaps.append((i, parent))
            i = parent

    def _downheap(self, i: int) -> None:
        size = len(self._heap)
        while True:
            left = 2 * i + 1
            right = left + 1
            smallest = i

            if left < size and self._less(self._heap[left], self._heap[smallest]):
                smallest = left
            if right < size and self._less(self._heap[right], self._heap[smallest]):
                smallest = right
            if smallest == i:
                break
            self._swap(i, smallest)
            i = smallest
