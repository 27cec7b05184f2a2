#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
binary_heap.py
--------------

An array‑backed binary heap that works as a min‑heap or a max‑heap.

Features
~~~~~~~~
* O(log n) ``insert``, ``extract_top``, ``remove(index)`` and
  ``update(index, value)``; O(1) ``top``.
* O(n) bulk construction (Floyd's bottom‑up heapify) when the heap is
  created from an existing sequence.
* Ordering mode (min / max) chosen once at construction through the
  ``max_heap`` flag, plus an optional ``key`` function (like
  ``sorted(..., key=…)``).
* Non‑destructive queries (``get_top_k``, ``heap_sort``) that work on a
  private copy, so the original heap is never mutated by a read.
* ``MinHeap`` / ``MaxHeap`` convenience factories.

Typical usage
~~~~~~~~~~~~~
>>> from binary_heap import MaxHeap
>>> heap = MaxHeap([4, 10, 3, 5, 1])
>>> heap.top()
10
>>> heap.insert(15)
>>> heap.extract_top()
15
>>> heap.get_top_k(3)
[10, 5, 4]
>>> heap.is_valid_heap()
True
"""

from __future__ import annotations

import logging
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    TypeVar,
)

from heap_errors import EmptyHeapError, HeapIndexError, HeapMismatchError

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
#  Generic type variable
# ----------------------------------------------------------------------
T = TypeVar("T")                     # type of the stored element


# ----------------------------------------------------------------------
#  Core class
# ----------------------------------------------------------------------
class BinaryHeap(Generic[T]):
    """
    A complete binary tree stored in a Python list.

    For the element at index ``i`` the parent lives at ``(i - 1) // 2`` and
    the children at ``2 * i + 1`` and ``2 * i + 2``.  Every parent ranks
    "no worse" than its children: ``>=`` for a max‑heap, ``<=`` for a
    min‑heap.

    Parameters
    ----------
    data : iterable, optional
        Initial elements.  They are copied into the heap and arranged with
        ``build_heap`` in linear time.

    max_heap : bool, default ``True``
        Largest element on top when true, smallest when false.  The mode is
        fixed for the lifetime of the heap.

    key : Callable[[T], Any], optional
        If supplied, elements are compared by ``key(element)`` instead of
        by themselves.
    """

    __slots__ = ("_heap", "_max_heap", "_key")

    def __init__(
        self,
        data: Optional[Iterable[T]] = None,
        *,
        max_heap: bool = True,
        key: Optional[Callable[[T], Any]] = None,
    ) -> None:
        # The heap owns its storage: never alias the caller's list.
        self._heap: List[T] = [] if data is None else list(data)
        self._max_heap = max_heap
        self._key = key

        if self._heap:
            self.build_heap()

    # ------------------------------------------------------------------
    #   Basic operations
    # ------------------------------------------------------------------
    def insert(self, value: T) -> None:
        """Add *value* at the end of the array and sift it up."""
        self._heap.append(value)
        self._sift_up(len(self._heap) - 1)

    def extract_top(self) -> T:
        """
        Remove and return the top element (max for a max‑heap, min for a
        min‑heap).
        Raises ``EmptyHeapError`` if the heap is empty.
        """
        if not self._heap:
            raise EmptyHeapError("extract from an empty heap")

        result = self._heap[0]
        # Move the last element to the root, shrink, then restore the heap.
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return result

    def top(self) -> T:
        """
        Return the top element **without** removing it.
        Raises ``EmptyHeapError`` if the heap is empty.
        """
        if not self._heap:
            raise EmptyHeapError("top of an empty heap")
        return self._heap[0]

    # ------------------------------------------------------------------
    #   Advanced operations
    # ------------------------------------------------------------------
    def build_heap(self) -> None:
        """
        Rearrange the backing array into a valid heap in O(n).

        Sifts down every non‑leaf, starting from the last one
        (``n // 2 - 1``) and walking back to the root.
        """
        n = len(self._heap)
        for idx in range(n // 2 - 1, -1, -1):
            self._sift_down(idx)
        logger.debug("heapified %d elements (max_heap=%s)", n, self._max_heap)

    def remove(self, index: int) -> T:
        """
        Delete and return the element stored at *index*.
        Raises ``HeapIndexError`` if *index* is not in ``[0, len)``.
        """
        self._check_index(index)
        removed = self._heap[index]
        last = self._heap.pop()

        if index < len(self._heap):
            self._heap[index] = last
            # The moved element goes up if it beats its parent, otherwise
            # down.  Only the parent is consulted here.
            parent = self._parent(index)
            if index > 0 and self._higher(self._heap[index], self._heap[parent]):
                self._sift_up(index)
            else:
                self._sift_down(index)
        return removed

    def update(self, index: int, new_value: T) -> None:
        """
        Replace the element at *index* with *new_value*.
        Raises ``HeapIndexError`` if *index* is not in ``[0, len)``.
        """
        self._check_index(index)
        old_value = self._heap[index]
        self._heap[index] = new_value

        # Moving towards the root only if the new value ranks higher.
        if self._higher(new_value, old_value):
            self._sift_up(index)
        else:
            self._sift_down(index)

    def merge(self, other: "BinaryHeap[T]") -> None:
        """
        Insert every element of *other* into this heap.

        The overall complexity is O((n + m) log(n + m)).  *other* is left
        untouched.  Raises ``HeapMismatchError`` if the two heaps do not use
        the same ordering mode or the same key function.
        """
        if self._max_heap != other._max_heap:
            raise HeapMismatchError("cannot merge a min-heap with a max-heap")
        if self._key is not other._key:
            raise HeapMismatchError("cannot merge heaps ordered by different keys")
        logger.debug("merging %d elements into heap of %d", len(other), len(self))
        # Snapshot first so merging a heap into itself terminates.
        for element in list(other._heap):
            self.insert(element)

    # ------------------------------------------------------------------
    #   Queries
    # ------------------------------------------------------------------
    def is_valid_heap(self) -> bool:
        """Return ``True`` if every parent ranks no worse than its children."""
        n = len(self._heap)
        for i in range(n):
            left = self._left(i)
            right = self._right(i)
            if left < n and self._higher(self._heap[left], self._heap[i]):
                return False
            if right < n and self._higher(self._heap[right], self._heap[i]):
                return False
        return True

    def get_top_k(self, k: int) -> List[T]:
        """
        Return the *k* best elements in extraction order.

        Works on a copy, so the heap itself is unchanged.  An empty list is
        returned for ``k <= 0`` or an empty heap.
        """
        if k <= 0 or not self._heap:
            return []
        temp = self.copy()
        result: List[T] = []
        while temp and len(result) < k:
            result.append(temp.extract_top())
        return result

    def heap_sort(self) -> List[T]:
        """
        Return every element in extraction order (descending for a
        max‑heap, ascending for a min‑heap) without consuming the heap.
        """
        temp = self.copy()
        return [temp.extract_top() for _ in range(len(temp))]

    def levels(self) -> List[List[T]]:
        """Return the tree level by level: ``[[root], [l, r], [...], ...]``."""
        result: List[List[T]] = []
        start, width = 0, 1
        while start < len(self._heap):
            result.append(self._heap[start:start + width])
            start += width
            width *= 2
        return result

    def to_list(self) -> List[T]:
        """Return a copy of the backing array (heap order)."""
        return list(self._heap)

    def copy(self) -> "BinaryHeap[T]":
        """Return an independent heap with the same mode, key and contents."""
        clone: BinaryHeap[T] = BinaryHeap(max_heap=self._max_heap, key=self._key)
        clone._heap = list(self._heap)
        return clone

    __copy__ = copy

    def clear(self) -> None:
        self._heap.clear()

    @property
    def max_heap(self) -> bool:
        """``True`` for a max‑heap, ``False`` for a min‑heap."""
        return self._max_heap

    # ------------------------------------------------------------------
    #   Python protocol support
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, item: Any) -> bool:
        return item in self._heap

    def __iter__(self) -> Iterator[T]:
        """Iterate in heap (array) order, not in sorted order."""
        return iter(list(self._heap))

    def __repr__(self) -> str:
        kind = "max" if self._max_heap else "min"
        return f"<BinaryHeap {kind} {self._heap!r}>"

    # ------------------------------------------------------------------
    #   Internal heap‑maintenance helpers
    # ------------------------------------------------------------------
    def _parent(self, idx: int) -> int:
        return (idx - 1) // 2

    def _left(self, idx: int) -> int:
        return 2 * idx + 1

    def _right(self, idx: int) -> int:
        return 2 * idx + 2

    def _higher(self, a: T, b: T) -> bool:
        """True if *a* must sit closer to the root than *b*."""
        if self._key is not None:
            a, b = self._key(a), self._key(b)
        return a > b if self._max_heap else a < b

    def _check_index(self, idx: int) -> None:
        if not 0 <= idx < len(self._heap):
            raise HeapIndexError(idx, len(self._heap))

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _sift_up(self, idx: int) -> None:
        """
        Move the entry at *idx* up the heap until the heap property holds.
        """
        while idx > 0:
            parent = self._parent(idx)
            if self._higher(self._heap[idx], self._heap[parent]):
                self._swap(idx, parent)
                idx = parent
            else:
                break

    def _sift_down(self, idx: int) -> None:
        """
        Move the entry at *idx* down the heap until the heap property holds.
        """
        n = len(self._heap)
        while (left := self._left(idx)) < n:
            best = left
            right = self._right(idx)
            if right < n and self._higher(self._heap[right], self._heap[left]):
                best = right
            if self._higher(self._heap[best], self._heap[idx]):
                self._swap(idx, best)
                idx = best
            else:
                break


# ----------------------------------------------------------------------
#  Factories
# ----------------------------------------------------------------------
def MinHeap(
    data: Optional[Iterable[T]] = None,
    *,
    key: Optional[Callable[[T], Any]] = None,
) -> BinaryHeap[T]:
    """Return a ``BinaryHeap`` with the smallest element on top."""
    return BinaryHeap(data, max_heap=False, key=key)


def MaxHeap(
    data: Optional[Iterable[T]] = None,
    *,
    key: Optional[Callable[[T], Any]] = None,
) -> BinaryHeap[T]:
    """Return a ``BinaryHeap`` with the largest element on top."""
    return BinaryHeap(data, max_heap=True, key=key)
