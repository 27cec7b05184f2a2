#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
priority_queue.py
-----------------

A stable priority queue built on top of ``binary_heap.BinaryHeap``.

Features
~~~~~~~~
* O(log n) push and pop, O(1) top / top_priority.
* Highest priority served first by default; set ``max_heap=False`` to serve
  the lowest priority first (handy for distances and costs).
* Any totally ordered priority works: numbers, strings, tuples.
* Stable tie‑breaking (insertion order) – items with the same priority are
  returned in the order they were inserted, however many other items were
  pushed in between.
* Optional key function that derives the priority from the item.
* The same payload may be queued several times.

Typical usage
~~~~~~~~~~~~~
>>> from priority_queue import PriorityQueue
>>> pq = PriorityQueue()
>>> pq.push('A', 5)
>>> pq.push('B', 3)
>>> pq.push('C', 5)
>>> pq.top_priority()
5
>>> [pq.pop() for _ in range(len(pq))]
['A', 'C', 'B']
"""

from __future__ import annotations

import itertools
from typing import (
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

from binary_heap import BinaryHeap
from heap_errors import EmptyHeapError

T = TypeVar('T')                     # type of the stored item
P = TypeVar('P')                     # type of the priority (totally ordered)


class _Entry(Generic[T, P]):
    """Heap slot: ``a < b`` means *a* is served before *b*."""

    __slots__ = ("priority", "order", "item", "highest_first")

    def __init__(self, priority: P, order: int, item: T, highest_first: bool) -> None:
        self.priority = priority
        self.order = order
        self.item = item
        self.highest_first = highest_first

    def __lt__(self, other: "_Entry[T, P]") -> bool:
        if self.priority != other.priority:
            if self.highest_first:
                return self.priority > other.priority
            return self.priority < other.priority
        return self.order < other.order

    def __repr__(self) -> str:
        return f"<_Entry {self.priority!r}#{self.order}: {self.item!r}>"


class PriorityQueue(Generic[T, P]):
    """
    A max‑priority queue (or min‑priority if requested) with ``push``,
    ``pop``, ``top`` and ``top_priority``.

    Priorities are compared with ``<``, ``>`` and ``!=`` only, never
    negated.  Ties go to the earliest push: every entry carries a number
    from a per‑queue counter that only ever grows.

    Parameters
    ----------
    key : Callable[[T], P], optional
        Used by ``push(item)`` to compute the priority when none is given.

    max_heap : bool, default ``True``
        If true, the largest priority is served first; otherwise the
        smallest.
    """

    __slots__ = ("_heap", "_counter", "_key", "_max_heap")

    def __init__(
        self,
        *,
        key: Optional[Callable[[T], P]] = None,
        max_heap: bool = True,
    ) -> None:
        self._heap: BinaryHeap[_Entry[T, P]] = BinaryHeap(max_heap=False)
        self._counter = itertools.count()
        self._key: Optional[Callable[[T], P]] = key
        self._max_heap = max_heap

    # ------------------------------------------------------------------
    #   Core public API
    # ------------------------------------------------------------------
    def push(self, item: T, priority: Optional[P] = None) -> None:
        """
        Insert *item* with the given *priority*.
        If ``priority`` is omitted, ``self._key(item)`` is called.
        Raises ``TypeError`` if neither a priority nor a key is available.
        """
        if priority is None:
            if self._key is None:
                raise TypeError("push() needs a priority when no key is set")
            priority = self._key(item)
        entry = _Entry(priority, next(self._counter), item, self._max_heap)
        self._heap.insert(entry)

    def pop(self) -> T:
        """
        Remove and return the item with the best priority, the earliest
        inserted one among equals.
        Raises ``EmptyHeapError`` if the queue is empty.
        """
        if not self._heap:
            raise EmptyHeapError("pop from an empty priority queue")
        return self._heap.extract_top().item

    def top(self) -> T:
        """
        Return the next item **without** removing it.
        Raises ``EmptyHeapError`` if the queue is empty.
        """
        if not self._heap:
            raise EmptyHeapError("top of an empty priority queue")
        return self._heap.top().item

    peek = top

    def top_priority(self) -> P:
        """
        Return the priority of the next item.
        Raises ``EmptyHeapError`` if the queue is empty.
        """
        if not self._heap:
            raise EmptyHeapError("top_priority of an empty priority queue")
        return self._heap.top().priority

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[T]:
        """Yield the queued items in heap order; use ``items()`` for pop order."""
        return (entry.item for entry in self._heap)

    # ------------------------------------------------------------------
    #   Bulk insertion / inspection
    # ------------------------------------------------------------------
    def extend(self, items: Iterable[Tuple[T, P]]) -> None:
        """Push each ``(item, priority)`` pair in turn."""
        for item, priority in items:
            self.push(item, priority)

    def items(self) -> List[Tuple[T, P]]:
        """
        Return every ``(item, priority)`` pair in pop order.
        The queue itself is left untouched.
        """
        return [(entry.item, entry.priority) for entry in self._heap.heap_sort()]

    def drain(self) -> List[T]:
        """Pop every item and return them in pop order."""
        return [self.pop() for _ in range(len(self))]

    @property
    def max_heap(self) -> bool:
        """``True`` when the largest priority is served first."""
        return self._max_heap

    def _is_valid(self) -> bool:
        return self._heap.is_valid_heap()
