#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
heap_algorithms.py
------------------

Algorithms built purely on the public ``BinaryHeap`` API.

* ``heap_sort``        – O(n log n) sort of a copy of the input.
* ``find_k_largest``   – O(n log k) with a bounded min‑heap.
* ``find_k_smallest``  – O(n log k) with a bounded max‑heap.
* ``kth_largest``      – the k‑th largest value (duplicates count).
* ``top_k_frequent``   – the k most frequent values, most frequent first.

>>> from heap_algorithms import heap_sort, find_k_largest
>>> heap_sort([64, 34, 25, 12, 22, 11, 90])
[11, 12, 22, 25, 34, 64, 90]
>>> find_k_largest([7, 10, 4, 3, 20, 15, 8, 5], 3)
[20, 15, 10]
"""

from __future__ import annotations

from collections import Counter
from typing import Hashable, Iterable, List, Sequence, Tuple, TypeVar

from binary_heap import BinaryHeap, MaxHeap, MinHeap

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def heap_sort(sequence: Iterable[T], ascending: bool = True) -> List[T]:
    """
    Return the elements of *sequence* sorted with a heap.

    A min‑heap is heapified when *ascending* is true (a max‑heap otherwise)
    and then drained, so extraction order is the requested order.  The input
    is never modified.
    """
    heap: BinaryHeap[T] = BinaryHeap(sequence, max_heap=not ascending)
    return [heap.extract_top() for _ in range(len(heap))]


def find_k_largest(sequence: Iterable[T], k: int) -> List[T]:
    """
    Return the *k* largest elements, largest first.

    Keeps a min‑heap of at most *k* elements; its top is the smallest of the
    current winners and is replaced only by a strictly larger element.
    Returns ``[]`` when ``k <= 0`` or the input is empty.
    """
    if k <= 0:
        return []
    heap: BinaryHeap[T] = MinHeap()
    for element in sequence:
        if len(heap) < k:
            heap.insert(element)
        elif element > heap.top():
            heap.extract_top()
            heap.insert(element)

    result = [heap.extract_top() for _ in range(len(heap))]
    result.reverse()
    return result


def find_k_smallest(sequence: Iterable[T], k: int) -> List[T]:
    """
    Return the *k* smallest elements, smallest first.

    Mirror image of ``find_k_largest`` using a bounded max‑heap.
    """
    if k <= 0:
        return []
    heap: BinaryHeap[T] = MaxHeap()
    for element in sequence:
        if len(heap) < k:
            heap.insert(element)
        elif element < heap.top():
            heap.extract_top()
            heap.insert(element)

    result = [heap.extract_top() for _ in range(len(heap))]
    result.reverse()
    return result


def kth_largest(sequence: Sequence[T], k: int) -> T:
    """
    Return the *k*‑th largest element (1‑based, duplicates count).
    Raises ``ValueError`` unless ``1 <= k <= len(sequence)``.
    """
    if not 1 <= k <= len(sequence):
        raise ValueError(f"k must be between 1 and {len(sequence)}, got {k}")
    heap: BinaryHeap[T] = MinHeap()
    for element in sequence:
        heap.insert(element)
        if len(heap) > k:
            heap.extract_top()
    return heap.top()


def top_k_frequent(sequence: Iterable[H], k: int) -> List[H]:
    """
    Return the *k* most frequent values, most frequent first.

    Values with equal counts come out in no particular order.
    """
    if k <= 0:
        return []
    counts = Counter(sequence)
    heap: BinaryHeap[Tuple[int, H]] = MinHeap(key=lambda pair: pair[0])
    for value, count in counts.items():
        heap.insert((count, value))
        if len(heap) > k:
            heap.extract_top()

    result = [heap.extract_top()[1] for _ in range(len(heap))]
    result.reverse()
    return result
