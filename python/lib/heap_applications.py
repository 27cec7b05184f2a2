#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
heap_applications.py
--------------------

Classic algorithms that use the heap / priority queue as a black box.

* ``Graph`` + ``shortest_path`` – Dijkstra with lazy deletion.
* ``merge_k_sorted``            – k‑way merge of sorted sequences.
* ``MedianFinder``              – running median with two balanced heaps.
* ``TaskScheduler``             – run tasks by priority, earliest deadline among equals.

>>> from heap_applications import merge_k_sorted, MedianFinder
>>> merge_k_sorted([[1, 4, 7], [2, 5, 8], [3, 6, 9]])
[1, 2, 3, 4, 5, 6, 7, 8, 9]
>>> mf = MedianFinder()
>>> for n in (5, 15, 1):
...     mf.add_number(n)
>>> mf.find_median()
5
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, List, NamedTuple, Sequence, Tuple, TypeVar, Union

from binary_heap import BinaryHeap, MaxHeap, MinHeap
from heap_errors import EmptyHeapError
from priority_queue import PriorityQueue

logger = logging.getLogger(__name__)

T = TypeVar("T")
Number = Union[int, float]


# ----------------------------------------------------------------------
#  Dijkstra shortest path
# ----------------------------------------------------------------------
class Graph:
    """
    Directed weighted graph on the vertices ``0 .. num_vertices - 1``.

    Edges can only be added.  Weights are expected to be non‑negative; this
    is not checked.
    """

    __slots__ = ("_adjacency",)

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError(f"num_vertices must be >= 0, got {num_vertices}")
        self._adjacency: List[List[Tuple[int, Number]]] = [
            [] for _ in range(num_vertices)
        ]

    @property
    def num_vertices(self) -> int:
        return len(self._adjacency)

    def add_edge(self, source: int, destination: int, weight: Number) -> None:
        """Append the edge ``source -> destination`` with *weight*."""
        self._check_vertex(source)
        self._check_vertex(destination)
        self._adjacency[source].append((destination, weight))

    def neighbors(self, vertex: int) -> List[Tuple[int, Number]]:
        """Return the ``(destination, weight)`` edges leaving *vertex*."""
        self._check_vertex(vertex)
        return list(self._adjacency[vertex])

    def shortest_path(self, source: int) -> List[Number]:
        return shortest_path(self, source)

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(
                f"vertex {vertex} out of range for {len(self._adjacency)} vertices"
            )


def shortest_path(graph: Graph, source: int) -> List[Number]:
    """
    Return the shortest distance from *source* to every vertex.

    Unreachable vertices keep ``math.inf``.  A vertex may be queued several
    times; entries for already finalised vertices are skipped when popped.
    """
    graph._check_vertex(source)
    distances: List[Number] = [math.inf] * graph.num_vertices
    finalised = [False] * graph.num_vertices
    distances[source] = 0

    pq: PriorityQueue[int, Number] = PriorityQueue(max_heap=False)
    pq.push(source, 0)

    while pq:
        vertex = pq.pop()
        if finalised[vertex]:
            logger.debug("skipping stale entry for vertex %d", vertex)
            continue
        finalised[vertex] = True
        logger.debug("finalised vertex %d at distance %s", vertex, distances[vertex])

        for neighbor, weight in graph.neighbors(vertex):
            new_distance = distances[vertex] + weight
            if new_distance < distances[neighbor]:
                distances[neighbor] = new_distance
                pq.push(neighbor, new_distance)
                logger.debug("relaxed vertex %d to %s", neighbor, new_distance)

    return distances


# ----------------------------------------------------------------------
#  K‑way merge
# ----------------------------------------------------------------------
class MergeCursor(NamedTuple):
    """Read position inside one of the merged sequences."""

    value: Number
    source: int
    position: int


def merge_k_sorted(sequences: Sequence[Sequence[Number]]) -> List[Number]:
    """
    Merge already sorted *sequences* into one ascending list in O(N log k).

    The queue only ever holds one cursor per source.  Equal values keep
    the order in which their cursors were queued.
    """
    pq: PriorityQueue[MergeCursor, Number] = PriorityQueue(max_heap=False)
    for source, seq in enumerate(sequences):
        if len(seq):
            pq.push(MergeCursor(seq[0], source, 0), seq[0])

    merged: List[Number] = []
    while pq:
        cursor = pq.pop()
        merged.append(cursor.value)

        seq = sequences[cursor.source]
        nxt = cursor.position + 1
        if nxt < len(seq):
            pq.push(MergeCursor(seq[nxt], cursor.source, nxt), seq[nxt])

    logger.debug("merged %d sequences into %d values", len(sequences), len(merged))
    return merged


# ----------------------------------------------------------------------
#  Median maintenance
# ----------------------------------------------------------------------
class MedianFinder:
    """
    Running median of a stream of numbers.

    The lower half lives in a max‑heap and the upper half in a min‑heap;
    their sizes never differ by more than one, so the median is always at
    one or both tops.
    """

    __slots__ = ("_lower", "_upper")

    def __init__(self) -> None:
        self._lower: BinaryHeap[Number] = MaxHeap()
        self._upper: BinaryHeap[Number] = MinHeap()

    def add_number(self, num: Number) -> None:
        if not self._lower or num <= self._lower.top():
            self._lower.insert(num)
        else:
            self._upper.insert(num)

        # Rebalance so the sizes differ by at most one.
        if len(self._lower) > len(self._upper) + 1:
            self._upper.insert(self._lower.extract_top())
        elif len(self._upper) > len(self._lower) + 1:
            self._lower.insert(self._upper.extract_top())

    def find_median(self) -> Number:
        """
        Return the median of everything added so far in O(1).
        Raises ``EmptyHeapError`` if no number has been added.
        """
        if not self._lower and not self._upper:
            raise EmptyHeapError("median of an empty stream")
        if len(self._lower) == len(self._upper):
            return (self._lower.top() + self._upper.top()) / 2
        if len(self._lower) > len(self._upper):
            return self._lower.top()
        return self._upper.top()

    def lower_half(self) -> List[Number]:
        """Numbers at or below the median, largest first."""
        return self._lower.heap_sort()

    def upper_half(self) -> List[Number]:
        """Numbers above the median, smallest first."""
        return self._upper.heap_sort()

    def __len__(self) -> int:
        return len(self._lower) + len(self._upper)


# ----------------------------------------------------------------------
#  Task scheduling
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class Task:
    name: str
    priority: int
    duration: int
    deadline: float


class TaskScheduler:
    """
    Hand out tasks highest priority first.

    Among equal priorities the task with the earliest deadline goes first;
    a task's deadline is twice its duration after the moment it was added.
    Tasks that also share a deadline keep their insertion order.

    Parameters
    ----------
    clock : Callable[[], float], default ``time.monotonic``
        Source of the current time, in the same unit as ``duration``.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._queue: PriorityQueue[Task, Tuple[int, float]] = PriorityQueue(
            key=lambda task: (task.priority, -task.deadline)
        )

    def add_task(self, name: str, priority: int, duration: int) -> Task:
        task = Task(name, priority, duration, self._clock() + 2 * duration)
        self._queue.push(task)
        logger.debug("queued task %r (priority=%d, deadline=%s)",
                     name, priority, task.deadline)
        return task

    def pending(self) -> List[Task]:
        """Queued tasks in dispatch order; the queue is not consumed."""
        return [task for task, _ in self._queue.items()]

    def next_task(self) -> Task:
        """
        Remove and return the next task.
        Raises ``EmptyHeapError`` if nothing is queued.
        """
        task = self._queue.pop()
        logger.debug("dispatching task %r", task.name)
        return task

    def run(self) -> List[Task]:
        """Dispatch every queued task and return them in execution order."""
        executed = []
        while self._queue:
            executed.append(self.next_task())
        return executed

    def __len__(self) -> int:
        return len(self._queue)
