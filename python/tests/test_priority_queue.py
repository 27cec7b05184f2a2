#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
test_priority_queue.py
----------------------
A fairly exhaustive unit‑test suite for the `PriorityQueue` implementation
provided in `priority_queue.py`.

The tests cover:

* basic push / pop / top / top_priority semantics
* empty‑queue errors
* length and bool conversion
* min‑priority mode
* custom key function support
* stable tie‑breaking (insertion order for equal priorities)
* duplicate payloads
* bulk insertion via `extend`, non‑destructive `items`, `drain`
* iteration (the iterator returns exactly the stored items)
* internal heap‑invariant validation after random operations
* a “reference” test that compares the pop order with a stable sort
"""

import random
import unittest
from typing import Any, List, Tuple

from heap_errors import EmptyHeapError
from priority_queue import PriorityQueue


class TestPriorityQueue(unittest.TestCase):

    # ------------------------------------------------------------------
    #  Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _sorted_by_priority(pairs: List[Tuple[Any, int]],
                            highest_first: bool = True) -> List[Any]:
        """Return items in pop order (sorted() is stable, so FIFO on ties)."""
        return [item for item, _ in
                sorted(pairs, key=lambda x: -x[1] if highest_first else x[1])]

    # ------------------------------------------------------------------
    #  Basic functionality
    # ------------------------------------------------------------------
    def test_push_top_pop_len_bool(self):
        pq = PriorityQueue[int, int]()
        items = [(5, 10), (2, 3), (7, 8), (1, 2)]  # (item, priority)

        # push one by one and check length after each insertion
        for i, (itm, prio) in enumerate(items, start=1):
            pq.push(itm, prio)
            self.assertEqual(len(pq), i)
            self.assertTrue(pq)

        # the largest priority is 10 (item 5)
        self.assertEqual(pq.top(), 5)
        self.assertEqual(pq.peek(), 5)
        self.assertEqual(pq.top_priority(), 10)

        expected_order = self._sorted_by_priority(items)
        popped = [pq.pop() for _ in range(len(pq))]
        self.assertEqual(popped, expected_order)

        self.assertEqual(len(pq), 0)
        self.assertFalse(pq)

    def test_empty_queue_raises(self):
        pq = PriorityQueue[str, int]()
        with self.assertRaises(EmptyHeapError):
            pq.pop()
        with self.assertRaises(EmptyHeapError):
            pq.top()
        with self.assertRaises(EmptyHeapError):
            pq.top_priority()
        with self.assertRaises(IndexError):
            pq.pop()

    def test_push_without_priority_or_key_raises(self):
        pq = PriorityQueue[str, int]()
        with self.assertRaises(TypeError):
            pq.push("orphan")
        self.assertEqual(len(pq), 0)

    # ------------------------------------------------------------------
    #  Stable tie‑breaking (FIFO for equal priorities)
    # ------------------------------------------------------------------
    def test_stable_ordering(self):
        pq = PriorityQueue[str, int]()
        pq.push("first", 5)
        pq.push("second", 5)
        pq.push("third", 5)

        self.assertEqual(pq.pop(), "first")
        self.assertEqual(pq.pop(), "second")
        self.assertEqual(pq.pop(), "third")

    def test_stable_ordering_interleaved(self):
        pq = PriorityQueue[str, int]()
        pq.push("A", 5)
        pq.push("B", 3)
        pq.push("C", 5)
        self.assertEqual([pq.pop(), pq.pop(), pq.pop()], ["A", "C", "B"])

    def test_stability_survives_many_interleaved_pushes(self):
        random.seed(4)
        pq = PriorityQueue[Tuple[int, int], int]()
        pairs = []
        for seq in range(400):
            prio = random.randint(0, 5)
            pq.push((prio, seq), prio)
            pairs.append(((prio, seq), prio))
        self.assertEqual(pq.drain(), self._sorted_by_priority(pairs))

    def test_duplicate_payloads_allowed(self):
        pq = PriorityQueue[str, int]()
        pq.push("x", 1)
        pq.push("x", 9)
        self.assertEqual(len(pq), 2)
        self.assertEqual(pq.items(), [("x", 9), ("x", 1)])

    # ------------------------------------------------------------------
    #  Min‑priority mode
    # ------------------------------------------------------------------
    def test_min_mode(self):
        minpq = PriorityQueue[int, int](max_heap=False)
        self.assertFalse(minpq.max_heap)
        data = [(10, 1), (5, 9), (7, 4), (2, 8)]
        minpq.extend(data)

        self.assertEqual(minpq.top_priority(), 1)
        self.assertEqual(minpq.pop(), 10)
        self.assertEqual(minpq.pop(), 7)
        self.assertEqual(minpq.pop(), 2)
        self.assertEqual(minpq.pop(), 5)

    def test_string_priorities_both_modes(self):
        maxpq = PriorityQueue[str, str]()
        maxpq.push("low", "a")
        maxpq.push("high", "z")
        maxpq.push("mid", "m")
        self.assertEqual(maxpq.top_priority(), "z")
        self.assertEqual(maxpq.drain(), ["high", "mid", "low"])

        minpq = PriorityQueue[str, str](max_heap=False)
        minpq.extend([("low", "a"), ("high", "z"), ("mid", "m"), ("low2", "a")])
        self.assertEqual(minpq.top_priority(), "a")
        self.assertEqual(minpq.drain(), ["low", "low2", "mid", "high"])

    def test_tuple_priorities_both_modes(self):
        maxpq = PriorityQueue[str, Tuple[int, int]]()
        maxpq.push("x", (1, 0))
        maxpq.push("y", (2, 0))
        maxpq.push("z", (1, 5))
        self.assertEqual(maxpq.top_priority(), (2, 0))
        self.assertEqual(maxpq.items(), [("y", (2, 0)), ("z", (1, 5)), ("x", (1, 0))])

        minpq = PriorityQueue[str, Tuple[int, int]](max_heap=False)
        minpq.extend([("x", (1, 0)), ("y", (2, 0)), ("z", (1, 5)), ("w", (1, 0))])
        self.assertEqual(minpq.top_priority(), (1, 0))
        self.assertEqual(minpq.drain(), ["x", "w", "z", "y"])

    def test_float_priorities(self):
        pq = PriorityQueue[str, float]()
        pq.push("low", 0.5)
        pq.push("high", 2.25)
        self.assertEqual(pq.top_priority(), 2.25)
        self.assertEqual(pq.drain(), ["high", "low"])

    # ------------------------------------------------------------------
    #  Custom key function + automatic priority extraction
    # ------------------------------------------------------------------
    def test_custom_key(self):
        class Task:
            def __init__(self, name: str, value: int):
                self.name = name
                self.value = value

            def __repr__(self):
                return f"<Task {self.name}:{self.value}>"

        pq = PriorityQueue[Task, int](key=lambda t: t.value)
        for t in (Task("A", 30), Task("B", 10), Task("C", 20)):
            pq.push(t)  # we *don’t* pass a priority explicitly

        self.assertEqual(pq.pop().name, "A")
        self.assertEqual(pq.pop().name, "C")
        self.assertEqual(pq.pop().name, "B")

    def test_explicit_priority_overrides_key(self):
        pq = PriorityQueue[str, int](key=len)
        pq.push("looooong")
        pq.push("s", 100)
        self.assertEqual(pq.pop(), "s")

    # ------------------------------------------------------------------
    #  Bulk insertion, inspection, iteration
    # ------------------------------------------------------------------
    def test_extend_bulk(self):
        random.seed(0)
        pq = PriorityQueue[int, int]()
        bulk = [(i, random.randint(1, 1000)) for i in range(50)]
        pq.extend(bulk)
        self.assertEqual(len(pq), 50)

        reference = self._sorted_by_priority(bulk)
        popped = [pq.pop() for _ in range(len(pq))]
        self.assertEqual(popped, reference)

    def test_items_is_non_destructive(self):
        pq = PriorityQueue[str, int]()
        pq.extend([("low", 1), ("high", 10), ("mid", 5), ("high2", 10)])
        self.assertEqual(
            pq.items(), [("high", 10), ("high2", 10), ("mid", 5), ("low", 1)]
        )
        self.assertEqual(len(pq), 4)
        self.assertEqual(pq.top(), "high")

    def test_iteration(self):
        pq = PriorityQueue[int, int]()
        for item, prio in [(10, 1), (20, 2), (30, 3)]:
            pq.push(item, prio)
        self.assertEqual(set(pq), {10, 20, 30})

    # ------------------------------------------------------------------
    #  Internal validation after random operations
    # ------------------------------------------------------------------
    def test_random_operations_and_internal_validation(self):
        random.seed(0)
        pq = PriorityQueue[int, int]()
        reference: List[Tuple[int, int, int]] = []  # (priority, seq, item)
        seq = 0

        for _ in range(5_000):
            if random.random() < 0.6 or not reference:
                item = random.randint(0, 500)
                prio = random.randint(0, 50)
                pq.push(item, prio)
                reference.append((prio, seq, item))
                seq += 1
            else:
                best = min(reference, key=lambda e: (-e[0], e[1]))
                self.assertEqual(pq.top_priority(), best[0])
                self.assertEqual(pq.pop(), best[2])
                reference.remove(best)

            self.assertTrue(pq._is_valid())
            self.assertEqual(len(pq), len(reference))

    def test_counter_is_per_instance(self):
        first = PriorityQueue[str, int]()
        second = PriorityQueue[str, int]()
        for name in "abc":
            first.push(name, 1)
        second.push("y", 1)
        second.push("z", 1)
        self.assertEqual(second.drain(), ["y", "z"])
        self.assertEqual(first.drain(), ["a", "b", "c"])


# ----------------------------------------------------------------------
# If you execute this file directly, run the tests.
# ----------------------------------------------------------------------
if __name__ == "__main__":
    unittest.main(verbosity=2)
