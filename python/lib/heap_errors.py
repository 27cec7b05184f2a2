#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
heap_errors.py
--------------

Exceptions raised by the heap and priority-queue modules.

Each error also derives from the builtin a caller would naturally catch, so
``except IndexError`` keeps working for code written against ``heapq`` or
``list.pop``.
"""

from __future__ import annotations


class HeapError(Exception):
    """Base class for every error raised by this library."""


class EmptyHeapError(HeapError, IndexError):
    """Read or removal of the top of an empty heap / priority queue."""


class HeapIndexError(HeapError, IndexError):
    """Index passed to ``remove`` / ``update`` is outside ``[0, len)``."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"heap index {index} out of range for size {size}")
        self.index = index
        self.size = size


class HeapMismatchError(HeapError, ValueError):
    """Two heaps with different ordering modes cannot be merged."""
