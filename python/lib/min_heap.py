#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
min_heap.py
-----------

A small array‑backed binary min‑heap of integers.

Features
~~~~~~~~
* O(log n) push and pop.
* ``pop`` / ``peek`` on an empty heap return ``None`` instead of raising.
* ``validate()`` checks the heap property at every element.

Typical usage
~~~~~~~~~~~~~
>>> from min_heap import MinHeap
>>> heap = MinHeap([5, 2, 7])
>>> heap.push(1)
>>> heap.pop()
1
>>> heap.peek()
2
>>> len(heap)
3
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

ROOT_INDEX = 0


class MinHeap:
    """
    A min‑heap stored in a plain list: the children of index ``i`` live at
    ``2i + 1`` and ``2i + 2``, its parent at ``(i - 1) // 2``.

    Parameters
    ----------
    values : iterable of int, optional
        Pushed one by one in iteration order.
    """

    __slots__ = ("_heap",)

    def __init__(self, values: Optional[Iterable[int]] = None) -> None:
        self._heap: List[int] = []
        if values is not None:
            for value in values:
                self.push(value)

    # ------------------------------------------------------------------
    #   Core public API
    # ------------------------------------------------------------------
    def push(self, value: int) -> None:
        """Insert *value* and bubble it up until the heap property holds."""
        self._heap.append(value)
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> Optional[int]:
        """
        Remove and return the smallest value, or ``None`` if the heap is
        empty.
        """
        if not self._heap:
            logger.debug("pop from an empty heap")
            return None
        # Move the last element to the root, then bury it.
        self._swap(ROOT_INDEX, len(self._heap) - 1)
        smallest = self._heap.pop()
        if self._heap:
            self._sift_down(ROOT_INDEX)
        return smallest

    def peek(self) -> Optional[int]:
        """Return the smallest value without removing it (``None`` if empty)."""
        if not self._heap:
            return None
        return self._heap[ROOT_INDEX]

    # ------------------------------------------------------------------
    #   Python protocol support
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"MinHeap({self._heap!r})"

    # ------------------------------------------------------------------
    #   Internal heap‑maintenance helpers
    # ------------------------------------------------------------------
    def _parent(self, idx: int) -> int:
        return (idx - 1) // 2

    def _left(self, idx: int) -> int:
        return 2 * idx + 1

    def _right(self, idx: int) -> int:
        return 2 * idx + 2

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _sift_up(self, idx: int) -> None:
        """Move the value at *idx* up until its parent is not larger."""
        while idx > ROOT_INDEX:
            parent = self._parent(idx)
            if self._heap[idx] < self._heap[parent]:
                self._swap(idx, parent)
                idx = parent
            else:
                break

    def _sift_down(self, idx: int) -> None:
        """Move the value at *idx* down until both children are not smaller."""
        n = len(self._heap)
        while (left := self._left(idx)) < n:
            smallest = left
            right = self._right(idx)
            if right < n and self._heap[right] < self._heap[left]:
                smallest = right
            if self._heap[smallest] < self._heap[idx]:
                self._swap(idx, smallest)
                idx = smallest
            else:
                break

    # ------------------------------------------------------------------
    #   Debug/validation helpers
    # ------------------------------------------------------------------
    def validate(self) -> None:
        """
        Check the heap property at every element.
        Raises ``AssertionError`` naming the offending element and parent.
        """
        for i in range(len(self._heap) - 1, ROOT_INDEX, -1):
            element = self._heap[i]
            parent = self._heap[self._parent(i)]
            assert parent <= element, (
                f"elements: {self._heap}\nelement: {element}\nparent: {parent}"
            )
