#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
test_min_heap.py
----------------
Unit tests for the `MinHeap` implementation in `min_heap.py`.

The tests cover:

* basic push / pop / peek semantics
* empty‑heap behaviour (``None`` instead of an exception)
* duplicates and negative values
* the ``validate`` check, including a corrupted heap
* random interleaved operations compared with a sorted reference
* the integer fixture files
"""

import random
import unittest
from pathlib import Path

from int_loader import read_ints
from min_heap import MinHeap

RESOURCES = Path(__file__).parent / "resources"


class TestMinHeap(unittest.TestCase):

    # ------------------------------------------------------------------
    #  Basic functionality
    # ------------------------------------------------------------------
    def test_push_peek_pop_len_bool(self):
        heap = MinHeap()
        values = [10, 3, 8, 2]

        for i, value in enumerate(values, start=1):
            heap.push(value)
            self.assertEqual(len(heap), i)
            self.assertTrue(heap)
            heap.validate()

        self.assertEqual(heap.peek(), 2)
        popped = [heap.pop() for _ in range(len(heap))]
        self.assertEqual(popped, sorted(values))

        self.assertEqual(len(heap), 0)
        self.assertFalse(heap)

    def test_empty_heap_returns_none(self):
        heap = MinHeap()
        self.assertIsNone(heap.pop())
        self.assertIsNone(heap.peek())
        heap.validate()

    def test_constructor_values(self):
        heap = MinHeap([5, 2, 7])
        heap.push(1)
        self.assertEqual(heap.pop(), 1)
        self.assertEqual(heap.peek(), 2)
        self.assertEqual(len(heap), 3)

    def test_duplicates_and_negatives(self):
        values = [3, -1, 3, 0, -1, 7, 3]
        heap = MinHeap(values)
        heap.validate()
        self.assertEqual([heap.pop() for _ in range(len(values))], sorted(values))

    def test_single_element(self):
        heap = MinHeap([4])
        self.assertEqual(heap.pop(), 4)
        self.assertIsNone(heap.pop())

    # ------------------------------------------------------------------
    #  Validation
    # ------------------------------------------------------------------
    def test_validate_detects_corruption(self):
        heap = MinHeap([1, 2, 3, 4, 5])
        heap.validate()
        heap._heap[0] = 10
        with self.assertRaisesRegex(AssertionError, "parent: 10"):
            heap.validate()

    # ------------------------------------------------------------------
    #  Random operations against a sorted reference
    # ------------------------------------------------------------------
    def test_random_operations_and_validation(self):
        random.seed(0)
        heap = MinHeap()
        reference = []

        for _ in range(5_000):
            if random.random() < 0.6 or not reference:
                value = random.randint(-1000, 1000)
                heap.push(value)
                reference.append(value)
            else:
                smallest = min(reference)
                self.assertEqual(heap.pop(), smallest)
                reference.remove(smallest)
            heap.validate()
            self.assertEqual(len(heap), len(reference))

        self.assertEqual([heap.pop() for _ in range(len(heap))], sorted(reference))

    # ------------------------------------------------------------------
    #  Fixture files
    # ------------------------------------------------------------------
    def test_fixture_files_pop_in_order(self):
        for name in ("zero_int.txt", "ten_int.txt", "hundred_int.txt"):
            values = read_ints(RESOURCES / name)
            heap = MinHeap()
            for value in values:
                heap.push(value)
                heap.validate()
            self.assertEqual(len(heap), len(values))

            previous = None
            while heap:
                current = heap.pop()
                if previous is not None:
                    self.assertLessEqual(previous, current)
                heap.validate()
                previous = current


if __name__ == "__main__":
    unittest.main(verbosity=2)
