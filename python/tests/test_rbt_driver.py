#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
test_rbt_driver.py
------------------
Runs the command line driver over the shipped fixture files.
"""

import contextlib
import io
import unittest
from pathlib import Path
from unittest import mock

import rbt_driver
from int_loader import read_ints

RESOURCES = Path(__file__).parent / "resources"
FIXTURES = [str(RESOURCES / name) for name in ("zero_int.txt", "ten_int.txt", "hundred_int.txt")]


class TestDriver(unittest.TestCase):

    def _main(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = rbt_driver.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_run_tree_keeps_every_value(self):
        values = read_ints(RESOURCES / "hundred_int.txt")
        tree = rbt_driver.run_tree(values, validate=True)
        self.assertEqual(tree.keys(), sorted(values))

    def test_run_tree_delete_empties_tree(self):
        values = read_ints(RESOURCES / "ten_int.txt")
        tree = rbt_driver.run_tree(values, validate=True, delete=True)
        self.assertIsNone(tree.root)
        self.assertEqual(len(tree), 0)

    def test_run_heap_sorts(self):
        values = read_ints(RESOURCES / "hundred_int.txt")
        self.assertEqual(rbt_driver.run_heap(values, validate=True), sorted(values))

    def test_main_summary(self):
        code, out, _ = self._main("--validate", "--heap", *FIXTURES)
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 3)
        self.assertIn("0 values, 0 keys in tree", lines[0])
        self.assertIn("10 values, 10 keys in tree, root", lines[1])
        self.assertIn("100 popped from heap", lines[2])

    def test_main_delete(self):
        code, out, _ = self._main("--delete", FIXTURES[2])
        self.assertEqual(code, 0)
        self.assertIn("100 values, 0 keys in tree", out)

    def test_main_print_dumps_to_stderr(self):
        code, _, err = self._main("--print", FIXTURES[1])
        self.assertEqual(code, 0)
        self.assertIn("Printing tree with 10 nodes", err)

    def test_main_reports_invariant_failure(self):
        with mock.patch.object(rbt_driver.RedBlackTree, "validate",
                               side_effect=AssertionError("Root is not black")):
            code, out, err = self._main("--validate", FIXTURES[1])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("FAILED: Root is not black", err)


if __name__ == "__main__":
    unittest.main(verbosity=2)
