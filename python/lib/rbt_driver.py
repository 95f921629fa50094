#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
rbt_driver.py
-------------

Feed integer fixture files into a :class:`RedBlackTree` (and optionally a
:class:`MinHeap`) and report what happened.

    python -m rbt_driver --validate --delete python/tests/resources/hundred_int.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from int_loader import read_ints
from min_heap import MinHeap
from red_black_tree import RedBlackTree

logger = logging.getLogger(__name__)


def run_tree(values: Sequence[int], validate: bool = False, dump: bool = False,
             delete: bool = False) -> RedBlackTree:
    """
    Insert *values* into a fresh tree, check every one of them can be found
    and, with *delete*, remove them again in insertion order.
    """
    tree = RedBlackTree()
    for value in values:
        logger.debug("Adding %s", value)
        tree.insert(value)
        if validate:
            tree.validate()
        if dump:
            tree.print_tree()

    for value in values:
        assert tree.search(value), f"Value {value} should be in tree, but was not found"

    if delete:
        for value in values:
            logger.debug("Deleting %s", value)
            tree.delete(value)
            if validate:
                tree.validate()
        for value in values:
            assert not tree.search(value), f"Value {value} is still in tree after delete"
    return tree


def run_heap(values: Sequence[int], validate: bool = False) -> List[int]:
    """Push *values* into a heap, pop them all back and check the order."""
    heap = MinHeap()
    for value in values:
        heap.push(value)
        if validate:
            heap.validate()
    assert len(heap) == len(values), (
        f"Inserted {len(values)} items but heap size is {len(heap)}"
    )

    popped: List[int] = []
    while heap:
        current = heap.pop()
        assert not popped or popped[-1] <= current, (
            f"Previously popped item {popped[-1]} is greater than {current}"
        )
        if validate:
            heap.validate()
        popped.append(current)  # type: ignore[arg-type]
    return popped


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="red-black tree driver")
    parser.add_argument("files", nargs="+", metavar="FILE",
                        help="file with one integer per line.")
    parser.add_argument("--validate", action="store_true",
                        help="check every invariant after each mutation.")
    parser.add_argument("--print", dest="dump", action="store_true",
                        help="dump the tree level by level after each insert.")
    parser.add_argument("--delete", action="store_true",
                        help="delete every value again in insertion order.")
    parser.add_argument("--heap", action="store_true",
                        help="also push the values through a min-heap.")
    parser.add_argument("--encoding", default=None,
                        help="input encoding (detected from the BOM by default).")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log every step.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    for name in args.files:
        values = read_ints(name, args.encoding)
        try:
            tree = run_tree(values, validate=args.validate, dump=args.dump,
                            delete=args.delete)
            popped = run_heap(values, validate=args.validate) if args.heap else None
        except AssertionError as exc:
            print(f"{name}: FAILED: {exc}", file=sys.stderr)
            return 1

        summary = f"{name}: {len(values)} values, {len(tree)} keys in tree"
        if tree.root is not None:
            summary += f", root {tree.root.key}, black-height {tree.validate()}"
        if popped is not None:
            summary += f", {len(popped)} popped from heap"
        print(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
