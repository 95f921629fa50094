#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
red_black_tree.py
-----------------

A self‑balancing binary search tree of integer keys based on the
**Red‑Black** algorithm.  Search, insertion and deletion all run in
O(log n) time.

Features
~~~~~~~~
* `tree.insert(key)`    – insert, returns ``False`` if the key is already present
* `tree.search(key)`    – membership test (also available as `key in tree`)
* `tree.delete(key)`    – delete, logs a warning and returns ``False`` if missing
* `len(tree)`           – number of stored keys
* `tree.keys()`         – keys in ascending order
* `tree.validate()`     – check every red‑black invariant (for test harnesses)
* `tree.print_tree()`   – level‑by‑level dump for debugging

Every absent child is the single shared sentinel :data:`LEAF`.  It is always
BLACK, never holds a key and is compared by identity only.  The root has no
parent (``root.parent is None``) and an empty tree has ``root is None``.

Both repair protocols are written as loops walking up the parent links
instead of tail calls, so pathological inputs never hit the recursion limit.

Typical usage
~~~~~~~~~~~~~
>>> from red_black_tree import RedBlackTree
>>> rbt = RedBlackTree([10, 20, 30])
>>> rbt.root.key
20
>>> rbt.insert(20)
False
>>> rbt.delete(10)
True
>>> rbt.keys()
[20, 30]
"""

from __future__ import annotations

import logging
import sys
from collections import deque
from typing import (
    Deque,
    Iterable,
    List,
    Optional,
    TextIO,
    Tuple,
)

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
#  Node colour constants – using simple booleans is fastest
# ----------------------------------------------------------------------
RED = True
BLACK = False

# Black‑height weight of each colour; only the validator uses it.
_BLACK_WEIGHT = {RED: 0, BLACK: 1}


class _Node:
    """Internal node object – not meant to be used directly by callers."""

    __slots__ = ("key", "color", "left", "right", "parent")

    def __init__(
        self,
        key: Optional[int] = None,
        color: bool = BLACK,
        left: Optional["_Node"] = None,
        right: Optional["_Node"] = None,
        parent: Optional["_Node"] = None,
    ) -> None:
        self.key = key
        self.color = color
        self.left = left
        self.right = right
        self.parent = parent

    # ------------------------------------------------------------------
    #   Relationship helpers used to pick the repair cases
    # ------------------------------------------------------------------
    @property
    def grandparent(self) -> Optional["_Node"]:
        return None if self.parent is None else self.parent.parent

    @property
    def sibling(self) -> Optional["_Node"]:
        parent = self.parent
        if parent is None:
            return None
        return parent.right if self is parent.left else parent.left

    @property
    def uncle(self) -> Optional["_Node"]:
        grandparent = self.grandparent
        if grandparent is None:
            return None
        return self.parent.sibling

    def __repr__(self) -> str:
        if self is LEAF:
            return "LEAF"
        col = "RED" if self.color == RED else "BLACK"
        return f"{self.key!r}({col})"


# The sentinel leaf – shared by every leaf slot of every tree.
LEAF = _Node()
LEAF.left = LEAF.right = LEAF


def _color_of(node: Optional[_Node]) -> bool:
    """Colour of *node*; a missing node or the sentinel reads as BLACK."""
    return BLACK if node is None or node is LEAF else node.color


class RedBlackTree:
    """
    A set of integer keys stored in a red‑black binary search tree.

    The height of the tree stays within ``2 * log2(n + 1)`` so ``search``,
    ``insert`` and ``delete`` are all O(log n).  The structure is not
    thread‑safe; callers that share a tree between threads must serialise
    access themselves.
    """

    __slots__ = ("_root", "_size")

    # ------------------------------------------------------------------
    #   Construction / basic container protocol
    # ------------------------------------------------------------------
    def __init__(self, keys: Optional[Iterable[int]] = None) -> None:
        """
        Create an empty tree or optionally initialise it from an iterable of
        integer keys.

        Parameters
        ----------
        keys : iterable of int   optional
            If supplied, each key is inserted with ``insert`` in iteration
            order (duplicates are skipped).
        """
        self._root: Optional[_Node] = None
        self._size: int = 0

        if keys is not None:
            for key in keys:
                self.insert(key)

    @property
    def root(self) -> Optional[_Node]:
        """Top node of the tree, or ``None`` when the tree is empty."""
        return self._root

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self.search(key)  # type: ignore[arg-type]

    def keys(self) -> List[int]:
        """Return a list of all keys in ascending order."""
        result: List[int] = []
        stack: List[_Node] = []
        cur = self._root if self._root is not None else LEAF
        while stack or cur is not LEAF:
            while cur is not LEAF:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            result.append(cur.key)  # type: ignore[arg-type]
            cur = cur.right
        return result

    # ------------------------------------------------------------------
    #   Search
    # ------------------------------------------------------------------
    def _search_node(self, key: int) -> Optional[_Node]:
        """Return the node that holds *key* or ``None`` if not found."""
        cur = self._root
        while cur is not None and cur is not LEAF:
            if key == cur.key:
                return cur
            cur = cur.right if key > cur.key else cur.left
        return None

    def search(self, key: int) -> bool:
        """Return ``True`` if *key* is stored in the tree."""
        return self._search_node(key) is not None

    # ------------------------------------------------------------------
    #   Rotation primitive
    # ------------------------------------------------------------------
    def _rotate(self, pivot: _Node, toward_left: bool) -> None:
        """
        Rotate the subtree rooted at *pivot*.

        The child of *pivot* on the far side (its right child when
        ``toward_left`` is true, its left child otherwise) is promoted into
        the slot *pivot* occupied and *pivot* becomes that node's child on
        the near side.  Colours and keys are left alone.
        """
        if pivot is LEAF:
            raise RuntimeError("rotate called with LEAF as pivot")
        centre = pivot.right if toward_left else pivot.left
        if centre is LEAF:
            side = "right" if toward_left else "left"
            raise RuntimeError(f"rotate called on {pivot!r} with LEAF {side} child")
        parent = pivot.parent

        # Turn centre's near subtree into pivot's far subtree
        if toward_left:
            pivot.right = centre.left
            if centre.left is not LEAF:
                centre.left.parent = pivot
            centre.left = pivot
        else:
            pivot.left = centre.right
            if centre.right is not LEAF:
                centre.right.parent = pivot
            centre.right = pivot
        pivot.parent = centre

        # Link pivot's former parent to centre
        centre.parent = parent
        if parent is None:
            self._root = centre
        elif pivot is parent.left:
            parent.left = centre
        elif pivot is parent.right:
            parent.right = centre
        else:
            raise RuntimeError(
                f"rotate on {pivot!r} found inconsistent links with parent {parent!r}"
            )

    # ------------------------------------------------------------------
    #   Insertion
    # ------------------------------------------------------------------
    def insert(self, key: int) -> bool:
        """
        Insert *key*.  Returns ``False`` (and leaves the tree untouched) if
        the key is already present, ``True`` otherwise.
        """
        parent: Optional[_Node] = None
        cur = self._root
        while cur is not None and cur is not LEAF:
            if key == cur.key:
                logger.debug("Key %s already present, not inserted", key)
                return False
            parent = cur
            cur = cur.right if key > cur.key else cur.left

        node = _Node(key=key, color=RED, left=LEAF, right=LEAF, parent=parent)
        if parent is None:
            self._root = node
        elif key > parent.key:
            parent.right = node
        else:
            parent.left = node
        self._size += 1

        self._insert_repair(node)

        # A rotation may have moved the root, walk back up to find it.
        top = node
        while top.parent is not None:
            top = top.parent
        self._root = top
        return True

    def _insert_repair(self, n: _Node) -> None:
        """Restore the red‑black properties after attaching the RED node *n*."""
        while True:
            parent = n.parent
            if parent is None:
                # Case A – n is the root
                n.color = BLACK
                return
            if parent.color == BLACK:
                # Case B – nothing is violated
                return
            uncle = n.uncle
            if _color_of(uncle) == RED:
                # Case C – recolour and carry on from the grandparent
                grandparent = n.grandparent
                parent.color = BLACK
                uncle.color = BLACK  # type: ignore[union-attr]
                grandparent.color = RED  # type: ignore[union-attr]
                n = grandparent  # type: ignore[assignment]
                continue
            # Case D – red parent, black uncle
            self._insert_rotate(n)
            return

    def _insert_rotate(self, n: _Node) -> None:
        parent = n.parent
        grandparent = parent.parent
        # Step 1 – move an inner grandchild to the outside
        if parent is grandparent.left and n is parent.right:
            self._rotate(parent, True)
            n = n.left
        elif parent is grandparent.right and n is parent.left:
            self._rotate(parent, False)
            n = n.right

        # Step 2 – rotate the grandparent away from n's side and recolour
        parent = n.parent
        grandparent = parent.parent
        self._rotate(grandparent, n is parent.right)
        parent.color = BLACK
        grandparent.color = RED

    # ------------------------------------------------------------------
    #   Deletion
    # ------------------------------------------------------------------
    def delete(self, key: int) -> bool:
        """
        Delete *key* from the tree.  A missing key is not an error: a warning
        is logged, the tree is left unchanged and ``False`` is returned.
        """
        node = self._search_node(key)
        if node is None:
            logger.warning("Node with key %s not found. Nothing to delete.", key)
            return False

        if node.left is not LEAF and node.right is not LEAF:
            # Internal node: pull the key of its in‑order neighbour up and
            # delete that node instead, it has at most one real child.
            swap = self._predecessor_node(node)
            if swap is None:
                swap = self._successor_node(node)
            node.key = swap.key  # type: ignore[union-attr]
            node = swap  # type: ignore[assignment]

        self._delete_one_child(node)
        self._size -= 1
        LEAF.parent = None
        return True

    @staticmethod
    def _predecessor_node(node: _Node) -> Optional[_Node]:
        """Largest node in the left subtree of *node*, or ``None``."""
        cur = node.left
        if cur is LEAF:
            return None
        while cur.right is not LEAF:
            cur = cur.right
        return cur

    @staticmethod
    def _successor_node(node: _Node) -> Optional[_Node]:
        """Smallest node in the right subtree of *node*, or ``None``."""
        cur = node.right
        if cur is LEAF:
            return None
        while cur.left is not LEAF:
            cur = cur.left
        return cur

    def _delete_one_child(self, target: _Node) -> None:
        """Splice out *target*, which has at most one non‑LEAF child."""
        if target.left is not LEAF and target.right is not LEAF:
            raise RuntimeError(
                f"delete_one_child called on {target!r} which has two children"
            )
        child = target.left if target.right is LEAF else target.right

        parent = target.parent
        if parent is None:
            self._root = None if child is LEAF else child
        elif target is parent.left:
            parent.left = child
        else:
            parent.right = child
        # Set even for LEAF: the repair below climbs from it.
        child.parent = parent

        if target.color == BLACK:
            if child.color == RED:
                child.color = BLACK
            else:
                self._delete_repair(child)

    def _delete_repair(self, n: _Node) -> None:
        """
        Restore the red‑black properties when the path through *n* (possibly
        the sentinel) is one black node short.  The cases are tried strictly
        in order; each later case assumes the earlier ones did not apply.
        """
        while True:
            parent = n.parent
            if parent is None:
                # Case 1 – n is the root, the deficit is shared by every path
                return
            n_is_left = n is parent.left

            sibling = n.sibling
            if _color_of(sibling) == RED:
                # Case 2 – red sibling: make it black by rotating toward n
                parent.color = RED
                sibling.color = BLACK  # type: ignore[union-attr]
                self._rotate(parent, n_is_left)
                sibling = n.sibling

            if sibling is LEAF:
                # A short path always has a real sibling in a balanced tree,
                # recolouring LEAF here would corrupt every tree sharing it.
                raise RuntimeError(
                    f"delete repair found LEAF sibling for {n!r} under {parent!r}"
                )

            if (
                parent.color == BLACK
                and _color_of(sibling) == BLACK
                and _color_of(sibling.left) == BLACK
                and _color_of(sibling.right) == BLACK
            ):
                # Case 3 – everything black: push the deficit up a level
                sibling.color = RED
                n = parent
                continue

            if (
                parent.color == RED
                and _color_of(sibling) == BLACK
                and _color_of(sibling.left) == BLACK
                and _color_of(sibling.right) == BLACK
            ):
                # Case 4 – red parent absorbs the deficit
                sibling.color = RED
                parent.color = BLACK
                return

            near = sibling.left if n_is_left else sibling.right
            far = sibling.right if n_is_left else sibling.left
            if (
                _color_of(sibling) == BLACK
                and _color_of(near) == RED
                and _color_of(far) == BLACK
            ):
                # Case 5 – turn a red near nephew into a red far nephew
                sibling.color = RED
                near.color = BLACK
                self._rotate(sibling, not n_is_left)
                sibling = n.sibling
                far = sibling.right if n_is_left else sibling.left

            # Case 6 – red far nephew: rotate the parent toward n
            sibling.color = parent.color
            parent.color = BLACK
            far.color = BLACK
            self._rotate(parent, n_is_left)
            return

    # ------------------------------------------------------------------
    #   Validation/checking utilities – useful for debugging
    # ------------------------------------------------------------------
    def validate(self) -> int:
        """
        Verify that the tree satisfies every red‑black invariant.
        Raises ``AssertionError`` with a descriptive message on the first
        violation and returns the black‑height of the tree otherwise.
        """
        assert LEAF.color == BLACK, "LEAF is not black"
        if self._root is None:
            assert self._size == 0, f"Empty tree reports size {self._size}"
            return 1
        assert self._root is not LEAF, "Root is LEAF instead of None"
        assert self._root.parent is None, f"Root {self._root!r} has parent {self._root.parent!r}"
        assert self._root.color == BLACK, f"Root {self._root!r} is not black"

        count = 0
        # Explicit stack of (node, lower, upper, visited) instead of recursion.
        heights = {}
        stack: List[Tuple[_Node, Optional[int], Optional[int], bool]] = [
            (self._root, None, None, False)
        ]
        while stack:
            node, lower, upper, visited = stack.pop()
            if visited:
                left_height = heights.pop(id(node.left), 1)
                right_height = heights.pop(id(node.right), 1)
                assert left_height == right_height, (
                    f"Non-matching black-heights: {node!r}'s left {node.left!r} with "
                    f"black-height {left_height} and right {node.right!r} with "
                    f"black-height {right_height}"
                )
                heights[id(node)] = left_height + _BLACK_WEIGHT[node.color]
                continue

            count += 1
            parent = node.parent
            assert parent is None or parent.left is node or parent.right is node, (
                f"{node!r} shows parent as {parent!r} but {parent!r} shows "
                f"left {parent.left!r} and right {parent.right!r}"
            )
            assert parent is None or not (parent.left is node and parent.right is node), (
                f"{node!r} is both children of {parent!r}"
            )
            assert isinstance(node.key, int), f"{node!r} holds no integer key"
            assert lower is None or node.key > lower, (
                f"{node!r} is not greater than lower bound {lower}"
            )
            assert upper is None or node.key < upper, (
                f"{node!r} is not less than upper bound {upper}"
            )
            assert node.color in (RED, BLACK), f"{node!r} has colour {node.color!r}"
            if node.color == RED:
                assert node.left.color == BLACK, f"Red node {node!r} has red left child"
                assert node.right.color == BLACK, f"Red node {node!r} has red right child"

            stack.append((node, lower, upper, True))
            if node.right is not LEAF:
                assert node.right.parent is node, (
                    f"{node.right!r} is the right child of {node!r} but shows "
                    f"parent as {node.right.parent!r}"
                )
                stack.append((node.right, node.key, upper, False))
            if node.left is not LEAF:
                assert node.left.parent is node, (
                    f"{node.left!r} is the left child of {node!r} but shows "
                    f"parent as {node.left.parent!r}"
                )
                stack.append((node.left, lower, node.key, False))

        assert count == self._size, f"Found {count} nodes but size is {self._size}"
        return heights[id(self._root)]

    # ------------------------------------------------------------------
    #   Level‑by‑level dump (for debugging)
    # ------------------------------------------------------------------
    def levels(self) -> List[List[str]]:
        """Breadth‑first rendering, one list of node reprs per level."""
        if self._root is None:
            return []
        result: List[List[str]] = []
        to_visit: Deque[_Node] = deque([self._root])
        while to_visit:
            level = []
            for _ in range(len(to_visit)):
                current = to_visit.popleft()
                level.append(repr(current))
                if current is not LEAF:
                    to_visit.append(current.left)
                    to_visit.append(current.right)
            result.append(level)
        return result

    def print_tree(self, stream: Optional[TextIO] = None) -> None:
        """Write ``levels()`` to *stream* (stderr by default), one level per line."""
        out = sys.stderr if stream is None else stream
        if self._root is None:
            print("Tree is empty.  Nothing to print.", file=out)
            return
        print(f"Printing tree with {self._size} nodes", file=out)
        for level in self.levels():
            print("[" + ", ".join(level) + "]", file=out)

    def __repr__(self) -> str:
        return f"RedBlackTree({self.keys()!r})"
