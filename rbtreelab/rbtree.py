"""A red-black tree of ordered keys with a shared black sentinel leaf."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from typing import Any


class Color(enum.Enum):
    """Colour of a red-black tree node."""

    RED = "red"
    BLACK = "black"


class Node:
    """A tree node. Nodes are compared by identity."""

    __slots__ = ("key", "color", "parent", "left", "right")

    def __init__(
        self,
        key: Any,
        color: Color,
        parent: Node | None = None,
        left: Node | None = None,
        right: Node | None = None,
    ) -> None:
        self.key = key
        self.color = color
        self.parent = parent
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"Node(key={self.key!r}, color={self.color.name})"


class RBTree:
    """Red-black tree that accepts duplicate keys.

    Equal keys are placed in the right subtree, so duplicates keep
    insertion order in an in-order walk.
    """

    def __init__(self) -> None:
        nil = Node(None, Color.BLACK)
        nil.parent = nil.left = nil.right = nil
        self._nil = nil
        self.root: Node = nil
        self._size = 0

    def is_nil(self, node: Node | None) -> bool:
        """Return True if ``node`` is this tree's sentinel leaf."""
        return node is self._nil

    def clear(self) -> None:
        """Remove every node from the tree."""
        self._nil.parent = self._nil
        self.root = self._nil
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys in ascending order."""
        stack: list[Node] = []
        cur = self.root
        while stack or cur is not self._nil:
            while cur is not self._nil:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            yield cur.key
            cur = cur.right

    def to_list(self, n: int | None = None) -> list[Any]:
        """Return at most ``n`` keys in ascending order (all keys if ``n`` is None)."""
        if n is None:
            return list(self)
        if n < 0:
            raise ValueError("n must not be negative")
        result: list[Any] = []
        if n == 0:
            return result
        for key in self:
            result.append(key)
            if len(result) >= n:
                break
        return result

    # -- rotations ---------------------------------------------------------

    def _left_rotate(self, x: Node) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self.root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _right_rotate(self, y: Node) -> None:
        x = y.left
        y.left = x.right
        if x.right is not self._nil:
            x.right.parent = y
        x.parent = y.parent
        if y.parent is self._nil:
            self.root = x
        elif y is y.parent.right:
            y.parent.right = x
        else:
            y.parent.left = x
        x.right = y
        y.parent = x

    # -- insertion ---------------------------------------------------------

    def insert(self, key: Any) -> Node:
        """Insert ``key`` and return the new node."""
        nil = self._nil
        node = Node(key, Color.RED, nil, nil, nil)
        parent = nil
        cur = self.root
        while cur is not nil:
            parent = cur
            cur = cur.left if key < cur.key else cur.right
        node.parent = parent
        if parent is nil:
            self.root = node
        elif key < parent.key:
            parent.left = node
        else:
            parent.right = node
        self._size += 1
        self._insert_fixup(node)
        return node

    def _insert_fixup(self, z: Node) -> None:
        while z.parent.color is Color.RED:
            grand = z.parent.parent
            if z.parent is grand.left:
                uncle = grand.right
                if uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._left_rotate(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._right_rotate(z.parent.parent)
            else:
                uncle = grand.left
                if uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._right_rotate(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._left_rotate(z.parent.parent)
        self.root.color = Color.BLACK

    # -- lookup ------------------------------------------------------------

    def find(self, key: Any) -> Node | None:
        """Return a node holding ``key``, or None if there is none."""
        cur = self.root
        while cur is not self._nil:
            if key == cur.key:
                return cur
            cur = cur.left if key < cur.key else cur.right
        return None

    def _subtree_min(self, node: Node) -> Node:
        while node.left is not self._nil:
            node = node.left
        return node

    def min(self) -> Node | None:
        """Return the node with the smallest key, or None if the tree is empty."""
        if self.root is self._nil:
            return None
        return self._subtree_min(self.root)

    def max(self) -> Node | None:
        """Return the node with the largest key, or None if the tree is empty."""
        if self.root is self._nil:
            return None
        cur = self.root
        while cur.right is not self._nil:
            cur = cur.right
        return cur

    # -- deletion ----------------------------------------------------------

    def _transplant(self, u: Node, v: Node) -> None:
        if u.parent is self._nil:
            self.root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def erase(self, node: Node) -> None:
        """Remove ``node`` from the tree.

        Raises ValueError for None, the sentinel, or a node already erased.
        """
        nil = self._nil
        if node is None or node is nil or node.parent is None:
            raise ValueError("node is not in the tree")

        y = node
        y_original_color = y.color
        if node.left is nil:
            x = node.right
            self._transplant(node, node.right)
        elif node.right is nil:
            x = node.left
            self._transplant(node, node.left)
        else:
            y = self._subtree_min(node.right)
            y_original_color = y.color
            x = y.right
            if y.parent is node:
                x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = node.right
                y.right.parent = y
            self._transplant(node, y)
            y.left = node.left
            y.left.parent = y
            y.color = node.color

        if y_original_color is Color.BLACK:
            self._erase_fixup(x)

        node.parent = node.left = node.right = None
        self._size -= 1
        if self._size == 0:
            self.clear()

    def _erase_fixup(self, x: Node) -> None:
        while x is not self.root and x.color is Color.BLACK:
            if x is x.parent.left:
                w = x.parent.right
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._left_rotate(x.parent)
                    w = x.parent.right
                if w.left.color is Color.BLACK and w.right.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.right.color is Color.BLACK:
                        w.left.color = Color.BLACK
                        w.color = Color.RED
                        self._right_rotate(w)
                        w = x.parent.right
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.right.color = Color.BLACK
                    self._left_rotate(x.parent)
                    x = self.root
            else:
                w = x.parent.left
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._right_rotate(x.parent)
                    w = x.parent.left
                if w.right.color is Color.BLACK and w.left.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.left.color is Color.BLACK:
                        w.right.color = Color.BLACK
                        w.color = Color.RED
                        self._left_rotate(w)
                        w = x.parent.left
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.left.color = Color.BLACK
                    self._right_rotate(x.parent)
                    x = self.root
        x.color = Color.BLACK