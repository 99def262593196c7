"""A red-black search tree with parent links, ordered by a less-than function."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Color(Enum):
    RED = 0
    BLACK = 1


@dataclass(eq=False)
class Node:
    """One entry of the tree."""

    key: Any
    value: Any
    color: Color = Color.RED
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)


def _is_red(node):
    return node is not None and node.color is Color.RED


class RedBlackTree:
    """A balanced binary search tree with unique keys."""

    def __init__(self, less=operator.lt):
        self.less = less
        self.root = None
        self._len = 0

    def _equal(self, a, b):
        return not (self.less(a, b) or self.less(b, a))

    def find(self, key):
        """Return the node holding ``key``, or None."""
        node = self.root
        while node is not None:
            if self.less(key, node.key):
                node = node.left
            elif self.less(node.key, key):
                node = node.right
            else:
                return node
        return None

    def _replace_child(self, old, new):
        parent = old.parent
        if parent is None:
            self.root = new
        elif old is parent.left:
            parent.left = new
        else:
            parent.right = new
        if new is not None:
            new.parent = parent

    def _rotate_left(self, x):
        y = x.right
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        self._replace_child(x, y)
        y.left = x
        x.parent = y

    def _rotate_right(self, x):
        y = x.left
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        self._replace_child(x, y)
        y.right = x
        x.parent = y

    def insert(self, key, value):
        """Insert ``key``; return ``(node, inserted)``. An existing key is left as it is."""
        parent = None
        node = self.root
        went_left = False
        while node is not None:
            parent = node
            if self.less(key, node.key):
                node, went_left = node.left, True
            elif self.less(node.key, key):
                node, went_left = node.right, False
            else:
                return node, False
        new = Node(key, value, Color.RED, parent)
        if parent is None:
            self.root = new
        elif went_left:
            parent.left = new
        else:
            parent.right = new
        self._len += 1
        self._insert_fixup(new)
        return new, True

    def _insert_fixup(self, z):
        while _is_red(z.parent):
            p = z.parent
            g = p.parent
            if p is g.left:
                uncle = g.right
                if _is_red(uncle):
                    p.color = uncle.color = Color.BLACK
                    g.color = Color.RED
                    z = g
                    continue
                if z is p.right:
                    z = p
                    self._rotate_left(z)
                    p = z.parent
                p.color = Color.BLACK
                g.color = Color.RED
                self._rotate_right(g)
            else:
                uncle = g.left
                if _is_red(uncle):
                    p.color = uncle.color = Color.BLACK
                    g.color = Color.RED
                    z = g
                    continue
                if z is p.left:
                    z = p
                    self._rotate_right(z)
                    p = z.parent
                p.color = Color.BLACK
                g.color = Color.RED
                self._rotate_left(g)
        self.root.color = Color.BLACK

    @staticmethod
    def _minimum(node):
        while node.left is not None:
            node = node.left
        return node

    @staticmethod
    def _maximum(node):
        while node.right is not None:
            node = node.right
        return node

    def remove(self, key):
        """Remove ``key``; return whether it was present."""
        z = self.find(key)
        if z is None:
            return False
        removed_color = z.color
        if z.left is None:
            x, x_parent = z.right, z.parent
            self._replace_child(z, z.right)
        elif z.right is None:
            x, x_parent = z.left, z.parent
            self._replace_child(z, z.left)
        else:
            y = self._minimum(z.right)
            removed_color = y.color
            x = y.right
            if y.parent is z:
                x_parent = y
            else:
                x_parent = y.parent
                self._replace_child(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._replace_child(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color
        z.parent = z.left = z.right = None
        self._len -= 1
        if removed_color is Color.BLACK:
            self._remove_fixup(x, x_parent)
        return True

    def _remove_fixup(self, x, parent):
        while x is not self.root and not _is_red(x):
            if x is parent.left:
                w = parent.right
                if _is_red(w):
                    w.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_left(parent)
                    w = parent.right
                if not _is_red(w.left) and not _is_red(w.right):
                    w.color = Color.RED
                    x, parent = parent, parent.parent
                else:
                    if not _is_red(w.right):
                        w.left.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_right(w)
                        w = parent.right
                    w.color = parent.color
                    parent.color = Color.BLACK
                    w.right.color = Color.BLACK
                    self._rotate_left(parent)
                    x, parent = self.root, None
            else:
                w = parent.left
                if _is_red(w):
                    w.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_right(parent)
                    w = parent.left
                if not _is_red(w.left) and not _is_red(w.right):
                    w.color = Color.RED
                    x, parent = parent, parent.parent
                else:
                    if not _is_red(w.left):
                        w.right.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_left(w)
                        w = parent.left
                    w.color = parent.color
                    parent.color = Color.BLACK
                    w.left.color = Color.BLACK
                    self._rotate_right(parent)
                    x, parent = self.root, None
        if x is not None:
            x.color = Color.BLACK

    def front(self):
        """The node with the smallest key, or None."""
        return None if self.root is None else self._minimum(self.root)

    def back(self):
        """The node with the largest key, or None."""
        return None if self.root is None else self._maximum(self.root)

    def successor(self, node):
        """The node after ``node`` in key order, or None."""
        if node.right is not None:
            return self._minimum(node.right)
        while node.parent is not None and node is node.parent.right:
            node = node.parent
        return node.parent

    def predecessor(self, node):
        """The node before ``node`` in key order, or None."""
        if node.left is not None:
            return self._maximum(node.left)
        while node.parent is not None and node is node.parent.left:
            node = node.parent
        return node.parent

    def _iter_nodes(self):
        node = self.front()
        while node is not None:
            yield node
            node = self.successor(node)

    def copy(self):
        """An independent tree with the same shape, colours and entries."""

        def clone(source, parent):
            if source is None:
                return None
            node = Node(source.key, source.value, source.color, parent)
            node.left = clone(source.left, node)
            node.right = clone(source.right, node)
            return node

        other = RedBlackTree(self.less)
        other.root = clone(self.root, None)
        other._len = self._len
        return other

    def clear(self):
        self.root = None
        self._len = 0

    def __len__(self):
        return self._len

    def is_valid(self):
        """Check ordering, colour rules, parent links and the stored size."""
        if self.root is None:
            return self._len == 0
        if self.root.color is not Color.BLACK or self.root.parent is not None:
            return False
        count = 0

        def black_height(node):
            nonlocal count
            if node is None:
                return 1
            count += 1
            for child in (node.left, node.right):
                if child is not None and child.parent is not node:
                    return -1
            if node.left is not None and not self.less(node.left.key, node.key):
                return -1
            if node.right is not None and not self.less(node.key, node.right.key):
                return -1
            if _is_red(node) and (_is_red(node.left) or _is_red(node.right)):
                return -1
            left = black_height(node.left)
            right = black_height(node.right)
            if left < 0 or right < 0 or left != right:
                return -1
            return left + (1 if node.color is Color.BLACK else 0)

        if black_height(self.root) < 0 or count != self._len:
            return False
        keys = [node.key for node in self._iter_nodes()]
        return all(self.less(a, b) for a, b in zip(keys, keys[1:]))