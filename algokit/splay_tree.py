"""Ordered set backed by a splay tree."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Any


class _Node:
    __slots__ = ("key", "ch", "par")

    def __init__(self, key) -> None:
        self.key = key
        self.ch: list[_Node | None] = [None, None]
        self.par: _Node | None = None


class SplayTree:
    """Set of distinct keys with amortised O(log n) search and neighbour queries.

    ``less(a, b)`` is true iff ``a`` orders strictly before ``b``; keys that are
    neither less nor greater than each other count as equal. Neighbour queries
    return ``None`` when no such key exists.
    """

    def __init__(self, less: Callable[[Any, Any], bool] | None = None) -> None:
        self._less = operator.lt if less is None else less
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, key) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.ch[0]
            node = stack.pop()
            yield node.key
            node = node.ch[1]

    def _eq(self, a, b) -> bool:
        return not self._less(a, b) and not self._less(b, a)

    def _rotate(self, x: _Node) -> None:
        p = x.par
        g = p.par
        d = 1 if p.ch[1] is x else 0
        inner = x.ch[d ^ 1]
        p.ch[d] = inner
        if inner is not None:
            inner.par = p
        x.ch[d ^ 1] = p
        p.par = x
        x.par = g
        if g is not None:
            g.ch[1 if g.ch[1] is p else 0] = x
        else:
            self._root = x

    def _splay(self, x: _Node) -> None:
        while x.par is not None:
            p = x.par
            g = p.par
            if g is not None:
                x_is_right = p.ch[1] is x
                p_is_right = g.ch[1] is p
                self._rotate(p if x_is_right == p_is_right else x)
            self._rotate(x)
        self._root = x

    def _find_node(self, key) -> _Node | None:
        cur = self._root
        last = None
        while cur is not None:
            last = cur
            if self._eq(cur.key, key):
                return cur
            cur = cur.ch[1 if self._less(cur.key, key) else 0]
        return last

    def _splay_to(self, key) -> _Node | None:
        if self._root is None:
            return None
        x = self._find_node(key)
        self._splay(x)
        return x

    @staticmethod
    def _extreme(node: _Node | None, side: int):
        if node is None:
            return None
        while node.ch[side] is not None:
            node = node.ch[side]
        return node.key

    def contains(self, key) -> bool:
        """Whether ``key`` is in the set."""
        x = self._splay_to(key)
        return x is not None and self._eq(x.key, key)

    def insert(self, key) -> bool:
        """Add ``key``; False if it was already present."""
        if self._root is None:
            self._root = _Node(key)
            self._size += 1
            return True
        x = self._splay_to(key)
        if self._eq(x.key, key):
            return False
        node = _Node(key)
        self._size += 1
        side = 1 if self._less(x.key, key) else 0
        # The new node takes x on one side and x's subtree beyond key on the other.
        node.ch[side ^ 1] = x
        node.ch[side] = x.ch[side]
        if x.ch[side] is not None:
            x.ch[side].par = node
        x.ch[side] = None
        x.par = node
        self._root = node
        return True

    def erase(self, key) -> bool:
        """Remove ``key``; False if it was absent."""
        x = self._splay_to(key)
        if x is None or not self._eq(x.key, key):
            return False
        left, right = x.ch
        if left is not None:
            left.par = None
        if right is not None:
            right.par = None
        self._size -= 1
        if left is None:
            self._root = right
            return True
        if right is None:
            self._root = left
            return True
        self._root = left
        cur = left
        while cur.ch[1] is not None:
            cur = cur.ch[1]
        self._splay(cur)
        cur.ch[1] = right
        right.par = cur
        return True

    def predecessor(self, key):
        """Largest key strictly less than ``key``."""
        x = self._splay_to(key)
        if x is None:
            return None
        if self._less(x.key, key):
            return x.key
        return self._extreme(x.ch[0], 1)

    def successor(self, key):
        """Smallest key strictly greater than ``key``."""
        x = self._splay_to(key)
        if x is None:
            return None
        if self._less(key, x.key):
            return x.key
        return self._extreme(x.ch[1], 0)

    def lower_bound(self, key):
        """Smallest key not less than ``key``."""
        x = self._splay_to(key)
        if x is None:
            return None
        if not self._less(x.key, key):
            return x.key
        return self._extreme(x.ch[1], 0)

    def prev_le(self, key):
        """Largest key not greater than ``key``."""
        x = self._splay_to(key)
        if x is None:
            return None
        if not self._less(key, x.key):
            return x.key
        return self._extreme(x.ch[0], 1)

    def _splay_extreme(self, side: int):
        if self._root is None:
            return None
        cur = self._root
        while cur.ch[side] is not None:
            cur = cur.ch[side]
        self._splay(cur)
        return cur.key

    def min_element(self):
        """Smallest key in the set."""
        return self._splay_extreme(0)

    def max_element(self):
        """Largest key in the set."""
        return self._splay_extreme(1)