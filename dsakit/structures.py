"""A stack with constant-time minimum and a lowercase-letter trie."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Any

_ALPHABET = frozenset(string.ascii_lowercase)


class MinStack:
    """A LIFO stack that also reports its smallest element in O(1)."""

    def __init__(self) -> None:
        self._items: list[tuple[Any, Any]] = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self._items:
            smallest = min(self._items[-1][1], value)
        else:
            smallest = value
        self._items.append((value, smallest))

    def pop(self) -> Any:
        """Remove the top element and return it."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()[0]

    def top(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def get_min(self) -> Any:
        """Return the smallest element currently on the stack."""
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    end_of_word: bool = False


class Trie:
    """A prefix tree over words made of the letters ``a`` to ``z``."""

    def __init__(self) -> None:
        self._root = _Node()

    def add(self, word: str) -> None:
        """Store ``word``; only lowercase ASCII letters are accepted."""
        invalid = [char for char in word if char not in _ALPHABET]
        if invalid:
            raise ValueError(f"word may hold only letters a-z, got {invalid[0]!r}")
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _Node())
        node.end_of_word = True

    def find(self, word: str) -> bool:
        """Tell whether ``word`` was added as a whole word."""
        node = self._root
        for char in word:
            next_node = node.children.get(char)
            if next_node is None:
                return False
            node = next_node
        return node.end_of_word

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.find(word)