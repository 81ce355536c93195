"""Unbalanced binary search tree with find, insert, delete and listings."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_INTEGER = re.compile(r"\s*[+-]?\d+")

DEMO_KEYS = (50, 25, 75, 12, 37, 43, 30, 33, 87, 93, 97)


@dataclass(eq=False)
class Node:
    """A tree node holding a key and links to its two children."""

    key: int
    left: Node | None = None
    right: Node | None = None

    def describe(self) -> str:
        """Return ``(key, left key, right key)`` with ``null`` for missing children."""
        left = "null" if self.left is None else str(self.left.key)
        right = "null" if self.right is None else str(self.right.key)
        return f"({self.key}, {left}, {right})"


class Tree:
    """Binary search tree; equal keys go to the right subtree."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        for key in keys:
            self.insert(key)

    def find(self, key: int) -> Node | None:
        """Return the first node on the search path holding ``key``, or None."""
        current = self.root
        while current is not None:
            if key == current.key:
                return current
            current = current.left if key < current.key else current.right
        return None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.find(key) is not None

    def insert(self, key: int) -> Node:
        """Add ``key`` as a new leaf and return its node."""
        node = Node(key)
        if self.root is None:
            self.root = node
            return node
        current = self.root
        while True:
            if key < current.key:
                if current.left is None:
                    current.left = node
                    return node
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return node
                current = current.right

    def _replace_child(self, parent: Node | None, old: Node, new: Node | None) -> None:
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def delete(self, key: int) -> bool:
        """Remove one node holding ``key``; return False if there was none.

        A node with two children takes the key of its in-order successor,
        which is then removed from the right subtree.
        """
        parent: Node | None = None
        current = self.root
        while current is not None and current.key != key:
            parent = current
            current = current.left if key < current.key else current.right
        if current is None:
            return False

        if current.left is None:
            self._replace_child(parent, current, current.right)
        elif current.right is None:
            self._replace_child(parent, current, current.left)
        else:
            successor_parent = current
            successor = current.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            current.key = successor.key
            if successor_parent is current:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
        return True

    def in_order(self) -> Iterator[Node]:
        """Yield the nodes in ascending key order."""
        stack: list[Node] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right

    def structure(self) -> str:
        """Render the tree as nested ``(key left right)`` with ``null`` leaves."""
        parts: list[str] = []
        pending: list[Node | None | str] = [self.root]
        while pending:
            item = pending.pop()
            if isinstance(item, str):
                parts.append(item)
            elif item is None:
                parts.append("null")
            else:
                parts.append(f"({item.key} ")
                pending.extend([")", item.right, " ", item.left])
        return "".join(parts)

    def display(self) -> str:
        """Describe every node in key order, each followed by a space."""
        return "".join(f"{node.describe()} " for node in self.in_order())


def parse_key(text: str) -> int:
    """Parse a whole string as a 32-bit integer key."""
    match = _INTEGER.fullmatch(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _stdin_tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def _read_key(tokens: Iterator[str], prompt: str) -> int:
    while True:
        print(prompt, end="", flush=True)
        token = next(tokens, None)
        if token is None:
            raise EOFError("input ended")
        try:
            return parse_key(token)
        except ValueError:
            print("Ошибка: введите целое число!")


def main(argv: list[str] | None = None) -> int:
    """Build a sample tree, then search, insert and delete keys read from input."""
    tokens = iter(argv) if argv is not None else _stdin_tokens()
    tree = Tree(DEMO_KEYS)

    print("Первоначальная структура дерева:")
    print(tree.display())
    print()

    try:
        search_key = _read_key(tokens, "Введите ключ для поиска: ")
        found = tree.find(search_key)
        if found is not None:
            print(f"Найден узел: {found.describe()}")
        else:
            print("Заданный ключ в дереве не найден.")

        tree.insert(_read_key(tokens, "Введите ключ для добавления: "))
        tree.delete(_read_key(tokens, "Введите ключ для удаления: "))
    except EOFError:
        print()
        return 1

    print("Структура дерева (in-order):")
    print(tree.display())
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())