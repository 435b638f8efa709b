"""Word frequency counting backed by an AVL tree."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class _AVLNode:
    word: str
    count: int = 1
    left: Optional[_AVLNode] = field(default=None, repr=False)
    right: Optional[_AVLNode] = field(default=None, repr=False)
    height: int = 1


def _height(node: Optional[_AVLNode]) -> int:
    return node.height if node is not None else 0


def _update_height(node: _AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: _AVLNode) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _AVLNode) -> _AVLNode:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: _AVLNode) -> _AVLNode:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


class AVLTree:
    """A self-balancing search tree counting occurrences of words."""

    def __init__(self) -> None:
        self._root: Optional[_AVLNode] = None
        self._size = 0

    def insert(self, word: str) -> None:
        """Add one occurrence of ``word``."""
        self._root = self._insert(self._root, word)

    def _insert(self, node: Optional[_AVLNode], word: str) -> _AVLNode:
        if node is None:
            self._size += 1
            return _AVLNode(word)
        if word < node.word:
            node.left = self._insert(node.left, word)
        elif word > node.word:
            node.right = self._insert(node.right, word)
        else:
            node.count += 1
            return node

        _update_height(node)
        balance = _balance(node)

        if balance > 1 and node.left is not None:
            if word < node.left.word:
                return _rotate_right(node)
            if word > node.left.word:
                node.left = _rotate_left(node.left)
                return _rotate_right(node)
        if balance < -1 and node.right is not None:
            if word > node.right.word:
                return _rotate_left(node)
            if word < node.right.word:
                node.right = _rotate_right(node.right)
                return _rotate_left(node)
        return node

    def __iter__(self) -> Iterator[tuple[str, int]]:
        """Yield ``(word, count)`` pairs in sorted word order."""
        pending: list[_AVLNode] = []
        current = self._root
        while pending or current is not None:
            while current is not None:
                pending.append(current)
                current = current.left
            node = pending.pop()
            yield node.word, node.count
            current = node.right

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """The number of levels in the tree; 0 when empty."""
        return _height(self._root)


class WordCount:
    """Counts case-insensitive alphanumeric words in text."""

    def __init__(self) -> None:
        self._tree = AVLTree()

    def process_line(self, line: str) -> None:
        """Count the words in ``line``; any non-alphanumeric character splits."""
        word: list[str] = []
        for char in line:
            if char.isascii() and char.isalnum():
                word.append(char.lower())
            elif word:
                self._tree.insert("".join(word))
                word.clear()
        if word:
            self._tree.insert("".join(word))

    def read_file(self, file_name: str) -> None:
        """Count the words of a text file; OSError when it cannot be opened."""
        with open(file_name, encoding="utf-8", errors="replace") as handle:
            for line in handle:
                self.process_line(line)

    def counts(self) -> list[tuple[str, int]]:
        """The ``(word, count)`` pairs in sorted word order."""
        return list(self._tree)

    def format_counts(self) -> str:
        """One ``word - count`` line per distinct word, in sorted order."""
        return "".join(f"{word} - {count}\n" for word, count in self._tree)


def main(argv: Optional[list[str]] = None) -> int:
    """Count the words of a file and print them with their frequencies."""
    parser = argparse.ArgumentParser(description="Count word frequencies in a file.")
    parser.add_argument("file", help="text file to read")
    args = parser.parse_args(argv)

    counter = WordCount()
    status = 0
    try:
        counter.read_file(args.file)
    except OSError:
        print(f"Error opening file: {args.file}", file=sys.stderr)
        status = 1

    sys.stdout.write("Word Counts:\n")
    sys.stdout.write(counter.format_counts())
    return status


if __name__ == "__main__":
    sys.exit(main())