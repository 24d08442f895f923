"""Prefix tree over lowercase ASCII words."""

from __future__ import annotations

import string
from dataclasses import dataclass, field

_ALPHABET = frozenset(string.ascii_lowercase)


@dataclass(eq=False)
class _TrieNode:
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    terminal: bool = False


def _validate(word: str) -> None:
    if not _ALPHABET.issuperset(word):
        raise ValueError(f"word {word!r} contains characters outside a-z")


class Trie:
    """A set of lowercase words stored as a prefix tree."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        _validate(word)
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.terminal = True

    def search(self, word: str) -> bool:
        """Return whether ``word`` was inserted."""
        _validate(word)
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.terminal

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and _ALPHABET.issuperset(word) and self.search(word)

    def delete(self, word: str) -> bool:
        """Remove ``word``; nodes still used by other words are kept.

        Returns whether the word was present.
        """
        _validate(word)
        path = [self._root]
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
            path.append(node)
        if not node.terminal:
            return False
        node.terminal = False
        for ch, parent, child in reversed(list(zip(word, path, path[1:]))):
            if child.terminal or child.children:
                break
            del parent.children[ch]
        return True