"""A prefix tree of words and word segmentation built on it."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import lru_cache


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    terminal: bool = False


class Trie:
    """A set of words stored by shared prefixes."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _TrieNode()
        for word in words:
            self.insert(word)

    def __contains__(self, word: str) -> bool:
        return self.search(word)

    def _walk(self, text: str) -> _TrieNode | None:
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.terminal = True

    def search(self, word: str) -> bool:
        """True when word itself was inserted."""
        node = self._walk(word)
        return node is not None and node.terminal

    def starts_with(self, prefix: str) -> bool:
        """True when some inserted word begins with prefix."""
        return self._walk(prefix) is not None


def word_break(text: str, word_dict: Iterable[str]) -> bool:
    """True when text splits into a sequence of words from word_dict."""
    root = Trie(word_dict)._root

    @lru_cache(maxsize=None)
    def splits_from(start: int) -> bool:
        if start == len(text):
            return True
        node = root
        for end in range(start, len(text)):
            node = node.children.get(text[end])
            if node is None:
                return False
            if node.terminal and splits_from(end + 1):
                return True
        return False

    return splits_from(0)