"""Huffman tree construction, code generation, encoding and decoding."""

from __future__ import annotations

import heapq
import itertools
from collections import Counter
from dataclasses import dataclass
from typing import NamedTuple


@dataclass(eq=False)
class HuffmanNode:
    """A Huffman tree node; leaves carry a character."""

    char: str = ""
    freq: int = 0
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class HuffmanEncoding(NamedTuple):
    root: HuffmanNode
    codes: dict[str, str]
    bits: str


def build_huffman_tree(text: str) -> HuffmanNode:
    """Build a Huffman tree from character frequencies in text."""
    counts = Counter(text)
    if not counts:
        raise ValueError("cannot build a Huffman tree from empty text")
    order = itertools.count()
    heap = [(freq, next(order), HuffmanNode(ch, freq)) for ch, freq in counts.items()]
    heapq.heapify(heap)
    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        total = left_freq + right_freq
        heapq.heappush(heap, (total, next(order), HuffmanNode("", total, left, right)))
    return heap[0][2]


def huffman_codes(root: HuffmanNode | None) -> dict[str, str]:
    """Map each leaf character to its bit string: 0 for left, 1 for right."""
    codes: dict[str, str] = {}

    def walk(node: HuffmanNode | None, prefix: str) -> None:
        if node is None:
            return
        if node.is_leaf:
            codes[node.char] = prefix
            return
        walk(node.left, prefix + "0")
        walk(node.right, prefix + "1")

    walk(root, "")
    return codes


def huffman_encode(text: str) -> HuffmanEncoding:
    """Build the tree for text and return it with its codes and the encoded bits."""
    root = build_huffman_tree(text)
    codes = huffman_codes(root)
    return HuffmanEncoding(root, codes, "".join(codes[ch] for ch in text))


def huffman_decode(root: HuffmanNode, encoded: str) -> str:
    """Decode a bit string by walking the tree; '0' goes left, anything else right.

    Bits left over after the last complete code are ignored.
    """
    result: list[str] = []
    current = root
    for bit in encoded:
        current = current.left if bit == "0" else current.right
        if current is None:
            raise ValueError("encoded bits do not follow a path in the tree")
        if current.is_leaf:
            result.append(current.char)
            current = root
    return "".join(result)