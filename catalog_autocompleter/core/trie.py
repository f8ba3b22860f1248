# trie.py
# Prefix tree over accent-folded terms for the prefix phase of suggest().
# Several storage keys can fold to the same path ("maçã" and "maca"), so each
# terminal node keeps the set of storage keys that end there.
# Built once per rebuild and never touched again, so readers need no lock.

from __future__ import annotations

from typing import Dict, List, Set


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode
    keys: storage keys whose folded form ends at this node
    """

    __slots__ = ("children", "keys")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.keys: Set[str] = set()


class Trie:
    """Folded term -> storage keys, with prefix collection."""

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    # insertion -----------------------------------------------------
    def insert(self, folded: str, key: str) -> None:
        """
        Register storage `key` under its folded form.
        The empty folded form lives on the root and only matches the empty prefix.
        """
        node = self._root
        for ch in folded:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = node.children[ch] = TrieNode()
            node = nxt
        if key not in node.keys:
            node.keys.add(key)
            self._size += 1

    # search/traversal ---------------------------------------------------------
    def keys_with_prefix(self, prefix: str) -> List[str]:
        """
        Return every storage key whose folded form starts with `prefix`.
        Unordered; the query engine applies priority ordering.
        """
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return []

        out: List[str] = []
        # explicit stack, folded terms can be long product names
        stack = [node]
        while stack:
            n = stack.pop()
            out.extend(n.keys)
            stack.extend(n.children.values())
        return out

    # convenience -----------------------------------------------------
    def __len__(self) -> int:
        return self._size

    def __contains__(self, folded: str) -> bool:
        node = self._root
        for ch in folded:
            node = node.children.get(ch)
            if node is None:
                return False
        return bool(node.keys)
