# bktree.py
# BK-tree for approximate string matching (typo-tolerant lookup) in the fuzzy
# phase of suggest().
# - Nodes hold an accent-folded term plus the storage keys that fold to it.
# - Query uses an explicit stack (no recursion) and prunes children with the
#   triangle inequality of edit distance. Pruning needs the exact distance to
#   each visited node, so only the final membership test uses the cutoff.

from __future__ import annotations

from typing import Dict, List, Optional, Set, Tuple

from .distance import edit_distance


class BKTree:
    """BK-tree over folded terms."""

    class Node:
        __slots__ = ("word", "keys", "children")

        def __init__(self, word: str, key: str):
            self.word = word
            self.keys: Set[str] = {key}
            self.children: Dict[int, "BKTree.Node"] = {}

    def __init__(self) -> None:
        self.root: Optional[BKTree.Node] = None
        self._size = 0

    # insertion/building -------------------------------------------------------------
    def insert(self, folded: str, key: str) -> None:
        """Insert storage `key` under `folded`. Empty folded terms are ignored."""
        if not folded:
            return

        if self.root is None:
            self.root = BKTree.Node(folded, key)
            self._size = 1
            return

        node = self.root
        while True:
            d = edit_distance(folded, node.word)
            if d == 0:
                node.keys.add(key)
                return
            child = node.children.get(d)
            if child is None:
                node.children[d] = BKTree.Node(folded, key)
                self._size += 1
                return
            node = child

    # query ---------------------------------------------------------------------------
    def query(self, folded: str, max_dist: int) -> List[Tuple[str, int]]:
        """
        Return (storage_key, distance) for every key whose folded term is within
        `max_dist` edits of `folded`. Unordered.
        """
        if not folded or self.root is None:
            return []

        results: List[Tuple[str, int]] = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            d = edit_distance(folded, node.word)
            if d <= max_dist:
                results.extend((k, d) for k in node.keys)

            # children worth visiting sit in [d - max_dist, d + max_dist]
            low = d - max_dist
            high = d + max_dist
            for dist_key, child in node.children.items():
                if low <= dist_key <= high:
                    stack.append(child)
        return results

    # utilities -------------------------------------------------------------------
    def size(self) -> int:
        """Number of distinct folded terms."""
        return self._size
