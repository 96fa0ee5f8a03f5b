# bktree.py
# BK-tree for approximate/fuzzy name matching (typo-tolerant lookup).
# Used by the vote ledger: insert participant names, then query for
# spellings within a given edit distance.
# - Node keeps a simple counter of how many times its exact word was inserted.
# - Distances come from Damerau-Levenshtein with an early-exit cutoff on queries.
# Traversal uses an explicit stack (no recursion) and prunes using the triangle
# inequality of the edit distance.

from typing import Iterable, List, Optional, Set, Tuple

from vote_muncher.core.distance import edit_distance


class BKTree:
    """BK-tree over exact (already normalized) strings."""

    class Node:
        __slots__ = ("word", "children", "count")

        def __init__(self, word: str):
            self.word = word
            self.children: dict[int, "BKTree.Node"] = {}
            self.count = 1  # times this exact word was inserted

    def __init__(self):
        self.root: Optional[BKTree.Node] = None
        self._size = 0

    # insertion/building -------------------------------------------------------------
    def insert(self, word: str) -> None:
        """
        Insert a word. The tree is append-only: nothing is ever removed or rebalanced.
        Re-inserting an existing word bumps that node's counter instead of chaining
        a zero-distance child, so search results are unaffected.
        """
        if self.root is None:
            self.root = BKTree.Node(word)
            self._size = 1
            return

        node = self.root
        while True:
            d = edit_distance(node.word, word)
            if d == 0:
                node.count += 1
                return
            child = node.children.get(d)
            if child is None:
                node.children[d] = BKTree.Node(word)
                self._size += 1
                return
            node = child

    def insert_many(self, words: Iterable[str]) -> None:
        for w in words:
            self.insert(w)

    # query ---------------------------------------------------------------------------
    def _walk(self, target: str, max_dist: int) -> List[Tuple[str, int]]:
        if self.root is None:
            return []

        found: List[Tuple[str, int]] = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            # exact distance is needed for the pruning window, so no cutoff here
            d = edit_distance(node.word, target)
            if d <= max_dist:
                found.append((node.word, d))

            # any word under edge k is at least |k - d| away from target
            low = d - max_dist
            high = d + max_dist
            for dist_key, child in node.children.items():
                if low <= dist_key <= high:
                    stack.append(child)
        return found

    def search(self, target: str, max_dist: int) -> Set[str]:
        """Return every indexed word within max_dist edits of target (unordered)."""
        return {w for w, _d in self._walk(target, max_dist)}

    def query(self, target: str, max_dist: int = 2) -> List[Tuple[str, int]]:
        """
        Return list of (word, distance) for words within max_dist of target.
        Sorted by (distance, -len(word), word): nearest first, longer spelling
        first among equals, then lexicographic for a stable order.
        """
        results = self._walk(target, max_dist)
        results.sort(key=lambda item: (item[1], -len(item[0]), item[0]))
        return results

    # utilities -------------------------------------------------------------------
    def __contains__(self, word: str) -> bool:
        """True if the exact word was inserted. Follows distance edges, so O(depth)."""
        node = self.root
        while node is not None:
            d = edit_distance(node.word, word)
            if d == 0:
                return True
            node = node.children.get(d)
        return False

    def __len__(self) -> int:
        return self._size

    def words(self) -> List[Tuple[str, int]]:
        """Return all words stored with their insert counts, unsorted."""
        out: List[Tuple[str, int]] = []
        if not self.root:
            return out
        stack = [self.root]
        while stack:
            n = stack.pop()
            out.append((n.word, n.count))
            stack.extend(n.children.values())
        return out

    def depth(self) -> int:
        """Length of the longest root-to-leaf path (0 for an empty tree)."""
        if self.root is None:
            return 0
        deepest = 0
        stack = [(self.root, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            for child in node.children.values():
                stack.append((child, level + 1))
        return deepest
