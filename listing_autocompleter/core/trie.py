# trie.py
# Prefix tree holding the listing vocabulary.
# Keeps per-word insert counts so callers can rank by popularity.
# The index does no normalization: callers feed it already cleaned words.

from __future__ import annotations
from typing import Dict, Iterator, List, Optional, Tuple

Word = str
Count = int
Match = Tuple[Word, Count]

ORDERS = ("alpha", "frequency")


class TrieNode:
    """
    A single node in the prefix tree.
    children: char -> TrieNode
    is_terminal: True when the path from the root spells an inserted word
    freq: how many times that exact word was inserted (0 for non-terminals)
    """

    __slots__ = ("children", "is_terminal", "freq")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_terminal = False
        self.freq = 0


class PrefixIndex:
    """
    In-memory vocabulary index with prefix enumeration.

    Filled once through insert() during the build phase, then queried
    read-only through words_with_prefix(). Case sensitive: "Cat" and "cat"
    are different words.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._words = 0
        self._total = 0
        self._nodes = 1

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """
        Insert one occurrence of `word`.
        Existing paths are reused; only the terminal counter grows on repeats.
        Raises ValueError for the empty string and TypeError for non-strings.
        """
        if not isinstance(word, str):
            raise TypeError(f"word must be str, got {type(word).__name__}")
        if not word:
            raise ValueError("cannot insert an empty word")

        node = self._root
        for ch in word:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = TrieNode()
                node.children[ch] = nxt
                self._nodes += 1
            node = nxt

        if not node.is_terminal:
            node.is_terminal = True
            self._words += 1
        node.freq += 1
        self._total += 1

    # search/traversal ---------------------------------------------------------
    def words_with_prefix(
        self, prefix: str, order: str = "alpha", limit: Optional[int] = None
    ) -> List[Match]:
        """
        Return every inserted word starting with `prefix` as (word, freq).

        order="alpha" keeps traversal order, which is lexicographic by
        code point (a word comes before its own extensions).
        order="frequency" puts higher counts first, ties lexicographic.
        limit truncates after ordering; None returns everything.
        An unknown prefix or an empty index gives [].
        """
        if order not in ORDERS:
            raise ValueError(f"unknown order {order!r}, expected one of {ORDERS}")

        out = list(self.iter_words_with_prefix(prefix))
        if order == "frequency":
            # sort is stable, alpha order survives as tie-breaker
            out.sort(key=lambda m: -m[1])
        if limit is not None:
            out = out[: max(limit, 0)]
        return out

    def iter_words_with_prefix(self, prefix: str) -> Iterator[Match]:
        """
        Lazily yield (word, freq) under `prefix` in lexicographic order.
        Uses an explicit stack so very long words cannot hit the recursion limit.
        """
        node = self._walk(prefix)
        if node is None:
            return

        stack: List[Tuple[TrieNode, str]] = [(node, prefix)]
        while stack:
            cur, spelled = stack.pop()
            if cur.is_terminal:
                yield spelled, cur.freq
            # push in reverse so the smallest character is popped first
            for ch in sorted(cur.children, reverse=True):
                stack.append((cur.children[ch], spelled + ch))

    def _walk(self, s: str) -> Optional[TrieNode]:
        node = self._root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    # convenience -----------------------------------------------------
    def frequency(self, word: str) -> int:
        """Insert count for `word`, 0 if it was never inserted."""
        node = self._walk(word)
        if node is None or not node.is_terminal:
            return 0
        return node.freq

    def has_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    @property
    def total(self) -> int:
        """Number of insert() calls that succeeded."""
        return self._total

    @property
    def node_count(self) -> int:
        """Nodes in the tree, root included."""
        return self._nodes

    def __len__(self) -> int:
        return self._words

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not word:
            return False
        node = self._walk(word)
        return node is not None and node.is_terminal

    def __repr__(self) -> str:
        return f"<PrefixIndex words={self._words} total={self._total} nodes={self._nodes}>"
