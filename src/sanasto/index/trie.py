"""
Character trie for search-as-you-type headword completion.
"""

import logging
import sys
from collections.abc import Iterable

logger = logging.getLogger("sanasto.index")

# Hard cap on completions returned for a single prefix.
MAX_MATCHES = 50


class TrieNode:
    """A single trie node. Children are keyed by one Unicode code point."""

    __slots__ = ("children", "is_terminal")

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        self.is_terminal = False


class PrefixIndex:
    """Trie over the headword list, enumerating completions for a prefix.

    The index is filled once with insert() and then only queried. Completions
    are collected depth-first (pre-order, siblings in the order their
    character was first inserted) and enumeration stops at MAX_MATCHES, so
    a short prefix returns *some* 50 headwords rather than the "best" 50.

    Example:
        >>> index = PrefixIndex.from_words(["koira", "koiran", "kala"])
        >>> sorted(index.find_matches("koi"))
        ['koira', 'koiran']
        >>> index.find_matches("z")
        []
    """

    def __init__(self) -> None:
        self.root = TrieNode()

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "PrefixIndex":
        """Build an index by inserting every word once."""
        index = cls()
        for word in words:
            index.insert(word)
        return index

    def insert(self, word: str) -> None:
        """Insert a headword. Inserting the same word again is a no-op."""
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        node.is_terminal = True

    def _find_node(self, prefix: str) -> TrieNode | None:
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._find_node(word)
        return node is not None and node.is_terminal

    def find_matches(self, prefix: str) -> list[str]:
        """Return up to MAX_MATCHES stored headwords starting with `prefix`.

        An empty prefix means "nothing typed yet" and always returns an empty
        list, as does a prefix that leaves the trie.

        Args:
            prefix: Leading characters typed so far

        Returns:
            Matching headwords in traversal order (possibly truncated)
        """
        if not prefix:
            return []

        start = self._find_node(prefix)
        if start is None:
            return []

        matches: list[str] = []
        # Iterative pre-order walk
        stack: list[tuple[TrieNode, str]] = [(start, prefix)]
        while stack:
            node, path = stack.pop()
            if node.is_terminal:
                matches.append(path)
                if len(matches) >= MAX_MATCHES:
                    break
            # Reversed so the first-inserted child is popped first
            for ch, child in reversed(node.children.items()):
                stack.append((child, path + ch))

        return matches

    def count_nodes(self) -> int:
        """Total number of nodes in the trie, root included."""
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def estimated_memory_bytes(self) -> int:
        """Rough memory footprint of the trie, for debug diagnostics only.

        Multiplies the node count by the size of one slotted node plus an
        empty child dict; real usage is higher for nodes with many children.
        """
        per_node = sys.getsizeof(TrieNode()) + sys.getsizeof({})
        return self.count_nodes() * per_node

    def log_diagnostics(self) -> None:
        """Log node count and estimated memory at debug level."""
        if not logger.isEnabledFor(logging.DEBUG):
            return
        total_nodes = self.count_nodes()
        estimated = self.estimated_memory_bytes()
        logger.debug(f"Trie has {total_nodes} nodes")
        logger.debug(
            f"Estimated trie memory usage: {estimated} bytes (~{estimated / (1024 * 1024):.2f} MB)"
        )
