"""
Prefix index over dictionary headwords.
"""

from .trie import MAX_MATCHES, PrefixIndex, TrieNode

__all__ = ["PrefixIndex", "TrieNode", "MAX_MATCHES"]
