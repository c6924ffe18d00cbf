"""
listing_autocompleter.core

The prefix index the vocabulary lives in.
Contains:
 - TrieNode / PrefixIndex (insert, words_with_prefix)
 - the WordSink Protocol the builder feeds
"""

from .trie import TrieNode, PrefixIndex, ORDERS
from .protocols import WordSink, SourceEntry

__all__ = [
    "TrieNode",
    "PrefixIndex",
    "ORDERS",
    "WordSink",
    "SourceEntry",
]
