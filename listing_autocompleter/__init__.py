"""
listing_autocompleter

Word completion over the vocabulary of real-estate listing exports.
Build a PrefixIndex from CSV/XLSX sources, then ask it for completions.
"""

from listing_autocompleter.core.trie import PrefixIndex, TrieNode
from listing_autocompleter.ingest.builder import VocabularyBuilder, BuildReport, SourceReport
from listing_autocompleter.ingest.sources import SourceSpec, preset, default_sources
from listing_autocompleter.autocompleter import AutoCompleter

__all__ = [
    "PrefixIndex",
    "TrieNode",
    "VocabularyBuilder",
    "BuildReport",
    "SourceReport",
    "SourceSpec",
    "preset",
    "default_sources",
    "AutoCompleter",
]

__version__ = "0.1.0"
