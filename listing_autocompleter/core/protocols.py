# listing_autocompleter/core/protocols.py
"""
Protocol interfaces between the ingestion side and the index.

The builder only needs something it can insert words into. PrefixIndex
satisfies it, tests can hand in small fakes.
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable
from typing_extensions import TypedDict


# Typed structures used across components ------------------------------------

class SourceEntry(TypedDict, total=False):
    """
    Shape of one item in the config "sources" list.

    Example:
      {"preset": "zolo", "path": "exports/zolo_2024.csv"}
      {"name": "notes", "path": "notes.csv", "columns": [0, 3], "min_columns": 3}
    """
    preset: str
    name: str
    path: str
    kind: str
    columns: List[int]
    min_columns: int
    skip_header: bool
    sheet: int
    encoding: str


# Protocols ------------------------------------------------------------------

@runtime_checkable
class WordSink(Protocol):
    """Anything the VocabularyBuilder can feed: one call per normalized word."""

    def insert(self, word: str) -> None:
        ...

    def __len__(self) -> int:
        """Number of distinct words held."""
        ...

