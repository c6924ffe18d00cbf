# autocompleter.py
"""
AutoCompleter - application facade.

Purpose:
 - Own one PrefixIndex and the VocabularyBuilder that fills it
 - Build phase first (build / add_text), query phase after (suggest)
 - Simple public API for CLI/tests:
     build(sources), suggest(prefix), suggest_with_counts(prefix), stats()
"""

from __future__ import annotations
import time
from typing import Any, Dict, Iterable, List, Optional, Tuple

from listing_autocompleter.core.trie import ORDERS, PrefixIndex
from listing_autocompleter.ingest.builder import BuildReport, VocabularyBuilder
from listing_autocompleter.ingest.sources import SourceSpec
from listing_autocompleter.utils.logger_utils import Log, log as default_log
from listing_autocompleter.utils.metrics_tracker import Metrics


class AutoCompleter:
    """Application facade exposing small API
    Public API:
      - build(specs, parallel=False) -> BuildReport
      - add_text(text) -> int
      - suggest(prefix) -> List[word]
      - suggest_with_counts(prefix) -> List[(word, freq)]
      - stats() -> Dict[str, Any]
    """

    def __init__(
        self,
        index: Optional[PrefixIndex] = None,
        order: str = "alpha",
        limit: Optional[int] = None,
        log: Optional[Log] = None,
        metrics: Optional[Metrics] = None,
    ):
        self.index = index if index is not None else PrefixIndex()
        self.log = log or default_log
        self.metrics = metrics or Metrics()
        self.builder = VocabularyBuilder(self.index, log=self.log)
        self.order = "alpha"
        self.limit = None
        self.set_order(order)
        self.set_limit(limit)

    # settings ---------------------------------------------------------
    def set_order(self, order: str) -> None:
        if order not in ORDERS:
            raise ValueError(f"unknown order {order!r}, expected one of {ORDERS}")
        self.order = order

    def set_limit(self, limit: Optional[int]) -> None:
        if limit is not None and limit <= 0:
            limit = None
        self.limit = limit

    # build phase ---------------------------------------------------------
    def build(self, specs: Iterable[SourceSpec], parallel: bool = False, max_workers: int = 4) -> BuildReport:
        report = self.builder.build(specs, parallel=parallel, max_workers=max_workers)
        self.metrics.record("build_time", report.elapsed)
        return report

    def add_text(self, text: str) -> int:
        return self.builder.add_text(text)

    # query phase ---------------------------------------------------------
    def suggest_with_counts(self, prefix: str) -> List[Tuple[str, int]]:
        """(word, freq) completions of `prefix` after lower-casing and trimming it."""
        prefix = (prefix or "").strip().lower()
        t0 = time.perf_counter()
        out = self.index.words_with_prefix(prefix, order=self.order, limit=self.limit)
        self.metrics.record("suggest_time", time.perf_counter() - t0)
        self.log.debug(f"[AutoCompleter] prefix={prefix!r} matches={len(out)}")
        return out

    def suggest(self, prefix: str) -> List[str]:
        return [w for w, _ in self.suggest_with_counts(prefix)]

    # diagnostics ---------------------------------------------------------
    def stats(self) -> Dict[str, Any]:
        return {
            "words": len(self.index),
            "insertions": self.index.total,
            "nodes": self.index.node_count,
            "order": self.order,
            "limit": self.limit,
            "metrics": self.metrics.as_dict(),
        }
