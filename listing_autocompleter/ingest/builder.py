# listing_autocompleter/ingest/builder.py
"""
VocabularyBuilder
Feeds a PrefixIndex from the listing exports.
 - one SourceSpec per file, rows read through ingest.readers
 - text fields tokenized with context.tokenize (lower-case, alphabetic only)
 - a bad record is logged and skipped, a missing/unreadable file is logged
   and reported, neither aborts the build
 - optional threaded reading; inserts always go through one lock and
   finish before build() returns
"""

from __future__ import annotations
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

from listing_autocompleter.context import tokenize
from listing_autocompleter.core.protocols import WordSink
from listing_autocompleter.ingest.readers import iter_records
from listing_autocompleter.ingest.sources import SourceSpec
from listing_autocompleter.utils.logger_utils import Log, log as default_log
from listing_autocompleter.utils.threaded_runner import run_parallel

Tokenizer = Callable[[str], List[str]]


@dataclass
class SourceReport:
    name: str
    path: str
    rows: int = 0
    skipped: int = 0
    words: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BuildReport:
    sources: List[SourceReport] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def words(self) -> int:
        return sum(s.words for s in self.sources)

    @property
    def rows(self) -> int:
        return sum(s.rows for s in self.sources)

    @property
    def skipped(self) -> int:
        return sum(s.skipped for s in self.sources)

    @property
    def failed(self) -> List[str]:
        return [s.name for s in self.sources if not s.ok]


class VocabularyBuilder:
    """
    Public API:
      add_text(text) -> int
      add_words(words) -> int
      add_source(spec) -> SourceReport
      build(specs, parallel=False, max_workers=4) -> BuildReport
    """

    def __init__(self, index: WordSink, tokenizer: Tokenizer = tokenize, log: Optional[Log] = None):
        self.index = index
        self.tokenizer = tokenizer
        self.log = log or default_log
        self._lock = threading.Lock()

    # single inputs ---------------------------------------------------------
    def add_words(self, words: Iterable[str]) -> int:
        """Insert already-normalized words. All inserts are serialized."""
        n = 0
        with self._lock:
            for w in words:
                self.index.insert(w)
                n += 1
        return n

    def add_text(self, text: str) -> int:
        return self.add_words(self.tokenizer(text))

    # sources ---------------------------------------------------------------
    def add_source(self, spec: SourceSpec) -> SourceReport:
        """Read one source and insert its words as rows come in."""
        return self._scan(spec, self.add_words)

    def _scan(self, spec: SourceSpec, sink: Callable[[List[str]], int]) -> SourceReport:
        report = SourceReport(name=spec.name, path=spec.path)

        def on_bad_record(line_no: int, exc: Exception) -> None:
            report.skipped += 1
            self.log.warning(f"[Builder] {spec.name}: skipped record at line {line_no}: {exc}")

        with self.log.time_block(f"ingest {spec.name}"):
            try:
                for i, row in iter_records(spec, on_error=on_bad_record):
                    # i counts physical records, a malformed first record is still the header
                    if i == 0 and spec.skip_header:
                        continue
                    report.rows += 1
                    try:
                        words: List[str] = []
                        for text in spec.select(row):
                            words.extend(self.tokenizer(text))
                    except (TypeError, ValueError) as e:
                        report.skipped += 1
                        self.log.warning(f"[Builder] {spec.name}: skipped row {i}: {e}")
                        continue
                    if words:
                        report.words += sink(words)
            except MemoryError:
                raise
            except Exception as e:
                # missing file, broken zip, bad sheet XML: fail this source only
                report.error = f"{type(e).__name__}: {e}"
                self.log.error(f"[Builder] {spec.name}: could not read {spec.path}: {report.error}")

        self.log.info(
            f"[Builder] {spec.name}: rows={report.rows} skipped={report.skipped} words={report.words}"
        )
        return report

    def _collect(self, spec: SourceSpec) -> Tuple[SourceReport, List[str]]:
        """Read and tokenize without touching the index (worker side of a parallel build)."""
        buf: List[str] = []

        def keep(words: List[str]) -> int:
            buf.extend(words)
            return len(words)

        return self._scan(spec, keep), buf

    def build(self, specs: Iterable[SourceSpec], parallel: bool = False, max_workers: int = 4) -> BuildReport:
        """
        Populate the index from every source.
        With parallel=True files are read concurrently; their words are then
        inserted in source order under the builder lock.
        """
        specs = list(specs)
        report = BuildReport()
        t0 = time.perf_counter()

        if parallel and len(specs) > 1:
            collected = run_parallel([lambda s=s: self._collect(s) for s in specs], max_workers=max_workers)
            for src_report, words in collected:
                self.add_words(words)
                report.sources.append(src_report)
        else:
            for spec in specs:
                report.sources.append(self.add_source(spec))

        report.elapsed = time.perf_counter() - t0
        self.log.info(
            f"[Builder] built vocabulary: sources={len(report.sources)} words={report.words} "
            f"distinct={len(self.index)} failed={report.failed or 'none'}"
        )
        return report
