# listing_autocompleter/ingest/__init__.py
# reading listing exports and turning them into vocabulary

from .sources import (
    SourceSpec,
    UnknownSourceError,
    PRESETS,
    preset,
    default_sources,
    parse_source_arg,
    resolve_sources,
)
from .readers import cell_text, read_csv_records, read_csv_rows, read_xlsx_rows, iter_records
from .builder import VocabularyBuilder, SourceReport, BuildReport

__all__ = [
    "SourceSpec",
    "UnknownSourceError",
    "PRESETS",
    "preset",
    "default_sources",
    "parse_source_arg",
    "resolve_sources",
    "cell_text",
    "read_csv_rows",
    "read_xlsx_rows",
    "read_csv_records",
    "iter_records",
    "VocabularyBuilder",
    "SourceReport",
    "BuildReport",
]
