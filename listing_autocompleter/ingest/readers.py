# listing_autocompleter/ingest/readers.py
# row readers for the listing exports: csv via the csv module, xlsx via openpyxl

from __future__ import annotations
import csv
from typing import Any, Callable, Iterator, List, Optional, Tuple

import openpyxl

from listing_autocompleter.ingest.sources import SourceSpec

Row = List[str]
Record = Tuple[int, Row]
# called with (row number, exception) for a record that could not be parsed
ErrorHook = Callable[[int, Exception], None]


def cell_text(value: Any) -> str:
    """Spreadsheet cell -> text. Empty cells give ''."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def read_csv_records(path: str, encoding: str = "utf-8", on_error: Optional[ErrorHook] = None) -> Iterator[Record]:
    """
    Yield (record number, row) for a delimited text file, numbering from 0.
    A malformed record goes to `on_error` and reading carries on with the
    next line; it still uses up its record number. Without a hook the
    csv.Error propagates.
    """
    with open(path, "r", newline="", encoding=encoding, errors="replace") as fh:
        reader = csv.reader(fh)
        n = 0
        while True:
            try:
                row = next(reader)
            except StopIteration:
                return
            except csv.Error as e:
                if on_error is None:
                    raise
                on_error(reader.line_num, e)
                n += 1
                continue
            yield n, row
            n += 1


def read_csv_rows(path: str, encoding: str = "utf-8", on_error: Optional[ErrorHook] = None) -> Iterator[Row]:
    """Yield the rows of a delimited text file, see read_csv_records."""
    for _, row in read_csv_records(path, encoding=encoding, on_error=on_error):
        yield row


def read_xlsx_rows(path: str, sheet: int = 0) -> Iterator[Row]:
    """Yield the rows of worksheet `sheet` as text, using cached formula results."""
    wb = openpyxl.load_workbook(filename=path, read_only=True, data_only=True)
    try:
        ws = wb.worksheets[sheet]
        for row in ws.iter_rows(values_only=True):
            yield [cell_text(v) for v in (row or ())]
    finally:
        wb.close()


def iter_records(spec: SourceSpec, on_error: Optional[ErrorHook] = None) -> Iterator[Record]:
    """
    Dispatch on spec.kind and yield (record number, row).
    Record 0 is the first physical record of the file, so a caller can spot
    the header even when that record was malformed and never yielded.
    """
    if spec.kind == "csv":
        return read_csv_records(spec.path, encoding=spec.encoding, on_error=on_error)
    if spec.kind == "xlsx":
        return enumerate(read_xlsx_rows(spec.path, sheet=spec.sheet))
    raise ValueError(f"unsupported source kind: {spec.kind}")
