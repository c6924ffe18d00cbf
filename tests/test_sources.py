# tests/test_sources.py
# source specs, presets and row readers

import csv
import os

import pytest

from listing_autocompleter.ingest import (
    PRESETS,
    SourceSpec,
    UnknownSourceError,
    cell_text,
    default_sources,
    iter_records,
    parse_source_arg,
    preset,
    read_csv_records,
    read_csv_rows,
    read_xlsx_rows,
    resolve_sources,
)


def test_presets_cover_the_five_exports():
    assert list(PRESETS) == ["remax", "combined", "scraped", "excel", "zolo"]
    specs = default_sources("exports")
    assert [s.name for s in specs] == list(PRESETS)
    assert specs[0].path == os.path.join("exports", "remax_listings.csv")
    assert specs[3].kind == "xlsx"


def test_select_respects_columns_and_min_columns():
    remax = preset("remax")
    assert remax.select(["1", "12 Maple St", "Bungalow", "extra"]) == ["12 Maple St", "Bungalow"]
    assert remax.select(["1", "12 Maple St"]) == []

    scraped = preset("scraped")
    assert scraped.select(["1", "a", "b", "c", "d"]) == ["a", "b", "c", "d"]
    assert scraped.select(["1", "a", "b", "c"]) == []


def test_select_partial_rows_for_optional_columns():
    zolo = preset("zolo")
    assert zolo.select(["0", "1", "2", "3", "four", "five"]) == ["four", "five"]
    assert zolo.select(["0", "1"]) == []


def test_select_all_cells_skips_empty():
    combined = preset("combined")
    assert combined.select(["a", "", "b"]) == ["a", "b"]


def test_unknown_preset():
    with pytest.raises(UnknownSourceError):
        preset("mls")
    # still a KeyError for callers that catch that
    with pytest.raises(KeyError):
        parse_source_arg("mls=foo.csv")


def test_parse_source_arg_with_path():
    spec = parse_source_arg("zolo=/tmp/z.csv")
    assert spec.name == "zolo"
    assert spec.path == "/tmp/z.csv"
    assert spec.columns == (4, 5, 6, 7, 8, 9)


def test_bad_kind_rejected():
    with pytest.raises(ValueError):
        SourceSpec(name="x", path="x.json", kind="json")


def test_from_dict_preset_override_and_custom():
    spec = SourceSpec.from_dict({"preset": "remax", "path": "r.csv", "columns": [2]})
    assert spec.name == "remax"
    assert spec.columns == (2,)
    assert spec.min_columns == 2

    named = SourceSpec.from_dict({"name": "excel", "path": "book.xlsx"}, data_dir="d")
    assert named.kind == "xlsx"
    assert named.path == "book.xlsx"

    custom = SourceSpec.from_dict({"name": "notes", "path": "n.csv", "columns": [0, 3]})
    assert custom.columns == (0, 3)
    assert custom.kind == "csv"

    with pytest.raises(ValueError):
        SourceSpec.from_dict({"name": "notes"})


def test_resolve_sources_mixed_and_default():
    specs = resolve_sources(["remax", {"preset": "combined", "path": "c.csv"}], data_dir="d")
    assert [s.name for s in specs] == ["remax", "combined"]
    assert specs[0].path == os.path.join("d", "remax_listings.csv")
    assert len(resolve_sources([], data_dir="d")) == len(PRESETS)
    with pytest.raises(TypeError):
        resolve_sources([42])


def test_cell_text():
    assert cell_text(None) == ""
    assert cell_text("Lake") == "Lake"
    assert cell_text(3.0) == "3.0"
    assert cell_text(True) == "True"


def test_read_csv_rows(make_csv):
    path = make_csv("a.csv", [["h1", "h2"], ["x", "y, z"]])
    assert list(read_csv_rows(path)) == [["h1", "h2"], ["x", "y, z"]]


@pytest.fixture
def tiny_field_limit():
    # fields over the limit make the csv module raise on that record only
    old = csv.field_size_limit(10)
    yield
    csv.field_size_limit(old)


def test_read_csv_rows_reports_bad_record_and_continues(make_csv, tiny_field_limit):
    path = make_csv("bad.csv", [["h"], ["good"], ["x" * 50], ["later"]])
    seen = []
    rows = list(read_csv_rows(path, on_error=lambda n, e: seen.append(n)))
    assert rows == [["h"], ["good"], ["later"]]
    assert seen == [3]


def test_read_csv_rows_raises_without_hook(make_csv, tiny_field_limit):
    path = make_csv("bad.csv", [["x" * 50]])
    with pytest.raises(csv.Error):
        list(read_csv_rows(path))


def test_read_xlsx_rows(make_xlsx):
    path = make_xlsx("b.xlsx", [["head"], ["Lake house", 2], [None, True]])
    rows = list(read_xlsx_rows(path))
    assert len(rows) == 3
    assert rows[0][0] == "head"
    assert rows[1] == ["Lake house", "2"]
    assert rows[2][-1] == "True"
    assert all(c == "" for c in rows[2][:-1])


def test_iter_records_dispatch(make_csv, make_xlsx):
    c = make_csv("c.csv", [["a"], ["b"]])
    x = make_xlsx("x.xlsx", [["b"]])
    assert list(iter_records(SourceSpec(name="c", path=c))) == [(0, ["a"]), (1, ["b"])]
    assert list(iter_records(SourceSpec(name="x", path=x, kind="xlsx"))) == [(0, ["b"])]


def test_csv_record_numbers_count_bad_records(make_csv, tiny_field_limit):
    path = make_csv("bad_first.csv", [["x" * 50], ["alpha"], ["omega"]])
    seen = []
    records = list(read_csv_records(path, on_error=lambda n, e: seen.append(n)))
    assert records == [(1, ["alpha"]), (2, ["omega"])]
    assert seen == [1]
