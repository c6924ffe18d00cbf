# tests/conftest.py
# shared fixtures: keep log files out of the repo, small listing exports on disk

import csv

import openpyxl
import pytest

from listing_autocompleter.utils import logger_utils


@pytest.fixture(autouse=True)
def _isolated_log(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_utils, "DEFAULT_LOG_PATH", str(tmp_path / "logs" / "test.log"))
    shared = logger_utils.log
    monkeypatch.setattr(shared, "level", "INFO")
    monkeypatch.setattr(shared, "echo", False)
    yield


def write_csv(path, rows):
    with open(path, "w", newline="", encoding="utf-8") as fh:
        csv.writer(fh).writerows(rows)
    return str(path)


def write_xlsx(path, rows):
    wb = openpyxl.Workbook()
    ws = wb.active
    for r in rows:
        ws.append(r)
    wb.save(str(path))
    return str(path)


@pytest.fixture
def data_dir(tmp_path):
    """A folder holding the five preset exports with a few rows each."""
    d = tmp_path / "resources"
    d.mkdir()
    write_csv(d / "remax_listings.csv", [
        ["id", "address", "details"],
        ["1", "12 Maple Street", "Cozy bungalow, 2BR"],
        ["2", "Only two cells"],
    ])
    write_csv(d / "combined_scraped_data.csv", [
        ["a", "b"],
        ["Riverside Drive", "Mango grove"],
    ])
    write_csv(d / "scraped_data.csv", [
        ["id", "address", "location", "type", "listing"],
        ["1", "9 Oak Road", "Windsor", "Condo", "Roadway access"],
        ["2", "short", "row", "dropped"],
    ])
    write_xlsx(d / "ScrapedData.xlsx", [
        ["text", "ignored"],
        ["Lakeview townhouse", "secret"],
        [None, "nothing"],
        [1500, "numbers"],
    ])
    write_csv(d / "zolo_windsor_listings.csv", [
        ["c0", "c1", "c2", "c3", "c4", "c5", "c6", "c7", "c8", "c9"],
        ["x", "hidden", "hidden", "hidden", "Mapletree Court", "Detached", "", "", "", "garage"],
        ["x", "hidden", "hidden", "hidden", "Marina"],
    ])
    return str(d)


@pytest.fixture
def make_csv(tmp_path):
    def _make(name, rows):
        return write_csv(tmp_path / name, rows)
    return _make


@pytest.fixture
def make_xlsx(tmp_path):
    def _make(name, rows):
        return write_xlsx(tmp_path / name, rows)
    return _make
