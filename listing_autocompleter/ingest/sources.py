# listing_autocompleter/ingest/sources.py
"""
Source descriptions: which file, which format, which columns carry text.

Each listing export has its own layout, so a SourceSpec records the column
selection for one file. The five built-in presets describe the exports the
vocabulary is normally built from; config entries and CLI flags can point a
preset at another path or describe a new source entirely.
"""

from __future__ import annotations
import os
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

if TYPE_CHECKING:
    from listing_autocompleter.core.protocols import SourceEntry

KINDS = ("csv", "xlsx")

DEFAULT_DATA_DIR = os.path.join("data", "resources")


class UnknownSourceError(KeyError):
    """Raised when a preset name is not registered."""


@dataclass(frozen=True)
class SourceSpec:
    """
    name: label used in logs and reports
    path: file to read
    kind: "csv" or "xlsx"
    columns: indexes of text columns, None for every cell in the row
    min_columns: rows with this many cells or fewer are skipped (0 = keep all)
    skip_header: drop the first row
    sheet: worksheet index for xlsx sources
    """

    name: str
    path: str
    kind: str = "csv"
    columns: Optional[Tuple[int, ...]] = None
    min_columns: int = 0
    skip_header: bool = True
    sheet: int = 0
    encoding: str = "utf-8"

    def __post_init__(self):
        if self.kind not in KINDS:
            raise ValueError(f"unknown source kind {self.kind!r} for {self.name}")
        if self.columns is not None:
            object.__setattr__(self, "columns", tuple(int(c) for c in self.columns))

    def select(self, row: Sequence[Any]) -> List[str]:
        """Return the text fields of `row` this source reads; [] when the row is too short."""
        if self.min_columns and len(row) <= self.min_columns:
            return []
        if self.columns is None:
            cells = list(row)
        else:
            cells = [row[i] for i in self.columns if i < len(row)]
        return [c for c in cells if c]

    @classmethod
    def from_dict(cls, d: Dict[str, Any], data_dir: str = DEFAULT_DATA_DIR) -> "SourceSpec":
        """
        Build a spec from a config entry.
        {"preset": "remax", "path": "..."} starts from a preset and overrides
        fields, as does a "name" matching a preset. Other entries must carry
        name and path.
        """
        d = dict(d)
        base_name = d.pop("preset", None)
        if base_name is None and d.get("name") in PRESETS:
            base_name = d["name"]
        if base_name is not None:
            base = preset(base_name, data_dir=data_dir)
            if "columns" in d and d["columns"] is not None:
                d["columns"] = tuple(d["columns"])
            return replace(base, **d)
        if "name" not in d or "path" not in d:
            raise ValueError(f"source entry needs 'name' and 'path': {d}")
        return cls(**d)


# built-in presets -------------------------------------------------------------
# name -> (file name, spec fields)
PRESETS: Dict[str, Tuple[str, Dict[str, Any]]] = {
    # address + details
    "remax": ("remax_listings.csv", {"columns": (1, 2), "min_columns": 2}),
    # every cell
    "combined": ("combined_scraped_data.csv", {}),
    # address, location, type, listing
    "scraped": ("scraped_data.csv", {"columns": (1, 2, 3, 4), "min_columns": 4}),
    # first column of the first sheet
    "excel": ("ScrapedData.xlsx", {"kind": "xlsx", "columns": (0,), "sheet": 0}),
    # description columns, whichever of them the row has
    "zolo": ("zolo_windsor_listings.csv", {"columns": (4, 5, 6, 7, 8, 9)}),
}


def preset(name: str, path: Optional[str] = None, data_dir: str = DEFAULT_DATA_DIR) -> SourceSpec:
    """Return the built-in spec `name`, reading `path` or the default file under data_dir."""
    try:
        fname, fields = PRESETS[name]
    except KeyError:
        raise UnknownSourceError(f"unknown source preset {name!r}; known: {', '.join(PRESETS)}") from None
    return SourceSpec(name=name, path=path or os.path.join(data_dir, fname), **fields)


def default_sources(data_dir: str = DEFAULT_DATA_DIR) -> List[SourceSpec]:
    return [preset(n, data_dir=data_dir) for n in PRESETS]


def parse_source_arg(arg: str, data_dir: str = DEFAULT_DATA_DIR) -> SourceSpec:
    """Parse a CLI value of the form NAME or NAME=PATH into a preset spec."""
    name, sep, path = arg.partition("=")
    name = name.strip()
    return preset(name, path=path.strip() if sep else None, data_dir=data_dir)


def resolve_sources(
    entries: Iterable[Union[str, "SourceEntry", SourceSpec]],
    data_dir: str = DEFAULT_DATA_DIR,
) -> List[SourceSpec]:
    """Turn config/CLI source entries into specs. An empty list means every preset."""
    out: List[SourceSpec] = []
    for e in entries:
        if isinstance(e, SourceSpec):
            out.append(e)
        elif isinstance(e, str):
            out.append(parse_source_arg(e, data_dir=data_dir))
        elif isinstance(e, dict):
            out.append(SourceSpec.from_dict(e, data_dir=data_dir))
        else:
            raise TypeError(f"cannot build a source from {type(e).__name__}")
    return out or default_sources(data_dir)
