# config_manager.py - JSON config manager

import copy
import json
import os

from listing_autocompleter.core.trie import ORDERS
from listing_autocompleter.utils.logger_utils import LEVELS, log

DEFAULTS = {
    "data_dir": os.path.join("data", "resources"),
    "sources": [],           # empty -> every built-in preset under data_dir
    "order": "alpha",        # alpha | frequency
    "max_suggestions": 0,    # 0 -> unlimited
    "parallel_ingest": False,
    "log_level": "INFO",
}


def check_value(key, val):
    """Return `val` in its stored form, or raise ValueError if `key` cannot hold it."""
    if key == "order":
        if val not in ORDERS:
            raise ValueError(f"order must be one of {', '.join(ORDERS)}, got {val!r}")
        return val
    if key == "log_level":
        if not isinstance(val, str) or val.upper() not in LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LEVELS)}, got {val!r}")
        return val.upper()
    if key == "max_suggestions":
        if isinstance(val, bool):
            raise ValueError(f"max_suggestions must be a whole number, got {val!r}")
        try:
            n = int(val)
        except (TypeError, ValueError):
            raise ValueError(f"max_suggestions must be a whole number, got {val!r}") from None
        if n < 0:
            raise ValueError(f"max_suggestions must be 0 or more, got {n}")
        return n
    if key == "data_dir" and not isinstance(val, str):
        raise ValueError(f"data_dir must be a path string, got {val!r}")
    if key == "sources" and not isinstance(val, list):
        raise ValueError(f"sources must be a list, got {val!r}")
    if key == "parallel_ingest" and not isinstance(val, bool):
        raise ValueError(f"parallel_ingest must be true or false, got {val!r}")
    return val


class Config:
    def __init__(self, path="config.json", create=True):
        self.path = path
        self.data = copy.deepcopy(DEFAULTS)
        self._load(create)

    def _load(self, create):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                log.error(f"[Config] could not read {self.path}, using defaults: {e}")
                return
            if not isinstance(loaded, dict):
                log.error(f"[Config] {self.path} is not a JSON object, using defaults")
                return
            self.data.update(loaded)
            self._validate()
        elif create:
            self.save()

    def _validate(self):
        # a bad value falls back to its default, the rest of the file still applies
        for key, default in DEFAULTS.items():
            try:
                self.data[key] = check_value(key, self.data[key])
            except ValueError as e:
                log.error(f"[Config] {self.path}: {e}; using {default!r}")
                self.data[key] = copy.deepcopy(default)

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    @property
    def limit(self):
        """max_suggestions as a limit for the index; None when unlimited."""
        n = self.data.get("max_suggestions") or 0
        return n if n > 0 else None

    def set(self, key, val):
        if key not in DEFAULTS:
            raise KeyError(f"no such option: {key}")
        kind = type(DEFAULTS[key])
        if kind is bool and isinstance(val, str):
            val = val.strip().lower() in ("1", "true", "yes", "on")
        elif kind is list and isinstance(val, str):
            val = [v.strip() for v in val.split(",") if v.strip()]
        elif kind is bool:
            val = bool(val)
        self.data[key] = check_value(key, val)
        self.save()
