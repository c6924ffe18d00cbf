# listing_autocompleter/context/normalizer.py
import re

_ws_re = re.compile(r"\s+")


def normalize_text(s) -> str:
    """Trim and collapse whitespace. None and empty cells give ''."""
    if not s:
        return ""
    return _ws_re.sub(" ", str(s)).strip()


def normalize_word(w: str) -> str:
    # listings mix "Windsor" and "WINDSOR", the index stores one form
    return w.lower()
