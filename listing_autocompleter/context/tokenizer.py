# listing_autocompleter/context/tokenizer.py
# turns a free-text listing field into index-ready words

import re
from typing import List

from .normalizer import normalize_text, normalize_word

# ASCII semantics: accented letters act as separators, same as the old exports
_split_re = re.compile(r"\W+", re.ASCII)
_alpha_re = re.compile(r"[a-zA-Z]+")


def split_words(s: str) -> List[str]:
    """Split on runs of non-word characters. May contain '' at the edges."""
    if not s:
        return []
    return _split_re.split(s)


def is_alpha_word(t: str) -> bool:
    return bool(t) and _alpha_re.fullmatch(t) is not None


def tokenize(s: str) -> List[str]:
    """
    Return the normalized words of `s`.
    Tokens holding digits or underscores ("2br", "unit_4") are dropped whole,
    the rest is lower-cased.
    """
    text = normalize_text(s)
    return [normalize_word(t) for t in split_words(text) if is_alpha_word(t)]
