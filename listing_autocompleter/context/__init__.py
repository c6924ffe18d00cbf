# listing_autocompleter/context/__init__.py
# text cleanup applied before words reach the index

from .normalizer import normalize_text, normalize_word
from .tokenizer import split_words, is_alpha_word, tokenize

__all__ = [
    "normalize_text",
    "normalize_word",
    "split_words",
    "is_alpha_word",
    "tokenize",
]
