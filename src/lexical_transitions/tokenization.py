from __future__ import annotations

import string
import unicodedata
from typing import List

_ASCII_PUNCTUATION = frozenset(string.punctuation)


def _is_punctuation(char: str) -> bool:
    return char in _ASCII_PUNCTUATION or unicodedata.category(char).startswith("P")


def normalize_word(word: str) -> str:
    """Drop every punctuation character from a word and lowercase the rest."""
    return "".join(ch for ch in word if not _is_punctuation(ch)).lower()


def tokenize_words(text: str) -> List[str]:
    """Split text on whitespace into normalized tokens, skipping empty results."""
    tokens: List[str] = []
    for piece in text.split():
        token = normalize_word(piece)
        if token:
            tokens.append(token)
    return tokens
