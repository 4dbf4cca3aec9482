"""Sentence and transcript tokenization for alignment."""
from __future__ import annotations

from typing import List


def get_words(text: str) -> List[str]:
    """Split a sentence into words on spaces, dropping empty pieces.

    Punctuation stays attached to its word; the normalizer takes care of it
    at comparison time.

    Example: "Es ist  halb sieben." -> ["Es", "ist", "halb", "sieben."]
    """
    return [w for w in text.split(" ") if w]
