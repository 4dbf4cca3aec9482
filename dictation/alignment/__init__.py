"""Alignment utilities for matching a reference sentence to a speech transcript."""
from .aligner import align_transcript_to_sentence
from .edit_path import Alignment, align, edit_path, trim_trailing_inserts
from .normalizer import normalize
from .tokenizer import get_words

__all__ = [
    "Alignment",
    "align",
    "align_transcript_to_sentence",
    "edit_path",
    "get_words",
    "normalize",
    "trim_trailing_inserts",
]
