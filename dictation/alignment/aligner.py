"""Alignment orchestration between a spoken transcript and a reference sentence."""
from __future__ import annotations

from typing import List, Optional, Tuple

from ..config import DEFAULT_CONFIG, AlignmentConfig
from ..models.aligned_span import AlignmentSpan
from .edit_path import edit_path, trim_trailing_inserts
from .normalizer import normalize
from .tokenizer import get_words


def align_transcript_to_sentence(
    transcript: str,
    sentence: str,
    *,
    trim: bool = False,
    config: Optional[AlignmentConfig] = None,
) -> Tuple[List[str], List[str], List[AlignmentSpan]]:
    """Tokenize both texts and align the transcript onto the sentence.

    Args:
        transcript: What the speech recognizer heard
        sentence: The reference sentence
        trim: Drop trailing inserts (learner is still speaking)
        config: Matcher configuration, DEFAULT_CONFIG when omitted

    Returns:
        (transcript words, sentence words, alignment spans)
    """
    source = get_words(transcript)
    target = get_words(sentence)
    spans = edit_path(source, target, normalize, config or DEFAULT_CONFIG)
    if trim:
        spans = trim_trailing_inserts(spans)
    return source, target, spans
