"""Token normalization utilities for alignment."""
from __future__ import annotations

import re
import unicodedata
from typing import Optional, Tuple

# At most six digits; number_to_words stops at 9999 anyway
_INTEGER_RE = re.compile(r"-?\d{1,6}")
_CLOCK_RE = re.compile(r"(\d{1,2}):(\d{2})")


def is_punctuation(ch: str) -> bool:
    """Check if a character belongs to a Unicode punctuation category (P*).

    Covers ASCII marks as well as typographic quotes and dashes („“«»’—).
    """
    return unicodedata.category(ch).startswith("P")


def normalize(word: str) -> str:
    """Normalize a word for comparison.

    Upper-cases the word and strips every punctuation character, so trailing
    commas, sentence-final periods and differing quotation marks never cause
    a mismatch. Total and idempotent.

    Args:
        word: The token to normalize

    Returns:
        Comparison key (may be empty for a punctuation-only token)
    """
    return "".join(ch for ch in word.upper() if not is_punctuation(ch))


def strip_trailing_punctuation(token: str) -> str:
    end = len(token)
    while end > 0 and is_punctuation(token[end - 1]):
        end -= 1
    return token[:end]


def parse_integer(token: str) -> Optional[int]:
    """Parse an integer literal (optional leading minus, digits only).

    Trailing sentence punctuation is ignored: "324," parses as 324.
    Literals with more than six digits are not parsed.

    Returns:
        The integer value, or None when the token is not a short integer literal
    """
    core = strip_trailing_punctuation(token.strip())
    if not _INTEGER_RE.fullmatch(core):
        return None
    return int(core)


def parse_clock_time(token: str) -> Optional[Tuple[int, int]]:
    """Parse a clock time written as H:MM or HH:MM.

    Returns:
        (hour, minute) within a 24h day, or None
    """
    m = _CLOCK_RE.fullmatch(strip_trailing_punctuation(token.strip()))
    if not m:
        return None
    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        return None
    return hour, minute
