"""German cardinal number spelling for numeral matching."""
from __future__ import annotations

from typing import Optional

MAX_SUPPORTED = 9999

# Bound form: "ein" as in "einundzwanzig", "einhundert". The standalone
# and final-position form "eins" lives in _TWO_DIGIT_WORDS.
_DIGIT_WORDS = (
    "null",
    "ein",
    "zwei",
    "drei",
    "vier",
    "fünf",
    "sechs",
    "sieben",
    "acht",
    "neun",
)

_TWO_DIGIT_WORDS = {
    1: "eins",
    10: "zehn",
    11: "elf",
    12: "zwölf",
    13: "dreizehn",
    14: "vierzehn",
    15: "fünfzehn",
    16: "sechzehn",
    17: "siebzehn",
    18: "achtzehn",
    19: "neunzehn",
    20: "zwanzig",
    30: "dreißig",
    40: "vierzig",
    50: "fünfzig",
    60: "sechzig",
    70: "siebzig",
    80: "achtzig",
    90: "neunzig",
}


def _two_digits_to_words(num: int) -> str:
    if num in _TWO_DIGIT_WORDS:
        return _TWO_DIGIT_WORDS[num]
    if num < 10:
        return _DIGIT_WORDS[num]
    tens, ones = divmod(num, 10)
    return f"{_DIGIT_WORDS[ones]}und{_TWO_DIGIT_WORDS[tens * 10]}"


def number_to_words(num: int) -> Optional[str]:
    """Spell out a non-negative integer below 10000 in German.

    Examples:
        >>> number_to_words(21)
        'einundzwanzig'
        >>> number_to_words(1234)
        'eintausendzweihundertvierunddreißig'

    Args:
        num: The number to spell out

    Returns:
        Lower-case German spelling, or None when the number is negative or
        larger than MAX_SUPPORTED
    """
    if num < 0 or num > MAX_SUPPORTED:
        return None

    two_digits = _two_digits_to_words(num % 100)
    if num < 100:
        return two_digits

    if num % 100 == 0:
        two_digits = ""
    hundreds = (num // 100) % 10
    three_digits = f"{_DIGIT_WORDS[hundreds]}hundert{two_digits}"
    if num < 1000:
        return three_digits

    if num % 1000 == 0:
        three_digits = ""
    elif hundreds == 0:
        three_digits = two_digits
    return f"{_DIGIT_WORDS[num // 1000]}tausend{three_digits}"
