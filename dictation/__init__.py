"""Dictation trainer core.

Aligns a speech-recognition transcript against a German reference sentence,
tolerating the distortions recognizers typically introduce:
- compounds merged or split ("Kaffee Desaster" / "Kaffee-Desaster")
- digits vs. spelled-out numbers ("324" / "dreihundertvierundzwanzig")
- abbreviations ("z. B." / "zum Beispiel")
- half-hour clock times ("6:30 Uhr" / "halb sieben")
"""
from .alignment import align, align_transcript_to_sentence, edit_path, get_words, normalize, trim_trailing_inserts
from .config import DEFAULT_CONFIG, AlignmentConfig
from .models import Insert, Match, Remove
from .numbers_to_words import number_to_words

__all__ = [
    "AlignmentConfig",
    "DEFAULT_CONFIG",
    "Insert",
    "Match",
    "Remove",
    "align",
    "align_transcript_to_sentence",
    "edit_path",
    "get_words",
    "normalize",
    "number_to_words",
    "trim_trailing_inserts",
]
