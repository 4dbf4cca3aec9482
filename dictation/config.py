"""
dictation.config

Immutable alignment configuration: registered phrase substitutions and the
anchors of the clock-time idiom.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

Phrase = Tuple[str, ...]

# Deployment settings
LESSONS_SOURCE: str = os.getenv("DICTATION_LESSONS_SOURCE", "")
HTTP_TIMEOUT_SEC: float = float(os.getenv("DICTATION_HTTP_TIMEOUT", "10"))
LOG_LEVEL: str = os.getenv("DICTATION_LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class AlignmentConfig:
    """
    Tunables for the matcher set.

    Notes:
    - phrases: (source words, target words) pairs treated as equivalent;
      compared word by word after normalization, and the sides may differ
      in length
    - the clock idiom reads "<H>:30 <clock_word>" on the source side as
      "<half_word> <H+1>" on the target side
    - allow_split lets one source word match two target words
      ("Kaffee-Desaster" -> "Kaffee Desaster")
    """

    phrases: Tuple[Tuple[Phrase, Phrase], ...] = (
        (("Café", "Desaster"), ("Kaffee-Desaster",)),
        (("z.", "B."), ("zum", "Beispiel")),
        (("z.B",), ("zum", "Beispiel")),
    )

    # Joiners tried when gluing two adjacent words into one
    joiners: Tuple[str, ...] = ("-", "")

    clock_word: str = "Uhr"
    half_word: str = "halb"
    half_minute: int = 30

    allow_split: bool = True

    def __post_init__(self) -> None:
        for source_words, target_words in self.phrases:
            if not source_words or not target_words:
                raise ValueError(
                    f"Phrase substitution needs words on both sides: {source_words!r} -> {target_words!r}"
                )


DEFAULT_CONFIG = AlignmentConfig()
