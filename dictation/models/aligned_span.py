"""Data model for alignment spans between a transcript and a reference sentence."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Insert:
    """A target token with no source counterpart.

    Attributes:
        target_index: Position of the token in the target sequence
    """
    target_index: int


@dataclass(frozen=True)
class Remove:
    """A source token with no target counterpart.

    Attributes:
        source_index: Position of the token in the source sequence
    """
    source_index: int


@dataclass(frozen=True)
class Match:
    """A run of source tokens judged equivalent to a run of target tokens.

    Both ranges are contiguous; a plain word match has length 1 on each side,
    a merge like "Kaffee Desaster" -> "Kaffee-Desaster" has 2 source tokens
    and 1 target token.

    Attributes:
        source_range: Source indices covered by the match
        target_range: Target indices covered by the match
        kind: Label of the matcher that explained the match
            ("exact", "merge", "split", "phrase", "numeral", "clock")
    """
    source_range: range
    target_range: range
    kind: str = "exact"

    @classmethod
    def one(cls, source_index: int, target_index: int, kind: str = "exact") -> "Match":
        return cls(
            range(source_index, source_index + 1),
            range(target_index, target_index + 1),
            kind,
        )


AlignmentSpan = Union[Insert, Remove, Match]


def source_indices(span: AlignmentSpan) -> range:
    """Source positions covered by a span (empty for inserts)."""
    if isinstance(span, Match):
        return span.source_range
    if isinstance(span, Remove):
        return range(span.source_index, span.source_index + 1)
    return range(0)


def target_indices(span: AlignmentSpan) -> range:
    """Target positions covered by a span (empty for removals)."""
    if isinstance(span, Match):
        return span.target_range
    if isinstance(span, Insert):
        return range(span.target_index, span.target_index + 1)
    return range(0)
