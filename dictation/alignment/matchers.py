"""Matchers proposing how the trailing words of two sequences line up.

Each matcher looks at the words ending at source position ``i`` and target
position ``j`` (1-based, so the last words are ``source[i - 1]`` and
``target[j - 1]``) and either declines (returns None) or proposes a
``Proposal``: how many words it consumes on each side and at what cost.

MATCHERS lists them in priority order. When several proposals reach the same
total cost the earliest one wins, which decides the label shown to the learner.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

from ..config import AlignmentConfig
from ..numbers_to_words import number_to_words
from .normalizer import parse_clock_time, parse_integer

Normalizer = Callable[[str], str]


class Proposal(NamedTuple):
    kind: str
    source_count: int
    target_count: int
    cost: int


@dataclass(frozen=True)
class MatchContext:
    """Inputs shared by all matchers during one alignment call."""
    source: Sequence[str]
    target: Sequence[str]
    norm_source: Tuple[str, ...]
    norm_target: Tuple[str, ...]
    normalize: Normalizer
    config: AlignmentConfig

    @classmethod
    def build(
        cls,
        source: Sequence[str],
        target: Sequence[str],
        normalize: Normalizer,
        config: AlignmentConfig,
    ) -> "MatchContext":
        return cls(
            source=source,
            target=target,
            norm_source=tuple(normalize(w) for w in source),
            norm_target=tuple(normalize(w) for w in target),
            normalize=normalize,
            config=config,
        )


Matcher = Callable[[MatchContext, int, int], Optional[Proposal]]


def exact_match(ctx: MatchContext, i: int, j: int) -> Optional[Proposal]:
    if i < 1 or j < 1:
        return None
    if ctx.norm_source[i - 1] == ctx.norm_target[j - 1]:
        return Proposal("exact", 1, 1, 0)
    return None


def _joins_to(ctx: MatchContext, first: str, second: str, expected: str) -> bool:
    return any(ctx.normalize(first + joiner + second) == expected for joiner in ctx.config.joiners)


def adjacency_merge(ctx: MatchContext, i: int, j: int) -> Optional[Proposal]:
    """Two spoken words written as one: "Kaffee Desaster" -> "Kaffee-Desaster"."""
    if i < 2 or j < 1:
        return None
    if _joins_to(ctx, ctx.source[i - 2], ctx.source[i - 1], ctx.norm_target[j - 1]):
        return Proposal("merge", 2, 1, 0)
    return None


def adjacency_split(ctx: MatchContext, i: int, j: int) -> Optional[Proposal]:
    """One spoken word written as two: "Montagmorgen" -> "Montag Morgen"."""
    if not ctx.config.allow_split or i < 1 or j < 2:
        return None
    if _joins_to(ctx, ctx.target[j - 2], ctx.target[j - 1], ctx.norm_source[i - 1]):
        return Proposal("split", 1, 2, 0)
    return None


def _ends_with(normalized: Tuple[str, ...], end: int, phrase: Sequence[str], normalize: Normalizer) -> bool:
    start = end - len(phrase)
    if start < 0:
        return False
    return all(normalized[start + k] == normalize(word) for k, word in enumerate(phrase))


def phrase_substitution(ctx: MatchContext, i: int, j: int) -> Optional[Proposal]:
    """Registered equivalences such as "z. B." -> "zum Beispiel"."""
    for source_words, target_words in ctx.config.phrases:
        if not _ends_with(ctx.norm_source, i, source_words, ctx.normalize):
            continue
        if not _ends_with(ctx.norm_target, j, target_words, ctx.normalize):
            continue
        return Proposal("phrase", len(source_words), len(target_words), 0)
    return None


def numeral_equivalence(ctx: MatchContext, i: int, j: int) -> Optional[Proposal]:
    """Digits on one side, spelled-out number on the other: "324" -> "dreihundertvierundzwanzig"."""
    if i < 1 or j < 1:
        return None
    source_num = parse_integer(ctx.source[i - 1])
    target_num = parse_integer(ctx.target[j - 1])
    if (source_num is None) == (target_num is None):
        return None
    if source_num is not None:
        words, other = number_to_words(source_num), ctx.norm_target[j - 1]
    else:
        words, other = number_to_words(target_num), ctx.norm_source[i - 1]
    if words is None:
        return None
    if ctx.normalize(words) == other:
        return Proposal("numeral", 1, 1, 0)
    return None


def _next_hours(hour: int) -> List[int]:
    hours = [hour + 1]
    if hour % 12 + 1 != hour + 1:
        hours.append(hour % 12 + 1)
    return hours


def clock_time(ctx: MatchContext, i: int, j: int) -> Optional[Proposal]:
    """Half-hour idiom: "6:30 Uhr" -> "halb sieben" (or "halb 7")."""
    if i < 2 or j < 2:
        return None
    cfg = ctx.config
    if ctx.norm_source[i - 1] != ctx.normalize(cfg.clock_word):
        return None
    if ctx.norm_target[j - 2] != ctx.normalize(cfg.half_word):
        return None
    parsed = parse_clock_time(ctx.source[i - 2])
    if parsed is None or parsed[1] != cfg.half_minute:
        return None

    hour_token = ctx.target[j - 1]
    hour_num = parse_integer(hour_token)
    for next_hour in _next_hours(parsed[0]):
        if hour_num is not None:
            if hour_num == next_hour:
                return Proposal("clock", 2, 2, 0)
            continue
        words = number_to_words(next_hour)
        if words is not None and ctx.normalize(words) == ctx.norm_target[j - 1]:
            return Proposal("clock", 2, 2, 0)
    return None


def insert(ctx: MatchContext, i: int, j: int) -> Optional[Proposal]:
    if j < 1:
        return None
    return Proposal("insert", 0, 1, 1)


def remove(ctx: MatchContext, i: int, j: int) -> Optional[Proposal]:
    if i < 1:
        return None
    return Proposal("remove", 1, 0, 1)


MATCHERS: Tuple[Matcher, ...] = (
    exact_match,
    adjacency_merge,
    adjacency_split,
    phrase_substitution,
    numeral_equivalence,
    clock_time,
    insert,
    remove,
)
