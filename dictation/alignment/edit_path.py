"""Edit path alignment between a transcript and a reference sentence."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..config import DEFAULT_CONFIG, AlignmentConfig
from ..models.aligned_span import AlignmentSpan, Insert, Match, Remove
from .matchers import MATCHERS, Matcher, MatchContext, Normalizer, Proposal
from .normalizer import normalize as default_normalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Alignment:
    """Result of one alignment call.

    Attributes:
        spans: Alignment spans in increasing index order on both sequences
        cost: Total cost of the path (one per inserted or removed word)
    """
    spans: List[AlignmentSpan]
    cost: int


def _fill_tables(
    ctx: MatchContext, matchers: Sequence[Matcher]
) -> Tuple[List[List[int]], List[List[Optional[Proposal]]]]:
    n, m = len(ctx.source), len(ctx.target)
    # dp costs
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    back: List[List[Optional[Proposal]]] = [[None] * (m + 1) for _ in range(n + 1)]

    for i in range(n + 1):
        for j in range(m + 1):
            if i == 0 and j == 0:
                continue
            best_cost: Optional[int] = None
            best: Optional[Proposal] = None
            for matcher in matchers:
                proposal = matcher(ctx, i, j)
                if proposal is None:
                    continue
                total = dp[i - proposal.source_count][j - proposal.target_count] + proposal.cost
                # strict comparison: earlier matchers win ties
                if best_cost is None or total < best_cost:
                    best_cost, best = total, proposal
            if best is None:
                raise RuntimeError(f"No matcher applies at cell ({i}, {j})")
            dp[i][j] = best_cost  # type: ignore[assignment]
            back[i][j] = best
    return dp, back


def _span_for(proposal: Proposal, i: int, j: int) -> AlignmentSpan:
    if proposal.kind == "insert":
        return Insert(j - 1)
    if proposal.kind == "remove":
        return Remove(i - 1)
    return Match(
        range(i - proposal.source_count, i),
        range(j - proposal.target_count, j),
        proposal.kind,
    )


def _backtrack(back: List[List[Optional[Proposal]]]) -> List[AlignmentSpan]:
    spans: List[AlignmentSpan] = []
    i, j = len(back) - 1, len(back[0]) - 1
    while not (i == 0 and j == 0):
        proposal = back[i][j]
        if proposal is None:
            raise RuntimeError(f"No choice recorded at cell ({i}, {j})")
        spans.append(_span_for(proposal, i, j))
        i -= proposal.source_count
        j -= proposal.target_count
    spans.reverse()
    return spans


def align(
    source: Sequence[str],
    target: Sequence[str],
    normalize: Normalizer = default_normalize,
    config: AlignmentConfig = DEFAULT_CONFIG,
    matchers: Sequence[Matcher] = MATCHERS,
) -> Alignment:
    """Minimum-cost alignment of ``source`` onto ``target``.

    Levenshtein-style dynamic programming without substitutions: inserting or
    removing a word costs 1, while every equivalence the matchers recognise
    (exact words, merged/split compounds, registered phrases, numerals,
    half-hour clock times) is free.

    Args:
        source: Words the learner said (transcript)
        target: Words of the reference sentence
        normalize: Comparison key function applied before every comparison
        config: Phrase table and idiom anchors used by the matchers
        matchers: Matchers in priority order

    Returns:
        Alignment with the span path and its total cost
    """
    ctx = MatchContext.build(source, target, normalize, config)
    dp, back = _fill_tables(ctx, matchers)
    spans = _backtrack(back)
    cost = dp[len(source)][len(target)]
    logger.debug("Aligned %d source / %d target words: cost=%d spans=%d", len(source), len(target), cost, len(spans))
    return Alignment(spans=spans, cost=cost)


def edit_path(
    source: Sequence[str],
    target: Sequence[str],
    normalize: Normalizer = default_normalize,
    config: AlignmentConfig = DEFAULT_CONFIG,
) -> List[AlignmentSpan]:
    """Edit path from word list ``source`` to word list ``target``.

    Example: ["a", "c"] -> ["a", "b", "c"] gives
      [Match(0 -> 0), Insert(1), Match(1 -> 2)]
    """
    return align(source, target, normalize, config).spans


def trim_trailing_inserts(spans: Sequence[AlignmentSpan]) -> List[AlignmentSpan]:
    """Drop trailing inserts, keeping at least one span.

    Used while the learner is still speaking: the tail of the sentence has
    not been attempted yet and should not be flagged as missing.
    """
    out = list(spans)
    while len(out) > 1 and isinstance(out[-1], Insert):
        out.pop()
    return out
