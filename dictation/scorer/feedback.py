"""Word-level feedback for the dictation trainer."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Sequence

from ..alignment.aligner import align_transcript_to_sentence
from ..config import AlignmentConfig
from ..models.aligned_span import AlignmentSpan, Insert, Match, Remove

STATUS_ADDED = "added"
STATUS_REMOVED = "removed"
STATUS_CORRECT = "correct"


@dataclass(frozen=True)
class FeedbackItem:
    """One rendered unit of feedback.

    Attributes:
        status: "added" (sentence word not said), "removed" (said but not in
            the sentence) or "correct"
        text: Word(s) to display
        kind: Matcher label for correct items, None otherwise
    """
    status: str
    text: str
    kind: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def render_spans(
    spans: Sequence[AlignmentSpan], source: Sequence[str], target: Sequence[str]
) -> List[FeedbackItem]:
    """Map alignment spans to display items.

    A match shows the sentence's words, so "Kaffee Desaster" spoken against
    "Kaffee-Desaster" displays the sentence spelling.
    """
    out: List[FeedbackItem] = []
    for span in spans:
        if isinstance(span, Insert):
            out.append(FeedbackItem(STATUS_ADDED, target[span.target_index]))
        elif isinstance(span, Remove):
            out.append(FeedbackItem(STATUS_REMOVED, source[span.source_index]))
        elif isinstance(span, Match):
            text = " ".join(target[k] for k in span.target_range)
            out.append(FeedbackItem(STATUS_CORRECT, text, span.kind))
    return out


def build_feedback(
    transcript: str,
    sentence: str,
    listening: bool = False,
    config: Optional[AlignmentConfig] = None,
) -> List[FeedbackItem]:
    """Compare a transcript against the reference sentence.

    Args:
        transcript: Current speech recognition transcript
        sentence: Reference sentence shown to the learner
        listening: Whether capture is still running; trailing unattempted
            sentence words are then not reported
        config: Matcher configuration

    Returns:
        Feedback items in sentence order, empty when nothing was said yet
    """
    if transcript == "":
        return []
    source, target, spans = align_transcript_to_sentence(
        transcript, sentence, trim=listening, config=config
    )
    return render_spans(spans, source, target)


def summarize(items: Sequence[FeedbackItem]) -> Dict[str, Any]:
    """Counts per status plus accuracy (correct / (correct + added + removed))."""
    counts = {STATUS_CORRECT: 0, STATUS_ADDED: 0, STATUS_REMOVED: 0}
    for item in items:
        counts[item.status] += 1
    total = sum(counts.values())
    accuracy = (counts[STATUS_CORRECT] / total * 100.0) if total else 0.0
    return {
        "correct": counts[STATUS_CORRECT],
        "added": counts[STATUS_ADDED],
        "removed": counts[STATUS_REMOVED],
        "accuracy": round(accuracy, 1),
    }
