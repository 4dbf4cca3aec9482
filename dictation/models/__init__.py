"""Data models shared by the alignment engine and its consumers."""
from .aligned_span import AlignmentSpan, Insert, Match, Remove, source_indices, target_indices

__all__ = ["AlignmentSpan", "Insert", "Match", "Remove", "source_indices", "target_indices"]
