"""Learner-facing feedback built from alignment spans."""
from .feedback import FeedbackItem, build_feedback, render_spans, summarize

__all__ = ["FeedbackItem", "build_feedback", "render_spans", "summarize"]
