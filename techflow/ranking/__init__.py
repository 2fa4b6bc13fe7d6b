"""Item scoring."""

from .scorers import RecencyScorer, score_item

__all__ = ["RecencyScorer", "score_item"]
