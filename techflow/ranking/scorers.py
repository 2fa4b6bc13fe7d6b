"""Recency and source-weight scoring."""

from datetime import datetime
from typing import Optional

import pendulum


class RecencyScorer:
    """Score items by linear recency decay, scaled by source weight."""

    def __init__(
        self,
        decay_hours: float = 48.0,
        ceiling: float = 1.2,
        floor: float = 0.1,
        min_age_hours: float = 1.0,
    ) -> None:
        """
        Initialize recency scorer.

        Args:
            decay_hours: Hours over which the recency component drops by 1.0
            ceiling: Recency component for a brand new item
            floor: Lowest recency component, however old the item
            min_age_hours: Ages below this are treated as this many hours
        """
        self.decay_hours = decay_hours
        self.ceiling = ceiling
        self.floor = floor
        self.min_age_hours = min_age_hours

    def age_hours(self, published_at: datetime, now: Optional[datetime] = None) -> float:
        """Hours since publication, never below min_age_hours."""
        if now is None:
            now = pendulum.now("UTC")
        if published_at.tzinfo is None:
            published_at = pendulum.instance(published_at, tz="UTC")
        elapsed = (now - published_at).total_seconds() / 3600
        return max(elapsed, self.min_age_hours)

    def recency(self, published_at: datetime, now: Optional[datetime] = None) -> float:
        """Recency component before weighting."""
        hours = self.age_hours(published_at, now)
        return max(self.floor, self.ceiling - hours / self.decay_hours)

    def score(self, published_at: datetime, weight: float, now: Optional[datetime] = None) -> float:
        """Score from 0.0 to 1.0."""
        score = self.recency(published_at, now) * weight
        # Clamp to [0, 1]
        return max(0.0, min(1.0, score))


_default_scorer = RecencyScorer()


def score_item(published_at: datetime, weight: float, now: Optional[datetime] = None) -> float:
    """Score an item with the default decay parameters."""
    return _default_scorer.score(published_at, weight, now)
