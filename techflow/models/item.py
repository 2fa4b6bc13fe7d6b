"""Feed item and snapshot models."""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FeedCategory(str, Enum):
    """Fixed set of categories an item can be filed under."""

    TECH_CONFERENCES = "Tech Conferences"
    PRODUCT_LAUNCHES = "Product Launches"
    RESEARCH_PAPERS = "Research Papers"
    TECH_JOBS = "Tech Jobs"
    INDUSTRY_NEWS = "Industry News"
    OPEN_SOURCE = "Open Source"


class FeedItem(BaseModel):
    """Normalized, classified and scored feed item."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(..., description="Stable item identifier", min_length=1)
    title: str = Field(..., description="Display title", min_length=1)
    url: str = Field("", description="Canonical article URL, empty when unresolvable")
    source: str = Field(..., description="Source display name")
    source_domain: str = Field(..., description="Bare hostname of the article")
    published_at: datetime = Field(..., description="Publication timestamp (UTC)")
    summary: str = Field("", description="Plain-text summary")
    category: FeedCategory = Field(..., description="Item category")
    tags: List[str] = Field(..., description="Topic labels", min_length=1)
    score: float = Field(..., description="Recency and weight relevance", ge=0.0, le=1.0)


class FeedSnapshot(BaseModel):
    """A merged result set as served to consumers."""

    items: List[FeedItem] = Field(default_factory=list, description="Merged feed items")
    fetched_at: datetime = Field(..., description="When the items were computed")
    cached: bool = Field(False, description="Whether the items came from the cache")
    sources: List[str] = Field(default_factory=list, description="Source display names")

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready payload with camelCase keys and epoch-millisecond fetchedAt."""
        return {
            "items": [item.model_dump(mode="json", by_alias=True) for item in self.items],
            "fetchedAt": int(self.fetched_at.timestamp() * 1000),
            "sources": list(self.sources),
            "cached": self.cached,
        }
