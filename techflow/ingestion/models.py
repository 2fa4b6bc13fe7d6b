"""Data models for ingestion."""

from typing import Optional

from pydantic import BaseModel, Field

from ..models.item import FeedItem


class FeedResult(BaseModel):
    """Result of fetching one source. A failure contributes no items."""

    source_name: str = Field(..., description="Source name")
    source_url: str = Field(..., description="Feed or page URL")
    success: bool = Field(..., description="Whether fetch was successful")
    items: list[FeedItem] = Field(default_factory=list, description="Processed feed items")
    error: Optional[str] = Field(None, description="Error message if failed")
    item_count: int = Field(0, description="Number of items produced")
