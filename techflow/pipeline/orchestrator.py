"""Pipeline orchestrator that runs one full fetch, classify, score and merge pass."""

import asyncio
from datetime import datetime
from typing import Callable, List, Optional, Sequence

import httpx
import pendulum
from pydantic import BaseModel, Field

from ..config.models import ConfigModel, SourceDescriptor
from ..config.sources import DEFAULT_SOURCES
from ..ingestion import FeedResult, RSSFetcher, TrendingScraper
from ..models.item import FeedItem
from .merger import merge_items

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current instant in UTC."""
    return pendulum.now("UTC")


class PipelineRun(BaseModel):
    """Outcome of one pipeline pass."""

    items: List[FeedItem] = Field(default_factory=list, description="Merged feed items")
    results: List[FeedResult] = Field(default_factory=list, description="Per-source outcomes")
    started_at: datetime = Field(..., description="Instant used as 'now' for the pass")


class FeedPipeline:
    """Fetch every source concurrently and merge the results."""

    def __init__(
        self,
        sources: Sequence[SourceDescriptor] = DEFAULT_SOURCES,
        config: Optional[ConfigModel] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Clock = utc_now,
    ) -> None:
        """
        Initialize pipeline.

        Args:
            sources: Feed sources, in the order results are joined
            config: Fetch, trending and cache settings
            transport: Optional httpx transport (used to stub the network)
            clock: Callable returning the current instant
        """
        self.sources = list(sources)
        self.config = config or ConfigModel()
        self.transport = transport
        self.clock = clock

        fetch = self.config.fetch
        self.rss_fetcher = RSSFetcher(
            timeout=fetch.timeout,
            max_concurrent=fetch.max_concurrent,
            user_agent=fetch.user_agent,
        )

        trending = self.config.trending
        self.trending_scraper: Optional[TrendingScraper] = None
        if trending.enabled:
            self.trending_scraper = TrendingScraper(
                url=trending.url,
                limit=trending.limit,
                weight=trending.weight,
                timeout=fetch.timeout,
                user_agent=trending.user_agent,
            )

    async def collect(self) -> PipelineRun:
        """Run one full pass. Per-source failures show up only in results."""
        now = self.clock()

        async with httpx.AsyncClient(
            transport=self.transport,
            follow_redirects=True,
        ) as client:
            feeds_task = self.rss_fetcher.fetch_all_feeds(client, self.sources, now)
            if self.trending_scraper is None:
                results = await feeds_task
            else:
                feed_results, trending_result = await asyncio.gather(
                    feeds_task,
                    self.trending_scraper.fetch(client, now),
                )
                results = feed_results + [trending_result]

        items = merge_items(result.items for result in results)

        return PipelineRun(items=items, results=results, started_at=now)

    async def fetch_items(self) -> List[FeedItem]:
        """Produce a deduplicated, scored, classified item list as of now."""
        run = await self.collect()
        return run.items
