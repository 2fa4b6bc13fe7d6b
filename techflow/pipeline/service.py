"""Consumer-facing entry point: cached pipeline runs and the source list."""

from datetime import timedelta
from typing import List, Optional, Sequence

import httpx

from ..config.models import ConfigModel, SourceDescriptor
from ..config.sources import DEFAULT_SOURCES, list_sources
from ..ingestion import FeedResult
from ..models.item import FeedItem, FeedSnapshot
from .cache import FeedCache
from .orchestrator import Clock, FeedPipeline, utc_now


class FeedService:
    """Serve merged feed snapshots through a freshness cache."""

    def __init__(self, pipeline: FeedPipeline, cache_ttl: timedelta, clock: Clock = utc_now) -> None:
        """Initialize service with a pipeline and a cache of the given TTL."""
        self.pipeline = pipeline
        self.cache = FeedCache(self._refresh, ttl=cache_ttl, clock=clock)
        self.last_results: List[FeedResult] = []

    async def _refresh(self) -> List[FeedItem]:
        """Run the pipeline, keeping per-source outcomes for reporting."""
        run = await self.pipeline.collect()
        self.last_results = run.results
        return run.items

    async def run(self, force: bool = False) -> FeedSnapshot:
        """Return the current snapshot; force always recomputes."""
        snapshot = await self.cache.request(force=force)
        return snapshot.model_copy(update={"sources": self.list_sources()})

    def list_sources(self) -> List[str]:
        """Display names of configured sources plus the trending page."""
        if self.pipeline.trending_scraper is None:
            return [source.name for source in self.pipeline.sources]
        return list_sources(self.pipeline.sources)


def build_service(
    config: Optional[ConfigModel] = None,
    sources: Sequence[SourceDescriptor] = DEFAULT_SOURCES,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    clock: Clock = utc_now,
) -> FeedService:
    """Wire a pipeline and cache from configuration."""
    config = config or ConfigModel()
    pipeline = FeedPipeline(sources=sources, config=config, transport=transport, clock=clock)
    return FeedService(
        pipeline,
        cache_ttl=timedelta(hours=config.cache.ttl_hours),
        clock=clock,
    )
