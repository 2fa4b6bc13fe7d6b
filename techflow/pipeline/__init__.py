"""Pipeline orchestration, merging and caching."""

from .cache import CacheEntry, FeedCache
from .merger import merge_items
from .orchestrator import FeedPipeline, PipelineRun
from .service import FeedService, build_service

__all__ = [
    "CacheEntry",
    "FeedCache",
    "FeedPipeline",
    "FeedService",
    "PipelineRun",
    "build_service",
    "merge_items",
]
