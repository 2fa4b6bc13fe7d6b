"""TechFlow - technical news feed aggregator."""

from .pipeline import FeedService, build_service

__version__ = "0.1.0"

__all__ = ["FeedService", "build_service", "__version__"]
