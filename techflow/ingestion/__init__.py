"""Feed ingestion: RSS sources and the trending page."""

from .models import FeedResult
from .rss_fetcher import RSSFetcher, build_item, entry_to_record, parse_feed, print_feed_summary
from .trending_scraper import TrendingScraper, parse_trending

__all__ = [
    "RSSFetcher",
    "TrendingScraper",
    "FeedResult",
    "build_item",
    "entry_to_record",
    "parse_feed",
    "parse_trending",
    "print_feed_summary",
]
