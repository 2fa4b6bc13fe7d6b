"""Merge per-source batches into one deduplicated, time-ordered list."""

from typing import Dict, Iterable, List

from ..models.item import FeedItem


def dedupe_key(item: FeedItem) -> str:
    """Items sharing a URL (or title, without one) are duplicates."""
    return item.url or item.title


def merge_items(batches: Iterable[Iterable[FeedItem]]) -> List[FeedItem]:
    """
    Union all batches, keeping the first occurrence of each duplicate.

    Items without a URL are dropped. The result is sorted by publication
    time, most recent first.
    """
    deduped: Dict[str, FeedItem] = {}
    for batch in batches:
        for item in batch:
            if not item.url:
                continue
            key = dedupe_key(item)
            if key not in deduped:
                deduped[key] = item

    return sorted(deduped.values(), key=lambda item: item.published_at, reverse=True)
