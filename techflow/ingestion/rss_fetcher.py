"""RSS feed fetcher with concurrent processing."""

import asyncio
from datetime import datetime, timezone
from typing import Any, List, Optional, Sequence

import feedparser
import httpx
from rich.console import Console
from rich.markup import escape

from ..config.models import SourceDescriptor
from ..models.item import FeedItem
from ..models.record import RawRecord
from ..processing.classifier import classify
from ..processing.normalizer import normalize
from ..ranking.scorers import score_item
from .models import FeedResult

console = Console()


def _struct_to_datetime(value: Any) -> Optional[datetime]:
    """Convert feedparser's UTC time.struct_time to an aware datetime."""
    if not value:
        return None
    try:
        return datetime(*value[:6], tzinfo=timezone.utc)
    except (TypeError, ValueError):
        return None


def entry_to_record(entry: Any) -> RawRecord:
    """Map a feedparser entry to a source-agnostic raw record."""
    content = None
    if entry.get("content"):
        content = entry.content[0].get("value")

    return RawRecord(
        title=entry.get("title"),
        link=entry.get("link"),
        guid=entry.get("id"),
        snippet=entry.get("summary"),
        content=content,
        summary=entry.get("description"),
        iso_date=(
            _struct_to_datetime(entry.get("published_parsed"))
            or _struct_to_datetime(entry.get("updated_parsed"))
        ),
        date_text=entry.get("published") or entry.get("updated"),
    )


def build_item(record: RawRecord, source: SourceDescriptor, now: datetime) -> FeedItem:
    """Normalize, classify and score one raw record."""
    normalized = normalize(record, source, now)
    category, tags = classify(f"{normalized.title} {normalized.summary}", source.category)

    return FeedItem(
        id=normalized.id,
        title=normalized.title,
        url=normalized.url,
        source=source.name,
        source_domain=normalized.domain,
        published_at=normalized.published_at,
        summary=normalized.summary,
        category=category,
        tags=tags,
        score=score_item(normalized.published_at, source.weight, now),
    )


def parse_feed(payload: bytes, source: SourceDescriptor, now: datetime) -> List[FeedItem]:
    """Parse a feed payload into items."""
    feed = feedparser.parse(payload)

    if feed.bozo and not feed.entries:
        raise ValueError(f"Invalid RSS feed: {feed.get('bozo_exception')}")

    return [build_item(entry_to_record(entry), source, now) for entry in feed.entries]


class RSSFetcher:
    """Fetch and parse RSS feeds."""

    def __init__(
        self,
        timeout: float = 10.0,
        max_concurrent: int = 20,
        user_agent: str = "TechFlow/1.0",
    ) -> None:
        """Initialize RSS fetcher."""
        self.timeout = timeout
        self.max_concurrent = max_concurrent
        self.user_agent = user_agent

    async def fetch_feed(
        self,
        client: httpx.AsyncClient,
        source: SourceDescriptor,
        now: datetime,
    ) -> FeedResult:
        """Fetch and parse a single RSS feed. Never raises."""
        try:
            response = await client.get(
                source.url,
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
            )
            response.raise_for_status()

            items = parse_feed(response.content, source, now)

            return FeedResult(
                source_name=source.name,
                source_url=source.url,
                success=True,
                items=items,
                item_count=len(items),
            )

        except httpx.TimeoutException:
            return FeedResult(
                source_name=source.name,
                source_url=source.url,
                success=False,
                error="Request timed out",
            )
        except httpx.HTTPError as e:
            return FeedResult(
                source_name=source.name,
                source_url=source.url,
                success=False,
                error=f"HTTP error: {e}",
            )
        except Exception as e:
            return FeedResult(
                source_name=source.name,
                source_url=source.url,
                success=False,
                error=f"Unexpected error: {e}",
            )

    async def fetch_all_feeds(
        self,
        client: httpx.AsyncClient,
        sources: Sequence[SourceDescriptor],
        now: datetime,
    ) -> List[FeedResult]:
        """Fetch all RSS feeds concurrently. Results follow source order."""
        if not sources:
            return []

        # Create semaphore for concurrency control
        semaphore = asyncio.Semaphore(self.max_concurrent)

        async def fetch_with_semaphore(source: SourceDescriptor) -> FeedResult:
            async with semaphore:
                return await self.fetch_feed(client, source, now)

        tasks = [fetch_with_semaphore(source) for source in sources]
        results = await asyncio.gather(*tasks)

        return list(results)


def print_feed_summary(results: List[FeedResult]) -> None:
    """Print summary of feed fetch results."""
    total_items = sum(r.item_count for r in results)
    successful = sum(1 for r in results if r.success)
    failed = len(results) - successful

    console.print(f"\n[bold]Feed Summary:[/bold]")
    console.print(f"  Sources fetched: {len(results)}")
    console.print(f"  Successful: [green]{successful}[/green]")
    console.print(f"  Failed: [red]{failed}[/red]")
    console.print(f"  Total items: {total_items}")

    if failed > 0:
        console.print(f"\n[bold red]Failed feeds:[/bold red]")
        for result in results:
            if not result.success:
                console.print(f"  - {result.source_name}: {escape(result.error or '')}")
