"""Scraper for the GitHub trending repositories page."""

import re
from datetime import datetime
from typing import List

import httpx
from bs4 import BeautifulSoup

from ..config.sources import TRENDING_SOURCE_NAME
from ..models.item import FeedCategory, FeedItem
from ..processing.classifier import classify
from ..processing.normalizer import clamp_summary
from ..ranking.scorers import score_item
from .models import FeedResult

TRENDING_URL = "https://github.com/trending?since=daily"
TRENDING_DOMAIN = "github.com"
TRENDING_ID_PREFIX = "github-trending"
DEFAULT_DESCRIPTION = "Trending repository."

_WHITESPACE_RE = re.compile(r"\s+")


def parse_trending(
    html: str,
    now: datetime,
    limit: int = 11,
    weight: float = 0.9,
) -> List[FeedItem]:
    """Build items from the leading entries of a trending page."""
    soup = BeautifulSoup(html, "html.parser")
    items = []

    for row in soup.select("article.Box-row")[:limit]:
        link = row.select_one("h2 a")
        repo = _WHITESPACE_RE.sub("", link.get_text()) if link else ""
        if not repo:
            continue

        paragraph = row.select_one("p")
        description = _WHITESPACE_RE.sub(" ", paragraph.get_text()).strip() if paragraph else ""
        category, tags = classify(f"{repo} {description}", FeedCategory.OPEN_SOURCE)

        items.append(
            FeedItem(
                id=f"{TRENDING_ID_PREFIX}-{repo}",
                title=repo.replace("/", " / ", 1),
                url=f"https://github.com/{repo}",
                source=TRENDING_SOURCE_NAME,
                source_domain=TRENDING_DOMAIN,
                published_at=now,
                summary=clamp_summary(description or DEFAULT_DESCRIPTION),
                category=category,
                tags=tags,
                score=score_item(now, weight, now),
            )
        )

    return items


class TrendingScraper:
    """Fetch the trending page as an extra pseudo-source."""

    def __init__(
        self,
        url: str = TRENDING_URL,
        limit: int = 11,
        weight: float = 0.9,
        timeout: float = 10.0,
        user_agent: str = "TechFlow/1.0",
    ) -> None:
        """Initialize trending scraper."""
        self.url = url
        self.limit = limit
        self.weight = weight
        self.timeout = timeout
        self.user_agent = user_agent

    async def fetch(self, client: httpx.AsyncClient, now: datetime) -> FeedResult:
        """Fetch and parse the trending page. Never raises."""
        try:
            response = await client.get(
                self.url,
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
            )
            response.raise_for_status()

            items = parse_trending(response.text, now, self.limit, self.weight)

            return FeedResult(
                source_name=TRENDING_SOURCE_NAME,
                source_url=self.url,
                success=True,
                items=items,
                item_count=len(items),
            )

        except httpx.TimeoutException:
            return FeedResult(
                source_name=TRENDING_SOURCE_NAME,
                source_url=self.url,
                success=False,
                error="Request timed out",
            )
        except httpx.HTTPError as e:
            return FeedResult(
                source_name=TRENDING_SOURCE_NAME,
                source_url=self.url,
                success=False,
                error=f"HTTP error: {e}",
            )
        except Exception as e:
            return FeedResult(
                source_name=TRENDING_SOURCE_NAME,
                source_url=self.url,
                success=False,
                error=f"Unexpected error: {e}",
            )
