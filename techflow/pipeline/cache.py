"""Time-windowed cache around the pipeline."""

from datetime import datetime, timedelta
from typing import Awaitable, Callable, List, NamedTuple, Optional

from ..models.item import FeedItem, FeedSnapshot
from .orchestrator import Clock, utc_now

DEFAULT_TTL = timedelta(hours=4)


class CacheEntry(NamedTuple):
    """Most recently computed item list and when it was computed."""

    items: tuple
    computed_at: datetime


class FeedCache:
    """
    Single-slot cache with a freshness window.

    The slot starts empty. A request while the slot is fresh returns the
    stored items flagged as cached; otherwise (empty slot, expired slot, or
    a forced request) the refresh callable runs and its result replaces the
    slot wholesale. Refreshes are not serialized: when two overlap, the one
    that finishes last wins.
    """

    def __init__(
        self,
        refresh: Callable[[], Awaitable[List[FeedItem]]],
        ttl: timedelta = DEFAULT_TTL,
        clock: Clock = utc_now,
    ) -> None:
        """
        Initialize cache.

        Args:
            refresh: Coroutine function producing a fresh item list
            ttl: How long a computed list stays fresh
            clock: Callable returning the current instant
        """
        self.refresh = refresh
        self.ttl = ttl
        self.clock = clock
        self._entry: Optional[CacheEntry] = None

    @property
    def entry(self) -> Optional[CacheEntry]:
        """Current slot contents, None when empty."""
        return self._entry

    def is_fresh(self) -> bool:
        """Whether a request without force would be served from the slot."""
        if self._entry is None:
            return False
        return self.clock() - self._entry.computed_at < self.ttl

    def invalidate(self) -> None:
        """Return to the empty state."""
        self._entry = None

    async def request(self, force: bool = False) -> FeedSnapshot:
        """Serve from the slot when fresh, else recompute."""
        entry = self._entry
        if not force and entry is not None and self.clock() - entry.computed_at < self.ttl:
            return FeedSnapshot(
                items=list(entry.items),
                fetched_at=entry.computed_at,
                cached=True,
            )

        items = await self.refresh()
        entry = CacheEntry(items=tuple(items), computed_at=self.clock())
        self._entry = entry

        return FeedSnapshot(
            items=list(entry.items),
            fetched_at=entry.computed_at,
            cached=False,
        )
