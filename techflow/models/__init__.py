"""Data models for TechFlow."""

from .item import FeedCategory, FeedItem, FeedSnapshot
from .record import RawRecord

__all__ = ["FeedCategory", "FeedItem", "FeedSnapshot", "RawRecord"]
