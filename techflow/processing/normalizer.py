"""Normalize raw feed records into canonical item fields."""

import re
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Optional
from urllib.parse import urlparse

import pendulum
from bs4 import BeautifulSoup
from pydantic import BaseModel, Field

from ..config.models import SourceDescriptor
from ..models.record import RawRecord

SUMMARY_MAX_LENGTH = 220
ELLIPSIS = "..."
UNTITLED = "Untitled"
DOMAIN_SENTINEL = "source"

_WHITESPACE_RE = re.compile(r"\s+")


class NormalizedRecord(BaseModel):
    """Canonical fields of a record, prior to classification and scoring."""

    id: str = Field(..., description="Stable item identifier")
    title: str = Field(..., description="Display title")
    url: str = Field("", description="Resolved link, empty when unresolvable")
    summary: str = Field("", description="Plain-text, clamped summary")
    domain: str = Field(DOMAIN_SENTINEL, description="Bare hostname")
    published_at: datetime = Field(..., description="Publication timestamp (UTC)")


def strip_html(value: str) -> str:
    """Remove markup, decode entities and collapse whitespace runs."""
    text = BeautifulSoup(value, "html.parser").get_text(" ")
    return _WHITESPACE_RE.sub(" ", text).strip()


def clamp_summary(value: str, max_length: int = SUMMARY_MAX_LENGTH) -> str:
    """Truncate to max_length characters, marking truncation with an ellipsis."""
    if len(value) <= max_length:
        return value
    return f"{value[:max_length].rstrip()}{ELLIPSIS}"


def extract_domain(url: str) -> str:
    """Extract bare hostname from URL, without a leading www."""
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        return DOMAIN_SENTINEL
    if not hostname:
        return DOMAIN_SENTINEL
    if hostname.startswith("www."):
        hostname = hostname[4:]
    return hostname


def make_item_id(source_id: str, native_key: str) -> str:
    """Build an identifier that is stable across runs for the same article."""
    return _WHITESPACE_RE.sub("-", f"{source_id}-{native_key}")


def _to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return pendulum.instance(value, tz="UTC")
    return pendulum.instance(value).in_timezone("UTC")


def parse_date_text(text: str) -> Optional[datetime]:
    """Parse an RFC 822 or ISO 8601 date string. Returns None when unparseable."""
    text = text.strip()
    if not text:
        return None
    try:
        return _to_utc(parsedate_to_datetime(text))
    except (TypeError, ValueError, IndexError):
        pass
    try:
        parsed = pendulum.parse(text, strict=False)
    except (TypeError, ValueError, OverflowError):
        return None
    if not isinstance(parsed, datetime):
        return None
    return _to_utc(parsed)


def resolve_published(record: RawRecord, now: datetime) -> datetime:
    """Machine date, else human date string, else now."""
    if record.iso_date is not None:
        return _to_utc(record.iso_date)
    if record.date_text:
        parsed = parse_date_text(record.date_text)
        if parsed is not None:
            return parsed
    return _to_utc(now)


def _first_non_empty(*values: Optional[str]) -> str:
    for value in values:
        if value and value.strip():
            return value
    return ""


def normalize(record: RawRecord, source: SourceDescriptor, now: datetime) -> NormalizedRecord:
    """Convert a raw record into canonical item fields."""
    title = (record.title or "").strip() or UNTITLED
    url = _first_non_empty(record.link, record.guid).strip()
    body = _first_non_empty(record.snippet, record.content, record.summary, title)
    native_key = _first_non_empty(record.guid, url, title).strip()

    return NormalizedRecord(
        id=make_item_id(source.id, native_key),
        title=title,
        url=url,
        summary=clamp_summary(strip_html(body)),
        domain=extract_domain(url or source.url),
        published_at=resolve_published(record, now),
    )
