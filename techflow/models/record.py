"""Raw upstream record model."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class RawRecord(BaseModel):
    """Upstream record as read from a feed, before normalization."""

    title: Optional[str] = Field(None, description="Native title")
    link: Optional[str] = Field(None, description="Native link")
    guid: Optional[str] = Field(None, description="Native identifier")
    snippet: Optional[str] = Field(None, description="Short description")
    content: Optional[str] = Field(None, description="Full content")
    summary: Optional[str] = Field(None, description="Alternate summary")
    iso_date: Optional[datetime] = Field(None, description="Machine-parseable publication date")
    date_text: Optional[str] = Field(None, description="Human-readable publication date")
