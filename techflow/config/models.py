"""Configuration models."""

from pydantic import BaseModel, ConfigDict, Field

from ..models.item import FeedCategory


class FetchConfig(BaseModel):
    """Feed fetch configuration."""

    timeout: float = Field(10.0, description="Per-request timeout in seconds", gt=0.0)
    max_concurrent: int = Field(
        20,
        description=(
            "Max feeds fetched at once; keep at or above the number of sources "
            "so every feed is in flight together"
        ),
        ge=1,
        le=100,
    )
    user_agent: str = Field("TechFlow/1.0", description="User-Agent header for feed requests")


class TrendingConfig(BaseModel):
    """Trending page scraper configuration."""

    enabled: bool = Field(True, description="Whether to scrape the trending page")
    url: str = Field("https://github.com/trending?since=daily", description="Trending page URL")
    limit: int = Field(11, description="Max leading entries to keep", ge=1, le=25)
    weight: float = Field(0.9, description="Pseudo-source weight", ge=0.0, le=1.0)
    user_agent: str = Field("TechFlow/1.0", description="User-Agent header for the page request")


class CacheConfig(BaseModel):
    """Result cache configuration."""

    ttl_hours: float = Field(4.0, description="Freshness window in hours", gt=0.0)


class ConfigModel(BaseModel):
    """Main configuration model."""

    fetch: FetchConfig = Field(default_factory=FetchConfig)
    trending: TrendingConfig = Field(default_factory=TrendingConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)


class SourceDescriptor(BaseModel):
    """One configured syndication feed."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable source identifier")
    name: str = Field(..., description="Display name")
    url: str = Field(..., description="RSS/Atom feed URL")
    category: FeedCategory = Field(..., description="Default category for items")
    weight: float = Field(1.0, description="Source weight for scoring", ge=0.0, le=1.0)
