"""Static catalog of feed sources."""

from typing import List, Sequence

from ..models.item import FeedCategory
from .models import SourceDescriptor

TRENDING_SOURCE_NAME = "GitHub Trending"

DEFAULT_SOURCES: tuple = (
    SourceDescriptor(
        id="techcrunch",
        name="TechCrunch",
        url="https://techcrunch.com/feed/",
        category=FeedCategory.INDUSTRY_NEWS,
        weight=0.9,
    ),
    SourceDescriptor(
        id="hn",
        name="Hacker News",
        url="https://news.ycombinator.com/rss",
        category=FeedCategory.INDUSTRY_NEWS,
        weight=0.75,
    ),
    SourceDescriptor(
        id="devto",
        name="Dev.to",
        url="https://dev.to/feed",
        category=FeedCategory.OPEN_SOURCE,
        weight=0.8,
    ),
    SourceDescriptor(
        id="producthunt",
        name="Product Hunt",
        url="https://www.producthunt.com/feed",
        category=FeedCategory.PRODUCT_LAUNCHES,
        weight=0.85,
    ),
    SourceDescriptor(
        id="lwn",
        name="LWN.net",
        url="https://lwn.net/headlines/rss",
        category=FeedCategory.OPEN_SOURCE,
        weight=0.9,
    ),
    SourceDescriptor(
        id="infoq",
        name="InfoQ",
        url="https://www.infoq.com/feed/",
        category=FeedCategory.RESEARCH_PAPERS,
        weight=0.8,
    ),
    SourceDescriptor(
        id="arstechnica",
        name="Ars Technica",
        url="https://feeds.arstechnica.com/arstechnica/index",
        category=FeedCategory.INDUSTRY_NEWS,
        weight=0.85,
    ),
    SourceDescriptor(
        id="githubblog",
        name="GitHub Blog",
        url="https://github.blog/feed/",
        category=FeedCategory.OPEN_SOURCE,
        weight=0.8,
    ),
    SourceDescriptor(
        id="awsblog",
        name="AWS Blog",
        url="https://aws.amazon.com/blogs/aws/feed/",
        category=FeedCategory.INDUSTRY_NEWS,
        weight=0.8,
    ),
    SourceDescriptor(
        id="gcpblog",
        name="Google Cloud Blog",
        url="https://cloud.google.com/blog/rss/",
        category=FeedCategory.INDUSTRY_NEWS,
        weight=0.8,
    ),
    SourceDescriptor(
        id="netflixtech",
        name="Netflix TechBlog",
        url="https://netflixtechblog.com/feed",
        category=FeedCategory.OPEN_SOURCE,
        weight=0.75,
    ),
    SourceDescriptor(
        id="stackoverflow",
        name="Stack Overflow Blog",
        url="https://stackoverflow.blog/feed/",
        category=FeedCategory.INDUSTRY_NEWS,
        weight=0.7,
    ),
    SourceDescriptor(
        id="openai",
        name="OpenAI Blog",
        url="https://openai.com/blog/rss/",
        category=FeedCategory.RESEARCH_PAPERS,
        weight=0.85,
    ),
    SourceDescriptor(
        id="arxiv-ai",
        name="arXiv AI",
        url="https://export.arxiv.org/rss/cs.AI",
        category=FeedCategory.RESEARCH_PAPERS,
        weight=0.95,
    ),
    SourceDescriptor(
        id="arxiv-cl",
        name="arXiv CL",
        url="https://export.arxiv.org/rss/cs.CL",
        category=FeedCategory.RESEARCH_PAPERS,
        weight=0.95,
    ),
    SourceDescriptor(
        id="arxiv-lg",
        name="arXiv ML",
        url="https://export.arxiv.org/rss/cs.LG",
        category=FeedCategory.RESEARCH_PAPERS,
        weight=0.95,
    ),
    SourceDescriptor(
        id="weworkremotely",
        name="We Work Remotely",
        url="https://weworkremotely.com/categories/remote-programming-jobs.rss",
        category=FeedCategory.TECH_JOBS,
        weight=0.6,
    ),
)


def list_sources(sources: Sequence[SourceDescriptor] = DEFAULT_SOURCES) -> List[str]:
    """Display names of all sources, trending pseudo-source last."""
    return [source.name for source in sources] + [TRENDING_SOURCE_NAME]
