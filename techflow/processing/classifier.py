"""Keyword-based category and topic tag inference."""

from typing import Dict, List, Sequence, Tuple

from ..models.item import FeedCategory

FALLBACK_TAG = "General"

# Checked in order; the first group with a hit decides the category.
CATEGORY_SIGNALS: Tuple[Tuple[FeedCategory, Tuple[str, ...]], ...] = (
    (FeedCategory.TECH_CONFERENCES, ("conference", "summit", "keynote", "meetup", "expo")),
    (FeedCategory.RESEARCH_PAPERS, ("paper", "arxiv", "research", "study")),
    (FeedCategory.TECH_JOBS, ("hiring", "job", "career", "role", "recruiting")),
    (FeedCategory.PRODUCT_LAUNCHES, ("launch", "release", "announces", "introduces", "beta")),
)

TAG_KEYWORDS: Dict[str, List[str]] = {
    "AI/ML": ["ai", "ml", "machine learning", "llm", "neural", "model", "prompt"],
    "DevOps": ["kubernetes", "docker", "devops", "ci/cd", "terraform", "k8s"],
    "Web3": ["web3", "blockchain", "crypto", "solana", "ethereum"],
    "Cloud": ["aws", "azure", "gcp", "cloud", "serverless"],
    "Security": ["security", "vulnerability", "zero-day", "cve", "breach"],
    "Data": ["database", "postgres", "mysql", "mongodb", "data"],
    "Frontend": ["react", "vue", "svelte", "css", "frontend"],
    "Backend": ["api", "node", "fastapi", "go", "rust", "backend"],
    "Mobile": ["ios", "android", "react native", "flutter"],
    "Startups": ["startup", "funding", "seed", "series", "venture"],
}


def _has_any(text: str, keywords: Sequence[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def infer_category(text: str, default: FeedCategory) -> FeedCategory:
    """Pick the category of the first signal group found in text."""
    lowered = text.lower()
    for category, signals in CATEGORY_SIGNALS:
        if _has_any(lowered, signals):
            return category
    return default


def infer_tags(text: str) -> List[str]:
    """All topics with at least one keyword in text, or the fallback tag."""
    lowered = text.lower()
    tags = [tag for tag, keywords in TAG_KEYWORDS.items() if _has_any(lowered, keywords)]
    return tags or [FALLBACK_TAG]


def classify(text: str, default: FeedCategory) -> Tuple[FeedCategory, List[str]]:
    """Infer (category, tags) for an item's title and summary text."""
    return infer_category(text, default), infer_tags(text)
