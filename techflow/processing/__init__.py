"""Record normalization and classification."""

from .classifier import classify, infer_category, infer_tags
from .normalizer import (
    NormalizedRecord,
    clamp_summary,
    extract_domain,
    normalize,
    resolve_published,
    strip_html,
)

__all__ = [
    "NormalizedRecord",
    "clamp_summary",
    "classify",
    "extract_domain",
    "infer_category",
    "infer_tags",
    "normalize",
    "resolve_published",
    "strip_html",
]
