from techflow.models import FeedCategory, FeedItem
from techflow.pipeline import merge_items


def make_item(now, hours_ago, url, source="Example", title="Post"):
    return FeedItem(
        id=f"{source}-{url or title}",
        title=title,
        url=url,
        source=source,
        source_domain="example.com",
        published_at=now.subtract(hours=hours_ago),
        summary="",
        category=FeedCategory.INDUSTRY_NEWS,
        tags=["General"],
        score=0.5,
    )


def test_first_occurrence_wins(now):
    first = make_item(now, 3, "https://example.com/a", source="First")
    second = make_item(now, 1, "https://example.com/a", source="Second")

    merged = merge_items([[first], [second]])

    assert len(merged) == 1
    assert merged[0].source == "First"


def test_sorted_most_recent_first(now):
    t3 = make_item(now, 30, "https://example.com/3")
    t1 = make_item(now, 1, "https://example.com/1")
    t2 = make_item(now, 10, "https://example.com/2")

    merged = merge_items([[t3], [t1, t2]])

    assert [item.url for item in merged] == [
        "https://example.com/1",
        "https://example.com/2",
        "https://example.com/3",
    ]


def test_items_without_url_are_dropped(now):
    orphan = make_item(now, 1, "", title="Orphan")
    kept = make_item(now, 2, "https://example.com/kept")

    merged = merge_items([[orphan, kept]])

    assert [item.url for item in merged] == ["https://example.com/kept"]


def test_empty_batches():
    assert merge_items([]) == []
    assert merge_items([[], []]) == []
