import asyncio

import httpx
import pendulum

from techflow.ingestion import RSSFetcher, parse_feed, print_feed_summary
from techflow.models import FeedCategory

from .conftest import load_bytes


def fetch_all(transport, sources, now, fetcher=None):
    fetcher = fetcher or RSSFetcher()

    async def go():
        async with httpx.AsyncClient(transport=transport) as client:
            return await fetcher.fetch_all_feeds(client, sources, now)

    return asyncio.run(go())


def test_parse_feed(example_source, now):
    items = parse_feed(load_bytes("sample_rss.xml"), example_source, now)

    assert len(items) == 3
    release, summit, orphan = items

    assert release.id == "example-https://www.example.com/k8s-130"
    assert release.title == "Kubernetes 1.30 released"
    assert release.url == "https://www.example.com/k8s-130"
    assert release.source == "Example"
    assert release.source_domain == "example.com"
    assert release.published_at == pendulum.datetime(2024, 5, 1, 10, tz="UTC")
    assert release.summary == "The new Kubernetes release is out."
    assert release.category == FeedCategory.PRODUCT_LAUNCHES
    assert "DevOps" in release.tags

    assert summit.category == FeedCategory.TECH_CONFERENCES
    assert summit.published_at == pendulum.datetime(2024, 4, 30, 8, tz="UTC")

    # Kept until merge, where url-less items are dropped
    assert orphan.url == ""
    assert orphan.published_at == now


def test_fetch_all_feeds_isolates_failures(transport, example_source, broken_source, mirror_source, now):
    results = fetch_all(transport, [broken_source, example_source, mirror_source], now)

    assert [r.source_name for r in results] == ["Broken", "Example", "Mirror"]

    broken, example, mirror = results
    assert not broken.success
    assert broken.items == []
    assert "HTTP error" in broken.error

    assert example.success
    assert example.item_count == 3
    assert mirror.success
    assert mirror.item_count == 2


def test_malformed_payload_is_a_failure(routes, transport, example_source, now):
    routes[example_source.url] = b"this is not a feed"

    [result] = fetch_all(transport, [example_source], now)

    assert not result.success
    assert result.items == []
    assert result.error.startswith("Unexpected error: Invalid RSS feed")


def test_timeout_is_a_failure(routes, transport, example_source, mirror_source, now):
    routes[example_source.url] = httpx.ConnectTimeout("timed out")

    example, mirror = fetch_all(transport, [example_source, mirror_source], now)

    assert not example.success
    assert example.error == "Request timed out"
    assert mirror.success


def test_summary_entities_are_decoded(routes, transport, example_source, now):
    routes[example_source.url] = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"><channel><title>Example</title>
  <item>
    <title>Cartoon release</title>
    <link>https://www.example.com/cartoon</link>
    <description>&lt;p&gt;Tom &amp;amp; Jerry&amp;nbsp;ship&lt;/p&gt;</description>
    <pubDate>Wed, 01 May 2024 10:00:00 GMT</pubDate>
  </item>
</channel></rss>"""

    [result] = fetch_all(transport, [example_source], now)

    assert result.success
    assert result.items[0].summary == "Tom & Jerry ship"


def test_bounded_concurrency_still_fetches_every_source(transport, example_source, broken_source, mirror_source, now):
    fetcher = RSSFetcher(max_concurrent=1)

    results = fetch_all(transport, [mirror_source, broken_source, example_source], now, fetcher=fetcher)

    assert [r.source_name for r in results] == ["Mirror", "Broken", "Example"]
    assert [r.success for r in results] == [True, False, True]
    assert len(transport.calls) == 3


def test_no_sources(transport, now):
    assert fetch_all(transport, [], now) == []


def test_print_feed_summary(transport, example_source, broken_source, now, capsys):
    results = fetch_all(transport, [example_source, broken_source], now)

    print_feed_summary(results)

    output = capsys.readouterr().out
    assert "Sources fetched: 2" in output
    assert "Broken" in output
