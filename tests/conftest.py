import pathlib
from datetime import timedelta

import httpx
import pendulum
import pytest

from techflow.config import SourceDescriptor
from techflow.models import FeedCategory

FIXTURES = pathlib.Path(__file__).parent / "fixtures"

TRENDING_URL = "https://github.com/trending?since=daily"


def load_bytes(name: str) -> bytes:
    return (FIXTURES / name).read_bytes()


class FakeClock:
    def __init__(self, start):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def now():
    return pendulum.datetime(2024, 5, 1, 12, 0, 0, tz="UTC")


@pytest.fixture
def clock(now):
    return FakeClock(now)


@pytest.fixture
def example_source():
    return SourceDescriptor(
        id="example",
        name="Example",
        url="https://feeds.test/example.xml",
        category=FeedCategory.INDUSTRY_NEWS,
        weight=1.0,
    )


@pytest.fixture
def mirror_source():
    return SourceDescriptor(
        id="mirror",
        name="Mirror",
        url="https://feeds.test/mirror.xml",
        category=FeedCategory.OPEN_SOURCE,
        weight=0.8,
    )


@pytest.fixture
def broken_source():
    return SourceDescriptor(
        id="broken",
        name="Broken",
        url="https://feeds.test/broken.xml",
        category=FeedCategory.INDUSTRY_NEWS,
        weight=0.5,
    )


@pytest.fixture
def routes():
    """URL -> response payload, or an exception instance to raise."""
    return {
        "https://feeds.test/example.xml": load_bytes("sample_rss.xml"),
        "https://feeds.test/mirror.xml": load_bytes("mirror_rss.xml"),
        TRENDING_URL: load_bytes("trending.html"),
    }


@pytest.fixture
def transport(routes):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        calls.append(url)
        payload = routes.get(url)
        if payload is None:
            return httpx.Response(500, request=request)
        if isinstance(payload, Exception):
            raise payload
        return httpx.Response(200, content=payload, request=request)

    mock = httpx.MockTransport(handler)
    mock.calls = calls
    return mock
