"""Shared pytest fixtures and configuration."""

from pathlib import Path

import pytest

from archor.models.rss import Channel, Document, Image, Item

DATA_DIR = Path(__file__).parent / "data"

MINIMAL_FEED = (
    '<rss version="2.0"><channel><title>T</title><link>http://x.com</link>'
    "<description>D</description></channel></rss>"
)


@pytest.fixture
def minimal_channel() -> Channel:
    """Channel with only the three required elements."""
    return Channel(title="T", link="http://x.com", description="D")


@pytest.fixture
def minimal_document(minimal_channel: Channel) -> Document:
    """Smallest conforming document."""
    return Document(version="2.0", channel=minimal_channel)


@pytest.fixture
def sample_image() -> Image:
    """Conforming channel image."""
    return Image(
        url="http://www.goupstate.com/images/logo.gif",
        title="GoUpstate.com",
        link="http://www.goupstate.com",
        width="144",
        height="400",
    )


@pytest.fixture
def sample_items() -> list[Item]:
    """A few conforming items."""
    return [
        Item(
            title="Star City",
            link="http://liftoff.msfc.nasa.gov/news/2003/news-starcity.asp",
            pub_date="Tue, 03 Jun 2003 09:39:21 GMT",
        ),
        Item(description="Sky watchers in Europe, Asia, and parts of Alaska and Canada"),
        Item(title="The Engine That Does More", description="Before man travels to Mars"),
    ]


@pytest.fixture
def minimal_feed_xml() -> str:
    """Smallest conforming feed as XML."""
    return MINIMAL_FEED


@pytest.fixture
def full_feed_bytes() -> bytes:
    """Feed exercising every RSS 2.0 element."""
    return (DATA_DIR / "rss-full.xml").read_bytes()


@pytest.fixture
def goupstate_feed_bytes() -> bytes:
    """Real-world feed with channel metadata only."""
    return (DATA_DIR / "rss-0.xml").read_bytes()
