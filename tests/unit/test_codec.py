"""Unit tests for XML decoding and encoding."""

import pytest

from archor.codec import decode_feed, encode_feed
from archor.exceptions import FeedDecodeError
from archor.models.rss import Channel, Document, Enclosure, Guid, Item, SkipHours, Source


class TestDecodeFeed:
    """Test decode_feed function."""

    def test_minimal_feed(self, minimal_feed_xml: str) -> None:
        """Test the three required channel elements are decoded."""
        document = decode_feed(minimal_feed_xml)
        assert document == Document(
            version="2.0",
            channel=Channel(title="T", link="http://x.com", description="D"),
        )

    def test_bytes_with_declaration(self, goupstate_feed_bytes: bytes) -> None:
        """Test UTF-8 bytes with an XML declaration."""
        document = decode_feed(goupstate_feed_bytes)
        assert document.version == "2.0"
        assert document.channel is not None
        assert document.channel.title == "GoUpstate.com News Headlines"
        assert document.channel.link == "http://www.goupstate.com"
        assert document.channel.description == (
            "The latest news from GoUpstate.com, a Spartanburg Herald-Journal Web site."
        )
        assert document.channel.items == []

    def test_absent_versus_empty(self) -> None:
        """Test absent elements decode to None and empty ones to an empty string."""
        document = decode_feed("<rss><channel><title/><link></link></channel></rss>")
        assert document.version is None
        assert document.channel is not None
        assert document.channel.title == ""
        assert document.channel.link == ""
        assert document.channel.description is None

    def test_missing_channel(self) -> None:
        """Test a document without channel still decodes."""
        assert decode_feed('<rss version="2.0"></rss>').channel is None

    def test_attributes_and_text(self) -> None:
        """Test attribute-carrying item children."""
        document = decode_feed(
            '<rss version="2.0"><channel><item>'
            '<source url="http://www.tomalak.org/links2.xml">Tomalak\'s Realm</source>'
            '<enclosure url="http://x.com/a.mp3" length="100" type="audio/mpeg"/>'
            '<guid isPermaLink="false">item-1</guid>'
            "</item></channel></rss>"
        )
        assert document.channel is not None
        item = document.channel.items[0]
        assert item.source == Source(
            value="Tomalak's Realm", url="http://www.tomalak.org/links2.xml"
        )
        assert item.enclosure == Enclosure(
            url="http://x.com/a.mp3", length="100", type="audio/mpeg"
        )
        assert item.guid == Guid(value="item-1", is_perma_link="false")
        assert item.title is None

    def test_sequences_keep_order(self) -> None:
        """Test items and hours are decoded in document order."""
        document = decode_feed(
            '<rss version="2.0"><channel>'
            "<skipHours><hour>5</hour><hour> 1 </hour></skipHours>"
            "<item><title>first</title></item><item><title>second</title></item>"
            "</channel></rss>"
        )
        assert document.channel is not None
        assert document.channel.skip_hours == SkipHours(hours=["5", "1"])
        assert [item.title for item in document.channel.items] == ["first", "second"]

    def test_full_feed(self, full_feed_bytes: bytes) -> None:
        """Test every RSS 2.0 element is picked up."""
        channel = decode_feed(full_feed_bytes).channel
        assert channel is not None
        assert channel.language == "en-us"
        assert channel.managing_editor == "editor@example.com (Neil Armstrong)"
        assert channel.category is not None
        assert channel.category.domain == "Syndic8"
        assert channel.cloud is not None
        assert channel.cloud.register_procedure == "pingMe"
        assert channel.ttl == "60"
        assert channel.image is not None
        assert channel.image.width == "88"
        assert channel.text_input is not None
        assert channel.text_input.name == "q"
        assert channel.skip_days is not None
        assert channel.skip_days.days == ["Saturday", "Sunday"]
        assert len(channel.items) == 3

    def test_namespaced_elements_are_ignored(self, full_feed_bytes: bytes) -> None:
        """Test atom:link does not shadow the channel link."""
        channel = decode_feed(full_feed_bytes).channel
        assert channel is not None
        assert channel.link == "http://liftoff.msfc.nasa.gov/"

    @pytest.mark.parametrize("data", ["<rss><channel>", "", "not xml at all"])
    def test_malformed_xml(self, data: str) -> None:
        """Test malformed XML raises FeedDecodeError."""
        with pytest.raises(FeedDecodeError):
            decode_feed(data)

    def test_wrong_root(self) -> None:
        """Test a non-RSS root element raises FeedDecodeError."""
        with pytest.raises(FeedDecodeError) as exc_info:
            decode_feed('<feed xmlns="http://www.w3.org/2005/Atom"></feed>')
        assert "expected <rss>" in str(exc_info.value)


class TestEncodeFeed:
    """Test encode_feed function."""

    def test_minimal_document(self, minimal_document: Document) -> None:
        """Test output is pretty-printed RSS."""
        xml = encode_feed(minimal_document)
        assert xml.startswith('<?xml version="1.0" encoding="utf-8"?>')
        assert '<rss version="2.0">' in xml
        assert "    <title>T</title>" in xml
        assert "<link>http://x.com</link>" in xml

    def test_absent_fields_are_omitted(self, minimal_document: Document) -> None:
        """Test None fields produce no element."""
        xml = encode_feed(minimal_document)
        assert "pubDate" not in xml
        assert "<item" not in xml

    def test_attributes(self) -> None:
        """Test attribute fields are written as attributes with RSS names."""
        item = Item(
            title="T",
            guid=Guid(value="id-1", is_perma_link="false"),
            enclosure=Enclosure(url="http://x.com/a.mp3", length="1", type="audio/mpeg"),
        )
        channel = Channel(title="T", link="http://x.com", description="D", items=[item])
        xml = encode_feed(Document(version="2.0", channel=channel))
        assert '<guid isPermaLink="false">id-1</guid>' in xml
        assert 'url="http://x.com/a.mp3"' in xml

    def test_decode_encoded_full_feed(self, full_feed_bytes: bytes) -> None:
        """Test decoding the encoded form gives the same document."""
        document = decode_feed(full_feed_bytes)
        assert decode_feed(encode_feed(document)) == document
