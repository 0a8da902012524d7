"""RSS 2.0 document models.

The models mirror the fixed RSS 2.0 shape. They hold the decoded text as-is:
``None`` means the element or attribute was absent, ``""`` means it was
present but empty. Nothing is rejected at construction time, conformance is
decided by :mod:`archor.validation`.

See: https://www.rssboard.org/rss-specification
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from archor.constants import IMAGE_DEFAULT_HEIGHT, IMAGE_DEFAULT_WIDTH


class RSSElement(BaseModel):
    """Base for every element that can assess its own conformance."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    # XML element name, and the fields encoded as XML attributes. A field named
    # "value" holds the element text.
    xml_tag: ClassVar[str] = ""
    xml_attributes: ClassVar[tuple[str, ...]] = ()

    def is_valid(self) -> bool:
        """Whether this element and all of its required children conform to RSS 2.0."""
        from archor.validation.engine import is_valid

        return is_valid(self)


class Category(RSSElement):
    """<category> with its optional domain attribute."""

    xml_tag = "category"
    xml_attributes = ("domain",)

    value: str | None = Field(default=None, description="Category text")
    domain: str | None = Field(default=None, description="Categorization taxonomy")


class Cloud(RSSElement):
    """<cloud> sub-element of <channel>.

    All five attributes are required by RSS 2.0 but no rule is enforced yet.
    """

    xml_tag = "cloud"
    xml_attributes = ("domain", "port", "path", "register_procedure", "protocol")

    domain: str | None = Field(default=None)
    port: str | None = Field(default=None)
    path: str | None = Field(default=None)
    register_procedure: str | None = Field(default=None, alias="registerProcedure")
    protocol: str | None = Field(default=None)


class Image(RSSElement):
    """<image> sub-element of <channel>.

    In practice title and link should match the channel's, but RSS 2.0 does
    not require it.
    """

    xml_tag = "image"

    url: str | None = Field(default=None, description="URL of a GIF, JPEG or PNG")
    title: str | None = Field(default=None, description="ALT text")
    link: str | None = Field(default=None, description="Site the image links to")
    width: str | None = Field(default=None, description="Pixels, at most 144")
    height: str | None = Field(default=None, description="Pixels, at most 400")
    description: str | None = Field(default=None, description="TITLE attribute of the link")

    @property
    def effective_width(self) -> int | None:
        """Width in pixels, 88 when absent, None when not a number."""
        return _dimension(self.width, IMAGE_DEFAULT_WIDTH)

    @property
    def effective_height(self) -> int | None:
        """Height in pixels, 31 when absent, None when not a number."""
        return _dimension(self.height, IMAGE_DEFAULT_HEIGHT)


def _dimension(value: str | None, default: int) -> int | None:
    if value is None:
        return default
    text = value.strip()
    if not (text.isascii() and text.isdecimal()):
        return None
    try:
        return int(text)
    except ValueError:
        return None


class TextInput(RSSElement):
    """<textInput> sub-element of <channel>."""

    xml_tag = "textInput"

    title: str | None = Field(default=None, description="Label of the Submit button")
    description: str | None = Field(default=None, description="Explains the text input area")
    name: str | None = Field(default=None, description="Name of the text object")
    link: str | None = Field(default=None, description="CGI script processing the request")


class SkipHours(RSSElement):
    """<skipHours>: up to 24 <hour> entries, each 0-23 (GMT)."""

    xml_tag = "skipHours"

    hours: list[str] = Field(default_factory=list, alias="hour")


class SkipDays(RSSElement):
    """<skipDays>: up to 7 <day> entries, Monday through Sunday."""

    xml_tag = "skipDays"

    days: list[str] = Field(default_factory=list, alias="day")


class Source(RSSElement):
    """<source> of an item: the channel the item came from."""

    xml_tag = "source"
    xml_attributes = ("url",)

    value: str | None = Field(default=None, description="Name of the source channel")
    url: str | None = Field(default=None, description="XMLization of the source")


class Enclosure(RSSElement):
    """<enclosure> media object attached to an item."""

    xml_tag = "enclosure"
    xml_attributes = ("url", "length", "type")

    url: str | None = Field(default=None)
    length: str | None = Field(default=None, description="Size in bytes")
    type: str | None = Field(default=None, description="MIME type")


class Guid(RSSElement):
    """<guid> uniquely identifying an item."""

    xml_tag = "guid"
    xml_attributes = ("is_perma_link",)

    value: str | None = Field(default=None)
    is_perma_link: str | None = Field(default=None, alias="isPermaLink")


class Item(RSSElement):
    """<item>: all elements are optional, but title or description must be present."""

    xml_tag = "item"

    title: str | None = Field(default=None)
    link: str | None = Field(default=None)
    description: str | None = Field(default=None)
    author: str | None = Field(default=None)
    category: Category | None = Field(default=None)
    comments: str | None = Field(default=None)
    enclosure: Enclosure | None = Field(default=None)
    guid: Guid | None = Field(default=None)
    pub_date: str | None = Field(default=None, alias="pubDate")
    source: Source | None = Field(default=None)


class Channel(RSSElement):
    """<channel>: feed metadata and its items.

    Required: title, link, description. Everything else is optional.
    """

    xml_tag = "channel"

    title: str | None = Field(default=None)
    link: str | None = Field(default=None)
    description: str | None = Field(default=None)
    language: str | None = Field(default=None)
    copyright: str | None = Field(default=None)
    managing_editor: str | None = Field(default=None, alias="managingEditor")
    web_master: str | None = Field(default=None, alias="webMaster")
    pub_date: str | None = Field(default=None, alias="pubDate")
    last_build_date: str | None = Field(default=None, alias="lastBuildDate")
    category: Category | None = Field(default=None)
    generator: str | None = Field(default=None)
    docs: str | None = Field(default=None)
    cloud: Cloud | None = Field(default=None)
    ttl: str | None = Field(default=None, description="Minutes the channel can be cached")
    image: Image | None = Field(default=None)
    rating: str | None = Field(default=None, description="PICS rating")
    text_input: TextInput | None = Field(default=None, alias="textInput")
    skip_hours: SkipHours | None = Field(default=None, alias="skipHours")
    skip_days: SkipDays | None = Field(default=None, alias="skipDays")
    items: list[Item] = Field(default_factory=list, alias="item")


class Document(RSSElement):
    """<rss> root: a version attribute and a single channel."""

    xml_tag = "rss"
    xml_attributes = ("version",)

    version: str | None = Field(default=None)
    channel: Channel | None = Field(default=None)
