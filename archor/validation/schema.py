"""Explicit RSS 2.0 schema used by the validation engine.

Each container type lists its children in document order together with
their presence and the rule (leaf) or element type (nested) that applies.
Children with no entry are descriptive text and never affect validity.
"""

from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from archor.constants import SKIP_DAYS_MAX_ENTRIES, SKIP_HOURS_MAX_ENTRIES
from archor.models.rss import (
    Category,
    Channel,
    Cloud,
    Document,
    Enclosure,
    Guid,
    Image,
    Item,
    RSSElement,
    SkipDays,
    SkipHours,
    Source,
    TextInput,
)
from archor.validation.rules import (
    always_valid,
    is_non_empty,
    is_positive_int,
    is_valid_height,
    is_valid_hour,
    is_valid_rfc822,
    is_valid_url,
    is_valid_width,
    is_version,
)


class Presence(str, Enum):
    """How a child's absence affects its parent."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    SEQUENCE = "sequence"


class ChildSpec(BaseModel):
    """One child position of a container element."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Model field name")
    tag: str = Field(description="XML name, used in failure paths")
    presence: Presence
    rule: Callable[[str | None], bool] | None = Field(
        default=None, description="Leaf predicate for text children"
    )
    element: type[RSSElement] | None = Field(
        default=None, description="Element type for nested children"
    )
    reason: str = Field(default="", description="What the rule demands")
    max_items: int | None = Field(default=None, ge=0, description="Sequence length bound")


class ConstraintSpec(BaseModel):
    """A rule over several children of the same container."""

    model_config = ConfigDict(frozen=True)

    check: Callable[[RSSElement], bool]
    reason: str


def _text(
    name: str,
    tag: str,
    presence: Presence,
    rule: Callable[[str | None], bool],
    reason: str,
) -> ChildSpec:
    return ChildSpec(name=name, tag=tag, presence=presence, rule=rule, reason=reason)


def _element(name: str, tag: str, presence: Presence, element: type[RSSElement]) -> ChildSpec:
    return ChildSpec(name=name, tag=tag, presence=presence, element=element)


REQUIRED = Presence.REQUIRED
OPTIONAL = Presence.OPTIONAL
SEQUENCE = Presence.SEQUENCE

NON_EMPTY = "must be a non-empty string"
URL = "must be an absolute URL"
RFC822 = "must be an RFC 822 date-time"

SCHEMAS: dict[type[RSSElement], tuple[ChildSpec, ...]] = {
    Document: (
        _text("version", "@version", REQUIRED, is_version, 'must be "2.0"'),
        _element("channel", "channel", REQUIRED, Channel),
    ),
    Channel: (
        _text("title", "title", REQUIRED, is_non_empty, NON_EMPTY),
        _text("link", "link", REQUIRED, is_valid_url, URL),
        _text("description", "description", REQUIRED, is_non_empty, NON_EMPTY),
        # TODO: check ISO 639 language codes (https://www.rssboard.org/rss-language-codes)
        _text("language", "language", OPTIONAL, always_valid, ""),
        _text("pub_date", "pubDate", OPTIONAL, is_valid_rfc822, RFC822),
        _text("last_build_date", "lastBuildDate", OPTIONAL, is_valid_rfc822, RFC822),
        _element("category", "category", OPTIONAL, Category),
        _element("cloud", "cloud", OPTIONAL, Cloud),
        _text("ttl", "ttl", OPTIONAL, is_positive_int, "must be a positive integer"),
        _element("image", "image", OPTIONAL, Image),
        _element("text_input", "textInput", OPTIONAL, TextInput),
        _element("skip_hours", "skipHours", OPTIONAL, SkipHours),
        _element("skip_days", "skipDays", OPTIONAL, SkipDays),
        _element("items", "item", SEQUENCE, Item),
    ),
    Category: (_text("domain", "@domain", OPTIONAL, always_valid, ""),),
    # RSS 2.0 lists all five <cloud> attributes as required, but they are
    # deliberately not enforced: a cloud is accepted as given.
    Cloud: (),
    Image: (
        _text("url", "url", REQUIRED, is_valid_url, URL),
        _text("title", "title", REQUIRED, is_non_empty, NON_EMPTY),
        _text("link", "link", REQUIRED, is_valid_url, URL),
        _text("width", "width", OPTIONAL, is_valid_width, "must be an integer from 0 to 144"),
        _text("height", "height", OPTIONAL, is_valid_height, "must be an integer from 0 to 400"),
    ),
    TextInput: (
        _text("title", "title", REQUIRED, is_non_empty, NON_EMPTY),
        _text("description", "description", REQUIRED, is_non_empty, NON_EMPTY),
        _text("name", "name", REQUIRED, is_non_empty, NON_EMPTY),
        _text("link", "link", REQUIRED, is_non_empty, NON_EMPTY),
    ),
    SkipHours: (
        ChildSpec(
            name="hours",
            tag="hour",
            presence=SEQUENCE,
            rule=is_valid_hour,
            reason="must be an integer from 0 to 23",
            max_items=SKIP_HOURS_MAX_ENTRIES,
        ),
    ),
    SkipDays: (
        # Day names are not checked yet.
        ChildSpec(
            name="days",
            tag="day",
            presence=SEQUENCE,
            rule=always_valid,
            max_items=SKIP_DAYS_MAX_ENTRIES,
        ),
    ),
    # An item is judged only by its title-or-description constraint, none of
    # its other children affect the verdict.
    Item: (),
    Source: (_text("url", "@url", REQUIRED, is_valid_url, URL),),
    Enclosure: (
        _text("url", "@url", REQUIRED, always_valid, ""),
        _text("length", "@length", REQUIRED, always_valid, ""),
        _text("type", "@type", REQUIRED, always_valid, ""),
    ),
    Guid: (_text("is_perma_link", "@isPermaLink", OPTIONAL, always_valid, ""),),
}


def _has_title_or_description(item: RSSElement) -> bool:
    return is_non_empty(getattr(item, "title", None)) or is_non_empty(
        getattr(item, "description", None)
    )


CONSTRAINTS: dict[type[RSSElement], tuple[ConstraintSpec, ...]] = {
    Item: (
        ConstraintSpec(
            check=_has_title_or_description,
            reason="must have a non-empty title or description",
        ),
    ),
}
